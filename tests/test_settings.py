import asyncio

from sqlalchemy import func, select

from property_api.db.models.settings import BuildingSettings
from property_api.repositories.settings import SettingsRepository


async def test_settings_created_with_defaults(client):
    resp = await client.get("/settings")
    assert resp.status_code == 200
    body = resp.json()
    assert body["language"] == "vi"
    assert body["currency"] == "VND"
    assert body["timezone"] == "Asia/Ho_Chi_Minh"
    assert body["dateFormat"] == "DD/MM/YYYY"
    assert body["notifications"] is True
    assert "Tiền thuê phòng" in body["incomeCategories"]

    again = (await client.get("/settings")).json()
    assert again["id"] == body["id"]


async def test_update_building(client):
    resp = await client.put(
        "/settings/building",
        json={
            "buildingName": "Tòa nhà Sunrise",
            "buildingAddress": "12 Lê Lợi",
            "buildingPhone": "02812345678",
            "buildingEmail": "office@sunrise.vn",
        },
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["buildingName"] == "Tòa nhà Sunrise"
    assert body["currency"] == "VND"


async def test_update_building_rejects_bad_email(client):
    resp = await client.put(
        "/settings/building",
        json={
            "buildingName": "X",
            "buildingAddress": "Y",
            "buildingPhone": "1",
            "buildingEmail": "not-an-email",
        },
    )
    assert resp.status_code == 400


async def test_update_preferences(client):
    resp = await client.put(
        "/settings/preferences",
        json={
            "language": "en",
            "notifications": False,
            "emailNotifications": False,
            "currency": "USD",
            "timezone": "UTC",
            "dateFormat": "YYYY-MM-DD",
        },
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["language"] == "en"
    assert body["notifications"] is False
    assert body["dateFormat"] == "YYYY-MM-DD"


async def test_update_categories_drops_blanks_and_repeats(client):
    resp = await client.put(
        "/settings/categories",
        json={"income": ["Rent", " Rent ", "", "Parking"], "expense": ["Power"]},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["incomeCategories"] == ["Rent", "Parking"]
    assert body["expenseCategories"] == ["Power"]


async def test_room_type_crud(client):
    created = await client.post("/settings/room-types", json={"name": "Duplex"})
    assert created.status_code == 201
    rt = created.json()

    listed = (await client.get("/settings/room-types", params={"search": "dup"})).json()
    assert [r["name"] for r in listed] == ["Duplex"]

    updated = await client.patch(f"/settings/room-types/{rt['id']}", json={"description": "Hai tầng"})
    assert updated.json()["description"] == "Hai tầng"
    assert updated.json()["name"] == "Duplex"

    deleted = await client.delete(f"/settings/room-types/{rt['id']}")
    assert deleted.json() == {"message": "RoomType deleted successfully"}


async def test_room_type_in_use_cannot_be_deleted(client, room_type, room):
    resp = await client.delete(f"/settings/room-types/{room_type['id']}")
    assert resp.status_code == 400
    assert resp.json()["error"]["details"] == {"rooms": 1}


async def test_concurrent_first_reads_create_one_settings_row(client, session):
    first, second = await asyncio.gather(client.get("/settings"), client.get("/settings"))
    assert first.status_code == 200
    assert second.status_code == 200
    assert first.json()["id"] == second.json()["id"]

    rows = (await session.execute(select(func.count(BuildingSettings.id)))).scalar_one()
    assert rows == 1


async def test_create_singleton_returns_row_inserted_by_another_session(session_maker):
    async with session_maker() as winner:
        created = await SettingsRepository(winner).create_singleton()

    async with session_maker() as loser:
        again = await SettingsRepository(loser).create_singleton()
        assert again.id == created.id
        assert again.currency == "VND"
