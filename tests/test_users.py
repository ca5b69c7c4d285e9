import asyncio

from property_api.repositories.security import UserRepository


async def _create(client, **overrides):
    payload = {
        "name": "Lê Thị Hoa",
        "email": "hoa@sunrise.vn",
        "phone": "0987654321",
        "role": "manager",
        "password": "secret123",
    }
    payload.update(overrides)
    return await client.post("/users", json=payload)


async def test_create_user_never_exposes_password(client):
    resp = await _create(client)
    assert resp.status_code == 201
    body = resp.json()
    assert body["status"] == "active"
    assert body["role"] == "manager"
    assert "password" not in body
    assert "hashedPassword" not in body


async def test_duplicate_email_is_400_case_insensitive(client):
    assert (await _create(client)).status_code == 201
    resp = await _create(client, email="HOA@sunrise.vn")
    assert resp.status_code == 400
    assert resp.json()["error"]["type"] == "duplicate"


async def test_update_email_to_taken_address_is_rejected(client):
    await _create(client)
    other = (await _create(client, email="minh@sunrise.vn")).json()
    resp = await client.patch(f"/users/{other['id']}", json={"email": "hoa@sunrise.vn"})
    assert resp.status_code == 400

    # keeping one's own email is fine
    resp = await client.patch(f"/users/{other['id']}", json={"email": "minh@sunrise.vn", "name": "Minh"})
    assert resp.status_code == 200
    assert resp.json()["name"] == "Minh"


async def test_short_password_is_400(client):
    resp = await _create(client, password="123")
    assert resp.status_code == 400


async def test_list_filter_and_status(client):
    hoa = (await _create(client)).json()
    await _create(client, email="nam@sunrise.vn", name="Phạm Nam", role="staff")

    staff = (await client.get("/users", params={"role": "staff"})).json()
    assert [u["name"] for u in staff["data"]] == ["Phạm Nam"]

    resp = await client.patch(f"/users/{hoa['id']}/status", json={"status": "inactive"})
    assert resp.json()["status"] == "inactive"

    inactive = (await client.get("/users", params={"status": "inactive"})).json()
    assert [u["id"] for u in inactive["data"]] == [hoa["id"]]


async def test_delete_user(client):
    user = (await _create(client)).json()
    resp = await client.delete(f"/users/{user['id']}")
    assert resp.json() == {"message": "User deleted successfully"}
    assert (await client.get(f"/users/{user['id']}")).status_code == 404


async def test_concurrent_creates_with_same_email_yield_one_user(client):
    first, second = await asyncio.gather(_create(client), _create(client))
    assert sorted([first.status_code, second.status_code]) == [201, 400]
    rejected = first if first.status_code == 400 else second
    assert rejected.json()["error"]["type"] == "duplicate"

    listed = (await client.get("/users")).json()
    assert len(listed["data"]) == 1


async def test_unique_email_constraint_maps_to_duplicate(client, monkeypatch):
    async def _never_taken(self, email, *, exclude_id=None):
        return False

    monkeypatch.setattr(UserRepository, "email_taken", _never_taken)

    assert (await _create(client)).status_code == 201
    resp = await _create(client)
    assert resp.status_code == 400
    assert resp.json()["error"]["type"] == "duplicate"
    assert resp.json()["error"]["details"] == {"email": "hoa@sunrise.vn"}

    other = (await _create(client, email="minh@sunrise.vn")).json()
    resp = await client.patch(f"/users/{other['id']}", json={"email": "hoa@sunrise.vn"})
    assert resp.status_code == 400
    assert resp.json()["error"]["type"] == "duplicate"


async def test_put_updates_like_patch(client):
    user = (await _create(client)).json()
    resp = await client.put(f"/users/{user['id']}", json={"name": "Hoa Lê"})
    assert resp.status_code == 200
    assert resp.json()["name"] == "Hoa Lê"
    assert resp.json()["email"] == "hoa@sunrise.vn"
