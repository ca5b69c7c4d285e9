from uuid import uuid4


async def test_new_tenant_is_active_with_room(client, tenant, room):
    assert tenant["status"] == "active"
    assert tenant["roomId"] == room["id"]
    assert tenant["room"]["name"] == "P101"


async def test_create_tenant_with_unknown_room_is_404(client):
    resp = await client.post(
        "/tenants",
        json={"name": "Trần Bình", "email": "binh@sunrise.vn", "phone": "0912345678", "roomId": str(uuid4())},
    )
    assert resp.status_code == 404


async def test_create_tenant_rejects_bad_phone(client):
    resp = await client.post(
        "/tenants",
        json={"name": "Trần Bình", "email": "binh@sunrise.vn", "phone": "abc"},
    )
    assert resp.status_code == 400
    assert resp.json()["error"]["type"] == "validation_error"


async def test_update_can_clear_room(client, tenant):
    resp = await client.patch(f"/tenants/{tenant['id']}", json={"roomId": None, "address": "Quận 1"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["roomId"] is None
    assert body["address"] == "Quận 1"
    assert body["name"] == tenant["name"]


async def test_status_and_filters(client, tenant):
    resp = await client.patch(f"/tenants/{tenant['id']}/status", json={"status": "inactive"})
    assert resp.json()["status"] == "inactive"

    active = (await client.get("/tenants", params={"status": "active"})).json()
    assert active["data"] == []
    inactive = (await client.get("/tenants", params={"status": "inactive"})).json()
    assert [t["id"] for t in inactive["data"]] == [tenant["id"]]

    by_email = (await client.get("/tenants", params={"search": "AN@SUNRISE"})).json()
    assert len(by_email["data"]) == 1


async def test_delete_tenant(client, tenant):
    resp = await client.delete(f"/tenants/{tenant['id']}")
    assert resp.json() == {"message": "Tenant deleted successfully"}
    assert (await client.get(f"/tenants/{tenant['id']}")).status_code == 404


async def test_tenant_with_contract_cannot_be_deleted(client, tenant, contract):
    resp = await client.delete(f"/tenants/{tenant['id']}")
    assert resp.status_code == 400
