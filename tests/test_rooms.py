from uuid import uuid4


async def test_create_room_returns_camel_case_with_room_type(client, room_type):
    resp = await client.post(
        "/rooms",
        json={
            "name": "P201",
            "roomTypeId": room_type["id"],
            "price": 4000000,
            "amenities": ["wifi", "điều hòa"],
        },
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["name"] == "P201"
    assert body["status"] == "vacant"
    assert body["roomTypeId"] == room_type["id"]
    assert body["roomType"]["name"] == "Studio"
    assert body["amenities"] == ["wifi", "điều hòa"]
    assert body["images"] == []
    assert "createdAt" in body and "updatedAt" in body


async def test_create_room_with_unknown_room_type_is_404(client):
    missing = str(uuid4())
    resp = await client.post("/rooms", json={"name": "P1", "roomTypeId": missing, "price": 1})
    assert resp.status_code == 404
    body = resp.json()
    assert body["error"]["type"] == "not_found"
    assert body["error"]["message"] == f'RoomType with ID "{missing}" not found'


async def test_missing_required_field_is_400(client):
    resp = await client.post("/rooms", json={"price": 100})
    assert resp.status_code == 400
    body = resp.json()
    assert body["status"] == 400
    assert body["error"]["type"] == "validation_error"
    assert body["path"] == "/rooms"
    assert body["method"] == "POST"


async def test_get_unknown_room_is_404(client):
    resp = await client.get(f"/rooms/{uuid4()}")
    assert resp.status_code == 404


async def test_list_rooms_paginates_and_filters(client, room_type):
    for i in range(3):
        await client.post("/rooms", json={"name": f"A{i}", "roomTypeId": room_type["id"], "price": 100})
    await client.post(
        "/rooms",
        json={"name": "B1", "roomTypeId": room_type["id"], "price": 100, "status": "occupied"},
    )

    first = await client.get("/rooms", params={"page": 1, "limit": 2})
    assert first.status_code == 200
    body = first.json()
    assert [r["name"] for r in body["data"]] == ["A0", "A1"]
    assert body["meta"] == {"page": 1, "limit": 2, "hasMore": True}

    last = (await client.get("/rooms", params={"page": 2, "limit": 2})).json()
    assert [r["name"] for r in last["data"]] == ["A2", "B1"]
    assert last["meta"]["hasMore"] is False

    occupied = (await client.get("/rooms", params={"status": "occupied"})).json()
    assert [r["name"] for r in occupied["data"]] == ["B1"]

    searched = (await client.get("/rooms", params={"search": "b1"})).json()
    assert len(searched["data"]) == 1


async def test_list_rooms_rejects_out_of_range_limit(client):
    resp = await client.get("/rooms", params={"limit": 0})
    assert resp.status_code == 400
    resp = await client.get("/rooms", params={"limit": 101})
    assert resp.status_code == 400


async def test_partial_update_keeps_other_fields(client, room):
    resp = await client.patch(f"/rooms/{room['id']}", json={"price": 5000000})
    assert resp.status_code == 200
    body = resp.json()
    assert body["price"] == 5000000
    assert body["name"] == room["name"]
    assert body["floor"] == 1


async def test_update_status(client, room):
    resp = await client.patch(f"/rooms/{room['id']}/status", json={"status": "maintenance"})
    assert resp.status_code == 200
    assert resp.json()["status"] == "maintenance"

    resp = await client.patch(f"/rooms/{room['id']}/status", json={"status": "broken"})
    assert resp.status_code == 400


async def test_delete_room_clears_tenant_reference(client, room, tenant):
    resp = await client.delete(f"/rooms/{room['id']}")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Room deleted successfully"}

    assert (await client.get(f"/rooms/{room['id']}")).status_code == 404
    reloaded = (await client.get(f"/tenants/{tenant['id']}")).json()
    assert reloaded["roomId"] is None


async def test_delete_room_with_contract_is_rejected(client, room, contract):
    resp = await client.delete(f"/rooms/{room['id']}")
    assert resp.status_code == 400
    assert resp.json()["error"]["type"] == "business_rule_violation"


async def test_correlation_id_is_echoed(client):
    resp = await client.get("/rooms", headers={"X-Correlation-ID": "abc-123"})
    assert resp.headers["X-Correlation-ID"] == "abc-123"

    err = await client.get(f"/rooms/{uuid4()}", headers={"X-Request-ID": "req-9"})
    assert err.json()["correlationId"] == "req-9"


async def test_search_treats_wildcards_literally(client, room_type):
    for name in ("Giảm 50%", "Giảm 500", "P_01", "P101"):
        resp = await client.post("/rooms", json={"name": name, "roomTypeId": room_type["id"], "price": 100})
        assert resp.status_code == 201

    percent = (await client.get("/rooms", params={"search": "50%"})).json()
    assert [r["name"] for r in percent["data"]] == ["Giảm 50%"]

    underscore = (await client.get("/rooms", params={"search": "P_"})).json()
    assert [r["name"] for r in underscore["data"]] == ["P_01"]

    backslash = (await client.get("/rooms", params={"search": "\\"})).json()
    assert backslash["data"] == []
