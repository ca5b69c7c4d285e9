from uuid import uuid4


async def _post(client, **overrides):
    payload = {"type": "rent", "amount": 3500000, "category": "Tiền thuê phòng", "date": "2026-03-05"}
    payload.update(overrides)
    resp = await client.post("/transactions", json=payload)
    assert resp.status_code == 201, resp.text
    return resp.json()


async def test_create_with_references(client, room, tenant):
    tx = await _post(client, roomId=room["id"], tenantId=tenant["id"], description="Tháng 3")
    assert tx["type"] == "rent"
    assert tx["room"]["id"] == room["id"]
    assert tx["tenant"]["email"] == tenant["email"]
    assert tx["date"] == "2026-03-05"


async def test_create_rejects_non_positive_amount(client):
    resp = await client.post(
        "/transactions",
        json={"type": "expense", "amount": 0, "category": "Điện", "date": "2026-03-05"},
    )
    assert resp.status_code == 400


async def test_create_with_unknown_tenant_is_404(client):
    resp = await client.post(
        "/transactions",
        json={"type": "income", "amount": 1, "category": "Khác", "date": "2026-03-05", "tenantId": str(uuid4())},
    )
    assert resp.status_code == 404


async def test_list_filters_by_type_and_date_range(client):
    await _post(client, date="2026-01-10")
    await _post(client, type="expense", amount=200000, category="Điện", date="2026-02-10")
    await _post(client, date="2026-03-10")

    expenses = (await client.get("/transactions", params={"type": "expense"})).json()
    assert [t["category"] for t in expenses["data"]] == ["Điện"]

    ranged = (await client.get("/transactions", params={"startDate": "2026-02-01", "endDate": "2026-03-10"})).json()
    assert [t["date"] for t in ranged["data"]] == ["2026-03-10", "2026-02-10"]


async def test_summary_groups_income_and_expense_types(client):
    await _post(client, type="rent", amount=3000000, date="2026-03-01")
    await _post(client, type="deposit", amount=1000000, date="2026-03-02")
    await _post(client, type="income", amount=500000, category="Khác", date="2026-03-03")
    await _post(client, type="expense", amount=400000, category="Điện", date="2026-03-04")
    await _post(client, type="refund", amount=100000, category="Tiền cọc", date="2026-03-05")
    await _post(client, type="rent", amount=9999999, date="2026-04-01")

    resp = await client.get("/transactions/summary", params={"startDate": "2026-03-01", "endDate": "2026-03-31"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["totalIncome"] == 4500000
    assert body["totalExpense"] == 500000
    assert body["balance"] == 4000000
    assert body["startDate"] == "2026-03-01"


async def test_summary_of_empty_ledger_is_zero(client):
    body = (await client.get("/transactions/summary")).json()
    assert body["totalIncome"] == 0
    assert body["totalExpense"] == 0
    assert body["balance"] == 0


async def test_deleting_room_keeps_transaction(client, room):
    tx = await _post(client, roomId=room["id"])
    await client.delete(f"/rooms/{room['id']}")
    reloaded = (await client.get(f"/transactions/{tx['id']}")).json()
    assert reloaded["roomId"] is None


async def test_update_and_delete(client):
    tx = await _post(client)
    resp = await client.patch(f"/transactions/{tx['id']}", json={"amount": 10, "description": "sửa"})
    assert resp.json()["amount"] == 10
    assert resp.json()["category"] == tx["category"]

    resp = await client.delete(f"/transactions/{tx['id']}")
    assert resp.json() == {"message": "Transaction deleted successfully"}
    assert (await client.get(f"/transactions/{tx['id']}")).status_code == 404
