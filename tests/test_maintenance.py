async def _open(client, **overrides):
    payload = {
        "equipmentId": "ELV-01",
        "equipmentName": "Thang máy A",
        "maintenanceType": "preventive",
        "description": "Kiểm tra định kỳ",
        "startDate": "2026-04-01",
        "priority": "medium",
        "assignedTo": "Kỹ thuật viên Minh",
    }
    payload.update(overrides)
    resp = await client.post("/maintenance", json=payload)
    assert resp.status_code == 201, resp.text
    return resp.json()


async def test_new_ticket_is_pending(client):
    ticket = await _open(client)
    assert ticket["status"] == "pending"
    assert ticket["notes"] is None


async def test_status_change_with_notes(client):
    ticket = await _open(client)
    resp = await client.patch(
        f"/maintenance/{ticket['id']}/status",
        json={"status": "completed", "notes": "Đã thay cáp"},
    )
    assert resp.status_code == 200
    assert resp.json()["status"] == "completed"
    assert resp.json()["notes"] == "Đã thay cáp"


async def test_filters_and_search(client):
    await _open(client)
    await _open(client, equipmentId="PUMP-2", equipmentName="Bơm nước", priority="high", maintenanceType="corrective")

    high = (await client.get("/maintenance", params={"priority": "high"})).json()
    assert [t["equipmentId"] for t in high["data"]] == ["PUMP-2"]

    corrective = (await client.get("/maintenance", params={"type": "corrective"})).json()
    assert len(corrective["data"]) == 1

    searched = (await client.get("/maintenance", params={"search": "elv"})).json()
    assert [t["equipmentId"] for t in searched["data"]] == ["ELV-01"]


async def test_invalid_priority_is_400(client):
    resp = await client.post(
        "/maintenance",
        json={
            "equipmentId": "X",
            "equipmentName": "X",
            "maintenanceType": "preventive",
            "description": "X",
            "startDate": "2026-04-01",
            "priority": "urgent",
            "assignedTo": "X",
        },
    )
    assert resp.status_code == 400


async def test_update_and_delete(client):
    ticket = await _open(client)
    resp = await client.patch(f"/maintenance/{ticket['id']}", json={"assignedTo": "Lan"})
    assert resp.json()["assignedTo"] == "Lan"
    resp = await client.delete(f"/maintenance/{ticket['id']}")
    assert resp.json() == {"message": "Maintenance deleted successfully"}
