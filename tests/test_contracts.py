from datetime import date
from uuid import UUID, uuid4

from property_api.services.contracts import ContractService


async def test_create_forces_active_and_embeds_parties(contract, tenant, room):
    assert contract["status"] == "active"
    assert contract["tenant"]["name"] == tenant["name"]
    assert contract["room"]["name"] == room["name"]
    assert contract["terms"] == ["No smoking"]
    assert contract["terminationReason"] is None


async def test_create_with_unknown_tenant_is_404(client, room):
    missing = str(uuid4())
    resp = await client.post(
        "/contracts",
        json={
            "tenantId": missing,
            "roomId": room["id"],
            "startDate": "2026-01-01",
            "endDate": "2026-06-30",
            "deposit": 0,
            "monthlyRent": 100,
            "terms": ["x"],
        },
    )
    assert resp.status_code == 404
    assert resp.json()["error"]["message"] == f'Tenant with ID "{missing}" not found'


async def test_create_requires_end_after_start(client, tenant, room):
    resp = await client.post(
        "/contracts",
        json={
            "tenantId": tenant["id"],
            "roomId": room["id"],
            "startDate": "2026-06-30",
            "endDate": "2026-01-01",
            "deposit": 0,
            "monthlyRent": 100,
            "terms": ["x"],
        },
    )
    assert resp.status_code == 400
    assert resp.json()["error"]["type"] == "business_rule_violation"


async def test_create_requires_terms(client, tenant, room):
    resp = await client.post(
        "/contracts",
        json={
            "tenantId": tenant["id"],
            "roomId": room["id"],
            "startDate": "2026-01-01",
            "endDate": "2026-06-30",
            "deposit": 0,
            "monthlyRent": 100,
            "terms": [],
        },
    )
    assert resp.status_code == 400


async def test_renew_extends_and_optionally_changes_rent(client, contract):
    resp = await client.post(f"/contracts/{contract['id']}/renew", json={"newEndDate": "2027-12-31"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["endDate"] == "2027-12-31"
    assert body["monthlyRent"] == contract["monthlyRent"]
    assert body["status"] == "active"

    resp = await client.post(
        f"/contracts/{contract['id']}/renew",
        json={"newEndDate": "2028-12-31", "newMonthlyRent": 0},
    )
    assert resp.json()["monthlyRent"] == 0


async def test_renew_must_move_end_date_forward(client, contract):
    resp = await client.post(f"/contracts/{contract['id']}/renew", json={"newEndDate": "2026-06-30"})
    assert resp.status_code == 400


async def test_terminate_then_renew_is_rejected(client, contract):
    resp = await client.post(
        f"/contracts/{contract['id']}/terminate",
        json={"reason": "Chuyển đi", "terminationDate": "2026-05-15"},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "terminated"
    assert body["terminationReason"] == "Chuyển đi"
    assert body["terminationDate"] == "2026-05-15"

    renew = await client.post(f"/contracts/{contract['id']}/renew", json={"newEndDate": "2027-12-31"})
    assert renew.status_code == 400
    assert renew.json()["error"]["details"] == {"status": "terminated"}

    again = await client.post(
        f"/contracts/{contract['id']}/terminate",
        json={"reason": "x", "terminationDate": "2026-05-16"},
    )
    assert again.status_code == 400


async def test_renew_unknown_contract_is_404(client):
    resp = await client.post(f"/contracts/{uuid4()}/renew", json={"newEndDate": "2027-12-31"})
    assert resp.status_code == 404


async def test_update_validates_period_against_stored_dates(client, contract):
    resp = await client.patch(f"/contracts/{contract['id']}", json={"endDate": "2025-12-01"})
    assert resp.status_code == 400

    resp = await client.patch(f"/contracts/{contract['id']}", json={"deposit": 100})
    assert resp.status_code == 200
    assert resp.json()["deposit"] == 100


async def test_list_search_by_tenant_or_room_name(client, contract):
    by_tenant = (await client.get("/contracts", params={"search": "văn an"})).json()
    assert [c["id"] for c in by_tenant["data"]] == [contract["id"]]

    by_room = (await client.get("/contracts", params={"search": "P101"})).json()
    assert len(by_room["data"]) == 1

    none = (await client.get("/contracts", params={"search": "zzz"})).json()
    assert none["data"] == []

    by_status = (await client.get("/contracts", params={"status": "expired"})).json()
    assert by_status["data"] == []


async def test_sweep_expires_only_overdue_active_contracts(session, contract):
    service = ContractService(session)

    assert await service.check_expired_contracts(today=date(2026, 12, 31)) == 0
    assert await service.check_expired_contracts(today=date(2027, 1, 1)) == 1
    # idempotent
    assert await service.check_expired_contracts(today=date(2027, 1, 1)) == 0

    reloaded = await service.get_contract(UUID(contract["id"]))
    assert reloaded.status == "expired"


async def test_sweep_endpoint(client, contract):
    resp = await client.post("/contracts/check-expired")
    assert resp.status_code == 200
    expected = 1 if date.today() > date(2026, 12, 31) else 0
    assert resp.json() == {"expired": expected}


async def test_delete_contract(client, contract):
    resp = await client.delete(f"/contracts/{contract['id']}")
    assert resp.json() == {"message": "Contract deleted successfully"}


async def test_expired_contract_cannot_be_renewed_or_terminated(client, session, contract):
    assert await ContractService(session).check_expired_contracts(today=date(2027, 1, 1)) == 1

    renew = await client.post(f"/contracts/{contract['id']}/renew", json={"newEndDate": "2028-12-31"})
    assert renew.status_code == 400
    assert renew.json()["error"]["details"] == {"status": "expired"}

    terminate = await client.post(
        f"/contracts/{contract['id']}/terminate",
        json={"reason": "Chuyển đi", "terminationDate": "2027-01-02"},
    )
    assert terminate.status_code == 400
    assert terminate.json()["error"]["details"] == {"status": "expired"}

    reloaded = (await client.get(f"/contracts/{contract['id']}")).json()
    assert reloaded["status"] == "expired"
    assert reloaded["endDate"] == "2026-12-31"


async def test_post_updates_like_patch(client, contract):
    resp = await client.post(f"/contracts/{contract['id']}", json={"deposit": 200})
    assert resp.status_code == 200
    body = resp.json()
    assert body["deposit"] == 200
    assert body["monthlyRent"] == 3500000
