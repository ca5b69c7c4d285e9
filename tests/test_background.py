from datetime import date, timedelta

from sqlalchemy import func, select

from property_api.db.models.rooms import RoomType
from property_api.db.models.security import User
from property_api.db.seed import seed_all
from property_api.services import contract_expiry
from property_api.services.contract_expiry import ContractExpiryScheduler, run_expiry_sweep


async def test_run_expiry_sweep_uses_its_own_session(client, session_maker, tenant, room, monkeypatch):
    yesterday = date.today() - timedelta(days=1)
    resp = await client.post(
        "/contracts",
        json={
            "tenantId": tenant["id"],
            "roomId": room["id"],
            "startDate": (yesterday - timedelta(days=30)).isoformat(),
            "endDate": yesterday.isoformat(),
            "deposit": 0,
            "monthlyRent": 100,
            "terms": ["x"],
        },
    )
    assert resp.status_code == 201
    monkeypatch.setattr(contract_expiry, "get_session_maker", lambda: session_maker)

    assert await run_expiry_sweep() == 1
    reloaded = (await client.get(f"/contracts/{resp.json()['id']}")).json()
    assert reloaded["status"] == "expired"


async def test_scheduler_start_and_shutdown():
    scheduler = ContractExpiryScheduler(interval_minutes=5)
    scheduler.start()
    try:
        job = scheduler.scheduler.get_job(contract_expiry.JOB_ID)
        assert job is not None
    finally:
        scheduler.shutdown()
    assert scheduler.scheduler is None


async def test_seed_is_idempotent(session, monkeypatch):
    monkeypatch.setenv("ADMIN_EMAIL", "root@sunrise.vn")
    monkeypatch.setenv("ADMIN_PASSWORD", "seeded-pass")

    await seed_all(session)
    await seed_all(session)

    room_types = (await session.execute(select(func.count(RoomType.id)))).scalar_one()
    users = (await session.execute(select(func.count(User.id)))).scalar_one()
    assert room_types == 4
    assert users == 1
