from __future__ import annotations

import os

# Must be set before the app module is imported.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["API_PREFIX"] = ""
os.environ["RUN_MIGRATIONS_ON_STARTUP"] = "false"
os.environ["AUTO_SEED"] = "false"
os.environ["CONTRACT_EXPIRY_SWEEP_ENABLED"] = "false"
os.environ["JWT_SECRET_KEY"] = "test-secret"
os.environ.pop("ADMIN_PASSWORD", None)

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy import event  # noqa: E402
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine  # noqa: E402

from property_api.api.main import app  # noqa: E402
from property_api.db.base import Base  # noqa: E402
from property_api.db.session import get_async_session  # noqa: E402


@pytest.fixture
async def engine(tmp_path):
    # a file database gives every session its own connection, so concurrent
    # requests conflict the way they do against Postgres
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, _record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return async_sessionmaker(bind=engine, expire_on_commit=False, autoflush=False)


@pytest.fixture
async def session(session_maker):
    async with session_maker() as s:
        yield s


@pytest.fixture
async def client(session_maker):
    async def _override_session():
        async with session_maker() as s:
            yield s

    app.dependency_overrides[get_async_session] = _override_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def room_type(client):
    resp = await client.post("/settings/room-types", json={"name": "Studio", "description": "Khép kín"})
    assert resp.status_code == 201
    return resp.json()


@pytest.fixture
async def room(client, room_type):
    resp = await client.post(
        "/rooms",
        json={"name": "P101", "roomTypeId": room_type["id"], "price": 3500000, "floor": 1, "area": 25},
    )
    assert resp.status_code == 201
    return resp.json()


@pytest.fixture
async def tenant(client, room):
    resp = await client.post(
        "/tenants",
        json={
            "name": "Nguyễn Văn An",
            "email": "an@sunrise.vn",
            "phone": "0901234567",
            "roomId": room["id"],
        },
    )
    assert resp.status_code == 201
    return resp.json()


@pytest.fixture
async def contract(client, tenant, room):
    resp = await client.post(
        "/contracts",
        json={
            "tenantId": tenant["id"],
            "roomId": room["id"],
            "startDate": "2026-01-01",
            "endDate": "2026-12-31",
            "deposit": 3500000,
            "monthlyRent": 3500000,
            "terms": ["No smoking"],
        },
    )
    assert resp.status_code == 201
    return resp.json()
