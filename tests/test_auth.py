import pytest

from property_api.core.security import create_refresh_token


@pytest.fixture
async def user(client):
    resp = await client.post(
        "/users",
        json={
            "name": "Quản lý",
            "email": "admin@sunrise.vn",
            "phone": "0900000000",
            "role": "admin",
            "password": "s3cret-pass",
        },
    )
    assert resp.status_code == 201
    return resp.json()


async def _login(client, username="admin@sunrise.vn", password="s3cret-pass"):
    return await client.post("/auth/login", data={"username": username, "password": password})


async def test_login_and_me(client, user):
    resp = await _login(client)
    assert resp.status_code == 200
    tokens = resp.json()
    assert tokens["token_type"] == "bearer"

    me = await client.get("/auth/me", headers={"Authorization": f"Bearer {tokens['access_token']}"})
    assert me.status_code == 200
    assert me.json()["id"] == user["id"]
    assert me.json()["email"] == "admin@sunrise.vn"


async def test_wrong_password_is_401(client, user):
    resp = await _login(client, password="nope")
    assert resp.status_code == 401
    assert resp.json()["error"]["type"] == "http_error"


async def test_inactive_user_cannot_login(client, user):
    await client.patch(f"/users/{user['id']}/status", json={"status": "inactive"})
    resp = await _login(client)
    assert resp.status_code == 400


async def test_me_without_token_is_401(client):
    resp = await client.get("/auth/me")
    assert resp.status_code == 401


async def test_refresh_issues_new_pair(client, user):
    tokens = (await _login(client)).json()
    resp = await client.post("/auth/refresh", json={"refreshToken": tokens["refresh_token"]})
    assert resp.status_code == 200
    assert resp.json()["access_token"]


async def test_access_token_is_not_a_refresh_token(client, user):
    tokens = (await _login(client)).json()
    resp = await client.post("/auth/refresh", json={"refreshToken": tokens["access_token"]})
    assert resp.status_code == 401

    me = await client.get("/auth/me", headers={"Authorization": f"Bearer {tokens['refresh_token']}"})
    assert me.status_code == 401


async def test_refresh_for_deleted_user_is_401(client, user):
    token = create_refresh_token(subject=user["id"])
    await client.delete(f"/users/{user['id']}")
    resp = await client.post("/auth/refresh", json={"refreshToken": token})
    assert resp.status_code == 401


async def test_health(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Healthy"}
