# tests/test_users_api.py
import pytest

from app.services.security import create_token

PASSWORD = "TestPassword123"


@pytest.mark.asyncio
async def test_register_and_login(client):
    resp = await client.post("/users/register", json={
        "name": "Test User", "email": "test@example.com", "password": PASSWORD,
    })
    assert resp.status_code == 201
    token = resp.json()["access_token"]

    # token opens protected routes
    resp = await client.get("/monuments/", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 200

    dup = await client.post("/users/register", json={
        "name": "Again", "email": "test@example.com", "password": PASSWORD,
    })
    assert dup.status_code == 400

    ok = await client.post("/users/login", json={"email": "test@example.com", "password": PASSWORD})
    assert ok.status_code == 200
    assert ok.json()["token_type"] == "bearer"

    bad = await client.post("/users/login", json={"email": "test@example.com", "password": "wrong"})
    assert bad.status_code == 401


@pytest.mark.asyncio
async def test_token_for_deleted_user_is_rejected(client, member):
    token = create_token(str(member.id))
    await member.delete()
    resp = await client.get("/monuments/", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401


@pytest.mark.asyncio
async def test_registered_users_are_not_admin(client):
    resp = await client.post("/users/register", json={
        "name": "Visitor", "email": "visitor@example.com", "password": PASSWORD,
    })
    token = resp.json()["access_token"]
    verify = await client.put(
        "/monuments/verify/00000000-0000-0000-0000-000000000000",
        headers={"Authorization": f"Bearer {token}"},
    )
    assert verify.status_code == 403
