import pytest
from httpx import AsyncClient
from sqlmodel import select

from authgate.domain.entities import User, UserLevel, UserSession

API = "/api/v1"

MASKED = {"error": {"code": "NOT_FOUND", "message": "Resource Not Found"}}


async def promote(db_session, username: str):
    user = (await db_session.exec(select(User).where(User.username == username))).one()
    user.level = UserLevel.privileged
    db_session.add(user)
    await db_session.commit()
    return user.id


@pytest.mark.asyncio
async def test_me_with_access_cookie(client: AsyncClient):
    await client.post(f"{API}/sign-up", json={
        "username": "alice", "password": "pw123", "first_name": "Alice"
    })

    response = await client.get(f"{API}/me")

    assert response.status_code == 200
    data = response.json()
    assert data["username"] == "alice"
    assert data["first_name"] == "Alice"
    assert data["level"] == 0


@pytest.mark.asyncio
async def test_me_without_cookie_looks_like_missing_route(client: AsyncClient):
    protected = await client.get(f"{API}/me")
    missing = await client.get(f"{API}/does-not-exist")

    assert protected.status_code == missing.status_code == 404
    assert protected.json() == missing.json() == MASKED


@pytest.mark.asyncio
async def test_me_with_tampered_token(second_client: AsyncClient):
    response = await second_client.get(f"{API}/me", headers={"Cookie": "access=abc.def.ghi"})

    assert response.status_code == 404
    assert response.json() == MASKED


@pytest.mark.asyncio
async def test_privileged_route_rejects_standard_user(client: AsyncClient):
    signup = await client.post(f"{API}/sign-up", json={"username": "alice", "password": "pw123"})
    user_id = signup.json()["user"]["id"]

    response = await client.delete(f"{API}/sessions/{user_id}")

    assert response.status_code == 404
    assert response.json() == MASKED


@pytest.mark.asyncio
async def test_privileged_user_force_signs_out_another(
    client: AsyncClient, second_client: AsyncClient, db_session
):
    await client.post(f"{API}/sign-up", json={"username": "admin", "password": "pw123"})
    admin_id = await promote(db_session, "admin")
    # Claims are rebuilt from the stored user on refresh
    refreshed = await client.post(f"{API}/refresh")
    assert refreshed.json()["user"]["level"] == 1

    bob = await second_client.post(f"{API}/sign-up", json={"username": "bob", "password": "pw456"})
    bob_id = bob.json()["user"]["id"]

    response = await client.delete(f"{API}/sessions/{bob_id}")

    assert response.status_code == 200
    assert response.json() == {"user_id": bob_id, "revoked": True}
    remaining = (await db_session.exec(select(UserSession))).all()
    assert [s.user_id for s in remaining] == [admin_id]

    revoked = await second_client.post(f"{API}/refresh")
    assert revoked.status_code == 401

    again = await client.delete(f"{API}/sessions/{bob_id}")
    assert again.json()["revoked"] is False


@pytest.mark.asyncio
async def test_privileged_user_cannot_use_standard_route(client: AsyncClient, db_session):
    await client.post(f"{API}/sign-up", json={"username": "admin", "password": "pw123"})
    await promote(db_session, "admin")
    await client.post(f"{API}/refresh")

    response = await client.get(f"{API}/me")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_health_is_public(client: AsyncClient):
    response = await client.get(f"{API}/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_wrong_method_on_protected_route_is_masked(client: AsyncClient):
    wrong_on_me = await client.post(f"{API}/me")
    wrong_on_sessions = await client.get(
        f"{API}/sessions/00000000-0000-0000-0000-000000000000"
    )

    assert wrong_on_me.status_code == wrong_on_sessions.status_code == 404
    assert wrong_on_me.json() == wrong_on_sessions.json() == MASKED
    assert "allow" not in wrong_on_me.headers
