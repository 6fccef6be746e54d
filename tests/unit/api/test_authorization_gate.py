from datetime import timedelta
from uuid import uuid4

import pytest
import pytest_asyncio
from fastapi import Depends, FastAPI, Request
from httpx import ASGITransport, AsyncClient

from authgate.api.app import handle_client_error
from authgate.api.error import ClientError
from authgate.api.utils.authorization import authorize
from authgate.app.services.token_codec import generate_token
from authgate.domain.entities import TokenType, User, UserLevel


def make_user(level: UserLevel = UserLevel.standard) -> User:
    return User(id=uuid4(), username="alice", password_hash="h", level=level)


def cookie_header(**cookies) -> dict:
    return {"Cookie": "; ".join(f"{name}={value}" for name, value in cookies.items())}


def expired_access(user: User) -> str:
    return generate_token(TokenType.access, user, expires_delta=timedelta(seconds=-5))


@pytest_asyncio.fixture
async def client():
    refreshed = []

    async def reissue(request: Request, refresh_claims: dict):
        refreshed.append(refresh_claims["id"])
        return refresh_claims

    app = FastAPI()
    app.add_exception_handler(ClientError, handle_client_error)

    @app.get("/standard")
    async def standard(request: Request, identity: dict = Depends(authorize(UserLevel.standard))):
        return {"username": identity["username"], "state": request.state.identity["id"]}

    @app.get("/privileged")
    async def privileged(identity: dict = Depends(authorize(UserLevel.privileged))):
        return {"username": identity["username"]}

    @app.get("/with-refresh-hook")
    async def with_hook(
        identity: dict = Depends(authorize(UserLevel.standard, on_expired_access=reissue))
    ):
        return {"username": identity["username"]}

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        ac.refreshed = refreshed
        yield ac


def assert_masked(response):
    assert response.status_code == 404
    assert response.json() == {"error": {"code": "NOT_FOUND", "message": "Resource Not Found"}}


@pytest.mark.asyncio
async def test_valid_access_token_passes_and_sets_request_state(client):
    user = make_user()
    response = await client.get(
        "/standard", headers=cookie_header(access=generate_token(TokenType.access, user))
    )

    assert response.status_code == 200
    assert response.json() == {"username": "alice", "state": str(user.id)}


@pytest.mark.asyncio
async def test_missing_access_token_is_not_found(client):
    assert_masked(await client.get("/standard"))


@pytest.mark.asyncio
async def test_invalid_access_without_refresh_is_not_found(client):
    assert_masked(await client.get("/standard", headers=cookie_header(access="garbage")))


@pytest.mark.asyncio
async def test_invalid_access_with_invalid_refresh_is_not_found(client):
    response = await client.get(
        "/standard", headers=cookie_header(access="garbage", refresh="garbage")
    )
    assert_masked(response)


@pytest.mark.asyncio
async def test_expired_access_with_valid_refresh_is_rejected_by_default(client):
    user = make_user()
    response = await client.get(
        "/standard",
        headers=cookie_header(
            access=expired_access(user), refresh=generate_token(TokenType.refresh, user)
        ),
    )
    assert_masked(response)


@pytest.mark.asyncio
async def test_expired_access_with_valid_refresh_reaches_hook(client):
    user = make_user()
    response = await client.get(
        "/with-refresh-hook",
        headers=cookie_header(
            access=expired_access(user), refresh=generate_token(TokenType.refresh, user)
        ),
    )

    assert response.status_code == 200
    assert client.refreshed == [str(user.id)]


@pytest.mark.asyncio
async def test_hook_not_called_without_refresh(client):
    response = await client.get(
        "/with-refresh-hook", headers=cookie_header(access=expired_access(make_user()))
    )

    assert_masked(response)
    assert client.refreshed == []


@pytest.mark.asyncio
async def test_refresh_token_in_access_cookie_is_not_found(client):
    user = make_user()
    response = await client.get(
        "/standard", headers=cookie_header(access=generate_token(TokenType.refresh, user))
    )
    assert_masked(response)


@pytest.mark.asyncio
async def test_level_mismatch_is_not_found(client):
    standard_token = generate_token(TokenType.access, make_user(UserLevel.standard))
    privileged_token = generate_token(TokenType.access, make_user(UserLevel.privileged))

    assert_masked(await client.get("/privileged", headers=cookie_header(access=standard_token)))
    assert_masked(await client.get("/standard", headers=cookie_header(access=privileged_token)))

    response = await client.get("/privileged", headers=cookie_header(access=privileged_token))
    assert response.status_code == 200
