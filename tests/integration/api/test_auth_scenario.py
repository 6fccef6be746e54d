import pytest
from httpx import AsyncClient

API = "/api/v1"


@pytest.mark.asyncio
async def test_alice_full_lifecycle(client: AsyncClient, second_client: AsyncClient):
    """Sign up, browse, get rejected on duplicates, sign out, sign back in"""
    signup = await client.post(f"{API}/sign-up", json={"username": "alice", "password": "pw123"})
    assert signup.status_code == 201
    assert (await client.get(f"{API}/me")).status_code == 200

    # A signed-in caller cannot sign up or sign in again
    assert (await client.post(
        f"{API}/sign-up", json={"username": "alice2", "password": "pw123"}
    )).status_code == 401
    assert (await client.post(
        f"{API}/sign-in", json={"username": "alice", "password": "pw123"}
    )).status_code == 401

    # Other browsers see the usual errors
    duplicate = await second_client.post(
        f"{API}/sign-up", json={"username": "alice", "password": "x"}
    )
    assert duplicate.status_code == 400
    wrong = await second_client.post(f"{API}/sign-in", json={"username": "alice", "password": "x"})
    assert wrong.status_code == 401
    assert wrong.json()["error"]["code"] == "INVALID_CREDENTIALS"

    signout = await client.post(f"{API}/sign-out")
    assert signout.json()["message"] == "You have successfully signed out! See you soon alice!"
    assert (await client.get(f"{API}/me")).status_code == 404
    assert (await client.post(f"{API}/sign-out")).json()["message"] == "You are already signed out."

    signin = await client.post(f"{API}/sign-in", json={"username": "alice", "password": "pw123"})
    assert signin.status_code == 200
    assert (await client.get(f"{API}/me")).json()["username"] == "alice"
