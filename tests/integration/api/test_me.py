from datetime import timedelta
from uuid import uuid4

import pytest
from httpx import AsyncClient
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.utils.jwt import generate_jwt
from src.domain.entities import User
from tests.utils.auth_helpers import bearer, signup


@pytest.mark.asyncio
async def test_successful_me(client: AsyncClient):
    """Valid token returns the user, without credentials"""
    created = await signup(client, "user@acme.com", "SecurePass123!")

    response = await client.get("/api/auth/me", headers=bearer(created["token"]))

    assert response.status_code == 200
    user = response.json()["user"]
    assert user["id"] == created["user"]["id"]
    assert user["email"] == "user@acme.com"
    assert "created_at" in user
    assert "password_hash" not in user
    assert "reset_password_token_hash" not in user


@pytest.mark.asyncio
async def test_me_is_scoped_to_token_owner(client: AsyncClient):
    """A's token never returns B's record"""
    a = await signup(client, "a@example.com")
    b = await signup(client, "b@example.com")

    response_a = await client.get("/api/auth/me", headers=bearer(a["token"]))
    response_b = await client.get("/api/auth/me", headers=bearer(b["token"]))

    assert response_a.json()["user"]["id"] == a["user"]["id"]
    assert response_b.json()["user"]["id"] == b["user"]["id"]


@pytest.mark.asyncio
async def test_no_authorization_header(client: AsyncClient):
    response = await client.get("/api/auth/me")

    assert response.status_code == 401
    assert response.json() == {"message": "Not authorized, token missing"}


@pytest.mark.asyncio
async def test_non_bearer_authorization_header(client: AsyncClient):
    response = await client.get("/api/auth/me", headers={"Authorization": "Basic abc"})

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_invalid_jwt(client: AsyncClient):
    response = await client.get("/api/auth/me", headers=bearer("invalid_token_here"))

    assert response.status_code == 401
    assert response.json() == {"message": "Not authorized"}


@pytest.mark.asyncio
async def test_expired_jwt(client: AsyncClient):
    created = await signup(client, "user@acme.com")
    token = generate_jwt(created["user"]["id"], expires_delta=timedelta(seconds=-5))

    response = await client.get("/api/auth/me", headers=bearer(token))

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_valid_token_for_deleted_user(client: AsyncClient, db_session: AsyncSession):
    """Token is well-signed but the user no longer exists"""
    user = User(email="gone@example.com", password_hash="x")
    db_session.add(user)
    await db_session.commit()
    token = generate_jwt(user.id)

    await db_session.delete(user)
    await db_session.commit()

    response = await client.get("/api/auth/me", headers=bearer(token))

    assert response.status_code == 401
    assert response.json() == {"message": "User not found"}


@pytest.mark.asyncio
async def test_token_for_unknown_user_id(client: AsyncClient):
    response = await client.get("/api/auth/me", headers=bearer(generate_jwt(uuid4())))

    assert response.status_code == 401
