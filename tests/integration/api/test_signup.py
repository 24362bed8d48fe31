from uuid import UUID

import pytest
from httpx import AsyncClient
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.utils.jwt import verify_jwt
from src.domain.entities import User
from tests.utils.auth_helpers import login


@pytest.mark.asyncio
async def test_successful_signup(client: AsyncClient, db_session: AsyncSession):
    """Signup creates the user and returns {message, user, token}"""
    response = await client.post("/api/auth/signup", json={
        "email": "founder@acme.com",
        "password": "SecurePass123!",
    })

    assert response.status_code == 201
    data = response.json()
    assert data["message"] == "User created"
    assert data["user"]["email"] == "founder@acme.com"
    assert set(data["user"]) == {"id", "email"}

    # Token's embedded user id is the created user's id
    assert verify_jwt(data["token"])["user_id"] == data["user"]["id"]

    result = await db_session.exec(select(User).where(User.email == "founder@acme.com"))
    user = result.one()
    assert user.id == UUID(data["user"]["id"])
    assert user.password_hash != "SecurePass123!"


@pytest.mark.asyncio
async def test_login_right_after_signup(client: AsyncClient):
    await client.post("/api/auth/signup", json={"email": "a@example.com", "password": "pw1"})

    response = await login(client, "a@example.com", "pw1")

    assert response.status_code == 200


@pytest.mark.asyncio
async def test_signup_existing_email(client: AsyncClient):
    """Duplicate email is rejected with 400, case-insensitively"""
    await client.post("/api/auth/signup", json={
        "email": "founder@acme.com",
        "password": "SecurePass123!",
    })

    response = await client.post("/api/auth/signup", json={
        "email": "Founder@ACME.com",
        "password": "DifferentPass456!",
    })

    assert response.status_code == 400
    assert response.json() == {"message": "Email already registered"}


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [
    {"email": "founder@acme.com"},
    {"password": "SecurePass123!"},
    {"email": "", "password": ""},
    {},
])
async def test_signup_missing_fields(client: AsyncClient, payload):
    response = await client.post("/api/auth/signup", json=payload)

    assert response.status_code == 400
    assert response.json() == {"message": "Please provide email and password"}


@pytest.mark.asyncio
async def test_signup_malformed_body(client: AsyncClient):
    response = await client.post(
        "/api/auth/signup",
        content="not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert "message" in response.json()


@pytest.mark.asyncio
async def test_signup_with_password_longer_than_72_bytes(client: AsyncClient):
    response = await client.post(
        "/api/auth/signup", json={"email": "long@example.com", "password": "a" * 80}
    )

    assert response.status_code == 201
    assert (await login(client, "long@example.com", "a" * 80)).status_code == 200
