from httpx import AsyncClient


async def signup(client: AsyncClient, email: str, password: str = "pw1") -> dict:
    response = await client.post(
        "/api/auth/signup", json={"email": email, "password": password}
    )
    assert response.status_code == 201, response.text
    return response.json()


async def login(client: AsyncClient, email: str, password: str):
    return await client.post(
        "/api/auth/login", json={"email": email, "password": password}
    )


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}
