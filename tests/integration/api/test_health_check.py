import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    response = await client.get("/")

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "server is live"}
