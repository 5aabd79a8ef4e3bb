"""Shared test fixtures: ASGI test client, sample object records."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from explorer.main import app


@pytest_asyncio.fixture
async def client() -> AsyncClient:
    """Yield an httpx AsyncClient wired to the app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def coin_record() -> dict:
    return {
        "objType": "0x2::coin::Coin<SUI>",
        "owner": "AddressOwner(k#abc123)",
        "balance": 100,
        "owned_tokens": {"vec": [{"bytes": "id1"}, {"bytes": "id2"}]},
        "display": {"url": "https://example.com/coin.png"},
    }
