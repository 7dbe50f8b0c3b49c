import os
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("DEMO_TOTAL_ITEMS", "95")
os.environ.setdefault("MAX_PER_PAGE", "100")


@pytest.fixture
def fresh_settings():
    """Clear the settings cache around a test that changes the environment."""
    from tome.core.config import get_settings
    get_settings.cache_clear()
    yield get_settings
    get_settings.cache_clear()


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    from tome.main import app
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
