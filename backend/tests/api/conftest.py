"""API test fixtures — FastAPI app over an in-process ASGI transport."""

import pytest
from httpx import ASGITransport, AsyncClient

from app.config import get_settings
from app.main import app


@pytest.fixture
async def client():
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def small_index_limit():
    """Override max_sequence_index to 10 for the duration of a test."""
    settings = get_settings().model_copy(update={"max_sequence_index": 10})
    app.dependency_overrides[get_settings] = lambda: settings
    yield settings
    app.dependency_overrides.clear()


@pytest.fixture
def small_prime_limit():
    """Override max_prime_candidate to 1000 for the duration of a test."""
    settings = get_settings().model_copy(update={"max_prime_candidate": 1000})
    app.dependency_overrides[get_settings] = lambda: settings
    yield settings
    app.dependency_overrides.clear()
