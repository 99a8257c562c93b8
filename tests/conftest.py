"""Shared test fixtures: fresh app per test + in-process HTTP client.

Every test gets its own ``create_app()`` instance, so the seed records
are restored and nothing leaks between tests.
"""

import pytest
from httpx import ASGITransport, AsyncClient

from record_store_api.app.main import create_app
from record_store_api.app.services.record_service import RecordStore


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def store(app) -> RecordStore:
    return app.state.store


@pytest.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
