"""API test fixtures - FastAPI app over ASGITransport with the registry stubbed.

Invariants:
    - get_data_gov_client overridden with the MockTransport-backed client
    - raise_app_exceptions=False so the catch-all handler's 500 is observable
"""

import pytest
from httpx import ASGITransport, AsyncClient

from vehicle_api.api.routes.vehicle import get_data_gov_client
from vehicle_api.main import app


@pytest.fixture
async def client(data_gov_client):
    app.dependency_overrides[get_data_gov_client] = lambda: data_gov_client

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
