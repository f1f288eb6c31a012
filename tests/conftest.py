"""Root conftest - shared test configuration and a stub upstream registry.

Invariants:
    - Tests never reach the real data.gov.il (all traffic goes to httpx.MockTransport)
    - get_settings cache is cleared around every test so env tweaks don't leak
"""

import os

import httpx
import pytest

# Ensure a developer's .env / shell doesn't change test expectations
os.environ.setdefault("MESSAGE_LOCALE", "he")
os.environ.setdefault("LOG_FORMAT", "text")

from vehicle_api.config import get_settings  # noqa: E402
from vehicle_api.infrastructure.data_gov_client import DataGovClient  # noqa: E402


class StubRegistry:
    """Callable MockTransport handler that records every request it sees.

    `respond` may return an httpx.Response, be a coroutine function, or raise.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.respond = lambda request: httpx.Response(
            200, json={"success": True, "result": {"records": []}},
        )

    def __call__(self, request: httpx.Request):
        self.requests.append(request)
        return self.respond(request)

    def returns_json(self, payload, status_code: int = 200) -> None:
        self.respond = lambda request: httpx.Response(status_code, json=payload)

    def returns_records(self, *records) -> None:
        self.returns_json({"success": True, "result": {"records": list(records)}})

    @property
    def last_params(self) -> dict[str, str]:
        return dict(self.requests[-1].url.params)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def registry():
    return StubRegistry()


@pytest.fixture
async def data_gov_client(registry):
    client = DataGovClient(
        timeout_seconds=0.2, transport=httpx.MockTransport(registry),
    )
    yield client
    await client.aclose()
