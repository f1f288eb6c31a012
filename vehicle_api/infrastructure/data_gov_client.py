"""data.gov.il Client - wraps httpx.AsyncClient with a hard deadline and error mapping.

Invariants:
    - Exactly one attempt per lookup (no retries, no backoff)
    - Every call is bounded: httpx per-phase timeouts AND a total deadline
    - Timeouts -> UpstreamTimeoutError
    - Non-2xx responses -> UpstreamHTTPError (status passed through)
    - Connection/transport failures -> UpstreamUnavailableError
    - 2xx with success=false or a non-object body -> UpstreamLogicError
    - 2xx with an undecodable body -> UpstreamLogicError
    - A records value that is not a list counts as no records

Design Decisions:
    - One shared AsyncClient per process, owned by the app lifespan
    - asyncio.wait_for bounds the whole request; httpx timeouts are per phase
"""

import asyncio
import logging
from typing import Any

import httpx

from vehicle_api.core.domain_types import PlateNumber, VehicleRecord
from vehicle_api.core.errors import (
    ErrorContext,
    UpstreamHTTPError,
    UpstreamLogicError,
    UpstreamTimeoutError,
    UpstreamUnavailableError,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://data.gov.il/api/3/action/datastore_search"
DEFAULT_RESOURCE_ID = "053cea08-09bc-40ec-8f7a-156f0677aff3"
DEFAULT_USER_AGENT = "Israeli-Vehicle-Lookup/1.0"
RESULT_LIMIT = 1


class DataGovClient:
    """Queries the vehicle registry datastore on data.gov.il."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        resource_id: str = DEFAULT_RESOURCE_ID,
        timeout_seconds: float = 15.0,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url
        self.resource_id = resource_id
        self.timeout_seconds = timeout_seconds
        self.client = httpx.AsyncClient(
            timeout=timeout_seconds,
            headers={
                "Accept": "application/json",
                "User-Agent": user_agent,
            },
            follow_redirects=True,
            transport=transport,
        )

    async def aclose(self) -> None:
        await self.client.aclose()

    async def search(self, plate: PlateNumber) -> list[VehicleRecord]:
        """Return the matching records (at most RESULT_LIMIT) for plate.

        An empty list means the registry answered but holds no such vehicle.
        """
        context = ErrorContext(plate=plate)
        response = await self._get(plate, context)
        if not response.is_success:
            raise UpstreamHTTPError(
                response.status_code, response.reason_phrase, context=context,
            )
        try:
            payload = response.json()
        except ValueError:
            raise UpstreamLogicError("payload is not JSON", context=context)
        return self._extract_records(payload, context)

    async def _get(self, plate: PlateNumber, context: ErrorContext) -> httpx.Response:
        params = {
            "resource_id": self.resource_id,
            "q": plate,
            "limit": RESULT_LIMIT,
        }
        try:
            return await asyncio.wait_for(
                self.client.get(self.base_url, params=params),
                timeout=self.timeout_seconds,
            )
        except (httpx.TimeoutException, asyncio.TimeoutError):
            raise UpstreamTimeoutError(self.timeout_seconds, context=context)
        except httpx.RequestError as e:
            raise UpstreamUnavailableError(
                f"{type(e).__name__}: {e}", context=context,
            )

    def _extract_records(
        self, payload: Any, context: ErrorContext,
    ) -> list[VehicleRecord]:
        if not isinstance(payload, dict) or not payload.get("success"):
            raise UpstreamLogicError(
                "payload success flag is not set", context=context,
            )
        result = payload.get("result") or {}
        records = result.get("records") if isinstance(result, dict) else None
        if not isinstance(records, list) or not records:
            return []
        logger.debug(
            "Upstream returned records",
            extra={"plate": context.plate, "record_count": len(records)},
        )
        return list(records)
