"""Service Info & Health - static root document and liveness probe.

Invariants:
    - GET / and GET /health always return 200 if the process is up
    - Neither endpoint touches the upstream registry
"""

import time
from datetime import datetime, timezone

from fastapi import APIRouter, status

from vehicle_api.schemas.vehicle import HealthResponse, ServiceInfo

router = APIRouter(tags=["health"])

_STARTED_AT = time.monotonic()


@router.get("/", response_model=ServiceInfo, status_code=status.HTTP_200_OK)
async def service_info():
    """Static description of the service and its endpoints."""
    return ServiceInfo()


@router.get("/health", response_model=HealthResponse, status_code=status.HTTP_200_OK)
async def health_check():
    """Liveness probe with wall-clock timestamp and process uptime (seconds)."""
    return HealthResponse(
        timestamp=datetime.now(timezone.utc).isoformat(),
        uptime=round(time.monotonic() - _STARTED_AT, 3),
    )
