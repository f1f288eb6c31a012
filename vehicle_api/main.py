"""Vehicle Lookup API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to a JSON envelope
    - CORS configured from settings
    - One shared DataGovClient per process, opened and closed by the lifespan
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from vehicle_api.api.error_handlers import register_error_handlers
from vehicle_api.api.routes import health, vehicle
from vehicle_api.config import get_settings
from vehicle_api.infrastructure.data_gov_client import DataGovClient
from vehicle_api.infrastructure.observability import setup_logging
from vehicle_api.infrastructure.supervisor import install_loop_exception_handler

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    install_loop_exception_handler()
    app.state.data_gov_client = DataGovClient(
        base_url=settings.upstream_base_url,
        resource_id=settings.upstream_resource_id,
        timeout_seconds=settings.upstream_timeout_seconds,
        user_agent=settings.upstream_user_agent,
    )
    logger.info("Vehicle API started")
    yield
    await app.state.data_gov_client.aclose()
    logger.info("Vehicle API shut down")


app = FastAPI(
    title="Israeli Vehicle API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(vehicle.router)

register_error_handlers(app)
