"""Server Runner - starts uvicorn with graceful shutdown.

Invariants:
    - SIGTERM/SIGINT stop the listener, in-flight requests drain for at most
      shutdown_grace_seconds
    - Startup failures (port already bound, bad settings) exit with status 1
"""

import logging
import sys

import uvicorn

from vehicle_api.config import get_settings
from vehicle_api.infrastructure.observability import setup_logging
from vehicle_api.infrastructure.supervisor import install_excepthook

logger = logging.getLogger(__name__)


def run() -> None:
    """Console entry point."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    install_excepthook()
    logger.info(
        "Israeli Vehicle API starting",
        extra={"port": settings.port, "environment": settings.environment},
    )
    config = uvicorn.Config(
        "vehicle_api.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
        timeout_graceful_shutdown=settings.shutdown_grace_seconds,
    )
    server = uvicorn.Server(config)
    server.run()
    # lifespan startup failures return here; a bound port exits inside uvicorn
    if not server.started:
        logger.critical(
            f"Server failed to start on port {settings.port}",
            extra={"port": settings.port},
        )
        sys.exit(1)
    logger.info("Server closed")
