"""Process Supervisor - last-resort logging for defects outside the request boundary.

Invariants:
    - Uncaught exceptions in the main thread are logged as CRITICAL before exit
    - Exceptions escaping into the event loop are logged and trigger a graceful
      shutdown (SIGTERM to self, which uvicorn drains)
    - Per-request failures never reach this module
"""

import asyncio
import logging
import signal
import sys

logger = logging.getLogger(__name__)


def log_uncaught_exception(exc_type, exc_value, exc_tb) -> None:
    """sys.excepthook replacement."""
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_tb)
        return
    logger.critical(
        f"Uncaught exception: {exc_value}",
        exc_info=(exc_type, exc_value, exc_tb),
    )


def handle_loop_exception(loop: asyncio.AbstractEventLoop, context: dict) -> None:
    """asyncio exception handler: log, then request a graceful shutdown."""
    exc = context.get("exception")
    logger.critical(
        f"Unhandled exception in event loop: {context.get('message', exc)}",
        exc_info=(type(exc), exc, exc.__traceback__) if exc else None,
    )
    signal.raise_signal(signal.SIGTERM)


def install_excepthook() -> None:
    sys.excepthook = log_uncaught_exception


def install_loop_exception_handler() -> None:
    asyncio.get_running_loop().set_exception_handler(handle_loop_exception)
