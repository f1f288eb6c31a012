"""Error Handlers - global exception handlers for the vehicle API.

Invariants:
    - VehicleLookupError -> {success: false, message, details?} with its http_status
    - RequestValidationError -> 400 envelope with field-level details
    - 404 on any undefined path -> JSON listing the available endpoints
    - Other HTTP errors (405, ...) -> envelope with the framework's detail
    - Exception (catch-all) -> 500 envelope, logged with traceback
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from vehicle_api.config import get_settings
from vehicle_api.core.errors import VehicleLookupError, log_level_for
from vehicle_api.core.language_strings import MessageKey, get_message
from vehicle_api.schemas.vehicle import NotFoundResponse

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_lookup_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_lookup_error_handler(app: FastAPI) -> None:

    @app.exception_handler(VehicleLookupError)
    async def lookup_error_handler(request: Request, exc: VehicleLookupError):
        """Handle domain/upstream errors that escaped the lookup service."""
        logger.log(
            log_level_for(exc),
            f"VehicleLookupError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            body = NotFoundResponse(message=f"Endpoint {request.url.path} not found")
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content=body.model_dump(by_alias=True),
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all for defects that escaped every other boundary."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path},
        )
        locale = get_settings().message_locale
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "success": False,
                "message": get_message(MessageKey.INTERNAL_ERROR, locale),
                "error": str(exc) or type(exc).__name__,
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    return {
        "success": False,
        "message": "Invalid request data",
        "details": "; ".join(
            f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
            for e in exc.errors()
        ),
    }
