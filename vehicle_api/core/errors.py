"""Error Hierarchy - typed, categorized exceptions for every lookup failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Caller errors are 400-level; upstream errors carry the status the caller sees
    - to_response() produces the uniform {success: false, ...} envelope
    - A missing vehicle is NOT an error (it is the NotFound outcome)

Design Decisions:
    - Single hierarchy with VehicleLookupError base: the global handler catches all
    - ErrorContext as dataclass: observability data without coupling to logging
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    EXTERNAL_API = "external_api"
    TIMEOUT = "timeout"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    plate: str | None = None


class VehicleLookupError(Exception):
    """Base exception for all vehicle lookup errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the caller-facing envelope."""
        return {"success": False, "message": self.message}


# ─── Caller Errors (400-level) ──────────────────────────────────

class InvalidPlateError(VehicleLookupError):
    """Plate path parameter failed length or digit validation."""
    def __init__(
        self, plate: str | None, reason: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.plate = plate
        super().__init__(
            f"Invalid plate number {plate!r}: {reason}",
            "INVALID_PLATE", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx, 400,
        )
        self.reason = reason


# ─── Upstream Errors ────────────────────────────────────────────

class UpstreamTimeoutError(VehicleLookupError):
    """Upstream did not answer within the configured timeout."""
    def __init__(self, timeout_seconds: float, context: ErrorContext | None = None):
        super().__init__(
            f"Upstream timed out after {timeout_seconds}s",
            "UPSTREAM_TIMEOUT", ErrorCategory.TIMEOUT,
            ErrorSeverity.ERROR, context, 504,
        )
        self.timeout_seconds = timeout_seconds


class UpstreamHTTPError(VehicleLookupError):
    """Upstream answered with a non-2xx status. The status is passed through."""
    def __init__(
        self, status_code: int, reason: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Upstream responded {status_code} {reason}".rstrip(),
            "UPSTREAM_HTTP_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, context, status_code,
        )
        self.status_code = status_code
        self.reason = reason

    def to_response(self) -> dict:
        return {"success": False, "message": self.message, "details": self.reason}


class UpstreamUnavailableError(VehicleLookupError):
    """Request could not be sent or no response was received."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"No response from upstream: {message}",
            "UPSTREAM_NO_RESPONSE", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, context, 503,
        )


class UpstreamLogicError(VehicleLookupError):
    """Upstream answered 2xx but reported failure in its payload."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Upstream reported failure: {message}",
            "UPSTREAM_LOGIC_FAILURE", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, context, 500,
        )


_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


def log_level_for(error: VehicleLookupError) -> int:
    """Logging level matching the error's severity."""
    return _LOG_LEVELS[error.severity]
