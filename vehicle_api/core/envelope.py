"""Envelope - serializes a LookupOutcome into (status_code, JSON body).

Invariants:
    - Exactly one of data / message is present in every body
    - Absent optional fields are omitted, never null
    - NotFound is 200 with success=false (the endpoint exists)
"""

from vehicle_api.core.domain_types import (
    Found, NotFound, InvalidInput, UpstreamFailure, InternalError,
    LookupOutcome,
)


def to_envelope(outcome: LookupOutcome) -> tuple[int, dict]:
    """Serialize an outcome at the HTTP boundary."""
    if isinstance(outcome, Found):
        return 200, {"success": True, "data": outcome.record}
    if isinstance(outcome, NotFound):
        return 200, {"success": False, "message": outcome.message}
    if isinstance(outcome, InvalidInput):
        return 400, {"success": False, "message": outcome.message}
    if isinstance(outcome, UpstreamFailure):
        body = {"success": False, "message": outcome.message}
        if outcome.detail is not None:
            body["details"] = outcome.detail
        return outcome.status_code, body
    if isinstance(outcome, InternalError):
        return 500, {
            "success": False,
            "message": outcome.message,
            "error": outcome.detail,
        }
    raise TypeError(f"Unknown lookup outcome: {outcome!r}")
