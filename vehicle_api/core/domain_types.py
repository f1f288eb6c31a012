"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - PlateNumber is always the digit-only normalized form of a caller plate
    - Every lookup ends in exactly one LookupOutcome variant
    - All valid states encoded as Enums, no raw string matching

Design Decisions:
    - Outcome variants as frozen dataclasses: the branch decides which fields
      exist, serialization happens once in core/envelope.py
    - str Enums: serialize to JSON and log extras without custom encoders
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, NewType, Union


# ─── Value Types ─────────────────────────────────────────────────

PlateNumber = NewType("PlateNumber", str)     # digits only, non-empty
VehicleRecord = dict[str, Any]                # shape owned by upstream


# ─── Enums ───────────────────────────────────────────────────────

class Locale(str, Enum):
    """Languages available for caller-facing messages."""
    HE = "he"
    EN = "en"


class UpstreamFailureKind(str, Enum):
    """How the upstream call failed. Each kind owns one HTTP status policy."""
    TIMEOUT = "timeout"
    HTTP_STATUS = "http_status"
    NO_RESPONSE = "no_response"
    LOGIC_FAILURE = "logic_failure"


class LookupStatus(str, Enum):
    """Outcome label written to the lookup log line."""
    FOUND = "found"
    NOT_FOUND = "not_found"
    INVALID = "invalid"
    ERROR = "error"


# ─── Lookup Outcomes ─────────────────────────────────────────────

@dataclass(frozen=True)
class Found:
    record: VehicleRecord


@dataclass(frozen=True)
class NotFound:
    message: str


@dataclass(frozen=True)
class InvalidInput:
    message: str


@dataclass(frozen=True)
class UpstreamFailure:
    kind: UpstreamFailureKind
    message: str
    status_code: int
    detail: str | None = None


@dataclass(frozen=True)
class InternalError:
    message: str
    detail: str


LookupOutcome = Union[Found, NotFound, InvalidInput, UpstreamFailure, InternalError]


def outcome_status(outcome: LookupOutcome) -> LookupStatus:
    """Map an outcome to its log label."""
    if isinstance(outcome, Found):
        return LookupStatus.FOUND
    if isinstance(outcome, NotFound):
        return LookupStatus.NOT_FOUND
    if isinstance(outcome, InvalidInput):
        return LookupStatus.INVALID
    return LookupStatus.ERROR
