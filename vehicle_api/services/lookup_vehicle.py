"""Lookup Vehicle - the single request pipeline: validate, normalize, call, map.

Invariants:
    - Invalid plates never reach the upstream client
    - Exactly one upstream call per valid lookup
    - Every failure is converted to a LookupOutcome here; nothing escapes
      except cancellation (BaseException)
    - One log line per lookup records the plate and its outcome

Design Decisions:
    - Typed errors from the client are translated to outcomes at this boundary,
      so routes only ever serialize (core/envelope.py)
"""

import logging
from typing import Protocol

from vehicle_api.core.domain_types import (
    Found, NotFound, InvalidInput, UpstreamFailure, InternalError,
    Locale, LookupOutcome, PlateNumber, UpstreamFailureKind, VehicleRecord,
    outcome_status,
)
from vehicle_api.core.errors import (
    InvalidPlateError,
    UpstreamHTTPError,
    UpstreamLogicError,
    UpstreamTimeoutError,
    UpstreamUnavailableError,
    log_level_for,
)
from vehicle_api.core.language_strings import MessageKey, get_message
from vehicle_api.core.plate import parse_plate

logger = logging.getLogger(__name__)

# Registry field holding the plate, read for logging only
_RECORD_ID_FIELD = "mispar_rechev"


class VehicleSearcher(Protocol):
    async def search(self, plate: PlateNumber) -> list[VehicleRecord]: ...


async def lookup_vehicle(
    raw_plate: str | None, client: VehicleSearcher, locale: Locale = Locale.HE,
) -> LookupOutcome:
    """Run one plate lookup end to end."""
    try:
        plate = parse_plate(raw_plate)
    except InvalidPlateError as e:
        logger.info(
            e.message,
            extra={"plate": raw_plate, "outcome": "invalid", "error_code": e.code},
        )
        return InvalidInput(get_message(MessageKey.INVALID_PLATE, locale))

    logger.info(f"Searching for plate: {plate}", extra={"plate": plate})
    outcome = await _search(plate, client, locale)
    _log_outcome(plate, outcome)
    return outcome


async def _search(
    plate: PlateNumber, client: VehicleSearcher, locale: Locale,
) -> LookupOutcome:
    try:
        records = await client.search(plate)
    except UpstreamTimeoutError as e:
        return _failure(e, UpstreamFailureKind.TIMEOUT, MessageKey.UPSTREAM_TIMEOUT, locale)
    except UpstreamHTTPError as e:
        return _failure(
            e, UpstreamFailureKind.HTTP_STATUS, MessageKey.UPSTREAM_ERROR, locale,
            detail=e.reason,
        )
    except UpstreamUnavailableError as e:
        return _failure(e, UpstreamFailureKind.NO_RESPONSE, MessageKey.NO_RESPONSE, locale)
    except UpstreamLogicError as e:
        return _failure(e, UpstreamFailureKind.LOGIC_FAILURE, MessageKey.API_ERROR, locale)
    except Exception as e:
        logger.error(
            f"Unexpected error looking up plate {plate}: {e}",
            exc_info=True, extra={"plate": plate},
        )
        return InternalError(
            get_message(MessageKey.INTERNAL_ERROR, locale), str(e) or type(e).__name__,
        )

    if not records:
        return NotFound(get_message(MessageKey.NOT_FOUND, locale))
    return Found(records[0])


def _failure(
    error, kind: UpstreamFailureKind, key: MessageKey, locale: Locale,
    detail: str | None = None,
) -> UpstreamFailure:
    logger.log(
        log_level_for(error),
        f"Upstream failure: {error.message}",
        extra={
            "plate": error.context.plate,
            "error_kind": kind.value,
            "error_code": error.code,
            "status_code": error.http_status,
        },
    )
    return UpstreamFailure(
        kind=kind,
        message=get_message(key, locale),
        status_code=error.http_status,
        detail=detail,
    )


def _log_outcome(plate: PlateNumber, outcome: LookupOutcome) -> None:
    status = outcome_status(outcome)
    if isinstance(outcome, Found):
        record = outcome.record if isinstance(outcome.record, dict) else {}
        vehicle_id = record.get(_RECORD_ID_FIELD) or plate
        logger.info(f"Vehicle found: {vehicle_id}", extra={"plate": plate, "outcome": status.value})
    elif isinstance(outcome, NotFound):
        logger.info(f"No records found for: {plate}", extra={"plate": plate, "outcome": status.value})
    else:
        logger.warning(f"Lookup failed for: {plate}", extra={"plate": plate, "outcome": status.value})
