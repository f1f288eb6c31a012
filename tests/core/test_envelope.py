"""Envelope - each outcome variant serializes to one status and body shape."""

import pytest

from vehicle_api.core.domain_types import (
    Found, NotFound, InvalidInput, UpstreamFailure, InternalError,
    UpstreamFailureKind,
)
from vehicle_api.core.envelope import to_envelope


def test_found_has_data_only():
    assert to_envelope(Found({"id": "60570703"})) == (
        200, {"success": True, "data": {"id": "60570703"}},
    )


def test_not_found_is_200_with_success_false():
    assert to_envelope(NotFound("none")) == (
        200, {"success": False, "message": "none"},
    )


def test_invalid_input_is_400():
    assert to_envelope(InvalidInput("bad")) == (
        400, {"success": False, "message": "bad"},
    )


def test_upstream_failure_without_detail_omits_details():
    status, body = to_envelope(UpstreamFailure(
        kind=UpstreamFailureKind.TIMEOUT, message="slow", status_code=504,
    ))
    assert status == 504
    assert body == {"success": False, "message": "slow"}


def test_upstream_http_failure_passes_status_and_details():
    status, body = to_envelope(UpstreamFailure(
        kind=UpstreamFailureKind.HTTP_STATUS, message="err",
        status_code=429, detail="Too Many Requests",
    ))
    assert status == 429
    assert body["details"] == "Too Many Requests"


def test_internal_error_includes_error_description():
    assert to_envelope(InternalError("oops", "KeyError: x")) == (
        500, {"success": False, "message": "oops", "error": "KeyError: x"},
    )


def test_unknown_outcome_raises():
    with pytest.raises(TypeError):
        to_envelope(object())


@pytest.mark.parametrize("outcome", [
    Found({}), NotFound("m"), InvalidInput("m"),
    UpstreamFailure(UpstreamFailureKind.NO_RESPONSE, "m", 503),
    InternalError("m", "d"),
])
def test_exactly_one_of_data_or_message(outcome):
    _, body = to_envelope(outcome)
    assert ("data" in body) != ("message" in body)
    assert None not in body.values()
