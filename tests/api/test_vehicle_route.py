"""Vehicle Route - end-to-end envelope mapping for GET /api/vehicle/{plate_number}.

Invariants:
    - Wrong-length plates get 400 and never reach the registry
    - The registry sees the digit-only plate, resource_id and limit=1
    - Each upstream branch maps to its documented status and envelope
"""

import asyncio
import time

import httpx
import pytest

from vehicle_api.config import Settings, get_settings
from vehicle_api.core.language_strings import MessageKey, get_message
from vehicle_api.infrastructure.data_gov_client import DEFAULT_RESOURCE_ID
from vehicle_api.main import app


# -- Validation ----------------------------------------------------------------


@pytest.mark.parametrize("plate", ["123456", "1", "123456789", "12-345-678"])
async def test_wrong_length_returns_400_without_upstream_call(client, registry, plate):
    res = await client.get(f"/api/vehicle/{plate}")

    assert res.status_code == 400
    assert res.json() == {
        "success": False,
        "message": get_message(MessageKey.INVALID_PLATE),
    }
    assert registry.requests == []


async def test_plate_without_digits_returns_400(client, registry):
    res = await client.get("/api/vehicle/abcdefg")

    assert res.status_code == 400
    assert registry.requests == []


async def test_upstream_receives_digit_only_plate(client, registry):
    await client.get("/api/vehicle/12-34567")

    params = registry.last_params
    assert params["q"] == "1234567"
    assert params["resource_id"] == DEFAULT_RESOURCE_ID
    assert params["limit"] == "1"


# -- Upstream success branches -------------------------------------------------


async def test_found_returns_first_record(client, registry):
    registry.returns_records({"id": "60570703"})

    res = await client.get("/api/vehicle/60570703")

    assert res.status_code == 200
    assert res.json() == {"success": True, "data": {"id": "60570703"}}


async def test_no_records_returns_200_not_found(client, registry):
    registry.returns_records()

    res = await client.get("/api/vehicle/60570703")

    assert res.status_code == 200
    assert res.json() == {
        "success": False,
        "message": get_message(MessageKey.NOT_FOUND),
    }


async def test_upstream_failure_flag_returns_500(client, registry):
    registry.returns_json({"success": False})

    res = await client.get("/api/vehicle/60570703")

    assert res.status_code == 500
    assert res.json() == {
        "success": False,
        "message": get_message(MessageKey.API_ERROR),
    }


# -- Upstream network failures -------------------------------------------------


async def test_slow_upstream_returns_504_within_timeout(client, registry):
    async def never_answers(request):
        await asyncio.sleep(5)
        return httpx.Response(200, json={"success": True})

    registry.respond = never_answers

    started = time.monotonic()
    res = await client.get("/api/vehicle/60570703")
    elapsed = time.monotonic() - started

    assert res.status_code == 504
    assert res.json() == {
        "success": False,
        "message": get_message(MessageKey.UPSTREAM_TIMEOUT),
    }
    assert elapsed < 2


async def test_upstream_http_status_is_passed_through(client, registry):
    registry.respond = lambda request: httpx.Response(502)

    res = await client.get("/api/vehicle/60570703")

    assert res.status_code == 502
    assert res.json() == {
        "success": False,
        "message": get_message(MessageKey.UPSTREAM_ERROR),
        "details": "Bad Gateway",
    }


async def test_upstream_404_is_an_envelope_not_the_route_404(client, registry):
    registry.respond = lambda request: httpx.Response(404)

    res = await client.get("/api/vehicle/60570703")

    assert res.status_code == 404
    body = res.json()
    assert body["success"] is False
    assert body["details"] == "Not Found"
    assert "availableEndpoints" not in body


async def test_connection_error_returns_503(client, registry):
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    registry.respond = refuse

    res = await client.get("/api/vehicle/60570703")

    assert res.status_code == 503
    assert res.json() == {
        "success": False,
        "message": get_message(MessageKey.NO_RESPONSE),
    }


async def test_undecodable_body_returns_api_error(client, registry):
    registry.respond = lambda request: httpx.Response(200, content=b"<html>oops</html>")

    res = await client.get("/api/vehicle/60570703")

    assert res.status_code == 500
    assert res.json() == {
        "success": False,
        "message": get_message(MessageKey.API_ERROR),
    }


async def test_empty_204_body_returns_api_error(client, registry):
    registry.respond = lambda request: httpx.Response(204)

    res = await client.get("/api/vehicle/60570703")

    assert res.status_code == 500
    assert res.json()["message"] == get_message(MessageKey.API_ERROR)


async def test_records_object_is_not_found(client, registry):
    registry.returns_json({"success": True, "result": {"records": {"a": 1}}})

    res = await client.get("/api/vehicle/60570703")

    assert res.status_code == 200
    assert res.json() == {
        "success": False,
        "message": get_message(MessageKey.NOT_FOUND),
    }


# -- Locale --------------------------------------------------------------------


async def test_english_locale_from_settings(client, registry):
    app.dependency_overrides[get_settings] = lambda: Settings(message_locale="en")
    registry.returns_records()

    res = await client.get("/api/vehicle/60570703")

    assert res.json()["message"] == "No vehicle found for this plate number"
