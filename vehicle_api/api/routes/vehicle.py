"""Vehicle Lookup - GET /api/vehicle/{plate_number}.

Invariants:
    - Every response body is a VehicleEnvelope produced by core/envelope.py
    - The shared DataGovClient comes from app.state (created in lifespan)
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from vehicle_api.config import Settings, get_settings
from vehicle_api.core.envelope import to_envelope
from vehicle_api.infrastructure.data_gov_client import DataGovClient
from vehicle_api.schemas.vehicle import VehicleEnvelope
from vehicle_api.services.lookup_vehicle import lookup_vehicle

router = APIRouter(prefix="/api/vehicle", tags=["vehicle"])

_ERROR_RESPONSES = {
    400: {"model": VehicleEnvelope, "description": "Invalid plate number"},
    500: {"model": VehicleEnvelope, "description": "Upstream or internal error"},
    503: {"model": VehicleEnvelope, "description": "No response from upstream"},
    504: {"model": VehicleEnvelope, "description": "Upstream timeout"},
}


def get_data_gov_client(request: Request) -> DataGovClient:
    return request.app.state.data_gov_client


@router.get(
    "/{plate_number}",
    response_model=VehicleEnvelope,
    response_model_exclude_none=True,
    responses=_ERROR_RESPONSES,
)
async def get_vehicle(
    plate_number: str,
    client: DataGovClient = Depends(get_data_gov_client),
    settings: Settings = Depends(get_settings),
):
    """Look up a vehicle in the government registry by plate number."""
    outcome = await lookup_vehicle(plate_number, client, settings.message_locale)
    status_code, body = to_envelope(outcome)
    return JSONResponse(status_code=status_code, content=body)
