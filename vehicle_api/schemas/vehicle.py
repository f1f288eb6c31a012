"""Vehicle API Schemas - response models for OpenAPI docs and static endpoints.

Invariants:
    - VehicleEnvelope: data XOR message; details/error only on failures
    - EndpointIndex is the single source of the advertised endpoint paths
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class VehicleEnvelope(BaseModel):
    """Uniform lookup response. Absent fields are omitted on the wire."""
    success: bool
    data: dict[str, Any] | None = None
    message: str | None = None
    details: str | None = None
    error: str | None = None


class EndpointIndex(BaseModel):
    health: str = "/health"
    search: str = "/api/vehicle/:plateNumber"
    example: str = "/api/vehicle/60570703"


class ServiceInfo(BaseModel):
    status: str = "running"
    message: str = "Israeli Vehicle API is live! 🚗"
    endpoints: EndpointIndex = Field(default_factory=EndpointIndex)


class HealthResponse(BaseModel):
    status: str = "ok"
    timestamp: str
    uptime: float


class AvailableEndpoints(BaseModel):
    root: str = "/"
    health: str = "/health"
    search: str = "/api/vehicle/:plateNumber"


class NotFoundResponse(BaseModel):
    """Body for any undefined path."""
    model_config = ConfigDict(populate_by_name=True)

    error: str = "Not Found"
    message: str
    available_endpoints: AvailableEndpoints = Field(
        default_factory=AvailableEndpoints, alias="availableEndpoints",
    )
