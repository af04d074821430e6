"""Request bodies for creating blood requests."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class CreateBloodRequest(BaseSchemaModel):
    """New blood request.

    Blood type, units, urgency and notes length are checked by the request
    service so the same rules apply outside HTTP.
    """

    blood_type: str = Field(..., min_length=1)
    units: int | None = Field(None, description="Defaults to 1")
    urgency: str = Field(..., min_length=1)
    hospital: str | None = Field(None, max_length=255)
    city: str | None = Field(None, max_length=120)
    notes: str | None = None


class EmergencyBroadcastRequest(BaseSchemaModel):
    """Emergency broadcast: one unit, always critical."""

    blood_type: str = Field(..., min_length=1)
    city: str | None = Field(None, max_length=120)
    notes: str | None = None


class OpenRequestFilter(BaseSchemaModel):
    """Open-market listing filters (query parameters)."""

    blood_type: str | None = None
    urgency: str | None = None
