"""Schema for updating a user's location."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class UpdateLocationRequest(BaseSchemaModel):
    """Coordinates from the device, with optional client-resolved place names.

    When city and region are omitted the service tries reverse geocoding.
    """

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    city: str | None = Field(None, max_length=120)
    region: str | None = Field(None, max_length=120)
