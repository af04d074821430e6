"""Schema for partial profile updates."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class UpdateProfileRequest(BaseSchemaModel):
    """Partial update; only keys present in the body are written."""

    city: str | None = Field(None, max_length=120)
    region: str | None = Field(None, max_length=120)
    preferred_donation_center: str | None = Field(None, max_length=255)
