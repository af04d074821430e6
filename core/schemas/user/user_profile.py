"""Schema for the caller's own profile."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class UserProfile(BaseSchemaModel):
    """The caller's profile as stored, with resolved availability."""

    user_id: UUID
    external_id: str
    email: str | None = None
    full_name: str | None = None
    phone: str | None = None
    blood_type: str | None = None
    mode: str | None = None
    city: str | None = None
    region: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    location_granted: bool | None = None
    preferred_donation_center: str | None = None
    is_available: bool = Field(..., description="Resolved availability")
    has_push_token: bool = False
    created_at: datetime
