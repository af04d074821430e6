"""Request bodies for single-field profile updates."""

from pydantic import Field

from core.enums import UserMode
from core.schemas.base_schema_model import BaseSchemaModel


class UpdatePhoneRequest(BaseSchemaModel):
    """New contact phone number."""

    phone: str = Field(..., min_length=1, max_length=32)


class UpdateBloodTypeRequest(BaseSchemaModel):
    """New blood type; validated against the canonical list by the service."""

    blood_type: str = Field(..., min_length=1)


class UpdateModeRequest(BaseSchemaModel):
    """New participation mode."""

    mode: UserMode


class UpdatePushTokenRequest(BaseSchemaModel):
    """Device push token registered by the mobile client."""

    push_token: str = Field(..., min_length=1, max_length=255)
