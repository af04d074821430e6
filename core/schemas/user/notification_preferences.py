"""Notification preference schemas."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class NotificationPreferences(BaseSchemaModel):
    """Effective preferences; unset values are reported as enabled."""

    notify_request_match: bool = Field(..., description="New matching requests")
    notify_request_accepted: bool = Field(
        ..., description="A donor accepted one of my requests"
    )
    notify_eligibility: bool = Field(..., description="Eligible to donate again")


class UpdateNotificationPreferencesRequest(BaseSchemaModel):
    """Partial update; omitted preferences keep their stored value."""

    notify_request_match: bool | None = None
    notify_request_accepted: bool | None = None
    notify_eligibility: bool | None = None
