"""Schema for recording a donation."""

from datetime import UTC, datetime

from django.utils import timezone
from pydantic import Field, field_validator

from core.schemas.base_schema_model import BaseSchemaModel


class AddDonationRequest(BaseSchemaModel):
    """A past donation; the date may not lie in the future."""

    donation_date: datetime
    donation_center: str | None = Field(None, max_length=255)
    notes: str | None = None

    @field_validator("donation_date")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        """Read dates and offset-less datetimes as UTC."""
        if timezone.is_naive(v):
            return timezone.make_aware(v, UTC)
        return v
