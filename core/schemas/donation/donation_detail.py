"""Donation response schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class DonationDetail(BaseSchemaModel):
    """One recorded donation."""

    donation_id: UUID
    donation_date: datetime
    donation_center: str | None = None
    notes: str | None = None
    created_at: datetime


class DonationHistory(BaseSchemaModel):
    """Donations newest first, with the total count."""

    donations: list[DonationDetail]
    total: int


class DonationStats(BaseSchemaModel):
    """Aggregate donation figures for the profile screen."""

    total_donations: int
    last_donation_date: datetime | None = None
    days_since_last_donation: int | None = Field(
        None, description="Whole days since the most recent donation"
    )
