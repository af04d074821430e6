"""Donation eligibility schema."""

from datetime import datetime

from core.schemas.base_schema_model import BaseSchemaModel


class EligibilityStatus(BaseSchemaModel):
    """Whether a donor may give blood again, based on the last donation."""

    is_eligible: bool
    days_until_eligible: int
    last_donation_date: datetime | None = None
    next_eligible_date: datetime | None = None
    days_since_last_donation: int | None = None
