"""Donation eligibility calculation.

Pure functions shared by the profile endpoints and the reminder job.
"""

import math
from datetime import datetime, timedelta

from core.constants import DONATION_CYCLE_DAYS
from core.schemas.donation import EligibilityStatus


def days_since(last_donation_date: datetime, now: datetime) -> int:
    """Whole days elapsed, floor((now - last) / 1 day)."""
    return math.floor((now - last_donation_date) / timedelta(days=1))


def calculate_eligibility(
    last_donation_date: datetime | None, now: datetime
) -> EligibilityStatus:
    """Compute eligibility from the most recent donation.

    Args:
        last_donation_date: When the user last donated, or None.
        now: Reference time.

    Returns:
        EligibilityStatus. With no donation the user is eligible with zero
        days to wait and no next date.
    """
    if last_donation_date is None:
        return EligibilityStatus(
            is_eligible=True,
            days_until_eligible=0,
            last_donation_date=None,
            next_eligible_date=None,
            days_since_last_donation=None,
        )

    elapsed = days_since(last_donation_date, now)
    is_eligible = elapsed >= DONATION_CYCLE_DAYS

    return EligibilityStatus(
        is_eligible=is_eligible,
        days_until_eligible=max(0, DONATION_CYCLE_DAYS - elapsed),
        last_donation_date=last_donation_date,
        next_eligible_date=(
            None
            if is_eligible
            else last_donation_date + timedelta(days=DONATION_CYCLE_DAYS)
        ),
        days_since_last_donation=elapsed,
    )
