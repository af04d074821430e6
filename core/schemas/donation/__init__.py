"""Donation schemas."""

from core.schemas.donation.add_donation_request import AddDonationRequest
from core.schemas.donation.donation_detail import (
    DonationDetail,
    DonationHistory,
    DonationStats,
)
from core.schemas.donation.eligibility_status import EligibilityStatus

__all__ = [
    "AddDonationRequest",
    "DonationDetail",
    "DonationHistory",
    "DonationStats",
    "EligibilityStatus",
]
