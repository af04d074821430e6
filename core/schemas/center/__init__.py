"""Donation center schemas."""

from core.schemas.center.donation_center_detail import (
    CenterListQuery,
    DonationCenterDetail,
    SeedCentersResult,
)

__all__ = ["CenterListQuery", "DonationCenterDetail", "SeedCentersResult"]
