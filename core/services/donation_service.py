"""Donation history and eligibility for the authenticated caller."""

from uuid import UUID

from django.utils import timezone

import structlog

from core.exceptions import (
    DonationNotFoundError,
    FutureDonationDateError,
    NotDonationOwnerError,
)
from core.models import Donation
from core.schemas.donation import (
    AddDonationRequest,
    DonationDetail,
    DonationHistory,
    DonationStats,
    EligibilityStatus,
)
from core.services.eligibility import calculate_eligibility, days_since
from core.services.user_service import user_service

logger = structlog.get_logger(__name__)


def to_detail(donation: Donation) -> DonationDetail:
    return DonationDetail(
        donation_id=donation.donation_id,
        donation_date=donation.donation_date,
        donation_center=donation.donation_center,
        notes=donation.notes,
        created_at=donation.created_at,
    )


class DonationService:
    """Records donations and derives eligibility from them."""

    def add_donation(self, payload: AddDonationRequest) -> DonationDetail:
        """Record a past donation.

        Raises:
            FutureDonationDateError: If the date lies in the future.
        """
        if payload.donation_date > timezone.now():
            raise FutureDonationDateError()

        user = user_service.require_current_profile()
        donation = Donation.objects.create(
            user=user,
            donation_date=payload.donation_date,
            donation_center=payload.donation_center,
            notes=payload.notes,
        )
        logger.info(
            "donation_recorded",
            donation_id=str(donation.donation_id),
            user_id=str(user.user_id),
        )
        return to_detail(donation)

    def delete_donation(self, donation_id: UUID) -> None:
        """Delete one of the caller's donations.

        Raises:
            DonationNotFoundError: If no such donation exists.
            NotDonationOwnerError: If it belongs to someone else.
        """
        user = user_service.require_current_profile()
        donation = Donation.objects.filter(pk=donation_id).first()
        if donation is None:
            raise DonationNotFoundError()
        if donation.user_id != user.pk:
            raise NotDonationOwnerError()

        donation.delete()
        logger.info(
            "donation_deleted",
            donation_id=str(donation_id),
            user_id=str(user.user_id),
        )

    def get_history(self) -> DonationHistory:
        user = user_service.require_current_profile()
        donations = [to_detail(d) for d in user.donations.order_by("-donation_date")]
        return DonationHistory(donations=donations, total=len(donations))

    def get_last_donation(self) -> DonationDetail | None:
        user = user_service.require_current_profile()
        donation = user.donations.order_by("-donation_date").first()
        return to_detail(donation) if donation else None

    def get_stats(self) -> DonationStats:
        user = user_service.require_current_profile()
        donations = user.donations.order_by("-donation_date")
        last = donations.first()
        return DonationStats(
            total_donations=donations.count(),
            last_donation_date=last.donation_date if last else None,
            days_since_last_donation=(
                days_since(last.donation_date, timezone.now()) if last else None
            ),
        )

    def get_eligibility(self) -> EligibilityStatus:
        user = user_service.require_current_profile()
        last_date = (
            user.donations.order_by("-donation_date")
            .values_list("donation_date", flat=True)
            .first()
        )
        return calculate_eligibility(last_date, timezone.now())


donation_service = DonationService()
