"""Blood request lifecycle.

States: open -> accepted -> completed, or open -> cancelled. Every mutating
operation runs in one transaction. Notification fan-out is enqueued on
commit and never delays or fails the caller.
"""

from datetime import timedelta
from uuid import UUID

from django.db import transaction
from django.utils import timezone

import structlog

from core.constants import (
    DEFAULT_UNITS,
    EMERGENCY_BROADCAST_WINDOW_MINUTES,
    MAX_NOTES_LENGTH,
    MAX_UNITS,
    MIN_UNITS,
)
from core.enums import RequestStatus, Urgency
from core.exceptions import (
    BloodTypeNotSetError,
    DonorUnavailableError,
    EmergencyRateLimitError,
    IncompatibleBloodTypeError,
    InvalidBloodTypeError,
    InvalidTransitionError,
    InvalidUnitsError,
    InvalidUrgencyError,
    ModeNotPermittedError,
    NotesTooLongError,
    NotRequestOwnerError,
    RequestNotFoundError,
    RequestNotOpenError,
    SelfAcceptError,
)
from core.jobs.dispatch import defer
from core.models import BloodRequest, User
from core.schemas.request import (
    ActionResponse,
    BloodRequestDetail,
    CreateBloodRequest,
    EmergencyBroadcastRequest,
)
from core.services.compatibility import can_donate, is_valid_blood_type
from core.services.privacy_gate import privacy_gate
from core.services.user_service import user_service

logger = structlog.get_logger(__name__)

NOTIFY_MATCHING_DONORS_JOB = "core.jobs.notification_jobs.notify_matching_donors_job"
NOTIFY_SEEKER_ACCEPTED_JOB = "core.jobs.notification_jobs.notify_seeker_accepted_job"


class RequestLifecycleService:
    """Creates blood requests and moves them through their states."""

    def create_request(self, payload: CreateBloodRequest) -> BloodRequest:
        """Create an open request and fan it out to matching donors.

        Raises:
            ModeNotPermittedError: If the caller is not a seeker.
            InvalidBloodTypeError: If the blood type is not canonical.
            InvalidUnitsError: If units fall outside 1..10.
            InvalidUrgencyError: If urgency is not a known level.
            NotesTooLongError: If notes exceed the length bound.
        """
        units = DEFAULT_UNITS if payload.units is None else payload.units

        with transaction.atomic():
            seeker = user_service.require_current_profile(for_update=True)
            self._check_seeker(seeker, "Only seekers can create blood requests")
            self._check_blood_type(payload.blood_type)
            if not MIN_UNITS <= units <= MAX_UNITS:
                raise InvalidUnitsError()
            urgency = self._check_urgency(payload.urgency)
            self._check_notes(payload.notes)

            blood_request = BloodRequest.objects.create(
                seeker=seeker,
                blood_type=payload.blood_type,
                units=units,
                urgency=urgency,
                hospital=payload.hospital,
                city=payload.city,
                notes=payload.notes,
                status=RequestStatus.OPEN.value,
            )
            defer(NOTIFY_MATCHING_DONORS_JOB, str(blood_request.request_id))

        logger.info(
            "blood_request_created",
            request_id=str(blood_request.request_id),
            seeker_id=str(seeker.user_id),
            blood_type=blood_request.blood_type,
            urgency=urgency,
            units=units,
        )
        return blood_request

    def broadcast_emergency(self, payload: EmergencyBroadcastRequest) -> BloodRequest:
        """Create a one-unit critical request, rate limited per seeker.

        The seeker row is locked so concurrent broadcasts by the same seeker
        serialize on the rate-limit check.

        Raises:
            ModeNotPermittedError: If the caller is not a seeker.
            InvalidBloodTypeError: If the blood type is not canonical.
            NotesTooLongError: If notes exceed the length bound.
            EmergencyRateLimitError: If the seeker created an urgent or
                critical request within the window.
        """
        with transaction.atomic():
            seeker = user_service.require_current_profile(for_update=True)
            self._check_seeker(seeker, "Only seekers can broadcast emergency requests")
            self._check_blood_type(payload.blood_type)
            self._check_notes(payload.notes)

            window_start = timezone.now() - timedelta(
                minutes=EMERGENCY_BROADCAST_WINDOW_MINUTES
            )
            recent = BloodRequest.objects.filter(
                seeker=seeker,
                urgency__in=Urgency.emergency_levels(),
                created_at__gt=window_start,
            )
            if recent.exists():
                logger.warning(
                    "emergency_broadcast_rate_limited",
                    seeker_id=str(seeker.user_id),
                )
                raise EmergencyRateLimitError()

            blood_request = BloodRequest.objects.create(
                seeker=seeker,
                blood_type=payload.blood_type,
                units=1,
                urgency=Urgency.CRITICAL.value,
                city=payload.city,
                notes=payload.notes,
                status=RequestStatus.OPEN.value,
            )
            defer(NOTIFY_MATCHING_DONORS_JOB, str(blood_request.request_id))

        logger.info(
            "emergency_broadcast_created",
            request_id=str(blood_request.request_id),
            seeker_id=str(seeker.user_id),
            blood_type=blood_request.blood_type,
        )
        return blood_request

    def accept_request(self, request_id: UUID) -> ActionResponse:
        """Accept an open request as the calling donor.

        Checks run in order: mode, availability, existence, open status,
        blood type set, compatibility, not own request. The status write is
        conditional on the request still being open, so of several
        concurrent acceptances exactly one succeeds.

        Raises:
            ModeNotPermittedError, DonorUnavailableError, RequestNotFoundError,
            RequestNotOpenError, BloodTypeNotSetError,
            IncompatibleBloodTypeError, SelfAcceptError
        """
        with transaction.atomic():
            donor = user_service.require_current_profile()
            if not donor.is_donor:
                raise ModeNotPermittedError("Only donors can accept blood requests")
            if not donor.effective_availability:
                raise DonorUnavailableError()

            blood_request = self._get_locked(request_id)
            if not blood_request.is_open:
                raise RequestNotOpenError()
            if not donor.blood_type:
                raise BloodTypeNotSetError()
            if not can_donate(donor.blood_type, blood_request.blood_type):
                raise IncompatibleBloodTypeError()
            if blood_request.seeker_id == donor.pk:
                raise SelfAcceptError()

            updated = BloodRequest.objects.filter(
                pk=blood_request.pk, status=RequestStatus.OPEN.value
            ).update(
                status=RequestStatus.ACCEPTED.value,
                accepted_donor=donor,
                accepted_at=timezone.now(),
            )
            if updated == 0:
                raise RequestNotOpenError()

            defer(NOTIFY_SEEKER_ACCEPTED_JOB, str(blood_request.request_id))

        logger.info(
            "blood_request_accepted",
            request_id=str(request_id),
            donor_id=str(donor.user_id),
        )
        return ActionResponse(success=True)

    def cancel_request(self, request_id: UUID) -> ActionResponse:
        """Cancel the caller's own open request. No one is notified.

        Raises:
            RequestNotFoundError, NotRequestOwnerError, InvalidTransitionError
        """
        with transaction.atomic():
            seeker = user_service.require_current_profile()
            blood_request = self._get_locked(request_id)
            if blood_request.seeker_id != seeker.pk:
                raise NotRequestOwnerError("You can only cancel your own requests")
            if not blood_request.is_open:
                raise InvalidTransitionError("Can only cancel open requests")

            blood_request.status = RequestStatus.CANCELLED.value
            blood_request.save(update_fields=["status"])

        logger.info("blood_request_cancelled", request_id=str(request_id))
        return ActionResponse(success=True)

    def complete_request(self, request_id: UUID) -> ActionResponse:
        """Mark the caller's own accepted request as completed.

        Raises:
            RequestNotFoundError, NotRequestOwnerError, InvalidTransitionError
        """
        with transaction.atomic():
            seeker = user_service.require_current_profile()
            blood_request = self._get_locked(request_id)
            if blood_request.seeker_id != seeker.pk:
                raise NotRequestOwnerError(
                    "Only the seeker can mark a request as complete"
                )
            if blood_request.status != RequestStatus.ACCEPTED.value:
                raise InvalidTransitionError("Can only complete accepted requests")

            blood_request.status = RequestStatus.COMPLETED.value
            blood_request.save(update_fields=["status"])

        logger.info("blood_request_completed", request_id=str(request_id))
        return ActionResponse(success=True)

    def decline_request(self, request_id: UUID) -> ActionResponse:
        """Acknowledge a donor passing on a request. Nothing is stored."""
        donor = user_service.require_current_profile()
        logger.info(
            "blood_request_declined",
            request_id=str(request_id),
            donor_id=str(donor.user_id),
        )
        return ActionResponse(
            success=True, message="Request declined (not tracking yet)"
        )

    def get_request_detail(self, request_id: UUID) -> BloodRequestDetail:
        """Full request view for the caller, with contacts gated by role.

        Raises:
            RequestNotFoundError: If the request does not exist.
        """
        viewer = user_service.require_current_profile()
        blood_request = (
            BloodRequest.objects.select_related("seeker", "accepted_donor")
            .filter(pk=request_id)
            .first()
        )
        if blood_request is None:
            raise RequestNotFoundError()

        return BloodRequestDetail(
            request_id=blood_request.request_id,
            blood_type=blood_request.blood_type,
            units=blood_request.units,
            urgency=blood_request.urgency,
            hospital=blood_request.hospital,
            city=blood_request.city,
            notes=blood_request.notes,
            status=blood_request.status,
            created_at=blood_request.created_at,
            accepted_at=blood_request.accepted_at,
            seeker=privacy_gate.seeker_view(blood_request, viewer),
            donor=privacy_gate.donor_view(blood_request, viewer),
            is_seeker=blood_request.seeker_id == viewer.pk,
            is_donor=blood_request.accepted_donor_id == viewer.pk,
        )

    @staticmethod
    def _get_locked(request_id: UUID) -> BloodRequest:
        blood_request = (
            BloodRequest.objects.select_for_update().filter(pk=request_id).first()
        )
        if blood_request is None:
            raise RequestNotFoundError()
        return blood_request

    @staticmethod
    def _check_seeker(user: User, message: str) -> None:
        if not user.is_seeker:
            raise ModeNotPermittedError(message)

    @staticmethod
    def _check_blood_type(blood_type: str) -> None:
        if not is_valid_blood_type(blood_type):
            raise InvalidBloodTypeError()

    @staticmethod
    def _check_urgency(urgency: str) -> str:
        try:
            return Urgency(urgency).value
        except ValueError as e:
            raise InvalidUrgencyError() from e

    @staticmethod
    def _check_notes(notes: str | None) -> None:
        if notes is not None and len(notes) > MAX_NOTES_LENGTH:
            raise NotesTooLongError()


request_lifecycle_service = RequestLifecycleService()
