"""Notification fan-out for request events and eligibility reminders.

Each recipient gets an in-app Notification row plus a push delivery job
enqueued after the rows commit. Push delivery is best-effort.
"""

from datetime import datetime
from uuid import UUID

from django.db import transaction
from django.db.models import Q
from django.utils import timezone

import structlog

from core.constants import (
    DONATION_CYCLE_DAYS,
    ELIGIBILITY_REMINDER_MAX_DAYS,
    MAX_FANOUT_RECIPIENTS,
)
from core.enums import NotificationType, UserMode, Urgency
from core.jobs.dispatch import defer
from core.models import BloodRequest, Donation, Notification, User
from core.services.compatibility import compatible_donors
from core.services.eligibility import days_since

logger = structlog.get_logger(__name__)

SEND_PUSH_JOB = "core.jobs.notification_jobs.send_push_notification_job"

ACCEPTED_TITLE = "Donor Found!"
ACCEPTED_BODY = (
    "A donor has accepted your blood request. Check the request for contact details."
)
REMINDER_TITLE = "You can donate again!"
REMINDER_BODY = (
    f"It's been {DONATION_CYCLE_DAYS} days since your last donation. "
    "You're eligible to donate blood."
)


def match_title(urgency: str) -> str:
    """Push title for a new request, by urgency."""
    if urgency == Urgency.CRITICAL.value:
        return "CRITICAL Blood Request!"
    if urgency == Urgency.URGENT.value:
        return "Urgent Blood Request!"
    return "New Blood Request"


def match_body(blood_type: str, city: str | None) -> str:
    """Push body for a new request, naming the city when known."""
    body = f"{blood_type} blood needed"
    if city:
        body += f" in {city}"
    return body


def _not_false(field: str) -> Q:
    """Match rows where a nullable boolean is unset or true."""
    return Q(**{f"{field}__isnull": True}) | Q(**{field: True})


class NotificationFanoutService:
    """Selects recipients for an event and writes their notifications."""

    def matching_donors(self, blood_request: BloodRequest):
        """Donors who should hear about a new request, capped at the fan-out bound.

        Which donors fall inside the cap is not prioritized; ordering by
        creation time only keeps the selection deterministic.
        """
        donor_types = compatible_donors(blood_request.blood_type)
        return (
            User.objects.filter(
                mode__in=UserMode.donor_modes(),
                blood_type__in=donor_types,
            )
            .filter(_not_false("is_available"))
            .filter(_not_false("notify_request_match"))
            .exclude(push_token__isnull=True)
            .exclude(push_token="")
            .exclude(pk=blood_request.seeker_id)
            .order_by("created_at")[:MAX_FANOUT_RECIPIENTS]
        )

    def notify_matching_donors(self, request_id: UUID | str) -> int:
        """Notify compatible donors about a newly created request.

        Returns:
            Number of donors notified. Zero if the request is gone or no
            longer open.
        """
        blood_request = BloodRequest.objects.filter(pk=request_id).first()
        if blood_request is None:
            logger.warning("fanout_request_missing", request_id=str(request_id))
            return 0
        if not blood_request.is_open:
            logger.info(
                "fanout_request_not_open",
                request_id=str(request_id),
                status=blood_request.status,
            )
            return 0

        title = match_title(blood_request.urgency)
        body = match_body(blood_request.blood_type, blood_request.city)
        donors = list(self.matching_donors(blood_request))

        with transaction.atomic():
            Notification.objects.bulk_create(
                [
                    Notification(
                        user=donor,
                        notification_type=NotificationType.REQUEST_MATCH.value,
                        title=title,
                        body=body,
                        blood_request=blood_request,
                    )
                    for donor in donors
                ]
            )
            for donor in donors:
                defer(
                    SEND_PUSH_JOB,
                    donor.push_token,
                    title,
                    body,
                    {
                        "type": NotificationType.REQUEST_MATCH.value,
                        "requestId": str(blood_request.request_id),
                    },
                )

        logger.info(
            "request_match_fanout_completed",
            request_id=str(blood_request.request_id),
            blood_type=blood_request.blood_type,
            urgency=blood_request.urgency,
            notified_count=len(donors),
        )
        return len(donors)

    def notify_seeker_accepted(self, request_id: UUID | str) -> bool:
        """Tell the seeker a donor accepted their request.

        Returns:
            True if an in-app notification was written.
        """
        blood_request = (
            BloodRequest.objects.select_related("seeker")
            .filter(pk=request_id)
            .first()
        )
        if blood_request is None:
            logger.warning("accepted_request_missing", request_id=str(request_id))
            return False

        seeker = blood_request.seeker
        if not seeker.wants_request_accepted:
            logger.info(
                "seeker_opted_out_of_accepted",
                request_id=str(request_id),
                seeker_id=str(seeker.user_id),
            )
            return False

        with transaction.atomic():
            Notification.objects.create(
                user=seeker,
                notification_type=NotificationType.REQUEST_ACCEPTED.value,
                title=ACCEPTED_TITLE,
                body=ACCEPTED_BODY,
                blood_request=blood_request,
            )
            if seeker.push_token:
                defer(
                    SEND_PUSH_JOB,
                    seeker.push_token,
                    ACCEPTED_TITLE,
                    ACCEPTED_BODY,
                    {
                        "type": NotificationType.REQUEST_ACCEPTED.value,
                        "requestId": str(blood_request.request_id),
                    },
                )

        logger.info(
            "seeker_accepted_notified",
            request_id=str(request_id),
            seeker_id=str(seeker.user_id),
            push=bool(seeker.push_token),
        )
        return True

    def send_eligibility_reminders(self, now: datetime | None = None) -> int:
        """Remind donors who have just become eligible to donate again.

        A donor is reminded when their last donation is 56 or 57 whole days
        old and no reminder has been stamped since that donation.

        Args:
            now: Reference time, defaults to the current time.

        Returns:
            Number of reminders sent.
        """
        now = now or timezone.now()
        candidates = (
            User.objects.filter(mode__in=UserMode.donor_modes())
            .filter(_not_false("notify_eligibility"))
            .exclude(push_token__isnull=True)
            .exclude(push_token="")
        )

        sent = 0
        for user in candidates.iterator():
            last = (
                Donation.objects.filter(user=user)
                .order_by("-donation_date")
                .values_list("donation_date", flat=True)
                .first()
            )
            if last is None:
                continue

            elapsed = days_since(last, now)
            if not DONATION_CYCLE_DAYS <= elapsed <= ELIGIBILITY_REMINDER_MAX_DAYS:
                continue
            if (
                user.last_eligibility_reminder_at is not None
                and user.last_eligibility_reminder_at > last
            ):
                continue

            self._remind(user, now)
            sent += 1

        logger.info("eligibility_reminders_sent", reminders_sent=sent)
        return sent

    @staticmethod
    def _remind(user: User, now: datetime) -> None:
        with transaction.atomic():
            Notification.objects.create(
                user=user,
                notification_type=NotificationType.ELIGIBILITY_REMINDER.value,
                title=REMINDER_TITLE,
                body=REMINDER_BODY,
            )
            User.objects.filter(pk=user.pk).update(last_eligibility_reminder_at=now)
            defer(
                SEND_PUSH_JOB,
                user.push_token,
                REMINDER_TITLE,
                REMINDER_BODY,
                {"type": NotificationType.ELIGIBILITY_REMINDER.value},
            )
        logger.debug("eligibility_reminder_sent", user_id=str(user.user_id))


notification_fanout_service = NotificationFanoutService()
