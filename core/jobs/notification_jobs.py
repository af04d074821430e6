"""Background jobs for notification fan-out and push delivery.

These run on RQ workers. Failures are logged; nothing is retried.
"""

from typing import Any

import structlog

from core.services.downstream.push_client import push_client
from core.services.fanout_service import notification_fanout_service

logger = structlog.get_logger(__name__)

ELIGIBILITY_REMINDERS_JOB = "core.jobs.notification_jobs.send_eligibility_reminders_job"


def notify_matching_donors_job(request_id: str) -> int:
    """Fan a new blood request out to compatible donors.

    Args:
        request_id: UUID of the request, as a string.

    Returns:
        Number of donors notified.
    """
    logger.info("notify_matching_donors_job_started", request_id=request_id)
    return notification_fanout_service.notify_matching_donors(request_id)


def notify_seeker_accepted_job(request_id: str) -> bool:
    """Tell a seeker their request was accepted.

    Args:
        request_id: UUID of the request, as a string.
    """
    logger.info("notify_seeker_accepted_job_started", request_id=request_id)
    return notification_fanout_service.notify_seeker_accepted(request_id)


def send_push_notification_job(
    token: str,
    title: str,
    body: str,
    data: dict[str, Any] | None = None,
) -> bool:
    """Deliver one push message. A failed delivery is logged, not raised."""
    delivered = push_client.send(token, title, body, data)
    if not delivered:
        logger.warning(
            "push_notification_not_delivered",
            title=title,
            notification_type=(data or {}).get("type"),
        )
    return delivered


def send_eligibility_reminders_job() -> int:
    """Daily job: remind donors who just became eligible again."""
    logger.info("eligibility_reminders_job_started")
    return notification_fanout_service.send_eligibility_reminders()
