"""Register recurring jobs with rq-scheduler."""

from django.conf import settings
from django.core.management.base import BaseCommand

import django_rq
import structlog

from core.jobs.notification_jobs import ELIGIBILITY_REMINDERS_JOB

logger = structlog.get_logger(__name__)

ELIGIBILITY_REMINDERS_JOB_ID = "daily-eligibility-reminders"


class Command(BaseCommand):
    """Schedule the daily eligibility reminder job.

    Re-running replaces the existing registration, so the command is safe
    to run on every deploy.
    """

    help = "Register the daily eligibility reminder job with rq-scheduler"

    def handle(self, *args, **options):
        cron = settings.ELIGIBILITY_REMINDER_CRON
        scheduler = django_rq.get_scheduler("default")

        for job in scheduler.get_jobs():
            if job.id == ELIGIBILITY_REMINDERS_JOB_ID:
                scheduler.cancel(job)

        scheduler.cron(
            cron,
            func=ELIGIBILITY_REMINDERS_JOB,
            id=ELIGIBILITY_REMINDERS_JOB_ID,
            queue_name="default",
            use_local_timezone=False,
        )

        logger.info(
            "eligibility_reminders_scheduled",
            cron=cron,
        )
        self.stdout.write(
            self.style.SUCCESS(f"Scheduled eligibility reminders ({cron})")
        )
