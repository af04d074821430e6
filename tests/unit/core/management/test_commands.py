"""Tests for management commands."""

from io import StringIO
from unittest.mock import MagicMock, patch

from django.core.management import call_command
from django.test import TestCase, override_settings

from core.models import DonationCenter


class TestSeedCentersCommand(TestCase):
    def test_seeds_then_reports_existing(self):
        out = StringIO()

        call_command("seed_centers", stdout=out)
        call_command("seed_centers", stdout=out)

        output = out.getvalue()
        self.assertIn("Created", output)
        self.assertIn("already present", output)
        self.assertGreater(DonationCenter.objects.count(), 0)


class TestSyncGeospatialIndexCommand(TestCase):
    @patch("core.management.commands.sync_geospatial_index.sync_geospatial_index_job")
    def test_reports_counts(self, mock_job):
        mock_job.return_value = {
            "users_indexed": 3,
            "users_total": 5,
            "centers_indexed": 2,
        }
        out = StringIO()

        call_command("sync_geospatial_index", stdout=out)

        self.assertIn("Indexed 3 of 5 users and 2 centers", out.getvalue())


@override_settings(ELIGIBILITY_REMINDER_CRON="0 9 * * *")
class TestScheduleJobsCommand(TestCase):
    @patch("core.management.commands.schedule_jobs.django_rq")
    def test_replaces_existing_registration(self, mock_rq):
        scheduler = mock_rq.get_scheduler.return_value
        stale = MagicMock(id="daily-eligibility-reminders")
        other = MagicMock(id="something-else")
        scheduler.get_jobs.return_value = [stale, other]

        call_command("schedule_jobs", stdout=StringIO())

        scheduler.cancel.assert_called_once_with(stale)
        scheduler.cron.assert_called_once_with(
            "0 9 * * *",
            func="core.jobs.notification_jobs.send_eligibility_reminders_job",
            id="daily-eligibility-reminders",
            queue_name="default",
            use_local_timezone=False,
        )
