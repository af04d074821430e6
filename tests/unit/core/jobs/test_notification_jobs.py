"""Tests for notification background jobs."""

from unittest.mock import patch

from django.test import TestCase
from django.utils.module_loading import import_string

from core.jobs import notification_jobs


class TestNotificationJobs(TestCase):
    @patch("core.jobs.notification_jobs.notification_fanout_service")
    def test_matching_donors_job_delegates(self, mock_fanout):
        mock_fanout.notify_matching_donors.return_value = 4

        self.assertEqual(notification_jobs.notify_matching_donors_job("r-1"), 4)
        mock_fanout.notify_matching_donors.assert_called_once_with("r-1")

    @patch("core.jobs.notification_jobs.notification_fanout_service")
    def test_seeker_accepted_job_delegates(self, mock_fanout):
        notification_jobs.notify_seeker_accepted_job("r-2")

        mock_fanout.notify_seeker_accepted.assert_called_once_with("r-2")

    def test_reminder_job_path_resolves_to_job(self):
        self.assertIs(
            import_string(notification_jobs.ELIGIBILITY_REMINDERS_JOB),
            notification_jobs.send_eligibility_reminders_job,
        )

    @patch("core.jobs.notification_jobs.notification_fanout_service")
    def test_eligibility_job_delegates(self, mock_fanout):
        mock_fanout.send_eligibility_reminders.return_value = 2

        self.assertEqual(notification_jobs.send_eligibility_reminders_job(), 2)

    @patch("core.jobs.notification_jobs.push_client")
    def test_push_job_sends(self, mock_push):
        mock_push.send.return_value = True

        delivered = notification_jobs.send_push_notification_job(
            "ExponentPushToken[a]", "Title", "Body", {"type": "request_match"}
        )

        self.assertTrue(delivered)
        mock_push.send.assert_called_once_with(
            "ExponentPushToken[a]", "Title", "Body", {"type": "request_match"}
        )

    @patch("core.jobs.notification_jobs.logger")
    @patch("core.jobs.notification_jobs.push_client")
    def test_push_failure_logged_not_raised(self, mock_push, mock_logger):
        mock_push.send.return_value = False

        delivered = notification_jobs.send_push_notification_job(
            "ExponentPushToken[a]", "Title", "Body", {"type": "eligibility_reminder"}
        )

        self.assertFalse(delivered)
        mock_logger.warning.assert_called_once_with(
            "push_notification_not_delivered",
            title="Title",
            notification_type="eligibility_reminder",
        )
