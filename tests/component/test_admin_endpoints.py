"""Component tests for the admin endpoints."""

from core.constants import ADMIN_SCOPE, DONATION_CENTERS
from core.jobs.geospatial_jobs import SYNC_GEOSPATIAL_INDEX_JOB as SYNC_JOB
from core.jobs.notification_jobs import ELIGIBILITY_REMINDERS_JOB as REMINDERS_JOB
from tests.base import BaseComponentTest
from tests.factories import UserFactory


class TestAdminEndpoints(BaseComponentTest):
    def setUp(self):
        super().setUp()
        self.admin = UserFactory()
        self.admin_headers = self.auth_headers(self.admin, [ADMIN_SCOPE])

    def test_trigger_reminders_requires_admin_scope(self):
        response = self.client.post(
            "/api/v1/admin/jobs/eligibility-reminders",
            **self.auth_headers(self.admin, ["profile"]),
        )

        self.assertEqual(response.status_code, 403)
        self.mock_queue.enqueue.assert_not_called()

    def test_trigger_reminders_queues_job(self):
        response = self.client.post(
            "/api/v1/admin/jobs/eligibility-reminders", **self.admin_headers
        )

        self.assertEqual(response.status_code, 202)
        self.assertEqual(response.json(), {"queued": True})
        self.assertEqual(self.enqueued_jobs(), [REMINDERS_JOB])

    def test_queue_down_is_service_unavailable(self):
        self.mock_queue.enqueue.side_effect = ConnectionError("redis down")

        response = self.client.post("/api/v1/admin/geo/sync", **self.admin_headers)

        self.assertEqual(response.status_code, 503)
        self.assertEqual(response.json()["error"], "service_unavailable")

    def test_geo_sync_queues_job(self):
        self.client.post("/api/v1/admin/geo/sync", **self.admin_headers)

        self.assertEqual(self.enqueued_jobs(), [SYNC_JOB])

    def test_seed_centers(self):
        first = self.client.post("/api/v1/admin/centers/seed", **self.admin_headers)
        second = self.client.post("/api/v1/admin/centers/seed", **self.admin_headers)

        self.assertEqual(first.status_code, 201)
        self.assertEqual(first.json()["created_count"], len(DONATION_CENTERS))
        self.assertEqual(second.status_code, 200)
        self.assertFalse(second.json()["seeded"])
