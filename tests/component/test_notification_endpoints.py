"""Component tests for the in-app notification inbox endpoints."""

from tests.base import BaseComponentTest
from tests.factories import DonorFactory, NotificationFactory


class TestNotificationEndpoints(BaseComponentTest):
    def setUp(self):
        super().setUp()
        self.user = DonorFactory()
        self.headers = self.auth_headers(self.user)

    def test_list_and_unread_count(self):
        NotificationFactory.create_batch(2, user=self.user)
        NotificationFactory(user=self.user, is_read=True)

        inbox = self.client.get("/api/v1/notifications", **self.headers).json()
        unread = self.client.get(
            "/api/v1/notifications/unread-count", **self.headers
        ).json()

        self.assertEqual(inbox["count"], 3)
        self.assertEqual(unread, {"count": 2})

    def test_mark_read(self):
        notification = NotificationFactory(user=self.user)

        response = self.client.post(
            f"/api/v1/notifications/{notification.notification_id}/read",
            **self.headers,
        )

        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.json()["is_read"])

    def test_mark_read_of_other_user_forbidden(self):
        notification = NotificationFactory()

        response = self.client.post(
            f"/api/v1/notifications/{notification.notification_id}/read",
            **self.headers,
        )

        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.json()["error"], "not_notification_owner")

    def test_mark_all_read(self):
        NotificationFactory.create_batch(3, user=self.user)

        response = self.client.post("/api/v1/notifications/read-all", **self.headers)

        self.assertEqual(response.json(), {"updated_count": 3})
