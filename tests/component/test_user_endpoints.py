"""Component tests for the current-user profile endpoints."""

from unittest.mock import patch

from core.models import User
from core.services.downstream.geocoding_client import Place
from tests.base import BaseComponentTest, make_token
from tests.factories import BloodRequestFactory, DonorFactory, UserFactory

INDEX_USER = "core.jobs.geospatial_jobs.index_user_job"


class TestCurrentUserEndpoint(BaseComponentTest):
    """GET/POST /api/v1/users/me."""

    def test_bootstrap_creates_then_returns_existing(self):
        token = make_token("auth|fresh", email="fresh@example.com", name="Fresh")
        headers = {"HTTP_AUTHORIZATION": f"Bearer {token}"}

        created = self.client.post(
            "/api/v1/users/me",
            {"bloodType": "A+"},
            content_type="application/json",
            **headers,
        )
        again = self.client.post(
            "/api/v1/users/me", {}, content_type="application/json", **headers
        )

        self.assertEqual(created.status_code, 201)
        self.assertEqual(created.json()["mode"], "donor")
        self.assertEqual(created.json()["email"], "fresh@example.com")
        self.assertEqual(again.status_code, 200)
        self.assertEqual(User.objects.filter(external_id="auth|fresh").count(), 1)

    def test_profile_before_bootstrap_is_not_found(self):
        token = make_token("auth|stranger")

        response = self.client.get(
            "/api/v1/users/me", HTTP_AUTHORIZATION=f"Bearer {token}"
        )

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["error"], "user_not_found")

    def test_profile(self):
        user = DonorFactory(blood_type="B-")

        data = self.client.get("/api/v1/users/me", **self.auth_headers(user)).json()

        self.assertEqual(data["user_id"], str(user.user_id))
        self.assertEqual(data["blood_type"], "B-")
        self.assertTrue(data["is_available"])
        self.assertTrue(data["has_push_token"])
        self.assertNotIn("push_token", data)


class TestProfileUpdateEndpoints(BaseComponentTest):
    def setUp(self):
        super().setUp()
        self.user = UserFactory()
        self.headers = self.auth_headers(self.user)

    def test_blood_type_update_makes_donor(self):
        response = self.client.put(
            "/api/v1/users/me/blood-type",
            {"blood_type": "O+"},
            content_type="application/json",
            **self.headers,
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["mode"], "donor")

    def test_invalid_mode_is_bad_request(self):
        response = self.client.put(
            "/api/v1/users/me/mode",
            {"mode": "volunteer"},
            content_type="application/json",
            **self.headers,
        )

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["error"], "bad_request")

    def test_location_update_geocodes_and_queues_reindex(self):
        with (
            patch(
                "core.services.user_service.geocoding_client.reverse",
                return_value=Place(city="Sumqayit", region="Absheron"),
            ),
            self.captureOnCommitCallbacks(execute=True),
        ):
            response = self.client.put(
                "/api/v1/users/me/location",
                {"latitude": 40.59, "longitude": 49.67},
                content_type="application/json",
                **self.headers,
            )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["city"], "Sumqayit")
        self.assertEqual(self.enqueued_jobs(), [INDEX_USER])

    def test_out_of_range_latitude(self):
        response = self.client.put(
            "/api/v1/users/me/location",
            {"latitude": 91, "longitude": 49.67},
            content_type="application/json",
            **self.headers,
        )

        self.assertEqual(response.status_code, 400)

    def test_phone_update_does_not_reindex(self):
        with self.captureOnCommitCallbacks(execute=True):
            response = self.client.put(
                "/api/v1/users/me/phone",
                {"phone": "+994551234567"},
                content_type="application/json",
                **self.headers,
            )

        self.assertEqual(response.json()["phone"], "+994551234567")
        self.assertEqual(self.enqueued_jobs(), [])

    def test_partial_profile_patch(self):
        self.user.city = "Baku"
        self.user.save()

        response = self.client.patch(
            "/api/v1/users/me/profile",
            {"preferredDonationCenter": "Central Blood Bank of Azerbaijan"},
            content_type="application/json",
            **self.headers,
        )

        data = response.json()
        self.assertEqual(data["city"], "Baku")
        self.assertEqual(
            data["preferred_donation_center"], "Central Blood Bank of Azerbaijan"
        )

    def test_skip_location(self):
        response = self.client.post("/api/v1/users/me/location/skip", **self.headers)

        self.assertFalse(response.json()["location_granted"])

    def test_push_token(self):
        response = self.client.put(
            "/api/v1/users/me/push-token",
            {"pushToken": "ExponentPushToken[new]"},
            content_type="application/json",
            **self.headers,
        )

        self.assertTrue(response.json()["has_push_token"])


class TestAvailabilityAndPreferenceEndpoints(BaseComponentTest):
    def setUp(self):
        super().setUp()
        self.user = DonorFactory()
        self.headers = self.auth_headers(self.user)

    def test_toggle_availability(self):
        first = self.client.post("/api/v1/users/me/availability/toggle", **self.headers)
        current = self.client.get("/api/v1/users/me/availability", **self.headers)

        self.assertEqual(first.json(), {"is_available": False})
        self.assertEqual(current.json(), {"is_available": False})

    def test_preferences_partial_update(self):
        response = self.client.patch(
            "/api/v1/users/me/notification-preferences",
            {"notifyRequestMatch": False},
            content_type="application/json",
            **self.headers,
        )

        self.assertEqual(
            response.json(),
            {
                "notify_request_match": False,
                "notify_request_accepted": True,
                "notify_eligibility": True,
            },
        )

    def test_stats(self):
        BloodRequestFactory(accepted_donor=self.user, status="completed")

        response = self.client.get("/api/v1/users/me/stats", **self.headers)

        self.assertEqual(response.json()["helped_count"], 1)
