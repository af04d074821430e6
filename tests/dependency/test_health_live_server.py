"""Dependency tests for health check endpoints.

These issue real HTTP requests against a live server. Run them with
PostgreSQL and Redis available, as in docker-compose.
"""

from django.test import LiveServerTestCase

import requests


class TestHealthCheckEndpointDependency(LiveServerTestCase):
    """Dependency tests for health check endpoints with real HTTP requests."""

    def test_liveness_endpoint_responds_to_http_request(self):
        response = requests.get(
            f"{self.live_server_url}/api/v1/health/live", timeout=5
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "alive")

    def test_readiness_endpoint_responds_to_http_request(self):
        """Readiness answers 200 whether dependencies are up or degraded."""
        response = requests.get(
            f"{self.live_server_url}/api/v1/health/ready", timeout=5
        )
        self.assertEqual(response.status_code, 200)

        data = response.json()
        self.assertIn(data["status"], ["ready", "degraded"])
        self.assertTrue(data["ready"])
        self.assertIn("database", data["dependencies"])
        self.assertIn("redis", data["dependencies"])
