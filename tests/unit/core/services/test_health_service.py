"""Unit tests for HealthService."""

from unittest.mock import patch

from django.db.utils import OperationalError
from django.test import TestCase

from core.enums import HealthStatus, ReadinessState
from core.schemas.health import DependencyHealth
from core.services.health_service import HealthService


class TestHealthService(TestCase):
    """Test suite for dependency checks and their cache."""

    def setUp(self):
        """Set up test fixtures."""
        self.service = HealthService(cache_ttl_seconds=60)

    def test_liveness(self):
        response = self.service.get_liveness_status()

        self.assertEqual(response.status, "alive")
        self.assertTrue(response.service)

    @patch("core.services.health_service.django_rq")
    def test_readiness_all_healthy(self, mock_rq):
        response = self.service.get_readiness_status()

        self.assertTrue(response.ready)
        self.assertEqual(response.status, "ready")
        self.assertFalse(response.degraded)
        self.assertEqual(
            response.dependencies["database"].status, HealthStatus.HEALTHY
        )
        mock_rq.get_connection.assert_called_once_with("default")

    @patch("core.services.health_service.django_rq")
    def test_redis_down_degrades_but_stays_ready(self, mock_rq):
        mock_rq.get_connection.return_value.ping.side_effect = ConnectionError(
            "Connection refused"
        )

        response = self.service.get_readiness_status()

        self.assertTrue(response.ready)
        self.assertEqual(response.status, "degraded")
        redis = response.dependencies["redis"]
        self.assertFalse(redis.healthy)
        self.assertIn("Connection refused", redis.message)

    @patch("core.services.health_service.connection")
    def test_database_down(self, mock_connection):
        mock_connection.ensure_connection.side_effect = OperationalError("no db")

        health = self.service.check_database_health()

        self.assertFalse(health.healthy)
        self.assertEqual(health.status, HealthStatus.UNHEALTHY)

    @patch("core.services.health_service.django_rq")
    def test_results_cached_within_ttl(self, mock_rq):
        self.service.check_redis_health()
        self.service.check_redis_health()

        self.assertEqual(mock_rq.get_connection.call_count, 1)

    @patch("core.services.health_service.django_rq")
    def test_cache_expires(self, mock_rq):
        service = HealthService(cache_ttl_seconds=0)

        service.check_redis_health()
        service.check_redis_health()

        self.assertEqual(mock_rq.get_connection.call_count, 2)


class TestReadinessState(TestCase):
    @staticmethod
    def probe(healthy):
        return DependencyHealth(
            healthy=healthy,
            status=HealthStatus.HEALTHY if healthy else HealthStatus.ERROR,
            message="ok" if healthy else "down",
        )

    def test_all_healthy_is_ready(self):
        state = ReadinessState.from_probes([self.probe(True), self.probe(True)])

        self.assertIs(state, ReadinessState.READY)

    def test_any_unhealthy_is_degraded(self):
        state = ReadinessState.from_probes([self.probe(True), self.probe(False)])

        self.assertIs(state, ReadinessState.DEGRADED)

    def test_no_probes_is_ready(self):
        self.assertIs(ReadinessState.from_probes([]), ReadinessState.READY)
