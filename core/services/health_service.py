"""Health checks for the database and the job queue's Redis."""

import logging
import time

from django.conf import settings
from django.db import connection
from django.db.utils import OperationalError

import django_rq

from core.enums import HealthStatus, ReadinessState
from core.schemas.health import (
    DependencyHealth,
    LivenessResponse,
    ReadinessResponse,
)

logger = logging.getLogger(__name__)


class HealthService:
    """Service for performing health checks with caching."""

    def __init__(self, cache_ttl_seconds: float = 5.0) -> None:
        """Initialize the health service.

        Args:
            cache_ttl_seconds: Time to live for cached health check results
        """
        self.cache_ttl_seconds = cache_ttl_seconds
        self._cache: dict[str, tuple[DependencyHealth, float]] = {}

    def get_liveness_status(self) -> LivenessResponse:
        return LivenessResponse(
            status="alive",
            service=settings.SERVICE_NAME,
        )

    def get_readiness_status(self) -> ReadinessResponse:
        """Readiness with database and Redis checks.

        The service reports ready but degraded when a dependency is down.
        Without Redis, requests still succeed and only deferred fan-out and
        re-indexing are lost.
        """
        dependencies = {
            "database": self.check_database_health(),
            "redis": self.check_redis_health(),
        }
        state = ReadinessState.from_probes(dependencies.values())

        return ReadinessResponse(
            ready=True,
            status=state,
            degraded=state is ReadinessState.DEGRADED,
            dependencies=dependencies,
        )

    def _cached(self, name: str) -> DependencyHealth | None:
        entry = self._cache.get(name)
        if entry is None:
            return None
        health, checked_at = entry
        if time.time() - checked_at >= self.cache_ttl_seconds:
            return None
        return health

    def _store(self, name: str, health: DependencyHealth) -> DependencyHealth:
        previous = self._cache.get(name)
        if previous is not None and previous[0].healthy != health.healthy:
            if health.healthy:
                logger.info("%s connection recovered", name)
            else:
                logger.warning("%s connection lost: %s", name, health.message)
        self._cache[name] = (health, time.time())
        return health

    def check_database_health(self) -> DependencyHealth:
        """Check database connectivity without running a query."""
        cached = self._cached("database")
        if cached is not None:
            return cached

        start_time = time.perf_counter()
        try:
            connection.ensure_connection()
            health = DependencyHealth(
                healthy=True,
                status=HealthStatus.HEALTHY,
                message="Database connection successful",
                response_time_ms=(time.perf_counter() - start_time) * 1000,
            )
        except OperationalError as e:
            health = DependencyHealth(
                healthy=False,
                status=HealthStatus.UNHEALTHY,
                message=f"Database connection failed: {e!s}",
                response_time_ms=(time.perf_counter() - start_time) * 1000,
            )
        except Exception as e:
            logger.exception("Unexpected error checking database")
            health = DependencyHealth(
                healthy=False,
                status=HealthStatus.ERROR,
                message=f"Unexpected error checking database: {e!s}",
                response_time_ms=(time.perf_counter() - start_time) * 1000,
            )

        return self._store("database", health)

    def check_redis_health(self) -> DependencyHealth:
        """Ping the Redis instance backing the default job queue."""
        cached = self._cached("redis")
        if cached is not None:
            return cached

        start_time = time.perf_counter()
        try:
            django_rq.get_connection("default").ping()
            health = DependencyHealth(
                healthy=True,
                status=HealthStatus.HEALTHY,
                message="Redis connection successful",
                response_time_ms=(time.perf_counter() - start_time) * 1000,
            )
        except Exception as e:
            health = DependencyHealth(
                healthy=False,
                status=HealthStatus.ERROR,
                message=f"Redis connection failed: {e!s}",
                response_time_ms=(time.perf_counter() - start_time) * 1000,
            )

        return self._store("redis", health)


health_service = HealthService()
