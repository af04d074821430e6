"""Health states for dependencies and for the service as a whole."""

from enum import Enum


class HealthStatus(str, Enum):
    """Outcome of a single dependency probe."""

    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
    ERROR = "error"


class ReadinessState(str, Enum):
    """Overall readiness.

    DEGRADED still accepts traffic: without Redis only deferred fan-out and
    re-indexing are lost.
    """

    READY = "ready"
    DEGRADED = "degraded"

    @classmethod
    def from_probes(cls, probes) -> "ReadinessState":
        """DEGRADED when any probe reports unhealthy."""
        return cls.READY if all(p.healthy for p in probes) else cls.DEGRADED
