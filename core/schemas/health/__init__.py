"""Liveness, readiness and per-dependency probe schemas."""

from core.schemas.health.dependency_health import DependencyHealth
from core.schemas.health.response.liveness_response import LivenessResponse
from core.schemas.health.response.readiness_response import ReadinessResponse

__all__ = ["DependencyHealth", "LivenessResponse", "ReadinessResponse"]
