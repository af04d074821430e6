"""Readiness response schema."""

from pydantic import Field

from core.enums.health_status import ReadinessState
from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.health.dependency_health import DependencyHealth


class ReadinessResponse(BaseSchemaModel):
    """Readiness of the matching service; ``ready`` stays true while degraded."""

    ready: bool
    status: ReadinessState
    degraded: bool
    dependencies: dict[str, DependencyHealth] = Field(
        ..., description="Probe result per dependency, keyed 'database' and 'redis'"
    )
