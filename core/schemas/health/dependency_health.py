"""Result of probing one backing service."""

from pydantic import Field

from core.enums.health_status import HealthStatus
from core.schemas.base_schema_model import BaseSchemaModel


class DependencyHealth(BaseSchemaModel):
    """Probe result for the database or the job queue's Redis."""

    healthy: bool
    status: HealthStatus
    message: str
    response_time_ms: float | None = Field(None, ge=0)
