"""Liveness response schema."""

from core.schemas.base_schema_model import BaseSchemaModel


class LivenessResponse(BaseSchemaModel):
    """The process is up; no dependency is touched."""

    status: str = "alive"
    service: str
