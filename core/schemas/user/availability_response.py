"""Schema for the availability flag."""

from core.schemas.base_schema_model import BaseSchemaModel


class AvailabilityResponse(BaseSchemaModel):
    """Resolved donor availability."""

    is_available: bool
