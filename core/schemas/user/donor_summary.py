"""Schemas for donor discovery."""

from uuid import UUID

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class DonorSummary(BaseSchemaModel):
    """Non-sensitive donor fields returned by searches. Never carries contacts."""

    user_id: UUID
    blood_type: str | None = None
    city: str | None = None
    region: str | None = None
    is_available: bool = True
    distance_meters: float | None = Field(
        None, description="Distance from the search origin, nearby search only"
    )


class DonorSearchQuery(BaseSchemaModel):
    """Directory search filters."""

    blood_type: str | None = None
    city: str | None = None
    region: str | None = None
