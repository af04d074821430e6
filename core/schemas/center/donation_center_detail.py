"""Donation center schemas."""

from uuid import UUID

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class DonationCenterDetail(BaseSchemaModel):
    """A donation center, with distance when returned by a nearby search."""

    center_id: UUID
    name: str
    address: str
    city: str
    phone: str | None = None
    latitude: float
    longitude: float
    hours: str | None = None
    distance_meters: float | None = None


class CenterListQuery(BaseSchemaModel):
    """Optional city filter for the center list."""

    city: str | None = Field(None, max_length=120)


class SeedCentersResult(BaseSchemaModel):
    """Outcome of loading the fixed center list."""

    seeded: bool = Field(..., description="False when centers already existed")
    created_count: int
    indexed_count: int
