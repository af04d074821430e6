"""Geospatial query schemas."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class NearestResult(BaseSchemaModel):
    """One hit from a nearest-neighbour query."""

    key: str
    distance_meters: float


class IndexSyncResult(BaseSchemaModel):
    """Outcome of a bulk rebuild of index entries."""

    indexed_count: int
    total: int


class NearbySearchQuery(BaseSchemaModel):
    """Origin point and radius for nearby searches (query parameters)."""

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    max_distance: float | None = Field(
        None, gt=0, description="Search radius in meters"
    )
    blood_type: str | None = Field(
        None, description="Recipient blood type; keeps only compatible donors"
    )
