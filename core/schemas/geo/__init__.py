"""Geospatial schemas."""

from core.schemas.geo.nearest_result import (
    IndexSyncResult,
    NearbySearchQuery,
    NearestResult,
)

__all__ = ["IndexSyncResult", "NearbySearchQuery", "NearestResult"]
