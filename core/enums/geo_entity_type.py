"""Geospatial index entity type enumeration."""

from enum import Enum


class GeoEntityType(str, Enum):
    """Kinds of subjects stored in the geospatial index."""

    USER = "user"
    CENTER = "center"
