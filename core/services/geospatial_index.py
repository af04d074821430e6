"""Geospatial index of located donors and donation centers.

The index is a derived table (GeoEntry) rebuilt from User and DonationCenter
records. Nearest-neighbour queries narrow candidates with a latitude and
longitude bounding box and then rank them by great-circle distance.
"""

import math
from collections.abc import Collection, Mapping
from typing import Any
from uuid import UUID

from django.db import transaction

import structlog

from core.constants import GEO_NO_BLOOD_TYPE, GEO_NO_CITY, GEO_UNKNOWN_BLOOD_TYPE
from core.enums import GeoEntityType
from core.models import DonationCenter, GeoEntry, User
from core.schemas.geo import IndexSyncResult, NearestResult

logger = structlog.get_logger(__name__)

EARTH_RADIUS_METERS = 6_371_000.0

FILTERABLE_ATTRIBUTES = frozenset({"entity_type", "blood_type", "is_available", "city"})


def haversine_meters(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance between two points in meters."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1))
        * math.cos(math.radians(lat2))
        * math.sin(d_lon / 2) ** 2
    )
    return 2 * EARTH_RADIUS_METERS * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def bounding_box(
    latitude: float, longitude: float, distance_meters: float
) -> dict[str, float]:
    """Lookup bounds that contain every point within distance_meters.

    Longitude bounds are dropped near the poles and across the antimeridian,
    where a simple min/max range would exclude valid points.
    """
    lat_delta = math.degrees(distance_meters / EARTH_RADIUS_METERS)
    bounds = {
        "latitude__gte": max(-90.0, latitude - lat_delta),
        "latitude__lte": min(90.0, latitude + lat_delta),
    }

    cos_lat = math.cos(math.radians(latitude))
    if cos_lat < 1e-6:
        return bounds

    lon_delta = lat_delta / cos_lat
    min_lon, max_lon = longitude - lon_delta, longitude + lon_delta
    if min_lon >= -180.0 and max_lon <= 180.0:
        bounds["longitude__gte"] = min_lon
        bounds["longitude__lte"] = max_lon
    return bounds


class GeospatialIndex:
    """Keyed point index with attribute filters."""

    def upsert(
        self,
        key: str,
        latitude: float,
        longitude: float,
        entity_type: GeoEntityType | str,
        blood_type: str = GEO_NO_BLOOD_TYPE,
        is_available: bool = True,
        city: str = GEO_NO_CITY,
    ) -> bool:
        """Insert or replace the entry for key.

        Returns:
            True if a row was written, False if the stored entry was identical.
        """
        values = {
            "entity_type": GeoEntityType(entity_type).value,
            "latitude": latitude,
            "longitude": longitude,
            "blood_type": blood_type,
            "is_available": is_available,
            "city": city,
        }

        with transaction.atomic():
            entry = GeoEntry.objects.select_for_update().filter(key=key).first()
            if entry is None:
                GeoEntry.objects.create(key=key, **values)
                return True

            if all(getattr(entry, field) == value for field, value in values.items()):
                return False

            for field, value in values.items():
                setattr(entry, field, value)
            entry.save()
            return True

    def remove(self, key: str) -> bool:
        """Delete the entry for key. Removing an absent key is not an error.

        Returns:
            True if an entry existed.
        """
        deleted, _ = GeoEntry.objects.filter(key=key).delete()
        return deleted > 0

    def contains(self, key: str) -> bool:
        return GeoEntry.objects.filter(key=key).exists()

    def nearest(
        self,
        latitude: float,
        longitude: float,
        limit: int,
        max_distance_meters: float | None = None,
        filters: Mapping[str, Any] | None = None,
    ) -> list[NearestResult]:
        """Entries closest to the origin, ascending by distance.

        Args:
            latitude: Origin latitude.
            longitude: Origin longitude.
            limit: Maximum number of results.
            max_distance_meters: Optional search radius.
            filters: Attribute name to a required value or a collection of
                accepted values. Keys must be in FILTERABLE_ATTRIBUTES.

        Returns:
            Up to ``limit`` NearestResult items.

        Raises:
            ValueError: If a filter names an unknown attribute.
        """
        if limit <= 0:
            return []

        queryset = GeoEntry.objects.all()

        for attribute, expected in (filters or {}).items():
            if attribute not in FILTERABLE_ATTRIBUTES:
                raise ValueError(f"Unknown geospatial filter: {attribute}")
            if isinstance(expected, Collection) and not isinstance(expected, str):
                queryset = queryset.filter(**{f"{attribute}__in": list(expected)})
            else:
                queryset = queryset.filter(**{attribute: expected})

        if max_distance_meters is not None:
            queryset = queryset.filter(
                **bounding_box(latitude, longitude, max_distance_meters)
            )

        hits = []
        for key, lat, lon in queryset.values_list("key", "latitude", "longitude"):
            distance = haversine_meters(latitude, longitude, lat, lon)
            if max_distance_meters is None or distance <= max_distance_meters:
                hits.append((distance, key))

        hits.sort()
        return [
            NearestResult(key=key, distance_meters=distance)
            for distance, key in hits[:limit]
        ]


class GeoIndexingService:
    """Keeps the geospatial index in line with source records."""

    def __init__(self, index: GeospatialIndex) -> None:
        """Initialize the indexing service.

        Args:
            index: Index to maintain.
        """
        self.index = index

    def index_user(self, user_id: UUID | str) -> None:
        """Recompute one user's inclusion and write or drop their entry."""
        user = User.objects.filter(user_id=user_id).first()
        if user is None:
            self.index.remove(str(user_id))
            logger.info("geo_user_missing_removed", user_id=str(user_id))
            return

        if not user.is_geo_indexable:
            if self.index.remove(str(user.user_id)):
                logger.info("geo_user_removed", user_id=str(user.user_id))
            return

        changed = self.index.upsert(
            key=str(user.user_id),
            latitude=user.latitude,
            longitude=user.longitude,
            entity_type=GeoEntityType.USER,
            blood_type=user.blood_type or GEO_UNKNOWN_BLOOD_TYPE,
            is_available=user.effective_availability,
            city=GEO_NO_CITY,
        )
        if changed:
            logger.info("geo_user_indexed", user_id=str(user.user_id))

    def index_center(self, center_id: UUID | str) -> None:
        """Write the entry for one center, or drop it if the center is gone."""
        center = DonationCenter.objects.filter(center_id=center_id).first()
        if center is None:
            self.index.remove(str(center_id))
            return

        self.index.upsert(
            key=str(center.center_id),
            latitude=center.latitude,
            longitude=center.longitude,
            entity_type=GeoEntityType.CENTER,
            blood_type=GEO_NO_BLOOD_TYPE,
            is_available=True,
            city=center.city,
        )

    def sync_all_users(self) -> IndexSyncResult:
        """Rebuild user entries from scratch.

        Entries of users that no longer qualify are removed.

        Returns:
            Number of users indexed and total users scanned.
        """
        indexed = 0
        total = 0
        indexable_keys = set()

        for user in User.objects.all().iterator():
            total += 1
            self.index_user(user.user_id)
            if user.is_geo_indexable:
                indexed += 1
                indexable_keys.add(str(user.user_id))

        stale = GeoEntry.objects.filter(entity_type=GeoEntityType.USER.value).exclude(
            key__in=indexable_keys
        )
        stale_count, _ = stale.delete()

        logger.info(
            "geo_users_synced",
            indexed_count=indexed,
            total=total,
            stale_removed=stale_count,
        )
        return IndexSyncResult(indexed_count=indexed, total=total)

    def index_all_centers(self) -> IndexSyncResult:
        """Write an entry for every center and drop entries of deleted centers."""
        keys = set()
        for center in DonationCenter.objects.all().iterator():
            self.index_center(center.center_id)
            keys.add(str(center.center_id))

        GeoEntry.objects.filter(entity_type=GeoEntityType.CENTER.value).exclude(
            key__in=keys
        ).delete()

        logger.info("geo_centers_indexed", indexed_count=len(keys))
        return IndexSyncResult(indexed_count=len(keys), total=len(keys))


geospatial_index = GeospatialIndex()
geo_indexing_service = GeoIndexingService(geospatial_index)
