"""Donation center listing, nearby search and seeding."""

from django.db import transaction

import structlog

from core.constants import DONATION_CENTERS, NEARBY_CENTER_LIMIT
from core.enums import GeoEntityType
from core.models import DonationCenter
from core.schemas.center import DonationCenterDetail, SeedCentersResult
from core.services.geospatial_index import (
    GeoIndexingService,
    GeospatialIndex,
    geo_indexing_service,
    geospatial_index,
)

logger = structlog.get_logger(__name__)


def to_detail(
    center: DonationCenter, distance_meters: float | None = None
) -> DonationCenterDetail:
    return DonationCenterDetail(
        center_id=center.center_id,
        name=center.name,
        address=center.address,
        city=center.city,
        phone=center.phone,
        latitude=center.latitude,
        longitude=center.longitude,
        hours=center.hours,
        distance_meters=distance_meters,
    )


class CenterService:
    """Queries and maintenance for donation centers."""

    def __init__(self, index: GeospatialIndex, indexing: GeoIndexingService) -> None:
        self.index = index
        self.indexing = indexing

    def list_centers(self, city: str | None = None) -> list[DonationCenterDetail]:
        """All centers ordered by name, optionally in one city."""
        queryset = DonationCenter.objects.order_by("name")
        if city:
            queryset = queryset.filter(city__iexact=city)
        return [to_detail(c) for c in queryset]

    def search_nearby_centers(
        self,
        latitude: float,
        longitude: float,
        max_distance: float | None = None,
    ) -> list[DonationCenterDetail]:
        """Centers nearest to a point, with distances in meters."""
        hits = self.index.nearest(
            latitude,
            longitude,
            limit=NEARBY_CENTER_LIMIT,
            max_distance_meters=max_distance,
            filters={"entity_type": GeoEntityType.CENTER.value},
        )
        centers = {
            str(c.center_id): c
            for c in DonationCenter.objects.filter(center_id__in=[h.key for h in hits])
        }
        return [
            to_detail(centers[h.key], h.distance_meters)
            for h in hits
            if h.key in centers
        ]

    def seed_centers(self) -> SeedCentersResult:
        """Load the fixed center list once and rebuild center index entries.

        Seeding is skipped when any center exists; the index rebuild always
        runs so a partially indexed table is repaired.
        """
        created = 0
        with transaction.atomic():
            if not DonationCenter.objects.exists():
                DonationCenter.objects.bulk_create(
                    [DonationCenter(**center) for center in DONATION_CENTERS]
                )
                created = len(DONATION_CENTERS)

        indexed = self.indexing.index_all_centers()

        logger.info(
            "donation_centers_seeded",
            created_count=created,
            indexed_count=indexed.indexed_count,
        )
        return SeedCentersResult(
            seeded=created > 0,
            created_count=created,
            indexed_count=indexed.indexed_count,
        )


center_service = CenterService(geospatial_index, geo_indexing_service)
