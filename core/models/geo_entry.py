"""Geospatial index entry model."""

from typing import ClassVar

from django.db import models

from core.enums import GeoEntityType


class GeoEntry(models.Model):
    """One discoverable point: a located donor or a donation center.

    ``key`` is the string form of the subject's primary key. Filterable
    attributes use sentinels where they do not apply: centers carry an empty
    blood type and are always available, users carry an empty city.
    """

    key = models.CharField(max_length=64, primary_key=True)
    entity_type = models.CharField(
        max_length=10,
        choices=[(t.value, t.value) for t in GeoEntityType],
    )
    latitude = models.FloatField()
    longitude = models.FloatField()
    blood_type = models.CharField(max_length=8, blank=True, default="")
    is_available = models.BooleanField(default=True)
    city = models.CharField(max_length=120, blank=True, default="")
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Django model metadata."""

        db_table = "geo_entries"
        indexes: ClassVar[list] = [
            models.Index(
                fields=["entity_type", "is_available"],
                name="geo_type_available_idx",
            ),
            models.Index(
                fields=["latitude", "longitude"],
                name="geo_lat_lon_idx",
            ),
        ]

    def __str__(self) -> str:
        """Return string representation of the entry."""
        return f"{self.entity_type}:{self.key} @ ({self.latitude}, {self.longitude})"
