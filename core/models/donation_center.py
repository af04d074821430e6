"""Donation center model."""

import uuid
from typing import ClassVar

from django.db import models


class DonationCenter(models.Model):
    """A physical location accepting blood donations."""

    center_id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    address = models.CharField(max_length=255)
    city = models.CharField(max_length=120, db_index=True)
    phone = models.CharField(max_length=32, null=True, blank=True)
    latitude = models.FloatField()
    longitude = models.FloatField()
    hours = models.CharField(max_length=255, null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Django model metadata."""

        db_table = "donation_centers"
        ordering: ClassVar[list[str]] = ["name"]

    def __str__(self) -> str:
        """Return string representation of the center."""
        return f"{self.name} ({self.city})"
