"""Donation history model."""

import uuid
from typing import ClassVar

from django.db import models


class Donation(models.Model):
    """A blood donation the user reports having made."""

    donation_id = models.UUIDField(
        primary_key=True, default=uuid.uuid4, editable=False
    )
    user = models.ForeignKey(
        "core.User",
        on_delete=models.CASCADE,
        related_name="donations",
        db_column="user_id",
    )
    donation_date = models.DateTimeField(help_text="When the donation took place")
    donation_center = models.CharField(max_length=255, null=True, blank=True)
    notes = models.TextField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Django model metadata."""

        db_table = "donations"
        ordering: ClassVar[list[str]] = ["-donation_date"]
        indexes: ClassVar[list] = [
            models.Index(
                fields=["user", "-donation_date"],
                name="donations_user_date_idx",
            ),
        ]

    def __str__(self) -> str:
        """Return string representation of the donation."""
        return f"Donation by {self.user_id} on {self.donation_date:%Y-%m-%d}"
