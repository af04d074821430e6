"""User model."""

import uuid
from typing import ClassVar

from django.db import models

from core.enums import BloodType, UserMode, resolve_flag


class User(models.Model):
    """A person using the service as a donor, a seeker, or both.

    Optional booleans (availability and notification preferences) are stored
    as-is; unset means "not chosen yet" and resolves to enabled on read.
    """

    user_id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    external_id = models.CharField(
        max_length=255,
        unique=True,
        help_text="Subject identifier issued by the identity provider",
    )
    email = models.EmailField(max_length=255, null=True, blank=True)
    full_name = models.CharField(max_length=255, null=True, blank=True)
    phone = models.CharField(max_length=32, null=True, blank=True)
    blood_type = models.CharField(
        max_length=3,
        choices=[(bt.value, bt.value) for bt in BloodType],
        null=True,
        blank=True,
    )
    mode = models.CharField(
        max_length=10,
        choices=[(m.value, m.value) for m in UserMode],
        null=True,
        blank=True,
    )
    city = models.CharField(max_length=120, null=True, blank=True)
    region = models.CharField(max_length=120, null=True, blank=True)
    latitude = models.FloatField(null=True, blank=True)
    longitude = models.FloatField(null=True, blank=True)
    location_granted = models.BooleanField(null=True, blank=True)
    preferred_donation_center = models.CharField(
        max_length=255, null=True, blank=True
    )
    is_available = models.BooleanField(null=True, blank=True)
    push_token = models.CharField(max_length=255, null=True, blank=True)
    notify_request_match = models.BooleanField(null=True, blank=True)
    notify_request_accepted = models.BooleanField(null=True, blank=True)
    notify_eligibility = models.BooleanField(null=True, blank=True)
    last_eligibility_reminder_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Django model metadata."""

        db_table = "users"
        ordering: ClassVar[list[str]] = ["-created_at"]
        indexes: ClassVar[list] = [
            models.Index(
                fields=["mode", "blood_type"],
                name="users_mode_blood_idx",
            ),
            models.Index(
                fields=["city"],
                name="users_city_idx",
            ),
        ]

    def __str__(self) -> str:
        """Return string representation of user."""
        return f"{self.external_id} ({self.mode or 'no mode'})"

    def __repr__(self) -> str:
        """Return detailed representation of user."""
        return (
            f"<User(user_id={self.user_id}, mode={self.mode}, "
            f"blood_type={self.blood_type})>"
        )

    @property
    def is_donor(self) -> bool:
        """Whether the user's mode lets them give blood."""
        return self.mode in UserMode.donor_modes()

    @property
    def is_seeker(self) -> bool:
        """Whether the user's mode lets them create requests."""
        return self.mode in UserMode.seeker_modes()

    @property
    def effective_availability(self) -> bool:
        return resolve_flag(self.is_available)

    @property
    def wants_request_match(self) -> bool:
        return resolve_flag(self.notify_request_match)

    @property
    def wants_request_accepted(self) -> bool:
        return resolve_flag(self.notify_request_accepted)

    @property
    def wants_eligibility(self) -> bool:
        return resolve_flag(self.notify_eligibility)

    @property
    def has_location(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    @property
    def is_geo_indexable(self) -> bool:
        """A user is discoverable by location only as a located donor."""
        return self.has_location and self.is_donor
