"""Blood request model."""

import uuid
from typing import ClassVar

from django.db import models
from django.db.models import Case, IntegerField, QuerySet, Value, When

from core.constants import DEFAULT_UNITS, MAX_UNITS, MIN_UNITS
from core.enums import URGENCY_RANK, BloodType, RequestStatus, Urgency


class BloodRequestQuerySet(models.QuerySet):
    """Query helpers shared by discovery and lifecycle code."""

    def open(self) -> "BloodRequestQuerySet":
        return self.filter(status=RequestStatus.OPEN.value)

    def by_urgency(self) -> QuerySet:
        """Order by urgency rank, then newest first within the same rank."""
        rank = Case(
            *[
                When(urgency=level, then=Value(position))
                for level, position in URGENCY_RANK.items()
            ],
            default=Value(URGENCY_RANK[Urgency.NORMAL.value]),
            output_field=IntegerField(),
        )
        return self.annotate(urgency_rank=rank).order_by("urgency_rank", "-created_at")


class BloodRequest(models.Model):
    """A seeker's request for blood.

    Lifecycle: open -> accepted -> completed, or open -> cancelled.
    ``accepted_donor`` is set exactly when status is accepted or completed.
    """

    request_id = models.UUIDField(
        primary_key=True, default=uuid.uuid4, editable=False
    )
    seeker = models.ForeignKey(
        "core.User",
        on_delete=models.CASCADE,
        related_name="blood_requests",
        db_column="seeker_id",
    )
    blood_type = models.CharField(
        max_length=3, choices=[(bt.value, bt.value) for bt in BloodType]
    )
    units = models.PositiveSmallIntegerField(default=DEFAULT_UNITS)
    urgency = models.CharField(
        max_length=10, choices=[(u.value, u.value) for u in Urgency]
    )
    hospital = models.CharField(max_length=255, null=True, blank=True)
    city = models.CharField(max_length=120, null=True, blank=True)
    notes = models.TextField(null=True, blank=True)
    status = models.CharField(
        max_length=10,
        choices=[(s.value, s.value) for s in RequestStatus],
        default=RequestStatus.OPEN.value,
    )
    accepted_donor = models.ForeignKey(
        "core.User",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="accepted_requests",
        db_column="accepted_donor_id",
    )
    accepted_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    objects = BloodRequestQuerySet.as_manager()

    class Meta:
        """Django model metadata."""

        db_table = "blood_requests"
        ordering: ClassVar[list[str]] = ["-created_at"]
        indexes: ClassVar[list] = [
            models.Index(
                fields=["status", "blood_type"],
                name="requests_status_blood_idx",
            ),
            models.Index(
                fields=["seeker", "-created_at"],
                name="requests_seeker_created_idx",
            ),
            models.Index(
                fields=["accepted_donor", "status"],
                name="requests_donor_status_idx",
            ),
        ]
        constraints: ClassVar[list] = [
            models.CheckConstraint(
                condition=models.Q(units__gte=MIN_UNITS, units__lte=MAX_UNITS),
                name="blood_request_units_range",
            ),
        ]

    def __str__(self) -> str:
        """Return string representation of the request."""
        return f"{self.blood_type} x{self.units} ({self.urgency}, {self.status})"

    def __repr__(self) -> str:
        """Return detailed representation of the request."""
        return (
            f"<BloodRequest(id={self.request_id}, blood_type={self.blood_type}, "
            f"status={self.status}, seeker={self.seeker_id})>"
        )

    @property
    def is_open(self) -> bool:
        return self.status == RequestStatus.OPEN.value
