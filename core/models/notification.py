"""In-app notification model."""

import uuid
from typing import ClassVar

from django.db import models

from core.enums import NotificationType


class Notification(models.Model):
    """A message in a user's in-app inbox.

    Push delivery is a separate best-effort job; this row is written whether
    or not the push succeeds.

    Attributes:
        notification_id: Unique identifier for the notification.
        user: The recipient.
        notification_type: Which fan-out path produced it.
        title: Short headline shown in the inbox and the push.
        body: Message text.
        is_read: Whether the recipient has read it.
        blood_request: Related request, when there is one.
        created_at: When the notification was created.
    """

    notification_id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
    )
    user = models.ForeignKey(
        "core.User",
        on_delete=models.CASCADE,
        related_name="notifications",
        db_column="user_id",
    )
    notification_type = models.CharField(
        max_length=30,
        choices=[(t.value, t.value) for t in NotificationType],
    )
    title = models.CharField(max_length=255)
    body = models.TextField()
    is_read = models.BooleanField(default=False)
    blood_request = models.ForeignKey(
        "core.BloodRequest",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="notifications",
        db_column="request_id",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Django model metadata."""

        db_table = "notifications"
        ordering: ClassVar[list[str]] = ["-created_at"]
        indexes: ClassVar[list] = [
            models.Index(
                fields=["user", "-created_at"],
                name="notif_user_created_idx",
            ),
            models.Index(
                fields=["user", "is_read"],
                name="notif_user_read_idx",
            ),
        ]

    def __str__(self) -> str:
        """Return string representation of notification."""
        return f"{self.notification_type} for user {self.user_id}"

    def __repr__(self) -> str:
        """Return detailed representation of notification."""
        return (
            f"<Notification(id={self.notification_id}, "
            f"type={self.notification_type}, "
            f"user={self.user_id}, "
            f"is_read={self.is_read})>"
        )
