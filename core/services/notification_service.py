"""In-app notification inbox for the authenticated caller.

Notifications are written only by the fan-out service. Here the recipient
lists them and marks them read.
"""

from uuid import UUID

import structlog

from core.constants import INBOX_LIMIT
from core.exceptions import NotificationNotFoundError, NotNotificationOwnerError
from core.models import Notification
from core.schemas.notification import (
    MarkAllReadResponse,
    NotificationDetail,
    NotificationList,
    UnreadCount,
)
from core.services.user_service import user_service

logger = structlog.get_logger(__name__)


class NotificationService:
    """Inbox reads and read-state updates."""

    def list_notifications(self) -> NotificationList:
        """Return the caller's most recent notifications, newest first."""
        user = user_service.require_current_profile()
        notifications = list(
            Notification.objects.filter(user=user).order_by("-created_at")[
                :INBOX_LIMIT
            ]
        )
        return NotificationList(
            notifications=[self.to_detail(n) for n in notifications],
            count=len(notifications),
        )

    def get_unread_count(self) -> UnreadCount:
        user = user_service.require_current_profile()
        return UnreadCount(
            count=Notification.objects.filter(user=user, is_read=False).count()
        )

    def mark_as_read(self, notification_id: UUID) -> NotificationDetail:
        """Mark one notification read.

        Args:
            notification_id: Notification to update.

        Returns:
            The updated notification.

        Raises:
            NotificationNotFoundError: If the notification does not exist.
            NotNotificationOwnerError: If it belongs to another user.
        """
        user = user_service.require_current_profile()
        notification = Notification.objects.filter(pk=notification_id).first()
        if notification is None:
            raise NotificationNotFoundError()
        if notification.user_id != user.pk:
            logger.warning(
                "notification_access_denied",
                notification_id=str(notification_id),
                user_id=str(user.user_id),
            )
            raise NotNotificationOwnerError()

        if not notification.is_read:
            notification.is_read = True
            notification.save(update_fields=["is_read"])
            logger.info(
                "notification_marked_read",
                notification_id=str(notification_id),
            )
        return self.to_detail(notification)

    def mark_all_as_read(self) -> MarkAllReadResponse:
        """Mark every unread notification of the caller as read."""
        user = user_service.require_current_profile()
        updated = Notification.objects.filter(user=user, is_read=False).update(
            is_read=True
        )
        logger.info(
            "notifications_marked_read",
            user_id=str(user.user_id),
            count=updated,
        )
        return MarkAllReadResponse(updated_count=updated)

    @staticmethod
    def to_detail(notification: Notification) -> NotificationDetail:
        return NotificationDetail(
            notification_id=notification.notification_id,
            notification_type=notification.notification_type,
            title=notification.title,
            body=notification.body,
            is_read=notification.is_read,
            request_id=notification.blood_request_id,
            created_at=notification.created_at,
        )


notification_service = NotificationService()
