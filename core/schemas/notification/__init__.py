"""In-app notification schemas."""

from core.schemas.notification.notification_detail import (
    MarkAllReadResponse,
    NotificationDetail,
    NotificationList,
    UnreadCount,
)

__all__ = [
    "MarkAllReadResponse",
    "NotificationDetail",
    "NotificationList",
    "UnreadCount",
]
