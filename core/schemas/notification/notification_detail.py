"""In-app notification schemas."""

from datetime import datetime
from uuid import UUID

from core.schemas.base_schema_model import BaseSchemaModel


class NotificationDetail(BaseSchemaModel):
    """One inbox entry."""

    notification_id: UUID
    notification_type: str
    title: str
    body: str
    is_read: bool
    request_id: UUID | None = None
    created_at: datetime


class NotificationList(BaseSchemaModel):
    """Most recent inbox entries, newest first."""

    notifications: list[NotificationDetail]
    count: int


class UnreadCount(BaseSchemaModel):
    """Number of unread inbox entries."""

    count: int


class MarkAllReadResponse(BaseSchemaModel):
    """Number of entries flipped to read."""

    updated_count: int
