"""Notification-related enumerations."""

from enum import Enum


class NotificationType(str, Enum):
    """In-app notification kinds.

    Each kind is produced by one fan-out path and is gated by its own
    user preference.
    """

    REQUEST_MATCH = "request_match"
    REQUEST_ACCEPTED = "request_accepted"
    ELIGIBILITY_REMINDER = "eligibility_reminder"
