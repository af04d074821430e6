"""Enumerations for the core app."""

from core.enums.blood_type import BloodType
from core.enums.geo_entity_type import GeoEntityType
from core.enums.health_status import HealthStatus, ReadinessState
from core.enums.notification import NotificationType
from core.enums.preference import PreferenceState, resolve_flag
from core.enums.request_status import RequestStatus
from core.enums.urgency import URGENCY_RANK, Urgency
from core.enums.user_mode import UserMode

__all__ = [
    "URGENCY_RANK",
    "BloodType",
    "GeoEntityType",
    "HealthStatus",
    "NotificationType",
    "PreferenceState",
    "ReadinessState",
    "RequestStatus",
    "Urgency",
    "UserMode",
    "resolve_flag",
]
