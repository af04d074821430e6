"""User profile schemas."""

from core.schemas.user.availability_response import AvailabilityResponse
from core.schemas.user.bootstrap_user_request import BootstrapUserRequest
from core.schemas.user.donor_summary import DonorSearchQuery, DonorSummary
from core.schemas.user.notification_preferences import (
    NotificationPreferences,
    UpdateNotificationPreferencesRequest,
)
from core.schemas.user.profile_update_requests import (
    UpdateBloodTypeRequest,
    UpdateModeRequest,
    UpdatePhoneRequest,
    UpdatePushTokenRequest,
)
from core.schemas.user.update_location_request import UpdateLocationRequest
from core.schemas.user.update_profile_request import UpdateProfileRequest
from core.schemas.user.user_profile import UserProfile
from core.schemas.user.user_stats import UserStats

__all__ = [
    "AvailabilityResponse",
    "BootstrapUserRequest",
    "DonorSearchQuery",
    "DonorSummary",
    "NotificationPreferences",
    "UpdateBloodTypeRequest",
    "UpdateLocationRequest",
    "UpdateModeRequest",
    "UpdateNotificationPreferencesRequest",
    "UpdatePhoneRequest",
    "UpdateProfileRequest",
    "UpdatePushTokenRequest",
    "UserProfile",
    "UserStats",
]
