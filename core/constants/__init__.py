"""Constants package for core application."""

from core.constants.centers import DONATION_CENTERS
from core.constants.domain import (
    DEFAULT_UNITS,
    DONATION_CYCLE_DAYS,
    DONOR_SEARCH_LIMIT,
    ELIGIBILITY_REMINDER_MAX_DAYS,
    EMERGENCY_BROADCAST_WINDOW_MINUTES,
    GEO_NO_BLOOD_TYPE,
    GEO_NO_CITY,
    GEO_UNKNOWN_BLOOD_TYPE,
    HOME_FEED_LIMIT,
    INBOX_LIMIT,
    MAX_FANOUT_RECIPIENTS,
    MAX_NOTES_LENGTH,
    MAX_UNITS,
    MIN_UNITS,
    NEARBY_CENTER_LIMIT,
    NEARBY_DONOR_DEFAULT_DISTANCE_METERS,
    NEARBY_DONOR_LIMIT,
)
from core.constants.http import ADMIN_SCOPE, REQUEST_ID_HEADER

__all__ = [
    "ADMIN_SCOPE",
    "DEFAULT_UNITS",
    "DONATION_CENTERS",
    "DONATION_CYCLE_DAYS",
    "DONOR_SEARCH_LIMIT",
    "ELIGIBILITY_REMINDER_MAX_DAYS",
    "EMERGENCY_BROADCAST_WINDOW_MINUTES",
    "GEO_NO_BLOOD_TYPE",
    "GEO_NO_CITY",
    "GEO_UNKNOWN_BLOOD_TYPE",
    "HOME_FEED_LIMIT",
    "INBOX_LIMIT",
    "MAX_FANOUT_RECIPIENTS",
    "MAX_NOTES_LENGTH",
    "MAX_UNITS",
    "MIN_UNITS",
    "NEARBY_CENTER_LIMIT",
    "NEARBY_DONOR_DEFAULT_DISTANCE_METERS",
    "NEARBY_DONOR_LIMIT",
    "REQUEST_ID_HEADER",
]
