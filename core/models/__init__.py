"""Database models for core application."""

from core.models.blood_request import BloodRequest
from core.models.donation import Donation
from core.models.donation_center import DonationCenter
from core.models.geo_entry import GeoEntry
from core.models.notification import Notification
from core.models.user import User

__all__ = [
    "BloodRequest",
    "Donation",
    "DonationCenter",
    "GeoEntry",
    "Notification",
    "User",
]
