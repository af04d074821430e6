"""Downstream provider clients package."""

from core.services.downstream.geocoding_client import (
    GeocodingClient,
    Place,
    geocoding_client,
)
from core.services.downstream.push_client import PushClient, push_client

__all__ = [
    "GeocodingClient",
    "Place",
    "PushClient",
    "geocoding_client",
    "push_client",
]
