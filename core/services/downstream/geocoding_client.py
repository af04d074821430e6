"""Reverse geocoding client (Nominatim-compatible API)."""

from dataclasses import dataclass

from django.conf import settings

import requests
import structlog

from core.exceptions import DownstreamServiceError
from core.services.downstream.base_downstream_client import BaseDownstreamClient

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Place:
    """City and region names resolved from coordinates."""

    city: str | None
    region: str | None


class GeocodingClient(BaseDownstreamClient):
    """Resolves coordinates to city and region names."""

    def __init__(self):
        """Initialize geocoding client from settings."""
        super().__init__(
            service_name="geocoding",
            base_url=settings.GEOCODING_SERVICE_URL,
            timeout=settings.GEOCODING_TIMEOUT_SECONDS,
        )

    def _get_headers(self) -> dict[str, str]:
        headers = super()._get_headers()
        headers["User-Agent"] = settings.GEOCODING_USER_AGENT
        return headers

    def reverse(self, latitude: float, longitude: float) -> Place | None:
        """Look up the place at the given coordinates.

        Gracefully degrades: returns None when geocoding is disabled, the
        provider fails, or the response carries no usable names.
        """
        if not settings.GEOCODING_ENABLED:
            return None

        try:
            response = self._make_request(
                "GET",
                self.base_url,
                params={
                    "lat": latitude,
                    "lon": longitude,
                    "format": "jsonv2",
                    "zoom": 10,
                },
            )
            payload = response.json()
        except (requests.RequestException, DownstreamServiceError, ValueError) as e:
            logger.warning("reverse_geocode_failed", error=str(e))
            return None

        address = payload.get("address") if isinstance(payload, dict) else None
        if not isinstance(address, dict):
            return None

        city = (
            address.get("city")
            or address.get("town")
            or address.get("village")
            or address.get("municipality")
        )
        region = address.get("state") or address.get("region")
        if city is None and region is None:
            return None
        return Place(city=city, region=region)


geocoding_client = GeocodingClient()
