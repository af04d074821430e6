"""Client for the Expo push notification service."""

from typing import Any

from django.conf import settings

import requests
import structlog

from core.exceptions import DownstreamServiceError
from core.services.downstream.base_downstream_client import BaseDownstreamClient

logger = structlog.get_logger(__name__)


class PushClient(BaseDownstreamClient):
    """Delivers device push notifications through Expo."""

    def __init__(self):
        """Initialize push client from settings."""
        super().__init__(
            service_name="expo-push",
            base_url=settings.PUSH_SERVICE_URL,
            timeout=settings.PUSH_TIMEOUT_SECONDS,
        )

    def send(
        self,
        token: str,
        title: str,
        body: str,
        data: dict[str, Any] | None = None,
    ) -> bool:
        """Send one push message.

        Delivery is best-effort: transport and provider errors are logged
        and reported as False, never raised.

        Args:
            token: Device push token.
            title: Notification title.
            body: Notification body.
            data: Payload delivered to the app (e.g. type and requestId).

        Returns:
            True if the provider accepted the message.
        """
        message = {
            "to": token,
            "sound": "default",
            "title": title,
            "body": body,
            "data": data or {},
        }

        try:
            response = self._make_request("POST", self.base_url, json_data=message)
        except (requests.RequestException, DownstreamServiceError) as e:
            logger.error(
                "push_send_failed",
                title=title,
                error=str(e),
            )
            return False

        ticket = self._parse_ticket(response)
        if ticket.get("status") == "error":
            logger.warning(
                "push_ticket_error",
                title=title,
                message=ticket.get("message"),
                details=ticket.get("details"),
            )
            return False

        logger.info("push_sent", title=title, ticket_id=ticket.get("id"))
        return True

    @staticmethod
    def _parse_ticket(response: requests.Response) -> dict[str, Any]:
        try:
            payload = response.json()
        except ValueError:
            return {}
        data = payload.get("data") if isinstance(payload, dict) else None
        if isinstance(data, list):
            data = data[0] if data else {}
        return data if isinstance(data, dict) else {}


push_client = PushClient()
