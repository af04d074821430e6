"""OAuth2 authentication backend for Django REST Framework.

Supports two validation modes:
1. Token Introspection: validates tokens by calling the identity provider
2. Local JWT Validation: validates JWT signatures locally using a shared secret

The token subject is the caller's stable external id, which the user service
maps to a User record.
"""

from typing import Any, cast

from django.conf import settings
from django.core.cache import cache

import jwt
import requests
import structlog
from rest_framework import authentication, exceptions

from core.auth.context import set_current_user

logger = structlog.get_logger(__name__)


class OAuth2User:
    """Authenticated caller built from token claims.

    This is not a Django model, just a container for the identity provider's
    subject and granted scopes.
    """

    def __init__(
        self,
        user_id: str,
        client_id: str,
        scopes: list[str],
        email: str | None = None,
        full_name: str | None = None,
    ):
        """Initialize OAuth2 user.

        Args:
            user_id: Token subject (external id of the caller)
            client_id: OAuth2 client ID
            scopes: List of granted scopes
            email: Email claim, if present
            full_name: Name claim, if present
        """
        self.id = user_id
        self.user_id = user_id
        self.client_id = client_id
        self.scopes = scopes
        self.email = email
        self.full_name = full_name
        self.is_authenticated = True

    def has_scope(self, scope: str) -> bool:
        """Check if the caller has a specific scope."""
        return scope in self.scopes

    def __str__(self):
        """String representation."""
        return f"OAuth2User(user_id={self.user_id}, client_id={self.client_id})"


def _normalize_scopes(claims: dict[str, Any]) -> list[str]:
    """Read scopes from either a ``scopes`` list or a space separated ``scope``."""
    scopes = claims.get("scopes")
    if scopes is None:
        scopes = claims.get("scope", "")
    if isinstance(scopes, str):
        return scopes.split()
    return list(scopes)


class OAuth2Authentication(authentication.BaseAuthentication):
    """OAuth2 Bearer token authentication.

    Extracts and validates Bearer tokens from the Authorization header and
    stores the resulting caller in the thread-local security context.
    """

    def authenticate(self, request):
        """Authenticate the request using an OAuth2 Bearer token.

        Args:
            request: DRF request object

        Returns:
            Tuple of (user, token) or None if authentication not attempted

        Raises:
            AuthenticationFailed: If authentication fails
        """
        if not settings.OAUTH2_SERVICE_ENABLED:
            return None

        auth_header = request.headers.get("authorization")
        if not auth_header:
            return None

        parts = auth_header.split()
        if len(parts) != 2 or parts[0].lower() != "bearer":
            raise exceptions.AuthenticationFailed("Invalid authorization header format")

        token = parts[1]

        if settings.OAUTH2_INTROSPECTION_ENABLED:
            token_data = self._validate_via_introspection(token)
        else:
            token_data = self._validate_via_jwt(token)

        subject = token_data.get("sub") or token_data.get("user_id")
        if not subject:
            logger.warning("token_missing_subject")
            raise exceptions.AuthenticationFailed("Token has no subject")

        user = OAuth2User(
            user_id=str(subject),
            client_id=token_data.get("client_id") or "unknown",
            scopes=_normalize_scopes(token_data),
            email=token_data.get("email"),
            full_name=token_data.get("name"),
        )
        set_current_user(user)

        return (user, token)

    def _validate_via_introspection(self, token: str) -> dict[str, Any]:
        """Validate token via the identity provider's introspection endpoint.

        Args:
            token: Access token to validate

        Returns:
            Token data from introspection

        Raises:
            AuthenticationFailed: If token is invalid
        """
        cache_key = f"{settings.OAUTH2_TOKEN_CACHE_PREFIX}{token[:16]}"
        cached_data = cache.get(cache_key)
        if cached_data:
            logger.debug("token_introspection_cache_hit")
            return cast("dict[str, Any]", cached_data)

        try:
            response = requests.post(
                settings.OAUTH2_INTROSPECT_URL,
                data={
                    "token": token,
                    "token_type_hint": "access_token",
                },
                auth=(settings.OAUTH2_CLIENT_ID, settings.OAUTH2_CLIENT_SECRET),
                headers={"Content-Type": "application/x-www-form-urlencoded"},
                timeout=5,
            )
        except requests.RequestException as e:
            logger.error("token_introspection_unavailable", error=str(e))
            raise exceptions.AuthenticationFailed(
                "Token validation service unavailable"
            ) from e

        if response.status_code != 200:
            logger.warning(
                "token_introspection_failed",
                status_code=response.status_code,
            )
            raise exceptions.AuthenticationFailed("Token introspection failed")

        data = response.json()

        if not data.get("active", False):
            logger.info("token_inactive")
            raise exceptions.AuthenticationFailed("Token is not active")

        cache.set(cache_key, data, timeout=settings.OAUTH2_TOKEN_CACHE_TTL)

        return cast("dict[str, Any]", data)

    def _validate_via_jwt(self, token: str) -> dict[str, Any]:
        """Validate token locally by verifying its JWT signature.

        Args:
            token: JWT access token to validate

        Returns:
            Token claims

        Raises:
            AuthenticationFailed: If token is invalid
        """
        if not settings.JWT_SECRET:
            logger.error("jwt_secret_not_configured")
            raise exceptions.AuthenticationFailed("JWT validation not configured")

        try:
            payload = jwt.decode(
                token,
                settings.JWT_SECRET,
                algorithms=["HS256", "HS384", "HS512"],
                options={
                    "verify_signature": True,
                    "verify_exp": True,
                    "verify_iat": True,
                    "verify_nbf": True,
                },
            )
        except jwt.ExpiredSignatureError as e:
            logger.info("jwt_expired")
            raise exceptions.AuthenticationFailed("Token has expired") from e
        except jwt.InvalidTokenError as e:
            logger.warning("jwt_invalid", error=str(e))
            raise exceptions.AuthenticationFailed("Invalid token") from e

        token_type = payload.get("type", "access_token")
        if token_type != "access_token":
            logger.warning("jwt_wrong_type", token_type=token_type)
            raise exceptions.AuthenticationFailed(f"Invalid token type: {token_type}")

        return {
            "active": True,
            "sub": payload.get("sub"),
            "client_id": payload.get("client_id"),
            "scopes": _normalize_scopes(payload),
            "user_id": payload.get("user_id"),
            "email": payload.get("email"),
            "name": payload.get("name"),
            "exp": payload.get("exp"),
            "iat": payload.get("iat"),
        }

    def authenticate_header(self, _request):
        """Return WWW-Authenticate header value for 401 responses."""
        return "Bearer"
