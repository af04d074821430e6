"""Thread-local security context for the authenticated caller."""

import threading
from typing import TYPE_CHECKING

from rest_framework.exceptions import AuthenticationFailed

if TYPE_CHECKING:
    from core.auth.oauth2 import OAuth2User

_security_context = threading.local()


def set_current_user(user: "OAuth2User") -> None:
    """Store the authenticated caller in thread-local storage.

    Args:
        user: The authenticated OAuth2User to store.
    """
    _security_context.user = user


def get_current_user() -> "OAuth2User | None":
    """Retrieve the authenticated caller from thread-local storage.

    Returns:
        The current authenticated caller, or None if not set.
    """
    return getattr(_security_context, "user", None)


def require_current_user() -> "OAuth2User":
    """Retrieve the authenticated caller or raise.

    Returns:
        The current authenticated caller.

    Raises:
        AuthenticationFailed: If no caller is set in the security context.
    """
    user = get_current_user()
    if user is None:
        raise AuthenticationFailed("Not authenticated")
    return user


def clear_current_user() -> None:
    """Clear the authenticated caller from thread-local storage."""
    if hasattr(_security_context, "user"):
        delattr(_security_context, "user")
