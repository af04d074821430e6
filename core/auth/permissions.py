"""DRF permission classes based on OAuth2 scopes."""

from rest_framework.permissions import BasePermission

from core.constants import ADMIN_SCOPE


class HasAdminScope(BasePermission):
    """Allow only callers whose token carries the admin scope."""

    message = f"Requires {ADMIN_SCOPE} scope"

    def has_permission(self, request, view) -> bool:
        """Check the caller's scopes."""
        user = request.user
        return bool(
            user is not None
            and getattr(user, "is_authenticated", False)
            and user.has_scope(ADMIN_SCOPE)
        )
