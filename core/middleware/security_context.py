"""Security context middleware for authenticated caller access."""

from collections.abc import Callable

from django.http import HttpRequest, HttpResponse

from core.auth.context import clear_current_user


class SecurityContextMiddleware:
    """Scope the thread-local security context to a single request.

    The OAuth2 authentication backend fills the context when DRF
    authenticates the request, which happens lazily inside the view. This
    middleware only guarantees the context starts empty and is cleared when
    the response leaves, so a caller never bleeds into the next request
    served by the same thread.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        """Initialize the middleware.

        Args:
            get_response: The next middleware or view in the chain.
        """
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """Process the request with a clean security context."""
        clear_current_user()
        try:
            return self.get_response(request)
        finally:
            clear_current_user()
