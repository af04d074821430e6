"""Tests for OAuth2 bearer authentication."""

import time
from unittest.mock import MagicMock, patch

from django.core.cache import cache
from django.test import TestCase, override_settings

import jwt
from rest_framework.exceptions import AuthenticationFailed

from core.auth.context import clear_current_user, get_current_user
from core.auth.oauth2 import OAuth2Authentication, _normalize_scopes
from core.auth.permissions import HasAdminScope
from core.constants import ADMIN_SCOPE
from tests.base import make_token


def bearer_request(token: str) -> MagicMock:
    request = MagicMock()
    request.headers = {"authorization": f"Bearer {token}"}
    return request


class TestScopeNormalization(TestCase):
    def test_space_separated_scope_claim(self):
        self.assertEqual(
            _normalize_scopes({"scope": "read bloodmatch:admin"}),
            ["read", "bloodmatch:admin"],
        )

    def test_scopes_list_claim_wins(self):
        self.assertEqual(
            _normalize_scopes({"scopes": ["a", "b"], "scope": "c"}), ["a", "b"]
        )

    def test_missing_scopes(self):
        self.assertEqual(_normalize_scopes({}), [])


class TestJwtAuthentication(TestCase):
    """Local JWT validation."""

    def setUp(self):
        self.auth = OAuth2Authentication()

    def tearDown(self):
        clear_current_user()

    def test_valid_token_sets_security_context(self):
        token = make_token("auth|abc", [ADMIN_SCOPE], email="a@example.com")

        user, returned_token = self.auth.authenticate(bearer_request(token))

        self.assertEqual(returned_token, token)
        self.assertEqual(user.user_id, "auth|abc")
        self.assertEqual(user.email, "a@example.com")
        self.assertTrue(user.has_scope(ADMIN_SCOPE))
        self.assertIs(get_current_user(), user)

    def test_no_header_is_anonymous(self):
        request = MagicMock()
        request.headers = {}

        self.assertIsNone(self.auth.authenticate(request))

    def test_malformed_header(self):
        request = MagicMock()
        request.headers = {"authorization": "Token abc"}

        with self.assertRaises(AuthenticationFailed):
            self.auth.authenticate(request)

    def test_expired_token(self):
        token = make_token("auth|abc", exp=int(time.time()) - 60)

        with self.assertRaisesMessage(AuthenticationFailed, "Token has expired"):
            self.auth.authenticate(bearer_request(token))

    def test_wrong_signature(self):
        token = jwt.encode(
            {"sub": "auth|abc", "type": "access_token"}, "other", algorithm="HS256"
        )

        with self.assertRaisesMessage(AuthenticationFailed, "Invalid token"):
            self.auth.authenticate(bearer_request(token))

    def test_refresh_token_rejected(self):
        token = make_token("auth|abc", type="refresh_token")

        with self.assertRaises(AuthenticationFailed):
            self.auth.authenticate(bearer_request(token))

    def test_token_without_subject_rejected(self):
        token = make_token("")

        with self.assertRaisesMessage(AuthenticationFailed, "Token has no subject"):
            self.auth.authenticate(bearer_request(token))

    @override_settings(JWT_SECRET="")
    def test_unconfigured_secret(self):
        with self.assertRaises(AuthenticationFailed):
            self.auth.authenticate(bearer_request("a.b.c"))

    @override_settings(OAUTH2_SERVICE_ENABLED=False)
    def test_disabled_auth_skips(self):
        self.assertIsNone(self.auth.authenticate(bearer_request("anything")))


@override_settings(OAUTH2_INTROSPECTION_ENABLED=True)
class TestIntrospectionAuthentication(TestCase):
    def setUp(self):
        self.auth = OAuth2Authentication()
        cache.clear()

    def tearDown(self):
        clear_current_user()

    @patch("core.auth.oauth2.requests.post")
    def test_active_token_cached(self, mock_post):
        mock_post.return_value.status_code = 200
        mock_post.return_value.json.return_value = {
            "active": True,
            "sub": "auth|xyz",
            "client_id": "mobile-app",
            "scope": "profile",
        }

        user, _ = self.auth.authenticate(bearer_request("opaque-token-value"))
        self.auth.authenticate(bearer_request("opaque-token-value"))

        self.assertEqual(user.user_id, "auth|xyz")
        self.assertEqual(user.scopes, ["profile"])
        mock_post.assert_called_once()

    @patch("core.auth.oauth2.requests.post")
    def test_inactive_token_rejected(self, mock_post):
        mock_post.return_value.status_code = 200
        mock_post.return_value.json.return_value = {"active": False}

        with self.assertRaisesMessage(AuthenticationFailed, "Token is not active"):
            self.auth.authenticate(bearer_request("opaque-token-value"))


class TestHasAdminScope(TestCase):
    def setUp(self):
        self.permission = HasAdminScope()

    def test_admin_scope_allowed(self):
        request = MagicMock()
        request.user.has_scope.side_effect = lambda scope: scope == ADMIN_SCOPE

        self.assertTrue(self.permission.has_permission(request, None))

    def test_missing_scope_denied(self):
        request = MagicMock()
        request.user.has_scope.return_value = False

        self.assertFalse(self.permission.has_permission(request, None))

    def test_anonymous_denied(self):
        request = MagicMock()
        request.user = None

        self.assertFalse(self.permission.has_permission(request, None))
