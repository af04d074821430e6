"""Pytest configuration and shared fixtures."""

import os

import django
from django.test import Client

import pytest

# Configure Django settings for tests
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "matching_service.settings_test")
django.setup()


@pytest.fixture
def api_client():
    """Provide Django test client."""
    return Client()


@pytest.fixture(autouse=True)
def _clear_security_context():
    """Keep a caller set by one test from leaking into the next."""
    from core.auth.context import clear_current_user  # noqa: PLC0415

    clear_current_user()
    yield
    clear_current_user()
