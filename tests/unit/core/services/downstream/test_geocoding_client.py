"""Tests for GeocodingClient."""

from django.test import TestCase, override_settings

import requests
import responses

from core.services.downstream.geocoding_client import GeocodingClient, Place


@override_settings(GEOCODING_ENABLED=True)
class TestGeocodingClient(TestCase):
    """Test suite for GeocodingClient."""

    def setUp(self):
        """Set up test fixtures."""
        self.client = GeocodingClient()

    @responses.activate
    def test_reverse_resolves_city_and_state(self):
        responses.add(
            responses.GET,
            self.client.base_url,
            json={"address": {"city": "Baku", "state": "Absheron"}},
            status=200,
        )

        place = self.client.reverse(40.4093, 49.8671)

        self.assertEqual(place, Place(city="Baku", region="Absheron"))
        request = responses.calls[0].request
        self.assertIn("lat=40.4093", request.url)
        self.assertIn("format=jsonv2", request.url)
        self.assertIn("User-Agent", request.headers)

    @responses.activate
    def test_reverse_falls_back_to_town(self):
        responses.add(
            responses.GET,
            self.client.base_url,
            json={"address": {"town": "Quba"}},
            status=200,
        )

        self.assertEqual(
            self.client.reverse(41.36, 48.51), Place(city="Quba", region=None)
        )

    @responses.activate
    def test_reverse_without_names_returns_none(self):
        responses.add(
            responses.GET,
            self.client.base_url,
            json={"address": {"country": "Azerbaijan"}},
            status=200,
        )

        self.assertIsNone(self.client.reverse(40.0, 47.0))

    @responses.activate
    def test_reverse_provider_failure_returns_none(self):
        responses.add(responses.GET, self.client.base_url, status=502)

        self.assertIsNone(self.client.reverse(40.0, 47.0))

    @responses.activate
    def test_reverse_timeout_returns_none(self):
        responses.add(
            responses.GET,
            self.client.base_url,
            body=requests.Timeout("timed out"),
        )

        self.assertIsNone(self.client.reverse(40.0, 47.0))

    @override_settings(GEOCODING_ENABLED=False)
    @responses.activate
    def test_disabled_makes_no_call(self):
        self.assertIsNone(self.client.reverse(40.0, 47.0))
        self.assertEqual(len(responses.calls), 0)
