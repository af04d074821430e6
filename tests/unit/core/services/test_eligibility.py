"""Unit tests for donation eligibility calculation."""

import unittest
from datetime import UTC, datetime, timedelta

from core.services.eligibility import calculate_eligibility, days_since

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)


class TestCalculateEligibility(unittest.TestCase):
    """Tests for the 56-day donation cycle."""

    def test_no_donation_is_eligible(self):
        status = calculate_eligibility(None, NOW)

        self.assertTrue(status.is_eligible)
        self.assertEqual(status.days_until_eligible, 0)
        self.assertIsNone(status.next_eligible_date)
        self.assertIsNone(status.days_since_last_donation)

    def test_fifty_five_days_is_not_eligible(self):
        last = NOW - timedelta(days=55)

        status = calculate_eligibility(last, NOW)

        self.assertFalse(status.is_eligible)
        self.assertEqual(status.days_until_eligible, 1)
        self.assertEqual(status.next_eligible_date, last + timedelta(days=56))
        self.assertEqual(status.days_since_last_donation, 55)

    def test_fifty_six_days_is_eligible(self):
        status = calculate_eligibility(NOW - timedelta(days=56), NOW)

        self.assertTrue(status.is_eligible)
        self.assertEqual(status.days_until_eligible, 0)
        self.assertIsNone(status.next_eligible_date)

    def test_partial_days_are_floored(self):
        last = NOW - timedelta(days=55, hours=23, minutes=59)

        status = calculate_eligibility(last, NOW)

        self.assertEqual(status.days_since_last_donation, 55)
        self.assertFalse(status.is_eligible)

    def test_days_until_never_negative(self):
        status = calculate_eligibility(NOW - timedelta(days=400), NOW)

        self.assertEqual(status.days_until_eligible, 0)


class TestDaysSince(unittest.TestCase):
    def test_same_instant(self):
        self.assertEqual(days_since(NOW, NOW), 0)

    def test_floor_of_fractional_days(self):
        self.assertEqual(days_since(NOW - timedelta(hours=47), NOW), 1)


if __name__ == "__main__":
    unittest.main()
