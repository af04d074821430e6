"""Unit tests for blood type compatibility rules."""

import unittest

from core.enums import BloodType
from core.services.compatibility import (
    can_donate,
    compatible_donors,
    is_valid_blood_type,
    recipients_for,
)


class TestCompatibleDonors(unittest.TestCase):
    """Tests for the recipient -> donor table."""

    def test_ab_positive_receives_from_everyone(self):
        self.assertEqual(compatible_donors("AB+"), frozenset(BloodType.values()))

    def test_o_negative_receives_only_o_negative(self):
        self.assertEqual(compatible_donors("O-"), frozenset({"O-"}))

    def test_table_rows(self):
        expected = {
            "AB-": {"A-", "B-", "AB-", "O-"},
            "A+": {"A+", "A-", "O+", "O-"},
            "A-": {"A-", "O-"},
            "B+": {"B+", "B-", "O+", "O-"},
            "B-": {"B-", "O-"},
            "O+": {"O+", "O-"},
        }
        for recipient, donors in expected.items():
            with self.subTest(recipient=recipient):
                self.assertEqual(compatible_donors(recipient), frozenset(donors))

    def test_unknown_input_yields_empty_set(self):
        for value in (None, "", "C+", "o-", "unknown"):
            with self.subTest(value=value):
                self.assertEqual(compatible_donors(value), frozenset())


class TestCanDonate(unittest.TestCase):
    """Tests for the directional compatibility check."""

    def test_direction_matters(self):
        self.assertTrue(can_donate("O-", "A+"))
        self.assertFalse(can_donate("A+", "O-"))

    def test_a_positive_cannot_give_to_o_negative_recipient(self):
        self.assertFalse(can_donate("A+", "O-"))

    def test_missing_donor_type(self):
        self.assertFalse(can_donate(None, "AB+"))

    def test_every_type_can_give_to_itself(self):
        for blood_type in BloodType.values():
            with self.subTest(blood_type=blood_type):
                self.assertTrue(can_donate(blood_type, blood_type))


class TestRecipientsFor(unittest.TestCase):
    def test_o_negative_is_universal_donor(self):
        self.assertEqual(recipients_for("O-"), frozenset(BloodType.values()))

    def test_ab_positive_gives_only_to_ab_positive(self):
        self.assertEqual(recipients_for("AB+"), frozenset({"AB+"}))

    def test_invalid_type(self):
        self.assertEqual(recipients_for("XYZ"), frozenset())


class TestIsValidBloodType(unittest.TestCase):
    def test_canonical_values(self):
        for blood_type in BloodType.values():
            self.assertTrue(is_valid_blood_type(blood_type))

    def test_rejects_other_strings(self):
        self.assertFalse(is_valid_blood_type("AB"))
        self.assertFalse(is_valid_blood_type(None))


if __name__ == "__main__":
    unittest.main()
