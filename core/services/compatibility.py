"""Blood type compatibility rules.

Directional: the table maps a recipient's type to the donor types whose red
cells that recipient can safely receive. Unrecognized input yields an empty
set so callers default to "no compatible donors".
"""

from core.enums import BloodType

_COMPATIBLE_DONORS: dict[str, frozenset[str]] = {
    BloodType.AB_POSITIVE.value: frozenset(BloodType.values()),
    BloodType.AB_NEGATIVE.value: frozenset({"A-", "B-", "AB-", "O-"}),
    BloodType.A_POSITIVE.value: frozenset({"A+", "A-", "O+", "O-"}),
    BloodType.A_NEGATIVE.value: frozenset({"A-", "O-"}),
    BloodType.B_POSITIVE.value: frozenset({"B+", "B-", "O+", "O-"}),
    BloodType.B_NEGATIVE.value: frozenset({"B-", "O-"}),
    BloodType.O_POSITIVE.value: frozenset({"O+", "O-"}),
    BloodType.O_NEGATIVE.value: frozenset({"O-"}),
}


def is_valid_blood_type(value: str | None) -> bool:
    """Whether value is one of the eight canonical blood type strings."""
    return value in _COMPATIBLE_DONORS


def compatible_donors(recipient_type: str | None) -> frozenset[str]:
    """Donor blood types a recipient of ``recipient_type`` can receive from.

    Args:
        recipient_type: Recipient blood type, e.g. "A+".

    Returns:
        The set of compatible donor types, empty for unknown input.
    """
    if recipient_type is None:
        return frozenset()
    return _COMPATIBLE_DONORS.get(recipient_type, frozenset())


def can_donate(donor_type: str | None, recipient_type: str | None) -> bool:
    """Whether a donor of ``donor_type`` can give to ``recipient_type``."""
    return donor_type is not None and donor_type in compatible_donors(recipient_type)


def recipients_for(donor_type: str | None) -> frozenset[str]:
    """Recipient blood types a donor of ``donor_type`` can give to."""
    if not is_valid_blood_type(donor_type):
        return frozenset()
    return frozenset(
        recipient
        for recipient, donors in _COMPATIBLE_DONORS.items()
        if donor_type in donors
    )
