"""ABO/Rh blood type enumeration."""

from enum import Enum


class BloodType(str, Enum):
    """The eight canonical ABO/Rh blood types."""

    A_POSITIVE = "A+"
    A_NEGATIVE = "A-"
    B_POSITIVE = "B+"
    B_NEGATIVE = "B-"
    AB_POSITIVE = "AB+"
    AB_NEGATIVE = "AB-"
    O_POSITIVE = "O+"
    O_NEGATIVE = "O-"

    @classmethod
    def values(cls) -> list[str]:
        """Return the canonical string values in declaration order."""
        return [member.value for member in cls]
