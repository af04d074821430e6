"""User participation mode enumeration."""

from enum import Enum


class UserMode(str, Enum):
    """How a user participates: giving blood, asking for it, or both."""

    DONOR = "donor"
    SEEKER = "seeker"
    BOTH = "both"

    @classmethod
    def donor_modes(cls) -> frozenset[str]:
        """Modes allowed to accept requests and appear in donor discovery."""
        return frozenset({cls.DONOR.value, cls.BOTH.value})

    @classmethod
    def seeker_modes(cls) -> frozenset[str]:
        """Modes allowed to create requests."""
        return frozenset({cls.SEEKER.value, cls.BOTH.value})
