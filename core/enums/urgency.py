"""Blood request urgency levels."""

from enum import Enum


class Urgency(str, Enum):
    """Blood request urgency levels, most pressing first."""

    CRITICAL = "critical"
    URGENT = "urgent"
    NORMAL = "normal"
    STANDARD = "standard"

    @classmethod
    def emergency_levels(cls) -> frozenset[str]:
        """Levels counted against the emergency broadcast rate limit."""
        return frozenset({cls.URGENT.value, cls.CRITICAL.value})


URGENCY_RANK: dict[str, int] = {
    Urgency.CRITICAL.value: 0,
    Urgency.URGENT.value: 1,
    Urgency.NORMAL.value: 2,
    Urgency.STANDARD.value: 3,
}
