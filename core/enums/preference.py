"""Tri-state flag resolution for optional boolean user settings."""

from enum import Enum


class PreferenceState(str, Enum):
    """Stored state of an optional boolean setting.

    Availability and notification preferences are stored as nullable
    booleans and never back-filled. UNSET resolves to enabled.
    """

    UNSET = "unset"
    ENABLED = "enabled"
    DISABLED = "disabled"

    @classmethod
    def from_stored(cls, value: bool | None) -> "PreferenceState":
        """Map a stored nullable boolean to its state."""
        if value is None:
            return cls.UNSET
        return cls.ENABLED if value else cls.DISABLED

    def effective(self) -> bool:
        """Resolve to a boolean; only an explicit False disables."""
        return self is not PreferenceState.DISABLED


def resolve_flag(value: bool | None) -> bool:
    """Shorthand for PreferenceState.from_stored(value).effective()."""
    return PreferenceState.from_stored(value).effective()
