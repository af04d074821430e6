"""Django signals that keep derived data current."""

from core.signals.center_signals import reindex_deleted_center, reindex_saved_center
from core.signals.user_signals import reindex_user_location

__all__ = [
    "reindex_deleted_center",
    "reindex_saved_center",
    "reindex_user_location",
]
