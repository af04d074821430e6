"""Keep a user's geospatial entry in line with their profile."""

from django.db.models.signals import post_save
from django.dispatch import receiver

import structlog

from core.jobs.dispatch import defer

logger = structlog.get_logger(__name__)

INDEX_USER_JOB = "core.jobs.geospatial_jobs.index_user_job"

# Fields that decide whether and how a user appears in the index
GEO_RELEVANT_FIELDS = frozenset(
    {"latitude", "longitude", "mode", "is_available", "blood_type"}
)


@receiver(post_save, sender="core.User")
def reindex_user_location(
    sender: type,
    instance,
    created: bool,
    update_fields=None,
    **kwargs,
) -> None:
    """Schedule re-indexing when a save touched location, mode, availability
    or blood type.

    Saves without ``update_fields`` are treated as touching everything.
    """
    if (
        not created
        and update_fields is not None
        and not GEO_RELEVANT_FIELDS.intersection(update_fields)
    ):
        return

    logger.debug("user_reindex_scheduled", user_id=str(instance.user_id))
    defer(INDEX_USER_JOB, str(instance.user_id))
