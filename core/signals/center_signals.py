"""Keep donation center geospatial entries in line with center records."""

from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from core.jobs.dispatch import defer

INDEX_CENTER_JOB = "core.jobs.geospatial_jobs.index_center_job"


@receiver(post_save, sender="core.DonationCenter")
def reindex_saved_center(sender: type, instance, **kwargs) -> None:
    defer(INDEX_CENTER_JOB, str(instance.center_id))


@receiver(post_delete, sender="core.DonationCenter")
def reindex_deleted_center(sender: type, instance, **kwargs) -> None:
    # the job drops the entry once the row is gone
    defer(INDEX_CENTER_JOB, str(instance.center_id))
