"""Rebuild the geospatial index from users and donation centers."""

from django.core.management.base import BaseCommand

from core.jobs.geospatial_jobs import sync_geospatial_index_job


class Command(BaseCommand):
    """Run the full index rebuild in-process, for backfill and recovery."""

    help = "Rebuild the geospatial index from source records"

    def handle(self, *args, **options):
        result = sync_geospatial_index_job()
        self.stdout.write(
            self.style.SUCCESS(
                f"Indexed {result['users_indexed']} of {result['users_total']} users "
                f"and {result['centers_indexed']} centers"
            )
        )
