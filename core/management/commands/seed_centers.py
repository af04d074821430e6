"""Load the fixed donation center list and index it."""

from django.core.management.base import BaseCommand

from core.services.center_service import center_service


class Command(BaseCommand):
    """Seed donation centers once; always rebuild their index entries."""

    help = "Seed donation centers and rebuild their geospatial entries"

    def handle(self, *args, **options):
        result = center_service.seed_centers()
        if result.seeded:
            self.stdout.write(
                self.style.SUCCESS(f"Created {result.created_count} donation centers")
            )
        else:
            self.stdout.write("Donation centers already present, nothing created")
        self.stdout.write(f"Indexed {result.indexed_count} centers")
