#!/usr/bin/env python
"""Script to run the service locally against a development database."""

import os
import sys

from django.core.management import call_command, execute_from_command_line


def main():
    """Apply migrations, seed donation centers and start the dev server.

    The RQ worker that executes fan-out and indexing jobs runs separately:
    ``python manage.py rqworker default``.
    """
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "matching_service.settings")

    import django  # noqa: PLC0415

    django.setup()
    call_command("migrate", interactive=False)
    call_command("seed_centers")
    execute_from_command_line([sys.argv[0], "runserver"])


if __name__ == "__main__":
    main()
