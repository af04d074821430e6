"""Production server startup script for the blood matching service.

Starts the Django application under Gunicorn for container deployments.
"""

import os
import sys

from gunicorn.app.wsgiapp import run


def main():
    """Start the service using Gunicorn.

    Worker and thread counts can be tuned with GUNICORN_WORKERS and
    GUNICORN_THREADS; logs go to stdout/stderr for aggregation.
    """
    sys.argv = [
        "gunicorn",
        "matching_service.wsgi:application",
        "--bind",
        os.getenv("GUNICORN_BIND", "0.0.0.0:8000"),
        "--workers",
        os.getenv("GUNICORN_WORKERS", "4"),
        "--threads",
        os.getenv("GUNICORN_THREADS", "2"),
        "--timeout",
        "60",
        "--access-logfile",
        "-",
        "--error-logfile",
        "-",
    ]
    run()


if __name__ == "__main__":
    main()
