"""Django application configuration for core."""

from django.apps import AppConfig
from django.conf import settings


class CoreConfig(AppConfig):
    """Configuration class for the core application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "core"

    def ready(self) -> None:
        """Configure logging and connect signal receivers."""
        import core.signals  # noqa: PLC0415

        del core.signals

        if not settings.TEST_MODE:
            from core.logging import setup_logging  # noqa: PLC0415

            setup_logging()
