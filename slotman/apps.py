"""
Django Slotman app configuration.
"""

from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class SlotmanConfig(AppConfig):
    """Slotman application configuration."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "slotman"
    verbose_name = _("Ad Calendar")

    def ready(self):
        """Import signal handlers when app is ready."""
        # Import handlers to register them
        from slotman.signals import handlers  # noqa: F401
