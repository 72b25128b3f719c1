"""Django app configuration for docledger core."""

from django.apps import AppConfig


class CoreConfig(AppConfig):
    """Core app configuration."""

    name = "docledger.core"
    label = "core"
    verbose_name = "Core"
    default_auto_field = "django.db.models.BigAutoField"
