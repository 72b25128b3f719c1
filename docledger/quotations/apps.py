"""Django app configuration for quotations."""

from django.apps import AppConfig


class QuotationsConfig(AppConfig):
    """Quotations app configuration."""

    name = "docledger.quotations"
    label = "quotations"
    verbose_name = "Quotations"
    default_auto_field = "django.db.models.BigAutoField"
