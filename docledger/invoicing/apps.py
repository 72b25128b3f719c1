"""Django app configuration for invoicing."""

from django.apps import AppConfig


class InvoicingConfig(AppConfig):
    """Invoicing app configuration."""

    name = "docledger.invoicing"
    label = "invoicing"
    verbose_name = "Invoicing"
    default_auto_field = "django.db.models.BigAutoField"
