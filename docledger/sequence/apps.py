"""Django app configuration for document numbering."""

from django.apps import AppConfig


class SequenceConfig(AppConfig):
    """App configuration for docledger.sequence."""

    name = "docledger.sequence"
    label = "sequence"
    verbose_name = "Document Sequence"
    default_auto_field = "django.db.models.BigAutoField"
