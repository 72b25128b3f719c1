"""Abstract base models shared by every docledger app.

Usage:
    from docledger.core.models import TimeStampedModel

    class Customer(TimeStampedModel):
        name = models.CharField(max_length=255)
"""

from django.db import models


class TimeStampedModel(models.Model):
    """Abstract base model with created/updated timestamps.

    Automatically tracks when records are created and last modified.
    """

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


def currency_field(**kwargs):
    """Decimal column used for every monetary amount (never floats)."""
    kwargs.setdefault("max_digits", 14)
    kwargs.setdefault("decimal_places", 2)
    return models.DecimalField(**kwargs)


def percent_field(**kwargs):
    """Decimal column for percentages such as the VAT rate."""
    kwargs.setdefault("max_digits", 5)
    kwargs.setdefault("decimal_places", 2)
    return models.DecimalField(**kwargs)
