"""Models for customers."""

from django.db import models

from docledger.core.models import TimeStampedModel


class Customer(TimeStampedModel):
    """Billed party. Documents keep their own snapshot of these fields."""

    name = models.CharField(max_length=255)
    email = models.EmailField(blank=True)
    phone = models.CharField(max_length=50, blank=True)
    address = models.TextField(blank=True)
    tax_id = models.CharField(max_length=20, blank=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return self.name
