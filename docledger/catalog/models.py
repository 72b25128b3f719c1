"""Models for the product catalog."""

from django.db import models
from django.db.models import Q

from docledger.core.models import TimeStampedModel, currency_field


class ActiveProductManager(models.Manager):
    """Manager that hides soft-deleted products."""

    def get_queryset(self):
        return super().get_queryset().filter(is_active=True)


class Product(TimeStampedModel):
    """Sellable item or service. Deleting only deactivates it."""

    name = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    price = currency_field()
    unit = models.CharField(max_length=50, default="ชิ้น")
    is_active = models.BooleanField(default=True)

    objects = ActiveProductManager()
    all_objects = models.Manager()

    class Meta:
        ordering = ["name"]
        constraints = [
            models.CheckConstraint(
                condition=Q(price__gte=0),
                name="product_price_non_negative",
            ),
        ]

    def __str__(self):
        return self.name
