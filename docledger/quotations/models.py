"""Models for quotations.

A quotation is priced like an invoice and carries an opaque approval token
so the customer can accept or reject it without logging in.
"""

import secrets

from django.conf import settings
from django.db import models
from django.db.models import Q
from django.utils import timezone

from docledger.invoicing.models import (
    AttachedImage,
    AttachedSignature,
    BillingDocument,
    LineItem,
)


def new_approval_token() -> str:
    return secrets.token_urlsafe(32)


class Quotation(BillingDocument):
    """Priced offer to a customer.

    Lifecycle: pending -> accepted/rejected (public approval) and
    -> converted exactly once, when its invoice is created.
    """

    STATUS_CHOICES = [
        ("pending", "Pending"),
        ("accepted", "Accepted"),
        ("rejected", "Rejected"),
        ("converted", "Converted"),
    ]

    APPROVAL_STATUS_CHOICES = [
        ("pending", "Pending"),
        ("approved", "Approved"),
        ("rejected", "Rejected"),
    ]

    quotation_number = models.CharField(
        max_length=50,
        unique=True,
        help_text="Human-readable quotation number, e.g. QT2569100001",
    )
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default="pending")

    # Public approval
    approval_token = models.CharField(
        max_length=64,
        unique=True,
        default=new_approval_token,
        editable=False,
    )
    approval_status = models.CharField(
        max_length=20,
        choices=APPROVAL_STATUS_CHOICES,
        default="pending",
    )
    approval_notes = models.TextField(blank=True)
    decided_at = models.DateTimeField(null=True, blank=True)

    valid_until = models.DateField(null=True, blank=True)

    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="quotations_created",
    )

    class Meta:
        ordering = ["-created_at", "-id"]
        constraints = [
            models.CheckConstraint(
                condition=Q(discount_amount__gte=0),
                name="quotation_discount_non_negative",
            ),
            models.CheckConstraint(
                condition=Q(status__in=["pending", "accepted", "rejected", "converted"]),
                name="quotation_status_valid",
            ),
        ]

    def __str__(self):
        return f"Quotation {self.quotation_number} - {self.total_money} ({self.status})"

    @property
    def is_expired(self) -> bool:
        return self.valid_until is not None and self.valid_until < timezone.localdate()


class QuotationItem(LineItem):
    quotation = models.ForeignKey(Quotation, on_delete=models.CASCADE, related_name="items")

    class Meta(LineItem.Meta):
        pass


class QuotationImage(AttachedImage):
    quotation = models.ForeignKey(Quotation, on_delete=models.CASCADE, related_name="images")

    class Meta(AttachedImage.Meta):
        pass


class QuotationSignature(AttachedSignature):
    quotation = models.ForeignKey(Quotation, on_delete=models.CASCADE, related_name="signatures")

    class Meta(AttachedSignature.Meta):
        pass
