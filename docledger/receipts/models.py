"""Models for receipts.

A receipt is written in the same transaction as the payment it acknowledges;
there is no other way to create one.
"""

from django.conf import settings
from django.db import models

from docledger.core.models import currency_field
from docledger.core.money import Money
from docledger.invoicing.models import AttachedSignature


class Receipt(models.Model):
    receipt_number = models.CharField(
        max_length=50,
        unique=True,
        help_text="Human-readable receipt number, e.g. REC2569100001",
    )
    invoice = models.ForeignKey(
        "invoicing.Invoice",
        on_delete=models.PROTECT,
        related_name="receipts",
    )
    payment = models.OneToOneField(
        "invoicing.Payment",
        on_delete=models.PROTECT,
        related_name="receipt",
    )
    issued_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="receipts_issued",
    )
    amount = currency_field()
    method = models.CharField(max_length=50, default="cash")
    notes = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return f"Receipt {self.receipt_number} - {Money(self.amount)}"


class ReceiptSignature(AttachedSignature):
    receipt = models.ForeignKey(Receipt, on_delete=models.CASCADE, related_name="signatures")

    class Meta(AttachedSignature.Meta):
        pass
