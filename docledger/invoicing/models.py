"""Models for invoicing.

Also defines the abstract document parts (customer snapshot + totals, line
items, images, signatures) that quotations share with invoices.
"""

from decimal import Decimal

from django.conf import settings
from django.db import models
from django.db.models import Q
from django.utils import timezone

from docledger.core.models import TimeStampedModel, currency_field, percent_field
from docledger.core.money import Money


# =============================================================================
# Shared document parts
# =============================================================================


class BillingDocument(TimeStampedModel):
    """Customer snapshot plus stored totals.

    Totals are computed once when items are written and stored, never
    recomputed lazily, so historical documents stay stable.
    """

    customer = models.ForeignKey(
        "customers.Customer",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="%(class)ss",
    )

    # Snapshot taken when the document is written
    customer_name = models.CharField(max_length=255)
    customer_phone = models.CharField(max_length=50, blank=True)
    customer_address = models.TextField(blank=True)
    customer_email = models.EmailField(blank=True)

    subtotal = currency_field(default=Decimal("0"))
    discount_amount = currency_field(default=Decimal("0"))
    vat_percent = percent_field(default=Decimal("7"))
    total = currency_field(default=Decimal("0"))

    notes = models.TextField(blank=True)

    class Meta:
        abstract = True

    @property
    def vat_amount(self) -> Decimal:
        return self.total - (self.subtotal - self.discount_amount)

    @property
    def total_money(self) -> Money:
        """Return total as Money."""
        return Money(self.total)


class LineItem(models.Model):
    """One line of a document. Replaced wholesale on edit, never updated."""

    product = models.ForeignKey(
        "catalog.Product",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="+",
    )
    product_name = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    quantity = models.PositiveIntegerField()
    unit_price = currency_field()
    line_total = currency_field()
    position = models.PositiveIntegerField(default=0)

    class Meta:
        abstract = True
        ordering = ["position", "id"]
        constraints = [
            models.CheckConstraint(
                condition=Q(quantity__gt=0),
                name="%(app_label)s_%(class)s_quantity_positive",
            ),
            models.CheckConstraint(
                condition=Q(unit_price__gte=0),
                name="%(app_label)s_%(class)s_price_non_negative",
            ),
        ]

    def __str__(self):
        return f"{self.product_name} x {self.quantity}"


class AttachedImage(models.Model):
    url = models.CharField(max_length=500)
    filename = models.CharField(max_length=255, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        abstract = True
        ordering = ["created_at", "id"]


class AttachedSignature(models.Model):
    signature_data = models.TextField(help_text="Base64 data URL of the signature image")
    signed_by = models.CharField(max_length=255, blank=True)
    signed_at = models.DateTimeField(default=timezone.now)

    class Meta:
        abstract = True
        ordering = ["-signed_at", "-id"]


# =============================================================================
# Invoice
# =============================================================================


class Invoice(BillingDocument):
    """Bill with a running balance.

    ``remaining_amount = total - paid_amount`` always holds; status is
    derived from it by payment application.
    """

    STATUS_CHOICES = [
        ("unpaid", "Unpaid"),
        ("partial", "Partially paid"),
        ("paid", "Paid"),
    ]

    invoice_number = models.CharField(
        max_length=50,
        unique=True,
        help_text="Human-readable invoice number, e.g. INV2569100001",
    )
    quotation = models.OneToOneField(
        "quotations.Quotation",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="invoice",
        help_text="Quotation this invoice was converted from",
    )

    paid_amount = currency_field(default=Decimal("0"))
    remaining_amount = currency_field(default=Decimal("0"))
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default="unpaid")

    due_date = models.DateField(null=True, blank=True)
    paid_at = models.DateTimeField(null=True, blank=True)

    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="invoices_created",
    )

    class Meta:
        ordering = ["-created_at", "-id"]
        constraints = [
            models.CheckConstraint(
                condition=Q(paid_amount__gte=0),
                name="invoice_paid_non_negative",
            ),
            models.CheckConstraint(
                condition=Q(discount_amount__gte=0),
                name="invoice_discount_non_negative",
            ),
            models.CheckConstraint(
                condition=Q(status__in=["unpaid", "partial", "paid"]),
                name="invoice_status_valid",
            ),
        ]

    def __str__(self):
        return f"Invoice {self.invoice_number} - {self.total_money} ({self.status})"


class InvoiceItem(LineItem):
    invoice = models.ForeignKey(Invoice, on_delete=models.CASCADE, related_name="items")

    class Meta(LineItem.Meta):
        pass


class InvoiceImage(AttachedImage):
    invoice = models.ForeignKey(Invoice, on_delete=models.CASCADE, related_name="images")

    class Meta(AttachedImage.Meta):
        pass


class InvoiceSignature(AttachedSignature):
    invoice = models.ForeignKey(Invoice, on_delete=models.CASCADE, related_name="signatures")

    class Meta(AttachedSignature.Meta):
        pass


class Payment(models.Model):
    """Money received against an invoice. Append-only."""

    invoice = models.ForeignKey(Invoice, on_delete=models.CASCADE, related_name="payments")
    amount = currency_field()
    method = models.CharField(
        max_length=50,
        default="cash",
        help_text="cash, transfer, credit, promptpay, cheque, ...",
    )
    notes = models.TextField(blank=True)
    recorded_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="payments_recorded",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at", "-id"]
        constraints = [
            models.CheckConstraint(
                condition=Q(amount__gt=0),
                name="payment_amount_positive",
            ),
        ]

    def __str__(self):
        return f"{Money(self.amount)} on {self.invoice.invoice_number} ({self.method})"
