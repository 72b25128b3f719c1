"""Aggregate figures for the admin dashboard."""

from decimal import Decimal

from django.contrib.auth import get_user_model
from django.db.models import Count, Sum

from docledger.catalog.models import Product
from docledger.customers.models import Customer
from docledger.invoicing.models import Invoice, Payment
from docledger.quotations.models import Quotation

RECENT_LIMIT = 5


def _sum(queryset, field: str) -> Decimal:
    return queryset.aggregate(total=Sum(field))["total"] or Decimal("0.00")


def invoice_status_breakdown() -> dict:
    counts = {status: 0 for status, _ in Invoice.STATUS_CHOICES}
    for row in Invoice.objects.values("status").annotate(count=Count("id")):
        counts[row["status"]] = row["count"]
    return counts


def quotation_status_breakdown() -> dict:
    counts = {status: 0 for status, _ in Quotation.STATUS_CHOICES}
    for row in Quotation.objects.values("status").annotate(count=Count("id")):
        counts[row["status"]] = row["count"]
    return counts


def dashboard_statistics() -> dict:
    """Counts, revenue collected, outstanding balance and recent documents."""
    return {
        "counts": {
            "users": get_user_model().objects.count(),
            "customers": Customer.objects.count(),
            "products": Product.objects.count(),
            "quotations": Quotation.objects.count(),
            "invoices": Invoice.objects.count(),
        },
        "revenue": _sum(Payment.objects.all(), "amount"),
        "outstanding": _sum(
            Invoice.objects.filter(status__in=["unpaid", "partial"]), "remaining_amount"
        ),
        "invoiceStatus": invoice_status_breakdown(),
        "quotationStatus": quotation_status_breakdown(),
        "recentQuotations": list(
            Quotation.objects.order_by("-created_at", "-id")[:RECENT_LIMIT]
        ),
        "recentInvoices": list(
            Invoice.objects.order_by("-created_at", "-id")[:RECENT_LIMIT]
        ),
    }
