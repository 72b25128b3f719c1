"""Read-side queries for invoices."""

from django.db.models import Prefetch

from .exceptions import InvoiceNotFoundError
from .models import Invoice, Payment


def invoice_queryset():
    """Invoices with everything the detail view and PDF need, payments newest first."""
    return Invoice.objects.select_related("customer", "quotation").prefetch_related(
        "items",
        "images",
        "signatures",
        Prefetch("payments", queryset=Payment.objects.order_by("-created_at", "-id")),
    )


def get_invoice(invoice_id: int) -> Invoice:
    """Fetch one invoice with its related rows.

    Raises:
        InvoiceNotFoundError: If no invoice has this id
    """
    try:
        return invoice_queryset().get(pk=invoice_id)
    except Invoice.DoesNotExist:
        raise InvoiceNotFoundError()


def list_invoices(status: str = ""):
    invoices = invoice_queryset()
    if status:
        invoices = invoices.filter(status=status)
    return invoices
