"""Read-side queries for quotations."""

from docledger.invoicing.models import Invoice

from .exceptions import QuotationNotFoundError
from .models import Quotation


def quotation_queryset():
    return Quotation.objects.select_related("customer").prefetch_related(
        "items", "images", "signatures"
    )


def get_quotation(quotation_id: int) -> Quotation:
    try:
        return quotation_queryset().get(pk=quotation_id)
    except Quotation.DoesNotExist:
        raise QuotationNotFoundError()


def get_by_token(token: str) -> Quotation:
    """Look a quotation up by its public approval token."""
    if not token:
        raise QuotationNotFoundError()
    try:
        return quotation_queryset().get(approval_token=token)
    except Quotation.DoesNotExist:
        raise QuotationNotFoundError()


def list_quotations(status: str = ""):
    quotations = quotation_queryset()
    if status:
        quotations = quotations.filter(status=status)
    return quotations


def invoice_for(quotation):
    """The invoice converted from ``quotation``, or None."""
    return Invoice.objects.filter(quotation=quotation).first()
