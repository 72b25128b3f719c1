"""Invoice services: creation, edits, status override and attachments.

Payment application lives in payments.py.
"""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from django.db import transaction
from django.utils import timezone

from docledger.core.exceptions import NotFoundError, ValidationError
from docledger.customers.models import Customer
from docledger.sequence.services import allocate_with_retry

from .exceptions import InvoiceHasReceiptsError, InvoiceNotFoundError
from .models import Invoice, InvoiceImage, InvoiceItem, InvoiceSignature
from .selectors import get_invoice
from .totals import LineItemInput, compute_totals, derive_status

logger = logging.getLogger(__name__)

SNAPSHOT_FIELDS = ("customer_name", "customer_phone", "customer_address", "customer_email")


# =============================================================================
# Shared helpers (also used by quotations)
# =============================================================================


def apply_customer(document, data) -> None:
    """Copy the customer link and snapshot fields the client sent onto ``document``.

    A referenced customer fills in any snapshot field left blank.

    Raises:
        NotFoundError: If customerId refers to no customer
    """
    sent = data.provided()

    if "customer_id" in sent:
        customer_id = sent["customer_id"]
        if customer_id is None:
            document.customer = None
        else:
            try:
                document.customer = Customer.objects.get(pk=customer_id)
            except Customer.DoesNotExist:
                raise NotFoundError("Customer not found")

    for field in SNAPSHOT_FIELDS:
        if sent.get(field) is not None:
            setattr(document, field, sent[field])

    customer = document.customer
    if customer is not None:
        document.customer_name = document.customer_name or customer.name
        document.customer_phone = document.customer_phone or customer.phone
        document.customer_address = document.customer_address or customer.address
        document.customer_email = document.customer_email or customer.email

    if not document.customer_name:
        raise ValidationError("customerName: customer name is required")


def apply_totals(document, totals) -> None:
    document.subtotal = totals.subtotal
    document.discount_amount = totals.discount_amount
    document.vat_percent = totals.vat_percent
    document.total = totals.total


def write_items(item_model, parent_field: str, document, lines) -> list:
    """Replace every item of ``document`` with ``lines``."""
    item_model.objects.filter(**{parent_field: document}).delete()
    return item_model.objects.bulk_create(
        item_model(
            **{parent_field: document},
            product_id=line.product_id,
            product_name=line.product_name,
            description=line.description,
            quantity=line.quantity,
            unit_price=line.unit_price,
            line_total=line.line_total,
            position=position,
        )
        for position, line in enumerate(lines)
    )


def stored_item_inputs(items) -> list:
    """Turn persisted items back into totals input, for discount/VAT-only edits."""
    return [
        LineItemInput(
            product_name=item.product_name,
            quantity=item.quantity,
            unit_price=item.unit_price,
            product_id=item.product_id,
            description=item.description,
        )
        for item in items
    ]


def recompute_for_update(document, item_queryset, data):
    """Totals for an edit, or None when nothing monetary changed.

    Items replace wholesale when sent; discount and VAT fall back to the
    stored values.
    """
    sent = data.provided()
    if "items" not in sent and "discount" not in sent and "vat" not in sent:
        return None

    if data.items is not None:
        items = data.item_inputs()
    else:
        items = stored_item_inputs(item_queryset)

    discount = data.discount if data.discount is not None else document.discount_amount
    vat = data.vat if data.vat is not None else document.vat_percent
    return compute_totals(items, discount=discount, vat_percent=vat)


# =============================================================================
# Invoices
# =============================================================================


def _lock_invoice(invoice_id: int) -> Invoice:
    try:
        return Invoice.objects.select_for_update().get(pk=invoice_id)
    except Invoice.DoesNotExist:
        raise InvoiceNotFoundError()


@transaction.atomic
def create_invoice(data, *, created_by=None, reference_date: Optional[date] = None) -> Invoice:
    """
    Create an invoice directly (not from a quotation).

    Args:
        data: InvoiceCreateRequest
        created_by: Acting user, if any
        reference_date: Numbering period (defaults to today)

    Returns:
        The new invoice with remaining_amount == total

    Raises:
        ValidationError: On bad items, discount or VAT
    """
    totals = compute_totals(data.item_inputs(), discount=data.discount, vat_percent=data.vat)

    draft = Invoice(created_by=created_by, due_date=data.due_date, notes=data.notes or "")
    apply_customer(draft, data)
    apply_totals(draft, totals)
    draft.paid_amount = 0
    draft.remaining_amount = totals.total
    draft.status = derive_status(totals.total, Decimal("0"))
    if draft.status == "paid":
        draft.paid_at = timezone.now()

    def insert(number):
        draft.pk = None
        draft.invoice_number = number
        draft.save(force_insert=True)
        return draft

    invoice = allocate_with_retry("invoice", insert, reference_date=reference_date)
    write_items(InvoiceItem, "invoice", invoice, totals.lines)

    logger.info("Created invoice %s total=%s", invoice.invoice_number, invoice.total)
    return invoice


@transaction.atomic
def update_invoice(invoice_id: int, data) -> Invoice:
    """Edit an invoice.

    Replacing items recomputes totals; the balance and status are then
    re-derived from the amount already paid.
    """
    invoice = _lock_invoice(invoice_id)
    sent = data.provided()

    apply_customer(invoice, data)
    if "notes" in sent:
        invoice.notes = data.notes or ""
    if "due_date" in sent:
        invoice.due_date = data.due_date

    totals = recompute_for_update(invoice, invoice.items.all(), data)
    if totals is not None:
        apply_totals(invoice, totals)
        write_items(InvoiceItem, "invoice", invoice, totals.lines)
        invoice.remaining_amount = invoice.total - invoice.paid_amount
        invoice.status = derive_status(invoice.total, invoice.paid_amount)
        if invoice.status == "paid":
            invoice.paid_at = invoice.paid_at or timezone.now()
        else:
            invoice.paid_at = None

    invoice.save()
    logger.info("Updated invoice %s", invoice.invoice_number)
    return get_invoice(invoice.pk)


@transaction.atomic
def set_status(invoice_id: int, status: str) -> Invoice:
    """Manually override the status. Amounts are left as they are."""
    if status not in dict(Invoice.STATUS_CHOICES):
        raise ValidationError("status: must be one of unpaid, partial, paid")

    invoice = _lock_invoice(invoice_id)
    invoice.status = status
    invoice.paid_at = timezone.now() if status == "paid" else None
    invoice.save(update_fields=["status", "paid_at", "updated_at"])
    logger.info("Invoice %s status set to %s", invoice.invoice_number, status)
    return get_invoice(invoice.pk)


@transaction.atomic
def delete_invoice(invoice_id: int) -> None:
    invoice = _lock_invoice(invoice_id)
    if invoice.receipts.exists():
        raise InvoiceHasReceiptsError()
    invoice.delete()
    logger.info("Deleted invoice %s", invoice.invoice_number)


def add_signature(invoice_id: int, signature_data: str, signed_by: str = "") -> InvoiceSignature:
    invoice = get_invoice(invoice_id)
    return InvoiceSignature.objects.create(
        invoice=invoice,
        signature_data=signature_data,
        signed_by=signed_by,
    )


def add_image(invoice_id: int, url: str, filename: str = "") -> InvoiceImage:
    invoice = get_invoice(invoice_id)
    return InvoiceImage.objects.create(invoice=invoice, url=url, filename=filename)
