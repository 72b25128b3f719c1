"""Quotation to invoice conversion.

Conversion is idempotent: converting a quotation that already has an
invoice returns that invoice instead of creating a second one.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from django.db import transaction

from docledger.core.tasks import after_commit
from docledger.invoicing.models import Invoice, InvoiceItem
from docledger.invoicing.selectors import get_invoice
from docledger.notifications import dispatch
from docledger.sequence.services import allocate_with_retry

from .exceptions import ConversionStateError, QuotationNotFoundError
from .models import Quotation

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    invoice: Invoice
    created: bool


def _copy_items(quotation, invoice) -> None:
    InvoiceItem.objects.bulk_create(
        InvoiceItem(
            invoice=invoice,
            product_id=item.product_id,
            product_name=item.product_name,
            description=item.description,
            quantity=item.quantity,
            unit_price=item.unit_price,
            line_total=item.line_total,
            position=item.position,
        )
        for item in quotation.items.all()
    )


def convert_to_invoice(
    quotation_id: int,
    *,
    notifier=None,
    renderer=None,
    reference_date: Optional[date] = None,
) -> ConversionResult:
    """
    Turn a quotation into an invoice, at most once.

    Customer snapshot, stored totals and items are copied verbatim; nothing
    is recomputed. The quotation row is locked for the whole transaction
    so concurrent conversions serialise, and the second one finds the
    invoice the first created.

    After commit, best effort: the invoice PDF is emailed to the customer
    when an address is known, and the owner is told about the conversion.

    Args:
        quotation_id: Quotation to convert
        notifier: Notifier for emails, or None to skip them
        renderer: DocumentRenderer for the invoice PDF, or None to skip it
        reference_date: Invoice numbering period (defaults to today)

    Returns:
        ConversionResult; ``created`` is False when an existing invoice
        was returned

    Raises:
        QuotationNotFoundError: If the quotation does not exist
        ConversionStateError: If marked converted but no invoice exists
    """
    with transaction.atomic():
        try:
            quotation = Quotation.objects.select_for_update().get(pk=quotation_id)
        except Quotation.DoesNotExist:
            raise QuotationNotFoundError()

        existing = Invoice.objects.filter(quotation=quotation).first()
        if existing is not None:
            if quotation.status != "converted":
                logger.warning(
                    "Quotation %s had invoice %s but status %s, repairing",
                    quotation.quotation_number,
                    existing.invoice_number,
                    quotation.status,
                )
                quotation.status = "converted"
                quotation.save(update_fields=["status", "updated_at"])
            return ConversionResult(invoice=get_invoice(existing.pk), created=False)

        if quotation.status == "converted":
            raise ConversionStateError()

        draft = Invoice(
            quotation=quotation,
            customer_id=quotation.customer_id,
            customer_name=quotation.customer_name,
            customer_phone=quotation.customer_phone,
            customer_address=quotation.customer_address,
            customer_email=quotation.customer_email,
            subtotal=quotation.subtotal,
            discount_amount=quotation.discount_amount,
            vat_percent=quotation.vat_percent,
            total=quotation.total,
            paid_amount=0,
            remaining_amount=quotation.total,
            status="unpaid",
            notes=quotation.notes,
            created_by_id=quotation.created_by_id,
        )

        def insert(number):
            draft.pk = None
            draft.invoice_number = number
            draft.save(force_insert=True)
            return draft

        invoice = allocate_with_retry("invoice", insert, reference_date=reference_date)
        _copy_items(quotation, invoice)

        quotation.status = "converted"
        quotation.save(update_fields=["status", "updated_at"])

        if notifier is not None:
            if renderer is not None:
                after_commit(
                    "invoice email",
                    dispatch.email_invoice_to_customer,
                    notifier,
                    renderer,
                    invoice.pk,
                )
            after_commit("conversion notice", dispatch.notify_quotation_converted, notifier, invoice.pk)

    logger.info("Converted quotation %s to invoice %s", quotation.quotation_number, invoice.invoice_number)
    return ConversionResult(invoice=get_invoice(invoice.pk), created=True)
