"""Receipt services."""

import logging
from datetime import date
from typing import Optional

from docledger.core.exceptions import NotFoundError
from docledger.sequence.services import allocate_with_retry

from .models import Receipt, ReceiptSignature

logger = logging.getLogger(__name__)


def issue_receipt(payment, issued_by, *, reference_date: Optional[date] = None) -> Receipt:
    """Number and store the receipt for ``payment``.

    Must run inside the transaction that recorded the payment.
    """
    def insert(number):
        return Receipt.objects.create(
            receipt_number=number,
            invoice=payment.invoice,
            payment=payment,
            issued_by=issued_by,
            amount=payment.amount,
            method=payment.method,
            notes=payment.notes,
        )

    receipt = allocate_with_retry("receipt", insert, reference_date=reference_date)
    logger.info("Issued receipt %s for invoice %s", receipt.receipt_number, payment.invoice.invoice_number)
    return receipt


def receipt_queryset():
    return Receipt.objects.select_related(
        "invoice", "invoice__customer", "payment", "issued_by"
    ).prefetch_related("signatures")


def get_receipt(receipt_id: int) -> Receipt:
    try:
        return receipt_queryset().get(pk=receipt_id)
    except Receipt.DoesNotExist:
        raise NotFoundError("Receipt not found")


def receipts_for_invoice(invoice_id: int):
    return receipt_queryset().filter(invoice_id=invoice_id)


def add_signature(receipt_id: int, signature_data: str, signed_by: str = "") -> ReceiptSignature:
    receipt = get_receipt(receipt_id)
    return ReceiptSignature.objects.create(
        receipt=receipt,
        signature_data=signature_data,
        signed_by=signed_by,
    )
