"""Quotation services: creation, edits, attachments and sending.

Conversion to an invoice lives in conversion.py, the public approval flow
in approval.py.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from django.db import transaction

from docledger.core.tasks import after_commit
from docledger.invoicing.services import (
    apply_customer,
    apply_totals,
    recompute_for_update,
    write_items,
)
from docledger.invoicing.totals import compute_totals
from docledger.notifications import dispatch
from docledger.sequence.services import allocate_with_retry

from .exceptions import QuotationConvertedError, QuotationNotFoundError
from .models import Quotation, QuotationImage, QuotationItem, QuotationSignature
from .selectors import get_quotation

logger = logging.getLogger(__name__)


@dataclass
class SendResult:
    sent: bool
    recipient: Optional[str] = None
    error: Optional[str] = None


def _lock_quotation(quotation_id: int) -> Quotation:
    try:
        return Quotation.objects.select_for_update().get(pk=quotation_id)
    except Quotation.DoesNotExist:
        raise QuotationNotFoundError()


@transaction.atomic
def create_quotation(
    data,
    *,
    created_by=None,
    notifier=None,
    reference_date: Optional[date] = None,
) -> Quotation:
    """
    Create a pending quotation with a fresh approval token.

    Args:
        data: QuotationCreateRequest
        created_by: Acting user, if any
        notifier: Notifier for the owner's "new quotation" email, or None
        reference_date: Numbering period (defaults to today)

    Raises:
        ValidationError: On a missing customer name, bad items, discount or VAT
    """
    totals = compute_totals(data.item_inputs(), discount=data.discount, vat_percent=data.vat)

    draft = Quotation(
        created_by=created_by,
        valid_until=data.valid_until,
        notes=data.notes or "",
        status="pending",
        approval_status="pending",
    )
    apply_customer(draft, data)
    apply_totals(draft, totals)

    def insert(number):
        draft.pk = None
        draft.quotation_number = number
        draft.save(force_insert=True)
        return draft

    quotation = allocate_with_retry("quotation", insert, reference_date=reference_date)
    write_items(QuotationItem, "quotation", quotation, totals.lines)

    if notifier is not None:
        after_commit("new quotation", dispatch.notify_new_quotation, notifier, quotation.pk)

    logger.info("Created quotation %s total=%s", quotation.quotation_number, quotation.total)
    return quotation


@transaction.atomic
def update_quotation(quotation_id: int, data) -> Quotation:
    """Edit a quotation.

    Items replace wholesale and totals are recomputed, with discount and
    VAT falling back to the stored values. A converted quotation keeps
    its items, and nothing can set the status to converted here.

    Raises:
        QuotationNotFoundError: If the quotation does not exist
        QuotationConvertedError: On an item/price edit of a converted quotation
    """
    quotation = _lock_quotation(quotation_id)
    sent = data.provided()

    monetary_change = any(key in sent for key in ("items", "discount", "vat"))
    if quotation.status == "converted" and (monetary_change or "status" in sent):
        raise QuotationConvertedError()

    apply_customer(quotation, data)
    if "notes" in sent:
        quotation.notes = data.notes or ""
    if "valid_until" in sent:
        quotation.valid_until = data.valid_until
    if data.status is not None:
        quotation.status = data.status

    totals = recompute_for_update(quotation, quotation.items.all(), data)
    if totals is not None:
        apply_totals(quotation, totals)
        write_items(QuotationItem, "quotation", quotation, totals.lines)

    quotation.save()
    logger.info("Updated quotation %s", quotation.quotation_number)
    return get_quotation(quotation.pk)


@transaction.atomic
def delete_quotation(quotation_id: int) -> None:
    """Delete a quotation. An invoice converted from it survives, unlinked."""
    quotation = _lock_quotation(quotation_id)
    quotation.delete()
    logger.info("Deleted quotation %s", quotation.quotation_number)


def add_signature(quotation_id: int, signature_data: str, signed_by: str = "") -> QuotationSignature:
    quotation = get_quotation(quotation_id)
    return QuotationSignature.objects.create(
        quotation=quotation,
        signature_data=signature_data,
        signed_by=signed_by,
    )


def add_image(quotation_id: int, url: str, filename: str = "") -> QuotationImage:
    quotation = get_quotation(quotation_id)
    return QuotationImage.objects.create(quotation=quotation, url=url, filename=filename)


def send_quotation(quotation_id: int, email=None, *, notifier, renderer) -> SendResult:
    """Email the quotation PDF and approval link to the customer.

    Rendering or delivery failures are reported in the result, never raised.

    Raises:
        QuotationNotFoundError: If the quotation does not exist
    """
    quotation = get_quotation(quotation_id)
    recipient = email or quotation.customer_email
    if not recipient:
        return SendResult(sent=False, error="No email address for this customer")

    try:
        result = dispatch.email_quotation_to_customer(notifier, renderer, quotation, recipient)
    except Exception as e:
        logger.exception("Sending quotation %s failed", quotation.quotation_number)
        return SendResult(sent=False, recipient=recipient, error=str(e))

    if not result.sent:
        return SendResult(sent=False, recipient=recipient, error=result.reason)
    return SendResult(sent=True, recipient=recipient)
