"""Payment application for invoices.

Records a payment against an invoice, keeps the running balance
consistent and issues the matching receipt, all in one transaction.
"""

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Optional

from django.db import transaction
from django.utils import timezone

from docledger.core.conf import policy_setting
from docledger.core.money import Money
from docledger.core.tasks import after_commit
from docledger.notifications import dispatch
from docledger.receipts.services import issue_receipt

from .exceptions import (
    InvalidPaymentAmountError,
    InvoiceNotFoundError,
    OverpaymentError,
    PaymentNotAuthorizedError,
)
from .models import Invoice, Payment
from .selectors import get_invoice
from .totals import derive_status

logger = logging.getLogger(__name__)


@dataclass
class PaymentResult:
    invoice: Invoice
    payment: Payment
    receipt: object
    became_paid: bool = False


def _payment_amount(amount) -> Decimal:
    try:
        value = Decimal(str(amount)) if amount is not None else Decimal("0")
    except InvalidOperation:
        raise InvalidPaymentAmountError()
    if not value.is_finite():
        raise InvalidPaymentAmountError()
    value = Money(value).quantized().amount
    if value <= 0:
        raise InvalidPaymentAmountError()
    return value


def _apply_overpayment_policy(amount: Decimal, remaining: Decimal) -> Decimal:
    if amount <= remaining:
        return amount
    policy = policy_setting("OVERPAYMENT_POLICY")
    if policy == "reject":
        raise OverpaymentError(
            f"Payment of {Money(amount).display()} exceeds the remaining "
            f"balance of {Money(remaining).display()}"
        )
    if policy == "clamp":
        if remaining <= 0:
            raise OverpaymentError("This invoice is already fully paid")
        return remaining
    return amount


def apply_payment(
    invoice_id: int,
    amount,
    method: str = "cash",
    notes: str = "",
    *,
    recorded_by,
    notifier=None,
    renderer=None,
    reference_date: Optional[date] = None,
) -> PaymentResult:
    """Record a payment and issue its receipt.

    Locks the invoice row, adds ``amount`` to paid_amount, recomputes
    remaining_amount and derives the status (paid once nothing remains,
    partial once anything was paid). The payment, the invoice update and
    the receipt commit together.

    After commit, best effort: owner notifications ("payment received",
    plus "fully paid" when the invoice just became paid) and the receipt
    PDF emailed to the customer.

    Args:
        invoice_id: Invoice to pay
        amount: Positive amount
        method: cash, transfer, credit, promptpay, cheque, ...
        notes: Free text stored on the payment and receipt
        recorded_by: Acting user (required)
        notifier: Notifier for after-commit emails, or None to skip them
        renderer: DocumentRenderer for the receipt PDF, or None to skip it
        reference_date: Receipt numbering period (defaults to today)

    Returns:
        PaymentResult with the refreshed invoice (payments newest first)

    Raises:
        PaymentNotAuthorizedError: If recorded_by is missing
        InvalidPaymentAmountError: If amount is not positive
        InvoiceNotFoundError: If the invoice does not exist
        OverpaymentError: If the overpayment policy refuses the amount
    """
    if recorded_by is None or not getattr(recorded_by, "pk", None):
        raise PaymentNotAuthorizedError()

    amount = _payment_amount(amount)

    with transaction.atomic():
        try:
            invoice = Invoice.objects.select_for_update().get(pk=invoice_id)
        except Invoice.DoesNotExist:
            raise InvoiceNotFoundError()

        amount = _apply_overpayment_policy(amount, invoice.remaining_amount)
        was_paid = invoice.status == "paid"

        invoice.paid_amount = invoice.paid_amount + amount
        invoice.remaining_amount = invoice.total - invoice.paid_amount
        invoice.status = derive_status(invoice.total, invoice.paid_amount, invoice.status)
        if invoice.status == "paid":
            invoice.paid_at = invoice.paid_at or timezone.now()
        else:
            invoice.paid_at = None
        invoice.save(
            update_fields=["paid_amount", "remaining_amount", "status", "paid_at", "updated_at"]
        )

        payment = Payment.objects.create(
            invoice=invoice,
            amount=amount,
            method=method or "cash",
            notes=notes or "",
            recorded_by=recorded_by,
        )
        receipt = issue_receipt(payment, recorded_by, reference_date=reference_date)

        became_paid = invoice.status == "paid" and not was_paid

        if notifier is not None:
            after_commit("payment received", dispatch.notify_payment_received, notifier, payment.pk)
            if became_paid:
                after_commit("fully paid", dispatch.notify_fully_paid, notifier, invoice.pk)
            if renderer is not None:
                after_commit(
                    "receipt email",
                    dispatch.email_receipt_to_customer,
                    notifier,
                    renderer,
                    receipt.pk,
                )

    logger.info(
        "Payment %s of %s on %s (%s), remaining %s, receipt %s",
        payment.pk,
        amount,
        invoice.invoice_number,
        invoice.status,
        invoice.remaining_amount,
        receipt.receipt_number,
    )
    return PaymentResult(
        invoice=get_invoice(invoice.pk),
        payment=payment,
        receipt=receipt,
        became_paid=became_paid,
    )
