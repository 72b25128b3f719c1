"""Side effects fired after ledger transactions commit.

Every function here takes ids, re-reads the committed rows and sends
through the given Notifier. They are scheduled with
``docledger.core.tasks.after_commit`` so any failure is logged and dropped.
"""

import logging

from docledger.invoicing.models import Invoice, Payment
from docledger.quotations.models import Quotation
from docledger.receipts.models import Receipt
from docledger.rendering.renderer import filename_for

from . import messages
from .mailer import Attachment, EmailResult

logger = logging.getLogger(__name__)


def notify_new_quotation(notifier, quotation_id: int) -> EmailResult:
    quotation = Quotation.objects.get(pk=quotation_id)
    return notifier.notify_owner(messages.new_quotation(quotation))


def notify_quotation_decided(notifier, quotation_id: int) -> EmailResult:
    quotation = Quotation.objects.get(pk=quotation_id)
    return notifier.notify_owner(messages.quotation_decided(quotation))


def notify_quotation_converted(notifier, invoice_id: int) -> EmailResult:
    invoice = Invoice.objects.get(pk=invoice_id)
    return notifier.notify_owner(messages.quotation_converted(invoice))


def notify_payment_received(notifier, payment_id: int) -> EmailResult:
    payment = Payment.objects.select_related("invoice").get(pk=payment_id)
    return notifier.notify_owner(messages.payment_received(payment))


def notify_fully_paid(notifier, invoice_id: int) -> EmailResult:
    invoice = Invoice.objects.get(pk=invoice_id)
    return notifier.notify_owner(messages.fully_paid(invoice))


def email_invoice_to_customer(notifier, renderer, invoice_id: int) -> EmailResult:
    """Render the invoice PDF and mail it to the customer, if we know an address."""
    invoice = Invoice.objects.get(pk=invoice_id)
    if not invoice.customer_email:
        logger.debug("Invoice %s has no customer email, not sending", invoice.invoice_number)
        return EmailResult(sent=False, reason="no_recipient")

    pdf = renderer.render_invoice(invoice)
    return notifier.send_message(
        invoice.customer_email,
        messages.invoice_to_customer(invoice),
        [Attachment(filename_for("invoice", invoice), pdf)],
    )


def email_receipt_to_customer(notifier, renderer, receipt_id: int) -> EmailResult:
    receipt = Receipt.objects.select_related("invoice", "issued_by").get(pk=receipt_id)
    recipient = receipt.invoice.customer_email
    if not recipient:
        logger.debug("Receipt %s has no customer email, not sending", receipt.receipt_number)
        return EmailResult(sent=False, reason="no_recipient")

    pdf = renderer.render_receipt(receipt)
    return notifier.send_message(
        recipient,
        messages.receipt_to_customer(receipt),
        [Attachment(filename_for("receipt", receipt), pdf)],
    )


def email_quotation_to_customer(notifier, renderer, quotation, recipient: str) -> EmailResult:
    """Mail the quotation PDF with its public approval link."""
    pdf = renderer.render_quotation(quotation)
    return notifier.send_message(
        recipient,
        messages.quotation_to_customer(quotation),
        [Attachment(filename_for("quotation", quotation), pdf)],
    )


def send_check_email(notifier, recipient: str) -> EmailResult:
    return notifier.send_message(recipient, messages.email_check())
