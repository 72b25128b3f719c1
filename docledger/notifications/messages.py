"""Composition of notification emails.

Each composer returns a ``Message`` rendered from a template under
``notifications/``; the plain-text part is the HTML with tags stripped.
"""

from dataclasses import dataclass

from django.template.loader import render_to_string
from django.utils import timezone
from django.utils.html import strip_tags

from docledger.core.conf import ledger_setting
from docledger.core.money import Money

PAYMENT_METHOD_LABELS = {
    "cash": "Cash",
    "transfer": "Bank transfer",
    "credit": "Credit card",
    "promptpay": "PromptPay",
    "cheque": "Cheque",
}

INVOICE_STATUS_LABELS = {
    "unpaid": "Unpaid",
    "partial": "Partially paid",
    "paid": "Paid",
}


@dataclass(frozen=True)
class Message:
    subject: str
    text: str
    html: str


def _render(template: str, subject: str, context: dict) -> Message:
    context = {
        "subject": subject,
        "company_name": ledger_setting("COMPANY_NAME"),
        "sent_on": timezone.localdate(),
        **context,
    }
    html = render_to_string(f"notifications/{template}.html", context)
    text = "\n".join(line.strip() for line in strip_tags(html).splitlines() if line.strip())
    return Message(subject=subject, text=text, html=html)


def _amount(value) -> str:
    return Money(value).display()


def approval_url(quotation) -> str:
    base = ledger_setting("PUBLIC_BASE_URL").rstrip("/")
    return f"{base}/approval/{quotation.approval_token}"


def payment_method_label(method: str) -> str:
    return PAYMENT_METHOD_LABELS.get(method, method)


# =============================================================================
# Owner notifications
# =============================================================================


def new_quotation(quotation) -> Message:
    return _render("owner_event", "New quotation", {
        "headline": "New quotation",
        "rows": [
            ("Number", quotation.quotation_number),
            ("Customer", quotation.customer_name),
            ("Total", f"{_amount(quotation.total)} THB"),
        ],
    })


def quotation_decided(quotation) -> Message:
    decision = "approved" if quotation.approval_status == "approved" else "rejected"
    rows = [
        ("Number", quotation.quotation_number),
        ("Customer", quotation.customer_name),
        ("Total", f"{_amount(quotation.total)} THB"),
    ]
    if quotation.approval_notes:
        rows.append(("Notes", quotation.approval_notes))
    return _render("owner_event", f"Quotation {quotation.quotation_number} {decision}", {
        "headline": f"Customer {decision} the quotation",
        "rows": rows,
    })


def quotation_converted(invoice) -> Message:
    return _render("owner_event", "Quotation converted to invoice", {
        "headline": "Quotation converted to invoice",
        "rows": [
            ("Invoice", invoice.invoice_number),
            ("Customer", invoice.customer_name),
            ("Total", f"{_amount(invoice.total)} THB"),
            ("Status", INVOICE_STATUS_LABELS.get(invoice.status, invoice.status)),
        ],
    })


def payment_received(payment) -> Message:
    invoice = payment.invoice
    return _render("owner_event", "Payment received", {
        "headline": "Payment received",
        "rows": [
            ("Invoice", invoice.invoice_number),
            ("Customer", invoice.customer_name),
            ("Amount", f"{_amount(payment.amount)} THB"),
            ("Method", payment_method_label(payment.method)),
            ("Remaining", f"{_amount(invoice.remaining_amount)} THB"),
        ],
    })


def fully_paid(invoice) -> Message:
    return _render("owner_event", "Invoice fully paid", {
        "headline": "Invoice fully paid",
        "rows": [
            ("Invoice", invoice.invoice_number),
            ("Customer", invoice.customer_name),
            ("Total", f"{_amount(invoice.total)} THB"),
        ],
    })


# =============================================================================
# Customer emails
# =============================================================================


def quotation_to_customer(quotation) -> Message:
    return _render("customer_document", f"Quotation {quotation.quotation_number}", {
        "customer_name": quotation.customer_name,
        "document_label": "quotation",
        "number": quotation.quotation_number,
        "total": _amount(quotation.total),
        "valid_until": quotation.valid_until,
        "action_url": approval_url(quotation),
        "action_label": "Review and approve",
    })


def invoice_to_customer(invoice) -> Message:
    return _render("customer_document", f"Invoice {invoice.invoice_number}", {
        "customer_name": invoice.customer_name,
        "document_label": "invoice",
        "number": invoice.invoice_number,
        "total": _amount(invoice.total),
        "due_date": invoice.due_date,
    })


def receipt_to_customer(receipt) -> Message:
    return _render("customer_document", f"Receipt {receipt.receipt_number}", {
        "customer_name": receipt.invoice.customer_name,
        "document_label": "receipt",
        "number": receipt.receipt_number,
        "total": _amount(receipt.amount),
    })


def email_check() -> Message:
    return _render("email_check", "Test email", {})
