"""Template context for printable documents.

Renders from stored document fields only: totals are never recomputed
here, so a reprint always matches the original.
"""

from docledger.core.conf import ledger_setting
from docledger.core.money import Money

DOCUMENT_TITLES = {
    "quotation": "Quotation",
    "invoice": "Invoice",
    "receipt": "Receipt",
}


def _company() -> dict:
    return {"name": ledger_setting("COMPANY_NAME")}


def _totals(document) -> dict:
    return {
        "subtotal": Money(document.subtotal),
        "discount": Money(document.discount_amount),
        "vat_percent": document.vat_percent,
        "vat": Money(document.vat_amount),
        "total": Money(document.total),
    }


def _customer(document) -> dict:
    return {
        "name": document.customer_name,
        "phone": document.customer_phone,
        "address": document.customer_address,
        "email": document.customer_email,
        "tax_id": document.customer.tax_id if document.customer_id else "",
    }


def quotation_context(quotation) -> dict:
    return {
        "title": DOCUMENT_TITLES["quotation"],
        "company": _company(),
        "number": quotation.quotation_number,
        "issued_on": quotation.created_at,
        "valid_until": quotation.valid_until,
        "customer": _customer(quotation),
        "items": list(quotation.items.all()),
        "totals": _totals(quotation),
        "signatures": list(quotation.signatures.all()),
        "notes": quotation.notes,
    }


def invoice_context(invoice) -> dict:
    return {
        "title": DOCUMENT_TITLES["invoice"],
        "company": _company(),
        "number": invoice.invoice_number,
        "issued_on": invoice.created_at,
        "due_date": invoice.due_date,
        "customer": _customer(invoice),
        "items": list(invoice.items.all()),
        "totals": _totals(invoice),
        "paid": Money(invoice.paid_amount),
        "remaining": Money(invoice.remaining_amount),
        "status": invoice.get_status_display(),
        "signatures": list(invoice.signatures.all()),
        "notes": invoice.notes,
    }


def receipt_context(receipt) -> dict:
    invoice = receipt.invoice
    return {
        "title": DOCUMENT_TITLES["receipt"],
        "company": _company(),
        "number": receipt.receipt_number,
        "issued_on": receipt.created_at,
        "invoice_number": invoice.invoice_number,
        "customer": _customer(invoice),
        "amount": Money(receipt.amount),
        "method": receipt.method,
        "issued_by": receipt.issued_by.display_name,
        "remaining": Money(invoice.remaining_amount),
        "signatures": list(receipt.signatures.all()),
        "notes": receipt.notes,
    }
