"""Request builders shared by the test modules."""

from datetime import date

from django.test import Client

from docledger.accounts.tokens import issue_token
from docledger.invoicing.schemas import InvoiceCreateRequest
from docledger.quotations.schemas import QuotationCreateRequest

# 2026-10-19 is October 2569 in the Buddhist era
OCTOBER = date(2026, 10, 19)

FAKE_PDF = b"%PDF-1.4 fake"

STANDARD_ITEMS = [
    {"productName": "Air conditioner service", "quantity": 2, "price": "1000.00"},
    {"productName": "Refrigerant refill", "quantity": 1, "price": "500.00"},
]


def invoice_request(**overrides) -> InvoiceCreateRequest:
    """Body for a 2,500 THB invoice (2,675.00 with 7% VAT)."""
    payload = {
        "customerName": "Somchai Jaidee",
        "customerEmail": "somchai@example.com",
        "customerPhone": "0812345678",
        "items": STANDARD_ITEMS,
        **overrides,
    }
    return InvoiceCreateRequest.model_validate(payload)


def quotation_request(**overrides) -> QuotationCreateRequest:
    payload = {
        "customerName": "Somchai Jaidee",
        "customerEmail": "somchai@example.com",
        "items": STANDARD_ITEMS,
        **overrides,
    }
    return QuotationCreateRequest.model_validate(payload)


def bearer_client(user) -> Client:
    return Client(headers={"Authorization": f"Bearer {issue_token(user)}"})
