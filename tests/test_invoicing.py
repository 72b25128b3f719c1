"""Tests for invoice services."""

from datetime import date
from decimal import Decimal

import pytest

from docledger.core.exceptions import NotFoundError, ValidationError
from docledger.invoicing.exceptions import InvoiceHasReceiptsError, InvoiceNotFoundError
from docledger.invoicing.models import Invoice, InvoiceItem
from docledger.invoicing.payments import apply_payment
from docledger.invoicing.schemas import InvoiceUpdateRequest
from docledger.invoicing.selectors import get_invoice, list_invoices
from docledger.invoicing.services import (
    add_image,
    add_signature,
    create_invoice,
    delete_invoice,
    set_status,
    update_invoice,
)

from .factories import OCTOBER, invoice_request


def update_request(**payload) -> InvoiceUpdateRequest:
    return InvoiceUpdateRequest.model_validate(payload)


@pytest.mark.django_db
class TestCreateInvoice:

    def test_creates_numbered_unpaid_invoice(self, invoice):
        invoice = get_invoice(invoice.pk)
        assert invoice.invoice_number == "INV2569100001"
        assert invoice.status == "unpaid"
        assert invoice.subtotal == Decimal("2500.00")
        assert invoice.vat_amount == Decimal("175.00")
        assert invoice.total == Decimal("2675.00")
        assert invoice.paid_amount == Decimal("0.00")
        assert invoice.remaining_amount == Decimal("2675.00")
        assert invoice.quotation is None

    def test_zero_total_invoice_starts_paid(self, regular_user):
        invoice = create_invoice(
            invoice_request(items=[{"productName": "Warranty check", "quantity": 1, "price": "0"}]),
            created_by=regular_user,
            reference_date=OCTOBER,
        )
        assert invoice.total == Decimal("0.00")
        assert invoice.status == "paid"
        assert invoice.paid_at is not None

    def test_items_are_stored_in_order(self, invoice):
        items = list(InvoiceItem.objects.filter(invoice=invoice))
        assert [i.product_name for i in items] == ["Air conditioner service", "Refrigerant refill"]
        assert [i.line_total for i in items] == [Decimal("2000.00"), Decimal("500.00")]

    def test_second_invoice_gets_next_number(self, invoice, regular_user):
        second = create_invoice(invoice_request(), created_by=regular_user, reference_date=OCTOBER)
        assert second.invoice_number == "INV2569100002"

    def test_customer_fills_blank_snapshot_fields(self, customer):
        invoice = create_invoice(
            invoice_request(customerId=customer.pk, customerEmail="", customerPhone=""),
            reference_date=OCTOBER,
        )
        assert invoice.customer == customer
        assert invoice.customer_email == "somchai@example.com"
        assert invoice.customer_address == "99 Sukhumvit Road, Bangkok"

    def test_unknown_customer_is_not_found(self):
        with pytest.raises(NotFoundError):
            create_invoice(invoice_request(customerId=9999), reference_date=OCTOBER)

    def test_explicit_vat_and_discount(self):
        invoice = create_invoice(
            invoice_request(discount="500", vat="0", dueDate="2026-11-30"),
            reference_date=OCTOBER,
        )
        assert invoice.total == Decimal("2000.00")
        assert invoice.due_date == date(2026, 11, 30)

    def test_rejected_discount_creates_nothing(self, settings):
        settings.DOCLEDGER = {**settings.DOCLEDGER, "DISCOUNT_POLICY": "reject"}
        with pytest.raises(ValidationError):
            create_invoice(invoice_request(discount="3000"), reference_date=OCTOBER)
        assert Invoice.objects.count() == 0


@pytest.mark.django_db
class TestUpdateInvoice:

    def test_replacing_items_recomputes_totals(self, invoice):
        updated = update_invoice(
            invoice.pk,
            update_request(items=[{"productName": "Inspection", "quantity": 1, "price": "1000"}]),
        )
        assert updated.total == Decimal("1070.00")
        assert updated.remaining_amount == Decimal("1070.00")
        assert [i.product_name for i in updated.items.all()] == ["Inspection"]

    def test_discount_only_edit_keeps_items(self, invoice):
        updated = update_invoice(invoice.pk, update_request(discount="500"))
        assert updated.items.count() == 2
        assert updated.total == Decimal("2140.00")

    def test_reducing_total_below_paid_amount_marks_paid(self, invoice, regular_user):
        apply_payment(invoice.pk, Decimal("1500"), recorded_by=regular_user, reference_date=OCTOBER)

        updated = update_invoice(
            invoice.pk,
            update_request(items=[{"productName": "Inspection", "quantity": 1, "price": "1000"}]),
        )

        assert updated.status == "paid"
        assert updated.paid_at is not None
        assert updated.remaining_amount == Decimal("-430.00")

    def test_customer_only_edit_leaves_money_alone(self, invoice):
        updated = update_invoice(invoice.pk, update_request(customerName="Somchai J.", notes="Gate code 42"))
        assert updated.customer_name == "Somchai J."
        assert updated.notes == "Gate code 42"
        assert updated.total == Decimal("2675.00")

    def test_missing_invoice(self):
        with pytest.raises(InvoiceNotFoundError):
            update_invoice(404, update_request(notes="x"))


@pytest.mark.django_db
class TestStatusAndDeletion:

    def test_manual_status_override(self, invoice):
        paid = set_status(invoice.pk, "paid")
        assert paid.status == "paid"
        assert paid.paid_at is not None
        assert paid.paid_amount == Decimal("0.00")

        reopened = set_status(invoice.pk, "unpaid")
        assert reopened.paid_at is None

    def test_unknown_status_is_rejected(self, invoice):
        with pytest.raises(ValidationError):
            set_status(invoice.pk, "cancelled")

    def test_delete_unpaid_invoice(self, invoice):
        delete_invoice(invoice.pk)
        assert not Invoice.objects.filter(pk=invoice.pk).exists()

    def test_invoice_with_receipts_cannot_be_deleted(self, invoice, regular_user):
        apply_payment(invoice.pk, Decimal("100"), recorded_by=regular_user, reference_date=OCTOBER)
        with pytest.raises(InvoiceHasReceiptsError):
            delete_invoice(invoice.pk)
        assert Invoice.objects.filter(pk=invoice.pk).exists()

    def test_list_filters_by_status(self, invoice, regular_user):
        second = create_invoice(invoice_request(), reference_date=OCTOBER)
        set_status(second.pk, "paid")
        assert [i.pk for i in list_invoices("paid")] == [second.pk]
        assert list_invoices().count() == 2


@pytest.mark.django_db
class TestAttachments:

    def test_signature_and_image(self, invoice):
        add_signature(invoice.pk, "data:image/png;base64,AAAA", "Somchai")
        add_image(invoice.pk, "/media/uploads/site.jpg", "site.jpg")

        invoice = get_invoice(invoice.pk)
        assert invoice.signatures.get().signed_by == "Somchai"
        assert invoice.images.get().filename == "site.jpg"

    def test_attachment_to_missing_invoice(self):
        with pytest.raises(InvoiceNotFoundError):
            add_signature(404, "data:image/png;base64,AAAA")
