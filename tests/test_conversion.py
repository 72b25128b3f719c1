"""Tests for quotation to invoice conversion."""

from decimal import Decimal

import pytest

from docledger.invoicing.models import Invoice
from docledger.quotations.conversion import convert_to_invoice
from docledger.quotations.exceptions import ConversionStateError, QuotationNotFoundError
from docledger.quotations.models import Quotation
from docledger.quotations.services import create_quotation

from .factories import OCTOBER, quotation_request


@pytest.mark.django_db
class TestConvertToInvoice:

    def test_copies_quotation_verbatim(self, quotation, customer):
        quotation.customer = customer
        quotation.notes = "Install on the 3rd floor"
        quotation.save()

        result = convert_to_invoice(quotation.pk, reference_date=OCTOBER)
        invoice = result.invoice

        assert result.created is True
        assert invoice.invoice_number == "INV2569100001"
        assert invoice.quotation_id == quotation.pk
        assert invoice.customer_id == customer.pk
        assert invoice.customer_name == quotation.customer_name
        assert invoice.customer_email == quotation.customer_email
        assert invoice.notes == "Install on the 3rd floor"
        assert invoice.subtotal == Decimal("2500.00")
        assert invoice.vat_percent == Decimal("7.00")
        assert invoice.total == Decimal("2675.00")
        assert invoice.paid_amount == Decimal("0.00")
        assert invoice.remaining_amount == Decimal("2675.00")
        assert invoice.status == "unpaid"
        assert invoice.created_by_id == quotation.created_by_id

    def test_items_are_copied_in_order(self, quotation):
        invoice = convert_to_invoice(quotation.pk, reference_date=OCTOBER).invoice
        assert [
            (i.product_name, i.quantity, i.unit_price, i.line_total) for i in invoice.items.all()
        ] == [
            ("Air conditioner service", 2, Decimal("1000.00"), Decimal("2000.00")),
            ("Refrigerant refill", 1, Decimal("500.00"), Decimal("500.00")),
        ]

    def test_stored_totals_are_not_recomputed(self, quotation, settings):
        settings.DOCLEDGER = {**settings.DOCLEDGER, "VAT_PERCENT": Decimal("10")}
        invoice = convert_to_invoice(quotation.pk, reference_date=OCTOBER).invoice
        assert invoice.total == Decimal("2675.00")

    def test_quotation_becomes_converted(self, quotation):
        convert_to_invoice(quotation.pk, reference_date=OCTOBER)
        assert Quotation.objects.get(pk=quotation.pk).status == "converted"

    def test_second_conversion_returns_same_invoice(self, quotation):
        first = convert_to_invoice(quotation.pk, reference_date=OCTOBER)
        second = convert_to_invoice(quotation.pk, reference_date=OCTOBER)

        assert second.created is False
        assert second.invoice.pk == first.invoice.pk
        assert Invoice.objects.count() == 1

    def test_status_is_repaired_when_invoice_exists(self, quotation):
        first = convert_to_invoice(quotation.pk, reference_date=OCTOBER)
        Quotation.objects.filter(pk=quotation.pk).update(status="accepted")

        second = convert_to_invoice(quotation.pk, reference_date=OCTOBER)

        assert second.invoice.pk == first.invoice.pk
        assert Quotation.objects.get(pk=quotation.pk).status == "converted"

    def test_converted_without_invoice_is_a_conflict(self, quotation):
        Quotation.objects.filter(pk=quotation.pk).update(status="converted")
        with pytest.raises(ConversionStateError):
            convert_to_invoice(quotation.pk, reference_date=OCTOBER)
        assert Invoice.objects.count() == 0

    def test_rejected_quotation_can_still_be_converted(self, quotation):
        Quotation.objects.filter(pk=quotation.pk).update(status="rejected", approval_status="rejected")
        assert convert_to_invoice(quotation.pk, reference_date=OCTOBER).created is True

    def test_missing_quotation(self):
        with pytest.raises(QuotationNotFoundError):
            convert_to_invoice(404)

    def test_each_quotation_gets_its_own_invoice(self, quotation):
        other = create_quotation(quotation_request(), reference_date=OCTOBER)
        first = convert_to_invoice(quotation.pk, reference_date=OCTOBER).invoice
        second = convert_to_invoice(other.pk, reference_date=OCTOBER).invoice
        assert (first.invoice_number, second.invoice_number) == ("INV2569100001", "INV2569100002")


@pytest.mark.django_db
class TestConversionSideEffects:

    def test_invoice_emailed_and_owner_told(
        self, quotation, notifier, renderer, django_capture_on_commit_callbacks
    ):
        with django_capture_on_commit_callbacks(execute=True):
            convert_to_invoice(quotation.pk, notifier=notifier, renderer=renderer, reference_date=OCTOBER)

        renderer.render_invoice.assert_called_once()
        recipient, message, attachments = notifier.send_message.call_args.args
        assert recipient == "somchai@example.com"
        assert message.subject == "Invoice INV2569100001"
        assert attachments[0].filename == "invoice-INV2569100001.pdf"
        assert notifier.notify_owner.call_args.args[0].subject == "Quotation converted to invoice"

    def test_repeat_conversion_sends_nothing(
        self, quotation, notifier, renderer, django_capture_on_commit_callbacks
    ):
        convert_to_invoice(quotation.pk, reference_date=OCTOBER)
        with django_capture_on_commit_callbacks(execute=True) as callbacks:
            convert_to_invoice(quotation.pk, notifier=notifier, renderer=renderer, reference_date=OCTOBER)

        assert callbacks == []
        notifier.send_message.assert_not_called()
