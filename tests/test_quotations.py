"""Tests for quotation services."""

from decimal import Decimal

import pytest

from docledger.invoicing.models import Invoice
from docledger.notifications.mailer import EmailResult
from docledger.quotations.conversion import convert_to_invoice
from docledger.quotations.exceptions import QuotationConvertedError, QuotationNotFoundError
from docledger.quotations.models import Quotation
from docledger.quotations.schemas import QuotationUpdateRequest
from docledger.quotations.selectors import get_quotation, list_quotations
from docledger.quotations.services import (
    create_quotation,
    delete_quotation,
    send_quotation,
    update_quotation,
)

from .factories import OCTOBER, quotation_request


def update_request(**payload) -> QuotationUpdateRequest:
    return QuotationUpdateRequest.model_validate(payload)


@pytest.mark.django_db
class TestCreateQuotation:

    def test_creates_pending_quotation(self, quotation):
        quotation = get_quotation(quotation.pk)
        assert quotation.quotation_number == "QT2569100001"
        assert quotation.status == "pending"
        assert quotation.approval_status == "pending"
        assert quotation.total == Decimal("2675.00")
        assert quotation.items.count() == 2

    def test_each_quotation_gets_its_own_token(self, quotation):
        other = create_quotation(quotation_request(), reference_date=OCTOBER)
        assert quotation.approval_token
        assert other.approval_token != quotation.approval_token

    def test_owner_is_notified_after_commit(self, notifier, django_capture_on_commit_callbacks):
        with django_capture_on_commit_callbacks(execute=True):
            create_quotation(quotation_request(), notifier=notifier, reference_date=OCTOBER)

        message = notifier.notify_owner.call_args.args[0]
        assert message.subject == "New quotation"
        assert "QT2569100001" in message.text

    def test_list_filters_by_status(self, quotation):
        create_quotation(quotation_request(), reference_date=OCTOBER)
        update_quotation(quotation.pk, update_request(status="accepted"))
        assert [q.pk for q in list_quotations("accepted")] == [quotation.pk]


@pytest.mark.django_db
class TestUpdateQuotation:

    def test_items_replace_and_totals_recompute(self, quotation):
        updated = update_quotation(
            quotation.pk,
            update_request(
                items=[{"productName": "Duct cleaning", "quantity": 4, "price": "250"}],
                discount="100",
            ),
        )
        assert updated.subtotal == Decimal("1000.00")
        assert updated.total == Decimal("963.00")
        assert [i.quantity for i in updated.items.all()] == [4]

    def test_vat_only_edit(self, quotation):
        updated = update_quotation(quotation.pk, update_request(vat="10"))
        assert updated.total == Decimal("2750.00")

    def test_converted_quotation_rejects_price_edits(self, quotation):
        convert_to_invoice(quotation.pk, reference_date=OCTOBER)
        with pytest.raises(QuotationConvertedError):
            update_quotation(quotation.pk, update_request(discount="100"))
        with pytest.raises(QuotationConvertedError):
            update_quotation(quotation.pk, update_request(status="pending"))

    def test_converted_quotation_accepts_note_edits(self, quotation):
        convert_to_invoice(quotation.pk, reference_date=OCTOBER)
        updated = update_quotation(quotation.pk, update_request(notes="Signed copy filed"))
        assert updated.notes == "Signed copy filed"
        assert updated.status == "converted"

    def test_missing_quotation(self):
        with pytest.raises(QuotationNotFoundError):
            update_quotation(404, update_request(notes="x"))


@pytest.mark.django_db
class TestDeleteQuotation:

    def test_delete(self, quotation):
        delete_quotation(quotation.pk)
        assert not Quotation.objects.filter(pk=quotation.pk).exists()

    def test_invoice_survives_unlinked(self, quotation):
        invoice = convert_to_invoice(quotation.pk, reference_date=OCTOBER).invoice
        delete_quotation(quotation.pk)

        invoice = Invoice.objects.get(pk=invoice.pk)
        assert invoice.quotation_id is None
        assert invoice.total == Decimal("2675.00")


@pytest.mark.django_db
class TestSendQuotation:

    def test_sends_pdf_to_customer(self, quotation, notifier, renderer):
        result = send_quotation(quotation.pk, notifier=notifier, renderer=renderer)

        assert result.sent is True
        assert result.recipient == "somchai@example.com"
        recipient, message, attachments = notifier.send_message.call_args.args
        assert recipient == "somchai@example.com"
        assert quotation.approval_token in message.text
        assert attachments[0].filename == "quotation-QT2569100001.pdf"

    def test_explicit_address_wins(self, quotation, notifier, renderer):
        result = send_quotation(quotation.pk, "office@example.com", notifier=notifier, renderer=renderer)
        assert result.recipient == "office@example.com"

    def test_no_address_is_reported(self, notifier, renderer):
        quotation = create_quotation(quotation_request(customerEmail=""), reference_date=OCTOBER)
        result = send_quotation(quotation.pk, notifier=notifier, renderer=renderer)
        assert result.sent is False
        notifier.send_message.assert_not_called()

    def test_render_failure_is_reported_not_raised(self, quotation, notifier, renderer):
        renderer.render_quotation.side_effect = RuntimeError("fonts missing")
        result = send_quotation(quotation.pk, notifier=notifier, renderer=renderer)
        assert result.sent is False
        assert result.error == "fonts missing"

    def test_delivery_failure_is_reported(self, quotation, notifier, renderer):
        notifier.send_message.return_value = EmailResult(sent=False, reason="SMTP down")
        result = send_quotation(quotation.pk, notifier=notifier, renderer=renderer)
        assert result.sent is False
        assert result.error == "SMTP down"
