"""Tests for the customer approval flow."""

from datetime import date

import pytest
from freezegun import freeze_time

from docledger.quotations.approval import approve, decide, get_by_token, reject
from docledger.quotations.conversion import convert_to_invoice
from docledger.quotations.exceptions import QuotationAlreadyDecidedError, QuotationNotFoundError

from .factories import OCTOBER


@pytest.mark.django_db
class TestDecisions:

    def test_approve(self, quotation):
        decided = approve(quotation.approval_token, "Please start next week")
        assert decided.approval_status == "approved"
        assert decided.status == "accepted"
        assert decided.approval_notes == "Please start next week"
        assert decided.decided_at is not None

    def test_reject(self, quotation):
        decided = reject(quotation.approval_token, "Too expensive")
        assert decided.approval_status == "rejected"
        assert decided.status == "rejected"

    def test_decision_is_single_use(self, quotation):
        approve(quotation.approval_token)
        with pytest.raises(QuotationAlreadyDecidedError) as exc_info:
            reject(quotation.approval_token)
        assert exc_info.value.message == "This quotation has already been approved"

    def test_unknown_token(self, quotation):
        with pytest.raises(QuotationNotFoundError):
            approve("not-a-real-token")

    def test_empty_token(self):
        with pytest.raises(QuotationNotFoundError):
            get_by_token("")

    def test_unknown_decision_is_a_programming_error(self, quotation):
        with pytest.raises(ValueError):
            decide(quotation.approval_token, "maybe")

    def test_converted_quotation_keeps_status(self, quotation):
        convert_to_invoice(quotation.pk, reference_date=OCTOBER)
        decided = approve(quotation.approval_token)
        assert decided.approval_status == "approved"
        assert decided.status == "converted"

    def test_owner_is_notified(self, quotation, notifier, django_capture_on_commit_callbacks):
        with django_capture_on_commit_callbacks(execute=True):
            reject(quotation.approval_token, "Found a cheaper offer", notifier=notifier)

        message = notifier.notify_owner.call_args.args[0]
        assert message.subject == "Quotation QT2569100001 rejected"
        assert "Found a cheaper offer" in message.text


@pytest.mark.django_db
class TestExpiry:

    @freeze_time("2026-11-01 12:00:00")
    def test_past_valid_until_is_expired(self, quotation):
        quotation.valid_until = date(2026, 10, 31)
        assert quotation.is_expired is True

    @freeze_time("2026-10-31 12:00:00")
    def test_last_valid_day_is_not_expired(self, quotation):
        quotation.valid_until = date(2026, 10, 31)
        assert quotation.is_expired is False

    def test_no_valid_until_never_expires(self, quotation):
        assert quotation.is_expired is False
