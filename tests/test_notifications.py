"""Tests for the notifier, message composition, dispatch and document rendering."""

from decimal import Decimal
from smtplib import SMTPException
from unittest import mock

import pytest

from docledger.invoicing.payments import apply_payment
from docledger.notifications import dispatch, messages
from docledger.notifications.mailer import Attachment, Notifier
from docledger.rendering.renderer import DocumentRenderer, filename_for

from .factories import FAKE_PDF, OCTOBER

LOCMEM = "django.core.mail.backends.locmem.EmailBackend"


@pytest.fixture
def mail_notifier():
    notifier = Notifier(backend=LOCMEM).start()
    yield notifier
    notifier.shutdown()


class TestNotifier:

    def test_send_with_attachment(self, mail_notifier, mailoutbox):
        result = mail_notifier.send(
            "somchai@example.com",
            "Invoice INV2569100001",
            "Please find your invoice attached.",
            "<p>Please find your invoice attached.</p>",
            [Attachment("invoice.pdf", FAKE_PDF)],
        )

        assert result.sent is True
        sent = mailoutbox[0]
        assert sent.to == ["somchai@example.com"]
        assert sent.from_email == "noreply@example.com"
        assert sent.alternatives[0][1] == "text/html"
        assert sent.attachments[0][0] == "invoice.pdf"

    def test_transport_failure_is_reported(self, mail_notifier):
        with mock.patch(
            "docledger.notifications.mailer.EmailMultiAlternatives.send",
            side_effect=SMTPException("connection refused"),
        ):
            result = mail_notifier.send("somchai@example.com", "Hi", "Body")

        assert result.sent is False
        assert result.reason == "connection refused"

    def test_disabled(self, mailoutbox):
        result = Notifier(backend=LOCMEM, enabled=False).send("a@example.com", "Hi", "Body")
        assert (result.sent, result.reason) == (False, "disabled")
        assert mailoutbox == []

    def test_no_recipient(self, mail_notifier):
        assert mail_notifier.send("", "Hi", "Body").reason == "no_recipient"

    def test_owner_not_configured(self, mailoutbox):
        notifier = Notifier(backend=LOCMEM, owner_email="")
        result = notifier.notify_owner(messages.email_check())
        assert result.reason == "not_configured"
        assert mailoutbox == []

    def test_owner_comes_from_settings(self, mail_notifier, mailoutbox):
        mail_notifier.notify_owner(messages.email_check())
        assert mailoutbox[0].to == ["owner@example.com"]

    def test_shutdown_is_idempotent(self):
        notifier = Notifier(backend=LOCMEM).start()
        notifier.shutdown()
        notifier.shutdown()
        assert notifier.started is False


@pytest.mark.django_db
class TestMessages:

    def test_payment_received(self, invoice, regular_user):
        payment = apply_payment(
            invoice.pk, Decimal("1000"), "transfer", recorded_by=regular_user, reference_date=OCTOBER
        ).payment

        message = messages.payment_received(payment)

        assert message.subject == "Payment received"
        assert "INV2569100001" in message.text
        assert "1,000.00 THB" in message.text
        assert "Bank transfer" in message.text
        assert "1,675.00 THB" in message.text
        assert "<h2>Payment received</h2>" in message.html

    def test_quotation_link_uses_public_base_url(self, quotation):
        message = messages.quotation_to_customer(quotation)
        assert f"https://app.example.com/approval/{quotation.approval_token}" in message.text

    def test_unknown_payment_method_is_shown_as_is(self):
        assert messages.payment_method_label("crypto") == "crypto"


@pytest.mark.django_db
class TestDispatch:

    def test_invoice_without_email_is_skipped(self, invoice, notifier, renderer):
        invoice.customer_email = ""
        invoice.save()

        result = dispatch.email_invoice_to_customer(notifier, renderer, invoice.pk)

        assert result.reason == "no_recipient"
        renderer.render_invoice.assert_not_called()

    def test_receipt_email_carries_pdf(self, invoice, regular_user, notifier, renderer):
        receipt = apply_payment(
            invoice.pk, Decimal("500"), recorded_by=regular_user, reference_date=OCTOBER
        ).receipt

        dispatch.email_receipt_to_customer(notifier, renderer, receipt.pk)

        recipient, message, attachments = notifier.send_message.call_args.args
        assert recipient == "somchai@example.com"
        assert message.subject == f"Receipt {receipt.receipt_number}"
        assert attachments == [Attachment(f"receipt-{receipt.receipt_number}.pdf", FAKE_PDF)]


@pytest.mark.django_db
class TestEmailCheckApi:

    def test_admin_can_send(self, admin_client, mailoutbox):
        response = admin_client.post(
            "/api/email/test", {"email": "owner@example.com"}, content_type="application/json"
        )
        assert response.status_code == 200
        assert mailoutbox[0].subject == "Test email"

    def test_failure_is_500(self, admin_client):
        with mock.patch(
            "docledger.notifications.mailer.EmailMultiAlternatives.send",
            side_effect=SMTPException("auth failed"),
        ):
            response = admin_client.post(
                "/api/email/test", {"email": "owner@example.com"}, content_type="application/json"
            )
        assert response.status_code == 500
        assert response.json()["message"] == "Could not send email: auth failed"

    def test_regular_user_is_forbidden(self, api_client):
        response = api_client.post(
            "/api/email/test", {"email": "owner@example.com"}, content_type="application/json"
        )
        assert response.status_code == 403


@pytest.mark.django_db
class TestRenderer:

    def test_invoice_html_uses_stored_figures(self, invoice):
        html = DocumentRenderer().render_html("invoice", invoice)
        assert "INV2569100001" in html
        assert "2,675.00 THB" in html
        assert "Somchai Jaidee" in html

    def test_receipt_html(self, invoice, regular_user):
        receipt = apply_payment(
            invoice.pk, Decimal("500"), recorded_by=regular_user, reference_date=OCTOBER
        ).receipt
        html = DocumentRenderer().render_html("receipt", receipt)
        assert "500.00 THB" in html
        assert "Staff Member" in html

    def test_renderer_is_lazy(self):
        renderer = DocumentRenderer()
        assert renderer.started is False

    def test_filename(self, invoice):
        assert filename_for("invoice", invoice) == "invoice-INV2569100001.pdf"
