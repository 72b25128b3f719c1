"""Outbound email transport.

``Notifier`` owns one Django email connection for the life of the process.
It is built and started once by the services container and handed to the
ledger functions that need it.

Usage:
    notifier = Notifier()
    notifier.start()

    result = notifier.send(
        to="customer@example.com",
        subject="Invoice INV2569100001",
        body_text="Please find your invoice attached.",
        attachments=[Attachment("INV2569100001.pdf", pdf_bytes)],
    )
    if not result.sent:
        print(result.reason)

    notifier.shutdown()
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from django.conf import settings
from django.core.mail import EmailMultiAlternatives, get_connection

from docledger.core.conf import ledger_setting

logger = logging.getLogger(__name__)


@dataclass
class EmailResult:
    """Result of an email send attempt.

    Attributes:
        sent: Whether the email was handed to the backend
        recipient: Address it was sent to
        reason: Reason for failure if sent is False
    """

    sent: bool
    recipient: Optional[str] = None
    reason: Optional[str] = None


@dataclass(frozen=True)
class Attachment:
    filename: str
    content: bytes
    mimetype: str = "application/pdf"


class Notifier:
    """Sends email through one long-lived Django email connection."""

    def __init__(self, *, from_email=None, owner_email=None, enabled=None, backend=None):
        self.from_email = from_email or settings.DEFAULT_FROM_EMAIL
        self.owner_email = owner_email if owner_email is not None else ledger_setting("OWNER_EMAIL")
        self.enabled = enabled if enabled is not None else ledger_setting("NOTIFICATIONS_ENABLED")
        self.backend = backend
        self._connection = None

    @property
    def started(self) -> bool:
        return self._connection is not None

    def start(self):
        """Create the email connection. Safe to call twice."""
        if self._connection is None:
            self._connection = get_connection(self.backend)
            logger.debug("Notifier started with %s", type(self._connection).__name__)
        return self

    def shutdown(self):
        """Close the email connection."""
        if self._connection is not None:
            self._connection.close()
            self._connection = None
            logger.debug("Notifier shut down")

    def send(
        self,
        to: str,
        subject: str,
        body_text: str,
        body_html: Optional[str] = None,
        attachments: Iterable[Attachment] = (),
    ) -> EmailResult:
        """Send one email.

        Returns:
            EmailResult; transport errors are logged and reported, not raised
        """
        if not self.enabled:
            logger.debug("Notifications disabled, not sending %r", subject)
            return EmailResult(sent=False, recipient=to, reason="disabled")
        if not to:
            return EmailResult(sent=False, reason="no_recipient")

        self.start()
        email = EmailMultiAlternatives(
            subject=subject,
            body=body_text,
            from_email=self.from_email,
            to=[to],
            connection=self._connection,
        )
        if body_html:
            email.attach_alternative(body_html, "text/html")
        for attachment in attachments:
            email.attach(attachment.filename, attachment.content, attachment.mimetype)

        try:
            email.send()
        except Exception as e:
            logger.exception("Failed to send email to=%s subject=%s", to, subject)
            return EmailResult(sent=False, recipient=to, reason=str(e))

        logger.info("Email sent to=%s subject=%s", to, subject)
        return EmailResult(sent=True, recipient=to)

    def send_message(self, to: str, message, attachments: Iterable[Attachment] = ()) -> EmailResult:
        """Send a composed ``messages.Message``."""
        return self.send(to, message.subject, message.text, message.html, attachments)

    def notify_owner(self, message) -> EmailResult:
        """Send a message to the business owner, if one is configured."""
        if not self.owner_email:
            logger.warning("OWNER_EMAIL not configured, skipping %r", message.subject)
            return EmailResult(sent=False, reason="not_configured")
        return self.send_message(self.owner_email, message)
