"""Shared fixtures for docledger tests."""

from unittest import mock

import pytest
from django.contrib.auth import get_user_model
from django.test import Client

from docledger.customers.models import Customer
from docledger.invoicing.services import create_invoice
from docledger.notifications.mailer import EmailResult, Notifier
from docledger.quotations.services import create_quotation
from docledger.rendering.renderer import DocumentRenderer

from .factories import FAKE_PDF, OCTOBER, bearer_client, invoice_request, quotation_request

User = get_user_model()


@pytest.fixture
def regular_user(db):
    """Create a regular staff user."""
    return User.objects.create_user(
        username="staff@example.com",
        email="staff@example.com",
        password="testpass123",
        name="Staff Member",
        role="user",
    )


@pytest.fixture
def admin_user(db):
    """Create an admin user."""
    return User.objects.create_user(
        username="admin@example.com",
        email="admin@example.com",
        password="testpass123",
        name="Shop Owner",
        role="admin",
    )


@pytest.fixture
def api_client(regular_user):
    """Client sending a bearer token for the regular user."""
    return bearer_client(regular_user)


@pytest.fixture
def admin_client(admin_user):
    """Client sending a bearer token for the admin user."""
    return bearer_client(admin_user)


@pytest.fixture
def anonymous_client():
    return Client()


@pytest.fixture
def customer(db):
    return Customer.objects.create(
        name="Somchai Jaidee",
        email="somchai@example.com",
        phone="0812345678",
        address="99 Sukhumvit Road, Bangkok",
        tax_id="1234567890123",
    )


@pytest.fixture
def invoice(db, regular_user):
    """Unpaid invoice INV2569100001 with a total of 2,675.00."""
    return create_invoice(invoice_request(), created_by=regular_user, reference_date=OCTOBER)


@pytest.fixture
def quotation(db, regular_user):
    """Pending quotation QT2569100001 with a total of 2,675.00."""
    return create_quotation(quotation_request(), created_by=regular_user, reference_date=OCTOBER)


@pytest.fixture
def notifier():
    """Notifier double that records every call."""
    fake = mock.create_autospec(Notifier, instance=True)
    fake.notify_owner.return_value = EmailResult(sent=True, recipient="owner@example.com")
    fake.send_message.return_value = EmailResult(sent=True, recipient="somchai@example.com")
    return fake


@pytest.fixture
def renderer():
    """Renderer double returning a fixed PDF."""
    fake = mock.create_autospec(DocumentRenderer, instance=True)
    fake.render_quotation.return_value = FAKE_PDF
    fake.render_invoice.return_value = FAKE_PDF
    fake.render_receipt.return_value = FAKE_PDF
    return fake


@pytest.fixture
def fake_pdf():
    """Stop views from loading WeasyPrint."""
    with mock.patch.object(DocumentRenderer, "render_pdf", return_value=FAKE_PDF) as patched:
        yield patched
