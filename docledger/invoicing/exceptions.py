"""Exceptions for invoicing module."""

from docledger.core.exceptions import AuthError, ConflictError, NotFoundError, ValidationError


class InvoiceNotFoundError(NotFoundError):
    default_message = "Invoice not found"


class InvalidPaymentAmountError(ValidationError):
    default_message = "must specify a positive payment amount"


class OverpaymentError(ValidationError):
    """Raised under the 'reject' overpayment policy."""

    default_message = "Payment exceeds the remaining balance"


class InvoiceHasReceiptsError(ConflictError):
    default_message = "Cannot delete an invoice that already has receipts"


class PaymentNotAuthorizedError(AuthError):
    """Payment attempted without an acting user."""

    default_message = "Please log in to record a payment"
