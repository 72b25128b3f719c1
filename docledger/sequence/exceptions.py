"""Exceptions for document numbering."""

from docledger.core.exceptions import LedgerError, ValidationError


class SequenceError(LedgerError):
    """Base exception for sequence errors."""
    pass


class UnknownDocumentKindError(ValidationError):
    """Raised when asked to number a document kind we do not know."""
    pass


class NumberAllocationError(SequenceError):
    """Raised when a unique number could not be allocated after retrying."""

    default_message = "Could not allocate a unique document number, please retry"
