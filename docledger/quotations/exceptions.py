"""Exceptions for quotations."""

from docledger.core.exceptions import ConflictError, NotFoundError


class QuotationNotFoundError(NotFoundError):
    default_message = "Quotation not found"


class QuotationAlreadyDecidedError(ConflictError):
    """Approve/reject called after the customer already decided."""

    def __init__(self, approval_status: str):
        super().__init__(f"This quotation has already been {approval_status}")
        self.approval_status = approval_status


class QuotationConvertedError(ConflictError):
    """Edit attempted on a quotation that became an invoice."""

    default_message = "This quotation has been converted to an invoice and can no longer be edited"


class ConversionStateError(ConflictError):
    """Quotation is marked converted but no invoice references it."""

    default_message = "Quotation is marked as converted but has no invoice"
