"""Request schemas for invoice endpoints.

``LineItemSchema`` and ``DocumentFields`` are shared with quotations.
"""

from datetime import date
from decimal import Decimal
from typing import List, Literal, Optional

from pydantic import Field

from docledger.core.schemas import RequestSchema

from .totals import LineItemInput


class LineItemSchema(RequestSchema):
    product_id: Optional[int] = None
    product_name: str = Field(min_length=1, max_length=255)
    description: str = ""
    quantity: int = Field(ge=1)
    price: Decimal = Field(ge=0)

    def to_input(self) -> LineItemInput:
        return LineItemInput(
            product_name=self.product_name,
            quantity=self.quantity,
            unit_price=self.price,
            product_id=self.product_id,
            description=self.description or "",
        )


class DocumentFields(RequestSchema):
    """Fields common to quotation and invoice bodies."""

    customer_id: Optional[int] = None
    customer_name: Optional[str] = Field(default=None, max_length=255)
    customer_phone: Optional[str] = None
    customer_address: Optional[str] = None
    customer_email: Optional[str] = None
    items: Optional[List[LineItemSchema]] = None
    discount: Optional[Decimal] = Field(default=None, ge=0)
    vat: Optional[Decimal] = Field(default=None, ge=0, le=100)
    notes: Optional[str] = None

    def item_inputs(self) -> List[LineItemInput]:
        return [item.to_input() for item in self.items or []]


class InvoiceCreateRequest(DocumentFields):
    customer_name: str = Field(min_length=1, max_length=255)
    items: List[LineItemSchema] = Field(min_length=1)
    due_date: Optional[date] = None


class InvoiceUpdateRequest(DocumentFields):
    due_date: Optional[date] = None


class InvoiceStatusRequest(RequestSchema):
    status: Literal["unpaid", "partial", "paid"]


class PaymentRequest(RequestSchema):
    amount: Optional[Decimal] = None
    payment_method: str = Field(default="cash", min_length=1, max_length=50)
    notes: str = ""


class SignatureRequest(RequestSchema):
    signature_data: str = Field(min_length=1)
    signed_by: str = ""


class ImageRequest(RequestSchema):
    url: str = Field(min_length=1, max_length=500)
    filename: str = ""
