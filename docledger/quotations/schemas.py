"""Request schemas for quotation endpoints."""

from datetime import date
from typing import List, Literal, Optional

from pydantic import Field

from docledger.core.schemas import RequestSchema
from docledger.invoicing.schemas import DocumentFields, LineItemSchema


class QuotationCreateRequest(DocumentFields):
    customer_name: str = Field(min_length=1, max_length=255)
    items: List[LineItemSchema] = Field(min_length=1)
    valid_until: Optional[date] = None


class QuotationUpdateRequest(DocumentFields):
    valid_until: Optional[date] = None
    status: Optional[Literal["pending", "accepted", "rejected"]] = None


class DecisionRequest(RequestSchema):
    notes: str = ""
    reason: str = ""

    @property
    def comment(self) -> str:
        return self.notes or self.reason


class SendQuotationRequest(RequestSchema):
    email: Optional[str] = None
