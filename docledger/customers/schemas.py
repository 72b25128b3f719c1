"""Request schemas for customer endpoints."""

from typing import Optional

from pydantic import Field

from docledger.core.schemas import RequestSchema


class CustomerRequest(RequestSchema):
    name: str = Field(min_length=1, max_length=255)
    email: str = ""
    phone: str = ""
    address: str = ""
    tax_id: str = Field(default="", max_length=20)


class CustomerUpdateRequest(RequestSchema):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    tax_id: Optional[str] = Field(default=None, max_length=20)
