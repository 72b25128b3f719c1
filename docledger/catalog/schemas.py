"""Request schemas for product endpoints."""

from decimal import Decimal
from typing import Optional

from pydantic import Field

from docledger.core.schemas import RequestSchema


class ProductRequest(RequestSchema):
    name: str = Field(min_length=1, max_length=255)
    description: str = ""
    price: Decimal = Field(ge=0, max_digits=14, decimal_places=2)
    unit: str = Field(default="ชิ้น", min_length=1, max_length=50)


class ProductUpdateRequest(RequestSchema):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    price: Optional[Decimal] = Field(default=None, ge=0, max_digits=14, decimal_places=2)
    unit: Optional[str] = Field(default=None, min_length=1, max_length=50)
    is_active: Optional[bool] = None
