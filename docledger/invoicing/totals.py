"""Monetary totals for quotations and invoices.

Pure functions: no database access. Callers persist the results so a
stored document keeps its figures even if the VAT rate changes later.

    total = (subtotal - discount) * (1 + vat_percent / 100)
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Iterable, Optional

from docledger.core.conf import ledger_setting, policy_setting
from docledger.core.exceptions import ValidationError
from docledger.core.money import Money

HUNDRED = Decimal("100")


class DiscountExceedsSubtotalError(ValidationError):
    """Raised under the 'reject' discount policy."""

    default_message = "Discount cannot exceed the subtotal"


@dataclass(frozen=True)
class LineItemInput:
    """One line as sent by the client, before validation."""

    product_name: str
    quantity: int
    unit_price: Decimal
    product_id: Optional[int] = None
    description: str = ""


@dataclass(frozen=True)
class ComputedLine:
    product_name: str
    quantity: int
    unit_price: Decimal
    line_total: Decimal
    product_id: Optional[int] = None
    description: str = ""


@dataclass(frozen=True)
class Totals:
    """Result of compute_totals. All amounts are quantized to 2 dp."""

    lines: tuple
    subtotal: Decimal
    discount_amount: Decimal
    vat_percent: Decimal
    vat_amount: Decimal
    total: Decimal


def _to_decimal(value, field: str) -> Decimal:
    if isinstance(value, float):
        value = str(value)
    try:
        return Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise ValidationError(f"{field} must be a number")


def _money(amount: Decimal) -> Decimal:
    return Money(amount).quantized().amount


def compute_line(item: LineItemInput, position: int = 0) -> ComputedLine:
    """Validate one item and compute its line total.

    Raises:
        ValidationError: If quantity is not an integer >= 1 or price < 0
    """
    label = f"items.{position}"
    if not item.product_name or not str(item.product_name).strip():
        raise ValidationError(f"{label}.productName: product name is required")

    quantity = item.quantity
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        quantity_decimal = _to_decimal(quantity, f"{label}.quantity")
        if quantity_decimal != quantity_decimal.to_integral_value():
            raise ValidationError(f"{label}.quantity: must be a whole number")
        quantity = int(quantity_decimal)
    if quantity < 1:
        raise ValidationError(f"{label}.quantity: must be at least 1")

    unit_price = _to_decimal(item.unit_price, f"{label}.price")
    if unit_price < 0:
        raise ValidationError(f"{label}.price: must not be negative")

    return ComputedLine(
        product_name=str(item.product_name).strip(),
        quantity=quantity,
        unit_price=_money(unit_price),
        line_total=_money(quantity * unit_price),
        product_id=item.product_id,
        description=item.description or "",
    )


def _apply_discount_policy(subtotal: Decimal, discount: Decimal) -> Decimal:
    if discount <= subtotal:
        return discount
    policy = policy_setting("DISCOUNT_POLICY")
    if policy == "reject":
        raise DiscountExceedsSubtotalError()
    if policy == "clamp":
        return subtotal
    return discount


def compute_totals(
    items: Iterable[LineItemInput],
    discount=None,
    vat_percent=None,
) -> Totals:
    """Compute line totals, subtotal, VAT and grand total.

    Args:
        items: Line items; at least one is required
        discount: Absolute discount amount (default 0)
        vat_percent: VAT rate in percent (default DOCLEDGER['VAT_PERCENT'])

    Raises:
        ValidationError: On an empty item list, a bad item, a negative
            discount or VAT, or (policy 'reject') a discount above the subtotal
    """
    lines = tuple(compute_line(item, i) for i, item in enumerate(items))
    if not lines:
        raise ValidationError("At least one item is required")

    discount_amount = _money(_to_decimal(discount if discount is not None else 0, "discount"))
    if discount_amount < 0:
        raise ValidationError("discount: must not be negative")

    if vat_percent is None:
        vat_percent = ledger_setting("VAT_PERCENT")
    vat_percent = _to_decimal(vat_percent, "vat")
    if vat_percent < 0:
        raise ValidationError("vat: must not be negative")

    subtotal = _money(sum((line.line_total for line in lines), Decimal("0")))
    discount_amount = _apply_discount_policy(subtotal, discount_amount)

    taxable = subtotal - discount_amount
    vat_amount = _money(taxable * vat_percent / HUNDRED)
    total = _money(taxable + vat_amount)

    return Totals(
        lines=lines,
        subtotal=subtotal,
        discount_amount=discount_amount,
        vat_percent=vat_percent,
        vat_amount=vat_amount,
        total=total,
    )


def derive_status(total: Decimal, paid_amount: Decimal, current: str = "unpaid") -> str:
    """Status implied by the running balance.

    paid when nothing remains, partial once anything was paid, otherwise
    the current status is kept.
    """
    remaining = total - paid_amount
    if remaining <= 0:
        return "paid"
    if paid_amount > 0:
        return "partial"
    return current
