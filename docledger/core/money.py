"""Money value object for document amounts."""

from dataclasses import dataclass, field
from decimal import ROUND_HALF_EVEN, Decimal

from .conf import ledger_setting

# Documents settle in satang (2 dp) for every currency we issue in
CENTS = Decimal("0.01")


def _ledger_currency() -> str:
    return ledger_setting("CURRENCY")


@dataclass(frozen=True)
class Money:
    """
    Immutable amount in the ledger currency.

    Usage:
        Money("2674.995").quantized().amount  # Decimal("2675.00")
        Money(Decimal("2675")).display()      # "2,675.00"
    """

    amount: Decimal
    currency: str = field(default_factory=_ledger_currency)

    def __post_init__(self):
        if not isinstance(self.amount, Decimal):
            # Use object.__setattr__ because dataclass is frozen
            object.__setattr__(self, "amount", Decimal(str(self.amount)))

    def quantized(self) -> "Money":
        """Round to 2 dp with banker's rounding (ROUND_HALF_EVEN)."""
        return Money(self.amount.quantize(CENTS, rounding=ROUND_HALF_EVEN), self.currency)

    def is_positive(self) -> bool:
        return self.amount > 0

    def display(self) -> str:
        """Format for documents and emails, e.g. '2,675.00'."""
        return f"{self.quantized().amount:,.2f}"

    def __str__(self):
        return f"{self.display()} {self.currency}"
