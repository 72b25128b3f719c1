"""Tests for line, subtotal, discount and VAT computation."""

from decimal import Decimal

import pytest

from docledger.core.exceptions import ValidationError
from docledger.invoicing.totals import (
    DiscountExceedsSubtotalError,
    LineItemInput,
    compute_line,
    compute_totals,
    derive_status,
)

ITEMS = [
    LineItemInput("Air conditioner service", 2, Decimal("1000")),
    LineItemInput("Refrigerant refill", 1, Decimal("500")),
]


def with_policy(settings, **overrides):
    settings.DOCLEDGER = {**settings.DOCLEDGER, **overrides}


class TestComputeLine:

    def test_line_total_is_quantity_times_price(self):
        line = compute_line(LineItemInput("Filter", 3, Decimal("149.50")))
        assert line.line_total == Decimal("448.50")
        assert line.unit_price == Decimal("149.50")

    def test_prices_round_half_even_to_two_places(self):
        line = compute_line(LineItemInput("Odd price", 1, Decimal("33.335")))
        assert line.unit_price == Decimal("33.34")
        assert line.line_total == Decimal("33.34")

    def test_whole_number_decimal_quantity_is_accepted(self):
        assert compute_line(LineItemInput("Filter", Decimal("2"), Decimal("10"))).quantity == 2

    @pytest.mark.parametrize("quantity", [0, -1, Decimal("1.5")])
    def test_bad_quantity_is_rejected(self, quantity):
        with pytest.raises(ValidationError):
            compute_line(LineItemInput("Filter", quantity, Decimal("10")))

    def test_negative_price_is_rejected(self):
        with pytest.raises(ValidationError):
            compute_line(LineItemInput("Filter", 1, Decimal("-0.01")))

    def test_zero_price_is_allowed(self):
        assert compute_line(LineItemInput("Free check", 1, Decimal("0"))).line_total == Decimal("0.00")

    def test_blank_product_name_is_rejected(self):
        with pytest.raises(ValidationError):
            compute_line(LineItemInput("   ", 1, Decimal("10")))


class TestComputeTotals:

    def test_standard_vat_total(self):
        totals = compute_totals(ITEMS, vat_percent=Decimal("7"))
        assert totals.subtotal == Decimal("2500.00")
        assert totals.discount_amount == Decimal("0.00")
        assert totals.vat_amount == Decimal("175.00")
        assert totals.total == Decimal("2675.00")

    def test_vat_defaults_to_configured_rate(self):
        assert compute_totals(ITEMS).vat_percent == Decimal("7")

    def test_discount_is_taken_before_vat(self):
        totals = compute_totals(ITEMS, discount=Decimal("500"), vat_percent=Decimal("7"))
        assert totals.vat_amount == Decimal("140.00")
        assert totals.total == Decimal("2140.00")

    def test_zero_vat(self):
        totals = compute_totals(ITEMS, discount=Decimal("100"), vat_percent=0)
        assert totals.total == Decimal("2400.00")

    def test_empty_items_are_rejected(self):
        with pytest.raises(ValidationError):
            compute_totals([])

    def test_negative_discount_is_rejected(self):
        with pytest.raises(ValidationError):
            compute_totals(ITEMS, discount=Decimal("-1"))

    def test_negative_vat_is_rejected(self):
        with pytest.raises(ValidationError):
            compute_totals(ITEMS, vat_percent=Decimal("-7"))

    def test_oversized_discount_allowed_by_default(self):
        totals = compute_totals(ITEMS, discount=Decimal("3000"), vat_percent=Decimal("7"))
        assert totals.total == Decimal("-535.00")

    def test_oversized_discount_rejected_under_reject_policy(self, settings):
        with_policy(settings, DISCOUNT_POLICY="reject")
        with pytest.raises(DiscountExceedsSubtotalError):
            compute_totals(ITEMS, discount=Decimal("3000"))

    def test_oversized_discount_clamped_under_clamp_policy(self, settings):
        with_policy(settings, DISCOUNT_POLICY="clamp")
        totals = compute_totals(ITEMS, discount=Decimal("3000"))
        assert totals.discount_amount == Decimal("2500.00")
        assert totals.total == Decimal("0.00")

    def test_unknown_policy_is_a_configuration_error(self, settings):
        with_policy(settings, DISCOUNT_POLICY="ignore")
        with pytest.raises(ValueError):
            compute_totals(ITEMS, discount=Decimal("3000"))


class TestDeriveStatus:

    @pytest.mark.parametrize(
        "paid,expected",
        [
            (Decimal("0"), "unpaid"),
            (Decimal("1000"), "partial"),
            (Decimal("2675"), "paid"),
            (Decimal("3000"), "paid"),
        ],
    )
    def test_status_follows_balance(self, paid, expected):
        assert derive_status(Decimal("2675"), paid) == expected

    def test_unpaid_balance_keeps_current_status(self):
        assert derive_status(Decimal("100"), Decimal("0"), current="partial") == "partial"
