"""
Unit tests for discount component.

Tests:
- Discount amount for valid price and rate
- Inclusive rate bounds and zero price
- None for non-numeric or out-of-range input
- run() separates invalid input from a valid result
"""

from __future__ import annotations

import math
from fractions import Fraction

import pytest

from stockroom.domain import NOT_A_NUMBER, OUT_OF_RANGE
from stockroom.rules import DiscountRules, InventoryRules

from ..component import (
    calculate_discount,
    load_config_from_rules,
    run,
    validate_discount_inputs,
)
from ..models import CalculateDiscountInput, DiscountConfig, DiscountOutput

# --- Fixtures ---


@pytest.fixture
def rounding_config() -> DiscountConfig:
    """Config rounding amounts to cents."""
    return DiscountConfig(round_digits=2)


# --- Valid Input Tests ---


class TestCalculateDiscount:
    """Tests for calculate_discount with valid input."""

    def test_ten_percent_of_hundred(self) -> None:
        """10% off 100 is 10."""
        assert calculate_discount(100, 0.1) == 10

    def test_decimal_price_and_rate(self) -> None:
        """Decimal price and rate are multiplied without rounding."""
        result = calculate_discount(123.45, 0.25)
        assert result == pytest.approx(30.8625)
        assert result == 123.45 * 0.25

    def test_zero_rate(self) -> None:
        """A rate of exactly 0 is valid."""
        assert calculate_discount(50, 0) == 0

    def test_full_rate(self) -> None:
        """A rate of exactly 1 returns the full price."""
        assert calculate_discount(50, 1) == 50

    def test_zero_price(self) -> None:
        """A price of exactly 0 is valid."""
        assert calculate_discount(0, 0.5) == 0

    def test_fraction_inputs(self) -> None:
        """Any real number is accepted."""
        assert calculate_discount(Fraction(10), Fraction(1, 4)) == Fraction(5, 2)

    def test_nan_rate_passes_through(self) -> None:
        """NaN is a number and fails no range comparison."""
        assert math.isnan(calculate_discount(100, float("nan")))


# --- Invalid Input Tests ---


class TestCalculateDiscountInvalid:
    """Tests for calculate_discount returning None."""

    @pytest.mark.parametrize(
        "price,rate",
        [
            ("100", 0.1),
            (100, "0.1"),
            (None, 0.1),
            (100, None),
            ([100], 0.1),
            (True, 0.1),
            (100, False),
        ],
    )
    def test_non_numeric_input(self, price: object, rate: object) -> None:
        """Non-numeric price or rate returns None."""
        assert calculate_discount(price, rate) is None

    def test_rate_below_zero(self) -> None:
        """Negative rate returns None."""
        assert calculate_discount(100, -0.1) is None

    def test_rate_above_one(self) -> None:
        """Rate above 1 returns None."""
        assert calculate_discount(100, 1.001) is None

    def test_negative_price(self) -> None:
        """Negative price returns None."""
        assert calculate_discount(-100, 0.1) is None

    def test_does_not_raise_on_garbage(self) -> None:
        """Arbitrary objects are rejected quietly."""
        assert calculate_discount(object(), object()) is None

    def test_price_too_large_for_float(self) -> None:
        """An int price that overflows float multiplication returns None."""
        assert calculate_discount(10**400, 0.5) is None

    def test_huge_int_price_with_int_rate(self) -> None:
        """Integer arithmetic never overflows."""
        assert calculate_discount(10**400, 1) == 10**400


# --- Validation Tests ---


class TestValidateDiscountInputs:
    """Tests for validate_discount_inputs."""

    def test_valid_inputs(self) -> None:
        """Valid inputs produce no errors."""
        assert validate_discount_inputs(100, 0.5) == []

    def test_both_types_reported(self) -> None:
        """Type errors are reported for each argument."""
        errors = validate_discount_inputs("a", "b")
        assert [e.code for e in errors] == [NOT_A_NUMBER, NOT_A_NUMBER]
        assert [e.field_name for e in errors] == ["price", "discount_rate"]

    def test_range_errors(self) -> None:
        """Rate and price range errors are both reported."""
        errors = validate_discount_inputs(-1, 2)
        assert [e.code for e in errors] == [OUT_OF_RANGE, OUT_OF_RANGE]
        assert [e.field_name for e in errors] == ["discount_rate", "price"]


# --- Configuration Tests ---


class TestDiscountConfig:
    """Tests for configurable bounds and rounding."""

    def test_rounding(self, rounding_config: DiscountConfig) -> None:
        """round_digits rounds the amount."""
        assert calculate_discount(123.45, 0.25, rounding_config) == 30.86

    def test_narrower_rate_bounds(self) -> None:
        """Rates outside configured bounds are rejected."""
        config = DiscountConfig(max_rate=0.5)
        assert calculate_discount(100, 0.5, config) == 50
        assert calculate_discount(100, 0.6, config) is None

    def test_min_price(self) -> None:
        """Prices below min_price are rejected."""
        config = DiscountConfig(min_price=10)
        assert calculate_discount(9.99, 0.1, config) is None
        assert calculate_discount(10, 0.1, config) == 1

    def test_load_config_from_rules(self) -> None:
        """Rules discount section maps onto DiscountConfig."""
        rules = InventoryRules(
            discount=DiscountRules(min_rate=0.05, max_rate=0.9, min_price=1, round_digits=2)
        )
        config = load_config_from_rules(rules)
        assert config == DiscountConfig(
            min_rate=0.05, max_rate=0.9, min_price=1, round_digits=2
        )

    def test_default_rules_match_default_config(self) -> None:
        """Default rules reproduce the default bounds."""
        assert load_config_from_rules(InventoryRules()) == DiscountConfig()


# --- Run Tests ---


class TestRun:
    """Tests for the run entry point."""

    def test_success(self) -> None:
        """Valid input yields amount and success."""
        output = run(CalculateDiscountInput(price=100, discount_rate=0.1))
        assert isinstance(output, DiscountOutput)
        assert output.success is True
        assert output.amount == 10
        assert output.errors == []

    def test_zero_amount_is_success(self) -> None:
        """A zero amount is still a successful result."""
        output = run(CalculateDiscountInput(price=50, discount_rate=0))
        assert output.success is True
        assert output.amount == 0

    def test_invalid_input(self) -> None:
        """Invalid input yields errors and no amount."""
        output = run(CalculateDiscountInput(price=-1, discount_rate=0.1))
        assert output.success is False
        assert output.amount is None
        assert output.errors[0].code == OUT_OF_RANGE

    def test_price_too_large_for_float(self) -> None:
        """Overflow is reported as an out-of-range price."""
        output = run(CalculateDiscountInput(price=10**400, discount_rate=0.5))
        assert output.success is False
        assert output.amount is None
        assert [(e.code, e.field_name) for e in output.errors] == [(OUT_OF_RANGE, "price")]

    def test_unknown_input_type_raises(self) -> None:
        """run rejects unknown input models."""
        with pytest.raises(TypeError):
            run((100, 0.1))  # type: ignore[arg-type]
