"""
Discount component.

Computes the discount amount for a price: price * discount_rate.

Invariants:
- Both inputs must be numbers (bool is not a number)
- discount_rate within [min_rate, max_rate], inclusive (default [0, 1])
- price >= min_price (default 0)
- Invalid input yields None from calculate_discount, never an exception
"""

from __future__ import annotations

from typing import Any

from stockroom.domain import (
    OUT_OF_RANGE,
    InventoryValidationError,
    check_number,
    check_range,
    log_rejection,
)
from stockroom.rules import InventoryRules

from .models import (
    DEFAULT_CONFIG,
    CalculateDiscountInput,
    DiscountConfig,
    DiscountOutput,
)

# --- Validation ---


def validate_discount_inputs(
    price: Any,
    discount_rate: Any,
    config: DiscountConfig = DEFAULT_CONFIG,
) -> list[InventoryValidationError]:
    """
    Validate price and discount rate.

    Type errors are reported for both arguments before any range check.

    Args:
        price: Price to discount
        discount_rate: Fraction of the price to take off
        config: Bounds to enforce

    Returns:
        List of validation errors (empty if valid)
    """
    errors = check_number(price, "price") + check_number(discount_rate, "discount_rate")
    if errors:
        return errors

    errors.extend(
        check_range(
            discount_rate,
            "discount_rate",
            minimum=config.min_rate,
            maximum=config.max_rate,
        )
    )
    errors.extend(check_range(price, "price", minimum=config.min_price))
    return errors


def _apply(
    price: Any,
    discount_rate: Any,
    config: DiscountConfig,
) -> tuple[Any, list[InventoryValidationError]]:
    """Multiply price by rate, reporting prices too large for float math."""
    try:
        amount = price * discount_rate
    except OverflowError:
        return None, [
            InventoryValidationError(
                code=OUT_OF_RANGE,
                message="price is too large to multiply by discount_rate",
                field_name="price",
            )
        ]

    if config.round_digits is not None:
        amount = round(amount, config.round_digits)
    return amount, []


# --- Pure Functions ---


def calculate_discount(
    price: Any,
    discount_rate: Any,
    config: DiscountConfig | None = None,
) -> Any:
    """
    Calculate the discount amount for a price.

    No rounding is applied unless config.round_digits is set, so
    calculate_discount(123.45, 0.25) is only close to 30.8625.

    Args:
        price: Non-negative number
        discount_rate: Number in [0, 1]
        config: Optional discount bounds

    Returns:
        price * discount_rate, or None if either input is invalid
    """
    config = config or DEFAULT_CONFIG

    errors = validate_discount_inputs(price, discount_rate, config)
    if errors:
        log_rejection("calculate_discount", errors)
        return None

    amount, errors = _apply(price, discount_rate, config)
    if errors:
        log_rejection("calculate_discount", errors)
    return amount


# --- Run Function (Atomic Component Pattern) ---


def run(
    inp: CalculateDiscountInput,
    config: DiscountConfig | None = None,
) -> DiscountOutput:
    """
    Run discount calculation with explicit errors.

    Unlike calculate_discount, the output separates invalid input
    (success=False with errors) from a valid zero amount.

    Args:
        inp: Price and rate
        config: Optional discount bounds

    Returns:
        DiscountOutput with amount or errors
    """
    if not isinstance(inp, CalculateDiscountInput):
        raise TypeError(f"Unknown input type: {type(inp)}")

    config = config or DEFAULT_CONFIG

    errors = validate_discount_inputs(inp.price, inp.discount_rate, config)
    if errors:
        log_rejection("discount.run", errors)
        return DiscountOutput(amount=None, errors=errors, success=False)

    amount, errors = _apply(inp.price, inp.discount_rate, config)
    if errors:
        log_rejection("discount.run", errors)
        return DiscountOutput(amount=None, errors=errors, success=False)

    return DiscountOutput(amount=amount)


# --- Configuration Loader ---


def load_config_from_rules(rules: InventoryRules) -> DiscountConfig:
    """
    Load DiscountConfig from validated rules.

    Args:
        rules: Parsed rules model

    Returns:
        DiscountConfig instance
    """
    discount = rules.discount
    return DiscountConfig(
        min_rate=discount.min_rate,
        max_rate=discount.max_rate,
        min_price=discount.min_price,
        round_digits=discount.round_digits,
    )
