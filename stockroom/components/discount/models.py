"""
Discount component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from stockroom.domain import InventoryValidationError

# --- Configuration ---


@dataclass(frozen=True)
class DiscountConfig:
    """Discount configuration from rules."""

    min_rate: float = 0.0
    max_rate: float = 1.0
    min_price: float = 0.0

    # None leaves the product unrounded
    round_digits: int | None = None


DEFAULT_CONFIG = DiscountConfig()


# --- Input Models ---


@dataclass(frozen=True)
class CalculateDiscountInput:
    """Input for calculating a discount amount."""

    price: Any
    discount_rate: Any


# --- Output Models ---


@dataclass(frozen=True)
class DiscountOutput:
    """Output from discount calculation."""

    amount: float | None
    errors: list[InventoryValidationError] = field(default_factory=list)
    success: bool = True
