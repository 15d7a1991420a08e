"""
Product filter component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from stockroom.domain import InventoryValidationError, ProductRecord

# --- Input Models ---


@dataclass(frozen=True)
class FilterProductsInput:
    """Input for filtering products with a predicate."""

    products: Any
    predicate: Any


# --- Output Models ---


@dataclass(frozen=True)
class FilterProductsOutput:
    """Output with matching products."""

    products: list[ProductRecord]
    total_products: int = 0
    matched_products: int = 0
    errors: list[InventoryValidationError] = field(default_factory=list)
    success: bool = True
