"""
Inventory sort component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from stockroom.domain import InventoryValidationError, ProductRecord

# --- Input Models ---


@dataclass(frozen=True)
class SortInventoryInput:
    """Input for sorting inventory by a field."""

    inventory: Any
    key: Any


# --- Output Models ---


@dataclass(frozen=True)
class SortInventoryOutput:
    """Output with a sorted copy of the inventory."""

    inventory: list[ProductRecord]
    errors: list[InventoryValidationError] = field(default_factory=list)
    success: bool = True
