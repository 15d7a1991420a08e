"""
Inventory sort component.

Public API for field-ordered inventory copies.
"""

from .component import (
    ABSENT,
    compare_by_field,
    compare_values,
    field_value,
    run,
    sort_inventory,
    validate_sort_inputs,
)
from .models import SortInventoryInput, SortInventoryOutput

__all__ = [
    # Functions
    "compare_by_field",
    "compare_values",
    "field_value",
    "run",
    "sort_inventory",
    "validate_sort_inputs",
    # Models
    "SortInventoryInput",
    "SortInventoryOutput",
    # Constants
    "ABSENT",
]
