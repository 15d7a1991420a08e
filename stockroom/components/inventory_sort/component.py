"""
Inventory sort component.

Returns a new list of records ordered ascending by one field.

Invariants:
- Result is a new list, even when nothing moves
- Source collection and its records are never mutated
- Stable: records comparing equal keep their source order
- A missing field compares equal to everything, so sorting by a field no
  record has returns the source order
- Invalid input yields [] from sort_inventory, never an exception
"""

from __future__ import annotations

from collections.abc import Callable
from functools import cmp_to_key
from typing import Any

from stockroom.domain import (
    InventoryValidationError,
    ProductCollection,
    ProductRecord,
    check_field_name,
    check_sequence,
    log_rejection,
)

from .models import SortInventoryInput, SortInventoryOutput

# Placeholder for a field the record does not have
ABSENT = object()


def field_value(record: Any, key: str) -> Any:
    """Read record[key], or ABSENT if the record has no such field."""
    try:
        return record[key]
    except (KeyError, IndexError, TypeError):
        return ABSENT


def compare_values(a: Any, b: Any) -> int:
    """
    Three-way comparison of two field values.

    Returns -1 if a < b, 1 if a > b, else 0. ABSENT values and values
    that cannot be ordered against each other compare equal.
    """
    if a is ABSENT or b is ABSENT:
        return 0

    try:
        if a < b:
            return -1
        if a > b:
            return 1
    except TypeError:
        return 0

    return 0


def compare_by_field(key: str) -> Callable[[ProductRecord, ProductRecord], int]:
    """Build a record comparator on one field."""

    def compare(a: ProductRecord, b: ProductRecord) -> int:
        return compare_values(field_value(a, key), field_value(b, key))

    return compare


def validate_sort_inputs(inventory: Any, key: Any) -> list[InventoryValidationError]:
    """Validate the collection and field name."""
    return check_sequence(inventory, "inventory") + check_field_name(key, "key")


def _ordered(inventory: ProductCollection, key: str) -> list[ProductRecord]:
    # sorted() is stable and always allocates a new list
    return sorted(inventory, key=cmp_to_key(compare_by_field(key)))


def sort_inventory(inventory: Any, key: Any) -> list[ProductRecord]:
    """
    Sort inventory by a field, ascending.

    Args:
        inventory: List or tuple of records
        key: Field name to order by

    Returns:
        New sorted list, or [] if either input is invalid
    """
    errors = validate_sort_inputs(inventory, key)
    if errors:
        log_rejection("sort_inventory", errors)
        return []

    return _ordered(inventory, key)


def run(inp: SortInventoryInput) -> SortInventoryOutput:
    """
    Run inventory sort with explicit errors.

    success=False means invalid input; success=True with an empty list
    means the inventory was empty.
    """
    if not isinstance(inp, SortInventoryInput):
        raise TypeError(f"Unknown input type: {type(inp)}")

    errors = validate_sort_inputs(inp.inventory, inp.key)
    if errors:
        log_rejection("inventory_sort.run", errors)
        return SortInventoryOutput(inventory=[], errors=errors, success=False)

    return SortInventoryOutput(inventory=_ordered(inp.inventory, inp.key))
