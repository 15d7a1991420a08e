"""
Boundary guards shared by the inventory components.

Each check returns a list of validation errors (empty if valid) so callers
can either collect them into an output model or collapse them into a
sentinel return value.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from numbers import Real
from typing import Any

from .entities import COLLECTION_TYPES

logger = logging.getLogger(__name__)

# --- Error Codes ---

NOT_A_NUMBER = "NOT_A_NUMBER"
OUT_OF_RANGE = "OUT_OF_RANGE"
NOT_A_SEQUENCE = "NOT_A_SEQUENCE"
NOT_CALLABLE = "NOT_CALLABLE"
NOT_A_FIELD_NAME = "NOT_A_FIELD_NAME"


# --- Validation Error ---


@dataclass(frozen=True)
class InventoryValidationError:
    """Inventory input validation error."""

    code: str
    message: str
    field_name: str | None = None


# --- Predicates ---


def is_number(value: Any) -> bool:
    """Check if value is a real number (bool excluded)."""
    return isinstance(value, Real) and not isinstance(value, bool)


def is_sequence(value: Any) -> bool:
    """Check if value is an ordered collection of records."""
    return isinstance(value, COLLECTION_TYPES)


def is_predicate(value: Any) -> bool:
    return callable(value)


def is_field_name(value: Any) -> bool:
    return isinstance(value, str)


# --- Checks ---


def check_number(value: Any, field_name: str) -> list[InventoryValidationError]:
    """
    Validate that value is a number.

    Args:
        value: The value to validate
        field_name: Argument name reported in the error

    Returns:
        List of validation errors (empty if valid)
    """
    if is_number(value):
        return []

    return [
        InventoryValidationError(
            code=NOT_A_NUMBER,
            message=f"{field_name} must be a number, got {type(value).__name__}",
            field_name=field_name,
        )
    ]


def check_range(
    value: Any,
    field_name: str,
    minimum: float | None = None,
    maximum: float | None = None,
) -> list[InventoryValidationError]:
    """
    Validate that a number lies within inclusive bounds.

    Either bound may be None for an open end. Comparisons are plain
    relational operators, so NaN is never reported as out of range.

    Args:
        value: A number (call check_number first)
        field_name: Argument name reported in the error
        minimum: Inclusive lower bound
        maximum: Inclusive upper bound

    Returns:
        List of validation errors (empty if valid)
    """
    if minimum is not None and value < minimum:
        return [
            InventoryValidationError(
                code=OUT_OF_RANGE,
                message=f"{field_name} must be >= {minimum}, got {value}",
                field_name=field_name,
            )
        ]

    if maximum is not None and value > maximum:
        return [
            InventoryValidationError(
                code=OUT_OF_RANGE,
                message=f"{field_name} must be <= {maximum}, got {value}",
                field_name=field_name,
            )
        ]

    return []


def check_sequence(value: Any, field_name: str) -> list[InventoryValidationError]:
    """Validate that value is a list or tuple of records."""
    if is_sequence(value):
        return []

    return [
        InventoryValidationError(
            code=NOT_A_SEQUENCE,
            message=f"{field_name} must be a list or tuple, got {type(value).__name__}",
            field_name=field_name,
        )
    ]


def check_predicate(value: Any, field_name: str) -> list[InventoryValidationError]:
    """Validate that value is callable."""
    if is_predicate(value):
        return []

    return [
        InventoryValidationError(
            code=NOT_CALLABLE,
            message=f"{field_name} must be callable, got {type(value).__name__}",
            field_name=field_name,
        )
    ]


def check_field_name(value: Any, field_name: str) -> list[InventoryValidationError]:
    """Validate that value is a field name string."""
    if is_field_name(value):
        return []

    return [
        InventoryValidationError(
            code=NOT_A_FIELD_NAME,
            message=f"{field_name} must be a string, got {type(value).__name__}",
            field_name=field_name,
        )
    ]


def log_rejection(operation: str, errors: list[InventoryValidationError]) -> None:
    """Record a rejected call at debug level."""
    logger.debug(
        "%s rejected input: %s",
        operation,
        ", ".join(f"{e.field_name}={e.code}" for e in errors),
    )
