"""
Inventory domain: record types and shared boundary guards.
"""

from .entities import (
    COLLECTION_TYPES,
    Predicate,
    ProductCollection,
    ProductRecord,
)
from .guards import (
    NOT_A_FIELD_NAME,
    NOT_A_NUMBER,
    NOT_A_SEQUENCE,
    NOT_CALLABLE,
    OUT_OF_RANGE,
    InventoryValidationError,
    check_field_name,
    check_number,
    check_predicate,
    check_range,
    check_sequence,
    is_field_name,
    is_number,
    is_predicate,
    is_sequence,
    log_rejection,
)

__all__ = [
    # Types
    "COLLECTION_TYPES",
    "Predicate",
    "ProductCollection",
    "ProductRecord",
    # Errors
    "InventoryValidationError",
    "NOT_A_FIELD_NAME",
    "NOT_A_NUMBER",
    "NOT_A_SEQUENCE",
    "NOT_CALLABLE",
    "OUT_OF_RANGE",
    # Guards
    "check_field_name",
    "check_number",
    "check_predicate",
    "check_range",
    "check_sequence",
    "is_field_name",
    "is_number",
    "is_predicate",
    "is_sequence",
    "log_rejection",
]
