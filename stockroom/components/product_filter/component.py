"""
Product filter component.

Selects the records a caller-supplied predicate accepts.

Invariants:
- Result preserves source order
- Source collection is never mutated
- Invalid input yields [] from filter_products, never an exception
"""

from __future__ import annotations

from typing import Any

from stockroom.domain import (
    InventoryValidationError,
    Predicate,
    ProductCollection,
    ProductRecord,
    check_predicate,
    check_sequence,
    log_rejection,
)

from .models import FilterProductsInput, FilterProductsOutput


def validate_filter_inputs(products: Any, predicate: Any) -> list[InventoryValidationError]:
    """Validate the collection and predicate."""
    return check_sequence(products, "products") + check_predicate(predicate, "predicate")


def _select(products: ProductCollection, predicate: Predicate) -> list[ProductRecord]:
    return [record for record in products if predicate(record)]


def filter_products(products: Any, predicate: Any) -> list[ProductRecord]:
    """
    Filter products by predicate.

    Errors raised by the predicate itself propagate.

    Args:
        products: List or tuple of records
        predicate: Callable taking one record

    Returns:
        New list of records for which predicate is truthy, in source order,
        or [] if either input is invalid
    """
    errors = validate_filter_inputs(products, predicate)
    if errors:
        log_rejection("filter_products", errors)
        return []

    return _select(products, predicate)


def run(inp: FilterProductsInput) -> FilterProductsOutput:
    """
    Run product filtering with explicit errors.

    success=False means invalid input; success=True with no products
    means nothing matched.
    """
    if not isinstance(inp, FilterProductsInput):
        raise TypeError(f"Unknown input type: {type(inp)}")

    errors = validate_filter_inputs(inp.products, inp.predicate)
    if errors:
        log_rejection("product_filter.run", errors)
        return FilterProductsOutput(products=[], errors=errors, success=False)

    matched = _select(inp.products, inp.predicate)
    return FilterProductsOutput(
        products=matched,
        total_products=len(inp.products),
        matched_products=len(matched),
    )
