"""
Product filter component.

Public API for predicate-based product filtering.
"""

from .component import filter_products, run, validate_filter_inputs
from .models import FilterProductsInput, FilterProductsOutput

__all__ = [
    # Functions
    "filter_products",
    "run",
    "validate_filter_inputs",
    # Models
    "FilterProductsInput",
    "FilterProductsOutput",
]
