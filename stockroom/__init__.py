"""
stockroom - pure utilities over in-memory product records.

The three operations never raise on bad input; they return a sentinel
instead (None for calculate_discount, [] for the others).
"""

from .components.discount import calculate_discount
from .components.inventory_sort import sort_inventory
from .components.product_filter import filter_products

__version__ = "0.1.0"

__all__ = [
    "calculate_discount",
    "filter_products",
    "sort_inventory",
]
