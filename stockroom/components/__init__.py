"""
Inventory components (atomic component pattern).

- discount: discount amount for a price
- product_filter: predicate-based selection
- inventory_sort: field-ordered copies
"""
