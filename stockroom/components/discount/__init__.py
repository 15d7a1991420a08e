"""
Discount component.

Public API for discount calculation.
"""

from .component import (
    calculate_discount,
    load_config_from_rules,
    run,
    validate_discount_inputs,
)
from .models import (
    DEFAULT_CONFIG,
    CalculateDiscountInput,
    DiscountConfig,
    DiscountOutput,
)

__all__ = [
    # Functions
    "calculate_discount",
    "load_config_from_rules",
    "run",
    "validate_discount_inputs",
    # Models
    "CalculateDiscountInput",
    "DEFAULT_CONFIG",
    "DiscountConfig",
    "DiscountOutput",
]
