"""
Rules configuration: YAML loading and pydantic schema.
"""

from .loader import (
    DEFAULT_RULES_PATH,
    RULES_PATH_ENV,
    RulesValidationError,
    load_rules,
    load_rules_file,
    resolve_rules_path,
    validate_rules,
)
from .models import (
    DEFAULT_LOG_FORMAT,
    DiscountRules,
    InventoryRules,
    LogLevel,
    ObservabilityRules,
)

__all__ = [
    "DEFAULT_LOG_FORMAT",
    "DEFAULT_RULES_PATH",
    "RULES_PATH_ENV",
    "DiscountRules",
    "InventoryRules",
    "LogLevel",
    "ObservabilityRules",
    "RulesValidationError",
    "load_rules",
    "load_rules_file",
    "resolve_rules_path",
    "validate_rules",
]
