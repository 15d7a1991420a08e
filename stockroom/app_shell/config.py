import logging
from pathlib import Path

from stockroom.components.discount import DiscountConfig, load_config_from_rules
from stockroom.rules import InventoryRules, load_rules, resolve_rules_path

logger = logging.getLogger(__name__)


def configure_logging(rules: InventoryRules) -> None:
    """
    Apply the observability rules to the root logger.
    """
    logging.basicConfig(
        level=getattr(logging, rules.observability.log_level),
        format=rules.observability.log_format,
    )


def bootstrap(rules_path: Path | str | None = None) -> tuple[InventoryRules, DiscountConfig]:
    """
    Load rules, configure logging and build component config.

    Raises FileNotFoundError if the rules file is missing.
    Raises RulesValidationError if it is invalid.
    """
    path = resolve_rules_path(rules_path)
    rules = load_rules(path)

    configure_logging(rules)
    logger.info("Rules loaded successfully from %s", path)

    discount_config = load_config_from_rules(rules)
    logger.debug(
        "Discount bounds: rate [%s, %s], min price %s",
        discount_config.min_rate,
        discount_config.max_rate,
        discount_config.min_price,
    )
    return rules, discount_config
