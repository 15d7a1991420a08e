"""
Rules loader for stockroom.

Reads rules.yaml (or a markdown file wrapping a ```yaml block) and validates
it against InventoryRules. Fail-fast: any problem raises.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .models import InventoryRules

DEFAULT_RULES_PATH = "rules.yaml"
RULES_PATH_ENV = "STOCKROOM_RULES_PATH"


class RulesValidationError(ValueError):
    """Raised when the rules file is unparseable or fails schema validation."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Rules validation failed: {'; '.join(errors)}")


def _find_project_root() -> Path:
    """Find project root by looking for marker files."""
    current = Path.cwd()

    for parent in [current, *current.parents]:
        if (parent / "pyproject.toml").exists() or (parent / ".git").exists():
            return parent

    return current


def resolve_rules_path(rules_path: Path | str | None = None) -> Path:
    """
    Resolve the rules file location.

    Order: explicit argument, STOCKROOM_RULES_PATH, project root default.
    """
    if rules_path is not None:
        return Path(rules_path)

    env_path = os.environ.get(RULES_PATH_ENV)
    if env_path:
        return Path(env_path)

    return _find_project_root() / DEFAULT_RULES_PATH


def _strip_markdown_fence(content: str) -> str:
    """Return the first ```yaml block if present, else the content unchanged."""
    yaml_lines = []
    in_block = False
    found_block = False

    for line in content.splitlines():
        s_line = line.strip()
        if s_line.startswith("```yaml"):
            in_block = True
            found_block = True
            continue
        if in_block and s_line.startswith("```"):
            break

        if in_block:
            yaml_lines.append(line)

    if found_block:
        return "\n".join(yaml_lines)
    return content


def load_rules_file(rules_path: Path | str | None = None) -> dict[str, Any]:
    """
    Load the rules file from disk.

    Args:
        rules_path: Path to rules file. If None, uses default location.

    Returns:
        Parsed rules dictionary (empty if the file is empty).

    Raises:
        FileNotFoundError: If rules file doesn't exist.
        RulesValidationError: If the file is not valid YAML or not a mapping.
    """
    path = resolve_rules_path(rules_path)

    if not path.exists():
        raise FileNotFoundError(f"Rules file not found: {path}")

    with open(path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(_strip_markdown_fence(content))
    except yaml.YAMLError as e:
        raise RulesValidationError([f"Invalid YAML syntax: {e}"]) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise RulesValidationError(
            [f"Rules file must contain a mapping, got {type(data).__name__}"]
        )
    return data


def validate_rules(data: dict[str, Any]) -> InventoryRules:
    """
    Validate a parsed rules dictionary.

    Raises:
        RulesValidationError: With one message per schema violation.
    """
    try:
        return InventoryRules.model_validate(data)
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}"
            for err in e.errors()
        ]
        raise RulesValidationError(errors) from e


def load_rules(rules_path: Path | str | None = None) -> InventoryRules:
    """
    Load and validate the rules file.

    Raises:
        FileNotFoundError: If rules file doesn't exist.
        RulesValidationError: If YAML or schema is invalid.
    """
    return validate_rules(load_rules_file(rules_path))
