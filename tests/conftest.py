from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def products():
    return [
        {"id": 1, "name": "Laptop", "price": 1200, "stock": 5},
        {"id": 2, "name": "Mouse", "price": 25, "stock": 50},
        {"id": 3, "name": "Monitor", "price": 300, "stock": 0},
        {"id": 4, "name": "Keyboard", "price": 75, "stock": 20},
    ]


@pytest.fixture
def unsorted_products():
    return [
        {"name": "Cherry", "value": 30, "stock": 2},
        {"name": "Apple", "value": 10, "stock": 5},
        {"name": "Banana", "value": 20, "stock": 1},
    ]


@pytest.fixture
def project_rules_path() -> Path:
    """Path to the shipped rules.yaml."""
    return PROJECT_ROOT / "rules.yaml"
