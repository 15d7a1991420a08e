"""
Inventory domain types.

Records are supplied by callers; this package never owns their schema and
only reads fields by name.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

# --- Records ---

ProductRecord = Mapping[str, Any]
ProductCollection = Sequence[ProductRecord]
Predicate = Callable[[ProductRecord], Any]

# Sequence types accepted as a product collection. str and bytes are
# sequences too but never a collection of records.
COLLECTION_TYPES: tuple[type, ...] = (list, tuple)
