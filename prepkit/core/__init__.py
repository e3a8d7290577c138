"""Core types and protocols for prepkit.

This module contains the category value types, the transformer protocols
and the numeric array backend used throughout the library.
"""

from __future__ import annotations

from .backend import NumpyBackend, get_default_backend
from .protocols import ArrayBackend, InvertibleTransformer, Transformer
from .types import (
    UNKNOWN_CODE,
    Category,
    CategoryKey,
    categories_to_mapping,
    category_key,
    is_numeric_value,
    unique_in_order,
    unwrap_scalar,
)

__all__ = [
    # Types
    "Category",
    "CategoryKey",
    "UNKNOWN_CODE",
    "category_key",
    "categories_to_mapping",
    "is_numeric_value",
    "unique_in_order",
    "unwrap_scalar",
    # Protocols
    "Transformer",
    "InvertibleTransformer",
    "ArrayBackend",
    # Backend
    "NumpyBackend",
    "get_default_backend",
]
