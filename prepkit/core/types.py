"""Value types for prepkit.

This module defines the closed set of category values accepted by the
encoders, the keys used to compare them, and the helpers that build
vocabularies and code mappings from raw columns.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import Any, Union

import numpy as np
import pandas as pd

from ..errors import InvalidDataError

# A single category value. None marks a missing cell.
Category = Union[bool, int, float, str, None]

# (kind, value) pair used for hashing and equality of category values
CategoryKey = tuple[str, Any]

# Code emitted for values that are absent from a fitted vocabulary
UNKNOWN_CODE = -1

_NAN_KEY: CategoryKey = ("number", "nan")
_MISSING_KEY: CategoryKey = ("missing", None)


def unwrap_scalar(value: Any) -> Any:
    """Convert numpy scalars to the equivalent Python object."""
    if isinstance(value, np.generic):
        return value.item()
    return value


def category_key(value: Any) -> CategoryKey:
    """Return the comparison key for a category value.

    Booleans, numbers and text never compare equal to each other, so True and 1
    are distinct categories while 1 and 1.0 are the same one. All NaN values
    share a single key.

    Raises:
        InvalidDataError: If the value is not a number, string, boolean or missing.
    """
    value = unwrap_scalar(value)
    if value is None or value is pd.NA:
        return _MISSING_KEY
    if isinstance(value, bool):
        return ("bool", value)
    if isinstance(value, (int, float)):
        if isinstance(value, float) and math.isnan(value):
            return _NAN_KEY
        return ("number", value)
    if isinstance(value, str):
        return ("text", value)
    raise InvalidDataError(f"unsupported category value {value!r} of type {type(value).__name__}")


def unique_in_order(values: Iterable[Any]) -> list[Category]:
    """Distinct values in order of first appearance."""
    seen: set[CategoryKey] = set()
    result: list[Category] = []
    for value in values:
        key = category_key(value)
        if key not in seen:
            seen.add(key)
            result.append(None if key == _MISSING_KEY else unwrap_scalar(value))
    return result


def categories_to_mapping(categories: Sequence[Category]) -> dict[CategoryKey, int]:
    """Build the value -> code lookup for one vocabulary."""
    return {category_key(value): index for index, value in enumerate(categories)}


def is_numeric_value(value: Any) -> bool:
    """Whether a cell holds a number (booleans included)."""
    value = unwrap_scalar(value)
    return isinstance(value, (bool, int, float))
