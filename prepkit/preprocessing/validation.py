"""Input normalization shared by every transformer.

Inputs arrive as flat sequences, 2D sequences, numpy arrays, pandas Series or
DataFrames. They are normalized to a rectangular 2D array (rows = samples,
columns = features) before any fitting or transform logic runs, and results
are converted back to the caller's structure afterwards.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Union

import numpy as np
import pandas as pd
from numpy.typing import NDArray

from ..core.types import unwrap_scalar
from ..errors import InvalidDataError, InvalidShapeError

ArrayLike = Union[Sequence[Any], NDArray[Any], pd.Series, pd.DataFrame]


def _is_row(item: Any) -> bool:
    if isinstance(item, (str, bytes)):
        return False
    return isinstance(item, (Sequence, np.ndarray, pd.Series))


def _sequence_to_2d(data: Sequence[Any]) -> NDArray[np.object_]:
    if len(data) == 0:
        raise InvalidShapeError("input is empty")

    row_flags = [_is_row(item) for item in data]
    if not any(row_flags):
        array = np.empty((len(data), 1), dtype=object)
        for i, value in enumerate(data):
            array[i, 0] = unwrap_scalar(value)
        return array
    if not all(row_flags):
        raise InvalidShapeError("input mixes scalars and rows")

    rows = [list(row) for row in data]
    n_features = len(rows[0])
    for i, row in enumerate(rows):
        if len(row) != n_features:
            raise InvalidShapeError(
                f"row {i} has {len(row)} values, expected {n_features} (jagged input)"
            )
    if n_features == 0:
        raise InvalidShapeError("input rows are empty")

    array = np.empty((len(rows), n_features), dtype=object)
    for i, row in enumerate(rows):
        for j, value in enumerate(row):
            if _is_row(value):
                raise InvalidShapeError("input has more than 2 dimensions")
            array[i, j] = unwrap_scalar(value)
    return array


def convert_to_2d_array(X: ArrayLike) -> NDArray[np.object_]:
    """Normalize input to a 2D object array with value types preserved.

    A flat input of length N becomes shape (N, 1).

    Args:
        X: Flat sequence, 2D sequence, ndarray, Series or DataFrame.

    Returns:
        Object array of shape (n_samples, n_features).

    Raises:
        InvalidShapeError: If the input is empty, jagged or not 1D/2D.
    """
    if isinstance(X, pd.DataFrame):
        array = X.to_numpy(dtype=object)
    elif isinstance(X, pd.Series):
        array = X.to_numpy(dtype=object).reshape(-1, 1)
    elif isinstance(X, np.ndarray):
        if X.ndim == 0 or X.ndim > 2:
            raise InvalidShapeError(f"expected a 1D or 2D array, got {X.ndim}D")
        array = X.astype(object)
        if array.ndim == 1:
            array = array.reshape(-1, 1)
    elif _is_row(X):
        return _sequence_to_2d(X)
    else:
        raise InvalidShapeError(f"expected a 1D or 2D input, got {type(X).__name__}")

    if array.size == 0:
        raise InvalidShapeError("input is empty")
    if any(_is_row(value) for value in array.flat):
        raise InvalidShapeError("input has more than 2 dimensions or is jagged")
    return array


def convert_to_numeric_array(X: ArrayLike) -> NDArray[np.float64]:
    """Normalize input to a 2D float64 array.

    Missing cells (None, NaN, pd.NA) become NaN.

    Raises:
        InvalidShapeError: If the input cannot be made rectangular.
        InvalidDataError: If any cell is not numeric.
    """
    array = convert_to_2d_array(X)
    missing = pd.isna(array)
    for value in array[~missing]:
        if isinstance(value, (str, bytes)):
            raise InvalidDataError(f"expected numeric data, found {value!r}")
    try:
        return np.where(missing, np.nan, array).astype(np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidDataError(f"expected numeric data: {e}") from e


def convert_to_input_type(result: NDArray[Any], original: ArrayLike) -> Any:
    """Give a 2D result the structural family of the original input.

    Flat sequences come back as flat lists, 2D sequences as lists of lists,
    arrays with the original dimensionality, and pandas objects with their
    original index, columns and name.
    """
    if isinstance(original, pd.DataFrame):
        return pd.DataFrame(result, index=original.index, columns=original.columns)
    if isinstance(original, pd.Series):
        return pd.Series(result[:, 0], index=original.index, name=original.name)
    if isinstance(original, np.ndarray):
        return result.reshape(original.shape)
    if not any(_is_row(item) for item in original):
        return result[:, 0].tolist()
    return result.tolist()
