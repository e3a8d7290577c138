"""Missing value imputation."""

from __future__ import annotations

import logging
from collections import Counter
from typing import Any

import numpy as np
import pandas as pd
from numpy.typing import NDArray

from ..config import ImputeStrategy
from ..core.backend import get_default_backend
from ..core.protocols import ArrayBackend
from ..core.types import category_key, is_numeric_value, unique_in_order
from .base import TransformerMixin
from .validation import ArrayLike, convert_to_2d_array, convert_to_numeric_array

logger = logging.getLogger(__name__)

DEFAULT_TEXT_FILL = "missing_value"


def _most_frequent(column: NDArray[np.object_]) -> Any:
    """Most common value; ties go to the value seen first."""
    counts = Counter(category_key(value) for value in column)
    candidates = unique_in_order(column)
    return max(candidates, key=lambda value: counts[category_key(value)])


class SimpleImputer(TransformerMixin):
    """Fills missing values (None or NaN) column by column.

    MEAN and MEDIAN need numeric data. MOST_FREQUENT and CONSTANT also work
    on categorical columns.

    Args:
        strategy: Statistic used to compute each column's fill value.
        fill_value: Value used by the CONSTANT strategy. Defaults to 0 for
            numeric data and "missing_value" otherwise.
        backend: Numeric backend; numpy by default.
    """

    def __init__(
        self,
        strategy: ImputeStrategy = ImputeStrategy.MEAN,
        fill_value: Any = None,
        backend: ArrayBackend | None = None,
    ) -> None:
        super().__init__()
        self.strategy = strategy
        self.fill_value = fill_value
        self.backend: ArrayBackend = backend or get_default_backend()
        self.statistics_: list[Any] = []

    def fit(self, X: ArrayLike, y: Any = None) -> SimpleImputer:
        """Compute the fill value of every column.

        Returns:
            Self for method chaining.

        Raises:
            InvalidDataError: If MEAN or MEDIAN is used on non-numeric data.
        """
        if self.strategy in (ImputeStrategy.MEAN, ImputeStrategy.MEDIAN):
            data = convert_to_numeric_array(X)
            if self.strategy == ImputeStrategy.MEAN:
                stats = self.backend.nanmean(data, axis=0)
            else:
                stats = self.backend.nanmedian(data, axis=0)
            self.statistics_ = [float(s) for s in stats]
            n_features = data.shape[1]
        else:
            array2d = convert_to_2d_array(X)
            missing = pd.isna(array2d)
            n_features = array2d.shape[1]
            if self.strategy == ImputeStrategy.MOST_FREQUENT:
                self.statistics_ = [
                    _most_frequent(array2d[~missing[:, j], j]) if (~missing[:, j]).any() else np.nan
                    for j in range(n_features)
                ]
            else:
                self.statistics_ = [self._constant_fill(array2d[~missing])] * n_features

        empty = [j for j, s in enumerate(self.statistics_) if pd.isna(s)]
        if empty:
            logger.warning(
                f"SimpleImputer: columns {empty} have no observed values, filling with NaN"
            )

        self._mark_fitted(n_features)
        logger.debug(f"SimpleImputer fitted {n_features} columns with strategy {self.strategy.value}")
        return self

    def _constant_fill(self, observed: NDArray[np.object_]) -> Any:
        if self.fill_value is not None:
            return self.fill_value
        if all(is_numeric_value(value) for value in observed):
            return 0
        return DEFAULT_TEXT_FILL

    def transform(self, X: ArrayLike) -> NDArray[Any]:
        """Replace missing cells with the fitted fill values.

        Returns:
            2D float64 array when every value is numeric, object array otherwise.
            MEAN and MEDIAN always return float64.

        Raises:
            NotFittedError: If called before fit().
            InvalidShapeError: If the feature count differs from fit time.
            InvalidDataError: If MEAN or MEDIAN was fitted and X holds text.
        """
        self._check_is_fitted()
        if self.strategy in (ImputeStrategy.MEAN, ImputeStrategy.MEDIAN):
            data = convert_to_numeric_array(X)
            self._check_n_features(data.shape[1])
            fill = np.asarray(self.statistics_, dtype=np.float64)
            return self.backend.where(self.backend.isnan(data), fill, data)

        array2d = convert_to_2d_array(X)
        self._check_n_features(array2d.shape[1])

        missing = pd.isna(array2d)
        result = array2d.copy()
        for j, fill in enumerate(self.statistics_):
            result[missing[:, j], j] = fill

        if all(value is None or is_numeric_value(value) for value in result.flat):
            return np.where(pd.isna(result), np.nan, result).astype(np.float64)
        return result
