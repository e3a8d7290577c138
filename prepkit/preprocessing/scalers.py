"""Numeric feature scalers.

Every scaler learns a per-column affine transform, x' = (x - shift) / scale,
from NaN-safe column statistics. Columns whose scale comes out as zero
(constant columns) get scale 1 so transform never divides by zero. Results
are returned in the same structural family as the input.
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from typing import Any

import numpy as np
from numpy.typing import NDArray

from ..core.backend import get_default_backend
from ..core.protocols import ArrayBackend
from .base import TransformerMixin
from .validation import ArrayLike, convert_to_input_type, convert_to_numeric_array

logger = logging.getLogger(__name__)


class _AffineScaler(TransformerMixin):
    """Shared transform/inverse_transform for shift-and-scale transformers."""

    def __init__(self, backend: ArrayBackend | None = None) -> None:
        super().__init__()
        self.backend: ArrayBackend = backend or get_default_backend()
        self.scale_: NDArray[np.float64] = np.empty(0, dtype=np.float64)

    @property
    @abstractmethod
    def _shift(self) -> NDArray[np.float64]:
        """Per-column offset subtracted before scaling."""

    def _fill_empty_columns(
        self, stat: NDArray[np.float64], fill: float, name: str
    ) -> NDArray[np.float64]:
        """Replace the NaN statistic of all-NaN columns with a neutral value."""
        empty = self.backend.isnan(stat)
        if empty.any():
            logger.warning(
                f"{type(self).__name__}: columns {np.flatnonzero(empty).tolist()} contain "
                f"only NaN, using {name}={fill}"
            )
            stat = self.backend.where(empty, fill, stat)
        return stat

    def _safe_scale(self, scale: NDArray[np.float64]) -> NDArray[np.float64]:
        constant = scale == 0
        if constant.any():
            logger.debug(
                f"{type(self).__name__}: constant columns {np.flatnonzero(constant).tolist()} "
                "get scale 1"
            )
        return self.backend.replace_zeros(scale, 1.0)

    def transform(self, X: ArrayLike) -> Any:
        """Scale data with the fitted parameters.

        No clamping is done; values outside the fitted range map outside the
        target range. NaN cells stay NaN.

        Raises:
            NotFittedError: If called before fit().
            InvalidShapeError: If the feature count differs from fit time.
        """
        self._check_is_fitted()
        data = convert_to_numeric_array(X)
        self._check_n_features(data.shape[1])
        return convert_to_input_type((data - self._shift) / self.scale_, X)

    def inverse_transform(self, X: ArrayLike) -> Any:
        """Map scaled data back to the original feature space.

        Raises:
            NotFittedError: If called before fit().
            InvalidShapeError: If the feature count differs from fit time.
        """
        self._check_is_fitted()
        data = convert_to_numeric_array(X)
        self._check_n_features(data.shape[1])
        return convert_to_input_type(data * self.scale_ + self._shift, X)


class MinMaxScaler(_AffineScaler):
    """Scales each feature to [0, 1] using the range seen during fit.

    Example:
        scaler = MinMaxScaler()
        scaler.fit_transform([1, 2, 3, 4, 5])  # [0.0, 0.25, 0.5, 0.75, 1.0]
    """

    def __init__(self, backend: ArrayBackend | None = None) -> None:
        super().__init__(backend)
        self.min_: NDArray[np.float64] = np.empty(0, dtype=np.float64)

    @property
    def _shift(self) -> NDArray[np.float64]:
        return self.min_

    def fit(self, X: ArrayLike, y: Any = None) -> MinMaxScaler:
        """Learn column minima and ranges, ignoring NaN.

        Args:
            X: Numeric data.
            y: Ignored.

        Returns:
            Self for method chaining.
        """
        data = convert_to_numeric_array(X)
        data_min = self._fill_empty_columns(self.backend.nanmin(data, axis=0), 0.0, "min")
        data_max = self.backend.nanmax(data, axis=0)
        data_max = self.backend.where(self.backend.isnan(data_max), 0.0, data_max)

        self.min_ = data_min
        self.scale_ = self._safe_scale(data_max - data_min)
        self._mark_fitted(data.shape[1])
        logger.debug(f"MinMaxScaler fitted on {data.shape[0]} samples, {data.shape[1]} features")
        return self


class StandardScaler(_AffineScaler):
    """Standardizes features to zero mean and unit variance.

    Statistics ignore NaN and use the population standard deviation.

    Args:
        with_mean: Centre the data before scaling.
        with_std: Divide by the standard deviation.
        backend: Numeric backend; numpy by default.
    """

    def __init__(
        self,
        with_mean: bool = True,
        with_std: bool = True,
        backend: ArrayBackend | None = None,
    ) -> None:
        super().__init__(backend)
        self.with_mean = with_mean
        self.with_std = with_std
        self.mean_: NDArray[np.float64] = np.empty(0, dtype=np.float64)
        self.var_: NDArray[np.float64] = np.empty(0, dtype=np.float64)

    @property
    def _shift(self) -> NDArray[np.float64]:
        if self.with_mean:
            return self.mean_
        return np.zeros_like(self.mean_)

    def fit(self, X: ArrayLike, y: Any = None) -> StandardScaler:
        data = convert_to_numeric_array(X)
        std = self.backend.nanstd(data, axis=0)
        std = self.backend.where(self.backend.isnan(std), 0.0, std)

        self.mean_ = self._fill_empty_columns(self.backend.nanmean(data, axis=0), 0.0, "mean")
        self.var_ = std**2
        if self.with_std:
            self.scale_ = self._safe_scale(std)
        else:
            self.scale_ = np.ones(data.shape[1], dtype=np.float64)
        self._mark_fitted(data.shape[1])
        logger.debug(f"StandardScaler fitted on {data.shape[0]} samples, {data.shape[1]} features")
        return self


class MaxAbsScaler(_AffineScaler):
    """Scales each feature by its maximum absolute value, into [-1, 1].

    Does not shift the data, so sparsity is preserved.
    """

    def __init__(self, backend: ArrayBackend | None = None) -> None:
        super().__init__(backend)
        self.max_abs_: NDArray[np.float64] = np.empty(0, dtype=np.float64)

    @property
    def _shift(self) -> NDArray[np.float64]:
        return np.zeros_like(self.scale_)

    def fit(self, X: ArrayLike, y: Any = None) -> MaxAbsScaler:
        data = convert_to_numeric_array(X)
        max_abs = self.backend.nanmax(self.backend.abs(data), axis=0)

        self.max_abs_ = self._fill_empty_columns(max_abs, 0.0, "max_abs")
        self.scale_ = self._safe_scale(self.max_abs_)
        self._mark_fitted(data.shape[1])
        logger.debug(f"MaxAbsScaler fitted on {data.shape[0]} samples, {data.shape[1]} features")
        return self
