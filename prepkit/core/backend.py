"""Numeric array backend used by scalers and imputers."""

from __future__ import annotations

import warnings
from typing import Any

import numpy as np
from numpy.typing import NDArray


class NumpyBackend:
    """ArrayBackend implementation on top of numpy.

    Reductions ignore NaN entries. A column made only of NaN reduces to NaN
    without emitting numpy's "All-NaN slice" warning; callers decide what to
    do with such columns.
    """

    name = "numpy"

    def isnan(self, x: NDArray[Any]) -> NDArray[np.bool_]:
        return np.isnan(x)

    def where(self, mask: NDArray[np.bool_], a: Any, b: Any) -> NDArray[Any]:
        return np.where(mask, a, b)

    def abs(self, x: NDArray[Any]) -> NDArray[Any]:
        return np.abs(x)

    def nanmin(self, x: NDArray[Any], axis: int = 0) -> NDArray[Any]:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", RuntimeWarning)
            return np.nanmin(x, axis=axis)

    def nanmax(self, x: NDArray[Any], axis: int = 0) -> NDArray[Any]:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", RuntimeWarning)
            return np.nanmax(x, axis=axis)

    def nanmean(self, x: NDArray[Any], axis: int = 0) -> NDArray[Any]:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", RuntimeWarning)
            return np.nanmean(x, axis=axis)

    def nanstd(self, x: NDArray[Any], axis: int = 0) -> NDArray[Any]:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", RuntimeWarning)
            return np.nanstd(x, axis=axis, ddof=0)

    def nanmedian(self, x: NDArray[Any], axis: int = 0) -> NDArray[Any]:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", RuntimeWarning)
            return np.nanmedian(x, axis=axis)

    def replace_zeros(self, x: NDArray[Any], value: float = 1.0) -> NDArray[Any]:
        """Replace exact zeros, e.g. the scale of a constant column."""
        return np.where(x == 0, value, x)


_default_backend = NumpyBackend()


def get_default_backend() -> NumpyBackend:
    """Backend used when a transformer is constructed without one."""
    return _default_backend
