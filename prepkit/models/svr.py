"""Epsilon-support vector regression.

The optimization itself is delegated to scikit-learn's libsvm binding; this
wrapper normalizes inputs, resolves the kernel coefficient and checks state.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np
from numpy.typing import NDArray
from sklearn.svm import SVR as SklearnSVR

from ..config import SVRConfig
from ..errors import InvalidDataError, InvalidShapeError, NotFittedError
from ..preprocessing.validation import ArrayLike, convert_to_numeric_array

logger = logging.getLogger(__name__)


def resolve_gamma(gamma: float | str, X: NDArray[np.float64]) -> float:
    """Turn a gamma setting into a number for the given training data.

    "scale" uses 1 / (n_features * X.var()) and "auto" uses 1 / n_features.
    Zero-variance data falls back to 1.0.
    """
    n_features = X.shape[1]
    if gamma == "scale":
        variance = float(X.var())
        return 1.0 / (n_features * variance) if variance != 0 else 1.0
    if gamma == "auto":
        return 1.0 / n_features
    return float(gamma)


class SVR:
    """Support vector regressor.

    Example:
        config = SVRConfig.builder().kernel(Kernel.LINEAR).C(10.0).build()
        model = SVR(config).fit(X_train, y_train)
        predictions = model.predict(X_test)
    """

    def __init__(self, config: SVRConfig | None = None) -> None:
        """Initialize the regressor.

        Args:
            config: Solver configuration. Defaults to SVRConfig().
        """
        self.config = config or SVRConfig()
        self.gamma_: float | None = None
        self.n_features_in_: int = 0
        self._model: SklearnSVR | None = None

    @property
    def is_fitted(self) -> bool:
        """Whether the regressor has been fitted."""
        return self._model is not None

    def fit(self, X: ArrayLike, y: ArrayLike) -> SVR:
        """Train the regressor.

        Args:
            X: Training features.
            y: Training targets, one per sample.

        Returns:
            Self for method chaining.

        Raises:
            InvalidShapeError: If y is not 1D or its length differs from X.
            InvalidDataError: If X or y contain NaN.
        """
        X_2d = convert_to_numeric_array(X)
        y_2d = convert_to_numeric_array(y)
        if y_2d.shape[1] != 1:
            raise InvalidShapeError(f"expected a 1D target, got {y_2d.shape[1]} columns")
        y_1d = y_2d[:, 0]
        if len(y_1d) != X_2d.shape[0]:
            raise InvalidShapeError(f"X has {X_2d.shape[0]} samples but y has {len(y_1d)}")
        if np.isnan(X_2d).any() or np.isnan(y_1d).any():
            raise InvalidDataError("SVR does not accept missing values")

        self.gamma_ = resolve_gamma(self.config.gamma, X_2d)
        model = SklearnSVR(
            kernel=self.config.kernel.value,
            degree=self.config.degree,
            gamma=self.gamma_,
            coef0=self.config.coef0,
            tol=self.config.tol,
            C=self.config.C,
            epsilon=self.config.epsilon,
            shrinking=self.config.shrinking,
            cache_size=self.config.cache_size,
            max_iter=self.config.max_iter,
        )
        model.fit(X_2d, y_1d)
        self._model = model
        self.n_features_in_ = X_2d.shape[1]
        logger.debug(
            f"SVR fitted on {X_2d.shape[0]} samples with kernel={self.config.kernel.value}, "
            f"gamma={self.gamma_:.6g}"
        )
        return self

    def predict(self, X: ArrayLike) -> NDArray[np.float64]:
        """Predict targets for X.

        Raises:
            NotFittedError: If called before fit().
            InvalidShapeError: If the feature count differs from fit time.
        """
        if self._model is None:
            raise NotFittedError(type(self).__name__)
        X_2d = convert_to_numeric_array(X)
        if X_2d.shape[1] != self.n_features_in_:
            raise InvalidShapeError(
                f"SVR was fitted with {self.n_features_in_} features, got {X_2d.shape[1]}"
            )
        predictions: Any = self._model.predict(X_2d)
        return np.asarray(predictions, dtype=np.float64)
