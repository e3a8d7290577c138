"""Base class for fit/transform components."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from ..errors import InvalidShapeError, NotFittedError

if TYPE_CHECKING:
    from typing import Self


class TransformerMixin(ABC):
    """Shared behaviour for encoders, scalers and imputers.

    Subclasses implement fit() and transform(). State is empty at
    construction, replaced (never merged) by every fit() call, and read-only
    during transform().
    """

    def __init__(self) -> None:
        self.n_features_in_: int = 0
        self._is_fitted = False

    @property
    def is_fitted(self) -> bool:
        """Whether fit() has been called."""
        return self._is_fitted

    @abstractmethod
    def fit(self, X: Any, y: Any = None) -> Self:
        """Learn state from training data and return self."""

    @abstractmethod
    def transform(self, X: Any) -> Any:
        """Apply the fitted state to X."""

    def fit_transform(self, X: Any, y: Any = None) -> Any:
        """Fit to X, then transform X.

        Args:
            X: Training data.
            y: Ignored by unsupervised transformers.

        Returns:
            The transformed training data.
        """
        return self.fit(X, y).transform(X)

    def _mark_fitted(self, n_features: int) -> None:
        self.n_features_in_ = n_features
        self._is_fitted = True

    def _check_is_fitted(self) -> None:
        if not self._is_fitted:
            raise NotFittedError(type(self).__name__)

    def _check_n_features(self, n_features: int) -> None:
        if n_features != self.n_features_in_:
            raise InvalidShapeError(
                f"{type(self).__name__} was fitted with {self.n_features_in_} features, "
                f"got {n_features}"
            )

    def __repr__(self) -> str:
        state = "fitted" if self._is_fitted else "unfitted"
        return f"{type(self).__name__}({state}, n_features_in={self.n_features_in_})"
