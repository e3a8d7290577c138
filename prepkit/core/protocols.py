"""Protocols shared by transformers, estimators and numeric backends.

Transformer and InvertibleTransformer describe the fit/transform contract
every encoder and scaler satisfies. ArrayBackend is the numeric-array
capability those transformers are built on; it is passed to each component
instead of being process-wide state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from typing import Self

    from numpy.typing import NDArray


@runtime_checkable
class Transformer(Protocol):
    """Protocol for fit/transform components.

    fit() learns per-column state from the whole training batch and returns
    the transformer itself. transform() applies that state to new data
    without modifying it.
    """

    def fit(self, X: Any, y: Any = None) -> Self:
        """Learn state from training data.

        Args:
            X: Training data.
            y: Ignored by unsupervised transformers.

        Returns:
            The fitted transformer.
        """
        ...

    def transform(self, X: Any) -> Any:
        """Apply the fitted state to data."""
        ...

    def fit_transform(self, X: Any, y: Any = None) -> Any:
        """Fit on X, then transform X."""
        ...


@runtime_checkable
class InvertibleTransformer(Transformer, Protocol):
    """Transformer whose output can be mapped back to the input space."""

    def inverse_transform(self, X: Any) -> Any:
        """Undo transform()."""
        ...


class ArrayBackend(Protocol):
    """Numeric operations the scalers and imputers depend on.

    Reductions are column-wise for axis=0 and must ignore NaN entries.
    """

    name: str

    def isnan(self, x: NDArray[Any]) -> NDArray[Any]: ...

    def where(self, mask: NDArray[Any], a: Any, b: Any) -> NDArray[Any]: ...

    def abs(self, x: NDArray[Any]) -> NDArray[Any]: ...

    def nanmin(self, x: NDArray[Any], axis: int = 0) -> NDArray[Any]: ...

    def nanmax(self, x: NDArray[Any], axis: int = 0) -> NDArray[Any]: ...

    def nanmean(self, x: NDArray[Any], axis: int = 0) -> NDArray[Any]: ...

    def nanstd(self, x: NDArray[Any], axis: int = 0) -> NDArray[Any]: ...

    def nanmedian(self, x: NDArray[Any], axis: int = 0) -> NDArray[Any]: ...

    def replace_zeros(self, x: NDArray[Any], value: float = 1.0) -> NDArray[Any]: ...
