"""Categorical encoders.

Each encoder learns, per input column, the ordered vocabulary of values seen
during fit (first-seen order, scanning rows top to bottom) and maps values to
their position in that vocabulary. Mappings are rebuilt from the stored
vocabulary whenever they are needed, so categories_ is the only state.
"""

from __future__ import annotations

import logging
import math
from typing import Any

import numpy as np
from numpy.typing import NDArray
from scipy import sparse

from ..config import HandleUnknown
from ..core.types import (
    UNKNOWN_CODE,
    Category,
    categories_to_mapping,
    category_key,
    unique_in_order,
)
from ..errors import InvalidDataError, InvalidShapeError, NotFittedError, UnknownCategoryError
from .base import TransformerMixin
from .validation import ArrayLike, convert_to_2d_array, convert_to_numeric_array

logger = logging.getLogger(__name__)


def _decode(code: float, categories: list[Category], column: int) -> Category:
    if math.isnan(code) or not float(code).is_integer():
        raise InvalidDataError(f"code {code!r} in column {column} is not an integer")
    index = int(code)
    if index == UNKNOWN_CODE:
        return None
    if not 0 <= index < len(categories):
        raise InvalidDataError(
            f"code {index} in column {column} is outside [0, {len(categories) - 1}]"
        )
    return categories[index]


class OrdinalEncoder(TransformerMixin):
    """Encodes each categorical column as integer codes.

    Values not present in a column's vocabulary are encoded as -1 instead of
    raising, so unseen categories at inference time do not abort the batch.

    Example:
        encoder = OrdinalEncoder().fit([["a"], ["c"], ["a"], ["b"]])
        encoder.categories_           # [["a", "c", "b"]]
        encoder.transform([["b"], ["a"], ["x"]])  # [[2], [0], [-1]]
    """

    def __init__(self) -> None:
        super().__init__()
        self.categories_: list[list[Category]] = []

    def fit(self, X: ArrayLike, y: Any = None) -> OrdinalEncoder:
        """Learn the vocabulary of every column.

        Args:
            X: Categorical data; numbers, strings and booleans may be mixed.
            y: Ignored.

        Returns:
            Self for method chaining.

        Raises:
            InvalidShapeError: If X is empty or jagged.
            InvalidDataError: If X holds values that are not valid categories.
        """
        array2d = convert_to_2d_array(X)
        self.categories_ = [unique_in_order(array2d[:, j]) for j in range(array2d.shape[1])]
        self._mark_fitted(array2d.shape[1])
        logger.debug(
            f"OrdinalEncoder fitted {self.n_features_in_} columns, "
            f"vocabulary sizes {[len(c) for c in self.categories_]}"
        )
        return self

    def transform(self, X: ArrayLike) -> NDArray[np.int32]:
        """Encode values as their vocabulary positions.

        Before fit() every vocabulary is empty, so every cell encodes to -1.

        Returns:
            int32 array of the same shape as the normalized input.

        Raises:
            InvalidShapeError: If X is empty, jagged, or its column count
                differs from the one seen during fit.
        """
        array2d = convert_to_2d_array(X)
        if self._is_fitted:
            self._check_n_features(array2d.shape[1])

        result = np.full(array2d.shape, UNKNOWN_CODE, dtype=np.int32)
        for j, categories in enumerate(self.categories_):
            mapping = categories_to_mapping(categories)
            for i, value in enumerate(array2d[:, j]):
                result[i, j] = mapping.get(category_key(value), UNKNOWN_CODE)
        return result

    def inverse_transform(self, X: ArrayLike) -> NDArray[np.object_]:
        """Decode integer codes back to category values.

        The -1 code decodes to None. A vocabulary that itself holds None (a
        missing value seen during fit) decodes that category to None too, so
        None in the output does not tell an unseen value from a missing one.
        Use transform() codes directly when that distinction matters.

        Raises:
            NotFittedError: If called before fit().
            InvalidDataError: If a code is not an integer or is out of range.
        """
        self._check_is_fitted()
        codes = convert_to_numeric_array(X)
        self._check_n_features(codes.shape[1])

        result = np.empty(codes.shape, dtype=object)
        for j, categories in enumerate(self.categories_):
            for i, code in enumerate(codes[:, j]):
                result[i, j] = _decode(code, categories, j)
        return result


class LabelEncoder(TransformerMixin):
    """Encodes a single target column as integer codes.

    Works like a one-column OrdinalEncoder: classes_ keeps first-seen order
    and unseen labels encode to -1.
    """

    def __init__(self) -> None:
        super().__init__()
        self.classes_: list[Category] = []

    @staticmethod
    def _as_column(y: ArrayLike) -> NDArray[np.object_]:
        array2d = convert_to_2d_array(y)
        if array2d.shape[1] != 1:
            raise InvalidShapeError(f"expected a 1D target, got {array2d.shape[1]} columns")
        return array2d[:, 0]

    def fit(self, X: ArrayLike, y: Any = None) -> LabelEncoder:
        """Learn the label vocabulary.

        Returns:
            Self for method chaining.
        """
        self.classes_ = unique_in_order(self._as_column(X))
        self._mark_fitted(1)
        logger.debug(f"LabelEncoder fitted with {len(self.classes_)} classes")
        return self

    def transform(self, X: ArrayLike) -> NDArray[np.int32]:
        column = self._as_column(X)
        mapping = categories_to_mapping(self.classes_)
        return np.array(
            [mapping.get(category_key(value), UNKNOWN_CODE) for value in column],
            dtype=np.int32,
        )

    def inverse_transform(self, X: ArrayLike) -> NDArray[np.object_]:
        """Decode codes back to labels.

        -1 decodes to None, the same value a None class decodes to.
        """
        self._check_is_fitted()
        codes = convert_to_numeric_array(X)
        if codes.shape[1] != 1:
            raise InvalidShapeError(f"expected 1D codes, got {codes.shape[1]} columns")
        result = np.empty(codes.shape[0], dtype=object)
        for i, code in enumerate(codes[:, 0]):
            result[i] = _decode(code, self.classes_, 0)
        return result


class OneHotEncoder(TransformerMixin):
    """Encodes each categorical column as a block of indicator columns.

    The output has one column per vocabulary entry, blocks ordered by input
    column. With HandleUnknown.IGNORE an unseen value produces an all-zero
    block; with HandleUnknown.ERROR it raises UnknownCategoryError.
    """

    def __init__(
        self,
        handle_unknown: HandleUnknown = HandleUnknown.ERROR,
        sparse_output: bool = False,
    ) -> None:
        super().__init__()
        self.handle_unknown = handle_unknown
        self.sparse_output = sparse_output
        self.categories_: list[list[Category]] = []
        self.feature_names_in_: list[str] | None = None

    def fit(self, X: ArrayLike, y: Any = None) -> OneHotEncoder:
        """Learn the vocabulary of every column.

        Returns:
            Self for method chaining.
        """
        array2d = convert_to_2d_array(X)
        self.categories_ = [unique_in_order(array2d[:, j]) for j in range(array2d.shape[1])]
        columns = getattr(X, "columns", None)
        self.feature_names_in_ = [str(c) for c in columns] if columns is not None else None
        self._mark_fitted(array2d.shape[1])
        logger.debug(
            f"OneHotEncoder fitted {self.n_features_in_} columns into "
            f"{sum(len(c) for c in self.categories_)} indicators"
        )
        return self

    def transform(self, X: ArrayLike) -> NDArray[np.float64] | sparse.csr_matrix:
        """Encode values as indicator columns.

        Raises:
            NotFittedError: If called before fit().
            UnknownCategoryError: If handle_unknown is ERROR and a value is unseen.
        """
        self._check_is_fitted()
        array2d = convert_to_2d_array(X)
        self._check_n_features(array2d.shape[1])

        rows: list[int] = []
        cols: list[int] = []
        offset = 0
        for j, categories in enumerate(self.categories_):
            mapping = categories_to_mapping(categories)
            for i, value in enumerate(array2d[:, j]):
                code = mapping.get(category_key(value))
                if code is None:
                    if self.handle_unknown == HandleUnknown.ERROR:
                        raise UnknownCategoryError(j, value)
                    continue
                rows.append(i)
                cols.append(offset + code)
            offset += len(categories)

        encoded = sparse.csr_matrix(
            (np.ones(len(rows), dtype=np.float64), (rows, cols)),
            shape=(array2d.shape[0], offset),
        )
        if self.sparse_output:
            return encoded
        return encoded.toarray()

    def get_feature_names_out(self, input_features: list[str] | None = None) -> list[str]:
        """Names of the output columns, e.g. "color_red".

        Args:
            input_features: Names for the input columns. Defaults to the
                DataFrame columns seen during fit, or x0, x1, ...
        """
        if not self._is_fitted:
            raise NotFittedError(type(self).__name__)
        if input_features is None:
            input_features = self.feature_names_in_ or [
                f"x{j}" for j in range(self.n_features_in_)
            ]
        if len(input_features) != self.n_features_in_:
            raise InvalidShapeError(
                f"expected {self.n_features_in_} input feature names, got {len(input_features)}"
            )
        return [
            f"{feature}_{category}"
            for feature, categories in zip(input_features, self.categories_)
            for category in categories
        ]
