"""Exception hierarchy for prepkit."""

from __future__ import annotations


class PrepError(Exception):
    """Base exception for prepkit."""

    pass


class InvalidShapeError(PrepError):
    """Input cannot be normalized to a rectangular 2D array."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Invalid shape: {message}")


class InvalidDataError(PrepError):
    """Data validation failed."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Invalid data: {message}")


class NotFittedError(PrepError):
    """Transformer or estimator used before fit()."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"{name} must be fitted before use; call fit() first")


class UnknownCategoryError(PrepError):
    """Category value not seen during fit."""

    def __init__(self, column: int, value: object) -> None:
        self.column = column
        self.value = value
        super().__init__(f"Found unknown category {value!r} in column {column} during transform")


class ArtifactNotFoundError(PrepError):
    """Saved transformer file not found."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Transformer artifact not found: {path}")
