"""Configuration dataclasses and enums for prepkit."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Self


class Kernel(Enum):
    """Kernel type for support vector regression."""

    LINEAR = "linear"
    POLY = "poly"
    RBF = "rbf"
    SIGMOID = "sigmoid"
    PRECOMPUTED = "precomputed"


class HandleUnknown(Enum):
    """What a one-hot encoder does with categories unseen during fit."""

    ERROR = "error"
    IGNORE = "ignore"


class ImputeStrategy(Enum):
    """Statistic used by SimpleImputer to fill missing values."""

    MEAN = "mean"
    MEDIAN = "median"
    MOST_FREQUENT = "most_frequent"
    CONSTANT = "constant"


GAMMA_MODES = ("scale", "auto")


@dataclass
class SVRConfig:
    """Configuration for the SVR estimator.

    Attributes:
        kernel: Kernel type used by the solver.
        degree: Degree of the polynomial kernel.
        gamma: Kernel coefficient. "scale", "auto" or a positive float.
        coef0: Independent term for poly and sigmoid kernels.
        tol: Tolerance for the stopping criterion.
        C: Regularization parameter.
        epsilon: Width of the epsilon-tube with no training penalty.
        shrinking: Whether to use the shrinking heuristic.
        cache_size: Kernel cache size in MB.
        max_iter: Hard limit on solver iterations (-1 for no limit).
    """

    kernel: Kernel = Kernel.RBF
    degree: int = 3
    gamma: float | str = "scale"
    coef0: float = 0.0
    tol: float = 1e-3
    C: float = 1.0
    epsilon: float = 0.1
    shrinking: bool = True
    cache_size: float = 200.0
    max_iter: int = -1

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if isinstance(self.gamma, str):
            if self.gamma not in GAMMA_MODES:
                raise ValueError(f"gamma must be one of {GAMMA_MODES} or a positive float")
        elif self.gamma <= 0:
            raise ValueError("gamma must be positive")
        if self.degree < 0:
            raise ValueError("degree must be non-negative")
        if self.tol <= 0:
            raise ValueError("tol must be positive")
        if self.C <= 0:
            raise ValueError("C must be positive")
        if self.epsilon < 0:
            raise ValueError("epsilon must be non-negative")
        if self.cache_size <= 0:
            raise ValueError("cache_size must be positive")
        if self.max_iter == 0 or self.max_iter < -1:
            raise ValueError("max_iter must be -1 or a positive integer")

    @classmethod
    def builder(cls) -> SVRConfigBuilder:
        """Create a builder for SVRConfig."""
        return SVRConfigBuilder()


class SVRConfigBuilder:
    """Builder for SVRConfig with fluent interface."""

    def __init__(self) -> None:
        self._kernel: Kernel = Kernel.RBF
        self._degree: int = 3
        self._gamma: float | str = "scale"
        self._coef0: float = 0.0
        self._tol: float = 1e-3
        self._C: float = 1.0
        self._epsilon: float = 0.1
        self._shrinking: bool = True
        self._cache_size: float = 200.0
        self._max_iter: int = -1

    def kernel(self, value: Kernel) -> Self:
        """Set the kernel type."""
        self._kernel = value
        return self

    def degree(self, value: int) -> Self:
        """Set the polynomial degree."""
        self._degree = value
        return self

    def gamma(self, value: float | str) -> Self:
        """Set the kernel coefficient."""
        self._gamma = value
        return self

    def coef0(self, value: float) -> Self:
        """Set the independent kernel term."""
        self._coef0 = value
        return self

    def tol(self, value: float) -> Self:
        """Set the stopping tolerance."""
        self._tol = value
        return self

    def C(self, value: float) -> Self:  # noqa: N802
        """Set the regularization parameter."""
        self._C = value
        return self

    def epsilon(self, value: float) -> Self:
        """Set the epsilon-tube width."""
        self._epsilon = value
        return self

    def shrinking(self, value: bool) -> Self:
        """Enable or disable the shrinking heuristic."""
        self._shrinking = value
        return self

    def cache_size(self, value: float) -> Self:
        """Set the kernel cache size in MB."""
        self._cache_size = value
        return self

    def max_iter(self, value: int) -> Self:
        """Set the solver iteration limit."""
        self._max_iter = value
        return self

    def build(self) -> SVRConfig:
        """Build the SVRConfig."""
        return SVRConfig(
            kernel=self._kernel,
            degree=self._degree,
            gamma=self._gamma,
            coef0=self._coef0,
            tol=self._tol,
            C=self._C,
            epsilon=self._epsilon,
            shrinking=self._shrinking,
            cache_size=self._cache_size,
            max_iter=self._max_iter,
        )
