"""Tests for the SVR estimator."""

from __future__ import annotations

import numpy as np
import pytest

from prepkit import (
    SVR,
    InvalidDataError,
    InvalidShapeError,
    Kernel,
    MinMaxScaler,
    NotFittedError,
    SVRConfig,
)
from prepkit.models import resolve_gamma


class TestResolveGamma:
    """Tests for gamma resolution."""

    def test_scale(self):
        """"scale" uses 1 / (n_features * var)."""
        X = np.array([[0.0, 2.0], [2.0, 0.0]])
        assert resolve_gamma("scale", X) == pytest.approx(1.0 / (2 * 1.0))

    def test_scale_zero_variance(self):
        """"scale" on constant data falls back to 1.0."""
        assert resolve_gamma("scale", np.ones((3, 2))) == 1.0

    def test_auto(self):
        """"auto" uses 1 / n_features."""
        assert resolve_gamma("auto", np.zeros((3, 4))) == 0.25

    def test_numeric(self):
        """A numeric gamma is used as-is."""
        assert resolve_gamma(0.7, np.zeros((3, 4))) == 0.7


class TestSVR:
    """Tests for SVR fit/predict."""

    def test_not_fitted_initially(self):
        """A new SVR is not fitted."""
        model = SVR()
        assert model.is_fitted is False
        assert model.gamma_ is None

    def test_fit_returns_self(self, regression_data):
        """fit() returns the model for chaining."""
        X, y = regression_data
        model = SVR()
        assert model.fit(X, y) is model
        assert model.is_fitted is True
        assert model.gamma_ is not None

    def test_linear_kernel_fits_linear_target(self, regression_data):
        """A linear kernel recovers a linear target within epsilon."""
        X, y = regression_data
        config = SVRConfig.builder().kernel(Kernel.LINEAR).C(100.0).epsilon(0.01).build()
        predictions = SVR(config).fit(X, y).predict(X)
        assert predictions.shape == (60,)
        assert np.abs(predictions - y).max() < 0.1

    def test_accepts_lists(self):
        """Plain lists are accepted for X and y."""
        model = SVR().fit([[0.0], [1.0], [2.0], [3.0]], [0.0, 1.0, 2.0, 3.0])
        assert model.predict([[1.5]]).shape == (1,)

    def test_works_on_scaled_features(self, regression_data):
        """SVR composes with a fitted scaler."""
        X, y = regression_data
        X_scaled = MinMaxScaler().fit_transform(X)
        predictions = SVR().fit(X_scaled, y).predict(X_scaled)
        assert np.corrcoef(predictions, y)[0, 1] > 0.9

    def test_predict_before_fit_raises(self):
        """predict() before fit() raises NotFittedError."""
        with pytest.raises(NotFittedError):
            SVR().predict([[1.0]])

    def test_length_mismatch_raises(self):
        """X and y of different lengths raise InvalidShapeError."""
        with pytest.raises(InvalidShapeError):
            SVR().fit([[1.0], [2.0]], [1.0])

    def test_2d_target_raises(self):
        """A multi-column y raises InvalidShapeError."""
        with pytest.raises(InvalidShapeError):
            SVR().fit([[1.0], [2.0]], [[1.0, 2.0], [3.0, 4.0]])

    def test_nan_raises(self):
        """Missing values raise InvalidDataError."""
        with pytest.raises(InvalidDataError):
            SVR().fit([[1.0], [np.nan]], [1.0, 2.0])

    def test_feature_mismatch_raises(self, regression_data):
        """Predicting with a different feature count raises InvalidShapeError."""
        X, y = regression_data
        model = SVR().fit(X, y)
        with pytest.raises(InvalidShapeError):
            model.predict([[1.0, 2.0, 3.0]])
