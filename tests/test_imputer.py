"""Tests for SimpleImputer."""

from __future__ import annotations

import logging

import numpy as np
import pandas as pd
import pytest

from prepkit import ImputeStrategy, InvalidDataError, InvalidShapeError, NotFittedError, SimpleImputer


class TestSimpleImputerNumeric:
    """Tests for the numeric strategies."""

    def test_mean(self):
        """MEAN fills with the column mean."""
        imputer = SimpleImputer().fit([[1.0, 10.0], [np.nan, 20.0], [3.0, np.nan]])
        assert imputer.statistics_ == [2.0, 15.0]
        result = imputer.transform([[np.nan, np.nan]])
        np.testing.assert_array_equal(result, [[2.0, 15.0]])

    def test_median(self):
        """MEDIAN fills with the column median."""
        imputer = SimpleImputer(strategy=ImputeStrategy.MEDIAN)
        result = imputer.fit_transform([1.0, 2.0, 100.0, None])
        np.testing.assert_array_equal(result[:, 0], [1.0, 2.0, 100.0, 2.0])

    def test_result_is_float(self):
        """Numeric results come back as float64."""
        result = SimpleImputer().fit_transform([[1, None], [3, 4]])
        assert result.dtype == np.float64

    def test_mean_on_strings_raises(self):
        """MEAN on text raises InvalidDataError."""
        with pytest.raises(InvalidDataError):
            SimpleImputer().fit(["a", "b"])

    def test_transform_text_after_mean_fit_raises(self):
        """Text passed to transform after a MEAN fit raises InvalidDataError."""
        imputer = SimpleImputer().fit([1.0, 2.0])
        with pytest.raises(InvalidDataError):
            imputer.transform(["a", None])

    def test_transform_text_after_median_fit_raises(self):
        """Text passed to transform after a MEDIAN fit raises InvalidDataError."""
        imputer = SimpleImputer(strategy=ImputeStrategy.MEDIAN).fit([[1.0], [3.0]])
        with pytest.raises(InvalidDataError):
            imputer.transform([["x"]])

    def test_empty_column_warns(self, caplog):
        """A column with no observed values is filled with NaN and warned about."""
        with caplog.at_level(logging.WARNING):
            imputer = SimpleImputer().fit([[1.0, np.nan], [2.0, np.nan]])
        assert np.isnan(imputer.statistics_[1])
        assert "no observed values" in caplog.text


class TestSimpleImputerCategorical:
    """Tests for MOST_FREQUENT and CONSTANT."""

    def test_most_frequent(self):
        """MOST_FREQUENT fills with the commonest value."""
        imputer = SimpleImputer(strategy=ImputeStrategy.MOST_FREQUENT)
        result = imputer.fit_transform([["a"], ["b"], ["b"], [None]])
        assert result[:, 0].tolist() == ["a", "b", "b", "b"]

    def test_most_frequent_tie_keeps_first_seen(self):
        """Ties resolve to the value seen first."""
        imputer = SimpleImputer(strategy=ImputeStrategy.MOST_FREQUENT).fit(["y", "x", "x", "y"])
        assert imputer.statistics_ == ["y"]

    def test_constant_default_text(self):
        """CONSTANT on text defaults to "missing_value"."""
        imputer = SimpleImputer(strategy=ImputeStrategy.CONSTANT)
        result = imputer.fit_transform(pd.DataFrame({"c": ["a", None]}))
        assert result[:, 0].tolist() == ["a", "missing_value"]

    def test_constant_default_numeric(self):
        """CONSTANT on numbers defaults to 0."""
        imputer = SimpleImputer(strategy=ImputeStrategy.CONSTANT)
        result = imputer.fit_transform([1.0, np.nan])
        np.testing.assert_array_equal(result[:, 0], [1.0, 0.0])

    def test_constant_fill_value(self):
        """CONSTANT uses fill_value when given."""
        imputer = SimpleImputer(strategy=ImputeStrategy.CONSTANT, fill_value=-1)
        result = imputer.fit_transform([1.0, None])
        np.testing.assert_array_equal(result[:, 0], [1.0, -1.0])


class TestSimpleImputerState:
    """Tests for fitted-state checks."""

    def test_transform_before_fit_raises(self):
        """transform() before fit() raises NotFittedError."""
        with pytest.raises(NotFittedError):
            SimpleImputer().transform([1.0])

    def test_feature_count_mismatch_raises(self):
        """Transforming a different column count raises InvalidShapeError."""
        imputer = SimpleImputer().fit([[1.0, 2.0]])
        with pytest.raises(InvalidShapeError):
            imputer.transform([1.0])
