"""Shared test fixtures and utilities for prepkit tests."""

from __future__ import annotations

import tempfile
from pathlib import Path

import numpy as np
import pandas as pd
import pytest

# =============================================================================
# Test Data Fixtures
# =============================================================================


@pytest.fixture
def numeric_frame() -> pd.DataFrame:
    """Create a small numeric DataFrame with distinct column ranges.

    Returns:
        DataFrame with three numeric features.
    """
    return pd.DataFrame(
        {
            "age": [18.0, 35.0, 52.0, 70.0],
            "income": [20000.0, 45000.0, 80000.0, 120000.0],
            "score": [-1.0, 0.0, 0.5, 1.0],
        },
        index=["a", "b", "c", "d"],
    )


@pytest.fixture
def random_matrix() -> np.ndarray:
    """Create a random 2D float matrix for round-trip checks.

    Returns:
        Array of shape (50, 4).
    """
    rng = np.random.default_rng(42)
    return rng.normal(loc=[0.0, 10.0, -5.0, 100.0], scale=[1.0, 3.0, 0.5, 25.0], size=(50, 4))


@pytest.fixture
def categorical_rows() -> list[list[object]]:
    """Create a 2D table of mixed category values.

    Returns:
        Rows with a string, a numeric and a boolean column.
    """
    return [
        ["red", 1, True],
        ["blue", 2, False],
        ["red", 3, True],
        ["green", 1, False],
    ]


@pytest.fixture
def categorical_frame() -> pd.DataFrame:
    """Create a categorical DataFrame.

    Returns:
        DataFrame with two string columns.
    """
    return pd.DataFrame(
        {
            "color": ["red", "blue", "red", "green"],
            "size": ["S", "M", "L", "M"],
        }
    )


@pytest.fixture
def regression_data() -> tuple[np.ndarray, np.ndarray]:
    """Create a noiseless linear regression problem.

    Returns:
        Tuple of (X, y) with 60 samples and 2 features.
    """
    rng = np.random.default_rng(0)
    X = rng.uniform(-1.0, 1.0, size=(60, 2))
    y = 2.0 * X[:, 0] - 1.0 * X[:, 1] + 0.5
    return X, y


# =============================================================================
# Utility Fixtures
# =============================================================================


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs.

    Yields:
        Path to temporary directory (cleaned up after test).
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)
