"""prepkit: fit/transform preprocessing for tabular data.

This library provides categorical encoders, numeric scalers, an imputer and a
support vector regressor that share a scikit-learn style fit/transform
contract and accept lists, numpy arrays and pandas objects alike.

Example usage:
    from prepkit import MinMaxScaler, OrdinalEncoder

    scaler = MinMaxScaler()
    scaler.fit_transform([1, 2, 3, 4, 5])     # [0.0, 0.25, 0.5, 0.75, 1.0]

    encoder = OrdinalEncoder().fit([["a"], ["c"], ["a"], ["b"]])
    encoder.transform([["b"], ["a"], ["z"]])  # [[2], [0], [-1]]

    # Save and reload a fitted transformer
    save_transformer(scaler, "scaler.pkl")
    scaler = load_transformer("scaler.pkl")
"""

from __future__ import annotations

# Configuration
from .config import HandleUnknown, ImputeStrategy, Kernel, SVRConfig, SVRConfigBuilder

# Types and protocols (from core module)
from .core import (
    UNKNOWN_CODE,
    ArrayBackend,
    Category,
    InvertibleTransformer,
    NumpyBackend,
    Transformer,
)

# Errors
from .errors import (
    ArtifactNotFoundError,
    InvalidDataError,
    InvalidShapeError,
    NotFittedError,
    PrepError,
    UnknownCategoryError,
)

# Estimators
from .models import SVR

# Persistence
from .persistence import TransformerArtifact, load_transformer, save_transformer

# Transformers
from .preprocessing import (
    LabelEncoder,
    MaxAbsScaler,
    MinMaxScaler,
    OneHotEncoder,
    OrdinalEncoder,
    SimpleImputer,
    StandardScaler,
    TransformerMixin,
    convert_to_2d_array,
    convert_to_input_type,
    convert_to_numeric_array,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Configuration
    "HandleUnknown",
    "ImputeStrategy",
    "Kernel",
    "SVRConfig",
    "SVRConfigBuilder",
    # Transformers
    "TransformerMixin",
    "OrdinalEncoder",
    "LabelEncoder",
    "OneHotEncoder",
    "MinMaxScaler",
    "StandardScaler",
    "MaxAbsScaler",
    "SimpleImputer",
    # Estimators
    "SVR",
    # Input normalization
    "convert_to_2d_array",
    "convert_to_numeric_array",
    "convert_to_input_type",
    # Persistence
    "TransformerArtifact",
    "save_transformer",
    "load_transformer",
    # Types (from core)
    "Category",
    "UNKNOWN_CODE",
    "Transformer",
    "InvertibleTransformer",
    "ArrayBackend",
    "NumpyBackend",
    # Errors
    "PrepError",
    "InvalidShapeError",
    "InvalidDataError",
    "NotFittedError",
    "UnknownCategoryError",
    "ArtifactNotFoundError",
]
