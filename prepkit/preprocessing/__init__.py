"""Data preprocessing transformers.

This module provides categorical encoders, numeric scalers and an imputer,
all following the fit/transform contract, plus the input normalization
helpers they share.
"""

from __future__ import annotations

from .base import TransformerMixin
from .encoders import LabelEncoder, OneHotEncoder, OrdinalEncoder
from .imputer import SimpleImputer
from .scalers import MaxAbsScaler, MinMaxScaler, StandardScaler
from .validation import (
    ArrayLike,
    convert_to_2d_array,
    convert_to_input_type,
    convert_to_numeric_array,
)

__all__ = [
    # Contract
    "TransformerMixin",
    # Encoders
    "OrdinalEncoder",
    "LabelEncoder",
    "OneHotEncoder",
    # Scalers
    "MinMaxScaler",
    "StandardScaler",
    "MaxAbsScaler",
    # Imputation
    "SimpleImputer",
    # Input normalization
    "ArrayLike",
    "convert_to_2d_array",
    "convert_to_numeric_array",
    "convert_to_input_type",
]
