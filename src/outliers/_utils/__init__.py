"""
Internal utilities for the outliers package.

This module provides low-level utilities for data conversion, validation,
and configuration reading. These are internal APIs and may change
without notice.

Methods
-------
convert_series(data, data_name)
    Convert an input data to a one-dimensional pandas Series.
convert_numpy(data, data_name)
    Convert an input data to a one-dimensional float64 NumPy array.
convert_from_alias(arg, path, default_values)
    Convert a string alias into its canonical (default) configuration value.
validate_string_flag(arg, supported_values, err_msg, error_type)
    Validate a string flag against a set of supported values.
validate_min_length(array, min_length, err_msg, error_type)
    Validate that a sequence holds at least ``min_length`` elements.
validate_array_finite(array, err_msg, error_type)
    Validate that a numeric array contains no NaN or infinite values.
validate_positive_number(arg, err_msg, error_type)
    Validate that a value is a finite real number strictly greater than zero.
read_config(name)
    Read and cache JSON configuration files.

Notes
-----
- These utilities are for internal package use only
- APIs may change between versions without deprecation warnings
- Use public APIs from main modules for stable functionality
"""

from .conversion import convert_from_alias, convert_numpy, convert_series
from .readers import read_config
from .validation import (
    validate_array_finite,
    validate_min_length,
    validate_positive_number,
    validate_string_flag,
)

__all__ = [
    "convert_series",
    "convert_numpy",
    "convert_from_alias",
    "validate_string_flag",
    "validate_min_length",
    "validate_array_finite",
    "validate_positive_number",
    "read_config",
]
