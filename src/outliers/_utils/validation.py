"""
Data validation and integrity checking utilities.

This module provides functions for validating input data and configuration
values across the package. Includes checks for supported flag values,
minimal sample size, finiteness of numeric arrays and positivity of
numeric parameters.

Every validator accepts the error message and, optionally, the exception
class to raise, so that public modules can surface their own error types
while keeping the checks themselves in one place.

Methods
-------
validate_string_flag(arg, supported_values, err_msg, error_type)
    Validate that a string flag is among a set of supported values.
validate_min_length(array, min_length, err_msg, error_type)
    Ensure that a sequence holds at least ``min_length`` elements.
validate_array_finite(array, err_msg, error_type)
    Validate that a numeric array contains no ``NaN`` or infinite values.
validate_positive_number(arg, err_msg, error_type)
    Validate that a value is a finite real number strictly greater than zero.

Examples
--------
>>> import outliers._utils as utils

>>> utils.validate_min_length([1.0], min_length=2,
...                           err_msg="At least 2 values are required")
Traceback (most recent call last):
    ...
ValueError: At least 2 values are required
"""

from numbers import Real
from typing import Iterable, Sequence, Type

import numpy as np


def validate_string_flag(
    arg: str,
    supported_values: Iterable[str],
    err_msg: str,
    error_type: Type[Exception] = ValueError,
) -> None:
    """
    Validate a string flag against a set of supported values.

    Parameters
    ----------
    arg : str
        The string flag to validate.
    supported_values : Iterable[str]
        An iterable containing all supported flag values. Can be
        a list, tuple, set, or any iterable type supporting the
        `in` operator.
    err_msg : str
        The error message used in the raised exception if validation fails.
    error_type : type, default=ValueError
        Exception class raised on failure.

    Raises
    ------
    ValueError
        If `arg` is not found in `supported_values`.

    Examples
    --------
    >>> validate_string_flag("inner", {"inner", "outer"}, "Unknown preset")
    >>> validate_string_flag("wide", {"inner", "outer"}, "Unknown preset")
    Traceback (most recent call last):
        ...
    ValueError: Unknown preset
    """
    if arg not in supported_values:
        raise error_type(err_msg)


def validate_min_length(
    array: Sequence,
    min_length: int,
    err_msg: str,
    error_type: Type[Exception] = ValueError,
) -> None:
    """
    Validate that a sequence holds at least ``min_length`` elements.

    Parameters
    ----------
    array : Sequence
        Sized object to check (list, NumPy array, pandas Series...).
    min_length : int
        Minimal accepted number of elements.
    err_msg : str
        The error message used in the raised exception if validation fails.
    error_type : type, default=ValueError
        Exception class raised on failure.

    Raises
    ------
    ValueError
        If ``len(array) < min_length``.
    """
    if len(array) < min_length:
        raise error_type(err_msg)


def validate_array_finite(
    array: Sequence[float],
    err_msg: str,
    error_type: Type[Exception] = ValueError,
) -> None:
    """
    Validate that a numeric array contains no NaN or infinite values.

    Parameters
    ----------
    array : Sequence[float]
        One-dimensional numeric array-like object.
    err_msg : str
        The error message used in the raised exception if validation fails.
        May contain a single ``{}`` placeholder, which is filled with the
        number of offending values.
    error_type : type, default=ValueError
        Exception class raised on failure.

    Raises
    ------
    ValueError
        If the array contains at least one ``NaN``, ``inf`` or ``-inf``.

    Examples
    --------
    >>> validate_array_finite([1, 2, 3], "Array must be finite")
    >>> validate_array_finite([1, float("inf"), 3], "Array must be finite")
    Traceback (most recent call last):
        ...
    ValueError: Array must be finite
    """
    mask = ~np.isfinite(np.asarray(array, dtype=np.float64))
    if mask.any():
        raise error_type(err_msg.format(int(mask.sum())))


def validate_positive_number(
    arg: Real,
    err_msg: str,
    error_type: Type[Exception] = ValueError,
) -> None:
    """
    Validate that a value is a finite real number strictly greater than zero.

    ``bool`` values are rejected even though ``bool`` is a subclass of ``int``.

    Parameters
    ----------
    arg : Real
        Value to validate.
    err_msg : str
        The error message used in the raised exception if validation fails.
    error_type : type, default=ValueError
        Exception class raised on failure.

    Raises
    ------
    ValueError
        If `arg` is not a real number, is not finite or is not positive.

    Examples
    --------
    >>> validate_positive_number(1.5, "k must be positive")
    >>> validate_positive_number(0, "k must be positive")
    Traceback (most recent call last):
        ...
    ValueError: k must be positive
    """
    if isinstance(arg, bool) or not isinstance(arg, Real):
        raise error_type(err_msg)
    if not np.isfinite(arg) or arg <= 0:
        raise error_type(err_msg)
