"""
Conversion utilities for data transformation and standardization.

This module provides low-level conversion functions for transforming
user input into the structures the package works with internally and
for resolving string aliases of configuration values.

Methods
-------
convert_series(data, data_name)
    Convert an input data to a one-dimensional pandas Series.
convert_numpy(data, data_name)
    Convert an input data to a one-dimensional float64 NumPy array.
convert_from_alias(arg, path, default_values)
    Convert a string alias into its canonical (default) configuration value.

Notes
-----
- Functions return copies of data rather than modifying in-place

Examples
--------
>>> from outliers._utils import convert_numpy

>>> convert_numpy((3, 1, 2))
array([3., 1., 2.])
"""

from numbers import Real
from typing import Any, Iterable, Mapping, Sequence, Union

import numpy as np
import pandas as pd

from .readers import read_config

ERR_MSG_MULTIDIMENSIONAL_DATA = read_config("messages")["errors"][
    "multidimensional_data_f"
]
ERR_MSG_NON_NUMERIC_VALUES = read_config("messages")["errors"]["non_numeric_values_f"]

_NESTED_TYPES = (list, tuple, np.ndarray, pd.Series, pd.Index)


def convert_series(
    data: Union[Sequence[Any] | Mapping], data_name: str = "data"
) -> pd.Series:
    """
    Validate and normalize input data into a single-dimensional Pandas Series.

    This function ensures that the input data represents a univariate sample
    ready for outlier identification. It handles common inputs like lists,
    tuples, generators, NumPy arrays, dictionaries and Pandas structures.

    Parameters
    ----------
    data : array-like, dict
        The input data structure. This may be a 1D sequence (list, np.ndarray,
        pd.Series, generator) or a dictionary/DataFrame containing a single
        feature.
    data_name : str, default='data'
        Name of the dataset (used in error messages).

    Returns
    -------
    pd.Series
        A one-dimensional copy of the data. The index of an input Series or
        DataFrame is kept, other inputs get a default RangeIndex. Returns an
        empty Series if the input data is empty or ``None``.

    Raises
    ------
    ValueError
        If the input structure contains more than one dimension or feature,
        or is a string.

    Examples
    --------
    >>> convert_series({"x": [1, 2, 3]}).name
    'x'

    >>> convert_series({'a': [1, 2], 'b': [3, 4]})
    Traceback (most recent call last):
        ...
    ValueError: Input data must be 1-dimensional, but contains 2 features. ...
    """
    if isinstance(data, (str, bytes)):
        raise ValueError(ERR_MSG_NON_NUMERIC_VALUES.format(data_name))
    if data is None:
        return pd.Series([], dtype=np.float64, name=data_name)
    if isinstance(data, pd.Series):
        return data.copy()
    if isinstance(data, pd.DataFrame):
        if data.shape[1] > 1:
            raise ValueError(ERR_MSG_MULTIDIMENSIONAL_DATA.format(data.shape[1]))
        if data.shape[1] == 0:
            return pd.Series([], dtype=np.float64, name=data_name)
        return data.iloc[:, 0].copy()
    if isinstance(data, Mapping):
        if len(data) > 1:
            raise ValueError(ERR_MSG_MULTIDIMENSIONAL_DATA.format(len(data)))
        if len(data) == 0:
            return pd.Series([], dtype=np.float64, name=data_name)
        name, values = next(iter(data.items()))
        return pd.Series(list(values), name=name)
    if isinstance(data, np.ndarray):
        if data.ndim > 1:
            if data.shape[0] != 1:
                raise ValueError(ERR_MSG_MULTIDIMENSIONAL_DATA.format(data.shape[0]))
            data = data[0]
        return pd.Series(np.array(data, copy=True, ndmin=1))

    values = list(data)
    if values and all(isinstance(v, _NESTED_TYPES) for v in values):
        if len(values) > 1:
            raise ValueError(ERR_MSG_MULTIDIMENSIONAL_DATA.format(len(values)))
        values = list(values[0])
    if not values:
        return pd.Series([], dtype=np.float64, name=data_name)
    return pd.Series(values)


def convert_numpy(
    data: Union[Sequence[Any] | Mapping], data_name: str = "data"
) -> np.ndarray:
    """
    Convert an input data to a one-dimensional float64 NumPy array.

    The input is normalized with :func:`convert_series` first, so every
    container supported there is supported here as well. Missing values
    (``None``, ``pd.NA``) become ``NaN``; detecting them is left to the
    caller.

    Parameters
    ----------
    data : array-like, dict
        Input data to convert.
    data_name : str, default='data'
        Name of the dataset (used in error messages).

    Returns
    -------
    numpy.ndarray
        A new 1D ``float64`` array. The input object is never shared.

    Raises
    ------
    ValueError
        If the data is multidimensional or holds anything but real numbers
        and missing values. Numeric strings such as ``"1.5"`` are rejected
        rather than parsed.
    """
    series = convert_series(data, data_name=data_name)
    if not _is_real_valued(series):
        raise ValueError(ERR_MSG_NON_NUMERIC_VALUES.format(data_name))
    return series.to_numpy(dtype=np.float64, na_value=np.nan, copy=True)


def _is_real_valued(series: pd.Series) -> bool:
    """Numeric dtype, or object dtype holding only real numbers and missing values."""
    if pd.api.types.is_complex_dtype(series):
        return False
    if pd.api.types.is_numeric_dtype(series):
        return True
    if not pd.api.types.is_object_dtype(series):
        return False
    return all(isinstance(v, Real) for v in series.dropna())


def convert_from_alias(arg: str, path: str, default_values: Iterable = None):
    """
    Convert a string alias into its canonical (default) configuration value.

    The function maps short or alternative forms of names to the
    corresponding default value, using the alias configuration file.
    This allows flexible usage of user input or configuration keywords
    without breaking consistency across the package.

    Parameters
    ----------
    arg : str
        Input string to convert. The function is case-insensitive.
    path : str
        Section name in the alias configuration. Each section defines
        its own mapping between canonical names and their aliases.
        For example: ``"k_value"``.
    default_values : Iterable, optional
        Subset of default values to restrict the search domain.
        If ``None`` (default), lookup is performed across the entire
        alias set for the specified path.

    Returns
    -------
    str
        Canonical name corresponding to the alias.
        If no matching alias is found, returns the input argument unchanged.

    Raises
    ------
    KeyError
        If the specified alias section ``path`` does not exist in the configuration.

    Examples
    --------
    >>> from outliers._utils import convert_from_alias
    ...
    >>> print(convert_from_alias("far", path="k_value"))
    outer
    >>> convert_from_alias("Tukey", path="k_value")
    'inner'
    """
    alias_dict = read_config("aliases")

    if path not in alias_dict:
        raise KeyError(f"Aliases path '{path}' not found in configuration.")

    arg_lower = arg.lower()
    if default_values is None:
        for default_value, aliases in alias_dict[path].items():
            if arg_lower in aliases:
                return default_value
    else:
        for default_value in default_values:
            if default_value in alias_dict[path]:
                if arg_lower in alias_dict[path][default_value]:
                    return default_value
    return arg
