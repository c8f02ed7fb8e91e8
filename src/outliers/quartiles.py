"""
Quartile estimation for one-dimensional numeric data.

Two estimation methods are supported; the choice is made with the
``exclude_median`` flag.

``exclude_median=False`` (default)
    Hyndman & Fan definition 8, the "median-unbiased" estimator. With
    ``n`` sorted observations ``x[1..n]`` and probability ``p`` the position
    ``h = (n + 1/3) * p + 1/3`` is computed and the quantile is linearly
    interpolated between ``x[floor(h)]`` and ``x[floor(h) + 1]``. Positions
    outside ``[1, n]`` are clamped to the minimum or maximum. This is
    ``numpy.quantile(..., method="median_unbiased")``.

``exclude_median=True``
    Tukey-style halves. The median splits the sorted data in two halves;
    for an odd number of observations the middle value belongs to neither.
    Q1 and Q3 are the medians of the lower and upper halves.

Methods
-------
estimate_quartiles(data, exclude_median, data_name)
    Validate the data and compute its quartiles.
get_quartile_values(sorted_data, data_name)
    Quartiles of sorted data by the median-of-halves method.
get_median(sorted_data, data_name)
    Median of sorted data.

Examples
--------
>>> from outliers.quartiles import estimate_quartiles
>>> estimate_quartiles([1, 2, 3, 4, 5, 6, 7, 8, 9], exclude_median=True)
Quartiles(q1=2.5, q2=5.0, q3=7.5)
"""

import logging
from typing import Sequence

import numpy as np

from outliers._utils import (
    convert_numpy,
    read_config,
    validate_array_finite,
    validate_min_length,
)
from outliers.exceptions import InsufficientDataError, NonFiniteValueError
from outliers.types import Quartiles

logger = logging.getLogger(__name__)

_errors = read_config("messages")["errors"]

QUARTILE_PROBABILITIES = (0.25, 0.5, 0.75)
MIN_QUARTILE_SIZE = 2


def estimate_quartiles(
    data: Sequence[float], exclude_median: bool = False, data_name: str = "data"
) -> Quartiles:
    """
    Compute the lower quartile, median and upper quartile of a data set.

    The data does not need to be sorted: it is converted to a private
    ``float64`` array and sorted there with a stable sort, so the caller's
    object is left untouched.

    Parameters
    ----------
    data : Sequence[float]
        One-dimensional numeric data (list, tuple, NumPy array, pandas Series,
        single-column DataFrame...).
    exclude_median : bool, default=False
        If False, use the median-unbiased interpolation (Hyndman & Fan 8).
        If True, use medians of the lower and upper halves, leaving the
        middle value out of both halves for odd-sized data.
    data_name : str, default='data'
        Name of the dataset (used in error messages).

    Returns
    -------
    Quartiles
        ``q1 <= q2 <= q3``.

    Raises
    ------
    InsufficientDataError
        If the data holds fewer than 2 observations.
    NonFiniteValueError
        If the data contains NaN or infinite values, or if the values are so
        large in magnitude that the quartiles overflow.
    ValueError
        If the data is multidimensional or non-numeric.

    Examples
    --------
    >>> data = [10, 12, 11, 15, 11, 14, 13, 17, 12, 22, 14, 11]
    >>> estimate_quartiles(data).q1
    11.0
    >>> estimate_quartiles(data, exclude_median=True)
    Quartiles(q1=11.0, q2=12.5, q3=14.5)
    """
    values = convert_numpy(data, data_name=data_name)
    validate_min_length(
        values,
        MIN_QUARTILE_SIZE,
        err_msg=_errors["insufficient_data_f"].format(data_name, values.size),
        error_type=InsufficientDataError,
    )
    validate_array_finite(
        values,
        err_msg=_errors["non_finite_values_f"].format(data_name, "{}"),
        error_type=NonFiniteValueError,
    )
    sorted_values = np.sort(values, kind="stable")

    if exclude_median:
        quartiles = get_quartile_values(sorted_values, data_name=data_name)
    else:
        q1, q2, q3 = np.quantile(
            sorted_values, QUARTILE_PROBABILITIES, method="median_unbiased"
        )
        quartiles = Quartiles(float(q1), float(q2), float(q3))

    # interpolation between values near the float limit can overflow
    bounds = np.array([quartiles.q1, quartiles.q2, quartiles.q3])
    if not np.isfinite(bounds).all() or not (np.diff(bounds) >= 0).all():
        raise NonFiniteValueError(
            _errors["non_finite_quartiles_f"].format(data_name, quartiles)
        )

    logger.debug(
        "Quartiles of '%s' (n=%d, exclude_median=%s): %s",
        data_name,
        sorted_values.size,
        exclude_median,
        quartiles,
    )
    return quartiles


def get_quartile_values(
    sorted_data: Sequence[float], data_name: str = "data"
) -> Quartiles:
    """
    Quartiles of sorted data by the median-of-halves method.

    Parameters
    ----------
    sorted_data : Sequence[float]
        Data sorted in ascending order.
    data_name : str, default='data'
        Name of the dataset (used in error messages).

    Returns
    -------
    Quartiles

    Raises
    ------
    InsufficientDataError
        If the data holds fewer than 2 observations.

    Notes
    -----
    ::

        [1  2  3]  [4  5  6]          [1  2  3  4]  5  [6  7  8  9]
            |     |     |                   |       |       |
            Q1    Q2    Q3                  Q1      Q2      Q3

    Examples
    --------
    >>> get_quartile_values([1, 2, 3, 4, 5, 6])
    Quartiles(q1=2.0, q2=3.5, q3=5.0)
    >>> get_quartile_values([10, 11, 12])
    Quartiles(q1=10.0, q2=11.0, q3=12.0)
    """
    size = len(sorted_data)
    validate_min_length(
        sorted_data,
        MIN_QUARTILE_SIZE,
        err_msg=_errors["insufficient_data_f"].format(data_name, size),
        error_type=InsufficientDataError,
    )
    halfway = size // 2
    q1 = get_median(sorted_data[:halfway], data_name=data_name)
    q2 = get_median(sorted_data, data_name=data_name)
    if size % 2 != 0:
        halfway += 1
    q3 = get_median(sorted_data[halfway:], data_name=data_name)
    return Quartiles(q1, q2, q3)


def get_median(sorted_data: Sequence[float], data_name: str = "data") -> float:
    """
    Median of sorted data.

    For an even number of observations the mean of the two middle values
    is returned.

    Raises
    ------
    InsufficientDataError
        If the data is empty.

    Examples
    --------
    >>> get_median([1, 11, 34, 66, 209, 353, 1067, 10453])
    137.5
    """
    size = len(sorted_data)
    validate_min_length(
        sorted_data,
        1,
        err_msg=_errors["empty_median_f"].format(data_name),
        error_type=InsufficientDataError,
    )
    halfway = size // 2
    if size % 2 == 0:
        return (float(sorted_data[halfway - 1]) + float(sorted_data[halfway])) / 2.0
    return float(sorted_data[halfway])
