"""
Outlier identification with Tukey fences.

This module contains the :class:`OutlierIdentifier` facade, which ties
quartile estimation, fence computation and partitioning together, and two
module-level shortcuts for one-off use.

Classes
-------
OutlierIdentifier
    Classifies the values of a one-dimensional data set as lower outliers,
    non-outliers or upper outliers.

Methods
-------
get_outliers(data, k_value, exclude_median)
    Partition a data set without keeping an identifier around.
has_outliers(data, k_value, exclude_median)
    Check a data set for outliers without keeping an identifier around.

Examples
--------
>>> from outliers import OutlierIdentifier
>>> data = [10.0, 12.0, 11.0, 15.0, 11.0, 14.0, 13.0, 17.0, 12.0, 22.0, 14.0, 11.0]
>>> identifier = OutlierIdentifier(data)
>>> identifier.get_outliers().upper_outliers
[22.0]
>>> identifier.with_k_value("far").has_outliers()
False
"""

import logging
from functools import cached_property
from numbers import Real
from typing import Any, Mapping, Sequence, Union

import numpy as np
import pandas as pd

from outliers._utils import convert_numpy, convert_series, read_config
from outliers.exceptions import InvalidConfigurationError
from outliers.fences import DEFAULT_K_VALUE, compute_fences, resolve_k_value
from outliers.partition import contains_outliers, label_values, partition
from outliers.quartiles import estimate_quartiles
from outliers.types import ClassificationResult, Fences, Quartiles

logger = logging.getLogger(__name__)

DataInput = Union[Sequence[float], Mapping[Any, Sequence[float]], pd.Series]


class OutlierIdentifier:
    """
    Classifies the values of a one-dimensional data set with Tukey fences.

    The identifier takes its own copy of the data at construction, so later
    changes to the caller's object have no effect and the caller's object is
    never reordered. Quartiles and fences are computed on first use and then
    memoized; the identifier holds no other state, so repeated calls return
    identical results.

    Parameters
    ----------
    data : Sequence[float] | Mapping[Any, Sequence[float]] | pd.Series
        One-dimensional numeric data. Need not be sorted.
    k_value : float or str, default=1.5
        Fence-width multiplier, a finite number greater than 0, or one of the
        presets ``"inner"`` (1.5) and ``"outer"`` (3.0). A larger value
        results in fewer values being identified as outliers.
    exclude_median : bool, default=False
        Quartile method. False uses the median-unbiased interpolation
        (Hyndman & Fan 8); True uses medians of the lower and upper halves,
        with the middle value of odd-sized data left out of both halves.
    data_name : str, default='data'
        Name of the dataset (used in error and log messages).

    Raises
    ------
    InvalidConfigurationError
        If ``k_value`` or ``exclude_median`` is invalid.
    ValueError
        If the data is multidimensional or non-numeric.

    Examples
    --------
    >>> identifier = OutlierIdentifier([-62.3, 67.9, 71.02, 43.3, 51.7, 65.43, 67.23])
    >>> lower, non, upper = identifier.get_outliers().as_tuple()
    >>> lower
    [-62.3]
    >>> upper
    []
    """

    _errors = read_config("messages")["errors"]

    def __init__(
        self,
        data: DataInput,
        k_value: Union[Real, str] = DEFAULT_K_VALUE,
        exclude_median: bool = False,
        data_name: str = "data",
    ):
        if not isinstance(exclude_median, (bool, np.bool_)):
            raise InvalidConfigurationError(
                self._errors["exclude_median_not_bool_f"].format(repr(exclude_median))
            )
        self._k_value = resolve_k_value(k_value)
        self._exclude_median = bool(exclude_median)
        self._data_name = data_name
        self._series = convert_series(data, data_name=data_name)
        self._values = convert_numpy(self._series, data_name=data_name)

    def __repr__(self):
        return (
            f"{type(self).__name__}(n={self._values.size}, k_value={self._k_value}, "
            f"exclude_median={self._exclude_median})"
        )

    @property
    def data(self) -> np.ndarray:
        """Copy of the data in its original order."""
        return self._values.copy()

    @property
    def k_value(self) -> float:
        """Fence-width multiplier."""
        return self._k_value

    @property
    def exclude_median(self) -> bool:
        """Whether quartiles are medians of halves instead of interpolated."""
        return self._exclude_median

    @cached_property
    def quartiles(self) -> Quartiles:
        """
        Quartiles of the data.

        Raises
        ------
        InsufficientDataError
            If the data holds fewer than 2 observations.
        NonFiniteValueError
            If the data contains NaN or infinite values.
        """
        return estimate_quartiles(
            self._values,
            exclude_median=self._exclude_median,
            data_name=self._data_name,
        )

    @cached_property
    def fences(self) -> Fences:
        """Tukey fences of the data. Raises the same errors as ``quartiles``."""
        return compute_fences(
            self.quartiles, self._k_value, data_name=self._data_name
        )

    def with_k_value(self, k_value: Union[Real, str]) -> "OutlierIdentifier":
        """
        Return a new identifier over the same data with another multiplier.

        Parameters
        ----------
        k_value : float or str
            New fence-width multiplier or preset name.

        Returns
        -------
        OutlierIdentifier
            The current identifier is left unchanged.
        """
        return type(self)(
            self._series,
            k_value=k_value,
            exclude_median=self._exclude_median,
            data_name=self._data_name,
        )

    def get_outliers(self) -> ClassificationResult:
        """
        Partition the data into lower outliers, non-outliers and upper outliers.

        Together the three groups contain every input value exactly once.
        Each group keeps the input order of its values. A value equal to a
        fence is a non-outlier.

        Returns
        -------
        ClassificationResult

        Raises
        ------
        InsufficientDataError
            If the data holds fewer than 2 observations.
        NonFiniteValueError
            If the data contains NaN or infinite values.
        """
        result = partition(self._values, self.fences)
        logger.info(
            "Outlier identification of '%s' finished: %d lower and %d upper "
            "outliers out of %d values.",
            self._data_name,
            len(result.lower_outliers),
            len(result.upper_outliers),
            self._values.size,
        )
        return result

    def has_outliers(self) -> bool:
        """
        Indicate whether the data has any outlier.

        Useful when only the answer matters and not the outliers themselves;
        the scan stops at the first value found outside the fences. Raises
        the same errors as :meth:`get_outliers`.
        """
        return contains_outliers(self._values, self.fences)

    def get_labels(self) -> pd.Series:
        """
        Label every value as ``"lower"``, ``"non"`` or ``"upper"``.

        Returns
        -------
        pd.Series
            Categorical Series aligned with the input: the index and name of
            an input Series are kept, other inputs get a RangeIndex.

        Examples
        --------
        >>> import pandas as pd
        >>> s = pd.Series([1, 2, 3, 4, 100], index=list("abcde"), name="x")
        >>> labels = OutlierIdentifier(s).get_labels()
        >>> labels[labels == "upper"].index.tolist()
        ['e']
        """
        return label_values(
            pd.Series(self._values, index=self._series.index, name=self._series.name),
            self.fences,
        )


def get_outliers(
    data: DataInput,
    k_value: Union[Real, str] = DEFAULT_K_VALUE,
    exclude_median: bool = False,
) -> ClassificationResult:
    """
    Partition a data set into lower outliers, non-outliers and upper outliers.

    Shortcut for ``OutlierIdentifier(data, k_value, exclude_median).get_outliers()``.

    Examples
    --------
    >>> from outliers import get_outliers
    >>> get_outliers([0, 3, 3, 3, 11, 12, 13, 15, 19, 20, 29, 40, 79]).upper_outliers
    [79.0]
    """
    return OutlierIdentifier(
        data, k_value=k_value, exclude_median=exclude_median
    ).get_outliers()


def has_outliers(
    data: DataInput,
    k_value: Union[Real, str] = DEFAULT_K_VALUE,
    exclude_median: bool = False,
) -> bool:
    """
    Check whether a data set contains any outlier.

    Shortcut for ``OutlierIdentifier(data, k_value, exclude_median).has_outliers()``.

    Examples
    --------
    >>> from outliers import has_outliers
    >>> has_outliers([0.53, 0.57, 0.51, 0.60, 0.09, 12.75])
    True
    """
    return OutlierIdentifier(
        data, k_value=k_value, exclude_median=exclude_median
    ).has_outliers()
