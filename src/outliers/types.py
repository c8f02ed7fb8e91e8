"""
Result containers used throughout the outliers package.

These types are passive data holders: they carry the values derived during
outlier identification and implement no analytical logic of their own.

Classes
-------
Quartiles
    Lower quartile, median and upper quartile of a data set.
Fences
    Lower and upper Tukey fences together with the IQR and multiplier
    they were derived from.
ClassificationResult
    Three-way partition of a data set into lower outliers, non-outliers
    and upper outliers.

Examples
--------
>>> from outliers import OutlierIdentifier
>>> identifier = OutlierIdentifier([1.0, 2.0, 3.0, 4.0, 100.0])
>>> identifier.quartiles.q2
3.0
>>> result = identifier.get_outliers()
>>> lower, non, upper = result.as_tuple()
>>> upper
[100.0]
"""

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass(frozen=True)
class Quartiles:
    """
    Lower quartile, median and upper quartile of a data set.

    Parameters
    ----------
    q1 : float
        Lower quartile, the value below which 25% of ranked observations fall.
    q2 : float
        Median.
    q3 : float
        Upper quartile, the value below which 75% of ranked observations fall.
    """

    q1: float
    q2: float
    q3: float

    @property
    def iqr(self) -> float:
        """Interquartile range, ``q3 - q1``."""
        return self.q3 - self.q1


@dataclass(frozen=True)
class Fences:
    """
    Tukey fences of a data set.

    Parameters
    ----------
    lower : float
        ``q1 - k_value * iqr``. Values strictly below it are lower outliers.
    upper : float
        ``q3 + k_value * iqr``. Values strictly above it are upper outliers.
    iqr : float
        Interquartile range the fences were derived from.
    k_value : float
        Fence-width multiplier the fences were derived from.
    """

    lower: float
    upper: float
    iqr: float
    k_value: float

    def contains(self, value: float) -> bool:
        """Return True if ``value`` lies within the fences, bounds included."""
        return self.lower <= value <= self.upper


@dataclass(frozen=True)
class ClassificationResult:
    """
    Three-way partition of a data set produced by the identifier.

    Every input value appears in exactly one of the three lists, and within
    each list values keep the order in which they were given.

    Parameters
    ----------
    lower_outliers : list of float
        Values strictly below the lower fence.
    non_outliers : list of float
        Values between the fences, bounds included.
    upper_outliers : list of float
        Values strictly above the upper fence.
    """

    lower_outliers: List[float] = field(default_factory=list)
    non_outliers: List[float] = field(default_factory=list)
    upper_outliers: List[float] = field(default_factory=list)

    @property
    def outliers(self) -> List[float]:
        """Lower outliers followed by upper outliers."""
        return self.lower_outliers + self.upper_outliers

    def as_tuple(self) -> Tuple[List[float], List[float], List[float]]:
        """Return ``(lower_outliers, non_outliers, upper_outliers)``."""
        return self.lower_outliers, self.non_outliers, self.upper_outliers
