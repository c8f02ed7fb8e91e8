"""
Exceptions raised by the outliers package.

All exceptions derive from :class:`OutlierError`, which itself subclasses
``ValueError``: every failure is caused by the values the caller passed in,
never by a transient condition, so retrying with the same input is pointless.

Classes
-------
OutlierError
    Base class of every error raised by the package.
InsufficientDataError
    The data set has fewer than 2 observations.
InvalidConfigurationError
    ``k_value`` or ``exclude_median`` is invalid.
NonFiniteValueError
    The data set contains NaN or infinite values.

Examples
--------
>>> from outliers import OutlierIdentifier, InsufficientDataError
>>> try:
...     OutlierIdentifier([1.0]).get_outliers()
... except InsufficientDataError as e:
...     print(e)
Cannot calculate the quartile values of 'data' with less than 2 elements, got 1.
"""


class OutlierError(ValueError):
    """Base class for outlier identification errors."""


class InsufficientDataError(OutlierError):
    """Raised when quartiles are requested for fewer than 2 observations."""


class InvalidConfigurationError(OutlierError):
    """Raised when the identifier is configured with an unusable k value or flag."""


class NonFiniteValueError(OutlierError):
    """Raised when the data set contains NaN, ``inf`` or ``-inf``."""
