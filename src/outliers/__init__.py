"""
outliers — identification of outliers in one-dimensional numeric data
with Tukey's fences.

A value is an outlier when it lies below ``Q1 - k * IQR`` or above
``Q3 + k * IQR``, where ``Q1``/``Q3`` are the lower and upper quartiles and
``IQR = Q3 - Q1``. Values exactly on a fence are not outliers.

Classes
-------
OutlierIdentifier
    Classifies each value as a lower outlier, a non-outlier or an upper outlier.
Quartiles, Fences, ClassificationResult
    Result containers.
OutlierError, InsufficientDataError, InvalidConfigurationError, NonFiniteValueError
    Exceptions.

Methods
-------
get_outliers(data, k_value, exclude_median)
    Partition a data set into lower outliers, non-outliers and upper outliers.
has_outliers(data, k_value, exclude_median)
    Check whether a data set contains any outlier.
estimate_quartiles(data, exclude_median)
    Compute the quartiles of a data set.
compute_fences(quartiles, k_value)
    Derive Tukey fences from quartiles.

Examples
--------
>>> import outliers
>>> data = [10.0, 12.0, 11.0, 15.0, 11.0, 14.0, 13.0, 17.0, 12.0, 22.0, 14.0, 11.0]
>>> outliers.get_outliers(data).upper_outliers
[22.0]
>>> outliers.has_outliers([0.53, 0.57, 0.51, 0.60, 0.09, 12.75])
True
"""
import logging

from .exceptions import (
    InsufficientDataError,
    InvalidConfigurationError,
    NonFiniteValueError,
    OutlierError,
)
from .fences import compute_fences
from .identifier import OutlierIdentifier, get_outliers, has_outliers
from .quartiles import estimate_quartiles
from .types import ClassificationResult, Fences, Quartiles

__version__ = "0.1.0"

__all__ = [
    "OutlierIdentifier",
    "get_outliers",
    "has_outliers",
    "estimate_quartiles",
    "compute_fences",
    "Quartiles",
    "Fences",
    "ClassificationResult",
    "OutlierError",
    "InsufficientDataError",
    "InvalidConfigurationError",
    "NonFiniteValueError",
]

logger = logging.getLogger("outliers")
if not logger.hasHandlers():
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
    logger.addHandler(handler)
logger.setLevel(logging.WARNING)
