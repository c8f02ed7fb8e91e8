"""
Partitioning of data against Tukey fences.

Fences are inclusive: a value exactly equal to the lower or upper fence
is a non-outlier. Values keep their original order inside each group
and duplicates are preserved, so the three groups form an exact
partition of the input.

Methods
-------
partition(data, fences)
    Split the data into lower outliers, non-outliers and upper outliers.
label_values(data, fences)
    Label every value as ``"lower"``, ``"non"`` or ``"upper"``.
contains_outliers(data, fences)
    Check whether any value lies outside the fences.
"""

from typing import Sequence

import numpy as np
import pandas as pd

from outliers.types import ClassificationResult, Fences

LOWER_LABEL = "lower"
NON_OUTLIER_LABEL = "non"
UPPER_LABEL = "upper"
LABELS = (LOWER_LABEL, NON_OUTLIER_LABEL, UPPER_LABEL)
LOWER_CODE, NON_OUTLIER_CODE, UPPER_CODE = range(len(LABELS))


def _label_codes(values: np.ndarray, fences: Fences) -> np.ndarray:
    """Code of the group every value belongs to, as indices into ``LABELS``."""
    # np.select takes the first matching condition, so groups never overlap
    return np.select(
        [values < fences.lower, values > fences.upper],
        [LOWER_CODE, UPPER_CODE],
        default=NON_OUTLIER_CODE,
    )


def _label_code(value: float, fences: Fences) -> int:
    if value < fences.lower:
        return LOWER_CODE
    if value > fences.upper:
        return UPPER_CODE
    return NON_OUTLIER_CODE


def partition(data: Sequence[float], fences: Fences) -> ClassificationResult:
    """
    Split the data into lower outliers, non-outliers and upper outliers.

    Parameters
    ----------
    data : Sequence[float]
        Original, unsorted one-dimensional numeric data.
    fences : Fences
        Fences to classify against.

    Returns
    -------
    ClassificationResult
        Three lists of floats; each keeps the input order of its values.

    Examples
    --------
    >>> from outliers.types import Fences
    >>> fences = Fences(lower=0.0, upper=10.0, iqr=4.0, k_value=1.5)
    >>> partition([12.0, 0.0, 5.0, -1.0, 10.0], fences).as_tuple()
    ([-1.0], [0.0, 5.0, 10.0], [12.0])
    """
    values = np.asarray(data, dtype=np.float64)
    codes = _label_codes(values, fences)
    return ClassificationResult(
        lower_outliers=values[codes == LOWER_CODE].tolist(),
        non_outliers=values[codes == NON_OUTLIER_CODE].tolist(),
        upper_outliers=values[codes == UPPER_CODE].tolist(),
    )


def label_values(data: pd.Series, fences: Fences) -> pd.Series:
    """
    Label every value as ``"lower"``, ``"non"`` or ``"upper"``.

    Parameters
    ----------
    data : pd.Series
        One-dimensional numeric data. Its index and name are carried over
        to the result.
    fences : Fences
        Fences to classify against.

    Returns
    -------
    pd.Series
        Categorical Series with categories ``["lower", "non", "upper"]``.

    Examples
    --------
    >>> import pandas as pd
    >>> from outliers.types import Fences
    >>> fences = Fences(lower=0.0, upper=10.0, iqr=4.0, k_value=1.5)
    >>> label_values(pd.Series([12.0, 5.0], index=["a", "b"]), fences).tolist()
    ['upper', 'non']
    """
    codes = _label_codes(data.to_numpy(dtype=np.float64), fences)
    return pd.Series(
        pd.Categorical.from_codes(codes, categories=list(LABELS)),
        index=data.index,
        name=data.name,
    )


def contains_outliers(data: Sequence[float], fences: Fences) -> bool:
    """
    Check whether any value lies outside the fences.

    Stops at the first outlier found.
    """
    return any(_label_code(value, fences) != NON_OUTLIER_CODE for value in data)
