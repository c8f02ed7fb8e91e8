"""
Tukey fence computation.

Given the quartiles of a data set and a multiplier ``k``, the fences are

    lower = Q1 - k * (Q3 - Q1)
    upper = Q3 + k * (Q3 - Q1)

A larger ``k`` widens the fences and therefore identifies fewer values as
outliers. ``k = 1.5`` is the classic Tukey convention ("inner" fences);
``k = 3.0`` is conventionally used for "far" outliers ("outer" fences).

Methods
-------
resolve_k_value(k_value)
    Turn a number or preset name into a validated multiplier.
compute_fences(quartiles, k_value, data_name)
    Derive the fences from quartiles and a multiplier.

Examples
--------
>>> from outliers.fences import compute_fences
>>> from outliers.types import Quartiles
>>> compute_fences(Quartiles(2.0, 3.0, 4.0), k_value="far")
Fences(lower=-4.0, upper=10.0, iqr=2.0, k_value=3.0)
"""

import logging
import warnings
from numbers import Real
from typing import Union

import numpy as np

from outliers._utils import (
    convert_from_alias,
    read_config,
    validate_positive_number,
    validate_string_flag,
)
from outliers.exceptions import InvalidConfigurationError, NonFiniteValueError
from outliers.types import Fences, Quartiles

logger = logging.getLogger(__name__)

_errors = read_config("messages")["errors"]
_warns = read_config("messages")["warns"]

DEFAULT_K_VALUE = 1.5
FENCE_PRESETS = {"inner": 1.5, "outer": 3.0}


def resolve_k_value(k_value: Union[Real, str]) -> float:
    """
    Turn a number or preset name into a validated fence multiplier.

    Parameters
    ----------
    k_value : float or str
        A finite real number greater than zero, or the name of a preset:
        ``"inner"`` (aliases ``"tukey"``, ``"near"``, ``"standard"``) for 1.5,
        ``"outer"`` (aliases ``"far"``, ``"extreme"``) for 3.0.
        Preset names are case-insensitive.

    Returns
    -------
    float

    Raises
    ------
    InvalidConfigurationError
        If ``k_value`` is not positive, not finite, not a number, or an
        unknown preset name.

    Examples
    --------
    >>> resolve_k_value("Tukey")
    1.5
    >>> resolve_k_value(-3)
    Traceback (most recent call last):
        ...
    outliers.exceptions.InvalidConfigurationError: k_value must be a finite ...
    """
    if isinstance(k_value, str):
        preset = convert_from_alias(
            k_value, path="k_value", default_values=FENCE_PRESETS
        )
        validate_string_flag(
            preset,
            FENCE_PRESETS,
            err_msg=_errors["k_value_unknown_preset_f"].format(
                k_value, list(FENCE_PRESETS)
            ),
            error_type=InvalidConfigurationError,
        )
        return FENCE_PRESETS[preset]
    if isinstance(k_value, bool) or not isinstance(k_value, Real):
        raise InvalidConfigurationError(
            _errors["k_value_wrong_type_f"].format(repr(k_value))
        )
    validate_positive_number(
        k_value,
        err_msg=_errors["k_value_not_positive_f"].format(k_value),
        error_type=InvalidConfigurationError,
    )
    return float(k_value)


def compute_fences(
    quartiles: Quartiles,
    k_value: Union[Real, str] = DEFAULT_K_VALUE,
    data_name: str = "data",
) -> Fences:
    """
    Derive the Tukey fences from quartiles and a multiplier.

    Parameters
    ----------
    quartiles : Quartiles
        Quartiles of the data set, ``q1 <= q3``.
    k_value : float or str, default=1.5
        Fence-width multiplier or preset name, see :func:`resolve_k_value`.
    data_name : str, default='data'
        Name of the dataset (used in warning messages).

    Returns
    -------
    Fences

    Raises
    ------
    InvalidConfigurationError
        If ``k_value`` is invalid.
    NonFiniteValueError
        If the interquartile range or a fence overflows to infinity.

    Warns
    -----
    UserWarning
        If the interquartile range is zero. The fences then collapse onto the
        quartiles, and every value different from them is an outlier.
    """
    k = resolve_k_value(k_value)
    iqr = quartiles.iqr
    if iqr == 0:
        warnings.warn(
            _warns["zero_iqr_f"].format(data_name, quartiles.q1),
            UserWarning,
            stacklevel=2,
        )

    spread = k * iqr
    fences = Fences(
        lower=quartiles.q1 - spread,
        upper=quartiles.q3 + spread,
        iqr=iqr,
        k_value=k,
    )
    if not np.isfinite([fences.lower, fences.upper, fences.iqr]).all():
        raise NonFiniteValueError(
            _errors["non_finite_fences_f"].format(data_name, fences)
        )
    logger.debug("Fences of '%s': %s", data_name, fences)
    return fences
