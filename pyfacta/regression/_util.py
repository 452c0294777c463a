"""
Numeric utilities for regression: rounding and goodness of fit.
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np
from numpy.typing import ArrayLike


def round_to(value: float, precision: Any) -> float:
    """
    Round value to a number of decimal places, halves toward +infinity.

    This is floor(value * 10**precision + 0.5) / 10**precision, so 2.345
    at precision 2 and -2.5 at precision 0 round up (to 2.35 and -2.0).
    Python's round() rounds halves to even and would disagree on ties.

    Args:
        value: Number to round. NaN and infinities are returned unchanged.
        precision: Decimal places. None or a non-finite number disables
            rounding. So does a precision too large for 10**precision to be
            a float, since no float has that many decimal places.

    Returns:
        Rounded value as float
    """
    if precision is None or not math.isfinite(value):
        return value
    try:
        precision = float(precision)
        factor = 10.0 ** precision
    except OverflowError:
        return value
    if not math.isfinite(precision):
        return value
    scaled = value * factor
    if not math.isfinite(scaled):
        return value
    return math.floor(scaled + 0.5) / factor


def r_squared(observed: ArrayLike, predicted: ArrayLike) -> float:
    """
    Coefficient of determination of predictions against observations.

    R² = 1 - SSres / SStot. When every observation is identical (SStot == 0)
    R² is 1 for a perfect fit and undefined otherwise.

    Args:
        observed: Observed y values
        predicted: Fitted y values, aligned with observed

    Returns:
        R² as float, or NaN if it cannot be calculated (no observations,
        or no variance in observed y with nonzero residuals)
    """
    y = np.asarray(observed, dtype=np.float64)
    y_hat = np.asarray(predicted, dtype=np.float64)

    if y.size == 0:
        return float('nan')

    y_mean = np.mean(y)
    tss = float(np.sum((y - y_mean) ** 2))
    rss = float(np.sum((y - y_hat) ** 2))

    if tss == 0:
        return 1.0 if rss == 0 else float('nan')
    return 1.0 - rss / tss


def format_number(value: float) -> str:
    """
    Render a number in its natural form for annotation strings.

    Integral values drop the trailing '.0' (2.0 -> '2'); negative zero
    renders as '0'; everything else uses the shortest round-trip repr.
    """
    value = float(value)
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)

