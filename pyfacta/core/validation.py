"""
Input validation utilities for PyFacta.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (strings and bools are not numbers)
    - Missing values are an explicit None, never a falsy sentinel
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math
from numbers import Integral, Real
from typing import Any, Sequence

import numpy as np

from pyfacta.core.exceptions import (
    ValidationError,
    InsufficientDataError,
    InvalidInputError,
)


def is_number(value: Any) -> bool:
    """True for real numbers (Python or numpy), False for bool, None and strings."""
    return isinstance(value, (Real, np.number)) and not isinstance(value, (bool, np.bool_))


def is_valid(value: Any) -> bool:
    """True for a finite real number. Integers too large for a float are not valid."""
    if not is_number(value):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def check_point_shape(point: Any, index: int, name: str) -> None:
    """
    Verify a point is an (x, y) pair.

    Args:
        point: Candidate point
        index: Position in the caller's sequence
        name: Parameter name for error messages

    Raises:
        ValidationError: If point is not a length-2 sequence
    """
    if isinstance(point, (str, bytes)) or not hasattr(point, "__len__") or len(point) != 2:
        raise ValidationError(
            f"{name}[{index}]: expected an (x, y) pair, got {point!r}"
        )


def check_x_numeric(point: Sequence[Any], index: int, name: str) -> None:
    """
    Verify the x coordinate is a real number.

    Finiteness is not checked here: only points that take part in a fit
    need finite coordinates.

    Raises:
        InvalidInputError: If x is not a real number
    """
    x = point[0]
    if not is_number(x):
        raise InvalidInputError(
            f"{name}[{index}]: x must be a real number, got {x!r}",
            index=index,
            value=tuple(point),
        )


def check_finite_point(point: Sequence[Any], index: int, name: str) -> None:
    """
    Verify both coordinates are finite real numbers.

    Args:
        point: (x, y) pair
        index: Position in the caller's sequence
        name: Parameter name for error messages

    Raises:
        InvalidInputError: If x or y is NaN, infinite or not a number
    """
    x, y = point
    if not (is_valid(x) and is_valid(y)):
        raise InvalidInputError(
            f"{name}[{index}]: contains non-finite values ({x!r}, {y!r}). "
            f"Linear regression requires finite numerical inputs.",
            index=index,
            value=(x, y),
        )


def check_min_points(n_valid: int, min_points: int, name: str) -> None:
    """
    Verify enough usable points remain.

    Raises:
        InsufficientDataError: If n_valid < min_points
    """
    if n_valid < min_points:
        raise InsufficientDataError(
            f"{name}: linear regression requires at least {min_points} valid "
            f"data points (x, y). Received {n_valid}.",
            n_valid=n_valid,
            min_required=min_points,
        )


def check_precision(precision: Any, name: str) -> None:
    """
    Verify a rounding precision is None or a non-negative integer.

    Non-finite numbers are accepted; they disable rounding.

    Raises:
        ValidationError: If precision is negative, fractional or not a number
    """
    if precision is None:
        return
    if not is_number(precision):
        valid = False
    elif isinstance(precision, Integral):
        valid = precision >= 0
    else:
        valid = not math.isfinite(precision) or (precision >= 0 and precision == int(precision))
    if not valid:
        raise ValidationError(
            f"{name}: expected None or a non-negative integer, got {precision!r}"
        )


def check_unit_interval(value: Any, name: str) -> None:
    """
    Verify value is a real number in [0, 1].

    Raises:
        ValidationError: If value is outside [0, 1] or not a number
    """
    if not is_valid(value) or not 0.0 <= value <= 1.0:
        raise ValidationError(f"{name}: expected a number in [0, 1], got {value!r}")

