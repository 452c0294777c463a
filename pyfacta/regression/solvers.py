"""
Solver dispatch for regression.

This module provides the fit() function (public API).
"""

from __future__ import annotations

from typing import Any, Mapping

from pyfacta.core.exceptions import PyFactaError
from pyfacta.core.functional import curry
from pyfacta.regression._common import (
    METHOD_LINEAR,
    Points,
    RegressionOptions,
    warn_reserved,
)
from pyfacta.regression.design import PointDesign
from pyfacta.regression.solution import (
    RegressionError,
    RegressionResult,
    RegressionSuccess,
)
from pyfacta.regression.backends.cpu import CPUSumsBackend


@curry
def fit(
    options: RegressionOptions | Mapping[str, Any] | None,
    points: Points,
) -> RegressionResult:
    """
    Fit a straight line by ordinary least squares.

    Solves min_{m,b} Σ(y - (m x + b))² over the points whose y is present.

    Statistical failures are returned, not raised: the result is either a
    RegressionSuccess or a RegressionError and callers branch on ``ok``.
    Malformed arguments (unknown options, entries that are not pairs) still
    raise ValidationError.

    fit is curried with its data last, so ``fit(options)`` returns a
    function of ``points`` that can be applied to many datasets.

    Args:
        options: RegressionOptions, a mapping of overrides such as
            ``{'precision': 4}``, or None for defaults (precision 2).
        points: Sequence of (x, y) pairs. y may be None; such points are
            left out of the fit but still receive a fitted value in
            ``points`` of the result.

    Returns:
        RegressionSuccess with m, b, r_squared, points and predict(), or
        RegressionError with error_type and message. Error types:
            - 'InsufficientData': fewer than 2 points with a y value
            - 'InvalidInput': NaN, infinite or non-numeric coordinate
            - 'DegenerateInput': all x identical (vertical line)
            - 'MathError': non-finite coefficients or undefined R²

    Raises:
        ValidationError: If options are invalid or an entry is not a pair

    Example:
        >>> from pyfacta.regression import fit
        >>> result = fit({}, [[1, 2], [2, 3], [3, 4], [4, 5]])
        >>> result.ok, result.m, result.b
        (True, 1.0, 1.0)
        >>> result.predict(5)
        (5.0, 6.0)
    """
    # === Options ===
    # Contract violations propagate
    opts = RegressionOptions.coerce(options)
    warn_reserved(opts, METHOD_LINEAR)

    try:
        # === Construct Design ===
        design = PointDesign.from_points(points)

        # === Solve ===
        result = CPUSumsBackend(opts.precision).solve(design)
    except PyFactaError as exc:
        if exc.error_type is None:
            raise
        return RegressionError.from_exception(exc)

    # === Wrap and Return ===
    params = result.params
    return RegressionSuccess(
        m=params.slope,
        b=params.intercept,
        r_squared=params.r_squared,
        points=params.points,
        precision=opts.precision,
        n_used=params.n,
        method=METHOD_LINEAR,
        warnings=result.warnings,
        info=result.info,
        timing=result.timing,
    )
