"""
Simple linear regression.

Public API:
    fit(options, points) -> RegressionSuccess | RegressionError

The fit() function is the only entry point. It handles:
    - Option coercion
    - Filtering of points with a missing y
    - Input validation
    - Wrapping failures as RegressionError values

Example:
    >>> from pyfacta.regression import fit
    >>> result = fit({'precision': 2}, [[1, 2], [2, 4], [3, 6]])
    >>> if result.ok:
    ...     print(result.m, result.b, result.r_squared)
    ... else:
    ...     print(result.error_type, result.message)
"""

from pyfacta.regression._common import (
    ERROR_TYPES,
    DataPoint,
    PredictedPoint,
    RegressionOptions,
)
from pyfacta.regression.design import PointDesign
from pyfacta.regression.solution import (
    LinearParams,
    RegressionError,
    RegressionResult,
    RegressionSuccess,
)
from pyfacta.regression.solvers import fit

__all__ = [
    "fit",
    "RegressionOptions",
    "PointDesign",
    "LinearParams",
    "RegressionSuccess",
    "RegressionError",
    "RegressionResult",
    "DataPoint",
    "PredictedPoint",
    "ERROR_TYPES",
]
