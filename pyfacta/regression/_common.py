"""
Common types for regression.

Defines RegressionOptions, the option defaults and the error-kind tags
shared by the engine and the insight layer.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional, Sequence, Tuple
import warnings

from pyfacta.core.exceptions import ValidationError
from pyfacta.core.validation import check_precision


DataPoint = Tuple[float, Optional[float]]
PredictedPoint = Tuple[float, float]
Points = Sequence[DataPoint]

ERROR_TYPES: tuple[str, ...] = (
    "InsufficientData",
    "InvalidInput",
    "DegenerateInput",
    "MathError",
    "NumericalStability",
)

METHOD_LINEAR = "linear"

DEFAULT_PRECISION = 2
DEFAULT_ORDER = 2
DEFAULT_PERIOD = None

MIN_POINTS = 2


@dataclass(frozen=True)
class RegressionOptions:
    """
    Configuration for regression methods.

    Attributes
    ----------
    precision : int or None
        Decimal places used to round coefficients, R-squared and predicted
        points. None (or a non-finite number) disables rounding.
    order : int
        Polynomial order. Reserved; no effect on a linear fit.
    period : int or None
        Seasonal period. Reserved; no effect on a linear fit.
    """
    precision: int | None = DEFAULT_PRECISION
    order: int = DEFAULT_ORDER
    period: int | None = DEFAULT_PERIOD

    def __post_init__(self):
        check_precision(self.precision, 'precision')

    @classmethod
    def coerce(cls, options: RegressionOptions | Mapping[str, Any] | None) -> RegressionOptions:
        """
        Build options from an instance, a mapping of overrides, or None.

        Raises:
            ValidationError: On unknown option names or invalid values
        """
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if not isinstance(options, Mapping):
            raise ValidationError(
                f"options: expected RegressionOptions, mapping or None, "
                f"got {type(options).__name__}"
            )

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise ValidationError(
                f"options: unknown regression options {unknown}. "
                f"Valid options: {sorted(known)}"
            )
        return cls(**options)


def warn_reserved(options: RegressionOptions, method: str) -> None:
    """Warn when options that the method ignores were changed from their defaults."""
    if options.order != DEFAULT_ORDER:
        warnings.warn(
            f"order={options.order!r} has no effect on {method} regression",
            UserWarning,
            stacklevel=3,
        )
    if options.period != DEFAULT_PERIOD:
        warnings.warn(
            f"period={options.period!r} has no effect on {method} regression",
            UserWarning,
            stacklevel=3,
        )
