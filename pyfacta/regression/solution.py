"""
Regression solution types.

Contains the backend parameter payload and the two user-facing outcomes of
fit(): RegressionSuccess and RegressionError. Callers branch on ``ok``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Union

from pyfacta.regression._common import METHOD_LINEAR, PredictedPoint
from pyfacta.regression._util import round_to, format_number


@dataclass(frozen=True)
class LinearParams:
    """
    Parameter payload for a line fit.

    This is the immutable data computed by backends. Coefficients are
    already rounded to the requested precision.
    """
    slope: float
    intercept: float
    r_squared: float
    points: tuple[PredictedPoint, ...]
    n: int


@dataclass(frozen=True)
class RegressionSuccess:
    """
    Successful line fit.

    Attributes:
        m: Slope, rounded to precision
        b: Intercept, rounded to precision
        r_squared: Coefficient of determination in [0, 1], rounded. A
            rounded line that fits worse than the mean reports 0
        points: Fitted (x, y) for every input x, in input order. Inputs with
            a missing y still get a fitted value.
        precision: Rounding used for coefficients and predictions
        method: Always 'linear'
        n_used: Number of observations that took part in the fit
        warnings: Non-fatal notes (e.g. points dropped for missing y)
        info: Fit diagnostics: the accumulated sums under 'sums', the
            unclamped R² as 'r_squared_raw', point counts
        timing: Backend timing breakdown; not part of equality
    """
    m: float
    b: float
    r_squared: float
    points: tuple[PredictedPoint, ...]
    precision: int | None
    n_used: int
    method: str = METHOD_LINEAR
    warnings: tuple[str, ...] = ()
    info: dict[str, Any] = field(default_factory=dict, repr=False)
    timing: dict[str, float] | None = field(default=None, compare=False, repr=False)
    ok: Literal[True] = field(default=True, init=False)

    def predict(self, x: float) -> PredictedPoint:
        """
        Fitted point at x.

        The product m*x + b uses the raw x; only the returned coordinates
        are rounded.
        """
        return (
            round_to(x, self.precision),
            round_to(self.m * x + self.b, self.precision),
        )

    @property
    def equation(self) -> tuple[float, float]:
        """(slope, intercept)."""
        return (self.m, self.b)

    @property
    def string(self) -> str:
        """Equation as text, e.g. 'y = 2x + 1'."""
        return f"y = {format_number(self.m)}x + {format_number(self.b)}"

    def summary(self) -> str:
        """Plain-text report of the fit."""
        lines = [
            "Linear Regression Results",
            "=" * 40,
            f"Observations: {self.n_used}",
            f"Points: {len(self.points)}",
            f"Equation: {self.string}",
            f"Slope (m): {format_number(self.m)}",
            f"Intercept (b): {format_number(self.b)}",
            f"R-squared: {self.r_squared:.6f}",
        ]
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)


@dataclass(frozen=True)
class RegressionError:
    """
    Failed line fit.

    Attributes:
        error_type: One of ERROR_TYPES ('InsufficientData', 'InvalidInput',
            'DegenerateInput', 'MathError', 'NumericalStability')
        message: Human-readable explanation
        index: Offending input position for 'InvalidInput', else None
    """
    error_type: str
    message: str
    index: int | None = None
    ok: Literal[False] = field(default=False, init=False)

    @classmethod
    def from_exception(cls, exc: Any) -> RegressionError:
        """Build from a PyFactaError that carries an error_type tag."""
        return cls(
            error_type=exc.error_type,
            message=str(exc),
            index=getattr(exc, 'index', None),
        )


RegressionResult = Union[RegressionSuccess, RegressionError]
