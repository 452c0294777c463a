"""
CPU backend for simple linear regression.

Solves the normal equations for a straight line in closed form from sums
accumulated in a single pass over the observations. No centering pass:
the sums are exactly those of the textbook formulas.
"""

from typing import Any
import math

from pyfacta.core.result import Result
from pyfacta.core.compute.timing import Timer
from pyfacta.core.exceptions import DegenerateInputError, NumericalError
from pyfacta.regression.design import PointDesign
from pyfacta.regression.solution import LinearParams
from pyfacta.regression._util import round_to, r_squared


class CPUSumsBackend:
    """
    CPU backend using accumulated sums.

    Implements PointDesign -> LinearParams.

        slope     = (n Σxy - Σx Σy) / (n Σx² - (Σx)²)
        intercept = Σy/n - slope Σx/n

    O(n) time, O(1) extra space for the fit; R² takes a second pass over
    the fitted values.
    """

    def __init__(self, precision: int | None):
        self._precision = precision

    @property
    def name(self) -> str:
        return 'cpu_sums'

    def solve(self, design: PointDesign) -> Result[LinearParams]:
        """
        Fit a line to the design's observations.

        Args:
            design: Validated point design

        Returns:
            Result containing LinearParams

        Raises:
            DegenerateInputError: If every x is identical
            NumericalError: If coefficients or R² are not finite
        """
        timer = Timer()
        timer.start()
        precision = self._precision
        n = design.n

        # === Accumulate ===
        with timer.section('accumulate'):
            sum_x = sum_y = sum_x2 = sum_xy = sum_y2 = 0.0
            for x, y in zip(design.x.tolist(), design.y.tolist()):
                sum_x += x
                sum_y += y
                sum_x2 += x * x
                sum_xy += x * y
                sum_y2 += y * y

        # === Solve ===
        denominator = n * sum_x2 - sum_x * sum_x
        if denominator == 0:
            raise DegenerateInputError(
                "Cannot perform linear regression: all x-values are identical, "
                "resulting in a vertical line.",
                denominator=denominator,
            )

        slope = round_to((n * sum_xy - sum_x * sum_y) / denominator, precision)
        intercept = round_to(sum_y / n - slope * sum_x / n, precision)

        if not (math.isfinite(slope) and math.isfinite(intercept)):
            raise NumericalError(
                "Linear regression resulted in non-finite coefficients "
                f"(slope={slope}, intercept={intercept}). This can occur with "
                "extremely large values.",
                quantity='coefficients',
            )

        # === Project every input x ===
        with timer.section('predict'):
            points = tuple(
                (round_to(x, precision), round_to(slope * x + intercept, precision))
                for x in design.x_all
            )

        # === Goodness of fit ===
        with timer.section('r_squared'):
            predicted = [points[i][1] for i in design.observed_index]
            r2 = r_squared(design.y, predicted)

        if math.isnan(r2):
            raise NumericalError(
                "R-squared calculation resulted in NaN. This happens when every "
                "observed y is identical but the fitted line does not pass "
                "through them.",
                quantity='r_squared',
            )

        warnings: list[str] = []
        if design.n_dropped:
            warnings.append(
                f"{design.n_dropped} point(s) with missing y excluded from the fit"
            )

        # Rounded coefficients can fit worse than the mean of y
        r2_raw = r2
        if r2 < 0.0:
            warnings.append(
                f"R-squared of the rounded line was negative ({r2:.6g}); "
                "reported as 0"
            )
            r2 = 0.0

        timer.stop()

        params = LinearParams(
            slope=slope,
            intercept=intercept,
            r_squared=round_to(r2, precision),
            points=points,
            n=n,
        )

        info: dict[str, Any] = {
            'method': 'normal_equations',
            'n_used': n,
            'n_dropped': design.n_dropped,
            'r_squared_raw': r2_raw,
            'sums': {
                'x': sum_x,
                'y': sum_y,
                'x2': sum_x2,
                'xy': sum_xy,
                'y2': sum_y2,
            },
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings),
        )
