"""
Regression Design.

PointDesign takes the caller's raw (x, y) sequence and separates it into
the observations that take part in the fit and the x positions that get a
fitted value. Points with a missing y (None) are kept for projection but
excluded from the fit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np
from numpy.typing import NDArray

from pyfacta.core.validation import (
    check_point_shape,
    check_x_numeric,
    check_finite_point,
    check_min_points,
)
from pyfacta.regression._common import MIN_POINTS


@dataclass(frozen=True)
class PointDesign:
    """
    Validated point data for a line fit.

    Immutable after construction.

    Construction:
        PointDesign.from_points([[1, 2], [2, None], [3, 4]])
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _x_all: tuple[Any, ...]
    _observed_index: tuple[int, ...]

    @classmethod
    def from_points(cls, points: Sequence[Sequence[Any]], name: str = 'points') -> PointDesign:
        """
        Build a design from a sequence of (x, y) pairs.

        Validation order:
            1. Every entry must be an (x, y) pair with a numeric x.
            2. Points whose y is None are dropped from the fit; at least
               two must remain.
            3. Remaining points must have finite x and y.

        Args:
            points: Sequence of (x, y) pairs; y may be None
            name: Parameter name for error messages

        Returns:
            PointDesign ready for a backend

        Raises:
            ValidationError: If an entry is not an (x, y) pair
            InsufficientDataError: If fewer than two points have a y value
            InvalidInputError: If a coordinate is non-numeric or non-finite
        """
        if isinstance(points, np.ndarray):
            points = points.tolist()
        else:
            points = list(points)

        for i, point in enumerate(points):
            check_point_shape(point, i, name)

        observed_index = tuple(i for i, point in enumerate(points) if point[1] is not None)
        check_min_points(len(observed_index), MIN_POINTS, name)

        for i in observed_index:
            check_finite_point(points[i], i, name)
        for i, point in enumerate(points):
            check_x_numeric(point, i, name)

        x = np.array([points[i][0] for i in observed_index], dtype=np.float64)
        y = np.array([points[i][1] for i in observed_index], dtype=np.float64)
        x_all = tuple(point[0] for point in points)

        return cls(_x=x, _y=y, _x_all=x_all, _observed_index=observed_index)

    # === Properties ===

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """x of the observations used in the fit."""
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """y of the observations used in the fit."""
        return self._y

    @property
    def x_all(self) -> tuple[Any, ...]:
        """x of every input point, in input order."""
        return self._x_all

    @property
    def observed_index(self) -> tuple[int, ...]:
        """Input positions of the observations used in the fit."""
        return self._observed_index

    @property
    def n(self) -> int:
        """Number of observations used in the fit."""
        return len(self._observed_index)

    @property
    def n_total(self) -> int:
        """Number of input points, including those with a missing y."""
        return len(self._x_all)

    @property
    def n_dropped(self) -> int:
        """Number of input points excluded for a missing y."""
        return self.n_total - self.n
