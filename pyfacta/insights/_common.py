"""
Common types for insight generation.

Defines InsightOptions and the insight kind tags.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping

from pyfacta.core.exceptions import ValidationError
from pyfacta.core.validation import check_unit_interval, is_valid


INSIGHT_TREND = "TrendDescription"
INSIGHT_CORRELATION = "CorrelationStrength"

INSIGHT_TYPES = (INSIGHT_TREND, INSIGHT_CORRELATION)

DEFAULT_R_SQUARED_THRESHOLD_WEAK = 0.3
DEFAULT_R_SQUARED_THRESHOLD_STRONG = 0.7
DEFAULT_P_VALUE_SIGNIFICANCE_LEVEL = 0.05
DEFAULT_OUTLIER_Z_SCORE_THRESHOLD = 3.0


@dataclass(frozen=True)
class InsightOptions:
    """
    Configuration for insight generation.

    Attributes
    ----------
    r_squared_threshold_weak : float
        R² below this is a weak correlation. Inclusive lower bound of
        'moderate'.
    r_squared_threshold_strong : float
        R² at or above this is a strong correlation.
    p_value_significance_level : float
        Reserved for significance insights.
    outlier_z_score_threshold : float
        Reserved for residual outlier insights.
    """
    r_squared_threshold_weak: float = DEFAULT_R_SQUARED_THRESHOLD_WEAK
    r_squared_threshold_strong: float = DEFAULT_R_SQUARED_THRESHOLD_STRONG
    p_value_significance_level: float = DEFAULT_P_VALUE_SIGNIFICANCE_LEVEL
    outlier_z_score_threshold: float = DEFAULT_OUTLIER_Z_SCORE_THRESHOLD

    def __post_init__(self):
        check_unit_interval(self.r_squared_threshold_weak, 'r_squared_threshold_weak')
        check_unit_interval(self.r_squared_threshold_strong, 'r_squared_threshold_strong')
        check_unit_interval(self.p_value_significance_level, 'p_value_significance_level')
        if not is_valid(self.outlier_z_score_threshold) or self.outlier_z_score_threshold <= 0:
            raise ValidationError(
                f"outlier_z_score_threshold: expected a positive number, "
                f"got {self.outlier_z_score_threshold!r}"
            )

    @classmethod
    def coerce(cls, options: InsightOptions | Mapping[str, Any] | None) -> InsightOptions:
        """
        Build options from an instance, a mapping of overrides, or None.

        Keys missing from a mapping take their defaults. A key mapped to None
        also takes its default.

        Raises:
            ValidationError: On unknown option names or invalid values
        """
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if not isinstance(options, Mapping):
            raise ValidationError(
                f"options: expected InsightOptions, mapping or None, "
                f"got {type(options).__name__}"
            )

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise ValidationError(
                f"options: unknown insight options {unknown}. "
                f"Valid options: {sorted(known)}"
            )
        return cls(**{k: v for k, v in options.items() if v is not None})
