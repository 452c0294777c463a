"""
Correlation strength insight.

Tiers, each inclusive on its lower bound:
    strong    r_squared >= r_squared_threshold_strong
    moderate  r_squared_threshold_weak <= r_squared < r_squared_threshold_strong
    weak      r_squared < r_squared_threshold_weak
"""

from __future__ import annotations

from pyfacta.regression.solution import RegressionSuccess
from pyfacta.insights._common import INSIGHT_CORRELATION, InsightOptions
from pyfacta.insights.solution import GeneratedInsight


def correlation_tier(r_squared: float, options: InsightOptions) -> str:
    """'strong', 'moderate' or 'weak'."""
    if r_squared >= options.r_squared_threshold_strong:
        return 'strong'
    if r_squared >= options.r_squared_threshold_weak:
        return 'moderate'
    return 'weak'


def correlation_insight(options: InsightOptions, result: RegressionSuccess) -> GeneratedInsight:
    """Describe how much of the variance in y the line explains."""
    r_squared = result.r_squared
    tier = correlation_tier(r_squared, options)

    if tier == 'strong':
        summary = (
            f"There is a strong linear correlation (R-squared: {r_squared:.2f}), "
            f"indicating the model explains a large portion of the variance."
        )
    elif tier == 'moderate':
        summary = f"There is a moderate linear correlation (R-squared: {r_squared:.2f})."
    else:
        summary = (
            f"There is a weak linear correlation (R-squared: {r_squared:.2f}), "
            f"suggesting the linear model may not be the best fit or other "
            f"factors are at play."
        )

    return GeneratedInsight(
        summary=summary,
        type=INSIGHT_CORRELATION,
        data={'r_squared': r_squared},
    )
