"""
Trend direction insight.
"""

from __future__ import annotations

from pyfacta.regression.solution import RegressionSuccess
from pyfacta.regression._util import format_number
from pyfacta.insights._common import INSIGHT_TREND
from pyfacta.insights.solution import GeneratedInsight


def trend_annotation(m: float, b: float) -> str:
    """Chart directive for the fitted line, e.g. 'drawTrendLine:2,0.5'."""
    return f"drawTrendLine:{format_number(m)},{format_number(b)}"


def trend_insight(result: RegressionSuccess) -> GeneratedInsight:
    """Describe the direction of the fitted line from the sign of its slope."""
    m, b = result.m, result.b

    if m > 0:
        summary = "There is a positive linear trend. As X increases, Y tends to increase."
    elif m < 0:
        summary = "There is a negative linear trend. As X increases, Y tends to decrease."
    else:
        summary = (
            "There is no significant linear trend. "
            "Y remains relatively constant as X changes."
        )

    return GeneratedInsight(
        summary=summary,
        type=INSIGHT_TREND,
        data={'m': m, 'b': b},
        annotations=(trend_annotation(m, b),),
    )
