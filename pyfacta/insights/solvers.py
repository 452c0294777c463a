"""
Insight generation dispatch.

This module provides generate_insights() (public API).
"""

from __future__ import annotations

from typing import Any, Mapping

from pyfacta.core.functional import curry
from pyfacta.regression.solution import RegressionResult
from pyfacta.insights._common import InsightOptions
from pyfacta.insights._correlation import correlation_insight
from pyfacta.insights._translate import translate
from pyfacta.insights._trend import trend_insight
from pyfacta.insights.solution import InsightResult, InsightSuccess


@curry
def generate_insights(
    options: InsightOptions | Mapping[str, Any] | None,
    result: RegressionResult,
) -> InsightResult:
    """
    Describe a regression result in chart-ready insights.

    A RegressionError is passed to translate() and returned as an
    InsightError; no insights are produced. A RegressionSuccess yields
    exactly two insights, always in this order:

        1. TrendDescription     direction of the slope, with a
                                'drawTrendLine:<m>,<b>' annotation
        2. CorrelationStrength  strong / moderate / weak from R²

    Curried with its data last: ``generate_insights(options)`` returns a
    function of ``result``.

    Args:
        options: InsightOptions, a mapping of overrides such as
            ``{'r_squared_threshold_strong': 0.8}``, or None for defaults.
        result: Output of pyfacta.regression.fit

    Returns:
        InsightSuccess or InsightError

    Raises:
        ValidationError: If options are invalid

    Example:
        >>> from pyfacta.regression import fit
        >>> from pyfacta.insights import generate_insights
        >>> out = generate_insights({}, fit({}, [[1, 2], [2, 4], [3, 6]]))
        >>> [i.type for i in out.insights]
        ['TrendDescription', 'CorrelationStrength']
    """
    opts = InsightOptions.coerce(options)

    if not result.ok:
        return translate(result)

    return InsightSuccess(insights=(
        trend_insight(result),
        correlation_insight(opts, result),
    ))
