"""
Natural-language insights from regression results.

Public API:
    generate_insights(options, result) -> InsightSuccess | InsightError
    translate(error) -> InsightError

Example:
    >>> from pyfacta.core import pipe
    >>> from pyfacta.regression import fit
    >>> from pyfacta.insights import generate_insights
    >>> describe = pipe(fit({}), generate_insights({}))
    >>> for insight in describe([[1, 2], [2, 4], [3, 6]]).insights:
    ...     print(insight.summary)
"""

from pyfacta.insights._common import (
    INSIGHT_CORRELATION,
    INSIGHT_TREND,
    INSIGHT_TYPES,
    InsightOptions,
)
from pyfacta.insights._translate import translate
from pyfacta.insights.solution import (
    GeneratedInsight,
    InsightError,
    InsightResult,
    InsightSuccess,
)
from pyfacta.insights.solvers import generate_insights

__all__ = [
    "generate_insights",
    "translate",
    "InsightOptions",
    "GeneratedInsight",
    "InsightSuccess",
    "InsightError",
    "InsightResult",
    "INSIGHT_TREND",
    "INSIGHT_CORRELATION",
    "INSIGHT_TYPES",
]
