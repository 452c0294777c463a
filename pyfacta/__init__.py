"""
PyFacta: linear regression with chart-ready insights.

Fits straight lines to (x, y) data and turns the fit into short
natural-language descriptions and chart annotations for dashboards.

Submodules:
    regression: Ordinary least-squares line fit
    insights: Trend and correlation-strength descriptions of a fit
"""

__version__ = "0.1.0"

from pyfacta import regression
from pyfacta import insights

__all__ = [
    "__version__",
    "regression",
    "insights",
]
