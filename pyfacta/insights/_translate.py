"""
Translation of regression errors into user-facing messages.
"""

from __future__ import annotations

from pyfacta.regression.solution import RegressionError
from pyfacta.insights.solution import InsightError


_MESSAGES: dict[str, tuple[str, str]] = {
    "InsufficientData": (
        "Unable to calculate trend: Not enough data points.",
        "Linear regression requires at least two distinct data points. "
        "Please provide more data.",
    ),
    "InvalidInput": (
        "Invalid data provided.",
        "Ensure your data only contains valid numerical values "
        "(e.g., no 'null', 'undefined', or non-numeric strings).",
    ),
}

_FALLBACK = (
    "An unexpected error occurred during linear regression calculation.",
    "Please contact support with the details of the data you were trying to analyze.",
)


def translate(error: RegressionError) -> InsightError:
    """
    Render a RegressionError for display.

    Total over error kinds: 'DegenerateInput', 'MathError',
    'NumericalStability' and any unrecognized kind get the generic message.
    The original kind is always kept in original_error_type.

    Args:
        error: Failed regression result

    Returns:
        InsightError with message, help_text and original_error_type
    """
    message, help_text = _MESSAGES.get(error.error_type, _FALLBACK)
    return InsightError(
        message=message,
        help_text=help_text,
        original_error_type=error.error_type,
    )
