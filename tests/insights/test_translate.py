"""
Tests for translate().
"""

import pytest

from pyfacta.insights import InsightError, translate
from pyfacta.regression import RegressionError


GENERIC = "An unexpected error occurred during linear regression calculation."


class TestTranslate:

    def test_insufficient_data(self):
        out = translate(RegressionError("InsufficientData", "Received 1."))
        assert out.message == "Unable to calculate trend: Not enough data points."
        assert "at least two distinct data points" in out.help_text
        assert out.original_error_type == "InsufficientData"

    def test_invalid_input(self):
        out = translate(RegressionError("InvalidInput", "nan at 3", index=3))
        assert out.message == "Invalid data provided."
        assert "valid numerical values" in out.help_text

    @pytest.mark.parametrize("error_type", [
        "DegenerateInput", "MathError", "NumericalStability", "NotAKnownKind", "",
    ])
    def test_catch_all(self, error_type):
        out = translate(RegressionError(error_type, "details"))
        assert isinstance(out, InsightError)
        assert out.message == GENERIC
        assert "contact support" in out.help_text
        assert out.original_error_type == error_type

    def test_result_is_error_value(self):
        out = translate(RegressionError("MathError", "nan"))
        assert out.ok is False
