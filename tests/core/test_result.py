"""
Tests for the Result[P] envelope.

Validates:
    - Generic type parameter works with the regression payload
    - Frozen immutability
    - Default warnings
    - has_warning() method
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from pyfacta.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    slope: float


def _result(**kwargs):
    defaults = dict(
        params=FakeParams(slope=2.0),
        info={"method": "normal_equations"},
        timing=None,
        backend_name="cpu_sums",
    )
    defaults.update(kwargs)
    return Result(**defaults)


class TestResultConstruction:

    def test_basic_creation(self):
        result = _result(timing={"total_seconds": 0.01})
        assert result.params.slope == 2.0
        assert result.info["method"] == "normal_equations"
        assert result.timing["total_seconds"] == 0.01
        assert result.backend_name == "cpu_sums"

    def test_warnings_default_empty(self):
        result = _result()
        assert result.warnings == ()
        assert isinstance(result.warnings, tuple)


class TestImmutability:
    """Result is frozen — no attribute mutation allowed."""

    def test_cannot_set_params(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.params = FakeParams(slope=3.0)

    def test_cannot_set_warnings(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.warnings = ("new warning",)


class TestHasWarning:

    def test_no_warnings_returns_false(self):
        assert _result().has_warning("anything") is False

    def test_substring_match(self):
        result = _result(warnings=("2 point(s) with missing y excluded from the fit",))
        assert result.has_warning("missing y") is True
        assert result.has_warning("outlier") is False
