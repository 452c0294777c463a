"""
Tests for generate_insights().

Validates ordering, trend classification, correlation tiers and their
inclusive boundaries, error passthrough and purity.
"""

import pytest

from pyfacta.core.exceptions import ValidationError
from pyfacta.core.functional import pipe
from pyfacta.insights import (
    INSIGHT_CORRELATION,
    INSIGHT_TREND,
    GeneratedInsight,
    InsightError,
    InsightOptions,
    InsightSuccess,
    generate_insights,
)
from pyfacta.regression import ERROR_TYPES, RegressionError, RegressionSuccess, fit


def _success(m=1.0, b=0.0, r_squared=0.9):
    return RegressionSuccess(
        m=m, b=b, r_squared=r_squared, points=(), precision=2, n_used=2,
    )


def _correlation(result, options=None):
    out = generate_insights(options, result)
    return out.insights[1]


class TestOrdering:

    def test_exactly_two_in_order(self, collinear_points):
        out = generate_insights({}, fit({}, collinear_points))
        assert isinstance(out, InsightSuccess)
        assert out.ok is True
        assert [i.type for i in out.insights] == [INSIGHT_TREND, INSIGHT_CORRELATION]

    @pytest.mark.parametrize("m, r2", [(2.0, 1.0), (-1.0, 0.1), (0.0, 0.5)])
    def test_order_holds_for_any_success(self, m, r2):
        out = generate_insights(None, _success(m=m, r_squared=r2))
        assert len(out.insights) == 2
        assert out.insights[0].type == INSIGHT_TREND
        assert out.insights[1].type == INSIGHT_CORRELATION


class TestTrendDescription:

    def test_positive(self):
        trend = generate_insights({}, _success(m=2.0, b=0.0)).insights[0]
        assert "positive linear trend" in trend.summary
        assert "tends to increase" in trend.summary

    def test_negative(self):
        trend = generate_insights({}, _success(m=-0.5, b=3.0)).insights[0]
        assert "negative linear trend" in trend.summary
        assert "tends to decrease" in trend.summary

    def test_flat(self):
        trend = generate_insights({}, _success(m=0.0, b=5.0)).insights[0]
        assert "no significant linear trend" in trend.summary
        assert "relatively constant" in trend.summary

    def test_data_and_annotation(self):
        trend = generate_insights({}, _success(m=2.0, b=0.0)).insights[0]
        assert trend.data == {'m': 2.0, 'b': 0.0}
        assert trend.annotations == ("drawTrendLine:2,0",)

    def test_annotation_keeps_engine_rounding(self):
        trend = generate_insights({}, _success(m=0.33, b=-1.25)).insights[0]
        assert trend.annotations == ("drawTrendLine:0.33,-1.25",)


class TestCorrelationStrength:

    @pytest.mark.parametrize("r2, tier", [
        (0.0, "weak"),
        (0.29, "weak"),
        (0.3, "moderate"),
        (0.5, "moderate"),
        (0.69, "moderate"),
        (0.7, "strong"),
        (1.0, "strong"),
    ])
    def test_default_tiers_inclusive_lower_bound(self, r2, tier):
        insight = _correlation(_success(r_squared=r2))
        assert f"a {tier} linear correlation" in insight.summary

    def test_summary_formats_two_decimals(self):
        insight = _correlation(_success(r_squared=0.756))
        assert "R-squared: 0.76" in insight.summary

    def test_weak_includes_caveat(self):
        insight = _correlation(_success(r_squared=0.1))
        assert "may not be the best fit" in insight.summary

    def test_strong_explains_variance(self):
        insight = _correlation(_success(r_squared=0.9))
        assert "explains a large portion of the variance" in insight.summary

    def test_data(self):
        insight = _correlation(_success(r_squared=0.42))
        assert insight.data == {'r_squared': 0.42}
        assert insight.annotations is None

    def test_custom_thresholds(self):
        opts = {'r_squared_threshold_weak': 0.5, 'r_squared_threshold_strong': 0.9}
        assert "moderate" in _correlation(_success(r_squared=0.8), opts).summary
        assert "weak" in _correlation(_success(r_squared=0.4), opts).summary
        assert "strong" in _correlation(_success(r_squared=0.9), opts).summary

    def test_one_threshold_leaves_other_default(self):
        opts = {'r_squared_threshold_strong': 0.95}
        assert "weak" in _correlation(_success(r_squared=0.29), opts).summary
        assert "moderate" in _correlation(_success(r_squared=0.9), opts).summary

    def test_reserved_options_do_not_change_output(self):
        result = _success(r_squared=0.5)
        base = generate_insights({}, result)
        tweaked = generate_insights(
            {'p_value_significance_level': 0.01, 'outlier_z_score_threshold': 2.0},
            result,
        )
        assert base == tweaked


class TestErrorPassthrough:

    @pytest.mark.parametrize("error_type", list(ERROR_TYPES) + ["SomethingNew"])
    def test_original_error_type_preserved(self, error_type):
        out = generate_insights({}, RegressionError(error_type=error_type, message="x"))
        assert isinstance(out, InsightError)
        assert out.ok is False
        assert out.original_error_type == error_type

    def test_fit_error_flows_through(self):
        out = generate_insights({}, fit({}, [[5, 10]]))
        assert out.ok is False
        assert out.original_error_type == "InsufficientData"
        assert "Not enough data points" in out.message


class TestOptions:

    def test_none_values_take_defaults(self):
        opts = InsightOptions.coerce({'r_squared_threshold_weak': None})
        assert opts.r_squared_threshold_weak == 0.3

    def test_instance_passthrough(self):
        opts = InsightOptions(r_squared_threshold_strong=0.8)
        assert InsightOptions.coerce(opts) is opts

    def test_unknown_option_raises(self):
        with pytest.raises(ValidationError, match="unknown insight options"):
            generate_insights({'rSquaredThresholdWeak': 0.2}, _success())

    @pytest.mark.parametrize("overrides", [
        {'r_squared_threshold_weak': -0.1},
        {'r_squared_threshold_strong': 1.5},
        {'p_value_significance_level': 2.0},
        {'outlier_z_score_threshold': 0},
    ])
    def test_invalid_values_raise(self, overrides):
        with pytest.raises(ValidationError):
            InsightOptions.coerce(overrides)


class TestComposition:

    def test_curried(self, collinear_points):
        describe = generate_insights({'r_squared_threshold_strong': 0.9})
        assert describe(fit({}, collinear_points)) == generate_insights(
            {'r_squared_threshold_strong': 0.9}, fit({}, collinear_points)
        )

    def test_pipe_with_fit(self, points_with_gaps):
        describe = pipe(fit({}), generate_insights({}))
        out = describe(points_with_gaps)
        assert out.ok
        assert out.insights[0].annotations == ("drawTrendLine:1,1",)

    def test_idempotent(self, noisy_points):
        first = generate_insights({}, fit({}, noisy_points))
        second = generate_insights({}, fit({}, noisy_points))
        assert first == second


class TestAsDict:

    def test_success(self, collinear_points):
        out = generate_insights({}, fit({}, collinear_points)).as_dict()
        assert out['ok'] is True
        trend, corr = out['insights']
        assert trend == {
            'summary': "There is a positive linear trend. As X increases, Y tends to increase.",
            'type': 'TrendDescription',
            'data': {'m': 2.0, 'b': 0.0},
            'annotations': ['drawTrendLine:2,0'],
        }
        assert 'annotations' not in corr

    def test_error(self):
        out = generate_insights({}, RegressionError("InvalidInput", "bad")).as_dict()
        assert out == {
            'ok': False,
            'message': "Invalid data provided.",
            'help_text': (
                "Ensure your data only contains valid numerical values "
                "(e.g., no 'null', 'undefined', or non-numeric strings)."
            ),
            'original_error_type': 'InvalidInput',
        }

    def test_minimal_insight(self):
        assert GeneratedInsight(summary="s", type="t").as_dict() == {'summary': 's', 'type': 't'}
