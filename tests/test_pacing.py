"""
Unit tests for LC benchmarks and pacing evaluation.
"""

import pytest

from models.data_models import ChannelBenchmark, ObjectiveKPI, PacingData, PacingStatus
from business_logic.pacing import (
    PacingEvaluator, calculate_lc_benchmark, calculate_pacing,
    calculate_ytd_pacing, classify_pacing
)


def make_pacing(planned_spend=100.0, actual_spend=100.0, planned_impressions=1000.0,
                actual_impressions=1000.0, metric=10.0, channel_id='ctv', period='Jan'):
    return PacingData(
        channel_id=channel_id,
        period=period,
        planned_spend=planned_spend,
        planned_impressions=planned_impressions,
        actual_spend=actual_spend,
        actual_impressions=actual_impressions,
        actual_performance_metric=metric
    )


def make_benchmark(channel_id='ctv', prior=20.0, historical_weight=0.5, plan=30.0,
                   plan_weight=0.5, adjustment=None, adjustment_weight=0.0):
    return ChannelBenchmark(
        channel_id=channel_id,
        objective_kpi=ObjectiveKPI.AWARENESS_CPM,
        fy_prior_performance=prior,
        historical_weight=historical_weight,
        plan_number=plan,
        plan_weight=plan_weight,
        adjustment_weight=adjustment_weight,
        actual_adjustment=adjustment
    )


class TestLCBenchmark:
    """Test cases for the weighted LC benchmark."""

    def test_weighted_average(self):
        assert calculate_lc_benchmark(make_benchmark()) == pytest.approx(25)

    def test_weights_are_normalized(self):
        benchmark = make_benchmark(historical_weight=2, plan_weight=1, adjustment=50, adjustment_weight=1)
        # (20*2 + 30*1 + 50*1) / 4
        assert calculate_lc_benchmark(benchmark) == pytest.approx(30)

    def test_missing_adjustment_counts_as_zero(self):
        benchmark = make_benchmark(historical_weight=0, plan_weight=1, adjustment_weight=1)
        assert calculate_lc_benchmark(benchmark) == pytest.approx(15)

    def test_all_zero_weights(self):
        benchmark = make_benchmark(historical_weight=0, plan_weight=0, adjustment_weight=0)
        assert calculate_lc_benchmark(benchmark) == 0


class TestCalculatePacing:
    """Test cases for single-period pacing."""

    def test_on_track(self):
        result = calculate_pacing(make_pacing(), 10)
        assert result.spend_pacing == 1.0
        assert result.status == PacingStatus.ON_TRACK

    @pytest.mark.parametrize("actual_spend,status", [
        (80, PacingStatus.UNDER_PACING),
        (94.9, PacingStatus.UNDER_PACING),
        (95, PacingStatus.ON_TRACK),
        (105, PacingStatus.ON_TRACK),
        (105.1, PacingStatus.OVER_PACING),
        (120, PacingStatus.OVER_PACING),
    ])
    def test_status_boundaries(self, actual_spend, status):
        assert calculate_pacing(make_pacing(actual_spend=actual_spend), 10).status == status

    def test_zero_plans_and_benchmark(self):
        result = calculate_pacing(make_pacing(planned_spend=0, planned_impressions=0), 0)
        assert result.spend_pacing == 0
        assert result.impression_pacing == 0
        assert result.performance_vs_benchmark == 0
        assert result.status == PacingStatus.UNDER_PACING

    def test_performance_vs_benchmark(self):
        result = calculate_pacing(make_pacing(metric=12, actual_impressions=500), 10)
        assert result.performance_vs_benchmark == pytest.approx(0.2)
        assert result.impression_pacing == pytest.approx(0.5)

    def test_classify_pacing(self):
        assert classify_pacing(0.95) == PacingStatus.ON_TRACK
        assert classify_pacing(1.05) == PacingStatus.ON_TRACK
        assert classify_pacing(0) == PacingStatus.UNDER_PACING


class TestYTDPacing:
    """Test cases for year-to-date pacing."""

    def test_aggregate_then_divide(self):
        records = [
            make_pacing(planned_spend=100, actual_spend=90),
            make_pacing(planned_spend=100, actual_spend=110),
        ]
        result = calculate_ytd_pacing(records)
        assert result.ytd_planned_spend == 200
        assert result.ytd_actual_spend == 200
        assert result.ytd_spend_pacing == 1.0

    def test_differs_from_average_of_ratios(self):
        records = [
            make_pacing(planned_spend=100, actual_spend=50),
            make_pacing(planned_spend=300, actual_spend=300),
        ]
        result = calculate_ytd_pacing(records)
        # Average of ratios would be 0.75
        assert result.ytd_spend_pacing == pytest.approx(350 / 400)

    def test_impression_totals(self):
        records = [
            make_pacing(planned_impressions=1000, actual_impressions=900),
            make_pacing(planned_impressions=3000, actual_impressions=3300),
        ]
        result = calculate_ytd_pacing(records)
        assert result.ytd_planned_impressions == 4000
        assert result.ytd_impression_pacing == pytest.approx(4200 / 4000)

    def test_empty(self):
        result = calculate_ytd_pacing([])
        assert result.ytd_spend_pacing == 0
        assert result.ytd_impression_pacing == 0


class TestPacingEvaluator:
    """Test cases for batch pacing evaluation."""

    def test_evaluate_all_uses_channel_benchmark(self):
        evaluator = PacingEvaluator()
        records = [make_pacing(channel_id='ctv', metric=30), make_pacing(channel_id='olv', metric=30)]
        results = evaluator.evaluate_all(records, [make_benchmark(channel_id='ctv')])

        assert results[0][0] is records[0]
        assert results[0][1].performance_vs_benchmark == pytest.approx(0.2)
        # No benchmark for olv
        assert results[1][1].performance_vs_benchmark == 0

    def test_first_benchmark_per_channel_wins(self):
        evaluator = PacingEvaluator()
        lookup = evaluator.benchmark_lookup([make_benchmark(prior=10, plan=10), make_benchmark(prior=90, plan=90)])
        assert lookup == {'ctv': pytest.approx(10)}

    def test_status_counts(self):
        evaluator = PacingEvaluator()
        results = evaluator.evaluate_all(
            [make_pacing(actual_spend=50), make_pacing(actual_spend=100), make_pacing(actual_spend=100)], []
        )
        counts = evaluator.status_counts(results)
        assert counts[PacingStatus.UNDER_PACING] == 1
        assert counts[PacingStatus.ON_TRACK] == 2
        assert counts[PacingStatus.OVER_PACING] == 0
