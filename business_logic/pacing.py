"""
Benchmark blending and campaign pacing evaluation.

This module computes the weighted LC benchmark for a channel and classifies
spend pacing of actuals against plan, per period and year to date.
"""

import logging
from typing import Dict, List, Sequence, Tuple

from models.data_models import (
    ChannelBenchmark, PacingData, PacingResult, PacingStatus, YTDPacingResult
)
from config.settings import PACING_LOWER_BOUND, PACING_UPPER_BOUND

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def calculate_lc_benchmark(benchmark: ChannelBenchmark) -> float:
    """
    Weighted average of prior-year performance, plan number and adjustment.

    Weights are normalized by their sum; all-zero weights give 0.
    """
    actual_adjustment = benchmark.actual_adjustment or 0
    total_weight = benchmark.historical_weight + benchmark.plan_weight + benchmark.adjustment_weight
    if total_weight == 0:
        return 0.0

    weighted = (
        benchmark.fy_prior_performance * benchmark.historical_weight +
        benchmark.plan_number * benchmark.plan_weight +
        actual_adjustment * benchmark.adjustment_weight
    )
    return weighted / total_weight


def classify_pacing(spend_pacing: float) -> PacingStatus:
    """Classify spend pacing; both bounds count as on track."""
    if PACING_LOWER_BOUND <= spend_pacing <= PACING_UPPER_BOUND:
        return PacingStatus.ON_TRACK
    elif spend_pacing < PACING_LOWER_BOUND:
        return PacingStatus.UNDER_PACING
    return PacingStatus.OVER_PACING


def _ratio(actual: float, planned: float) -> float:
    return 0.0 if planned == 0 else actual / planned


def calculate_pacing(data: PacingData, benchmark: float) -> PacingResult:
    """
    Evaluate one channel/period snapshot.

    Args:
        data: Planned versus actual figures
        benchmark: LC benchmark for the channel's KPI

    Returns:
        PacingResult with ratios and status
    """
    spend_pacing = _ratio(data.actual_spend, data.planned_spend)
    impression_pacing = _ratio(data.actual_impressions, data.planned_impressions)
    performance_vs_benchmark = (
        0.0 if benchmark == 0 else (data.actual_performance_metric - benchmark) / benchmark
    )

    return PacingResult(
        spend_pacing=spend_pacing,
        impression_pacing=impression_pacing,
        performance_vs_benchmark=performance_vs_benchmark,
        status=classify_pacing(spend_pacing)
    )


def calculate_ytd_pacing(monthly_records: Sequence[PacingData]) -> YTDPacingResult:
    """
    Year-to-date pacing over aggregated totals.

    Ratios are taken on the summed figures, not averaged across periods.
    """
    ytd_planned_spend = sum(record.planned_spend for record in monthly_records)
    ytd_planned_impressions = sum(record.planned_impressions for record in monthly_records)
    ytd_actual_spend = sum(record.actual_spend for record in monthly_records)
    ytd_actual_impressions = sum(record.actual_impressions for record in monthly_records)

    return YTDPacingResult(
        ytd_planned_spend=ytd_planned_spend,
        ytd_planned_impressions=ytd_planned_impressions,
        ytd_actual_spend=ytd_actual_spend,
        ytd_actual_impressions=ytd_actual_impressions,
        ytd_spend_pacing=_ratio(ytd_actual_spend, ytd_planned_spend),
        ytd_impression_pacing=_ratio(ytd_actual_impressions, ytd_planned_impressions)
    )


class PacingEvaluator:
    """Evaluates pacing for a batch of snapshots against channel benchmarks."""

    def evaluate_all(self,
                     records: Sequence[PacingData],
                     benchmarks: Sequence[ChannelBenchmark]) -> List[Tuple[PacingData, PacingResult]]:
        """
        Pair every snapshot with its pacing result.

        Snapshots whose channel has no benchmark are compared against 0,
        which yields a performance delta of 0.
        """
        lc_benchmarks = self.benchmark_lookup(benchmarks)

        results = []
        for record in records:
            benchmark = lc_benchmarks.get(record.channel_id)
            if benchmark is None:
                logger.debug(f"No benchmark configured for {record.channel_id}")
                benchmark = 0.0
            results.append((record, calculate_pacing(record, benchmark)))

        return results

    def benchmark_lookup(self, benchmarks: Sequence[ChannelBenchmark]) -> Dict[str, float]:
        """Map channel id to its LC benchmark; the first entry per channel wins."""
        lookup = {}
        for benchmark in benchmarks:
            if benchmark.channel_id not in lookup:
                lookup[benchmark.channel_id] = calculate_lc_benchmark(benchmark)
        return lookup

    def status_counts(self, results: Sequence[Tuple[PacingData, PacingResult]]) -> Dict[PacingStatus, int]:
        counts = {status: 0 for status in PacingStatus}
        for _, result in results:
            counts[result.status] += 1
        return counts

