"""
Unit tests for budget, CPM, impression and TRP conversions.
"""

import math

import pytest

from config.settings import DISTRIBUTION_TOLERANCE
from business_logic.unit_conversions import (
    calculate_cp_thru_play, calculate_cpc, calculate_cpcv, calculate_cplpv,
    calculate_cpm, calculate_cpp, calculate_ctr, calculate_cvr, calculate_trps,
    calculate_vcr, calculate_yoy_change, forecast_budget_from_impressions,
    forecast_impressions, impressions_from_trps
)


class TestImpressionForecasting:
    """Test cases for impression forecasting."""

    def test_forecast_impressions(self):
        assert forecast_impressions(10000, 5) == pytest.approx(2_000_000)

    def test_forecast_impressions_zero_cpm(self):
        assert forecast_impressions(10000, 0) == 0

    def test_forecast_impressions_small_cpm(self):
        assert forecast_impressions(100, 0.5) == pytest.approx(200_000)

    @pytest.mark.parametrize("budget,cpm", [(0, 5), (10000, 5), (123456.78, 3.7), (1, 500)])
    def test_budget_round_trip(self, budget, cpm):
        impressions = forecast_impressions(budget, cpm)
        assert forecast_budget_from_impressions(impressions, cpm) == pytest.approx(
            budget, rel=DISTRIBUTION_TOLERANCE, abs=DISTRIBUTION_TOLERANCE
        )


class TestTRPs:
    """Test cases for TRP calculations."""

    def test_full_universe_is_100_trps(self):
        assert calculate_trps(3_643_402, 3_643_402) == pytest.approx(100)

    @pytest.mark.parametrize("impressions", [0, 1, 5_000_000])
    def test_zero_universe(self, impressions):
        assert calculate_trps(impressions, 0) == 0

    def test_impressions_from_trps_inverse(self):
        universe = 3_643_402
        impressions = impressions_from_trps(250, universe)
        assert calculate_trps(impressions, universe) == pytest.approx(250)

    def test_impressions_from_trps_zero_universe(self):
        assert impressions_from_trps(150, 0) == 0

    def test_cpp(self):
        assert calculate_cpp(50000, 200) == pytest.approx(250)
        assert calculate_cpp(50000, 0) == 0


class TestRateMetrics:
    """Test cases for rate metrics with zero guards."""

    def test_ratios(self):
        assert calculate_cpm(500, 100_000) == pytest.approx(5)
        assert calculate_vcr(750, 1000) == pytest.approx(0.75)
        assert calculate_cpcv(300, 1500) == pytest.approx(0.2)
        assert calculate_cplpv(400, 200) == pytest.approx(2)
        assert calculate_cvr(25, 10_000) == pytest.approx(0.0025)
        assert calculate_ctr(150, 10_000) == pytest.approx(0.015)
        assert calculate_cpc(300, 150) == pytest.approx(2)
        assert calculate_cp_thru_play(90, 600) == pytest.approx(0.15)

    @pytest.mark.parametrize("func", [
        calculate_cpm, calculate_vcr, calculate_cpcv, calculate_cplpv,
        calculate_cvr, calculate_ctr, calculate_cpc, calculate_cp_thru_play, calculate_cpp
    ])
    def test_zero_divisor_returns_zero(self, func):
        result = func(1000, 0)
        assert result == 0
        assert math.isfinite(result)

    def test_yoy_change(self):
        assert calculate_yoy_change(120_000, 100_000) == pytest.approx(0.2)
        assert calculate_yoy_change(80_000, 100_000) == pytest.approx(-0.2)
        assert calculate_yoy_change(80_000, 0) == 0


if __name__ == "__main__":
    pytest.main([__file__])
