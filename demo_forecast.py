#!/usr/bin/env python3
"""
Demonstration of the media planning core.

This script walks through budget flighting, channel mix allocation, fees,
forecast row generation and pacing evaluation using the built-in catalog.
"""

import logging

from config.settings import config_manager
from models.data_models import (
    ChannelBenchmark, ChannelMixEntry, FeeStructure, FeeType, FlightingConfig,
    FlightingPattern, ForecastConfig, ObjectiveKPI, PacingData
)
from business_logic.budget_distributor import distribute_budget
from business_logic.channel_mix import allocate_channel_mix
from business_logic.fee_calculator import calculate_total_with_fees
from business_logic.error_handler import error_handler
from business_logic.media_plan_controller import MediaPlanController
from business_logic.planner_state import PlannerState
from business_logic.unit_conversions import calculate_trps, forecast_impressions
from data.frames import forecast_rows_to_dataframe, pacing_results_to_dataframe


def main():
    """Demonstrate the media planning core."""
    logging.getLogger().setLevel(config_manager.get_log_level())

    print("=== Media Planning Core Demo ===\n")

    print("1. Flighting $100,000 over 4 periods...")
    for pattern in FlightingPattern:
        distribution = distribute_budget(FlightingConfig(
            pattern=pattern,
            total_budget=100_000,
            periods=4,
            seasonal_indices=[1, 2, 3, 4],
            custom_weights=[2, 1, 1, 2]
        ))
        print(f"   ✓ {pattern.value:<13} {', '.join(f'${amount:,.0f}' for amount in distribution)}")

    print("\n2. Allocating the channel mix...")
    mix = [
        ChannelMixEntry('linear-tv', 50),
        ChannelMixEntry('ctv', 30, max_spend=25_000),
        ChannelMixEntry('meta-reach', 20, min_spend=25_000),
    ]
    allocations = allocate_channel_mix(100_000, mix)
    for channel_id, amount in allocations.items():
        print(f"   ✓ {channel_id}: ${amount:,.2f}")

    print("\n3. Converting linear TV spend...")
    impressions = forecast_impressions(allocations['linear-tv'], 35)
    print(f"   ✓ Impressions at $35 CPM: {impressions:,.0f}")
    print(f"   ✓ TRPs against a 3,643,402 universe: {calculate_trps(impressions, 3_643_402):.1f}")

    print("\n4. Applying a hybrid fee...")
    fee_result = calculate_total_with_fees(100_000, FeeStructure(FeeType.HYBRID, percentage_fee=0.10, flat_fee=200))
    print(f"   ✓ Fees: ${fee_result.fees:,.2f}  Total: ${fee_result.total:,.2f}")

    print("\n5. Generating forecast rows...")
    state = PlannerState()
    state.set_forecast_config(ForecastConfig(
        total_budget=100_000,
        periods=config_manager.get_default_periods(),
        flighting_pattern=FlightingPattern.FRONT_LOADED,
        fee_type=FeeType.HYBRID,
        fee_pct=0.10,
        fee_flat=200
    ))
    state.set_channel_mix([
        ChannelMixEntry('linear-tv', 50),
        ChannelMixEntry('ctv', 30),
        ChannelMixEntry('meta-reach', 20, cpm_override=4.5),
    ])

    controller = MediaPlanController()
    success, rows, message, _ = controller.generate_forecast(state)
    print(f"   ✓ {message} (success={success})")
    print(forecast_rows_to_dataframe(rows, include_derived=True).to_string(index=False))

    print("\n6. Evaluating pacing...")
    state.set_benchmarks([
        ChannelBenchmark('linear-tv', ObjectiveKPI.AWARENESS_CPM, fy_prior_performance=30,
                         historical_weight=0.5, plan_number=35, plan_weight=0.5, adjustment_weight=0),
    ])
    state.set_pacing_data([
        PacingData('linear-tv', 'Jan', 12_500, 357_142, 11_000, 330_000, 33),
        PacingData('linear-tv', 'Feb', 12_500, 357_142, 14_500, 390_000, 31),
        PacingData('ctv', 'Jan', 7_500, 197_368, 7_400, 190_000, 40),
    ])
    print(pacing_results_to_dataframe(controller.evaluate_pacing(state)).to_string(index=False))

    ytd = controller.ytd_pacing(state, channel_id='linear-tv')
    print(f"   ✓ Linear TV YTD spend pacing: {ytd.ytd_spend_pacing:.2%}")

    print("\n7. Rejected inputs...")
    state.update_channel_mix_entry('ctv', percentage=10)
    success, _, message, notification = controller.generate_forecast(state)
    print(f"   ✗ {notification['title']}: {message} (success={success})")
    stats = error_handler.get_error_statistics()
    print(f"   Errors recorded: {stats['total_errors']}, by category: {stats['category_breakdown']}")

    print("\n=== Demo completed successfully! ===")


if __name__ == "__main__":
    main()
