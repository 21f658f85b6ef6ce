"""
Forecast row assembly.

Expands a channel mix over flight periods into flat (channel, period) rows.
Rows carry raw inputs only; impressions, TRPs, fees and totals are derived
by the consumer so they stay consistent when budget or CPM is edited later.
"""

import logging
from typing import List, Optional, Sequence

from models.data_models import (
    ChannelMixEntry, ChannelPreviewRow, FeeStructure, FlightingConfig,
    ForecastConfig, ForecastRow, MediaChannel
)
from data.catalog import MEDIA_CHANNELS, get_channel_by_id, get_tactic
from config.settings import PREVIEW_MIX_TOLERANCE
from .budget_distributor import BudgetDistributor
from .channel_mix import MIX_SUM_ERROR, channel_share, validate_mix_percentages
from .fee_calculator import FeeCalculator
from .plan_validator import ValidationError
from .unit_conversions import forecast_impressions

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class ForecastRowBuilder:
    """
    Builds forecast rows from a forecast configuration and channel mix.

    Holds only read-only collaborators; every build call is independent.
    """

    def __init__(self,
                 channels: Optional[List[MediaChannel]] = None,
                 distributor: Optional[BudgetDistributor] = None,
                 fee_calculator: Optional[FeeCalculator] = None,
                 mix_tolerance: float = PREVIEW_MIX_TOLERANCE):
        """
        Initialize the builder.

        Args:
            channels: Channel catalog to resolve entries against
            distributor: Budget distributor for per-period flighting
            fee_calculator: Fee calculator for per-row fee terms
            mix_tolerance: Allowed distance of the mix total from 100
        """
        self.channels = channels if channels is not None else MEDIA_CHANNELS
        self.distributor = distributor or BudgetDistributor()
        self.fee_calculator = fee_calculator or FeeCalculator()
        self.mix_tolerance = mix_tolerance

    def build_rows(self, config: ForecastConfig, channel_mix: Sequence[ChannelMixEntry]) -> List[ForecastRow]:
        """
        Build one row per (channel, period).

        Args:
            config: Campaign forecast settings
            channel_mix: Channel entries; percentages must total 100 within
                the builder's mix tolerance

        Returns:
            Rows ordered by channel, then period. Each entry is flighted
            from its own clamped share, so repeated channel ids each keep
            their share.

        Raises:
            ValidationError: If the channel mix does not total 100%
        """
        self._check_mix(channel_mix)
        fee_pct, fee_flat = self.fee_calculator.row_fee_components(
            config.fee_type, config.fee_pct, config.fee_flat
        )

        rows = []
        for entry in channel_mix:
            channel = get_channel_by_id(entry.channel_id, self.channels)
            tactic = get_tactic(channel, entry.tactic_id)
            cpm = self._resolve_cpm(entry, channel)
            universe = channel.audience_universe if channel and channel.audience_universe else 0

            distribution = self.distributor.distribute_budget(FlightingConfig(
                pattern=config.flighting_pattern,
                total_budget=channel_share(config.total_budget, entry),
                periods=config.periods,
                seasonal_indices=config.seasonal_indices,
                custom_weights=config.custom_weights
            ))

            for period in range(config.periods):
                rows.append(ForecastRow(
                    period=period + 1,
                    channel=channel.name if channel else entry.channel_id,
                    tactic=tactic.name if tactic else '',
                    buy_type=tactic.buy_type.value if tactic else '',
                    budget=distribution[period] if period < len(distribution) else 0.0,
                    cpm=cpm,
                    universe=universe,
                    fee_pct=fee_pct,
                    fee_flat=fee_flat
                ))

        logger.info(f"Built {len(rows)} forecast rows for {len(channel_mix)} channels over {config.periods} periods")
        return rows

    def build_preview_rows(self,
                           config: ForecastConfig,
                           channel_mix: Sequence[ChannelMixEntry]) -> List[ChannelPreviewRow]:
        """
        Summarize each channel across all periods.

        Flat fees are charged once per period, so a channel's preview fee
        includes the flat fee times the period count.
        """
        self._check_mix(channel_mix)
        fee_pct, fee_flat = self.fee_calculator.row_fee_components(
            config.fee_type, config.fee_pct, config.fee_flat
        )
        fee_structure = FeeStructure(
            type=config.fee_type,
            percentage_fee=fee_pct,
            flat_fee=fee_flat * config.periods
        )

        preview = []
        for entry in channel_mix:
            channel = get_channel_by_id(entry.channel_id, self.channels)
            budget = channel_share(config.total_budget, entry)
            cpm = self._resolve_cpm(entry, channel)
            fee_result = self.fee_calculator.calculate_total_with_fees(budget, fee_structure)

            preview.append(ChannelPreviewRow(
                channel=channel.name if channel else entry.channel_id,
                budget=budget,
                impressions=forecast_impressions(budget, cpm),
                fees=fee_result.fees,
                total=fee_result.total
            ))

        return preview

    def _check_mix(self, channel_mix: Sequence[ChannelMixEntry]):
        total_pct, is_valid = validate_mix_percentages(channel_mix, self.mix_tolerance)
        if not is_valid:
            logger.error(f"Channel mix totals {total_pct:.2f}%, cannot build forecast")
            raise ValidationError(MIX_SUM_ERROR)

    def _resolve_cpm(self, entry: ChannelMixEntry, channel: Optional[MediaChannel]) -> float:
        """CPM override, else the tactic's platform CPM, else 0."""
        if entry.cpm_override is not None:
            return entry.cpm_override
        tactic = get_tactic(channel, entry.tactic_id)
        if tactic is not None and tactic.platform_cpm is not None:
            return tactic.platform_cpm
        return 0.0
