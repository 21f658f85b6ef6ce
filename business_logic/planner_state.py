"""
Caller-owned planner state.

Holds the forecast configuration, channel mix, benchmarks and pacing
snapshots a session works with. The calculation modules never read it
directly; orchestration code passes it in explicitly.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Any, List, Optional

from models.data_models import ChannelBenchmark, ChannelMixEntry, ForecastConfig, PacingData

logger = logging.getLogger(__name__)


@dataclass
class PlannerState:
    """Mutable session state for one planning workspace."""
    forecast_config: Optional[ForecastConfig] = None
    channel_mix: List[ChannelMixEntry] = field(default_factory=list)
    benchmarks: List[ChannelBenchmark] = field(default_factory=list)
    pacing_data: List[PacingData] = field(default_factory=list)

    def set_forecast_config(self, config: ForecastConfig):
        self.forecast_config = config

    def set_channel_mix(self, channel_mix: List[ChannelMixEntry]):
        """Replace the entire channel mix."""
        self.channel_mix = list(channel_mix)

    def add_channel_to_mix(self, entry: ChannelMixEntry) -> bool:
        """
        Add a channel to the mix.

        Returns:
            False if the channel was already present (the mix is unchanged)
        """
        if any(existing.channel_id == entry.channel_id for existing in self.channel_mix):
            logger.info(f"Channel {entry.channel_id} already in mix")
            return False
        self.channel_mix = self.channel_mix + [entry]
        return True

    def remove_channel_from_mix(self, channel_id: str):
        self.channel_mix = [entry for entry in self.channel_mix if entry.channel_id != channel_id]

    def update_channel_mix_entry(self, channel_id: str, **updates: Any):
        """Apply field updates to the entry with a matching channel id."""
        self.channel_mix = [
            replace(entry, **updates) if entry.channel_id == channel_id else entry
            for entry in self.channel_mix
        ]

    def set_benchmarks(self, benchmarks: List[ChannelBenchmark]):
        self.benchmarks = list(benchmarks)

    def set_pacing_data(self, pacing_data: List[PacingData]):
        self.pacing_data = list(pacing_data)
