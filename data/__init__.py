# Data layer for the media planning core

from .catalog import MEDIA_CHANNELS, get_channel_by_id, get_channels_by_category, get_tactic
from .frames import forecast_rows_to_dataframe, pacing_data_from_dataframe, pacing_results_to_dataframe

__all__ = [
    'MEDIA_CHANNELS', 'get_channel_by_id', 'get_channels_by_category', 'get_tactic',
    'forecast_rows_to_dataframe', 'pacing_data_from_dataframe', 'pacing_results_to_dataframe'
]
