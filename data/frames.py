"""
Tabular hand-off between the planning core and the export layer.

Converts forecast rows and pacing results to pandas DataFrames, and
actuals tables back into PacingData records. No file I/O happens here.
"""

import logging
from typing import List, Sequence, Tuple

import pandas as pd

from models.data_models import ForecastRow, PacingData, PacingResult

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

FORECAST_COLUMNS = [
    'Period', 'Channel', 'Tactic', 'Buy_Type', 'Budget', 'CPM',
    'Universe', 'Fee_Pct', 'Fee_Flat'
]

# Column order of the exported forecast table once derived columns are added
FORECAST_EXPORT_COLUMNS = [
    'Period', 'Channel', 'Tactic', 'Buy_Type', 'Budget', 'CPM', 'Impressions',
    'Universe', 'TRPs', 'Fee_Pct', 'Fee_Flat', 'Fees', 'Total'
]

PACING_COLUMN_MAP = {
    'Channel_ID': 'channel_id',
    'Period': 'period',
    'Planned_Spend': 'planned_spend',
    'Planned_Impressions': 'planned_impressions',
    'Actual_Spend': 'actual_spend',
    'Actual_Impressions': 'actual_impressions',
    'Actual_Performance': 'actual_performance_metric',
}


def forecast_rows_to_dataframe(rows: Sequence[ForecastRow], include_derived: bool = False) -> pd.DataFrame:
    """
    Convert forecast rows to a DataFrame.

    Args:
        rows: Forecast rows
        include_derived: Add Impressions, TRPs, Fees and Total columns

    Returns:
        DataFrame with one row per forecast row
    """
    df = pd.DataFrame(
        [[row.period, row.channel, row.tactic, row.buy_type, row.budget,
          row.cpm, row.universe, row.fee_pct, row.fee_flat] for row in rows],
        columns=FORECAST_COLUMNS
    )

    if not include_derived:
        return df

    budget = df['Budget'].astype(float)
    cpm = df['CPM'].astype(float)
    universe = df['Universe'].astype(float)

    # Zero CPM or universe gives 0, matching the scalar conversions
    df['Impressions'] = (budget / cpm.where(cpm > 0) * 1000).fillna(0.0)
    df['TRPs'] = (df['Impressions'] / universe.where(universe > 0) * 100).fillna(0.0)
    df['Fees'] = budget * df['Fee_Pct'].astype(float) + df['Fee_Flat'].astype(float)
    df['Total'] = budget + df['Fees']

    return df[FORECAST_EXPORT_COLUMNS]


def pacing_data_from_dataframe(df: pd.DataFrame) -> List[PacingData]:
    """
    Read pacing snapshots from an actuals table.

    Numeric blanks are treated as 0.

    Raises:
        ValueError: If a required column is missing
    """
    missing = [column for column in PACING_COLUMN_MAP if column not in df.columns]
    if missing:
        raise ValueError(f"Pacing table is missing required columns: {', '.join(missing)}")

    records = []
    for _, row in df.iterrows():
        values = {}
        for column, attribute in PACING_COLUMN_MAP.items():
            value = row[column]
            if attribute in ('channel_id', 'period'):
                values[attribute] = '' if pd.isna(value) else str(value).strip()
            else:
                values[attribute] = 0.0 if pd.isna(value) else float(value)
        records.append(PacingData(**values))

    logger.info(f"Read {len(records)} pacing records")
    return records


def pacing_results_to_dataframe(results: Sequence[Tuple[PacingData, PacingResult]]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                'Channel_ID': data.channel_id,
                'Period': data.period,
                'Spend_Pacing': result.spend_pacing,
                'Impression_Pacing': result.impression_pacing,
                'Vs_Benchmark': result.performance_vs_benchmark,
                'Status': result.status.value,
            }
            for data, result in results
        ],
        columns=['Channel_ID', 'Period', 'Spend_Pacing', 'Impression_Pacing', 'Vs_Benchmark', 'Status']
    )
