"""
Unit tests for the DataFrame hand-off helpers.
"""

import unittest

import pandas as pd
import pytest

from models.data_models import ForecastRow, PacingData, PacingResult, PacingStatus
from data.frames import (
    FORECAST_COLUMNS, FORECAST_EXPORT_COLUMNS, forecast_rows_to_dataframe,
    pacing_data_from_dataframe, pacing_results_to_dataframe
)


class TestForecastFrames(unittest.TestCase):
    """Test cases for forecast_rows_to_dataframe."""

    def setUp(self):
        """Set up test fixtures."""
        self.rows = [
            ForecastRow(1, 'Local Linear TV', 'TV Spot', 'trp', 7000, 35, 3_643_402, 0.10, 100),
            ForecastRow(1, 'YouTube Auction', 'In-Stream', 'cpv', 3000, 0, 0, 0.10, 100),
        ]

    def test_raw_columns(self):
        df = forecast_rows_to_dataframe(self.rows)
        self.assertEqual(list(df.columns), FORECAST_COLUMNS)
        self.assertEqual(df.loc[0, 'Budget'], 7000)
        self.assertEqual(df.loc[1, 'Buy_Type'], 'cpv')

    def test_derived_columns(self):
        df = forecast_rows_to_dataframe(self.rows, include_derived=True)
        self.assertEqual(list(df.columns), FORECAST_EXPORT_COLUMNS)

        self.assertAlmostEqual(df.loc[0, 'Impressions'], 200_000)
        self.assertAlmostEqual(df.loc[0, 'TRPs'], 200_000 / 3_643_402 * 100)
        self.assertAlmostEqual(df.loc[0, 'Fees'], 800)
        self.assertAlmostEqual(df.loc[0, 'Total'], 7800)

    def test_zero_cpm_and_universe_give_zero(self):
        df = forecast_rows_to_dataframe(self.rows, include_derived=True)
        self.assertEqual(df.loc[1, 'Impressions'], 0)
        self.assertEqual(df.loc[1, 'TRPs'], 0)

    def test_empty_rows(self):
        df = forecast_rows_to_dataframe([], include_derived=True)
        self.assertTrue(df.empty)
        self.assertEqual(list(df.columns), FORECAST_EXPORT_COLUMNS)


class TestPacingFrames(unittest.TestCase):
    """Test cases for pacing DataFrame conversions."""

    def test_read_pacing_records(self):
        df = pd.DataFrame({
            'Channel_ID': [' ctv ', 'olv'],
            'Period': ['Jan', 'Jan'],
            'Planned_Spend': [1000, 500],
            'Planned_Impressions': [25_000, 30_000],
            'Actual_Spend': [950, None],
            'Actual_Impressions': [24_000, 29_000],
            'Actual_Performance': [38.5, 0.7],
        })
        records = pacing_data_from_dataframe(df)

        self.assertEqual(records[0], PacingData('ctv', 'Jan', 1000, 25_000, 950, 24_000, 38.5))
        self.assertEqual(records[1].actual_spend, 0.0)

    def test_missing_columns(self):
        df = pd.DataFrame({'Channel_ID': ['ctv'], 'Period': ['Jan']})
        with self.assertRaises(ValueError) as ctx:
            pacing_data_from_dataframe(df)
        self.assertIn('Planned_Spend', str(ctx.exception))

    def test_results_frame(self):
        data = PacingData('ctv', 'Jan', 1000, 25_000, 950, 24_000, 38.5)
        result = PacingResult(0.95, 0.96, 0.01, PacingStatus.ON_TRACK)
        df = pacing_results_to_dataframe([(data, result)])

        self.assertEqual(df.loc[0, 'Status'], 'on-track')
        self.assertEqual(df.loc[0, 'Spend_Pacing'], pytest.approx(0.95))


if __name__ == '__main__':
    unittest.main()
