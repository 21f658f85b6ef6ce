"""
Configuration management for the media planning core.
Holds numeric tolerances, pacing bounds, and environment-driven defaults.
"""

import os
import logging
from typing import Optional
from dataclasses import dataclass

from dotenv import load_dotenv


# Percentages in a channel mix must total 100 within this tolerance
CHANNEL_MIX_TOLERANCE = 0.01

# Relative tolerance for distribution sums and budget/impression round trips
DISTRIBUTION_TOLERANCE = 1e-6

# Looser tolerance used when checking a mix before building a forecast
PREVIEW_MIX_TOLERANCE = 0.5

# Benchmark weights expected to total 1.0 within this tolerance
WEIGHT_SUM_TOLERANCE = 0.01

# Spend pacing inside [lower, upper] is on track (bounds inclusive)
PACING_LOWER_BOUND = 0.95
PACING_UPPER_BOUND = 1.05

# Share of budget placed in the heavy half for front/back-loaded flighting
HEAVY_HALF_SHARE = 0.6


@dataclass
class AppConfig:
    """Application configuration settings."""
    default_currency: str = "USD"
    default_periods: int = 4
    default_flighting_pattern: str = "even"
    log_level: str = "INFO"


class ConfigManager:
    """Manages application configuration and settings."""

    def __init__(self, env_file: Optional[str] = None):
        self._config: Optional[AppConfig] = None
        self._env_file = env_file

    def load_config(self) -> AppConfig:
        """Load configuration from an optional .env file and the environment."""
        if self._config is not None:
            return self._config

        load_dotenv(self._env_file)

        self._config = AppConfig(
            default_currency=self._get_setting("DEFAULT_CURRENCY", "USD"),
            default_periods=self._get_int_setting("DEFAULT_PERIODS", 4),
            default_flighting_pattern=self._get_setting("DEFAULT_FLIGHTING_PATTERN", "even"),
            log_level=self._get_setting("LOG_LEVEL", "INFO").upper()
        )

        if self._config.default_periods < 1:
            raise ValueError(
                f"DEFAULT_PERIODS must be at least 1, got {self._config.default_periods}"
            )

        return self._config

    def reset(self):
        """Drop the cached configuration so the next load re-reads the environment."""
        self._config = None

    def _get_setting(self, key: str, default: str) -> str:
        """Get string setting with default value."""
        value = os.getenv(key)
        return value if value is not None else default

    def _get_int_setting(self, key: str, default: int) -> int:
        """Get integer setting with default value."""
        value = os.getenv(key)
        if value is not None:
            try:
                return int(value)
            except ValueError:
                pass
        return default

    def get_log_level(self) -> int:
        """Get the configured logging level as a logging constant."""
        config = self.load_config()
        return getattr(logging, config.log_level, logging.INFO)

    def get_default_periods(self) -> int:
        """Get the default number of flight periods."""
        config = self.load_config()
        return config.default_periods


# Global configuration manager instance
config_manager = ConfigManager()
