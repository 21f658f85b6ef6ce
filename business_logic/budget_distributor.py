"""
Budget flighting across campaign periods.

This module spreads a total budget over a number of periods according to a
flighting pattern: even, front-loaded, back-loaded, seasonal or custom weights.
"""

import logging
import math
from typing import List, Optional, Sequence

from models.data_models import FlightingConfig, FlightingPattern
from config.settings import HEAVY_HALF_SHARE

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class BudgetDistributor:
    """
    Distributes a budget across flight periods.

    Output always sums to the total budget (within floating-point tolerance).
    Degenerate inputs fall back to an even split rather than raising.
    """

    def __init__(self, heavy_half_share: float = HEAVY_HALF_SHARE):
        """
        Initialize the distributor.

        Args:
            heavy_half_share: Share of budget placed in the heavier half for
                front-loaded and back-loaded patterns
        """
        self.heavy_half_share = heavy_half_share

    def distribute_budget(self, config: FlightingConfig) -> List[float]:
        """
        Distribute the configured budget across periods.

        Args:
            config: Flighting pattern, budget, period count and weights

        Returns:
            Ordered list of per-period budgets
        """
        periods = config.periods
        total_budget = config.total_budget

        if periods < 1:
            logger.warning(f"Cannot distribute budget over {periods} periods")
            return []

        pattern = FlightingPattern.from_value(config.pattern)

        if pattern == FlightingPattern.EVEN:
            return self._distribute_even(total_budget, periods)
        elif pattern == FlightingPattern.FRONT_LOADED:
            return self._distribute_halves(total_budget, periods, self.heavy_half_share)
        elif pattern == FlightingPattern.BACK_LOADED:
            return self._distribute_halves(total_budget, periods, 1 - self.heavy_half_share)
        elif pattern == FlightingPattern.SEASONAL:
            return self._distribute_weighted(total_budget, periods, config.seasonal_indices, "seasonal indices")
        elif pattern == FlightingPattern.CUSTOM:
            return self._distribute_weighted(total_budget, periods, config.custom_weights, "custom weights")
        else:  # Unrecognized pattern
            logger.warning(f"Unknown flighting pattern {config.pattern!r}, using even distribution")
            return self._distribute_even(total_budget, periods)

    def _distribute_even(self, total_budget: float, periods: int) -> List[float]:
        return [total_budget / periods] * periods

    def _distribute_halves(self, total_budget: float, periods: int, first_half_share: float) -> List[float]:
        """
        Split periods into a first half of ceil(periods/2) and the remainder,
        each half sharing its portion of the budget evenly.

        Args:
            total_budget: Budget to distribute
            periods: Number of periods
            first_half_share: Portion of the budget given to the first half

        Returns:
            List of per-period budgets
        """
        # A single period has no second half; it takes the whole budget
        if periods == 1:
            logger.warning("Single-period flight: placing entire budget in one period")
            return [total_budget]

        first_half = math.ceil(periods / 2)
        second_half = periods - first_half

        first_amount = (total_budget * first_half_share) / first_half
        second_amount = (total_budget * (1 - first_half_share)) / second_half

        return [first_amount] * first_half + [second_amount] * second_half

    def _distribute_weighted(self,
                             total_budget: float,
                             periods: int,
                             weights: Optional[Sequence[float]],
                             label: str) -> List[float]:
        """
        Distribute proportionally to relative weights.

        The result has one entry per weight, which may differ from the
        period count; keeping the two in sync is the caller's job.
        """
        if not weights:
            logger.info(f"No {label} provided, using even distribution")
            return self._distribute_even(total_budget, periods)

        total_weight = sum(weights)
        if total_weight == 0:
            logger.warning(f"All {label} are zero, using even distribution")
            return self._distribute_even(total_budget, periods)

        if len(weights) != periods:
            logger.warning(f"{len(weights)} {label} supplied for {periods} periods")

        return [(weight / total_weight) * total_budget for weight in weights]


# Global distributor instance
budget_distributor = BudgetDistributor()
distribute_budget = budget_distributor.distribute_budget
