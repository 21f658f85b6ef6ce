"""
Agency fee calculation for media spend.

Supports percentage, flat and hybrid fee structures, either on a single
spend figure or applied period by period.
"""

import logging
from typing import List, Sequence, Tuple, Union

from models.data_models import FeeResult, FeeStructure, FeeType

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class FeeCalculator:
    """Computes fees and grand totals for media spend."""

    def calculate_total_with_fees(self, media_spend: float, fee_structure: FeeStructure) -> FeeResult:
        """
        Apply a fee structure to media spend.

        Missing fee components count as 0; an unrecognized fee type
        produces no fees.

        Args:
            media_spend: Media spend the fee is charged on
            fee_structure: Fee terms

        Returns:
            FeeResult with spend, fees and total
        """
        fee_type = FeeType.from_value(fee_structure.type)
        percentage_fee = fee_structure.percentage_fee or 0
        flat_fee = fee_structure.flat_fee or 0

        if fee_type == FeeType.PERCENTAGE:
            fees = media_spend * percentage_fee
        elif fee_type == FeeType.FLAT:
            fees = flat_fee
        elif fee_type == FeeType.HYBRID:
            fees = media_spend * percentage_fee + flat_fee
        else:
            logger.warning(f"Unknown fee type {fee_structure.type!r}, no fees applied")
            fees = 0

        return FeeResult(media_spend=media_spend, fees=fees, total=media_spend + fees)

    def calculate_period_fees(self,
                              period_budgets: Sequence[float],
                              fee_structure: FeeStructure) -> List[FeeResult]:
        """
        Apply a fee structure to each period independently.

        Flat fees are charged in full every period; percentage fees are
        charged on each period's own budget.
        """
        return [self.calculate_total_with_fees(budget, fee_structure) for budget in period_budgets]

    def row_fee_components(self,
                           fee_type: Union[FeeType, str],
                           fee_pct: float,
                           fee_flat: float) -> Tuple[float, float]:
        """
        Split fee terms into the (percentage, flat) pair carried on a forecast row.

        Returns:
            Tuple of (fee percentage, flat fee) for one period row
        """
        resolved = FeeType.from_value(fee_type)
        row_pct = fee_pct if resolved in (FeeType.PERCENTAGE, FeeType.HYBRID) else 0.0
        row_flat = fee_flat if resolved in (FeeType.FLAT, FeeType.HYBRID) else 0.0
        return row_pct, row_flat


# Global fee calculator instance
fee_calculator = FeeCalculator()
calculate_total_with_fees = fee_calculator.calculate_total_with_fees
