"""
Channel mix allocation.

Turns a total budget and a set of percentage entries into per-channel spend,
applying optional minimum and maximum spend clamps.
"""

import logging
from dataclasses import replace
from typing import Dict, List, Sequence, Tuple

from models.data_models import ChannelMixEntry
from config.settings import CHANNEL_MIX_TOLERANCE
from .plan_validator import ValidationError

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

MIX_SUM_ERROR = "Channel mix percentages must sum to 100%"


def validate_mix_percentages(entries: Sequence[ChannelMixEntry],
                             tolerance: float = CHANNEL_MIX_TOLERANCE) -> Tuple[float, bool]:
    """
    Check that percentages sum to 100.

    Returns:
        Tuple of (percentage total, whether it is within tolerance)
    """
    total_pct = sum(entry.percentage for entry in entries)
    return total_pct, abs(total_pct - 100) <= tolerance


def allocate_channel_mix(total_budget: float, entries: Sequence[ChannelMixEntry]) -> Dict[str, float]:
    """
    Allocate a budget across channels.

    The minimum clamp is applied before the maximum clamp, so when
    min_spend > max_spend the allocation ends up at max_spend.
    Duplicate channel ids overwrite earlier entries.

    Args:
        total_budget: Budget to allocate
        entries: Channel percentage entries

    Returns:
        Mapping of channel id to allocated amount

    Raises:
        ValidationError: If percentages do not sum to 100
    """
    total_pct, is_valid = validate_mix_percentages(entries)
    if not is_valid:
        logger.error(f"Channel mix totals {total_pct:.2f}%, cannot allocate")
        raise ValidationError(MIX_SUM_ERROR)

    allocations = {}
    for entry in entries:
        allocations[entry.channel_id] = channel_share(total_budget, entry)

    return allocations


def channel_share(total_budget: float, entry: ChannelMixEntry) -> float:
    """Budget share of a single entry, min clamp first, then max clamp."""
    allocation = (entry.percentage / 100) * total_budget
    if entry.min_spend is not None:
        allocation = max(allocation, entry.min_spend)
    if entry.max_spend is not None:
        allocation = min(allocation, entry.max_spend)
    return allocation


def auto_balance_mix(entries: Sequence[ChannelMixEntry]) -> List[ChannelMixEntry]:
    """
    Reset a mix to an even split.

    Each share is rounded to 2 decimals and the rounding remainder goes to
    the first entry so the mix totals 100.
    """
    if not entries:
        return []

    even = round(100 / len(entries), 2)
    balanced = [replace(entry, percentage=even) for entry in entries]

    remainder = round(100 - even * len(entries), 2)
    balanced[0] = replace(balanced[0], percentage=balanced[0].percentage + remainder)
    return balanced

