"""
Core data models for the media planning core.

All records are immutable value objects; the calculation modules never keep
state between calls.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union


class FlightingPattern(Enum):
    """Time-shape of spend across flight periods."""
    EVEN = "even"
    FRONT_LOADED = "front-loaded"
    BACK_LOADED = "back-loaded"
    SEASONAL = "seasonal"
    CUSTOM = "custom"

    @classmethod
    def from_value(cls, value: Union["FlightingPattern", str, None]) -> Optional["FlightingPattern"]:
        """Resolve an enum member or its string value; unknown values give None."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


class FeeType(Enum):
    """Agency fee structure types."""
    PERCENTAGE = "percentage"
    FLAT = "flat"
    HYBRID = "hybrid"

    @classmethod
    def from_value(cls, value: Union["FeeType", str, None]) -> Optional["FeeType"]:
        """Resolve an enum member or its string value; unknown values give None."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


class FeeAppliesTo(Enum):
    """What a fee is charged against (descriptive only)."""
    MEDIA = "media"
    PRODUCTION = "production"
    ALL = "all"


class PacingStatus(Enum):
    """Pacing classification of a campaign period."""
    ON_TRACK = "on-track"
    UNDER_PACING = "under-pacing"
    OVER_PACING = "over-pacing"


class BuyType(Enum):
    """How a tactic is bought."""
    CPM = "cpm"
    CPC = "cpc"
    CPV = "cpv"
    CPA = "cpa"
    FLAT = "flat"
    TRP = "trp"


class ChannelCategory(Enum):
    """Media channel categories."""
    VIDEO = "video"
    DIGITAL = "digital"
    SOCIAL = "social"
    AUDIO = "audio"
    OOH = "ooh"


class ObjectiveKPI(Enum):
    """Objective and KPI a channel is judged on."""
    AWARENESS_CPM = "Awareness-CPM"
    AWARENESS_CPV = "Awareness-CPV"
    ENGAGEMENT_VCR = "Engagement-VCR"
    ENGAGEMENT_CP_THRU_PLAY = "Engagement-CP Thru-Play"
    TRAFFIC_CP_SITE_VISIT = "Traffic-CP Site Visit"
    TRAFFIC_CPC = "Traffic-CPC"
    CONVERSION_CPA = "Conversion-CPA"


@dataclass(frozen=True)
class Tactic:
    """A buyable tactic within a channel."""
    tactic_id: str
    name: str
    buy_type: BuyType
    ad_units: List[str] = field(default_factory=list)
    platform_cpm: Optional[float] = None


@dataclass(frozen=True)
class MediaChannel:
    """Catalog entry for a media channel."""
    channel_id: str
    name: str
    category: ChannelCategory
    objective_kpi: ObjectiveKPI
    tactics: List[Tactic]
    audience_universe: Optional[float] = None


@dataclass(frozen=True)
class FlightingConfig:
    """Inputs for spreading a budget across flight periods."""
    pattern: Union[FlightingPattern, str]
    total_budget: float
    periods: int
    seasonal_indices: Optional[List[float]] = None
    custom_weights: Optional[List[float]] = None


@dataclass(frozen=True)
class ChannelMixEntry:
    """One channel's share of a plan's budget."""
    channel_id: str
    percentage: float
    min_spend: Optional[float] = None
    max_spend: Optional[float] = None
    tactic_id: Optional[str] = None
    cpm_override: Optional[float] = None


@dataclass(frozen=True)
class FeeStructure:
    """Agency fee terms."""
    type: Union[FeeType, str]
    percentage_fee: Optional[float] = None
    flat_fee: Optional[float] = None
    applies_to: FeeAppliesTo = FeeAppliesTo.MEDIA


@dataclass(frozen=True)
class FeeResult:
    """Media spend with fees applied."""
    media_spend: float
    fees: float
    total: float


@dataclass(frozen=True)
class ChannelBenchmark:
    """Inputs for a channel's weighted (LC) benchmark."""
    channel_id: str
    objective_kpi: ObjectiveKPI
    fy_prior_performance: float
    historical_weight: float
    plan_number: float
    plan_weight: float
    adjustment_weight: float
    actual_adjustment: Optional[float] = None
    fy_prior_benchmark: Optional[float] = None


@dataclass(frozen=True)
class PacingData:
    """Planned versus actual snapshot for one channel and period."""
    channel_id: str
    period: str
    planned_spend: float
    planned_impressions: float
    actual_spend: float
    actual_impressions: float
    actual_performance_metric: float


@dataclass(frozen=True)
class PacingResult:
    """Pacing ratios and status for one snapshot."""
    spend_pacing: float
    impression_pacing: float
    performance_vs_benchmark: float
    status: PacingStatus


@dataclass(frozen=True)
class YTDPacingResult:
    """Aggregated year-to-date pacing."""
    ytd_planned_spend: float
    ytd_planned_impressions: float
    ytd_actual_spend: float
    ytd_actual_impressions: float
    ytd_spend_pacing: float
    ytd_impression_pacing: float


@dataclass(frozen=True)
class ForecastRow:
    """One (channel, period) row of a forecast, before derived metrics."""
    period: int
    channel: str
    tactic: str
    buy_type: str
    budget: float
    cpm: float
    universe: float
    fee_pct: float
    fee_flat: float


@dataclass(frozen=True)
class ChannelPreviewRow:
    """Per-channel forecast summary aggregated across all periods."""
    channel: str
    budget: float
    impressions: float
    fees: float
    total: float


@dataclass(frozen=True)
class ForecastConfig:
    """Campaign-level forecast settings."""
    total_budget: float = 0.0
    periods: int = 4
    flighting_pattern: Union[FlightingPattern, str] = FlightingPattern.EVEN
    seasonal_indices: List[float] = field(default_factory=lambda: [1.0, 1.0, 1.0, 1.0])
    custom_weights: List[float] = field(default_factory=lambda: [1.0, 1.0, 1.0, 1.0])
    fee_type: Union[FeeType, str] = FeeType.PERCENTAGE
    fee_pct: float = 0.0
    fee_flat: float = 0.0
