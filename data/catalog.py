"""
Static channel and tactic catalog.

The catalog is read-only reference data; lookups never mutate it.
"""

from typing import List, Optional

from models.data_models import (
    BuyType, ChannelCategory, MediaChannel, ObjectiveKPI, Tactic
)


MEDIA_CHANNELS: List[MediaChannel] = [
    # Video
    MediaChannel(
        channel_id='linear-tv',
        name='Local Linear TV',
        category=ChannelCategory.VIDEO,
        objective_kpi=ObjectiveKPI.AWARENESS_CPM,
        audience_universe=3_643_402,
        tactics=[
            Tactic('linear-tv-spot', 'TV Spot', BuyType.TRP, [':15s', ':30s', ':60s'], platform_cpm=35),
        ],
    ),
    MediaChannel(
        channel_id='ctv',
        name='CTV (Hallux)',
        category=ChannelCategory.VIDEO,
        objective_kpi=ObjectiveKPI.AWARENESS_CPM,
        tactics=[
            Tactic('ctv-preroll', 'CTV Pre-Roll', BuyType.CPM, [':15s', ':30s'], platform_cpm=38),
        ],
    ),
    MediaChannel(
        channel_id='olv',
        name='OLV (Hallux)',
        category=ChannelCategory.VIDEO,
        objective_kpi=ObjectiveKPI.ENGAGEMENT_VCR,
        tactics=[
            Tactic('olv-preroll', 'OLV Pre-Roll', BuyType.CPM, [':15s', ':30s'], platform_cpm=15),
        ],
    ),
    MediaChannel(
        channel_id='youtube-reservation',
        name='YouTube Reservation',
        category=ChannelCategory.VIDEO,
        objective_kpi=ObjectiveKPI.ENGAGEMENT_VCR,
        tactics=[
            Tactic('yt-res-trueview', 'TrueView', BuyType.CPV, [':15s', ':30s']),
        ],
    ),
    MediaChannel(
        channel_id='youtube-auction',
        name='YouTube Auction',
        category=ChannelCategory.VIDEO,
        objective_kpi=ObjectiveKPI.ENGAGEMENT_VCR,
        tactics=[
            Tactic('yt-auc-instream', 'In-Stream', BuyType.CPV, [':15s', ':30s']),
        ],
    ),

    # Digital
    MediaChannel(
        channel_id='display-premium',
        name='Display (Premium)',
        category=ChannelCategory.DIGITAL,
        objective_kpi=ObjectiveKPI.AWARENESS_CPM,
        tactics=[
            Tactic('display-prem-standard', 'Standard Display', BuyType.CPM,
                   ['300x250', '728x90', '160x600'], platform_cpm=5),
        ],
    ),
    MediaChannel(
        channel_id='display-standard',
        name='Display (Standard)',
        category=ChannelCategory.DIGITAL,
        objective_kpi=ObjectiveKPI.AWARENESS_CPM,
        tactics=[
            Tactic('display-std-programmatic', 'Programmatic Display', BuyType.CPM,
                   ['300x250', '728x90'], platform_cpm=3),
        ],
    ),
    MediaChannel(
        channel_id='native-premium',
        name='Native (Premium)',
        category=ChannelCategory.DIGITAL,
        objective_kpi=ObjectiveKPI.TRAFFIC_CP_SITE_VISIT,
        tactics=[
            Tactic('native-prem-content', 'Sponsored Content', BuyType.CPC, ['In-Feed'], platform_cpm=8),
        ],
    ),
    MediaChannel(
        channel_id='native-standard',
        name='Native (Standard)',
        category=ChannelCategory.DIGITAL,
        objective_kpi=ObjectiveKPI.TRAFFIC_CP_SITE_VISIT,
        tactics=[
            Tactic('native-std-content', 'Native Content', BuyType.CPC, ['In-Feed'], platform_cpm=6),
        ],
    ),

    # Social
    MediaChannel(
        channel_id='meta-reach',
        name='Meta Reach',
        category=ChannelCategory.SOCIAL,
        objective_kpi=ObjectiveKPI.AWARENESS_CPM,
        tactics=[
            Tactic('meta-reach-feed', 'Feed', BuyType.CPM, ['Single Image', 'Carousel', 'Video'], platform_cpm=3),
        ],
    ),
    MediaChannel(
        channel_id='meta-video',
        name='Meta Video Views',
        category=ChannelCategory.SOCIAL,
        objective_kpi=ObjectiveKPI.ENGAGEMENT_CP_THRU_PLAY,
        tactics=[
            Tactic('meta-video-feed', 'Video Feed', BuyType.CPV, ['Video', 'Reels'], platform_cpm=5),
        ],
    ),
    MediaChannel(
        channel_id='meta-traffic',
        name='Meta Traffic',
        category=ChannelCategory.SOCIAL,
        objective_kpi=ObjectiveKPI.TRAFFIC_CPC,
        tactics=[
            Tactic('meta-traffic-feed', 'Traffic Feed', BuyType.CPC, ['Single Image', 'Carousel'], platform_cpm=7),
        ],
    ),
]


def get_channel_by_id(channel_id: str,
                      channels: Optional[List[MediaChannel]] = None) -> Optional[MediaChannel]:
    """Find a channel by id, or None if it is not in the catalog."""
    for channel in channels if channels is not None else MEDIA_CHANNELS:
        if channel.channel_id == channel_id:
            return channel
    return None


def get_channels_by_category(category: ChannelCategory,
                             channels: Optional[List[MediaChannel]] = None) -> List[MediaChannel]:
    return [ch for ch in (channels if channels is not None else MEDIA_CHANNELS) if ch.category == category]


def get_tactic(channel: Optional[MediaChannel], tactic_id: Optional[str] = None) -> Optional[Tactic]:
    """
    Resolve a tactic on a channel.

    Falls back to the channel's first tactic when tactic_id is missing or
    unknown; returns None for an unknown channel or one with no tactics.
    """
    if channel is None or not channel.tactics:
        return None
    if tactic_id is not None:
        for tactic in channel.tactics:
            if tactic.tactic_id == tactic_id:
                return tactic
    return channel.tactics[0]
