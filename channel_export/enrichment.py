"""
Channel Enrichment

Builds a ChannelRecord for a channel ID from a fixed set of API lookups.
Missing data is replaced by sentinel values; API failures propagate.
"""

import logging
from typing import List, Optional

from channel_export.config import (
    CHANNEL_URL_BASE,
    LATEST_VIDEOS_LIMIT,
    NO_LAST_VIDEO,
    NO_SECOND_LAST_VIDEO,
    NO_TAGS,
    UNKNOWN_LANGUAGE,
)
from channel_export.metrics import calculate_average_views
from channel_export.models import ChannelRecord
from channel_export.youtube_api import YouTubeService

logger = logging.getLogger(__name__)


def _published_at(item: dict) -> str:
    return item.get('snippet', {}).get('publishedAt', '')


def get_last_video_date(service: YouTubeService, channel_id: str) -> str:
    """Publish date of the channel's latest upload, or NO_LAST_VIDEO."""
    videos = service.search_latest_videos(channel_id, 1)
    if not videos:
        return NO_LAST_VIDEO
    return _published_at(videos[0])


def get_second_last_video_date(service: YouTubeService, channel_id: str) -> str:
    """Publish date of the upload before the latest one, or NO_SECOND_LAST_VIDEO."""
    videos = service.search_latest_videos(channel_id, LATEST_VIDEOS_LIMIT)
    if len(videos) < 2:
        return NO_SECOND_LAST_VIDEO
    return _published_at(videos[1])


def get_channel_language(service: YouTubeService, channel_id: str) -> str:
    """Default language of the channel, or UNKNOWN_LANGUAGE."""
    channel = service.get_channel_details(channel_id)
    if channel is None:
        return UNKNOWN_LANGUAGE
    return channel.get('snippet', {}).get('defaultLanguage') or UNKNOWN_LANGUAGE


def get_latest_video_tags(service: YouTubeService, channel_id: str) -> List[str]:
    """
    Tags of the channel's latest upload.

    Returns:
        List of tags, or [NO_TAGS] when there is no video or it has no tags
    """
    videos = service.search_latest_videos(channel_id, 1)
    if not videos:
        return [NO_TAGS]

    video_id = videos[0].get('id', {}).get('videoId')
    if not video_id:
        return [NO_TAGS]

    return service.get_video_tags(video_id) or [NO_TAGS]


def is_channel_child_friendly(service: YouTubeService, channel_id: str) -> bool:
    """True only when the channel is explicitly marked as made for kids."""
    status = service.get_channel_status(channel_id)
    if not status:
        return False
    return status.get('madeForKids') is True


def enrich_channel(service: YouTubeService, channel_id: str) -> Optional[ChannelRecord]:
    """
    Collect everything exported for one channel.

    Args:
        service: YouTubeService instance
        channel_id: Channel ID

    Returns:
        ChannelRecord, or None when the channel does not exist

    Raises:
        RetrievalError: When any lookup fails
    """
    channel = service.get_channel_details(channel_id)
    if channel is None:
        logger.warning(f"Channel {channel_id} not found")
        return None

    statistics = channel.get('statistics', {})
    total_views = int(statistics.get('viewCount', 0))
    video_count = int(statistics.get('videoCount', 0))

    return ChannelRecord(
        title=channel.get('snippet', {}).get('title', ''),
        url=CHANNEL_URL_BASE + channel_id,
        subscriber_count=int(statistics.get('subscriberCount', 0)),
        average_views_per_video=calculate_average_views(total_views, video_count),
        last_video_published_at=get_last_video_date(service, channel_id),
        second_last_video_published_at=get_second_last_video_date(service, channel_id),
        total_video_count=video_count,
        language=get_channel_language(service, channel_id),
        tags=tuple(get_latest_video_tags(service, channel_id)),
        is_child_friendly=is_channel_child_friendly(service, channel_id),
        contact_email=None,
    )
