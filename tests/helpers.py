"""Builders for mocked YouTubeService instances and API payloads."""

from unittest.mock import MagicMock

from channel_export.youtube_api import YouTubeService


def make_search_service(pages, subscriber_counts):
    """
    Build a mocked service for channel search.

    Args:
        pages: List of (channel_ids, next_page_token) tuples, returned in order
        subscriber_counts: Dict mapping channel_id to subscriber count
    """
    service = MagicMock(spec=YouTubeService)
    service.search_channel_page.side_effect = list(pages)
    service.get_subscriber_counts.side_effect = lambda ids: {
        channel_id: subscriber_counts[channel_id] for channel_id in ids if channel_id in subscriber_counts
    }
    return service


def make_channel(title="Cooking Daily", subscribers=1500, views=90000, videos=30, language="en"):
    snippet = {'title': title}
    if language is not None:
        snippet['defaultLanguage'] = language
    return {
        'id': 'UC_cooking',
        'snippet': snippet,
        'statistics': {
            'subscriberCount': str(subscribers),
            'viewCount': str(views),
            'videoCount': str(videos),
        },
    }


def make_video(video_id, published_at):
    return {'id': {'videoId': video_id}, 'snippet': {'publishedAt': published_at}}


def make_enrichment_service(channel=None, videos=(), tags=None, status=None):
    """Build a mocked service for channel enrichment."""
    service = MagicMock(spec=YouTubeService)
    service.get_channel_details.return_value = channel
    service.search_latest_videos.side_effect = lambda channel_id, max_results: list(videos)[:max_results]
    service.get_video_tags.return_value = tags
    service.get_channel_status.return_value = status
    return service
