"""
Shared fixtures for the channel export tests.

The YouTube API is never called: services are MagicMocks specced on
YouTubeService (see tests/helpers.py) fed with canned responses.
"""

from unittest.mock import patch

import pytest

from channel_export.models import ChannelRecord


@pytest.fixture(autouse=True)
def no_request_delay():
    """Skip the pause between search pages."""
    with patch('channel_export.search.REQUEST_DELAY_SECONDS', 0):
        yield


@pytest.fixture
def sample_records():
    return [
        ChannelRecord(
            title="Cooking Daily",
            url="https://www.youtube.com/channel/UC_one",
            subscriber_count=1500,
            average_views_per_video=3000,
            last_video_published_at="2024-05-02T10:00:00Z",
            second_last_video_published_at="2024-04-28T09:30:00Z",
            total_video_count=30,
            language="en",
            tags=("recipes", "pasta"),
            is_child_friendly=False,
        ),
        ChannelRecord(
            title="Кухня",
            url="https://www.youtube.com/channel/UC_two",
            subscriber_count=2000,
            average_views_per_video=0,
            last_video_published_at="No videos found",
            second_last_video_published_at="No second last video found",
            total_video_count=0,
            language="unknown",
            tags=("No tags available",),
            is_child_friendly=True,
        ),
    ]
