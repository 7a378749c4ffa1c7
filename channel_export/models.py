"""Data model for one exported channel row."""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class ChannelRecord:
    """
    One enriched channel, built fresh from live API responses.

    Attributes:
        title: Channel title
        url: Public channel URL
        subscriber_count: Subscriber count (0 when hidden)
        average_views_per_video: Total views divided by total videos
        last_video_published_at: ISO-8601 date of the latest upload, or a sentinel
        second_last_video_published_at: ISO-8601 date of the upload before it, or a sentinel
        total_video_count: Number of public videos
        language: Channel default language, or "unknown"
        tags: Tags of the latest upload, never empty
        is_child_friendly: Whether the channel is marked as made for kids
        contact_email: Contact email, not collected yet
    """
    title: str
    url: str
    subscriber_count: int
    average_views_per_video: int
    last_video_published_at: str
    second_last_video_published_at: str
    total_video_count: int
    language: str
    tags: Tuple[str, ...]
    is_child_friendly: bool = False
    contact_email: Optional[str] = None
