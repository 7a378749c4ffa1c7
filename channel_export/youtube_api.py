"""
YouTube API Client

Service class for interacting with the YouTube Data API v3.
Handles channel search, channel details, status and video lookups.
"""

import logging
from typing import Dict, List, Optional, Tuple

import httplib2
from googleapiclient.discovery import build
from googleapiclient.errors import Error as GoogleApiClientError

from channel_export.errors import RetrievalError

logger = logging.getLogger(__name__)


class YouTubeService:
    """Service class for interacting with YouTube Data API v3."""

    def __init__(self, api_key: str):
        """
        Initialize YouTube API client.

        Args:
            api_key: YouTube Data API v3 key

        Raises:
            ValueError: If api_key is empty or None
        """
        if not api_key:
            raise ValueError("API key is required")

        self._youtube = build('youtube', 'v3', developerKey=api_key)
        logger.info("YouTube service initialized successfully")

    @staticmethod
    def _execute(request, description: str) -> Dict:
        """Execute an API request, turning client failures into RetrievalError."""
        try:
            return request.execute()
        except (GoogleApiClientError, httplib2.HttpLib2Error, OSError) as e:
            raise RetrievalError(f"Error {description}: {e}") from e

    def search_channel_page(self, keyword: str, max_results: int,
                            page_token: Optional[str] = None) -> Tuple[List[str], Optional[str]]:
        """
        Fetch one page of channels matching a keyword.

        Args:
            keyword: Search keyword
            max_results: Max channels for this page
            page_token: Continuation token from the previous page (optional)

        Returns:
            Tuple of (channel IDs in API order, next page token or None)

        Raises:
            RetrievalError: When the search request fails
        """
        request = self._youtube.search().list(
            q=keyword,
            part='snippet',
            type='channel',
            fields='nextPageToken,items(id/channelId)',
            maxResults=max_results,
            pageToken=page_token,
        )
        response = self._execute(request, f"searching channels for '{keyword}'")

        channel_ids = [
            item['id']['channelId']
            for item in response.get('items', [])
            if item.get('id', {}).get('channelId')
        ]
        return channel_ids, response.get('nextPageToken')

    def get_subscriber_counts(self, channel_ids: List[str]) -> Dict[str, int]:
        """
        Fetch subscriber counts for a batch of channels in one request.

        Args:
            channel_ids: List of channel IDs

        Returns:
            Dict mapping channel_id to subscriber count (0 when hidden)
        """
        if not channel_ids:
            return {}

        request = self._youtube.channels().list(
            part='statistics',
            id=','.join(channel_ids),
            fields='items(id,statistics/subscriberCount)',
        )
        response = self._execute(request, "fetching subscriber counts")

        return {
            item['id']: int(item.get('statistics', {}).get('subscriberCount', 0))
            for item in response.get('items', [])
        }

    def get_channel_details(self, channel_id: str) -> Optional[Dict]:
        """
        Fetch snippet, content details and statistics for one channel.

        Returns:
            The channel resource dict, or None when the channel does not exist
        """
        request = self._youtube.channels().list(
            part='snippet,contentDetails,statistics',
            id=channel_id,
        )
        response = self._execute(request, f"fetching channel {channel_id}")

        items = response.get('items', [])
        return items[0] if items else None

    def get_channel_status(self, channel_id: str) -> Optional[Dict]:
        """Fetch the status part of a channel, or None when it does not exist."""
        request = self._youtube.channels().list(part='status', id=channel_id)
        response = self._execute(request, f"fetching status of channel {channel_id}")

        items = response.get('items', [])
        return items[0].get('status', {}) if items else None

    def search_latest_videos(self, channel_id: str, max_results: int) -> List[Dict]:
        """
        Fetch a channel's most recent uploads, newest first.

        Args:
            channel_id: Channel ID
            max_results: Maximum number of videos to fetch

        Returns:
            List of search result dicts (id and snippet)
        """
        request = self._youtube.search().list(
            part='snippet',
            channelId=channel_id,
            order='date',
            type='video',
            maxResults=max_results,
        )
        response = self._execute(request, f"fetching latest videos of {channel_id}")
        return response.get('items', [])

    def get_video_tags(self, video_id: str) -> Optional[List[str]]:
        """
        Fetch the tag list of a video.

        Returns:
            List of tags, or None when the video is missing or has no tags
        """
        request = self._youtube.videos().list(part='snippet', id=video_id)
        response = self._execute(request, f"fetching video {video_id}")

        items = response.get('items', [])
        if not items:
            return None
        return items[0].get('snippet', {}).get('tags') or None
