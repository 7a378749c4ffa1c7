"""
Channel Search & Filter

Finds channel IDs for a keyword, optionally keeping only channels
with at least a minimum number of subscribers.
"""

import logging
import time
from typing import List, Optional

from channel_export.config import MAX_RESULTS_PER_PAGE, REQUEST_DELAY_SECONDS
from channel_export.youtube_api import YouTubeService

logger = logging.getLogger(__name__)


def search_channels(service: YouTubeService, keyword: str, min_subscribers: Optional[int] = None) -> List[str]:
    """
    Search YouTube for channels matching a keyword.

    Without a threshold a single page of up to MAX_RESULTS_PER_PAGE channels
    is returned as-is. With a threshold every result page is walked and
    only channels with subscriber_count >= min_subscribers are kept.

    Args:
        service: YouTubeService instance
        keyword: Search keyword
        min_subscribers: Inclusive subscriber threshold (optional)

    Returns:
        List of channel IDs in discovery order

    Raises:
        ValueError: If min_subscribers is negative
        RetrievalError: When any lookup fails
    """
    if min_subscribers is None:
        channel_ids, _ = service.search_channel_page(keyword, MAX_RESULTS_PER_PAGE)
        channel_ids = channel_ids[:MAX_RESULTS_PER_PAGE]
        logger.info(f"Found {len(channel_ids)} channels for keyword '{keyword}'")
        return channel_ids

    if min_subscribers < 0:
        raise ValueError("min_subscribers must be non-negative")

    return _search_filtered(service, keyword, min_subscribers)


def _search_filtered(service: YouTubeService, keyword: str, min_subscribers: int) -> List[str]:
    matching_ids = []
    next_page_token = None
    page = 0

    while True:
        candidates, next_page_token = service.search_channel_page(
            keyword, MAX_RESULTS_PER_PAGE, page_token=next_page_token
        )
        page += 1

        subscriber_counts = service.get_subscriber_counts(candidates)
        kept = [
            channel_id for channel_id in candidates
            if subscriber_counts.get(channel_id, -1) >= min_subscribers
        ]
        matching_ids.extend(kept)
        logger.debug(f"Page {page}: {len(kept)} of {len(candidates)} channels kept")

        if not next_page_token:
            break

        # Be respectful with API calls
        time.sleep(REQUEST_DELAY_SECONDS)

    logger.info(
        f"Found {len(matching_ids)} channels with at least {min_subscribers:,} "
        f"subscribers for keyword '{keyword}' across {page} pages"
    )
    return matching_ids
