"""
Export Pipeline

High-level orchestration that ties together search, enrichment
and CSV export for one request.
"""

import logging
from typing import Callable, List, Optional

from channel_export.config import MAX_EXPORTED_CHANNELS, OUTPUT_FILE
from channel_export.enrichment import enrich_channel
from channel_export.export import write_channels_to_csv
from channel_export.models import ChannelRecord
from channel_export.search import search_channels
from channel_export.youtube_api import YouTubeService

logger = logging.getLogger(__name__)


def export_channels(
    service: YouTubeService,
    keyword: str,
    min_subscribers: Optional[int] = None,
    output_file: str = OUTPUT_FILE,
    on_progress: Optional[Callable[[str], None]] = None
) -> List[ChannelRecord]:
    """
    Execute full channel export pipeline.

    Channels are enriched one at a time in discovery order, so CSV rows
    follow search order. Nothing is written if any lookup fails.

    Args:
        service: YouTubeService instance
        keyword: Search keyword
        min_subscribers: Inclusive subscriber threshold (optional)
        output_file: Output CSV filename
        on_progress: Callback for progress updates (optional)

    Returns:
        List of exported channel records

    Raises:
        RetrievalError: When any API lookup fails
        ExportError: When the CSV file cannot be written
    """
    def progress(msg: str):
        if on_progress:
            on_progress(msg)

    # Step 1: Search for channels
    progress("Searching for channels...")
    channel_ids = search_channels(service, keyword, min_subscribers)
    logger.info(f"Found {len(channel_ids)} channels")
    progress(f"Found {len(channel_ids)} channels")

    # Step 2: Enrich channels
    records = []
    for channel_id in channel_ids[:MAX_EXPORTED_CHANNELS]:
        progress(f"Fetching statistics for {channel_id}...")
        record = enrich_channel(service, channel_id)
        if record is None:
            continue
        records.append(record)
        logger.info(f"Channel {channel_id} saved")

    # Step 3: Write CSV
    progress("Writing CSV...")
    write_channels_to_csv(records, output_file)
    progress(f"Saved {len(records)} channels to {output_file}")

    return records
