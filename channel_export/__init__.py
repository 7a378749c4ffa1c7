"""
YouTube Channel Export

Finds YouTube channels for a keyword, enriches them with channel
statistics and exports the result to CSV.

Usage:
    from channel_export import YouTubeService, export_channels

    service = YouTubeService(api_key)
    records = export_channels(
        service=service,
        keyword="cooking",
        min_subscribers=1000,
    )
"""

# Configuration
from channel_export.config import (
    CSV_COLUMNS,
    LATEST_VIDEOS_LIMIT,
    MAX_EXPORTED_CHANNELS,
    MAX_RESULTS_PER_PAGE,
    OUTPUT_FILE,
    get_api_key,
)

# Errors and data model
from channel_export.errors import ChannelExportError, ExportError, RetrievalError
from channel_export.models import ChannelRecord

# YouTube API client
from channel_export.youtube_api import YouTubeService

# Search, enrichment and export
from channel_export.search import search_channels
from channel_export.metrics import calculate_average_views
from channel_export.enrichment import (
    enrich_channel,
    get_channel_language,
    get_last_video_date,
    get_latest_video_tags,
    get_second_last_video_date,
    is_channel_child_friendly,
)
from channel_export.export import records_to_csv_bytes, records_to_dataframe, write_channels_to_csv

# Pipeline
from channel_export.pipeline import export_channels

__all__ = [
    # Config
    "CSV_COLUMNS",
    "LATEST_VIDEOS_LIMIT",
    "MAX_EXPORTED_CHANNELS",
    "MAX_RESULTS_PER_PAGE",
    "OUTPUT_FILE",
    "get_api_key",
    # Errors and model
    "ChannelExportError",
    "ExportError",
    "RetrievalError",
    "ChannelRecord",
    # API
    "YouTubeService",
    # Search
    "search_channels",
    # Metrics
    "calculate_average_views",
    # Enrichment
    "enrich_channel",
    "get_channel_language",
    "get_last_video_date",
    "get_latest_video_tags",
    "get_second_last_video_date",
    "is_channel_child_friendly",
    # Export
    "records_to_csv_bytes",
    "records_to_dataframe",
    "write_channels_to_csv",
    # Pipeline
    "export_channels",
]
