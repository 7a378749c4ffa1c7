"""
CSV Export

Functions for turning channel records into a table and
writing them to a CSV file.
"""

import logging
from typing import List

import pandas as pd

from channel_export.config import (
    CSV_COLUMNS,
    EMAIL_PLACEHOLDER,
    LANGUAGE_PLACEHOLDER,
    NO,
    TAG_SEPARATOR,
    YES,
)
from channel_export.errors import ExportError
from channel_export.models import ChannelRecord

logger = logging.getLogger(__name__)


def _to_row(record: ChannelRecord) -> List:
    return [
        record.title,
        record.url,
        record.subscriber_count,
        record.average_views_per_video,
        record.last_video_published_at,
        record.second_last_video_published_at,
        record.total_video_count,
        record.language if record.language is not None else LANGUAGE_PLACEHOLDER,
        TAG_SEPARATOR.join(record.tags),
        YES if record.is_child_friendly else NO,
        record.contact_email if record.contact_email is not None else EMAIL_PLACEHOLDER,
    ]


def records_to_dataframe(records: List[ChannelRecord]) -> pd.DataFrame:
    """
    Build the export table, one row per record, in record order.

    Args:
        records: Enriched channel records

    Returns:
        DataFrame with the localized CSV_COLUMNS
    """
    return pd.DataFrame([_to_row(r) for r in records], columns=CSV_COLUMNS)


def records_to_csv_bytes(records: List[ChannelRecord]) -> bytes:
    """Render records as UTF-8 CSV content, same format as write_channels_to_csv."""
    return records_to_dataframe(records).to_csv(index=False, lineterminator='\n').encode('utf-8')


def write_channels_to_csv(records: List[ChannelRecord], output_file: str) -> None:
    """
    Write channel records to a UTF-8 CSV file, replacing any existing file.

    Fields that contain a comma or a quote are quoted.

    Args:
        records: Enriched channel records
        output_file: Output CSV filename

    Raises:
        ExportError: When the file cannot be written
    """
    df = records_to_dataframe(records)

    try:
        df.to_csv(output_file, index=False, encoding='utf-8', lineterminator='\n')
    except OSError as e:
        raise ExportError(f"Error writing to {output_file}: {e}") from e

    logger.info(f"Results saved to {output_file}")
