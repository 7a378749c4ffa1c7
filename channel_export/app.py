#!/usr/bin/env python3
"""
Channel Export - Streamlit Application
Find YouTube channels for a keyword and export them to CSV.

Installation:
    1. pip install -e .
    2. Create a .env file in the working directory with: YOUTUBE_API_KEY=your_api_key_here
    3. Get your API key from: https://console.cloud.google.com/
    4. Run: streamlit run channel_export/app.py
"""

import logging
from typing import List, Optional

import streamlit as st

from channel_export.config import OUTPUT_FILE, get_api_key
from channel_export.errors import ChannelExportError
from channel_export.export import records_to_csv_bytes, records_to_dataframe
from channel_export.models import ChannelRecord
from channel_export.pipeline import export_channels
from channel_export.youtube_api import YouTubeService

logger = logging.getLogger(__name__)


def get_service() -> Optional[YouTubeService]:
    """Get or create YouTubeService instance."""
    if 'service' not in st.session_state:
        api_key = get_api_key()
        if not api_key:
            return None
        st.session_state.service = YouTubeService(api_key)
    return st.session_state.service


def show_api_error():
    """Display API key error message."""
    st.error("YOUTUBE_API_KEY not found in environment. Please add it to .env file.")
    st.info("Get your API key from: https://console.cloud.google.com/")


def process_export(service: YouTubeService, keyword: str, min_subscribers: Optional[int]) -> List[ChannelRecord]:
    """Run the export with UI progress updates."""
    with st.status("Exporting...", expanded=True) as status:
        def on_progress(msg: str):
            st.write(msg)

        try:
            records = export_channels(
                service=service,
                keyword=keyword,
                min_subscribers=min_subscribers,
                output_file=OUTPUT_FILE,
                on_progress=on_progress,
            )
        except ChannelExportError as e:
            logger.exception("Error exporting channels")
            st.error(str(e))
            status.update(label="Export failed", state="error")
            return []

        if records:
            status.update(label=f"Exported {len(records)} channels", state="complete")
        else:
            status.update(label="No channels found", state="error")
        return records


def main():
    """Search form, result table and CSV download."""
    st.set_page_config(page_title="Channel Export", page_icon="📺", layout="wide")

    service = get_service()
    if service is None:
        show_api_error()
        return

    st.title("Channel Export")
    st.caption("Export YouTube channels for a keyword to CSV")

    keyword = st.text_input("Keyword:", placeholder="e.g., cooking, chess, woodworking")
    use_filter = st.checkbox("Filter by subscribers")
    min_subscribers = None
    if use_filter:
        min_subscribers = int(st.number_input("Minimum subscribers", min_value=0, value=1000, step=100))

    if not keyword:
        st.info("Enter a keyword above to find channels.")
        return

    if st.button("Export", type="primary"):
        st.session_state.records = process_export(service, keyword, min_subscribers)

    records = st.session_state.get('records')
    if records:
        st.dataframe(records_to_dataframe(records), hide_index=True)
        st.download_button(
            "Download CSV",
            data=records_to_csv_bytes(records),
            file_name=OUTPUT_FILE,
            mime="text/csv",
        )


if __name__ == '__main__':
    main()
