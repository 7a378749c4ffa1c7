"""
Configuration and Constants

Central configuration for the channel export service.
All tunable values, sentinel texts and CSV column names are defined here.
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

# ============================================================================
# GLOBAL CONFIGURATION
# ============================================================================

MAX_RESULTS_PER_PAGE = 8  # Channels requested per search page
LATEST_VIDEOS_LIMIT = 2  # Most recent uploads looked up per channel
MAX_EXPORTED_CHANNELS = 8  # Channels enriched and written per export
REQUEST_DELAY_SECONDS = 0.1  # Pause between search pages
OUTPUT_FILE = "youtube_channels.csv"
CHANNEL_URL_BASE = "https://www.youtube.com/channel/"
API_KEY_ENV_VAR = "YOUTUBE_API_KEY"

# ============================================================================
# SENTINELS
# ============================================================================

NO_LAST_VIDEO = "No videos found"
NO_SECOND_LAST_VIDEO = "No second last video found"
UNKNOWN_LANGUAGE = "unknown"
NO_TAGS = "No tags available"

# ============================================================================
# CSV FORMAT
# ============================================================================

CSV_COLUMNS = [
    "Название",
    "Ссылка",
    "Подписчики",
    "Просмотры",
    "Дата последнего видео",
    "Дата предпоследнего видео",
    "Всего видео",
    "Язык",
    "Теги",
    "Детский контент",
    "Почта",
]
TAG_SEPARATOR = ";"
LANGUAGE_PLACEHOLDER = "Не указан"
EMAIL_PLACEHOLDER = "Не указано"
YES = "Да"
NO = "Нет"

# ============================================================================
# LOGGING SETUP
# ============================================================================

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def get_api_key() -> Optional[str]:
    """Read the YouTube API key from the environment (and .env file, if any)."""
    load_dotenv()
    return os.getenv(API_KEY_ENV_VAR) or None
