"""
HTTP API

FastAPI endpoints that run a channel export and report where the
CSV file was saved.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

from channel_export.config import OUTPUT_FILE, get_api_key
from channel_export.pipeline import export_channels
from channel_export.youtube_api import YouTubeService

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = f"Channels saved to {OUTPUT_FILE}"
FAILURE_MESSAGE = "Failed to process channels"


class KeywordRequest(BaseModel):
    keyword: str


class SubscriberFilterRequest(KeywordRequest):
    minSubscribers: int = Field(ge=0)


_service_cache: Optional[YouTubeService] = None


def get_service() -> YouTubeService:
    """Get YouTube API client (cached singleton)."""
    global _service_cache
    if _service_cache is None:
        api_key = get_api_key()
        if not api_key:
            raise HTTPException(status_code=500, detail="No YouTube API key configured")
        _service_cache = YouTubeService(api_key)
    return _service_cache


def process_channels(service: YouTubeService, keyword: str, min_subscribers: Optional[int]) -> PlainTextResponse:
    """Run the export and map any failure to a generic 500 response."""
    try:
        export_channels(service, keyword, min_subscribers, output_file=OUTPUT_FILE)
    except Exception:
        logger.exception("Error processing channels")
        return PlainTextResponse(FAILURE_MESSAGE, status_code=500)

    logger.info(f"File saved as {OUTPUT_FILE}")
    return PlainTextResponse(SUCCESS_MESSAGE)


router = APIRouter(prefix="/api/channels", tags=["channels"])


@router.post("/with-subscribers", response_class=PlainTextResponse)
def channels_with_subscribers(
    request: SubscriberFilterRequest,
    service: YouTubeService = Depends(get_service),
) -> PlainTextResponse:
    return process_channels(service, request.keyword, request.minSubscribers)


@router.post("/without-subscribers", response_class=PlainTextResponse)
def channels_without_subscribers(
    request: KeywordRequest,
    service: YouTubeService = Depends(get_service),
) -> PlainTextResponse:
    return process_channels(service, request.keyword, None)


app = FastAPI(title="YouTube Channel Export")
app.include_router(router)


@app.exception_handler(HTTPException)
def http_exception_handler(request: Request, exc: HTTPException) -> PlainTextResponse:
    if exc.status_code >= 500:
        logger.error(f"Request failed: {exc.detail}")
        return PlainTextResponse(FAILURE_MESSAGE, status_code=exc.status_code)
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code)
