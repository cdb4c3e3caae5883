"""
API routes for the YouTube Video Summarizer application.
"""

import re
from fastapi import APIRouter, Path, Query
from starlette.concurrency import run_in_threadpool

from tubesummary.api.schems import (
    VideoRequest,
    SummaryResponse,
    VideoInfoResponse,
    ThumbnailResponse,
)
from tubesummary.core.metadata import get_thumbnail_url
from tubesummary.core.url_validator import VIDEO_ID_PATTERN
from tubesummary.main import summarize_youtube_video, get_video_info
from tubesummary.models.schemas import ThumbnailQuality
from tubesummary.utils.error_handling import UserInputError
from tubesummary.utils.logger import logging

router = APIRouter(prefix="/api", tags=["youtube"])

_VIDEO_ID_RE = re.compile(f"^{VIDEO_ID_PATTERN}$")


@router.post("/summarize", response_model=SummaryResponse)
async def summarize_video(request: VideoRequest):
    """
    Summarize a YouTube video by URL.

    - Summarizes the captions when the video has usable subtitles
    - Otherwise builds a summary from the video title
    """
    logging.debug(f"Summarize request for: {request.video_url}")
    return await run_in_threadpool(summarize_youtube_video, request.video_url)


@router.post("/video-info", response_model=VideoInfoResponse)
async def video_info(request: VideoRequest):
    """Get title, channel and thumbnail of a video by URL."""
    return await run_in_threadpool(get_video_info, request.video_url)


@router.get("/thumbnail/{video_id}", response_model=ThumbnailResponse)
async def thumbnail(
    video_id: str = Path(..., description="YouTube video ID"),
    quality: str = Query(ThumbnailQuality.MAXRES.value, description="default, medium, high or maxres"),
):
    """Get the thumbnail URL of a video without calling YouTube."""
    if not _VIDEO_ID_RE.match(video_id):
        raise UserInputError("Invalid YouTube video ID")

    try:
        quality = ThumbnailQuality(quality)
    except ValueError:
        raise UserInputError(f"Unknown thumbnail quality: {quality}")

    return ThumbnailResponse(
        video_id=video_id,
        quality=quality.value,
        url=get_thumbnail_url(video_id, quality),
    )
