"""
Video metadata lookup through the public oEmbed endpoint.
"""

from typing import Optional, Union

import requests

from tubesummary.config import config
from tubesummary.models.schemas import (
    FALLBACK_AUTHOR,
    FALLBACK_TITLE,
    MetadataResult,
    ThumbnailQuality,
    VideoMetadata,
)
from tubesummary.utils.logger import logging


def get_thumbnail_url(
    video_id: str,
    quality: Union[ThumbnailQuality, str] = ThumbnailQuality.MAXRES,
) -> str:
    """
    Get the thumbnail URL for a video without calling any API.

    Args:
        video_id: YouTube video ID
        quality: One of default, medium, high or maxres

    Returns:
        Image URL
    """
    tier = ThumbnailQuality(quality).tier
    return config.THUMBNAIL_URL.format(video_id=video_id, tier=tier)


def get_watch_url(video_id: str) -> str:
    """Canonical watch page URL for a video."""
    return config.WATCH_URL.format(video_id=video_id)


def fallback_metadata(video_id: str) -> VideoMetadata:
    """Placeholder metadata used when the provider cannot be reached."""
    return VideoMetadata(
        video_id=video_id,
        title=FALLBACK_TITLE,
        author=FALLBACK_AUTHOR,
        thumbnail_url=get_thumbnail_url(video_id, ThumbnailQuality.HIGH),
    )


class MetadataFetcher:
    """Class to handle metadata lookups against the oEmbed endpoint."""

    def __init__(self, timeout: Optional[float] = None, session: Optional[requests.Session] = None):
        """
        Initialize the fetcher.

        Args:
            timeout: Seconds before the lookup is abandoned
            session: Optional requests session to reuse connections
        """
        self.timeout = timeout if timeout is not None else config.REQUEST_TIMEOUT
        self.session = session

    def _get(self, url: str, **kwargs) -> requests.Response:
        if self.session is not None:
            return self.session.get(url, **kwargs)
        return requests.get(url, **kwargs)

    def fetch(self, video_id: str) -> MetadataResult:
        """
        Look up title, author and thumbnail of a video.

        Never raises: any failure is reported through ``MetadataResult.ok``
        with placeholder metadata attached.
        """
        try:
            response = self._get(
                config.OEMBED_URL,
                params={"url": get_watch_url(video_id), "format": "json"},
                headers={"User-Agent": config.USER_AGENT},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logging.info(f"Metadata fetch failed for {video_id}: {str(e)}")
            return MetadataResult.failed(fallback_metadata(video_id))

        if not response.ok:
            logging.info(f"Metadata provider returned {response.status_code} for {video_id}")
            return MetadataResult.failed(fallback_metadata(video_id))

        try:
            data = response.json()
        except ValueError as e:
            logging.info(f"Metadata response for {video_id} is not JSON: {str(e)}")
            return MetadataResult.failed(fallback_metadata(video_id))

        if not isinstance(data, dict) or not data.get("title"):
            logging.info(f"Metadata response for {video_id} has no title")
            return MetadataResult.failed(fallback_metadata(video_id))

        try:
            metadata = VideoMetadata(
                video_id=video_id,
                title=data["title"],
                author=data.get("author_name") or FALLBACK_AUTHOR,
                thumbnail_url=data.get("thumbnail_url") or get_thumbnail_url(video_id, ThumbnailQuality.HIGH),
            )
        except ValueError as e:
            logging.info(f"Unexpected metadata fields for {video_id}: {str(e)}")
            return MetadataResult.failed(fallback_metadata(video_id))

        logging.debug(f"Fetched metadata for {video_id}: {metadata.title}")

        return MetadataResult.success(metadata)


def fetch_metadata(video_id: str) -> VideoMetadata:
    """Fetch metadata, returning placeholder values when the lookup fails."""
    return MetadataFetcher().fetch(video_id).metadata
