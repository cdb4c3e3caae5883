"""
YouTube URL validation and video ID extraction.

Validation and extraction share one pattern table, so a URL that
validates always yields the same 11 character token.
"""

import re
from typing import Optional

from tubesummary.models.schemas import VideoReference

VIDEO_ID_PATTERN = r"([A-Za-z0-9_-]{11})"

_PREFIX = r"^(?i:https?://)?(?i:www\.)?"

# Only the scheme and host are case-insensitive; the id stays ASCII
YOUTUBE_URL_PATTERNS = [
    re.compile(_PREFIX + r"(?i:youtube\.com)/watch\?v=" + VIDEO_ID_PATTERN, re.ASCII),
    re.compile(_PREFIX + r"(?i:youtube\.com)/embed/" + VIDEO_ID_PATTERN, re.ASCII),
    re.compile(_PREFIX + r"(?i:youtube\.com)/v/" + VIDEO_ID_PATTERN, re.ASCII),
    re.compile(r"^(?i:https?://)?(?i:youtu\.be)/" + VIDEO_ID_PATTERN, re.ASCII),
    re.compile(_PREFIX + r"(?i:youtube\.com)/shorts/" + VIDEO_ID_PATTERN, re.ASCII),
]


def _match(url) -> Optional[re.Match]:
    if not url or not isinstance(url, str):
        return None

    candidate = url.strip()
    for pattern in YOUTUBE_URL_PATTERNS:
        match = pattern.match(candidate)
        if match:
            return match

    return None


def is_valid_youtube_url(url: str) -> bool:
    """Check whether a string is one of the recognised YouTube video URLs."""
    return _match(url) is not None


def extract_video_id(url: str) -> Optional[str]:
    """Extract the video ID from a YouTube URL."""
    match = _match(url)
    if match:
        return match.group(1)

    return None


def parse_video_reference(url: str) -> Optional[VideoReference]:
    """Build a VideoReference from user input, or None when it is not a video URL."""
    video_id = extract_video_id(url)
    if video_id is None:
        return None
    return VideoReference(video_id=video_id, source_url=url.strip())
