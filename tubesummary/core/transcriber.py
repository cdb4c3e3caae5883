"""
Module for fetching published captions of YouTube videos.

Most videos have no accessible captions; that is a normal outcome and is
reported as an empty transcript rather than an error.
"""

from typing import List, Optional

import requests
from youtube_transcript_api import NoTranscriptFound, YouTubeTranscriptApi

from tubesummary.config import config
from tubesummary.models.schemas import TranscriptSegment
from tubesummary.utils.logger import logging


class TimeoutSession(requests.Session):
    """requests session that applies a default timeout to every call."""

    def __init__(self, timeout: float):
        super().__init__()
        self.timeout = timeout

    def request(self, method, url, **kwargs):
        kwargs.setdefault("timeout", self.timeout)
        return super().request(method, url, **kwargs)


def has_transcript(transcript_text: str) -> bool:
    """A transcript only counts when it is longer than the minimum length."""
    return len(transcript_text or "") > config.MIN_TRANSCRIPT_LENGTH


class TranscriptFetcher:
    """Class to handle transcript retrieval operations."""

    def __init__(self, languages: Optional[List[str]] = None, timeout: Optional[float] = None):
        """
        Initialize the fetcher.

        Args:
            languages: Preferred caption languages, most preferred first
            timeout: Seconds before a caption request is abandoned
        """
        self.languages = languages or config.TRANSCRIPT_LANGUAGES
        self.timeout = timeout if timeout is not None else config.REQUEST_TIMEOUT
        self.session = TimeoutSession(self.timeout)
        self.api = YouTubeTranscriptApi(http_client=self.session)

    def close(self):
        """Release the pooled connections of the caption session."""
        self.session.close()

    def _select_transcript(self, video_id: str):
        """Pick a caption track in a preferred language, else the first listed one."""
        transcript_list = self.api.list(video_id)
        try:
            return transcript_list.find_transcript(self.languages)
        except NoTranscriptFound:
            logging.info(f"No {','.join(self.languages)} captions for {video_id}, trying any language")

        for transcript in transcript_list:
            logging.info(f"Using {transcript.language_code} captions for {video_id}")
            return transcript

        return None

    def fetch_segments(self, video_id: str) -> List[TranscriptSegment]:
        """
        Fetch the timed caption segments of a video in their original order.

        Raises whatever the caption backend raises; use ``fetch`` for the
        best-effort variant.
        """
        transcript = self._select_transcript(video_id)
        if transcript is None:
            return []
        return [
            TranscriptSegment(text=snippet.text, start=snippet.start, duration=snippet.duration)
            for snippet in transcript.fetch()
        ]

    def fetch(self, video_id: str) -> str:
        """
        Fetch the plain-text transcript of a video.

        Returns:
            Segment texts joined by single spaces, or "" if the video has no
            usable captions or the lookup fails for any reason.
        """
        try:
            segments = self.fetch_segments(video_id)
        except Exception as e:
            logging.info(f"No accessible captions for {video_id}: {type(e).__name__}")
            return ""

        if not segments:
            logging.info(f"Caption track for {video_id} is empty")
            return ""

        transcript_text = " ".join(segment.text for segment in segments)
        logging.info(f"Captions found for {video_id}, length: {len(transcript_text)}")
        return transcript_text


def fetch_transcript(video_id: str) -> str:
    """Fetch a transcript with the default settings; "" when none is available."""
    return TranscriptFetcher().fetch(video_id)
