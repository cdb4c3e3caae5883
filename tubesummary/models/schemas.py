"""
Data models for the YouTube summarizer application.
"""
from enum import Enum
from typing import Optional, List
from pydantic import BaseModel, Field, field_validator

FALLBACK_TITLE = "YouTube Video"
FALLBACK_AUTHOR = "Unknown"


class ThumbnailQuality(str, Enum):
    """Thumbnail sizes published for every video."""
    DEFAULT = "default"
    MEDIUM = "medium"
    HIGH = "high"
    MAXRES = "maxres"

    @property
    def tier(self) -> str:
        """Image name used in the thumbnail path."""
        return {
            ThumbnailQuality.DEFAULT: "default",
            ThumbnailQuality.MEDIUM: "mqdefault",
            ThumbnailQuality.HIGH: "hqdefault",
            ThumbnailQuality.MAXRES: "maxresdefault",
        }[self]


class SummaryMethod(str, Enum):
    """Which heuristic branch produced a summary."""
    TRANSCRIPT = "transcript-analysis"
    SPEECH = "title-analysis-speech"
    TUTORIAL = "title-analysis-tutorial"
    MUSIC = "title-analysis-music"
    NEWS = "title-analysis-news"
    REVIEW = "title-analysis-review"
    GENERAL = "title-analysis-general"


class VideoReference(BaseModel):
    """A video id together with the URL it was taken from."""
    video_id: str
    source_url: str

    @field_validator('video_id')
    def validate_video_id(cls, v):
        if len(v) != 11 or not all(c.isascii() and (c.isalnum() or c in "_-") for c in v):
            raise ValueError('video_id must be 11 characters of [A-Za-z0-9_-]')
        return v


class VideoMetadata(BaseModel):
    """Video information returned by the metadata provider."""
    video_id: str = ""
    title: str
    author: str
    thumbnail_url: str
    duration: Optional[str] = None

    @property
    def is_fallback(self) -> bool:
        """True when the title is the placeholder used for failed lookups."""
        return not self.title or self.title == FALLBACK_TITLE


class MetadataResult(BaseModel):
    """Outcome of a metadata lookup; ``metadata`` is always populated."""
    ok: bool
    metadata: VideoMetadata

    @classmethod
    def success(cls, metadata: VideoMetadata) -> "MetadataResult":
        return cls(ok=True, metadata=metadata)

    @classmethod
    def failed(cls, metadata: VideoMetadata) -> "MetadataResult":
        return cls(ok=False, metadata=metadata)

    @property
    def available(self) -> bool:
        return self.ok and not self.metadata.is_fallback


class TranscriptSegment(BaseModel):
    """A timed unit of caption text."""
    text: str
    start: float = 0.0
    duration: float = 0.0


class SummaryResult(BaseModel):
    """Generated summary of a single video."""
    short_summary: str
    key_points: List[str] = Field(default_factory=list)
    summary_method: SummaryMethod

    model_config = {"frozen": True}
