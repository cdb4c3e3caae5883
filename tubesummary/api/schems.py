from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional, List


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase JSON."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class VideoRequest(CamelModel):
    """Model for requesting video summarization."""
    video_url: Optional[str] = None


class SummaryResponse(CamelModel):
    """Model for summary responses."""
    short_summary: str
    key_points: List[str]
    summary_method: str
    video_title: str
    channel: str
    has_transcript: bool
    message: str
    video_id: str
    thumbnail: str


class VideoInfoResponse(CamelModel):
    """Model for video information responses."""
    video_id: str
    title: str
    channel_name: str
    thumbnail: str
    available: bool


class ThumbnailResponse(CamelModel):
    """Model for thumbnail URL responses."""
    video_id: str
    quality: str
    url: str
