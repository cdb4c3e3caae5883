"""
Configuration for pytest tests.
"""

import os
import tempfile
import pytest
from unittest.mock import MagicMock

# Must be set before tubesummary.config is imported
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="tubesummary-logs-"))

from tubesummary.models.schemas import MetadataResult, VideoMetadata  # noqa: E402
from tubesummary.core.metadata import fallback_metadata  # noqa: E402


@pytest.fixture(scope="session")
def test_video_id():
    """Return a test YouTube video ID."""
    return "dQw4w9WgXcQ"


@pytest.fixture(scope="session")
def test_video_url(test_video_id):
    """Return a test YouTube video URL."""
    return f"https://www.youtube.com/watch?v={test_video_id}"


@pytest.fixture
def video_metadata(test_video_id):
    """Fixture to create a VideoMetadata object."""
    return VideoMetadata(
        video_id=test_video_id,
        title="Cooking Pasta at Home",
        author="Test Channel",
        thumbnail_url=f"https://i.ytimg.com/vi/{test_video_id}/hqdefault.jpg",
    )


@pytest.fixture
def long_transcript():
    """Eight sentences, each longer than twenty characters."""
    sentences = [f"Sentence number {i} covers one idea" for i in range(1, 9)]
    return ". ".join(sentences) + "."


@pytest.fixture
def metadata_fetcher(video_metadata):
    """Metadata fetcher stub that always succeeds."""
    fetcher = MagicMock()
    fetcher.fetch.return_value = MetadataResult.success(video_metadata)
    return fetcher


@pytest.fixture
def failing_metadata_fetcher(test_video_id):
    """Metadata fetcher stub that reports an unreachable provider."""
    fetcher = MagicMock()
    fetcher.fetch.return_value = MetadataResult.failed(fallback_metadata(test_video_id))
    return fetcher


@pytest.fixture
def transcript_fetcher():
    """Transcript fetcher stub returning no captions."""
    fetcher = MagicMock()
    fetcher.fetch.return_value = ""
    return fetcher
