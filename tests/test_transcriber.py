"""
Tests for the transcript fetcher module.
"""

import pytest
import requests
from types import SimpleNamespace
from unittest.mock import patch, MagicMock

from youtube_transcript_api import NoTranscriptFound, TranscriptsDisabled

from tubesummary.core.transcriber import (
    TimeoutSession,
    TranscriptFetcher,
    fetch_transcript,
    has_transcript,
)
from tubesummary.models.schemas import TranscriptSegment


def snippet(text, start=0.0, duration=1.0):
    return SimpleNamespace(text=text, start=start, duration=duration)


@pytest.fixture
def mock_transcript_api():
    """Fixture to mock the YouTubeTranscriptApi class."""
    with patch('tubesummary.core.transcriber.YouTubeTranscriptApi') as mock_api_class:
        mock_api = mock_api_class.return_value

        transcript = MagicMock()
        transcript.language_code = "en"
        transcript.fetch.return_value = [
            snippet("hello there", 0.0, 1.5),
            snippet("general kenobi", 1.5, 2.0),
            snippet("you are a bold one", 3.5, 2.5),
        ]

        transcript_list = MagicMock()
        transcript_list.find_transcript.return_value = transcript
        mock_api.list.return_value = transcript_list

        yield mock_api


def test_has_transcript_threshold():
    assert not has_transcript("")
    assert not has_transcript(None)
    assert not has_transcript("x" * 100)
    assert has_transcript("x" * 101)


def test_fetch_joins_segments_in_order(mock_transcript_api, test_video_id):
    fetcher = TranscriptFetcher(languages=["en"])

    text = fetcher.fetch(test_video_id)

    assert text == "hello there general kenobi you are a bold one"
    mock_transcript_api.list.assert_called_once_with(test_video_id)
    mock_transcript_api.list.return_value.find_transcript.assert_called_once_with(["en"])


def test_fetch_segments(mock_transcript_api, test_video_id):
    segments = TranscriptFetcher().fetch_segments(test_video_id)

    assert segments == [
        TranscriptSegment(text="hello there", start=0.0, duration=1.5),
        TranscriptSegment(text="general kenobi", start=1.5, duration=2.0),
        TranscriptSegment(text="you are a bold one", start=3.5, duration=2.5),
    ]


def test_falls_back_to_any_language(mock_transcript_api, test_video_id):
    """Without a preferred-language track the first listed track is used."""
    transcript_list = mock_transcript_api.list.return_value
    transcript_list.find_transcript.side_effect = NoTranscriptFound(test_video_id, ["en"], MagicMock())

    german = MagicMock()
    german.language_code = "de"
    german.fetch.return_value = [snippet("guten tag"), snippet("zusammen")]
    transcript_list.__iter__.return_value = iter([german])

    assert TranscriptFetcher(languages=["en"]).fetch(test_video_id) == "guten tag zusammen"


def test_no_tracks_at_all_returns_empty(mock_transcript_api, test_video_id):
    transcript_list = mock_transcript_api.list.return_value
    transcript_list.find_transcript.side_effect = NoTranscriptFound(test_video_id, ["en"], MagicMock())
    transcript_list.__iter__.return_value = iter([])

    assert TranscriptFetcher().fetch(test_video_id) == ""


def test_empty_track_returns_empty(mock_transcript_api, test_video_id):
    mock_transcript_api.list.return_value.find_transcript.return_value.fetch.return_value = []

    assert TranscriptFetcher().fetch(test_video_id) == ""


@pytest.mark.parametrize("error", [
    TranscriptsDisabled("dQw4w9WgXcQ"),
    requests.Timeout("timed out"),
    requests.ConnectionError("connection refused"),
    RuntimeError("unexpected"),
])
def test_failures_return_empty(mock_transcript_api, error, test_video_id):
    """Missing captions are a normal outcome, never an exception."""
    mock_transcript_api.list.side_effect = error

    assert TranscriptFetcher().fetch(test_video_id) == ""


def test_fetch_transcript_function(mock_transcript_api, test_video_id):
    assert fetch_transcript(test_video_id) == "hello there general kenobi you are a bold one"


def test_api_is_built_with_timeout_session():
    with patch('tubesummary.core.transcriber.YouTubeTranscriptApi') as mock_api_class:
        TranscriptFetcher(timeout=2.5)

    _, kwargs = mock_api_class.call_args
    assert isinstance(kwargs["http_client"], TimeoutSession)
    assert kwargs["http_client"].timeout == 2.5


def test_timeout_session_applies_default_timeout():
    with patch('requests.Session.request') as mock_request:
        TimeoutSession(3).request("GET", "https://www.youtube.com/watch?v=dQw4w9WgXcQ")

    mock_request.assert_called_once_with("GET", "https://www.youtube.com/watch?v=dQw4w9WgXcQ", timeout=3)


def test_timeout_session_keeps_explicit_timeout():
    with patch('requests.Session.request') as mock_request:
        TimeoutSession(3).request("GET", "https://example.com", timeout=10)

    mock_request.assert_called_once_with("GET", "https://example.com", timeout=10)


def test_close_releases_session():
    with patch('tubesummary.core.transcriber.YouTubeTranscriptApi'):
        fetcher = TranscriptFetcher()

    with patch.object(fetcher.session, 'close') as mock_close:
        fetcher.close()

    mock_close.assert_called_once_with()
