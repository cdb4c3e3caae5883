"""
Main entry point for the YouTube Video Summarizer application.
"""

import argparse
import json
import sys
import traceback
from typing import Optional

from dotenv import load_dotenv

from tubesummary.api.schems import SummaryResponse, VideoInfoResponse
from tubesummary.core.metadata import MetadataFetcher, get_thumbnail_url
from tubesummary.core.summarizer import generate_summary
from tubesummary.core.transcriber import TranscriptFetcher, has_transcript
from tubesummary.core.url_validator import parse_video_reference
from tubesummary.models.schemas import ThumbnailQuality
from tubesummary.utils.error_handling import (
    ProcessingError,
    SummarizerError,
    UpstreamUnavailableError,
    UserInputError,
)
from tubesummary.utils.logger import logging

TRANSCRIPT_MESSAGE = "Summary generated from video subtitles"
TITLE_MESSAGE = "Summary based on video title and content analysis"


def _require_video_id(url: Optional[str]) -> str:
    if url is None or not url.strip():
        raise UserInputError("Video URL is required")

    reference = parse_video_reference(url)
    if reference is None:
        raise UserInputError("Invalid YouTube URL")

    return reference.video_id


def _summarize(
    url: Optional[str],
    metadata_fetcher: Optional[MetadataFetcher],
    transcript_fetcher: Optional[TranscriptFetcher],
) -> SummaryResponse:
    # 1. Validate the URL and extract the video ID
    video_id = _require_video_id(url)
    logging.info(f"Processing video: {video_id}")

    # 2. Fetch metadata; without it there is nothing to summarize
    result = (metadata_fetcher or MetadataFetcher()).fetch(video_id)
    if not result.available:
        raise UpstreamUnavailableError()

    metadata = result.metadata
    logging.info(f"Video title: {metadata.title}")

    # 3. Fetch captions, best effort
    owns_fetcher = transcript_fetcher is None
    transcript_fetcher = transcript_fetcher or TranscriptFetcher()
    try:
        transcript_text = transcript_fetcher.fetch(video_id)
    finally:
        if owns_fetcher:
            transcript_fetcher.close()
    transcript_available = has_transcript(transcript_text)

    # 4. Generate the summary
    summary = generate_summary(transcript_text, metadata, transcript_available)
    logging.info(
        f"Summary generated for {video_id}: method={summary.summary_method.value}, "
        f"length={len(summary.short_summary)}, key_points={len(summary.key_points)}"
    )

    return SummaryResponse(
        short_summary=summary.short_summary,
        key_points=summary.key_points,
        summary_method=summary.summary_method.value,
        video_title=metadata.title,
        channel=metadata.author,
        has_transcript=transcript_available,
        message=TRANSCRIPT_MESSAGE if transcript_available else TITLE_MESSAGE,
        video_id=video_id,
        thumbnail=metadata.thumbnail_url,
    )


def summarize_youtube_video(
    url: Optional[str],
    metadata_fetcher: Optional[MetadataFetcher] = None,
    transcript_fetcher: Optional[TranscriptFetcher] = None,
) -> SummaryResponse:
    """
    Process a YouTube video: validate the URL, look up metadata and captions, and summarize.

    Args:
        url: YouTube video URL as submitted by the user
        metadata_fetcher: Optional metadata fetcher (defaults to the oEmbed lookup)
        transcript_fetcher: Optional transcript fetcher (defaults to published captions)

    Returns:
        SummaryResponse

    Raises:
        UserInputError: The URL is missing or not a YouTube video URL
        UpstreamUnavailableError: The video's metadata could not be fetched
        ProcessingError: Anything else went wrong
    """
    try:
        return _summarize(url, metadata_fetcher, transcript_fetcher)
    except SummarizerError:
        raise
    except Exception as e:
        logging.error(f"Summarization error: {str(e)}")
        logging.error(traceback.format_exc())
        raise ProcessingError() from e


def get_video_info(url: Optional[str], metadata_fetcher: Optional[MetadataFetcher] = None) -> VideoInfoResponse:
    """
    Look up basic information about a video for display.

    A failed lookup is not an error here: placeholder values are returned
    with ``available`` set to False.
    """
    video_id = _require_video_id(url)
    result = (metadata_fetcher or MetadataFetcher()).fetch(video_id)

    return VideoInfoResponse(
        video_id=video_id,
        title=result.metadata.title,
        channel_name=result.metadata.author if result.ok else "Unknown Channel",
        thumbnail=get_thumbnail_url(video_id, ThumbnailQuality.HIGH),
        available=result.available,
    )


def main():
    """Main function to run the application from command line."""
    parser = argparse.ArgumentParser(description="YouTube Video Summarizer")
    parser.add_argument("url", help="YouTube video URL")
    parser.add_argument("--json", action="store_true", help="Print the full response as JSON")

    args = parser.parse_args()

    # Load environment variables
    load_dotenv()

    try:
        summary = summarize_youtube_video(args.url)
    except SummarizerError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(json.dumps(summary.model_dump(by_alias=True), indent=2))
        return

    print("\n" + "=" * 80)
    print(f"Summary of '{summary.video_title}' by {summary.channel}")
    print("=" * 80)
    print(summary.short_summary)
    print()
    for point in summary.key_points:
        print(f"- {point}")
    print("=" * 80)
    print(f"{summary.message} ({summary.summary_method})")


if __name__ == "__main__":
    main()
