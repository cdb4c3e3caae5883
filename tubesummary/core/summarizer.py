"""
Module for generating rule-based video summaries.

A transcript longer than the minimum length is summarized from its own
sentences; anything else falls back to a canned summary picked from the
video title.
"""

from typing import List, Union

from tubesummary.config import config
from tubesummary.core.templates import TITLE_TEMPLATES, TitleTemplate
from tubesummary.models.schemas import SummaryMethod, SummaryResult, VideoMetadata
from tubesummary.utils.helpers import clip_text, split_sentences, truncate_text


def extract_sentences(transcript_text: str) -> List[str]:
    """
    Pull the leading sentences out of a transcript.

    Args:
        transcript_text: Full transcript text

    Returns:
        Up to MAX_SENTENCES stripped sentences longer than MIN_SENTENCE_LENGTH,
        in transcript order
    """
    sentences = [
        fragment.strip()
        for fragment in split_sentences(transcript_text)
        if len(fragment.strip()) > config.MIN_SENTENCE_LENGTH
    ]
    return sentences[:config.MAX_SENTENCES]


def summarize_transcript(transcript_text: str, title: str) -> SummaryResult:
    """
    Summarize a transcript from its first sentences.

    Args:
        transcript_text: Full transcript text
        title: Video title quoted in the summary

    Returns:
        SummaryResult tagged transcript-analysis
    """
    sentences = extract_sentences(transcript_text)

    short_summary = f'This video "{title}" discusses: ' + " ".join(sentences[:2])

    key_points = [
        f"{index}. {clip_text(sentence, config.MAX_KEY_POINT_LENGTH)}"
        for index, sentence in enumerate(sentences[:config.MAX_KEY_POINTS], start=1)
    ]

    return SummaryResult(
        short_summary=truncate_text(short_summary, config.MAX_SUMMARY_LENGTH),
        key_points=key_points,
        summary_method=SummaryMethod.TRANSCRIPT,
    )


def classify_title(title: str) -> TitleTemplate:
    """Return the first template whose keywords appear in the title."""
    lower_title = title.lower()
    for template in TITLE_TEMPLATES:
        if template.matches(lower_title):
            return template

    # Unreachable while the table ends with the keyword-less general entry
    return TITLE_TEMPLATES[-1]


def summarize_title(title: str) -> SummaryResult:
    """Build a canned summary for a video that only has a title."""
    template = classify_title(title)
    return SummaryResult(
        short_summary=truncate_text(template.render(title), config.MAX_SUMMARY_LENGTH),
        key_points=list(template.key_points),
        summary_method=template.method,
    )


def generate_summary(
    transcript_text: str,
    video: Union[VideoMetadata, str],
    has_transcript: bool,
) -> SummaryResult:
    """
    Generate a summary for a video.

    Args:
        transcript_text: Transcript text, possibly empty
        video: Video metadata or just its title
        has_transcript: Whether the transcript was judged usable

    Returns:
        SummaryResult from the transcript when it is usable, else from the title
    """
    title = video.title if isinstance(video, VideoMetadata) else video
    transcript_text = transcript_text or ""

    if has_transcript and len(transcript_text) > config.MIN_TRANSCRIPT_LENGTH:
        return summarize_transcript(transcript_text, title)

    return summarize_title(title)
