"""
Canned summaries used when a video has no usable transcript.

TITLE_TEMPLATES is checked top to bottom against the lower-cased title and
the first entry with a matching keyword wins. The last entry has no
keywords and matches every title.
"""

from dataclasses import dataclass
from typing import Tuple

from tubesummary.models.schemas import SummaryMethod


@dataclass(frozen=True)
class TitleTemplate:
    """Summary template for one category of video."""
    category: str
    keywords: Tuple[str, ...]
    summary: str
    key_points: Tuple[str, ...]
    method: SummaryMethod

    def matches(self, lower_title: str) -> bool:
        if not self.keywords:
            return True
        return any(keyword in lower_title for keyword in self.keywords)

    def render(self, title: str) -> str:
        return self.summary.format(title=title)


TITLE_TEMPLATES: Tuple[TitleTemplate, ...] = (
    TitleTemplate(
        category="speech",
        keywords=("speech", "talk", "interview"),
        summary=(
            'In this talk "{title}", the speaker likely shares insights, experiences, '
            "or perspectives on relevant topics. Such videos often feature personal "
            "stories, professional advice, or thought-provoking discussions that engage "
            "the audience."
        ),
        key_points=(
            "Features spoken content and presentations",
            "Includes personal stories or professional insights",
            "Contains motivational or educational messages",
            "May discuss life experiences or career advice",
            "Likely engages with audience questions or topics",
        ),
        method=SummaryMethod.SPEECH,
    ),
    TitleTemplate(
        category="tutorial",
        keywords=("tutorial", "how to", "guide", "learn"),
        summary=(
            'This tutorial "{title}" provides step-by-step guidance and practical '
            "instructions. Educational videos like this typically break down complex "
            "topics into understandable parts, offering viewers actionable knowledge "
            "and skills they can apply."
        ),
        key_points=(
            "Step-by-step instructional content",
            "Practical demonstrations and examples",
            "Educational explanations and guidance",
            "Tips, techniques, or best practices",
            "Problem-solving approaches and methods",
        ),
        method=SummaryMethod.TUTORIAL,
    ),
    TitleTemplate(
        category="music",
        keywords=("music", "song", "album", "lyric"),
        summary=(
            'This music content "{title}" features artistic audio performances or '
            "entertainment. Music videos typically showcase creative expression through "
            "sound and visuals, providing enjoyment and potentially cultural or emotional "
            "value to viewers."
        ),
        key_points=(
            "Audio and musical performances",
            "Creative artistic expression",
            "Entertainment and enjoyment focus",
            "Potential cultural or emotional themes",
            "Artistic visualization and sound design",
        ),
        method=SummaryMethod.MUSIC,
    ),
    TitleTemplate(
        category="news",
        keywords=("news", "update", "report", "breaking"),
        summary=(
            'This news content "{title}" covers current events, updates, or '
            "informational reporting. News videos typically provide factual information "
            "about recent happenings, offering viewers updates on important developments "
            "and situations."
        ),
        key_points=(
            "Current events and news coverage",
            "Factual reporting and information",
            "Recent developments and updates",
            "Analysis of current situations",
            "Informational and educational content",
        ),
        method=SummaryMethod.NEWS,
    ),
    TitleTemplate(
        category="review",
        keywords=("review", "analysis", "comparison"),
        summary=(
            'This review "{title}" provides evaluation and analysis of products, '
            "services, or topics. Review videos typically examine features, performance, "
            "and value, helping viewers make informed decisions through detailed "
            "assessment and comparison."
        ),
        key_points=(
            "Detailed evaluation and analysis",
            "Feature examination and testing",
            "Pros and cons assessment",
            "Comparative analysis when relevant",
            "Recommendations and conclusions",
        ),
        method=SummaryMethod.REVIEW,
    ),
    TitleTemplate(
        category="general",
        keywords=(),
        summary=(
            'This video "{title}" contains content related to its title. While specific '
            "details require watching the video, the title suggests it covers topics that "
            "viewers interested in this subject matter would find relevant and engaging. "
            "For more detailed automated summaries, videos with enabled subtitles work best."
        ),
        key_points=(
            "Content relates to the video title topic",
            "May include educational or entertainment value",
            "Relevant to viewers interested in this subject",
            "Enable subtitles for detailed automated analysis",
            "Watch video for complete content understanding",
        ),
        method=SummaryMethod.GENERAL,
    ),
)
