"""
Helper utility functions for the YouTube video summarization application.
"""

import re
from typing import List


def truncate_text(text: str, max_length: int = 100, suffix: str = "...") -> str:
    """
    Truncate text to a maximum length.

    Args:
        text: Text to truncate
        max_length: Maximum length, suffix included
        suffix: Suffix to add if truncated

    Returns:
        Truncated text
    """
    if len(text) <= max_length:
        return text
    return text[:max_length - len(suffix)] + suffix


def clip_text(text: str, limit: int, suffix: str = "...") -> str:
    """
    Cut text at ``limit`` characters and append ``suffix``.

    Unlike ``truncate_text`` the suffix is added on top of the limit.

    Args:
        text: Text to clip
        limit: Number of characters kept from the original text
        suffix: Suffix to add if clipped

    Returns:
        Clipped text
    """
    if len(text) <= limit:
        return text
    return text[:limit] + suffix


def split_sentences(text: str) -> List[str]:
    """Split text on runs of sentence-terminal punctuation."""
    return re.split(r"[.!?]+", text)
