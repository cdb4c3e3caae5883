"""
YouTube Video Summarization Application.

This application takes a YouTube video URL, looks up the video's metadata
and captions, and generates a short summary with key points.
"""

from tubesummary.config import config

__version__ = config.APP_VERSION
