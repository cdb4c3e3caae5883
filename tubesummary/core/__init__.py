"""
Core functionality for the YouTube video summarization application.

This package contains modules for validating YouTube URLs, fetching video
metadata and captions, and generating summaries.
"""
