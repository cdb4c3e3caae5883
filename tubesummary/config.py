"""
Configuration settings for the YouTube summarizer application.
"""

import os
from typing import List
from pathlib import Path
from dotenv import load_dotenv


# Ensure environment variables are loaded
load_dotenv()


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "YouTube Video Summarizer"
    APP_VERSION = "0.2.0"

    # Directories
    BASE_DIR = Path(__file__).resolve().parent.parent.absolute()
    LOG_DIR = Path(os.getenv("LOG_DIR", BASE_DIR / "logs"))

    # Upstream endpoints
    OEMBED_URL = "https://www.youtube.com/oembed"
    WATCH_URL = "https://www.youtube.com/watch?v={video_id}"
    THUMBNAIL_URL = "https://img.youtube.com/vi/{video_id}/{tier}.jpg"
    USER_AGENT = os.getenv(
        "USER_AGENT",
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36",
    )

    # Seconds before an outbound call is treated as failed
    REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "5"))

    # Preferred caption languages, most preferred first
    TRANSCRIPT_LANGUAGES = _split_csv(os.getenv("TRANSCRIPT_LANGUAGES", "en"))

    # Summary heuristics
    MIN_TRANSCRIPT_LENGTH = 100
    MIN_SENTENCE_LENGTH = 20
    MAX_SENTENCES = 10
    MAX_KEY_POINTS = 6
    MAX_KEY_POINT_LENGTH = 80
    MAX_SUMMARY_LENGTH = 400

    CORS_ORIGINS = _split_csv(os.getenv("CORS_ORIGINS", "*"))

    @classmethod
    def initialize(cls):
        """Initialize the application configuration."""
        cls.LOG_DIR.mkdir(parents=True, exist_ok=True)


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    LOG_LEVEL = "DEBUG"


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    LOG_LEVEL = "INFO"


# Determine which configuration to use based on environment
def get_config():
    """Get the appropriate configuration based on environment."""
    env = os.getenv("ENVIRONMENT", "development").lower()
    if env == "production":
        return ProductionConfig
    else:
        return DevelopmentConfig


# Create a config instance
config = get_config()
config.initialize()
