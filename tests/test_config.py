"""
Tests for configuration selection.
"""

from tubesummary.config import (
    DevelopmentConfig,
    ProductionConfig,
    _split_csv,
    config,
    get_config,
)


def test_get_config_production(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "Production")
    assert get_config() is ProductionConfig
    assert get_config().LOG_LEVEL == "INFO"


def test_get_config_defaults_to_development(monkeypatch):
    monkeypatch.delenv("ENVIRONMENT", raising=False)
    assert get_config() is DevelopmentConfig
    assert get_config().DEBUG is True


def test_split_csv():
    assert _split_csv(" en, de ,,fr ") == ["en", "de", "fr"]
    assert _split_csv("") == []


def test_summary_limits():
    assert config.MIN_TRANSCRIPT_LENGTH == 100
    assert config.MAX_SUMMARY_LENGTH == 400
    assert config.MAX_KEY_POINTS == 6
    assert config.MAX_KEY_POINT_LENGTH == 80


def test_log_dir_exists():
    assert config.LOG_DIR.is_dir()
