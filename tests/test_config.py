"""Tests for environment-driven configuration."""

import pytest
from pydantic import ValidationError

from trip_extractor.config import AppConfig, ParserConfig, get_config, reset_config


def test_defaults():
    config = AppConfig()

    assert config.parser.confidence_threshold == 0.6
    assert config.parser.fallback_min_fields == 3
    assert config.parser.fallback_min_length == 20
    assert config.parser.roll_past_dates is False
    assert config.observability.level == "INFO"


def test_get_config_is_cached():
    assert get_config() is get_config()


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("TRIP_PARSER_CONFIDENCE_THRESHOLD", "0.75")
    monkeypatch.setenv("TRIP_PARSER_ROLL_PAST_DATES", "true")
    monkeypatch.setenv("TRIP_LOG_STRUCTURED", "1")
    reset_config()

    config = get_config()

    assert config.parser.confidence_threshold == 0.75
    assert config.parser.roll_past_dates is True
    assert config.observability.structured is True


def test_threshold_must_be_a_probability(monkeypatch):
    monkeypatch.setenv("TRIP_PARSER_CONFIDENCE_THRESHOLD", "1.5")

    with pytest.raises(ValidationError):
        ParserConfig()
