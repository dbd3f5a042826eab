"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for the tunable values
of the extractor: the acceptance threshold, the fallback policy and
the logging setup.

Configuration can be overridden via environment variables:
- TRIP_PARSER_CONFIDENCE_THRESHOLD=0.7
- TRIP_PARSER_ROLL_PAST_DATES=true
- TRIP_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ParserConfig(BaseSettings):
    """Parser-related configuration.

    Environment variables prefixed with TRIP_PARSER_.
    """

    model_config = SettingsConfigDict(env_prefix="TRIP_PARSER_")

    confidence_threshold: float = Field(default=0.6, ge=0.0, le=1.0)
    fallback_min_fields: int = Field(default=3, ge=0)
    fallback_min_length: int = Field(default=20, ge=0)
    roll_past_dates: bool = False
    report_unparsed_words: bool = True
    # Roughly 60 seconds of speech
    max_transcript_length: int = Field(default=2000, gt=0)
    debug_diagnostics: bool = False


class ObservabilityConfig(BaseSettings):
    """Logging and observability configuration.

    Environment variables prefixed with TRIP_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="TRIP_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.parser.confidence_threshold)

    Environment variables prefixed with TRIP_.
    """

    model_config = SettingsConfigDict(env_prefix="TRIP_")

    parser: ParserConfig = Field(default_factory=ParserConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
