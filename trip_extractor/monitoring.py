from __future__ import annotations

import logging
from typing import Optional

import structlog

from .config import ObservabilityConfig, get_config
from .domain.errors import ConfigurationError

logger = logging.getLogger("trip_extractor")


def json_formatter() -> structlog.stdlib.ProcessorFormatter:
    """JSON-lines formatter for stdlib records.

    Each line carries the event, level, logger name, an ISO timestamp
    and every attribute passed through ``extra=``.
    """
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.ExtraAdder(),
            structlog.processors.TimeStamper(fmt="iso"),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(default=str),
        ],
    )


def _level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level {name!r}",
            setting_name="TRIP_LOG_LEVEL",
            expected_type="DEBUG, INFO, WARNING, ERROR or CRITICAL",
        )
    return level


def configure_logging(
    config: Optional[ObservabilityConfig] = None, level: Optional[str] = None
) -> logging.Logger:
    """Install a single handler on the package logger.

    Calling it again replaces the handler instead of stacking a new one.

    Args:
        config: Observability settings, defaults to the app config.
        level: Level name overriding the configured one.

    Returns:
        The configured package logger.

    Raises:
        ConfigurationError: If the level name is unknown.
    """
    config = config if config is not None else get_config().observability
    resolved = _level(level or config.level)

    handler = logging.StreamHandler()
    if config.structured:
        handler.setFormatter(json_formatter())
    else:
        handler.setFormatter(logging.Formatter(config.format))

    for old in list(logger.handlers):
        logger.removeHandler(old)
    logger.addHandler(handler)
    logger.setLevel(resolved)
    logger.propagate = False
    return logger
