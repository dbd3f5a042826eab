"""Tests for logging setup."""

import io
import json
import logging

import pytest
import structlog

from trip_extractor.config import ObservabilityConfig
from trip_extractor.domain.errors import ConfigurationError
from trip_extractor.monitoring import configure_logging, json_formatter


def test_json_formatter_includes_extras():
    record = logging.LogRecord(
        "trip_extractor.nlp.scanner", logging.DEBUG, __file__, 1, "Candidate %s", ("accepted",), None
    )
    record.field = "budget"
    record.confidence = 0.95

    payload = json.loads(json_formatter().format(record))

    assert payload["event"] == "Candidate accepted"
    assert payload["level"] == "debug"
    assert payload["logger"] == "trip_extractor.nlp.scanner"
    assert "timestamp" in payload
    assert payload["field"] == "budget"
    assert payload["confidence"] == 0.95
    assert "msg" not in payload


def test_configure_logging_replaces_handlers():
    config = ObservabilityConfig(level="WARNING", structured=True)

    logger = configure_logging(config)
    configure_logging(config)

    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)
    assert logger.level == logging.WARNING


def test_level_override():
    logger = configure_logging(ObservabilityConfig(level="INFO"), level="debug")

    assert logger.level == logging.DEBUG


def test_unknown_level_is_a_configuration_error():
    with pytest.raises(ConfigurationError) as excinfo:
        configure_logging(ObservabilityConfig(level="LOUD"))

    assert excinfo.value.setting_name == "TRIP_LOG_LEVEL"


def test_structured_logging_writes_json_lines():
    logger = configure_logging(ObservabilityConfig(level="INFO", structured=True))
    stream = io.StringIO()
    logger.handlers[0].setStream(stream)

    logging.getLogger("trip_extractor.services").info(
        "Trip request parsed", extra={"resolved": ["destination"], "fallback": False}
    )

    payload = json.loads(stream.getvalue().strip())
    assert payload["event"] == "Trip request parsed"
    assert payload["level"] == "info"
    assert payload["resolved"] == ["destination"]
    assert payload["fallback"] is False
