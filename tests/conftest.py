"""Shared fixtures for the trip extractor tests."""

import logging
from datetime import date

import pytest

from trip_extractor.config import ParserConfig, reset_config
from trip_extractor.container import reset_container
from trip_extractor.nlp.parser import TripRequestParser

# A Sunday. Calendar assertions below are computed from it.
TODAY = date(2026, 3, 1)


@pytest.fixture(autouse=True)
def fresh_config():
    """Drop cached configuration and container around each test."""
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()


@pytest.fixture(autouse=True)
def restore_package_logger():
    """configure_logging() replaces handlers; put the originals back."""
    logger = logging.getLogger("trip_extractor")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def parser():
    """Parser with default settings, independent of the environment."""
    return TripRequestParser(config=ParserConfig())
