"""Tests for the diagnostics sink adapters."""

import logging
from datetime import date

import pytest

from trip_extractor.adapters.diagnostics import (
    LoggingDiagnosticsSink,
    NullDiagnosticsSink,
    RecordingDiagnosticsSink,
)
from trip_extractor.config import ParserConfig
from trip_extractor.domain.models import DiagnosticEvent, DiagnosticKind, TripField
from trip_extractor.nlp.parser import parse_transcript

TODAY = date(2026, 3, 1)


class _ListHandler(logging.Handler):
    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.records = []

    def emit(self, record):
        self.records.append(record)


def test_null_sink_records_nothing():
    sink = NullDiagnosticsSink()

    sink.record(DiagnosticEvent(kind=DiagnosticKind.ACCEPTED))

    assert sink.events() == []


class TestRecordingSink:
    def test_parse_reports_decisions(self):
        sink = RecordingDiagnosticsSink()

        parse_transcript(
            "party of 4, our total budget is $5000",
            observer=sink,
            today=TODAY,
            config=ParserConfig(),
        )

        accepted = sink.by_kind(DiagnosticKind.ACCEPTED)
        assert TripField.TRAVELERS in {e.field for e in accepted}
        rejected = sink.by_kind(DiagnosticKind.LOW_CONFIDENCE)
        assert [e.field for e in rejected] == [TripField.BUDGET]
        assert rejected[0].confidence == 0.55
        assert sink.by_kind(DiagnosticKind.FALLBACK)

    def test_max_events_drops_oldest(self):
        sink = RecordingDiagnosticsSink(max_events=2)

        for kind in (DiagnosticKind.ACCEPTED, DiagnosticKind.OVERLAP, DiagnosticKind.RESOLVED):
            sink.record(DiagnosticEvent(kind=kind))

        assert [e.kind for e in sink.events()] == [DiagnosticKind.OVERLAP, DiagnosticKind.RESOLVED]

    def test_stats_and_clear(self):
        sink = RecordingDiagnosticsSink()
        sink.record(DiagnosticEvent(kind=DiagnosticKind.ACCEPTED, field=TripField.BUDGET))
        sink.record(DiagnosticEvent(kind=DiagnosticKind.ACCEPTED, field=TripField.TRAVELERS))

        assert sink.stats()["accepted"] == 2
        assert sink.stats()["overlap"] == 0
        assert len(sink.for_field(TripField.BUDGET)) == 1
        assert sink.clear() == 2
        assert sink.events() == []


@pytest.fixture
def diagnostics_records():
    logger = logging.getLogger("trip_extractor.diagnostics")
    handler = _ListHandler()
    previous = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    yield handler.records
    logger.removeHandler(handler)
    logger.setLevel(previous)


def test_logging_sink_levels(diagnostics_records):
    sink = LoggingDiagnosticsSink()

    sink.record(DiagnosticEvent(kind=DiagnosticKind.ACCEPTED, field=TripField.BUDGET, confidence=0.95))
    sink.record(DiagnosticEvent(kind=DiagnosticKind.LOW_CONFIDENCE, field=TripField.BUDGET, confidence=0.55))

    assert [r.levelno for r in diagnostics_records] == [logging.DEBUG, logging.INFO]
    assert diagnostics_records[0].field == "budget"
    assert diagnostics_records[1].getMessage() == "Parse diagnostic: low_confidence"
