"""Tests for the trip request service and the container wiring."""

from dataclasses import dataclass, field
from datetime import date

import pytest

from trip_extractor.adapters.diagnostics import LoggingDiagnosticsSink, NullDiagnosticsSink
from trip_extractor.adapters.nlp import RuleBasedTripExtractor
from trip_extractor.config import AppConfig, ParserConfig
from trip_extractor.container import Container, get_container, reset_container
from trip_extractor.domain.models import TranscriptUpdate, TripFields
from trip_extractor.ports.diagnostics import DiagnosticsSinkPort
from trip_extractor.ports.nlp import TripFieldExtractorPort
from trip_extractor.services import TripRequestService

TODAY = date(2026, 3, 1)


@dataclass
class FakeExtractor:
    calls: list = field(default_factory=list)

    def extract(self, transcript, context=None, today=None):
        self.calls.append(transcript)
        return TripFields(destination="Somewhere")

    def analyze(self, transcript, context=None, today=None):
        raise NotImplementedError


class TestTripRequestService:
    def test_interim_updates_are_ignored(self):
        extractor = FakeExtractor()
        service = TripRequestService(extractor=extractor, config=ParserConfig())

        assert service.handle(TranscriptUpdate("going to Ro", is_final=False)) is None
        assert extractor.calls == []

    def test_final_updates_are_parsed(self):
        extractor = FakeExtractor()
        service = TripRequestService(extractor=extractor, config=ParserConfig())

        fields = service.handle(TranscriptUpdate("going to Rome"))

        assert fields == TripFields(destination="Somewhere")
        assert extractor.calls == ["going to Rome"]

    def test_long_transcripts_are_truncated(self):
        extractor = FakeExtractor()
        service = TripRequestService(
            extractor=extractor, config=ParserConfig(max_transcript_length=10)
        )

        service.parse_text("a" * 25)

        assert extractor.calls == ["a" * 10]

    def test_none_is_parsed_as_empty(self):
        extractor = FakeExtractor()
        service = TripRequestService(extractor=extractor, config=ParserConfig())

        service.parse_text(None)

        assert extractor.calls == [""]

    def test_with_rule_based_extractor(self):
        service = TripRequestService(
            extractor=RuleBasedTripExtractor(config=ParserConfig()), config=ParserConfig()
        )

        fields = service.handle(
            TranscriptUpdate("Destination is London, budget is $2000 per person"),
            today=TODAY,
        )

        assert fields.destination == "London"
        assert fields.special_requests == "Destination is London, budget is $2000 per person"

    def test_analyze_text_is_bounded(self):
        service = TripRequestService(
            extractor=RuleBasedTripExtractor(config=ParserConfig()),
            config=ParserConfig(max_transcript_length=10),
        )

        report = service.analyze_text("party of 4, prefer a hotel", today=TODAY)

        assert report.fields.travelers == 4
        assert report.fields.accommodation is None
        assert [t.matched_text for t in report.tokens] == ["party of 4"]


class TestContainer:
    def test_default_bindings(self):
        container = Container.create_default(AppConfig())

        service = container.resolve(TripRequestService)

        assert isinstance(service, TripRequestService)
        assert isinstance(service.extractor, RuleBasedTripExtractor)
        assert isinstance(container.resolve(DiagnosticsSinkPort), NullDiagnosticsSink)
        assert container.resolve(TripRequestService) is service

    def test_debug_diagnostics_binds_logging_sink(self):
        config = AppConfig(parser=ParserConfig(debug_diagnostics=True))
        container = Container.create_default(config)

        extractor = container.resolve(TripFieldExtractorPort)

        assert isinstance(extractor.observer, LoggingDiagnosticsSink)

    def test_override_for_tests(self):
        container = Container.create_default(AppConfig())
        fake = FakeExtractor()
        container.register(TripFieldExtractorPort, lambda: fake)

        service = container.resolve(TripRequestService)

        assert service.extractor is fake

    def test_unregistered_type(self):
        with pytest.raises(KeyError):
            Container(config=AppConfig()).resolve(TripRequestService)

    def test_global_container_is_reset(self):
        first = get_container()
        assert get_container() is first

        reset_container()

        assert get_container() is not first
