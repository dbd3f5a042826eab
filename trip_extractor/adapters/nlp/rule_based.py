"""Rule-based trip field extractor adapter.

This adapter wraps the pattern-table parser from nlp/parser.py
with the TripFieldExtractorPort interface.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING, Optional

from ...config import ParserConfig, get_config
from ...domain.models import ParseContext, ParseReport, TripFields
from ...nlp.parser import TripRequestParser
from ..diagnostics.null_sink import NullDiagnosticsSink

if TYPE_CHECKING:
    from ...ports.diagnostics import DiagnosticsSinkPort


@dataclass
class RuleBasedTripExtractor:
    """Rule-based trip field extractor using the pattern registry.

    This adapter implements TripFieldExtractorPort.

    Attributes:
        config: Parser configuration
        observer: Diagnostics sink handed to every parse
    """

    config: ParserConfig = field(default_factory=lambda: get_config().parser)
    observer: DiagnosticsSinkPort = field(default_factory=NullDiagnosticsSink)
    _parser: TripRequestParser = field(init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        self._parser = TripRequestParser(config=self.config, observer=self.observer)

    def analyze(
        self,
        transcript: str,
        context: Optional[ParseContext] = None,
        today: Optional[date] = None,
    ) -> ParseReport:
        """Extract trip fields and keep the intermediate results.

        Args:
            transcript: The transcript to analyze.
            context: Optional starting context.
            today: Optional reference date.

        Returns:
            ParseReport with fields, tokens and unparsed words.
        """
        report = self._parser.analyze(transcript, context=context, today=today)

        self._logger.debug(
            "Trip extraction (rule-based)",
            extra={
                "resolved": [f.value for f in report.fields.resolved_fields],
                "tokens": len(report.tokens),
                "fallback": report.fields.special_requests is not None,
            },
        )

        return report

    def extract(
        self,
        transcript: str,
        context: Optional[ParseContext] = None,
        today: Optional[date] = None,
    ) -> TripFields:
        """Extract trip fields from a finalized transcript.

        Args:
            transcript: The transcript to analyze.
            context: Optional starting context.
            today: Optional reference date.

        Returns:
            TripFields for the transcript.
        """
        return self.analyze(transcript, context=context, today=today).fields
