"""Trip request service: the entry point for speech transcripts.

The speech-capture side emits interim and final transcripts. Only a
final transcript is worth parsing; interim ones are ignored so the
form is not refilled on every partial recognition.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..config import ParserConfig, get_config
from ..domain.models import ParseContext, ParseReport, TranscriptUpdate, TripFields
from ..ports.nlp import TripFieldExtractorPort


@dataclass
class TripRequestService:
    """Turns finalized transcripts into trip fields.

    Attributes:
        extractor: Trip field extractor
        config: Parser configuration (transcript length bound)
    """

    extractor: TripFieldExtractorPort
    config: ParserConfig = field(default_factory=lambda: get_config().parser)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def _bounded(self, text: str) -> str:
        limit = self.config.max_transcript_length
        if len(text) <= limit:
            return text
        self._logger.warning(
            "Transcript too long, truncating",
            extra={"length": len(text), "limit": limit},
        )
        return text[:limit]

    def parse_text(
        self,
        text: Optional[str],
        context: Optional[ParseContext] = None,
        today: Optional[date] = None,
    ) -> TripFields:
        """Parse a finalized transcript given as plain text.

        Args:
            text: Transcript text. None counts as empty.
            context: Optional starting context.
            today: Optional reference date.

        Returns:
            The extracted trip fields.
        """
        transcript = self._bounded(text or "")
        self._logger.info(
            "Parsing transcript",
            extra={"text_length": len(transcript)},
        )

        fields = self.extractor.extract(transcript, context=context, today=today)

        self._logger.info(
            "Trip request parsed",
            extra={
                "resolved": [f.value for f in fields.resolved_fields],
                "fallback": fields.special_requests is not None,
            },
        )
        return fields

    def analyze_text(
        self,
        text: Optional[str],
        context: Optional[ParseContext] = None,
        today: Optional[date] = None,
    ) -> ParseReport:
        """Parse a finalized transcript and keep the intermediate results.

        Same length bound as ``parse_text``; used by the command line
        for its verbose output.
        """
        transcript = self._bounded(text or "")
        report = self.extractor.analyze(transcript, context=context, today=today)

        self._logger.info(
            "Trip request analyzed",
            extra={
                "resolved": [f.value for f in report.fields.resolved_fields],
                "tokens": len(report.tokens),
                "unparsed": len(report.unparsed_words),
            },
        )
        return report

    def handle(
        self,
        update: TranscriptUpdate,
        context: Optional[ParseContext] = None,
        today: Optional[date] = None,
    ) -> Optional[TripFields]:
        """Handle one update from the speech-capture collaborator.

        Args:
            update: Transcript update, interim or final.
            context: Optional starting context.
            today: Optional reference date.

        Returns:
            TripFields for a final transcript, None for an interim one.
        """
        if not update.is_final:
            self._logger.debug(
                "Ignoring interim transcript",
                extra={"text_length": len(update.text)},
            )
            return None
        return self.parse_text(update.text, context=context, today=today)
