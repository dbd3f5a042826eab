"""Trip request parser: scan, resolve, fall back.

Typical usage:

    from trip_extractor import parse_transcript

    fields = parse_transcript("I'm going to Tokyo from July 10th to July 18th")
    fields.destination  # "Tokyo"

The parser is total. Every string (empty, whitespace, nonsense) gives a
``TripFields`` value; bad candidates only ever drop out of the result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from datetime import date
from typing import TYPE_CHECKING, Optional, Tuple

from ..adapters.diagnostics.null_sink import NullDiagnosticsSink
from ..config import ParserConfig, get_config
from ..domain.models import (
    DiagnosticEvent,
    DiagnosticKind,
    FieldParser,
    ParseContext,
    ParseReport,
    TripFields,
)
from .fallback import apply_fallback, find_unparsed_words
from .registry import FIELD_PARSERS
from .resolver import resolve_tokens
from .scanner import scan

if TYPE_CHECKING:
    from ..ports.diagnostics import DiagnosticsSinkPort


@dataclass
class TripRequestParser:
    """Rule-based parser turning one transcript into ``TripFields``.

    Attributes:
        config: Parser configuration (threshold, fallback policy)
        registry: Field parsers in scan order
        observer: Diagnostics sink receiving every candidate decision
    """

    config: ParserConfig = field(default_factory=lambda: get_config().parser)
    registry: Tuple[FieldParser, ...] = FIELD_PARSERS
    observer: DiagnosticsSinkPort = field(default_factory=NullDiagnosticsSink)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def _initial_context(
        self, context: Optional[ParseContext], today: Optional[date]
    ) -> ParseContext:
        if context is None:
            context = ParseContext(roll_past_dates=self.config.roll_past_dates)
        if today is not None:
            context = replace(context, today=today)
        return context

    def analyze(
        self,
        transcript: Optional[str],
        context: Optional[ParseContext] = None,
        today: Optional[date] = None,
    ) -> ParseReport:
        """Parse a transcript and keep the intermediate results.

        Args:
            transcript: Finalized transcript. None counts as empty.
            context: Optional starting context, e.g. a start date the
                form already holds.
            today: Reference date overriding the context's.

        Returns:
            ParseReport with fields, accepted tokens and unparsed words.
        """
        transcript = transcript or ""
        state = scan(
            self.registry,
            transcript,
            self._initial_context(context, today),
            self.observer,
        )

        values = resolve_tokens(
            state.tokens, self.config.confidence_threshold, self.observer
        )
        fields = TripFields(**{f.attr: v for f, v in values.items()})

        with_fallback = apply_fallback(
            fields,
            transcript,
            self.config.fallback_min_fields,
            self.config.fallback_min_length,
        )
        if with_fallback is not fields:
            self._logger.info(
                "Too few fields resolved, keeping transcript verbatim",
                extra={
                    "resolved": len(fields.resolved_fields),
                    "min_fields": self.config.fallback_min_fields,
                },
            )
            self.observer.record(
                DiagnosticEvent(
                    kind=DiagnosticKind.FALLBACK,
                    matched_text=transcript,
                    detail=f"resolved={len(fields.resolved_fields)}",
                )
            )

        unparsed: tuple[str, ...] = ()
        if self.config.report_unparsed_words:
            unparsed = find_unparsed_words(transcript, state.claimed)
            if unparsed:
                self._logger.debug(
                    "Words not covered by any pattern",
                    extra={"words": list(unparsed)},
                )
                self.observer.record(
                    DiagnosticEvent(
                        kind=DiagnosticKind.UNPARSED_WORDS,
                        detail=" ".join(unparsed),
                    )
                )

        return ParseReport(
            fields=with_fallback,
            tokens=state.tokens,
            claimed_spans=state.claimed,
            unparsed_words=unparsed,
        )

    def parse(
        self,
        transcript: Optional[str],
        context: Optional[ParseContext] = None,
        today: Optional[date] = None,
    ) -> TripFields:
        """Parse a transcript into ``TripFields``. Never raises."""
        return self.analyze(transcript, context, today).fields


def parse_transcript(
    transcript: Optional[str],
    *,
    context: Optional[ParseContext] = None,
    observer: Optional[DiagnosticsSinkPort] = None,
    config: Optional[ParserConfig] = None,
    today: Optional[date] = None,
) -> TripFields:
    """Parse one transcript with the default pattern registry.

    Args:
        transcript: Finalized transcript text.
        context: Optional starting context.
        observer: Optional diagnostics sink, no-op when omitted.
        config: Optional parser configuration override.
        today: Optional reference date.

    Returns:
        The structured trip fields.
    """
    parser = TripRequestParser(
        config=config if config is not None else get_config().parser,
        observer=observer if observer is not None else NullDiagnosticsSink(),
    )
    return parser.parse(transcript, context=context, today=today)
