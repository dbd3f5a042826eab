"""Matcher, overlap filter and context propagation.

The scan is a left fold over the field parsers: each step takes the
current ``ScanState`` (accepted tokens, claimed spans, context) and
returns a new one. Nothing is mutated in place, so a single field
parser can be exercised in isolation by handing it a prepared state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from functools import reduce
from typing import TYPE_CHECKING, Iterable, Optional

from ..domain.errors import ExtractionError
from ..domain.models import (
    DiagnosticEvent,
    DiagnosticKind,
    FieldParser,
    ParseContext,
    Span,
    Token,
)

if TYPE_CHECKING:
    from ..ports.diagnostics import DiagnosticsSinkPort

logger = logging.getLogger(__name__)

# Typographic apostrophes from speech engines; same length as "'" so
# spans stay valid against the original transcript.
_APOSTROPHES = str.maketrans({"’": "'", "‘": "'"})


def normalize_for_matching(text: str) -> str:
    """Return ``text`` with curly apostrophes straightened."""
    return text.translate(_APOSTROPHES)


def spans_overlap(a: Span, b: Span) -> bool:
    """Check if two half-open spans share at least one character."""
    return a[0] < b[1] and b[0] < a[1]


@dataclass(frozen=True, slots=True)
class ScanState:
    """Accumulated result of the scan so far.

    Attributes:
        tokens: Accepted tokens in scan order
        claimed: Spans claimed by the accepted tokens
        context: Context handed to the next extractor call
    """

    tokens: tuple[Token, ...] = ()
    claimed: tuple[Span, ...] = ()
    context: ParseContext = field(default_factory=ParseContext)

    def is_claimed(self, span: Span) -> bool:
        return any(spans_overlap(span, other) for other in self.claimed)

    def accept(self, token: Token) -> ScanState:
        """Return a new state with ``token`` accepted and its span claimed."""
        return replace(
            self,
            tokens=self.tokens + (token,),
            claimed=self.claimed + (token.span,),
            context=self.context.with_token(token),
        )


def _emit(observer: Optional[DiagnosticsSinkPort], event: DiagnosticEvent) -> None:
    if observer is not None:
        observer.record(event)


def scan_field(
    parser: FieldParser,
    text: str,
    state: ScanState,
    observer: Optional[DiagnosticsSinkPort] = None,
) -> ScanState:
    """Run every pattern of one field parser over the transcript.

    List fields keep every accepted occurrence. Scalar fields keep the
    first accepted occurrence of each pattern; the resolver picks
    between patterns afterwards.

    Args:
        parser: The field parser to run.
        text: The transcript, already normalized for matching.
        state: State produced by the previous field parsers.
        observer: Optional diagnostics sink.

    Returns:
        The state after this field parser.
    """
    for pattern in parser.patterns:
        for match in pattern.matcher.finditer(text):
            span: Span = match.span()
            matched = match.group(0)
            if span[0] == span[1]:
                continue

            if state.is_claimed(span):
                logger.debug(
                    "Candidate overlaps a claimed span",
                    extra={"field": parser.field.value, "pattern": pattern.description, "span": span},
                )
                _emit(
                    observer,
                    DiagnosticEvent(
                        kind=DiagnosticKind.OVERLAP,
                        field=parser.field,
                        pattern_description=pattern.description,
                        matched_text=matched,
                        confidence=pattern.confidence,
                    ),
                )
                continue

            try:
                value = pattern.extract(match, state.context)
            except Exception as e:
                error = ExtractionError(
                    "Extractor failed on candidate",
                    field_name=parser.field.value,
                    pattern_description=pattern.description,
                    cause=e,
                )
                logger.warning(
                    str(error),
                    extra={"field": parser.field.value, "pattern": pattern.description},
                )
                _emit(
                    observer,
                    DiagnosticEvent(
                        kind=DiagnosticKind.EXTRACTION_FAILED,
                        field=parser.field,
                        pattern_description=pattern.description,
                        matched_text=matched,
                        confidence=pattern.confidence,
                        detail=str(error),
                    ),
                )
                continue

            if value is None:
                logger.debug(
                    "Candidate produced no value",
                    extra={"field": parser.field.value, "pattern": pattern.description, "text": matched},
                )
                _emit(
                    observer,
                    DiagnosticEvent(
                        kind=DiagnosticKind.NO_VALUE,
                        field=parser.field,
                        pattern_description=pattern.description,
                        matched_text=matched,
                        confidence=pattern.confidence,
                    ),
                )
                continue

            token = Token(
                field=parser.field,
                value=value,
                confidence=pattern.confidence,
                span=span,
                description=pattern.description,
                matched_text=matched,
            )
            state = state.accept(token)
            logger.debug(
                "Candidate accepted",
                extra={
                    "field": parser.field.value,
                    "pattern": pattern.description,
                    "text": matched,
                    "confidence": pattern.confidence,
                },
            )
            _emit(
                observer,
                DiagnosticEvent(
                    kind=DiagnosticKind.ACCEPTED,
                    field=parser.field,
                    pattern_description=pattern.description,
                    matched_text=matched,
                    confidence=pattern.confidence,
                    accepted=True,
                ),
            )

            if not parser.is_list:
                break

    return state


def scan(
    parsers: Iterable[FieldParser],
    transcript: str,
    context: ParseContext,
    observer: Optional[DiagnosticsSinkPort] = None,
) -> ScanState:
    """Fold every field parser over the transcript, in order.

    Args:
        parsers: Field parsers in registry order.
        transcript: The original transcript.
        context: Initial context (reference date, seeded start date).
        observer: Optional diagnostics sink.

    Returns:
        The final scan state.
    """
    text = normalize_for_matching(transcript)
    return reduce(
        lambda state, parser: scan_field(parser, text, state, observer),
        parsers,
        ScanState(context=context),
    )
