"""Immutable domain models for the trip request extractor.

All models are frozen dataclasses with slots. They are created fresh
for every parse call and never shared between calls.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from datetime import date
from enum import Enum, auto
from typing import Any, Callable, Dict, Optional, Tuple

from .errors import PatternRegistryError

Span = Tuple[int, int]


class TripField(Enum):
    """Output fields of a parsed trip request.

    The enum value is the external (form-facing) key, the ``attr``
    property the snake_case attribute on ``TripFields``.
    """

    DESTINATION = "destination"
    START_DATE = "startDate"
    END_DATE = "endDate"
    TRAVELERS = "travelers"
    BUDGET = "budget"
    ACCOMMODATION = "accommodation"
    INTERESTS = "interests"
    TRANSPORTATION = "transportation"
    SPECIAL_REQUESTS = "specialRequests"

    @property
    def attr(self) -> str:
        return _ATTRS[self]

    @property
    def is_list(self) -> bool:
        """Whether the field holds a set of tags rather than a scalar."""
        return self in LIST_FIELDS


_ATTRS: Dict[TripField, str] = {
    TripField.DESTINATION: "destination",
    TripField.START_DATE: "start_date",
    TripField.END_DATE: "end_date",
    TripField.TRAVELERS: "travelers",
    TripField.BUDGET: "budget",
    TripField.ACCOMMODATION: "accommodation",
    TripField.INTERESTS: "interests",
    TripField.TRANSPORTATION: "transportation",
    TripField.SPECIAL_REQUESTS: "special_requests",
}

LIST_FIELDS = frozenset({TripField.INTERESTS, TripField.TRANSPORTATION})

# Fields whose resolved value later extractors may read from the context.
CONTEXT_FIELDS = frozenset({TripField.START_DATE})


@dataclass(frozen=True, slots=True)
class TripFields:
    """Structured result of parsing one transcript.

    Every attribute is optional: ``None`` means the field was not
    resolved. Set-valued fields are never empty sets, they are either
    a non-empty frozenset or ``None``.

    Attributes:
        destination: Title-cased destination phrase
        start_date: Trip start date
        end_date: Trip end date
        travelers: Number of travelers
        budget: Per-person amount as text, without currency or separators
        accommodation: One of hotel, airbnb, hostel, resort
        interests: Interest category tags
        transportation: Transportation category tags
        special_requests: Verbatim transcript kept as a fallback
    """

    destination: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    travelers: Optional[int] = None
    budget: Optional[str] = None
    accommodation: Optional[str] = None
    interests: Optional[frozenset[str]] = None
    transportation: Optional[frozenset[str]] = None
    special_requests: Optional[str] = None

    def get(self, trip_field: TripField) -> Any:
        """Return the value stored for a field, or None."""
        return getattr(self, trip_field.attr)

    @property
    def resolved_fields(self) -> tuple[TripField, ...]:
        """Structured fields that hold a value (special requests excluded)."""
        return tuple(
            f
            for f in TripField
            if f is not TripField.SPECIAL_REQUESTS and self.get(f) is not None
        )

    @property
    def is_empty(self) -> bool:
        """Check if nothing at all was captured."""
        return not self.resolved_fields and self.special_requests is None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize resolved entries using the form-facing keys.

        Dates become ISO strings and tag sets become sorted lists, so
        the result is JSON-serializable and deterministic.
        """
        out: Dict[str, Any] = {}
        for f in TripField:
            value = self.get(f)
            if value is None:
                continue
            if isinstance(value, date):
                value = value.isoformat()
            elif isinstance(value, frozenset):
                value = sorted(value)
            out[f.value] = value
        return out


@dataclass(frozen=True, slots=True)
class ParseContext:
    """Accumulator threaded through the scan.

    Holds the already-resolved values later extractors depend on (only
    the start date) plus the calendar settings extractors need. Each
    accepted token produces a new context; the previous one is never
    mutated.

    Attributes:
        today: Reference date for relative phrases and default years
        start_date: Start date resolved so far, if any
        start_date_confidence: Confidence of the token behind start_date
        roll_past_dates: Move month/day dates already past to next year
    """

    today: date = field(default_factory=date.today)
    start_date: Optional[date] = None
    start_date_confidence: float = 0.0
    roll_past_dates: bool = False

    def with_token(self, token: "Token") -> "ParseContext":
        """Return the context updated with an accepted token.

        Only context fields are recorded, and a start date is replaced
        only by a strictly more confident one.
        """
        if token.field not in CONTEXT_FIELDS:
            return self
        if self.start_date is not None and token.confidence <= self.start_date_confidence:
            return self
        return replace(
            self, start_date=token.value, start_date_confidence=token.confidence
        )


Extractor = Callable[["re.Match[str]", ParseContext], Any]


@dataclass(frozen=True, slots=True)
class Pattern:
    """One recognizable phrasing for a field.

    Attributes:
        matcher: Compiled, case-insensitive regular expression
        confidence: Fixed weight in [0, 1], higher for explicit phrasings
        extract: Converts a match and the context into a value or None
        description: Example phrasing used in diagnostics
    """

    matcher: re.Pattern[str]
    confidence: float
    extract: Extractor
    description: str

    def __post_init__(self) -> None:
        if not 0.0 <= self.confidence <= 1.0:
            raise PatternRegistryError(
                f"Confidence must be between 0 and 1, got {self.confidence}",
                description=self.description,
            )


@dataclass(frozen=True, slots=True)
class FieldParser:
    """Ordered patterns for one output field, most specific first."""

    field: TripField
    patterns: tuple[Pattern, ...]

    def __post_init__(self) -> None:
        if self.field is TripField.SPECIAL_REQUESTS:
            raise PatternRegistryError(
                "specialRequests is filled by the fallback, not by patterns",
                field_name=self.field.value,
            )
        if not self.patterns:
            raise PatternRegistryError(
                "A field parser needs at least one pattern",
                field_name=self.field.value,
            )

    @property
    def is_list(self) -> bool:
        return self.field.is_list


@dataclass(frozen=True, slots=True)
class Token:
    """A candidate value built from one pattern occurrence.

    Attributes:
        field: Field the value belongs to
        value: Extracted, normalized value
        confidence: Confidence of the pattern that produced it
        span: Half-open character span [start, end) in the transcript
        description: Description of the producing pattern
        matched_text: The matched transcript text
    """

    field: TripField
    value: Any
    confidence: float
    span: Span
    description: str
    matched_text: str = ""


class DiagnosticKind(Enum):
    """Kinds of events reported to a diagnostics sink."""

    ACCEPTED = auto()
    OVERLAP = auto()
    NO_VALUE = auto()
    EXTRACTION_FAILED = auto()
    LOW_CONFIDENCE = auto()
    RESOLVED = auto()
    UNPARSED_WORDS = auto()
    FALLBACK = auto()


@dataclass(frozen=True, slots=True)
class DiagnosticEvent:
    """Structured trace event for pattern tuning.

    Attributes:
        kind: What happened
        field: Field concerned, if any
        pattern_description: Description of the pattern concerned
        matched_text: Transcript text involved
        confidence: Confidence of the pattern or token
        accepted: Whether the candidate or token was kept
        detail: Free-form extra information
    """

    kind: DiagnosticKind
    field: Optional[TripField] = None
    pattern_description: str = ""
    matched_text: str = ""
    confidence: Optional[float] = None
    accepted: bool = False
    detail: str = ""


@dataclass(frozen=True, slots=True)
class ParseReport:
    """Full outcome of a parse, for tuning and tests.

    Attributes:
        fields: The structured result returned to callers
        tokens: All accepted tokens, in scan order
        claimed_spans: Spans claimed by accepted tokens
        unparsed_words: Content words no accepted token covers
    """

    fields: TripFields
    tokens: tuple[Token, ...] = ()
    claimed_spans: tuple[Span, ...] = ()
    unparsed_words: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class TranscriptUpdate:
    """A transcript emitted by the speech-capture collaborator.

    Attributes:
        text: Transcript text
        is_final: False for interim recognition results
    """

    text: str
    is_final: bool = True
