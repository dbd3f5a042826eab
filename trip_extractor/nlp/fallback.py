"""Verbatim fallback and coverage diagnostics."""

from __future__ import annotations

import re
from dataclasses import replace
from typing import Iterable

from ..domain.models import Span, TripFields
from .scanner import spans_overlap
from .vocabulary import STOPWORDS

_WORD = re.compile(r"\S+")
_PUNCT = "\"'.,;:!?()[]{}-–’‘“”"

DEFAULT_MIN_FIELDS = 3
DEFAULT_MIN_LENGTH = 20


def needs_fallback(
    fields: TripFields,
    transcript: str,
    min_fields: int = DEFAULT_MIN_FIELDS,
    min_length: int = DEFAULT_MIN_LENGTH,
) -> bool:
    """Check if too few fields resolved for a transcript worth keeping."""
    return (
        len(fields.resolved_fields) < min_fields
        and len(transcript.strip()) > min_length
    )


def apply_fallback(
    fields: TripFields,
    transcript: str,
    min_fields: int = DEFAULT_MIN_FIELDS,
    min_length: int = DEFAULT_MIN_LENGTH,
) -> TripFields:
    """Copy the transcript verbatim into special requests when needed.

    The transcript is stored as received, not stripped.
    """
    if not needs_fallback(fields, transcript, min_fields, min_length):
        return fields
    return replace(fields, special_requests=transcript)


def find_unparsed_words(transcript: str, spans: Iterable[Span]) -> tuple[str, ...]:
    """List content words that no claimed span covers.

    Stopwords, very short words and words inside a claimed span are
    skipped. Used for tuning only.
    """
    spans = tuple(spans)
    words = []
    for match in _WORD.finditer(transcript):
        if any(spans_overlap(match.span(), span) for span in spans):
            continue
        word = match.group(0).strip(_PUNCT).lower()
        if len(word) <= 2 or word in STOPWORDS:
            continue
        words.append(word)
    return tuple(words)
