"""NLP ports - Abstractions for trip field extraction.

This protocol defines the contract for turning a transcript into
structured trip fields, so the rule-based extractor can be swapped
(e.g. for a model-backed one) without changing the service.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from ..domain.models import ParseContext, ParseReport, TripFields


class TripFieldExtractorPort(Protocol):
    """Port for trip field extraction from text.

    Implementations:
    - adapters/nlp/rule_based.py (RuleBasedTripExtractor)
    """

    def extract(
        self,
        transcript: str,
        context: Optional[ParseContext] = None,
        today: Optional[date] = None,
    ) -> TripFields:
        """Extract trip fields from a finalized transcript.

        Args:
            transcript: The transcript to analyze.
            context: Optional starting context (e.g. known start date).
            today: Optional reference date for relative phrases.

        Returns:
            TripFields, never raising for any string input.
        """
        ...

    def analyze(
        self,
        transcript: str,
        context: Optional[ParseContext] = None,
        today: Optional[date] = None,
    ) -> ParseReport:
        """Extract trip fields and keep accepted tokens for inspection.

        Args:
            transcript: The transcript to analyze.
            context: Optional starting context.
            today: Optional reference date.

        Returns:
            ParseReport with the fields and intermediate results.
        """
        ...
