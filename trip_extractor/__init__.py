"""Trip request extractor.

Turns one finalized free-text trip request, typically a speech
transcript, into structured ``TripFields``: destination, dates,
travelers, budget, accommodation, interests and transportation, with a
verbatim fallback when too little could be structured.
"""

from .domain.models import ParseContext, ParseReport, TranscriptUpdate, TripField, TripFields
from .nlp.parser import TripRequestParser, parse_transcript

__version__ = "0.1.0"

__all__ = [
    "ParseContext",
    "ParseReport",
    "TranscriptUpdate",
    "TripField",
    "TripFields",
    "TripRequestParser",
    "parse_transcript",
    "__version__",
]
