"""Rule engine for trip requests.

- vocabulary: month names, number words, keyword tables
- dates: calendar helpers
- extractors: ``(match, context) -> value | None`` functions
- registry: the ordered field parser table
- scanner / resolver / fallback: the pipeline stages
- parser: orchestration
"""

from .parser import TripRequestParser, parse_transcript
from .registry import FIELD_PARSERS

__all__ = ["FIELD_PARSERS", "TripRequestParser", "parse_transcript"]
