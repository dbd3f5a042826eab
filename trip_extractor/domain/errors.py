"""Typed domain errors for the trip request extractor.

The parser itself is total: these errors never reach a caller of
``parse_transcript``. They exist so that failures inside the pipeline
can be logged and reported with structure, and so that malformed
pattern tables or configuration fail fast at construction time.

All errors inherit from TripExtractorError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class TripExtractorError(Exception):
    """Base error for the trip extractor domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class ExtractionError(TripExtractorError):
    """An extractor failed unexpectedly on one matched candidate.

    Built by the scanner and reported to logs and the diagnostics
    sink; the candidate is discarded and scanning continues.

    Attributes:
        field_name: Name of the field whose extractor failed
        pattern_description: Description of the pattern that matched
    """

    field_name: str = ""
    pattern_description: str = ""


@dataclass
class PatternRegistryError(TripExtractorError):
    """A pattern or field parser definition is malformed.

    Attributes:
        field_name: The field the definition belongs to
        description: Description of the offending pattern, if any
    """

    field_name: str = ""
    description: Optional[str] = None


@dataclass
class ConfigurationError(TripExtractorError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
