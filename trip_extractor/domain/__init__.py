"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    ExtractionError,
    PatternRegistryError,
    TripExtractorError,
)
from .models import (
    CONTEXT_FIELDS,
    LIST_FIELDS,
    DiagnosticEvent,
    DiagnosticKind,
    FieldParser,
    ParseContext,
    ParseReport,
    Pattern,
    Span,
    Token,
    TranscriptUpdate,
    TripField,
    TripFields,
)

__all__ = [
    # Models
    "TripField",
    "TripFields",
    "Pattern",
    "FieldParser",
    "Token",
    "Span",
    "ParseContext",
    "ParseReport",
    "DiagnosticEvent",
    "DiagnosticKind",
    "TranscriptUpdate",
    "LIST_FIELDS",
    "CONTEXT_FIELDS",
    # Errors
    "TripExtractorError",
    "ExtractionError",
    "PatternRegistryError",
    "ConfigurationError",
]
