"""Diagnostics sink writing events to the standard logging tree.

Bound by the default container when ``TRIP_PARSER_DEBUG_DIAGNOSTICS``
is set. Accepted candidates and resolutions go out at DEBUG, rejections
and failures at the level given by ``rejection_level``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...domain.models import DiagnosticEvent, DiagnosticKind

_REJECTIONS = frozenset(
    {
        DiagnosticKind.LOW_CONFIDENCE,
        DiagnosticKind.EXTRACTION_FAILED,
        DiagnosticKind.FALLBACK,
    }
)


@dataclass
class LoggingDiagnosticsSink:
    """Diagnostics sink forwarding events to a logger.

    Attributes:
        logger_name: Name of the logger receiving the events
        rejection_level: Level for rejections, failures and fallbacks
    """

    logger_name: str = "trip_extractor.diagnostics"
    rejection_level: int = logging.INFO
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(self.logger_name)

    def record(self, event: DiagnosticEvent) -> None:
        """Log one event with its fields as structured extras.

        Args:
            event: The event to log.
        """
        level = self.rejection_level if event.kind in _REJECTIONS else logging.DEBUG
        self._logger.log(
            level,
            "Parse diagnostic: %s",
            event.kind.name.lower(),
            extra={
                "field": event.field.value if event.field else None,
                "pattern": event.pattern_description,
                "text": event.matched_text,
                "confidence": event.confidence,
                "accepted": event.accepted,
                "detail": event.detail,
            },
        )
