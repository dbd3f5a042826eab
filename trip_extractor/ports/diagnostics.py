"""Diagnostics port - Observer for parse decisions.

The parser reports every candidate decision (accepted, overlapping,
rejected for low confidence...) to a sink so patterns can be tuned
without turning on global debug logging.

Implementations:
- adapters/diagnostics/null_sink.py (NullDiagnosticsSink) - Default
- adapters/diagnostics/logging_sink.py (LoggingDiagnosticsSink)
- adapters/diagnostics/recording_sink.py (RecordingDiagnosticsSink) - Tests
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import DiagnosticEvent


class DiagnosticsSinkPort(Protocol):
    """Port for receiving structured parse diagnostics."""

    def record(self, event: DiagnosticEvent) -> None:
        """Receive one diagnostic event.

        Args:
            event: The event to record.
        """
        ...
