"""Null diagnostics sink, the default observer.

Every event is dropped. The parser uses this sink when the caller does
not supply one, so diagnostics cost nothing unless asked for.
"""

from __future__ import annotations

from dataclasses import dataclass

from ...domain.models import DiagnosticEvent


@dataclass
class NullDiagnosticsSink:
    """No-op diagnostics sink.

    Implements DiagnosticsSinkPort but records nothing.
    """

    def record(self, event: DiagnosticEvent) -> None:
        """Does nothing.

        Args:
            event: The event (ignored).
        """
        pass

    def events(self) -> list[DiagnosticEvent]:
        """Return empty list.

        Returns:
            Empty list.
        """
        return []
