"""Thread-safe in-memory diagnostics sink.

Keeps every event for later inspection. Useful in tests and when
tuning patterns interactively: feed a batch of transcripts, then look
at which patterns were rejected and why.
"""

from __future__ import annotations

import threading
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ...domain.models import DiagnosticEvent, DiagnosticKind, TripField


@dataclass
class RecordingDiagnosticsSink:
    """Diagnostics sink that records events in memory.

    Attributes:
        max_events: Maximum number of kept events (None = unlimited).
            The oldest events are dropped first.

    Example:
        sink = RecordingDiagnosticsSink()
        parse_transcript("party of 4", observer=sink)
        sink.by_kind(DiagnosticKind.ACCEPTED)
    """

    max_events: Optional[int] = None

    _events: List[DiagnosticEvent] = field(default_factory=list, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def record(self, event: DiagnosticEvent) -> None:
        """Store one event.

        Args:
            event: The event to store.
        """
        with self._lock:
            self._events.append(event)
            if self.max_events is not None and len(self._events) > self.max_events:
                del self._events[0]

    def events(self) -> list[DiagnosticEvent]:
        """Return a copy of all recorded events, oldest first."""
        with self._lock:
            return list(self._events)

    def by_kind(self, kind: DiagnosticKind) -> list[DiagnosticEvent]:
        """Return recorded events of one kind."""
        with self._lock:
            return [e for e in self._events if e.kind is kind]

    def for_field(self, trip_field: TripField) -> list[DiagnosticEvent]:
        """Return recorded events concerning one field."""
        with self._lock:
            return [e for e in self._events if e.field is trip_field]

    def clear(self) -> int:
        """Drop all events.

        Returns:
            Number of events that were dropped.
        """
        with self._lock:
            count = len(self._events)
            self._events.clear()
            return count

    def stats(self) -> Dict[str, int]:
        """Return event counts per kind.

        Returns:
            Dictionary mapping lower-case kind names to counts.
        """
        with self._lock:
            counts = Counter(e.kind.name.lower() for e in self._events)
            return {kind.name.lower(): counts.get(kind.name.lower(), 0) for kind in DiagnosticKind}
