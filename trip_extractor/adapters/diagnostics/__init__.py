"""Diagnostics adapters - Implementations of the DiagnosticsSinkPort.

Available implementations:
- NullDiagnosticsSink: Drops every event (default)
- LoggingDiagnosticsSink: Forwards events to the logging tree
- RecordingDiagnosticsSink: Keeps events in memory for inspection
"""

from .logging_sink import LoggingDiagnosticsSink
from .null_sink import NullDiagnosticsSink
from .recording_sink import RecordingDiagnosticsSink

__all__ = ["NullDiagnosticsSink", "LoggingDiagnosticsSink", "RecordingDiagnosticsSink"]
