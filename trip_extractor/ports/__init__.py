"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the application core and external
adapters. They enable dependency injection and make the system testable.
"""

from .diagnostics import DiagnosticsSinkPort
from .nlp import TripFieldExtractorPort

__all__ = [
    "TripFieldExtractorPort",
    "DiagnosticsSinkPort",
]
