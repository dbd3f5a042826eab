"""Services layer - Application orchestration.

Available services:
- TripRequestService: Parses finalized speech transcripts into trip fields
"""

from .trip_request_service import TripRequestService

__all__ = ["TripRequestService"]
