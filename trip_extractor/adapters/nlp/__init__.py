"""NLP adapters - Implementations of NLP-related ports.

Available implementations:
- RuleBasedTripExtractor: Pattern-table extraction with confidence scores
"""

from .rule_based import RuleBasedTripExtractor

__all__ = ["RuleBasedTripExtractor"]
