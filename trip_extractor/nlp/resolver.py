"""Confidence resolver: turn accepted tokens into field values."""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional

from ..domain.models import DiagnosticEvent, DiagnosticKind, Token, TripField

if TYPE_CHECKING:
    from ..ports.diagnostics import DiagnosticsSinkPort

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 0.6


def _group_by_field(tokens: Iterable[Token]) -> Dict[TripField, List[Token]]:
    grouped: Dict[TripField, List[Token]] = defaultdict(list)
    for token in tokens:
        grouped[token.field].append(token)
    return grouped


def _reject(
    token: Token, threshold: float, observer: Optional[DiagnosticsSinkPort]
) -> None:
    logger.debug(
        "Token below confidence threshold",
        extra={
            "field": token.field.value,
            "pattern": token.description,
            "confidence": token.confidence,
            "threshold": threshold,
        },
    )
    if observer is not None:
        observer.record(
            DiagnosticEvent(
                kind=DiagnosticKind.LOW_CONFIDENCE,
                field=token.field,
                pattern_description=token.description,
                matched_text=token.matched_text,
                confidence=token.confidence,
                detail=f"threshold={threshold}",
            )
        )


def resolve_scalar(
    tokens: List[Token],
    threshold: float = DEFAULT_THRESHOLD,
    observer: Optional[DiagnosticsSinkPort] = None,
) -> Optional[Token]:
    """Pick the most confident token, or None if it misses the threshold.

    Ties keep scan order, so the earlier pattern wins.
    """
    if not tokens:
        return None
    best = sorted(tokens, key=lambda t: t.confidence, reverse=True)[0]
    if best.confidence < threshold:
        _reject(best, threshold, observer)
        return None
    return best


def resolve_list(
    tokens: List[Token],
    threshold: float = DEFAULT_THRESHOLD,
    observer: Optional[DiagnosticsSinkPort] = None,
) -> Optional[frozenset[str]]:
    """Union the tags of every token at or above the threshold.

    Returns None instead of an empty set when nothing passes.
    """
    tags: set[str] = set()
    for token in tokens:
        if token.confidence < threshold:
            _reject(token, threshold, observer)
            continue
        tags.update(token.value)
    return frozenset(tags) or None


def resolve_tokens(
    tokens: Iterable[Token],
    threshold: float = DEFAULT_THRESHOLD,
    observer: Optional[DiagnosticsSinkPort] = None,
) -> Dict[TripField, Any]:
    """Resolve accepted tokens into one value per field.

    Args:
        tokens: Accepted tokens from the scan.
        threshold: Minimum confidence for a token to count.
        observer: Optional diagnostics sink.

    Returns:
        Mapping of resolved fields to values. Unresolved fields are absent.
    """
    resolved: Dict[TripField, Any] = {}
    for trip_field, field_tokens in _group_by_field(tokens).items():
        if trip_field.is_list:
            value = resolve_list(field_tokens, threshold, observer)
            confidence = max(t.confidence for t in field_tokens)
            description = "union"
        else:
            best = resolve_scalar(field_tokens, threshold, observer)
            value = best.value if best is not None else None
            confidence = best.confidence if best is not None else None
            description = best.description if best is not None else ""

        if value is None:
            continue

        resolved[trip_field] = value
        logger.debug(
            "Field resolved",
            extra={"field": trip_field.value, "pattern": description, "confidence": confidence},
        )
        if observer is not None:
            observer.record(
                DiagnosticEvent(
                    kind=DiagnosticKind.RESOLVED,
                    field=trip_field,
                    pattern_description=description,
                    confidence=confidence,
                    accepted=True,
                )
            )
    return resolved
