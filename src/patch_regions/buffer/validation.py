"""Validation helpers shared across buffer services."""

from __future__ import annotations

from .document import BufferDocument
from .range import Point
from .sync import BufferValidationError

INVALIDATION_STRATEGIES = frozenset({"never", "overlap"})


def ensure_row(document: BufferDocument, row: int) -> int:
    if row < 0 or row >= document.line_count:
        raise BufferValidationError(
            f"Row {row} out of range (0..{document.line_count - 1})",
            point=Point(row, 0),
        )
    return row


def ensure_strategy(invalidate: str) -> str:
    if invalidate not in INVALIDATION_STRATEGIES:
        raise ValueError(
            f"Unsupported invalidation strategy '{invalidate}'; "
            f"expected one of {sorted(INVALIDATION_STRATEGIES)}"
        )
    return invalidate
