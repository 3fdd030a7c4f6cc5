"""Text buffer, range and marker types regions are anchored to."""

from .buffer import BufferDelta, TextBuffer, Transaction
from .document import BufferDocument
from .marker import Marker, MarkerOptions
from .range import END_OF_LINE, Point, Range
from .sync import (
    BufferDestroyedError,
    BufferValidationError,
    Markable,
    TextSource,
    TrackedRange,
)
from .validation import ensure_row

__all__ = [
    "BufferDelta",
    "BufferDestroyedError",
    "BufferDocument",
    "BufferValidationError",
    "END_OF_LINE",
    "Markable",
    "Marker",
    "MarkerOptions",
    "Point",
    "Range",
    "TextBuffer",
    "TextSource",
    "TrackedRange",
    "Transaction",
    "ensure_row",
]
