"""Boundary types between regions and the buffers they are anchored to."""

from __future__ import annotations

from typing import Optional, Protocol

from .range import Point, Range, RangeLike


class TrackedRange(Protocol):
    """Live handle whose range follows edits to its buffer."""

    def get_range(self) -> Range:
        """Return the range currently covered by the handle."""
        ...


class Markable(Protocol):
    """Anything that can start tracking a range (usually a text buffer)."""

    def mark_range(
        self,
        range_: RangeLike,
        *,
        invalidate: str = "overlap",
        exclusive: Optional[bool] = None,
    ) -> TrackedRange:
        """Create a handle tracking ``range_`` across future edits."""
        ...


class TextSource(Protocol):
    """Read access needed to render regions as unified-diff text."""

    def get_text_in_range(self, range_: RangeLike) -> str:
        """Return the raw text in ``range_``, internal line endings included."""
        ...

    def line_ending_for_row(self, row: int) -> str:
        """Return the terminator of ``row``; empty for the last row."""
        ...


class BufferValidationError(RuntimeError):
    """Raised when a buffer is asked about rows or points it does not have."""

    def __init__(self, message: str, *, point: Point | None = None) -> None:
        super().__init__(message)
        self.point = point


class BufferDestroyedError(RuntimeError):
    """Raised when a destroyed buffer (or one of its markers) is used."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Buffer '{name}' has been destroyed")
        self.name = name


__all__ = [
    "BufferDestroyedError",
    "BufferValidationError",
    "Markable",
    "TextSource",
    "TrackedRange",
]
