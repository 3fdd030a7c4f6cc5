"""Markers: ranges that follow edits made to their buffer."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import count
from typing import TYPE_CHECKING

from .range import Point, Range

if TYPE_CHECKING:  # pragma: no cover
    from .buffer import TextBuffer

_marker_ids = count(1)


@dataclass(frozen=True, slots=True)
class MarkerOptions:
    """How a marker reacts to edits.

    ``invalidate="never"`` keeps the marker valid whatever happens to its
    text; ``"overlap"`` invalidates it when an edit surrounds its start or
    its end, while edits strictly inside it leave it valid.
    A non-``exclusive`` marker grows to include text inserted exactly at one
    of its endpoints; an exclusive one leaves such text outside.
    """

    invalidate: str = "overlap"
    exclusive: bool = False


def _shift_past(point: Point, old: Range, new_end: Point) -> Point:
    if point.row == old.end.row:
        return Point(new_end.row, new_end.column + point.column - old.end.column)
    return Point(point.row + new_end.row - old.end.row, point.column)


def _surrounds_boundary(old: Range, current: Range) -> bool:
    if old.is_empty():
        return False
    if old.start <= current.start and current.end <= old.end:
        return True
    return old.start < current.start < old.end or old.start < current.end < old.end


def adjust_range(current: Range, old: Range, new_end: Point, *, exclusive: bool) -> Range:
    """Return ``current`` as it reads after ``old`` is replaced by text ending at ``new_end``."""

    insertion = old.is_empty()
    start, end = current

    if start > old.end:
        start = _shift_past(start, old, new_end)
    elif start == old.start:
        if insertion and exclusive:
            start = new_end
    elif start > old.start:
        start = new_end

    if end > old.end:
        end = _shift_past(end, old, new_end)
    elif end == old.end:
        if not (insertion and exclusive):
            end = new_end
    elif end >= old.start:
        end = old.start

    if end < start:
        end = start
    return Range(start, end)


class Marker:
    """Tracked range owned by a ``TextBuffer``."""

    def __init__(self, buffer: "TextBuffer", range_: Range, options: MarkerOptions) -> None:
        self.id = next(_marker_ids)
        self.buffer = buffer
        self.options = options
        self._range = range_
        self._valid = True
        self._destroyed = False

    def get_range(self) -> Range:
        self.buffer.ensure_alive()
        return self._range

    def is_valid(self) -> bool:
        return self._valid and not self._destroyed

    def is_destroyed(self) -> bool:
        return self._destroyed

    def destroy(self) -> None:
        if self._destroyed:
            return
        self._destroyed = True
        self.buffer.release_marker(self)

    def apply_edit(self, old: Range, new_end: Point) -> None:
        if self.options.invalidate == "overlap" and _surrounds_boundary(old, self._range):
            self._valid = False
        self._range = adjust_range(
            self._range, old, new_end, exclusive=self.options.exclusive
        )

    def __repr__(self) -> str:
        return f"Marker(id={self.id}, range={self._range!r}, valid={self.is_valid()})"


__all__ = ["Marker", "MarkerOptions", "adjust_range"]
