"""Regions: typed line spans of a diff hunk anchored to a buffer marker."""

from __future__ import annotations

import re
from typing import Callable, List, Mapping, Optional, TypeVar

from patch_regions.buffer.range import Range
from patch_regions.buffer.sync import Markable, TextSource, TrackedRange
from patch_regions.runtime import telemetry

from .intersect import RowIntersection, RowSet, intersect_rows
from .kinds import RegionKind

T = TypeVar("T")

_LINE_BREAK = re.compile(r"\r?\n")


class Region:
    """A contiguous run of same-kind lines inside a hunk.

    The row span lives in the marker, so it follows edits to the buffer.
    ``kind`` is fixed for the lifetime of the instance; ``invert_in``
    returns a new region instead of changing it.
    """

    __slots__ = ("marker", "_kind")

    def __init__(self, marker: TrackedRange, kind: RegionKind) -> None:
        self.marker = marker
        self._kind = RegionKind(kind)

    @property
    def kind(self) -> RegionKind:
        return self._kind

    @property
    def origin(self) -> str:
        return self._kind.origin

    def get_marker(self) -> TrackedRange:
        return self.marker

    def get_range(self) -> Range:
        return self.marker.get_range()

    def get_start_buffer_row(self) -> int:
        return self.get_range().start.row

    def get_end_buffer_row(self) -> int:
        return self.get_range().end.row

    def includes_buffer_row(self, row: int) -> bool:
        return self.get_range().intersects_row(row)

    def get_buffer_rows(self) -> List[int]:
        return self.get_range().get_rows()

    def buffer_row_count(self) -> int:
        return self.get_range().get_row_count()

    def intersect_rows(self, row_set: RowSet, include_gaps: bool) -> List[RowIntersection]:
        """Break this region into runs of rows inside and outside ``row_set``."""

        range_ = self.get_range()
        return intersect_rows(range_.start.row, range_.end.row, row_set, include_gaps)

    def is_addition(self) -> bool:
        return self._kind is RegionKind.ADDITION

    def is_deletion(self) -> bool:
        return self._kind is RegionKind.DELETION

    def is_unchanged(self) -> bool:
        return self._kind is RegionKind.UNCHANGED

    def is_no_newline(self) -> bool:
        return self._kind is RegionKind.NO_NEWLINE

    def is_change(self) -> bool:
        return self._kind.is_change

    def when(self, handlers: Mapping[str, Callable[[], T]]) -> Optional[T]:
        """Call the handler named after this region's kind.

        Keys are ``addition``, ``deletion``, ``unchanged`` and ``nonewline``;
        ``default`` catches the rest. With neither present nothing is called
        and ``None`` is returned.
        """

        handler = handlers.get(self._kind.value) or handlers.get("default")
        if handler is None:
            return None
        return handler()

    def re_mark_on(self, markable: Markable) -> None:
        """Track the current range on ``markable`` instead of the old marker."""

        range_ = self.get_range()
        self.marker = markable.mark_range(range_, invalidate="never", exclusive=False)
        telemetry.record_event(
            "region.remark",
            level="debug",
            data={"kind": self._kind.value, "range": range_},
        )

    def invert_in(self, next_buffer: Markable) -> "Region":
        """Mirror this region onto ``next_buffer`` as it reads in the reversed patch."""

        range_ = self.get_range()
        inverted = Region(next_buffer.mark_range(range_), self._kind.inverted())
        telemetry.record_event(
            "region.invert",
            level="debug",
            data={
                "kind": self._kind.value,
                "inverted": inverted.kind.value,
                "range": range_,
            },
        )
        return inverted

    def to_string_in(self, buffer: TextSource) -> str:
        """Render the region's lines as unified-diff text read from ``buffer``."""

        range_ = self.get_range()
        raw = buffer.get_text_in_range(range_)
        origin = self.origin
        body = _LINE_BREAK.sub(lambda match: match.group() + origin, raw)
        return origin + body + buffer.line_ending_for_row(range_.end.row)

    def __repr__(self) -> str:
        range_ = self.get_range()
        return f"Region({self._kind.name}, rows={range_.start.row}-{range_.end.row})"


def Addition(marker: TrackedRange) -> Region:
    return Region(marker, RegionKind.ADDITION)


def Deletion(marker: TrackedRange) -> Region:
    return Region(marker, RegionKind.DELETION)


def Unchanged(marker: TrackedRange) -> Region:
    return Region(marker, RegionKind.UNCHANGED)


def NoNewline(marker: TrackedRange) -> Region:
    return Region(marker, RegionKind.NO_NEWLINE)


def region_for_origin(origin: str, marker: TrackedRange) -> Region:
    """Build the region whose unified-diff prefix is ``origin``."""

    return Region(marker, RegionKind.from_origin(origin))


__all__ = [
    "Addition",
    "Deletion",
    "NoNewline",
    "Region",
    "Unchanged",
    "region_for_origin",
]
