"""Row/column points and ranges over a text buffer."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterator, Tuple, Union

# Column sentinel for "end of this row"; buffers clip it to the line length.
END_OF_LINE = sys.maxsize


@dataclass(frozen=True, slots=True, order=True)
class Point:
    """Zero-based (row, column) position."""

    row: int
    column: int

    @classmethod
    def from_object(cls, value: "PointLike") -> "Point":
        if isinstance(value, Point):
            return value
        row, column = value
        return cls(int(row), int(column))

    def __iter__(self) -> Iterator[int]:
        yield self.row
        yield self.column


PointLike = Union[Point, Tuple[int, int]]


@dataclass(frozen=True, slots=True)
class Range:
    """Span between two points with ``start <= end``.

    Row queries are inclusive of both endpoint rows, so a range that starts
    and ends on the same row covers exactly one row.
    """

    start: Point
    end: Point

    def __post_init__(self) -> None:
        start = Point.from_object(self.start)
        end = Point.from_object(self.end)
        if end < start:
            start, end = end, start
        object.__setattr__(self, "start", start)
        object.__setattr__(self, "end", end)

    @classmethod
    def from_object(cls, value: "RangeLike") -> "Range":
        if isinstance(value, Range):
            return value
        start, end = value
        return cls(Point.from_object(start), Point.from_object(end))

    @classmethod
    def for_rows(cls, start_row: int, end_row: int) -> "Range":
        """Whole-line range from the start of ``start_row`` to the end of ``end_row``."""

        return cls(Point(start_row, 0), Point(end_row, END_OF_LINE))

    def is_empty(self) -> bool:
        return self.start == self.end

    def get_rows(self) -> list[int]:
        return list(range(self.start.row, self.end.row + 1))

    def get_row_count(self) -> int:
        return self.end.row - self.start.row + 1

    def intersects_row(self, row: int) -> bool:
        return self.start.row <= row <= self.end.row

    def __iter__(self) -> Iterator[Point]:
        yield self.start
        yield self.end

    def __repr__(self) -> str:
        def fmt(point: Point) -> str:
            column = "EOL" if point.column == END_OF_LINE else point.column
            return f"({point.row}, {column})"

        return f"Range({fmt(self.start)}, {fmt(self.end)})"


RangeLike = Union[Range, Tuple[PointLike, PointLike]]

__all__ = ["END_OF_LINE", "Point", "PointLike", "Range", "RangeLike"]
