"""Diff hunk regions anchored to live text buffers."""

from .buffer import Point, Range, TextBuffer
from .regions import (
    Addition,
    Deletion,
    NoNewline,
    Region,
    RegionKind,
    RowIntersection,
    Unchanged,
    intersect_rows,
)

__all__ = [
    "Addition",
    "Deletion",
    "NoNewline",
    "Point",
    "Range",
    "Region",
    "RegionKind",
    "RowIntersection",
    "TextBuffer",
    "Unchanged",
    "intersect_rows",
]

__version__ = "0.1.0"
