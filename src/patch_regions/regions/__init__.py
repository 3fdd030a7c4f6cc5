"""Typed diff regions and the row intersection algorithm."""

from .intersect import RowIntersection, RowSet, intersect_rows
from .kinds import RegionKind
from .region import (
    Addition,
    Deletion,
    NoNewline,
    Region,
    Unchanged,
    region_for_origin,
)

__all__ = [
    "Addition",
    "Deletion",
    "NoNewline",
    "Region",
    "RegionKind",
    "RowIntersection",
    "RowSet",
    "Unchanged",
    "intersect_rows",
    "region_for_origin",
]
