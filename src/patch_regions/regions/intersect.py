"""Split a row span into alternating runs of member and gap rows."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Container, List, Union

from patch_regions.buffer.range import Range

RowSet = Union[Container[int], Callable[[int], bool]]


@dataclass(frozen=True, slots=True)
class RowIntersection:
    """One run produced by ``intersect_rows``.

    ``intersection`` covers whole lines, from column 0 of the first row to
    the end of the last row. ``gap`` is true when none of its rows belong to
    the row set and false when all of them do.
    """

    intersection: Range
    gap: bool

    @property
    def start_row(self) -> int:
        return self.intersection.start.row

    @property
    def end_row(self) -> int:
        return self.intersection.end.row


def _membership(row_set: RowSet) -> Callable[[int], bool]:
    if callable(row_set):
        return row_set
    return row_set.__contains__


def intersect_rows(
    start_row: int, end_row: int, row_set: RowSet, include_gaps: bool
) -> List[RowIntersection]:
    """Partition rows ``start_row..end_row`` (inclusive) against ``row_set``.

    For rows 10-20 and ``{11, 12, 13, 17, 19}`` the runs are::

        10 gap | 11-13 | 14-16 gap | 17 | 18 gap | 19 | 20 gap

    With ``include_gaps`` false only the member runs are returned. Runs are
    maximal, so consecutive runs always alternate between member and gap.
    A span with no rows (``end_row < start_row``) yields nothing.
    """

    is_member = _membership(row_set)
    intersections: List[RowIntersection] = []
    within_intersection = False
    current_row = start_row
    next_start_row = start_row

    def finish_row_range(is_gap: bool) -> None:
        nonlocal next_start_row
        if is_gap and not include_gaps:
            next_start_row = current_row
            return
        # Nothing has been scanned yet.
        if current_row <= start_row:
            return
        intersections.append(
            RowIntersection(Range.for_rows(next_start_row, current_row - 1), is_gap)
        )
        next_start_row = current_row

    while current_row <= end_row:
        member = is_member(current_row)
        if member and not within_intersection:
            finish_row_range(True)
            within_intersection = True
        elif not member and within_intersection:
            finish_row_range(False)
            within_intersection = False
        current_row += 1

    # The run still open has the kind the scan ended in.
    finish_row_range(is_gap=not within_intersection)
    return intersections


__all__ = ["RowIntersection", "RowSet", "intersect_rows"]
