from __future__ import annotations

from typing import Callable, Dict

import pytest

from patch_regions.buffer import (
    BufferDestroyedError,
    Point,
    Range,
    TextBuffer,
)
from patch_regions.regions import (
    Addition,
    Deletion,
    NoNewline,
    Region,
    RegionKind,
    Unchanged,
    region_for_origin,
)

VARIANTS = [Addition, Deletion, Unchanged, NoNewline]


def make_buffer(text: str = "a\nb\nc\nd\n") -> TextBuffer:
    return TextBuffer.from_text(text, name="patch")


def make_region(
    factory: Callable[..., Region] = Addition,
    rows: tuple[int, int] = (0, 1),
    buffer: TextBuffer | None = None,
) -> Region:
    buffer_obj = buffer or make_buffer()
    return factory(buffer_obj.mark_range(Range.for_rows(*rows)))


def test_row_queries_follow_marker() -> None:
    region = make_region(rows=(1, 3))

    assert region.get_start_buffer_row() == 1
    assert region.get_end_buffer_row() == 3
    assert region.get_buffer_rows() == [1, 2, 3]
    assert region.buffer_row_count() == 3
    assert region.includes_buffer_row(2)
    assert not region.includes_buffer_row(0)
    assert not region.includes_buffer_row(4)


def test_row_queries_track_buffer_edits() -> None:
    buffer = make_buffer()
    region = make_region(rows=(1, 2), buffer=buffer)

    buffer.insert(Point(0, 0), "x\ny\n")

    assert region.get_buffer_rows() == [3, 4]


@pytest.mark.parametrize(
    ("factory", "kind", "origin", "is_change"),
    [
        (Addition, RegionKind.ADDITION, "+", True),
        (Deletion, RegionKind.DELETION, "-", True),
        (Unchanged, RegionKind.UNCHANGED, " ", False),
        (NoNewline, RegionKind.NO_NEWLINE, "\\", False),
    ],
)
def test_variant_identity(factory, kind: RegionKind, origin: str, is_change: bool) -> None:
    region = make_region(factory)

    assert region.kind is kind
    assert region.origin == origin
    assert region.is_change() is is_change
    predicates = [
        region.is_addition(),
        region.is_deletion(),
        region.is_unchanged(),
        region.is_no_newline(),
    ]
    assert predicates.count(True) == 1
    assert predicates[VARIANTS.index(factory)] is True


def test_addition_renders_with_prefix_on_every_line() -> None:
    buffer = make_buffer("a\nb\n")
    region = make_region(Addition, rows=(0, 1), buffer=buffer)

    assert region.to_string_in(buffer) == "+a\n+b\n"


def test_render_preserves_crlf_and_final_ending() -> None:
    buffer = make_buffer("x\r\ny\r\nz")
    deletion = make_region(Deletion, rows=(0, 1), buffer=buffer)
    last = make_region(Unchanged, rows=(2, 2), buffer=buffer)

    assert deletion.to_string_in(buffer) == "-x\r\n-y\r\n"
    assert last.to_string_in(buffer) == " z"


def test_render_no_newline_marker() -> None:
    buffer = make_buffer("a\n\\ No newline at end of file\n")
    region = make_region(NoNewline, rows=(1, 1), buffer=buffer)

    assert region.to_string_in(buffer) == "\\\\ No newline at end of file\n"


def test_render_empty_line() -> None:
    buffer = make_buffer("a\n\nb\n")
    region = make_region(Addition, rows=(1, 1), buffer=buffer)

    assert region.to_string_in(buffer) == "+\n"


def test_intersect_rows_uses_region_span() -> None:
    buffer = make_buffer("\n" * 25)
    region = make_region(Unchanged, rows=(10, 20), buffer=buffer)

    runs = region.intersect_rows({11, 12, 13, 17, 19}, True)

    assert [(run.start_row, run.end_row, run.gap) for run in runs] == [
        (10, 10, True),
        (11, 13, False),
        (14, 16, True),
        (17, 17, False),
        (18, 18, True),
        (19, 19, False),
        (20, 20, True),
    ]


def test_when_dispatches_by_kind_name() -> None:
    handlers: Dict[str, Callable[[], str]] = {
        "addition": lambda: "added",
        "deletion": lambda: "deleted",
        "unchanged": lambda: "same",
        "nonewline": lambda: "eof",
    }

    results = [make_region(factory).when(handlers) for factory in VARIANTS]

    assert results == ["added", "deleted", "same", "eof"]


def test_when_falls_back_to_default() -> None:
    region = make_region(Deletion)

    assert region.when({"addition": lambda: 1, "default": lambda: 2}) == 2


def test_when_without_match_is_silent() -> None:
    region = make_region(Unchanged)
    calls = []

    assert region.when({"addition": lambda: calls.append("called")}) is None
    assert calls == []


@pytest.mark.parametrize(
    ("factory", "expected"),
    [
        (Addition, RegionKind.DELETION),
        (Deletion, RegionKind.ADDITION),
        (Unchanged, RegionKind.UNCHANGED),
        (NoNewline, RegionKind.NO_NEWLINE),
    ],
)
def test_invert_in_mirrors_onto_next_buffer(factory, expected: RegionKind) -> None:
    buffer = make_buffer()
    next_buffer = make_buffer()
    region = make_region(factory, rows=(1, 2), buffer=buffer)
    original_marker = region.get_marker()

    inverted = region.invert_in(next_buffer)

    assert inverted is not region
    assert inverted.kind is expected
    assert inverted.get_range() == region.get_range()
    assert inverted.get_marker() in next_buffer.get_markers()
    assert region.get_marker() is original_marker
    assert region.kind is factory(original_marker).kind


@pytest.mark.parametrize("factory", VARIANTS)
def test_invert_twice_restores_kind(factory) -> None:
    region = make_region(factory)

    twice = region.invert_in(make_buffer()).invert_in(make_buffer())

    assert twice.kind is region.kind


def test_re_mark_on_swaps_marker() -> None:
    buffer = make_buffer()
    next_buffer = make_buffer()
    region = make_region(Addition, rows=(1, 2), buffer=buffer)
    old_marker = region.get_marker()

    assert region.re_mark_on(next_buffer) is None

    marker = region.get_marker()
    assert marker is not old_marker
    assert marker.buffer is next_buffer
    assert marker.options.invalidate == "never"
    assert marker.options.exclusive is False
    assert region.get_range() == old_marker.get_range()
    assert region.is_addition()


def test_re_marked_region_extends_over_boundary_insert() -> None:
    buffer = make_buffer()
    region = make_region(Addition, rows=(1, 1), buffer=buffer)
    region.re_mark_on(buffer)

    buffer.insert(Point(1, 1), "\nb2")

    assert region.get_buffer_rows() == [1, 2]
    assert region.get_marker().is_valid()


def test_collaborator_errors_propagate() -> None:
    buffer = make_buffer()
    region = make_region(Addition, buffer=buffer)
    buffer.destroy()

    with pytest.raises(BufferDestroyedError):
        region.get_range()
    with pytest.raises(BufferDestroyedError):
        region.intersect_rows({0}, True)


def test_region_for_origin() -> None:
    marker = make_buffer().mark_range(Range.for_rows(0, 0))

    assert region_for_origin("-", marker).is_deletion()
    assert region_for_origin("\\", marker).is_no_newline()
    with pytest.raises(ValueError):
        region_for_origin("?", marker)


def test_kind_inversion_table() -> None:
    assert RegionKind.ADDITION.inverted() is RegionKind.DELETION
    assert RegionKind.DELETION.inverted() is RegionKind.ADDITION
    assert RegionKind.UNCHANGED.inverted() is RegionKind.UNCHANGED
    assert RegionKind.NO_NEWLINE.inverted() is RegionKind.NO_NEWLINE
    assert {kind for kind in RegionKind if kind.is_change} == {
        RegionKind.ADDITION,
        RegionKind.DELETION,
    }


def test_repr_shows_kind_and_rows() -> None:
    region = make_region(Deletion, rows=(1, 3))

    assert repr(region) == "Region(DELETION, rows=1-3)"
