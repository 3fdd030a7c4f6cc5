"""Text buffer facade combining line storage with live markers."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import ContextManager, Dict, Optional

from patch_regions.runtime import telemetry

from .document import BufferDocument, split_lines
from .marker import Marker, MarkerOptions
from .range import Point, Range, RangeLike
from .sync import BufferDestroyedError
from .validation import ensure_row, ensure_strategy


@dataclass(slots=True)
class BufferDelta:
    version: int
    old_range: Range
    new_range: Range
    label: str


class TextBuffer:
    def __init__(self, *, name: str = "default", document: Optional[BufferDocument] = None) -> None:
        self.name = name
        self.document = document or BufferDocument()
        self._markers: Dict[int, Marker] = {}
        self._destroyed = False

    @classmethod
    def from_text(cls, text: str, *, name: str = "default") -> "TextBuffer":
        return cls(name=name, document=BufferDocument.from_text(text))

    def ensure_alive(self) -> None:
        if self._destroyed:
            raise BufferDestroyedError(self.name)

    def is_destroyed(self) -> bool:
        return self._destroyed

    @property
    def line_count(self) -> int:
        self.ensure_alive()
        return self.document.line_count

    @property
    def version(self) -> int:
        return self.document.version

    def get_text(self) -> str:
        self.ensure_alive()
        return self.document.get_text()

    def get_text_in_range(self, range_: RangeLike) -> str:
        self.ensure_alive()
        return self.document.text_in_range(Range.from_object(range_))

    def line_ending_for_row(self, row: int) -> str:
        self.ensure_alive()
        return self.document.line_ending(ensure_row(self.document, row))

    def mark_range(
        self,
        range_: RangeLike,
        *,
        invalidate: str = "overlap",
        exclusive: Optional[bool] = None,
    ) -> Marker:
        self.ensure_alive()
        range_ = self.document.clip_range(Range.from_object(range_))
        options = MarkerOptions(
            invalidate=ensure_strategy(invalidate),
            exclusive=range_.is_empty() if exclusive is None else exclusive,
        )
        marker = Marker(self, range_, options)
        self._markers[marker.id] = marker
        return marker

    def get_markers(self) -> list[Marker]:
        return list(self._markers.values())

    def release_marker(self, marker: Marker) -> None:
        self._markers.pop(marker.id, None)

    def set_text_in_range(self, range_: RangeLike, text: str, *, label: str = "set_text") -> BufferDelta:
        self.ensure_alive()
        with Transaction(self, label) as tx:
            old_range = self.document.clip_range(Range.from_object(range_))
            self.document = self.document.replace(old_range, text)
            new_range = Range(old_range.start, _end_of_insert(old_range.start, text))
            tx.add_metadata("old_range", old_range)
            tx.add_metadata("new_range", new_range)
            for marker in list(self._markers.values()):
                marker.apply_edit(old_range, new_range.end)

        return BufferDelta(
            version=self.document.version,
            old_range=old_range,
            new_range=new_range,
            label=label,
        )

    def insert(self, point: Point, text: str) -> BufferDelta:
        return self.set_text_in_range(Range(point, point), text, label="insert")

    def delete(self, range_: RangeLike) -> BufferDelta:
        return self.set_text_in_range(range_, "", label="delete")

    def destroy(self) -> None:
        if self._destroyed:
            return
        for marker in list(self._markers.values()):
            marker.destroy()
        self._destroyed = True
        telemetry.record_event("buffer.destroy", level="debug", data={"buffer": self.name})


class Transaction(AbstractContextManager["Transaction"]):
    def __init__(self, buffer: TextBuffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[telemetry.SpanHandle]] = None
        self._handle: Optional[telemetry.SpanHandle] = None

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component="buffer",
            metadata={"buffer": self.buffer.name},
        )
        self._handle = self._span_cm.__enter__()
        return self

    def add_metadata(self, key: str, value: object) -> None:
        if self._handle is not None:
            self._handle.add_metadata(key, value)

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


def _end_of_insert(start: Point, text: str) -> Point:
    lines, _ = split_lines(text)
    if len(lines) == 1:
        return Point(start.row, start.column + len(lines[0]))
    return Point(start.row + len(lines) - 1, len(lines[-1]))
