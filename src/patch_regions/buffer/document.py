"""Line storage for text buffers."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Tuple

from .range import Point, Range

_LINE_BREAK = re.compile(r"\r?\n")


def split_lines(text: str) -> Tuple[List[str], List[str]]:
    """Split ``text`` into lines and the terminator that follows each line.

    The final line always has an empty terminator, so a text ending in a
    newline yields a trailing empty line.
    """

    lines: List[str] = []
    endings: List[str] = []
    position = 0
    for match in _LINE_BREAK.finditer(text):
        lines.append(text[position : match.start()])
        endings.append(match.group())
        position = match.end()
    lines.append(text[position:])
    endings.append("")
    return lines, endings


@dataclass(slots=True)
class BufferDocument:
    """Immutable-ish list-of-lines text model that remembers line endings."""

    _lines: List[str] = field(default_factory=lambda: [""])
    _endings: List[str] = field(default_factory=lambda: [""])
    version: int = 0

    @classmethod
    def from_text(cls, text: str) -> "BufferDocument":
        lines, endings = split_lines(text)
        return cls(_lines=lines, _endings=endings)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, row: int) -> str:
        return self._lines[row]

    def line_ending(self, row: int) -> str:
        return self._endings[row]

    def get_text(self) -> str:
        return "".join(line + ending for line, ending in zip(self._lines, self._endings))

    def clip_point(self, point: Point) -> Point:
        if point.row < 0:
            return Point(0, 0)
        if point.row >= self.line_count:
            last = self.line_count - 1
            return Point(last, len(self._lines[last]))
        column = max(0, min(point.column, len(self._lines[point.row])))
        return Point(point.row, column)

    def clip_range(self, range_: Range) -> Range:
        return Range(self.clip_point(range_.start), self.clip_point(range_.end))

    def offset_for_point(self, point: Point) -> int:
        point = self.clip_point(point)
        offset = 0
        for row in range(point.row):
            offset += len(self._lines[row]) + len(self._endings[row])
        return offset + point.column

    def text_in_range(self, range_: Range) -> str:
        text = self.get_text()
        clipped = self.clip_range(range_)
        return text[self.offset_for_point(clipped.start) : self.offset_for_point(clipped.end)]

    def replace(self, range_: Range, text: str) -> "BufferDocument":
        """Return a document with ``range_`` replaced by ``text`` and a bumped version."""

        current = self.get_text()
        clipped = self.clip_range(range_)
        start = self.offset_for_point(clipped.start)
        end = self.offset_for_point(clipped.end)
        lines, endings = split_lines(current[:start] + text + current[end:])
        return BufferDocument(_lines=lines, _endings=endings, version=self.version + 1)


__all__ = ["BufferDocument", "split_lines"]
