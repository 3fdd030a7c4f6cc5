"""The closed set of region kinds and how each one inverts."""

from __future__ import annotations

from enum import Enum


class RegionKind(str, Enum):
    """Kind of line span inside a diff hunk.

    Values double as the handler names accepted by ``Region.when``.
    """

    ADDITION = "addition"
    DELETION = "deletion"
    UNCHANGED = "unchanged"
    NO_NEWLINE = "nonewline"

    @property
    def origin(self) -> str:
        return _ORIGINS[self]

    @property
    def is_change(self) -> bool:
        return self in (RegionKind.ADDITION, RegionKind.DELETION)

    def inverted(self) -> "RegionKind":
        """Kind this region takes in the reversed patch."""

        return _INVERSES.get(self, self)

    @classmethod
    def from_origin(cls, origin: str) -> "RegionKind":
        for kind, char in _ORIGINS.items():
            if char == origin:
                return kind
        raise ValueError(f"Unknown origin character {origin!r}")


_ORIGINS = {
    RegionKind.ADDITION: "+",
    RegionKind.DELETION: "-",
    RegionKind.UNCHANGED: " ",
    RegionKind.NO_NEWLINE: "\\",
}

_INVERSES = {
    RegionKind.ADDITION: RegionKind.DELETION,
    RegionKind.DELETION: RegionKind.ADDITION,
}

__all__ = ["RegionKind"]
