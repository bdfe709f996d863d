"""Line/character coordinates, half-open ranges and text edits."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Zero-based ``(line, character)`` coordinate, ordered in document order."""

    line: int
    character: int

    def __post_init__(self) -> None:
        if self.line < 0 or self.character < 0:
            raise ValueError(f"Position must be non-negative, got {self!r}")


@dataclass(frozen=True, slots=True)
class Range:
    """Half-open span ``[start, end)``; may cover several lines."""

    start: Position
    end: Position

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError(f"Range end {self.end} precedes start {self.start}")

    @classmethod
    def empty(cls, position: Position) -> "Range":
        return cls(position, position)

    @classmethod
    def ordered(cls, a: Position, b: Position) -> "Range":
        """Build a range from two positions given in either order."""

        return cls(a, b) if a <= b else cls(b, a)

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    @property
    def is_single_line(self) -> bool:
        return self.start.line == self.end.line


@dataclass(frozen=True, slots=True)
class TextEdit:
    range: Range
    new_text: str


__all__ = ["Position", "Range", "TextEdit"]
