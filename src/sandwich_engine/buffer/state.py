"""Read-only editor snapshot handed to selectors and finders."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from .positions import Position, Range

LineReader = Callable[[int], str]


def line_reader(lines: Sequence[str]) -> LineReader:
    """Return a ``line -> text`` accessor that yields ``""`` out of range."""

    frozen = tuple(lines)

    def read(line: int) -> str:
        if 0 <= line < len(frozen):
            return frozen[line]
        return ""

    return read


@dataclass(frozen=True, slots=True)
class EditorState:
    """Immutable view of the document, cursor and selection.

    ``document_text`` uses ``"\\n"`` line terminators; ``get_line_text`` must
    agree with it line by line, otherwise offsets drift.
    """

    document_text: str
    cursor: Position
    selection: Range
    get_line_text: LineReader

    @classmethod
    def from_text(
        cls,
        text: str,
        cursor: Position,
        selection: Optional[Range] = None,
    ) -> "EditorState":
        return cls(
            document_text=text,
            cursor=cursor,
            selection=selection or Range.empty(cursor),
            get_line_text=line_reader(text.split("\n")),
        )

    @property
    def line_count(self) -> int:
        return self.document_text.count("\n") + 1

    @property
    def has_selection(self) -> bool:
        return not self.selection.is_empty


__all__ = ["EditorState", "LineReader", "line_reader"]
