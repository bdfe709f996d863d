"""Line-indexed document storage used by hosts to apply text edits."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

from .offsets import position_to_offset
from .positions import Position, Range, TextEdit
from .state import EditorState, line_reader
from .validation import ensure_non_overlapping, ensure_position


@dataclass(slots=True)
class BufferDocument:
    """Immutable-ish text storage built on a simple list-of-lines model.

    Lines are split on ``"\\n"`` only, so offsets computed from the joined
    text line up with ``get_line`` character for character.
    """

    _lines: List[str] = field(default_factory=lambda: [""])
    version: int = 0

    @classmethod
    def from_text(cls, text: str) -> "BufferDocument":
        return cls(_lines=text.split("\n"), version=0)

    def snapshot(self) -> Sequence[str]:
        """Return the current lines without exposing internal mutability."""

        return tuple(self._lines)

    @property
    def text(self) -> str:
        return "\n".join(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, index: int) -> str:
        if 0 <= index < len(self._lines):
            return self._lines[index]
        return ""

    def state(
        self, cursor: Position, selection: Optional[Range] = None
    ) -> EditorState:
        return EditorState(
            document_text=self.text,
            cursor=cursor,
            selection=selection or Range.empty(cursor),
            get_line_text=line_reader(self._lines),
        )

    def apply_edits(self, edits: Iterable[TextEdit]) -> "BufferDocument":
        """Return a document with every edit applied simultaneously.

        All ranges refer to this document; they are applied back to front so
        earlier edits never shift later ones.
        """

        probe = self.state(Position(0, 0))
        located = []
        for edit in edits:
            ensure_position(self, edit.range.start)
            ensure_position(self, edit.range.end)
            start = position_to_offset(probe, edit.range.start)
            end = position_to_offset(probe, edit.range.end)
            located.append((start, end, edit.new_text))

        located.sort(key=lambda item: (item[0], item[1]))
        ensure_non_overlapping([(start, end) for start, end, _ in located])

        text = self.text
        for start, end, new_text in reversed(located):
            text = text[:start] + new_text + text[end:]
        return BufferDocument(_lines=text.split("\n"), version=self.version + 1)


__all__ = ["BufferDocument"]
