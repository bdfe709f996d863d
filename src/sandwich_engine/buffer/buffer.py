"""Mutable host buffer: document plus cursor and selection."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import ContextManager, Optional, Sequence

from sandwich_engine.runtime import telemetry

from .document import BufferDocument
from .offsets import offset_to_position, position_to_offset
from .positions import Position, Range, TextEdit
from .state import EditorState
from .validation import ensure_position


@dataclass(slots=True)
class BufferDelta:
    version: int
    text: str
    cursor: Position
    edits: tuple[TextEdit, ...]
    label: str


class Buffer:
    """Owns the document a host edits; the core only ever sees snapshots."""

    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[BufferDocument] = None,
        cursor: Optional[Position] = None,
        selection: Optional[Range] = None,
    ) -> None:
        self.name = name
        self.document = document or BufferDocument()
        self.cursor = ensure_position(self.document, cursor or Position(0, 0))
        self.selection = selection

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        name: str = "default",
        cursor: Optional[Position] = None,
        selection: Optional[Range] = None,
    ) -> "Buffer":
        return cls(
            name=name,
            document=BufferDocument.from_text(text),
            cursor=cursor,
            selection=selection,
        )

    @property
    def text(self) -> str:
        return self.document.text

    def snapshot(self) -> EditorState:
        return self.document.state(self.cursor, self.selection)

    def set_cursor(self, line: int, character: int) -> None:
        self.cursor = ensure_position(self.document, Position(line, character))

    def set_selection(self, anchor: Position, active: Position) -> None:
        ensure_position(self.document, anchor)
        self.cursor = ensure_position(self.document, active)
        self.selection = Range.ordered(anchor, active)

    def clear_selection(self) -> None:
        self.selection = None

    def apply_edits(
        self, edits: Sequence[TextEdit], *, label: str = "apply_edits"
    ) -> BufferDelta:
        with Transaction(self, label) as tx:
            before = self.snapshot()
            cursor_offset = position_to_offset(before, self.cursor)
            for edit in edits:
                if position_to_offset(before, edit.range.end) <= cursor_offset:
                    cursor_offset += len(edit.new_text) - (
                        position_to_offset(before, edit.range.end)
                        - position_to_offset(before, edit.range.start)
                    )
            self.document = self.document.apply_edits(edits)
            self.cursor = offset_to_position(self.snapshot(), cursor_offset)
            self.selection = None
            tx.add_metadata("edit_count", len(edits))

        return BufferDelta(
            version=self.document.version,
            text=self.document.text,
            cursor=self.cursor,
            edits=tuple(edits),
            label=label,
        )


class Transaction(AbstractContextManager["Transaction"]):
    """Wraps a buffer mutation in a telemetry span."""

    def __init__(self, buffer: Buffer, label: str) -> None:
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


__all__ = ["Buffer", "BufferDelta", "Transaction"]
