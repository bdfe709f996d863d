"""Position model, editor snapshots and the host-side buffer."""

from .buffer import Buffer, BufferDelta, Transaction
from .document import BufferDocument
from .offsets import (
    offset_to_position,
    position_to_offset,
    range_from_offsets,
    text_in_range,
)
from .positions import Position, Range, TextEdit
from .state import EditorState, LineReader, line_reader
from .validation import ensure_position

__all__ = [
    "Position",
    "Range",
    "TextEdit",
    "EditorState",
    "LineReader",
    "line_reader",
    "position_to_offset",
    "offset_to_position",
    "range_from_offsets",
    "text_in_range",
    "BufferDocument",
    "Buffer",
    "BufferDelta",
    "Transaction",
    "ensure_position",
]
