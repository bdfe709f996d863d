"""Conversions between positions and flat document offsets."""

from __future__ import annotations

from sandwich_engine.errors import OffsetOverflowError

from .positions import Position, Range
from .state import EditorState


def position_to_offset(state: EditorState, position: Position) -> int:
    offset = 0
    for line in range(position.line):
        offset += len(state.get_line_text(line)) + 1  # newline
    return offset + position.character


def offset_to_position(state: EditorState, offset: int) -> Position:
    """Inverse of ``position_to_offset``.

    The scan is capped at the snapshot's line count so a bogus offset raises
    ``OffsetOverflowError`` rather than walking phantom empty lines forever.
    """

    if offset < 0:
        raise OffsetOverflowError(offset, line_count=state.line_count)

    ceiling = state.line_count
    running = 0
    line = 0
    while line < ceiling:
        line_len = len(state.get_line_text(line)) + 1
        if running + line_len > offset:
            return Position(line, offset - running)
        running += line_len
        line += 1
    raise OffsetOverflowError(offset, line_count=ceiling)


def range_from_offsets(state: EditorState, start: int, end: int) -> Range:
    return Range(offset_to_position(state, start), offset_to_position(state, end))


def text_in_range(state: EditorState, span: Range) -> str:
    start, end = span.start, span.end
    if start.line == end.line:
        return state.get_line_text(start.line)[start.character : end.character]

    parts = [state.get_line_text(start.line)[start.character :]]
    for line in range(start.line + 1, end.line):
        parts.append(state.get_line_text(line))
    parts.append(state.get_line_text(end.line)[: end.character])
    return "\n".join(parts)


__all__ = [
    "position_to_offset",
    "offset_to_position",
    "range_from_offsets",
    "text_in_range",
]
