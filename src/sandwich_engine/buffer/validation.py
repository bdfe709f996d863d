"""Validation helpers shared across buffer services."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence, Tuple

from sandwich_engine.errors import BufferValidationError

from .positions import Position

if TYPE_CHECKING:  # pragma: no cover
    from .document import BufferDocument


def ensure_position(document: "BufferDocument", position: Position) -> Position:
    if position.line >= document.line_count:
        raise BufferValidationError("Line out of range", position=position)
    if position.character > len(document.get_line(position.line)):
        raise BufferValidationError("Character out of range", position=position)
    return position


def ensure_non_overlapping(spans: Sequence[Tuple[int, int]]) -> None:
    """``spans`` must be sorted; touching spans are fine, overlaps are not."""

    for (_, prev_end), (start, end) in zip(spans, spans[1:]):
        if start < prev_end:
            raise BufferValidationError(
                f"Edit at offsets {start}-{end} overlaps an earlier edit"
            )
