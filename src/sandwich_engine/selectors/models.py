"""Result and mode types shared by the range selector and pair finder."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from sandwich_engine.buffer import EditorState, Range, range_from_offsets, text_in_range


class SelectionMode(str, Enum):
    """Target of an add operation; values are the picker labels."""

    ENTIRE_LINE = "_"
    CURRENT_SELECTION = "s"
    TAG_INNER = "it"
    TAG_OUTER = "at"
    SELF_CLOSING_TAG = "st"


@dataclass(frozen=True, slots=True)
class DetectedRange:
    """Span to operate on plus the exact delimiter spans around it.

    ``range`` is the content between a pair (or the line/selection for add);
    ``opening_span``/``closing_span`` are what delete and replace rewrite.
    """

    range: Range
    opening_span: Range
    closing_span: Range
    text: str

    @classmethod
    def bare(cls, state: EditorState, span: Range) -> "DetectedRange":
        """A range with no delimiters: zero-width spans at its boundaries."""

        return cls(
            range=span,
            opening_span=Range.empty(span.start),
            closing_span=Range.empty(span.end),
            text=text_in_range(state, span),
        )

    @classmethod
    def from_offsets(
        cls,
        state: EditorState,
        *,
        opening: tuple[int, int],
        closing: tuple[int, int],
        inner: tuple[int, int] | None = None,
    ) -> "DetectedRange":
        """Build from ``(start, end)`` offsets; ``inner`` defaults to the gap."""

        inner_start, inner_end = inner or (opening[1], closing[0])
        span = range_from_offsets(state, inner_start, inner_end)
        return cls(
            range=span,
            opening_span=range_from_offsets(state, *opening),
            closing_span=range_from_offsets(state, *closing),
            text=text_in_range(state, span),
        )


__all__ = ["SelectionMode", "DetectedRange"]
