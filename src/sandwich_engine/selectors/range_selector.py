"""Target ranges for the add operation."""

from __future__ import annotations

import re
from typing import Optional

from sandwich_engine.buffer import EditorState, Position, Range, position_to_offset
from sandwich_engine.errors import UnknownSelectionModeError
from sandwich_engine.runtime.telemetry import span

from . import patterns
from .models import DetectedRange, SelectionMode

_NON_WHITESPACE = re.compile(r"\S")


def select_range(
    mode: SelectionMode | str, state: EditorState
) -> Optional[DetectedRange]:
    """Compute the range an add operation wraps, or ``None`` if there is none.

    ``mode`` may be a ``SelectionMode`` or its label (``"_"``, ``"s"``,
    ``"it"``, ``"at"``, ``"st"``); anything else raises
    ``UnknownSelectionModeError``.
    """

    try:
        resolved = SelectionMode(mode)
    except ValueError as exc:
        raise UnknownSelectionModeError(mode) from exc

    with span(
        "selectors::select_range",
        component="selectors",
        metadata={"mode": resolved.name, "cursor": state.cursor},
    ) as handle:
        if resolved is SelectionMode.ENTIRE_LINE:
            result = _entire_line(state)
        elif resolved is SelectionMode.CURRENT_SELECTION:
            result = _current_selection(state)
        elif resolved is SelectionMode.TAG_INNER:
            result = _enclosing_tag(state, inner=True)
        elif resolved is SelectionMode.TAG_OUTER:
            result = _enclosing_tag(state, inner=False)
        elif resolved is SelectionMode.SELF_CLOSING_TAG:
            result = _self_closing_tag(state)
        else:  # pragma: no cover - every enum member is handled above
            raise UnknownSelectionModeError(resolved)
        handle.mark("match" if result else "miss")
        return result


def _entire_line(state: EditorState) -> DetectedRange:
    line = state.cursor.line
    text = state.get_line_text(line)
    first = _NON_WHITESPACE.search(text)
    start = first.start() if first else 0
    return DetectedRange.bare(
        state, Range(Position(line, start), Position(line, len(text)))
    )


def _current_selection(state: EditorState) -> Optional[DetectedRange]:
    if not state.has_selection:
        return None
    return DetectedRange.bare(state, state.selection)


def _enclosing_tag(state: EditorState, *, inner: bool) -> Optional[DetectedRange]:
    """Tag around the cursor, found closing tag first.

    The opening is the textually last ``<name ...>`` before the closing tag,
    with no nesting awareness, so deeply nested same-name tags can pair up
    wrongly.
    """

    text = state.document_text
    cursor = position_to_offset(state, state.cursor)

    closing = patterns.first_at_or_after(patterns.CLOSING_TAG, text, cursor)
    if closing is None:
        return None
    opening = patterns.last_before(
        patterns.opening_tag(closing.group(1)), text, closing.start()
    )
    if opening is None:
        return None

    spans = {"opening": opening.span(), "closing": closing.span()}
    if inner:
        return DetectedRange.from_offsets(state, **spans)
    return DetectedRange.from_offsets(
        state, inner=(opening.start(), closing.end()), **spans
    )


def _self_closing_tag(state: EditorState) -> Optional[DetectedRange]:
    cursor = position_to_offset(state, state.cursor)
    best = None
    for match in patterns.SELF_CLOSING_TAG.finditer(state.document_text):
        if match.start() <= cursor <= match.end():
            best = match
            break
        if match.start() > cursor:
            best = match
            break
    if best is None:
        return None
    whole = best.span()
    return DetectedRange.from_offsets(state, opening=whole, closing=whole, inner=whole)


__all__ = ["select_range"]
