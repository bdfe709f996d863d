from __future__ import annotations

import pytest

from sandwich_engine.buffer import (
    EditorState,
    Position,
    Range,
    offset_to_position,
    position_to_offset,
    text_in_range,
)
from sandwich_engine.errors import OffsetOverflowError


def make_state(text: str, line: int = 0, character: int = 0) -> EditorState:
    return EditorState.from_text(text, Position(line, character))


def all_positions(text: str) -> list[Position]:
    return [
        Position(line, character)
        for line, content in enumerate(text.split("\n"))
        for character in range(len(content) + 1)
    ]


@pytest.mark.parametrize(
    "text",
    ["", "single line", "line1\n    line2\nline3", "trailing\n", "\n\nblank\n\n"],
)
def test_offset_round_trip(text: str) -> None:
    state = make_state(text)

    for position in all_positions(text):
        offset = position_to_offset(state, position)
        assert offset_to_position(state, offset) == position


def test_position_to_offset_counts_newlines() -> None:
    state = make_state("ab\ncde\nf")

    assert position_to_offset(state, Position(0, 0)) == 0
    assert position_to_offset(state, Position(1, 0)) == 3
    assert position_to_offset(state, Position(2, 1)) == 8


def test_offset_to_position_end_of_document() -> None:
    state = make_state("ab\ncd")

    assert offset_to_position(state, 5) == Position(1, 2)


def test_offset_past_end_raises() -> None:
    state = make_state("ab\ncd")

    with pytest.raises(OffsetOverflowError):
        offset_to_position(state, 6)
    with pytest.raises(OffsetOverflowError):
        offset_to_position(state, -1)


def test_text_in_range_single_line() -> None:
    state = make_state("line1\nline2 selected\nline3")

    assert text_in_range(state, Range(Position(1, 6), Position(1, 14))) == "selected"


def test_text_in_range_multi_line() -> None:
    state = make_state("line1\nline2 selected\nline3")

    span = Range(Position(0, 2), Position(2, 3))

    assert text_in_range(state, span) == "ne1\nline2 selected\nlin"


def test_out_of_range_line_reads_empty() -> None:
    state = make_state("only")

    assert state.get_line_text(3) == ""
    assert state.get_line_text(-1) == ""


def test_range_rejects_reversed_positions() -> None:
    with pytest.raises(ValueError):
        Range(Position(1, 0), Position(0, 5))

    ordered = Range.ordered(Position(1, 0), Position(0, 5))
    assert ordered.start == Position(0, 5)
    assert ordered.end == Position(1, 0)


def test_position_rejects_negative_values() -> None:
    with pytest.raises(ValueError):
        Position(-1, 0)
