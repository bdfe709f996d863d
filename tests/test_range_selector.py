from __future__ import annotations

from typing import Optional

import pytest

from sandwich_engine.buffer import EditorState, Position, Range
from sandwich_engine.errors import InvalidOperationError, UnknownSelectionModeError
from sandwich_engine.selectors import SelectionMode, select_range


def make_state(
    text: str, line: int, character: int, selection: Optional[Range] = None
) -> EditorState:
    return EditorState.from_text(text, Position(line, character), selection)


def span(line: int, start: int, end: int) -> Range:
    return Range(Position(line, start), Position(line, end))


def test_entire_line_skips_leading_whitespace() -> None:
    state = make_state("line1\n    line2 with cursor\nline3", 1, 9)

    detected = select_range(SelectionMode.ENTIRE_LINE, state)

    assert detected is not None
    assert detected.range == span(1, 4, 21)
    assert detected.text == "line2 with cursor"
    assert detected.opening_span == Range.empty(Position(1, 4))
    assert detected.closing_span == Range.empty(Position(1, 21))


def test_entire_line_on_blank_line_is_empty_range() -> None:
    state = make_state("a\n   \nb", 1, 1)

    detected = select_range("_", state)

    assert detected is not None
    assert detected.range == span(1, 0, 3)
    assert detected.text == "   "


def test_current_selection_returns_selection() -> None:
    selection = span(1, 6, 14)
    state = make_state("line1\nline2 selected\nline3", 1, 14, selection)

    detected = select_range("s", state)

    assert detected is not None
    assert detected.range == selection
    assert detected.text == "selected"


def test_current_selection_without_selection_is_none() -> None:
    state = make_state("line1", 0, 2)

    assert select_range(SelectionMode.CURRENT_SELECTION, state) is None


def test_tag_inner_and_outer() -> None:
    state = make_state("<div>hello</div>", 0, 7)

    inner = select_range(SelectionMode.TAG_INNER, state)
    outer = select_range(SelectionMode.TAG_OUTER, state)

    assert inner is not None and outer is not None
    assert inner.range == span(0, 5, 10)
    assert inner.text == "hello"
    assert inner.opening_span == span(0, 0, 5)
    assert inner.closing_span == span(0, 10, 16)
    assert outer.range == span(0, 0, 16)
    assert outer.text == "<div>hello</div>"


def test_tag_inner_accepts_attributes() -> None:
    state = make_state('<a href="x">link</a>', 0, 13)

    detected = select_range("it", state)

    assert detected is not None
    assert detected.text == "link"
    assert detected.opening_span == span(0, 0, 12)


def test_tag_inner_spanning_lines() -> None:
    text = "<ul>\n  <li>one</li>\n</ul>"

    item = select_range("it", make_state(text, 1, 6))
    outer_list = select_range("it", make_state(text, 2, 0))

    assert item is not None and outer_list is not None
    assert item.range == span(1, 6, 9)
    assert item.text == "one"
    assert outer_list.range == Range(Position(0, 4), Position(2, 0))
    assert outer_list.text == "\n  <li>one</li>\n"


def test_tag_inner_pairs_nearest_opening_before_closing() -> None:
    state = make_state("<div><div>a</div>b</div>", 0, 17)

    detected = select_range("it", state)

    assert detected is not None
    assert detected.text == "a</div>b"


def test_tag_inner_without_closing_tag_is_none() -> None:
    assert select_range("it", make_state("<div>open", 0, 6)) is None


def test_self_closing_tag_under_cursor() -> None:
    state = make_state('<div><img src="image.jpg" /></div>', 0, 10)

    detected = select_range(SelectionMode.SELF_CLOSING_TAG, state)

    assert detected is not None
    assert detected.range == span(0, 5, 28)
    assert detected.text == '<img src="image.jpg" />'
    assert detected.opening_span == detected.closing_span == detected.range


def test_self_closing_tag_after_cursor() -> None:
    detected = select_range("st", make_state("<p>x</p> <br/>", 0, 0))

    assert detected is not None
    assert detected.range == span(0, 9, 14)


def test_self_closing_tag_only_before_cursor_is_none() -> None:
    assert select_range("st", make_state("<br/> text", 0, 8)) is None


def test_unknown_mode_raises() -> None:
    state = make_state("abc", 0, 0)

    with pytest.raises(UnknownSelectionModeError, match="Unknown selection mode"):
        select_range("word", state)
    with pytest.raises(InvalidOperationError):
        select_range("", state)
