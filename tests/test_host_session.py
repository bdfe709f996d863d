from __future__ import annotations

from typing import Optional

import pytest

from sandwich_engine.buffer import Buffer, Position, Range
from sandwich_engine.errors import BufferValidationError
from sandwich_engine.host import RecordingHighlighter, SandwichSession
from sandwich_engine.pairs import Bracket, Quote, Tag
from sandwich_engine.selectors import SelectionMode


def make_session(
    text: str,
    cursor: Position = Position(0, 0),
    *,
    selection: Optional[Range] = None,
    language_id: str = "plaintext",
) -> SandwichSession:
    buffer = Buffer.from_text(text, cursor=cursor, selection=selection)
    return SandwichSession(buffer, language_id=language_id)


def test_add_then_delete_restores_text() -> None:
    session = make_session("hello world", Position(0, 3))

    added = session.add(SelectionMode.ENTIRE_LINE, Quote('"'))
    assert added.applied
    assert added.status == "add"
    assert session.buffer.text == '"hello world"'

    deleted = session.delete(Quote('"'))
    assert deleted.applied
    assert session.buffer.text == "hello world"


@pytest.mark.parametrize("pair", [Quote("'"), Bracket("["), Tag("code")])
def test_selection_round_trip(pair) -> None:
    text = "a = value + 1"
    session = make_session(
        text, Position(0, 9), selection=Range(Position(0, 4), Position(0, 9))
    )

    session.add("s", pair)
    assert session.buffer.text == f"a = {pair.opening}value{pair.closing} + 1"

    session.buffer.set_cursor(0, 4 + len(pair.opening) + 1)
    session.delete(pair)
    assert session.buffer.text == text


def test_replace_swaps_pair() -> None:
    session = make_session("say 'hi'", Position(0, 6))

    outcome = session.replace(Quote("'"), Quote('"'))

    assert outcome.applied
    assert outcome.message == 'replace "'
    assert session.buffer.text == 'say "hi"'
    assert outcome.delta is not None and outcome.delta.version == 1


def test_missing_range_reports_not_found() -> None:
    session = make_session("plain", Position(0, 2))

    outcome = session.add(SelectionMode.CURRENT_SELECTION, Quote("'"))

    assert not outcome.applied
    assert outcome.status == "not_found"
    assert outcome.message == "Failed to select range for type: s"
    assert session.buffer.text == "plain"


def test_missing_pair_reports_not_found() -> None:
    session = make_session("plain", Position(0, 2))

    assert session.delete(Bracket("{")).message == "No surrounding Braces found"
    assert (
        session.replace(Tag("div"), Tag("p")).message
        == "No surrounding <div>...</div> found"
    )


def test_locate_highlights_delimiters_and_apply_clears() -> None:
    session = make_session("f(x)", Position(0, 2))
    highlighter = session.highlighter
    assert isinstance(highlighter, RecordingHighlighter)

    session.locate(Bracket("("))
    assert highlighter.active == (
        Range(Position(0, 1), Position(0, 2)),
        Range(Position(0, 3), Position(0, 4)),
    )

    session.replace(Bracket("("), Bracket("["))
    assert highlighter.active == ()
    assert session.buffer.text == "f[x]"


def test_preview_highlights_target_range() -> None:
    session = make_session("<b>bold</b>", Position(0, 4), language_id="html")
    highlighter = session.highlighter
    assert isinstance(highlighter, RecordingHighlighter)

    detected = session.preview(SelectionMode.TAG_INNER)

    assert detected is not None
    assert session.html_like
    assert highlighter.active == (Range(Position(0, 3), Position(0, 7)),)


def test_candidates_lists_every_enclosing_pair() -> None:
    session = make_session("<p>(a)</p>", Position(0, 4))

    found = session.candidates()

    assert [pair for pair, _ in found] == [Bracket("("), Tag("p")]


def test_buffer_errors_propagate() -> None:
    session = make_session("(x)", Position(0, 1))

    def broken_apply(*_args, **_kwargs):
        raise BufferValidationError("boom")

    session.buffer.apply_edits = broken_apply  # type: ignore[method-assign]

    with pytest.raises(BufferValidationError, match="boom"):
        session.delete(Bracket("("))
