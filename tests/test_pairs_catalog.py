from __future__ import annotations

import pytest

from sandwich_engine.pairs import (
    Bracket,
    Quote,
    Tag,
    describe,
    parse_pair,
    static_pairs,
)


def test_static_pairs_lists_quotes_then_brackets() -> None:
    labels = [pair.label for pair in static_pairs()]

    assert labels == ["'", '"', "`", "(", "{", "[", "<"]


@pytest.mark.parametrize(
    ("pair", "opening", "closing"),
    [
        (Quote("'"), "'", "'"),
        (Quote("`"), "`", "`"),
        (Bracket("("), "(", ")"),
        (Bracket("{"), "{", "}"),
        (Bracket("["), "[", "]"),
        (Bracket("<"), "<", ">"),
        (Tag("div"), "<div>", "</div>"),
    ],
)
def test_delimiters(pair, opening: str, closing: str) -> None:
    assert pair.opening == opening
    assert pair.closing == closing


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ('"', Quote('"')),
        ("[", Bracket("[")),
        ("]", Bracket("[")),
        (">", Bracket("<")),
        ("<span>", Tag("span")),
        ("</li>", Tag("li")),
        ("section", Tag("section")),
    ],
)
def test_parse_pair(token: str, expected) -> None:
    assert parse_pair(token) == expected


def test_invalid_descriptors_are_rejected() -> None:
    with pytest.raises(ValueError):
        Quote("(")
    with pytest.raises(ValueError):
        Bracket("'")
    with pytest.raises(ValueError):
        Tag("")
    with pytest.raises(ValueError):
        parse_pair("1abc")


def test_describe() -> None:
    assert describe(Quote("'")) == "Single quotes"
    assert describe(Bracket("{")) == "Braces"
    assert describe(Tag("div")) == "<div>...</div>"


def test_descriptors_are_hashable_and_compare_by_value() -> None:
    assert {Tag("p"), Tag("p"), Quote('"')} == {Tag("p"), Quote('"')}
    assert Quote("'") != Bracket("(")
