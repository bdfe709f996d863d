"""Static pair catalog and token parsing."""

from __future__ import annotations

import re
from typing import Iterator

from .models import (
    BRACKET_CLOSERS,
    QUOTE_CHARS,
    Bracket,
    PairDescriptor,
    Quote,
    Tag,
)

QUOTES: tuple[Quote, ...] = tuple(Quote(char) for char in QUOTE_CHARS)
BRACKETS: tuple[Bracket, ...] = tuple(Bracket(char) for char in BRACKET_CLOSERS)

_BRACKET_OPENERS = {closer: opener for opener, closer in BRACKET_CLOSERS.items()}
_TAG_TOKEN = re.compile(r"</?\s*([^\s<>/]+)\s*/?>\Z")

_DESCRIPTIONS = {
    "'": "Single quotes",
    '"': "Double quotes",
    "`": "Back quotes",
    "(": "Parentheses",
    "{": "Braces",
    "[": "Square brackets",
    "<": "Angle brackets",
}


def static_pairs() -> Iterator[PairDescriptor]:
    """Every quote, then every bracket, in catalog order."""

    yield from QUOTES
    yield from BRACKETS


def parse_pair(token: str) -> PairDescriptor:
    """Turn user input into a descriptor.

    Accepts a quote character, either side of a bracket, ``<name>``,
    ``</name>`` or a bare tag name.
    """

    token = token.strip()
    if token in QUOTE_CHARS:
        return Quote(token)
    if token in BRACKET_CLOSERS:
        return Bracket(token)
    if token in _BRACKET_OPENERS:
        return Bracket(_BRACKET_OPENERS[token])
    match = _TAG_TOKEN.match(token)
    if match:
        return Tag(match.group(1))
    return Tag(token)


def describe(pair: PairDescriptor) -> str:
    if isinstance(pair, Tag):
        return f"{pair.opening}...{pair.closing}"
    return _DESCRIPTIONS[pair.char]


__all__ = ["QUOTES", "BRACKETS", "static_pairs", "parse_pair", "describe"]
