"""Locate the pair surrounding the cursor.

Quotes pair up in strict alternation (1st-2nd, 3rd-4th, ...), brackets and
tags through a stack matcher. When several candidates enclose the cursor the
narrowest one wins.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from sandwich_engine.buffer import EditorState, position_to_offset
from sandwich_engine.pairs import Bracket, PairDescriptor, Quote, Tag, static_pairs
from sandwich_engine.runtime.telemetry import span

from . import patterns
from .models import DetectedRange

# (opening start, opening end, closing start, closing end)
Candidate = tuple[int, int, int, int]


def find_surrounding_pair(
    state: EditorState, pair: PairDescriptor
) -> Optional[DetectedRange]:
    if not isinstance(pair, (Quote, Bracket, Tag)):
        raise TypeError(f"Unsupported pair descriptor {pair!r}")

    with span(
        "selectors::find_surrounding_pair",
        component="selectors",
        metadata={"pair": pair.label, "cursor": state.cursor},
    ) as handle:
        cursor = position_to_offset(state, state.cursor)
        if isinstance(pair, Quote):
            candidate = _nearest_quote_pair(state.document_text, pair.char, cursor)
        elif isinstance(pair, Bracket):
            candidate = _innermost(_bracket_pairs(state.document_text, pair), cursor)
        else:
            candidate = _innermost(_tag_pairs(state.document_text, pair.name), cursor)

        handle.mark("match" if candidate else "miss")
        if candidate is None:
            return None
        return _to_detected(state, candidate)


def find_all_surrounding_pairs(
    state: EditorState,
) -> list[tuple[PairDescriptor, DetectedRange]]:
    """Every pair enclosing the cursor: quotes, brackets, then tags.

    Quotes and brackets contribute at most one entry per kind. Tags contribute
    every enclosing element of any name, innermost first.
    """

    text = state.document_text
    with span(
        "selectors::find_all_surrounding_pairs",
        component="selectors",
        metadata={"cursor": state.cursor},
    ) as handle:
        cursor = position_to_offset(state, state.cursor)
        found: list[tuple[PairDescriptor, Candidate]] = []

        for pair in static_pairs():
            if isinstance(pair, Quote):
                candidate = _enclosing_quote_pair(text, pair.char, cursor)
            else:
                candidate = _innermost(_bracket_pairs(text, pair), cursor)
            if candidate is not None:
                found.append((pair, candidate))

        tags: list[tuple[PairDescriptor, Candidate]] = []
        for name in _tag_names(text):
            for candidate in _tag_pairs(text, name):
                if _encloses(candidate, cursor):
                    tags.append((Tag(name), candidate))
        tags.sort(key=lambda item: _width(item[1]))
        found.extend(tags)

        handle.add_metadata("count", len(found))
        return [(pair, _to_detected(state, candidate)) for pair, candidate in found]


def _to_detected(state: EditorState, candidate: Candidate) -> DetectedRange:
    open_start, open_end, close_start, close_end = candidate
    return DetectedRange.from_offsets(
        state, opening=(open_start, open_end), closing=(close_start, close_end)
    )


def _encloses(candidate: Candidate, cursor: int) -> bool:
    """Cursor sits after the opening delimiter and at or before the closing one."""

    return candidate[1] <= cursor <= candidate[2]


def _width(candidate: Candidate) -> int:
    return candidate[3] - candidate[0]


def _innermost(candidates: Iterable[Candidate], cursor: int) -> Optional[Candidate]:
    enclosing = [c for c in candidates if _encloses(c, cursor)]
    if not enclosing:
        return None
    return min(enclosing, key=_width)


def _quote_pairs(text: str, char: str) -> list[Candidate]:
    offsets = [index for index, value in enumerate(text) if value == char]
    return [
        (start, start + 1, end, end + 1)
        for start, end in zip(offsets[0::2], offsets[1::2])
    ]


def _enclosing_quote_pair(text: str, char: str, cursor: int) -> Optional[Candidate]:
    for candidate in _quote_pairs(text, char):
        if candidate[0] < cursor <= candidate[3]:
            return candidate
    return None


def _nearest_quote_pair(text: str, char: str, cursor: int) -> Optional[Candidate]:
    """Enclosing quote pair, else the pair closed most recently before the cursor."""

    candidates = _quote_pairs(text, char)
    for candidate in candidates:
        if candidate[0] < cursor <= candidate[3]:
            return candidate
    preceding = [c for c in candidates if c[3] <= cursor]
    if not preceding:
        return None
    return max(preceding, key=lambda c: c[2])


def _bracket_pairs(text: str, bracket: Bracket) -> list[Candidate]:
    events = (
        (index, index + 1, value == bracket.opening)
        for index, value in enumerate(text)
        if value in (bracket.opening, bracket.closing)
    )
    return _match_stack(events)


def _tag_pairs(text: str, name: str) -> list[Candidate]:
    return _match_stack(patterns.tag_events(text, name))


def _match_stack(events: Iterable[tuple[int, int, bool]]) -> list[Candidate]:
    """Pair openings with closings; unmatched closings are skipped."""

    stack: list[tuple[int, int]] = []
    pairs: list[Candidate] = []
    for start, end, is_opening in events:
        if is_opening:
            stack.append((start, end))
        elif stack:
            open_start, open_end = stack.pop()
            pairs.append((open_start, open_end, start, end))
    return pairs


def _tag_names(text: str) -> Iterator[str]:
    seen: dict[str, None] = {}
    for match in patterns.ANY_OPENING_TAG.finditer(text):
        seen.setdefault(match.group(1), None)
    yield from seen


__all__ = ["find_surrounding_pair", "find_all_surrounding_pairs"]
