"""Regular expressions behind tag detection.

Detection is deliberately regex based: comments, CDATA and attribute values
containing ``>`` are not understood.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

TAG_NAME = r"[A-Za-z][\w.:-]*"

CLOSING_TAG = re.compile(rf"</({TAG_NAME})\s*>")
SELF_CLOSING_TAG = re.compile(rf"<({TAG_NAME})[^>]*/>")
ANY_OPENING_TAG = re.compile(rf"<({TAG_NAME})(?:\s[^>]*)?(?<!/)>")


def opening_tag(name: str) -> re.Pattern[str]:
    """``<name>`` or ``<name attr...>``, but not ``<name/>`` or ``<names>``."""

    return re.compile(rf"<{re.escape(name)}(?:\s[^>]*)?(?<!/)>")


def closing_tag(name: str) -> re.Pattern[str]:
    return re.compile(rf"</{re.escape(name)}\s*>")


def first_at_or_after(
    pattern: re.Pattern[str], text: str, offset: int
) -> Optional[re.Match[str]]:
    for match in pattern.finditer(text):
        if match.start() >= offset:
            return match
    return None


def last_before(
    pattern: re.Pattern[str], text: str, offset: int
) -> Optional[re.Match[str]]:
    """Textually last match lying entirely before ``offset``."""

    found = None
    for match in pattern.finditer(text, 0, offset):
        found = match
    return found


def tag_events(text: str, name: str) -> Iterator[tuple[int, int, bool]]:
    """Yield ``(start, end, is_opening)`` for every ``name`` tag, in order."""

    openings = ((m.start(), m.end(), True) for m in opening_tag(name).finditer(text))
    closings = ((m.start(), m.end(), False) for m in closing_tag(name).finditer(text))
    yield from sorted([*openings, *closings])


__all__ = [
    "TAG_NAME",
    "CLOSING_TAG",
    "SELF_CLOSING_TAG",
    "ANY_OPENING_TAG",
    "opening_tag",
    "closing_tag",
    "first_at_or_after",
    "last_before",
    "tag_events",
]
