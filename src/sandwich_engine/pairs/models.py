"""Descriptors naming a kind of pair, independent of any occurrence."""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import ClassVar, Mapping, Union

QUOTE_CHARS: tuple[str, ...] = ("'", '"', "`")
BRACKET_CLOSERS: Mapping[str, str] = MappingProxyType(
    {"(": ")", "{": "}", "[": "]", "<": ">"}
)
TAG_NAME = re.compile(r"[A-Za-z][\w.:-]*\Z")


@dataclass(frozen=True, slots=True)
class Quote:
    """Symmetric delimiter: the same character opens and closes."""

    char: str
    family: ClassVar[str] = "quote"

    def __post_init__(self) -> None:
        if self.char not in QUOTE_CHARS:
            raise ValueError(f"Unsupported quote character {self.char!r}")

    @property
    def opening(self) -> str:
        return self.char

    @property
    def closing(self) -> str:
        return self.char

    @property
    def label(self) -> str:
        return self.char


@dataclass(frozen=True, slots=True)
class Bracket:
    """Asymmetric delimiter identified by its opening character."""

    char: str
    family: ClassVar[str] = "bracket"

    def __post_init__(self) -> None:
        if self.char not in BRACKET_CLOSERS:
            raise ValueError(f"Unsupported bracket character {self.char!r}")

    @property
    def opening(self) -> str:
        return self.char

    @property
    def closing(self) -> str:
        return BRACKET_CLOSERS[self.char]

    @property
    def label(self) -> str:
        return self.char


@dataclass(frozen=True, slots=True)
class Tag:
    """Markup element pair ``<name>...</name>``.

    ``opening`` is the text inserted by add/replace; detection also accepts
    openings carrying attributes.
    """

    name: str
    family: ClassVar[str] = "tag"

    def __post_init__(self) -> None:
        if not TAG_NAME.match(self.name or ""):
            raise ValueError(f"Invalid tag name {self.name!r}")

    @property
    def opening(self) -> str:
        return f"<{self.name}>"

    @property
    def closing(self) -> str:
        return f"</{self.name}>"

    @property
    def label(self) -> str:
        return self.opening


PairDescriptor = Union[Quote, Bracket, Tag]


__all__ = [
    "QUOTE_CHARS",
    "BRACKET_CLOSERS",
    "TAG_NAME",
    "Quote",
    "Bracket",
    "Tag",
    "PairDescriptor",
]
