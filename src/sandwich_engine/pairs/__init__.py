"""Pair descriptors (quotes, brackets, tags) and the static catalog."""

from .catalog import BRACKETS, QUOTES, describe, parse_pair, static_pairs
from .models import (
    BRACKET_CLOSERS,
    QUOTE_CHARS,
    Bracket,
    PairDescriptor,
    Quote,
    Tag,
)

__all__ = [
    "Quote",
    "Bracket",
    "Tag",
    "PairDescriptor",
    "QUOTE_CHARS",
    "BRACKET_CLOSERS",
    "QUOTES",
    "BRACKETS",
    "static_pairs",
    "parse_pair",
    "describe",
]
