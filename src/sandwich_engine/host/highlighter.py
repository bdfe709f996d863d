"""Highlighting boundary between the session and whatever renders it."""

from __future__ import annotations

from typing import Protocol, Sequence

from sandwich_engine.buffer import Range


class Highlighter(Protocol):
    """Passed into the session; hosts decide how ranges are drawn."""

    def highlight(self, ranges: Sequence[Range]) -> None:
        """Replace the highlighted ranges."""
        ...

    def clear(self) -> None:
        """Remove every highlight."""
        ...


class RecordingHighlighter:
    """Keeps the active ranges so a host can render them on refresh."""

    def __init__(self, color: str) -> None:
        self.color = color
        self.active: tuple[Range, ...] = ()

    def highlight(self, ranges: Sequence[Range]) -> None:
        self.active = tuple(ranges)

    def clear(self) -> None:
        self.active = ()


__all__ = ["Highlighter", "RecordingHighlighter"]
