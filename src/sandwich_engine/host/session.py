"""Runs add/delete/replace against a host buffer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from sandwich_engine.buffer import Buffer, BufferDelta, TextEdit
from sandwich_engine.edits import OperationKind, get_text_edits
from sandwich_engine.errors import SandwichError
from sandwich_engine.pairs import PairDescriptor, describe
from sandwich_engine.runtime.telemetry import record_event
from sandwich_engine.selectors import (
    DetectedRange,
    SelectionMode,
    find_all_surrounding_pairs,
    find_surrounding_pair,
    select_range,
)

from .config import SandwichConfig
from .highlighter import Highlighter, RecordingHighlighter


@dataclass(slots=True)
class CommandOutcome:
    """What a command did, phrased for the status line."""

    applied: bool
    status: str = "ok"
    message: Optional[str] = None
    edits: tuple[TextEdit, ...] = ()
    delta: Optional[BufferDelta] = None


class SandwichSession:
    """Binds one buffer to its configuration and highlighter.

    Every command takes a fresh snapshot of the buffer, asks the core for a
    range and edits, and applies them as a single change.
    """

    def __init__(
        self,
        buffer: Buffer,
        *,
        config: Optional[SandwichConfig] = None,
        highlighter: Optional[Highlighter] = None,
        language_id: str = "plaintext",
    ) -> None:
        self.buffer = buffer
        self.config = config or SandwichConfig()
        self.highlighter = highlighter or RecordingHighlighter(
            self.config.highlight_color
        )
        self.language_id = language_id

    @property
    def html_like(self) -> bool:
        return self.config.is_html_like(self.language_id)

    def preview(self, mode: SelectionMode) -> Optional[DetectedRange]:
        """Highlight the range an add with ``mode`` would wrap."""

        detected = select_range(mode, self.buffer.snapshot())
        if detected is None:
            self.highlighter.clear()
        else:
            self.highlighter.highlight([detected.range])
        return detected

    def locate(self, pair: PairDescriptor) -> Optional[DetectedRange]:
        """Highlight the delimiters of the ``pair`` around the cursor."""

        detected = find_surrounding_pair(self.buffer.snapshot(), pair)
        if detected is None:
            self.highlighter.clear()
        else:
            self.highlighter.highlight([detected.opening_span, detected.closing_span])
        return detected

    def candidates(self) -> list[tuple[PairDescriptor, DetectedRange]]:
        found = find_all_surrounding_pairs(self.buffer.snapshot())
        self.highlighter.highlight([detected.range for _, detected in found])
        return found

    def cancel(self) -> None:
        self.highlighter.clear()

    def add(self, mode: SelectionMode, pair: PairDescriptor) -> CommandOutcome:
        detected = select_range(mode, self.buffer.snapshot())
        if detected is None:
            return self._not_found(
                f"Failed to select range for type: {SelectionMode(mode).value}"
            )
        return self._apply(OperationKind.ADD, detected, pair)

    def delete(self, pair: PairDescriptor) -> CommandOutcome:
        detected = find_surrounding_pair(self.buffer.snapshot(), pair)
        if detected is None:
            return self._not_found(f"No surrounding {describe(pair)} found")
        return self._apply(OperationKind.DELETE, detected, pair)

    def replace(
        self, source: PairDescriptor, destination: PairDescriptor
    ) -> CommandOutcome:
        detected = find_surrounding_pair(self.buffer.snapshot(), source)
        if detected is None:
            return self._not_found(f"No surrounding {describe(source)} found")
        return self._apply(OperationKind.REPLACE, detected, destination, source)

    def _apply(
        self,
        operation: OperationKind,
        detected: DetectedRange,
        pair: PairDescriptor,
        source: Optional[PairDescriptor] = None,
    ) -> CommandOutcome:
        self.highlighter.clear()
        try:
            edits = get_text_edits(operation, detected, pair, source)
            delta = self.buffer.apply_edits(edits, label=operation.value)
        except SandwichError as exc:
            record_event(
                "session.error",
                level="error",
                data={"operation": operation.value, "reason": str(exc)},
            )
            raise
        record_event(
            "session.applied",
            level="debug",
            data={"operation": operation.value, "pair": pair.label},
        )
        return CommandOutcome(
            applied=True,
            status=operation.value,
            message=f"{operation.value} {pair.label}",
            edits=tuple(edits),
            delta=delta,
        )

    def _not_found(self, message: str) -> CommandOutcome:
        self.highlighter.clear()
        record_event("session.not_found", level="debug", data={"message": message})
        return CommandOutcome(applied=False, status="not_found", message=message)


__all__ = ["CommandOutcome", "SandwichSession"]
