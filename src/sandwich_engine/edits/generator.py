"""Turn a detected range and pair descriptors into text edits."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from sandwich_engine.buffer import Range, TextEdit
from sandwich_engine.errors import SourcePairRequiredError, UnknownOperationError
from sandwich_engine.pairs import PairDescriptor
from sandwich_engine.runtime.telemetry import span
from sandwich_engine.selectors import DetectedRange


class OperationKind(str, Enum):
    ADD = "add"
    DELETE = "delete"
    REPLACE = "replace"


def get_text_edits(
    operation: OperationKind | str,
    detected: DetectedRange,
    pair: PairDescriptor,
    source_pair: Optional[PairDescriptor] = None,
) -> list[TextEdit]:
    """Return the opening edit followed by the closing edit.

    Both edits refer to the same snapshot and never overlap, so a host can
    apply them in one atomic change. ``pair`` is what gets inserted for add
    and replace; delete only rewrites the detected delimiter spans.
    """

    try:
        kind = OperationKind(operation)
    except ValueError as exc:
        raise UnknownOperationError(operation) from exc

    with span(
        "edits::get_text_edits",
        component="edits",
        metadata={"operation": kind.value, "pair": pair.label},
    ):
        if kind is OperationKind.ADD:
            return _add(detected.range, pair)
        if kind is OperationKind.DELETE:
            return _rewrite(detected, "", "")
        if kind is OperationKind.REPLACE:
            if source_pair is None:
                raise SourcePairRequiredError()
            return _rewrite(detected, pair.opening, pair.closing)
        raise UnknownOperationError(kind)  # pragma: no cover


def _add(target: Range, pair: PairDescriptor) -> list[TextEdit]:
    return [
        TextEdit(Range.empty(target.start), pair.opening),
        TextEdit(Range.empty(target.end), pair.closing),
    ]


def _rewrite(detected: DetectedRange, opening: str, closing: str) -> list[TextEdit]:
    return [
        TextEdit(detected.opening_span, opening),
        TextEdit(detected.closing_span, closing),
    ]


__all__ = ["OperationKind", "get_text_edits"]
