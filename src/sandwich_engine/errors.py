"""Exception taxonomy for the pair engine.

"Not found" is never an exception: selectors and finders return ``None`` or an
empty list. Everything below signals a caller bug or a broken invariant.
"""

from __future__ import annotations

from typing import Any, Optional


class SandwichError(Exception):
    """Base class for every error raised by ``sandwich_engine``."""


class InvalidOperationError(SandwichError, ValueError):
    """A request that can never be satisfied, whatever the document holds."""


class SourcePairRequiredError(InvalidOperationError):
    def __init__(self) -> None:
        super().__init__("Source pair is required for replace operation")


class UnknownOperationError(InvalidOperationError):
    def __init__(self, operation: Any) -> None:
        super().__init__(f"Unknown operation: {operation!r}")
        self.operation = operation


class UnknownSelectionModeError(InvalidOperationError):
    def __init__(self, mode: Any) -> None:
        super().__init__(f"Unknown selection mode: {mode!r}")
        self.mode = mode


class OffsetOverflowError(SandwichError, RuntimeError):
    """Raised when an offset lies beyond the last line of a snapshot."""

    def __init__(self, offset: int, *, line_count: int) -> None:
        super().__init__(
            f"Offset {offset} is past the end of a {line_count}-line document"
        )
        self.offset = offset
        self.line_count = line_count


class BufferValidationError(SandwichError, RuntimeError):
    """Raised when edits reference positions outside the buffer or overlap."""

    def __init__(self, message: str, *, position: Optional[Any] = None) -> None:
        super().__init__(message)
        self.position = position


__all__ = [
    "SandwichError",
    "InvalidOperationError",
    "SourcePairRequiredError",
    "UnknownOperationError",
    "UnknownSelectionModeError",
    "OffsetOverflowError",
    "BufferValidationError",
]
