"""Edit generation for add, delete and replace."""

from .generator import OperationKind, get_text_edits

__all__ = ["OperationKind", "get_text_edits"]
