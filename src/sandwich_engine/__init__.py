"""UI-agnostic engine for adding, deleting and replacing surrounding pairs."""

from .buffer import EditorState, Position, Range, TextEdit
from .edits import OperationKind, get_text_edits
from .errors import (
    InvalidOperationError,
    SandwichError,
    SourcePairRequiredError,
    UnknownOperationError,
)
from .pairs import Bracket, PairDescriptor, Quote, Tag, parse_pair
from .selectors import (
    DetectedRange,
    SelectionMode,
    find_all_surrounding_pairs,
    find_surrounding_pair,
    select_range,
)

__all__ = [
    "Position",
    "Range",
    "TextEdit",
    "EditorState",
    "Quote",
    "Bracket",
    "Tag",
    "PairDescriptor",
    "parse_pair",
    "SelectionMode",
    "DetectedRange",
    "select_range",
    "find_surrounding_pair",
    "find_all_surrounding_pairs",
    "OperationKind",
    "get_text_edits",
    "SandwichError",
    "InvalidOperationError",
    "SourcePairRequiredError",
    "UnknownOperationError",
]

__version__ = "0.1.0"
