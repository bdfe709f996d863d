"""Host-side glue: configuration, highlighting, pickers and command flow."""

from .config import SandwichConfig
from .flow import FlowStage, FlowStep, SandwichFlow
from .highlighter import Highlighter, RecordingHighlighter
from .pickers import (
    TAG_PROMPT,
    Choice,
    PickResult,
    filter_choices,
    mode_choices,
    operation_choices,
    pair_choices,
)
from .session import CommandOutcome, SandwichSession

__all__ = [
    "SandwichConfig",
    "Highlighter",
    "RecordingHighlighter",
    "Choice",
    "PickResult",
    "TAG_PROMPT",
    "filter_choices",
    "operation_choices",
    "mode_choices",
    "pair_choices",
    "CommandOutcome",
    "SandwichSession",
    "SandwichFlow",
    "FlowStage",
    "FlowStep",
]
