"""Choice lists for the interactive flow and type-to-filter resolution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Literal, Optional, Sequence, TypeVar, Union

from sandwich_engine.buffer import EditorState
from sandwich_engine.edits import OperationKind
from sandwich_engine.pairs import PairDescriptor, describe, static_pairs
from sandwich_engine.runtime.telemetry import record_event
from sandwich_engine.selectors import SelectionMode

from .config import SandwichConfig

T = TypeVar("T")

TAG_PROMPT = "t"
PairChoiceValue = Union[PairDescriptor, str]


@dataclass(frozen=True)
class Choice(Generic[T]):
    label: str
    description: str
    value: T


@dataclass(frozen=True)
class PickResult(Generic[T]):
    """Outcome of filtering a picker by the text typed so far."""

    status: Literal["match", "pending", "miss"]
    choice: Optional[Choice[T]] = None
    remaining: tuple[Choice[T], ...] = ()


def filter_choices(
    choices: Sequence[Choice[T]],
    typed: str,
    *,
    enter_to_confirm: bool = False,
    confirm: bool = False,
) -> PickResult[T]:
    """Narrow ``choices`` to labels containing ``typed`` (case-insensitive).

    A single survivor is picked straight away unless ``enter_to_confirm`` is
    set; ``confirm`` (Enter) picks the exact label match, else the first
    survivor.
    """

    needle = typed.lower()
    remaining = tuple(choice for choice in choices if needle in choice.label.lower())
    if not remaining:
        return PickResult(status="miss")

    if confirm:
        exact = next((c for c in remaining if c.label.lower() == needle), None)
        return PickResult(
            status="match", choice=exact or remaining[0], remaining=remaining
        )

    if needle and len(remaining) == 1 and not enter_to_confirm:
        return PickResult(status="match", choice=remaining[0], remaining=remaining)

    return PickResult(status="pending", remaining=remaining)


def operation_choices() -> tuple[Choice[OperationKind], ...]:
    return (
        Choice("a", "Add surrounding pair", OperationKind.ADD),
        Choice("d", "Delete surrounding pair", OperationKind.DELETE),
        Choice("r", "Replace surrounding pair", OperationKind.REPLACE),
    )


def mode_choices(
    state: EditorState, *, html_like: bool
) -> tuple[Choice[SelectionMode], ...]:
    choices = [Choice("_", "Current line", SelectionMode.ENTIRE_LINE)]
    if state.has_selection:
        choices.append(
            Choice("s", "Current selection", SelectionMode.CURRENT_SELECTION)
        )
    if html_like:
        choices.extend(
            [
                Choice("it", "Inside tag", SelectionMode.TAG_INNER),
                Choice("st", "Self-closing tag", SelectionMode.SELF_CLOSING_TAG),
                Choice("at", "Around tag", SelectionMode.TAG_OUTER),
            ]
        )
    return tuple(choices)


def pair_choices(
    config: SandwichConfig, *, html_like: bool
) -> tuple[Choice[PairChoiceValue], ...]:
    """Pairs from ``config.default_pairs``; the tag entry needs an HTML-like file."""

    known = {pair.label: pair for pair in static_pairs()}
    choices: list[Choice[PairChoiceValue]] = []
    for label in config.default_pairs:
        if label == TAG_PROMPT:
            if html_like:
                choices.append(Choice(TAG_PROMPT, "HTML tag", TAG_PROMPT))
            continue
        pair = known.get(label)
        if pair is None:
            record_event(
                "pickers.unknown_pair_label", level="warning", data={"label": label}
            )
            continue
        choices.append(Choice(label, describe(pair), pair))
    return tuple(choices)


__all__ = [
    "Choice",
    "PickResult",
    "TAG_PROMPT",
    "PairChoiceValue",
    "filter_choices",
    "operation_choices",
    "mode_choices",
    "pair_choices",
]
