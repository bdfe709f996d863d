"""Key-driven walk through the operation, range and pair pickers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Sequence

from sandwich_engine.edits import OperationKind
from sandwich_engine.pairs import PairDescriptor, Tag, describe
from sandwich_engine.runtime.telemetry import span
from sandwich_engine.selectors import SelectionMode

from .pickers import (
    TAG_PROMPT,
    Choice,
    filter_choices,
    mode_choices,
    operation_choices,
    pair_choices,
)
from .session import CommandOutcome, SandwichSession

ESCAPE = "ESC"
ENTER = "ENTER"
BACKSPACE = "BACKSPACE"


class FlowStage(str, Enum):
    IDLE = "idle"
    OPERATION = "operation"
    MODE = "mode"
    PAIR = "pair"
    TAG_NAME = "tag_name"


@dataclass(slots=True)
class FlowStep:
    """Snapshot of the flow after one key, for the host to render."""

    stage: FlowStage
    prompt: str = ""
    typed: str = ""
    choices: tuple[Choice[Any], ...] = ()
    message: Optional[str] = None
    outcome: Optional[CommandOutcome] = None


@dataclass(slots=True)
class _Draft:
    operation: Optional[OperationKind] = None
    mode: Optional[SelectionMode] = None
    source: Optional[PairDescriptor] = None
    typed: list[str] = field(default_factory=list)


class SandwichFlow:
    """Operation -> (range for add) -> pair(s) -> tag name, then run.

    Typing filters the active picker; a unique match is taken at once unless
    the config asks for Enter. Escape abandons the command at any stage.
    """

    def __init__(self, session: SandwichSession) -> None:
        self.session = session
        self.stage = FlowStage.IDLE
        self._draft = _Draft()

    @property
    def active(self) -> bool:
        return self.stage is not FlowStage.IDLE

    def start(self) -> FlowStep:
        self._draft = _Draft()
        return self._enter(FlowStage.OPERATION)

    def feed(self, key: str, text: Optional[str] = None) -> FlowStep:
        if self.stage is FlowStage.IDLE:
            return self._step()
        with span(
            "flow::feed",
            component="host",
            metadata={"stage": self.stage.value, "key": key},
        ):
            if key == ESCAPE:
                self.session.cancel()
                return self._finish(None, message="cancelled")
            if key == BACKSPACE:
                if self._draft.typed:
                    self._draft.typed.pop()
                return self._step()
            if key == ENTER:
                return self._submit()
            if text and text.isprintable():
                self._draft.typed.append(text)
                if self.stage is FlowStage.TAG_NAME:
                    return self._step()
                return self._pick(confirm=False)
            return self._step()

    def _choices(self) -> Sequence[Choice[Any]]:
        state = self.session.buffer.snapshot()
        if self.stage is FlowStage.OPERATION:
            return operation_choices()
        if self.stage is FlowStage.MODE:
            return mode_choices(state, html_like=self.session.html_like)
        if self.stage is FlowStage.PAIR:
            return pair_choices(self.session.config, html_like=self.session.html_like)
        return ()

    def _prompt(self) -> str:
        if self.stage is FlowStage.OPERATION:
            return "Select operation"
        if self.stage is FlowStage.MODE:
            return "Select range type"
        if self.stage is FlowStage.TAG_NAME:
            return "Enter tag name (e.g., div, span, p)"
        if self.stage is FlowStage.PAIR:
            if self._draft.operation is OperationKind.REPLACE:
                role = "destination" if self._draft.source else "source"
                return f"Select {role} pair"
            return "Select pair"
        return ""

    def _submit(self) -> FlowStep:
        if self.stage is not FlowStage.TAG_NAME:
            return self._pick(confirm=True)
        name = "".join(self._draft.typed).strip()
        if not name:
            self.session.cancel()
            return self._finish(None, message="cancelled")
        try:
            tag = Tag(name)
        except ValueError:
            self._draft.typed.clear()
            return self._step(message=f"Invalid tag name: {name}")
        return self._accept_pair(tag)

    def _pick(self, *, confirm: bool) -> FlowStep:
        typed = "".join(self._draft.typed)
        result = filter_choices(
            self._choices(),
            typed,
            enter_to_confirm=self.session.config.enter_to_confirm,
            confirm=confirm,
        )
        if result.status == "miss":
            if self._draft.typed:
                self._draft.typed.pop()
            return self._step(message=f"No choice matches {typed!r}")
        if result.status == "pending" or result.choice is None:
            return self._step(choices=result.remaining)
        return self._accept(result.choice.value)

    def _accept(self, value: Any) -> FlowStep:
        if self.stage is FlowStage.OPERATION:
            self._draft.operation = OperationKind(value)
            if self._draft.operation is OperationKind.ADD:
                return self._enter(FlowStage.MODE)
            return self._enter(FlowStage.PAIR)
        if self.stage is FlowStage.MODE:
            mode = SelectionMode(value)
            if self.session.preview(mode) is None:
                return self._finish(
                    CommandOutcome(
                        applied=False,
                        status="not_found",
                        message=f"Failed to select range for type: {mode.value}",
                    )
                )
            self._draft.mode = mode
            return self._enter(FlowStage.PAIR)
        if value == TAG_PROMPT:
            return self._enter(FlowStage.TAG_NAME)
        return self._accept_pair(value)

    def _accept_pair(self, pair: PairDescriptor) -> FlowStep:
        draft = self._draft
        if draft.operation is OperationKind.ADD and draft.mode is not None:
            return self._finish(self.session.add(draft.mode, pair))
        if draft.operation is OperationKind.DELETE:
            return self._finish(self.session.delete(pair))
        if draft.source is None:
            if self.session.locate(pair) is None:
                return self._finish(
                    CommandOutcome(
                        applied=False,
                        status="not_found",
                        message=f"No surrounding {describe(pair)} found",
                    )
                )
            draft.source = pair
            return self._enter(FlowStage.PAIR)
        return self._finish(self.session.replace(draft.source, pair))

    def _enter(self, stage: FlowStage) -> FlowStep:
        self.stage = stage
        self._draft.typed.clear()
        return self._step()

    def _finish(
        self, outcome: Optional[CommandOutcome], *, message: Optional[str] = None
    ) -> FlowStep:
        self.stage = FlowStage.IDLE
        self._draft = _Draft()
        return FlowStep(
            stage=FlowStage.IDLE,
            message=message or (outcome.message if outcome else None),
            outcome=outcome,
        )

    def _step(
        self,
        *,
        choices: Optional[Sequence[Choice[Any]]] = None,
        message: Optional[str] = None,
    ) -> FlowStep:
        if choices is None:
            choices = self._choices()
        return FlowStep(
            stage=self.stage,
            prompt=self._prompt(),
            typed="".join(self._draft.typed),
            choices=tuple(choices),
            message=message,
        )


__all__ = ["SandwichFlow", "FlowStage", "FlowStep", "ESCAPE", "ENTER", "BACKSPACE"]
