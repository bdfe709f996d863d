"""Textual-facing adapter that drives a SandwichFlow from key events."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from sandwich_engine.buffer import Buffer, Position, Range
from sandwich_engine.host import FlowStep, SandwichFlow

TRIGGER_KEY = "CTRL+S"


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[Buffer, tuple[Range, ...]], None]
    update_status: Callable[[str], None] = _noop
    show_prompt: Callable[[str], None] = _noop
    log: Callable[[str], None] = _noop


class TextualSandwichAdapter:
    """Feeds keys to the flow while it is active and moves the cursor otherwise."""

    def __init__(self, flow: SandwichFlow, hooks: TextualUIHooks) -> None:
        self.flow = flow
        self.hooks = hooks
        self._anchor = flow.session.buffer.cursor
        self._refresh_buffer()
        self._refresh_prompt(None)

    @property
    def buffer(self) -> Buffer:
        return self.flow.session.buffer

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> Optional[FlowStep]:
        normalized_modifiers = tuple(str(mod).upper() for mod in modifiers)
        self._log_state("key ->", key=key, text=text, mods=normalized_modifiers)

        if not self.flow.active:
            if key == TRIGGER_KEY:
                step = self.flow.start()
                self._after_step(step)
                return step
            self._move_cursor(key, extend="SHIFT" in normalized_modifiers)
            return None

        step = self.flow.feed(key, text)
        self._after_step(step)
        return step

    def _after_step(self, step: FlowStep) -> None:
        self._log_state(
            "step <-",
            stage=step.stage.value,
            typed=step.typed,
            message=step.message,
            applied=step.outcome.applied if step.outcome else None,
        )
        if step.message:
            self.hooks.update_status(step.message)
        self._refresh_buffer()
        self._refresh_prompt(step)

    def _move_cursor(self, key: str, *, extend: bool = False) -> None:
        buffer = self.buffer
        anchor = self._anchor if extend and buffer.selection else buffer.cursor
        line, character = buffer.cursor.line, buffer.cursor.character
        if key == "LEFT" and character > 0:
            character -= 1
        elif key == "RIGHT" and character < len(buffer.document.get_line(line)):
            character += 1
        elif key == "UP" and line > 0:
            line -= 1
        elif key == "DOWN" and line < buffer.document.line_count - 1:
            line += 1
        else:
            return
        character = min(character, len(buffer.document.get_line(line)))
        if extend:
            self._anchor = anchor
            buffer.set_selection(anchor, Position(line, character))
        else:
            buffer.clear_selection()
            buffer.set_cursor(line, character)
        self._refresh_buffer()

    def _refresh_buffer(self) -> None:
        highlighter = self.flow.session.highlighter
        active = getattr(highlighter, "active", ())
        self.hooks.update_buffer(self.buffer, tuple(active))

    def _refresh_prompt(self, step: Optional[FlowStep]) -> None:
        if step is None or not step.prompt:
            self.hooks.show_prompt("")
            return
        options = "  ".join(f"{c.label}:{c.description}" for c in step.choices)
        self.hooks.show_prompt(f"{step.prompt} > {step.typed}  {options}".rstrip())

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        buffer = self.buffer
        return {
            "stage": self.flow.stage.value,
            "cursor": (buffer.cursor.line, buffer.cursor.character),
            "buffer": buffer.name,
            "buffer_version": buffer.document.version,
        }


__all__ = ["TextualSandwichAdapter", "TextualUIHooks", "TRIGGER_KEY"]
