from __future__ import annotations

from typing import List, Tuple

from sandwich_engine.adapters.textual import (
    TRIGGER_KEY,
    TextualSandwichAdapter,
    TextualUIHooks,
)
from sandwich_engine.buffer import Buffer, Position, Range
from sandwich_engine.host import FlowStage, SandwichFlow, SandwichSession


def make_adapter(
    text: str, cursor: Position = Position(0, 0), *, language_id: str = "plaintext"
) -> Tuple[TextualSandwichAdapter, dict[str, List]]:
    captured: dict[str, List] = {
        "buffers": [],
        "statuses": [],
        "prompts": [],
        "logs": [],
    }
    hooks = TextualUIHooks(
        update_buffer=lambda buffer, highlights: captured["buffers"].append(
            (buffer.text, highlights)
        ),
        update_status=captured["statuses"].append,
        show_prompt=captured["prompts"].append,
        log=captured["logs"].append,
    )
    session = SandwichSession(
        Buffer.from_text(text, cursor=cursor), language_id=language_id
    )
    return TextualSandwichAdapter(SandwichFlow(session), hooks), captured


def test_adapter_renders_on_construction() -> None:
    _, captured = make_adapter("hello")

    assert captured["buffers"] == [("hello", ())]
    assert captured["prompts"] == [""]


def test_trigger_key_runs_a_command() -> None:
    adapter, captured = make_adapter("hello")

    step = adapter.handle_textual_key(TRIGGER_KEY)
    assert step is not None and step.stage is FlowStage.OPERATION
    assert captured["prompts"][-1].startswith("Select operation > ")
    assert "a:Add surrounding pair" in captured["prompts"][-1]

    for key in ["a", "_", "'"]:
        adapter.handle_textual_key(key, text=key)

    assert adapter.buffer.text == "'hello'"
    assert captured["statuses"][-1] == "add '"
    assert captured["buffers"][-1][0] == "'hello'"
    assert captured["prompts"][-1] == ""


def test_preview_highlight_reaches_hooks() -> None:
    adapter, captured = make_adapter("  text", Position(0, 3))

    adapter.handle_textual_key(TRIGGER_KEY)
    adapter.handle_textual_key("a", text="a")
    adapter.handle_textual_key("_", text="_")

    assert captured["buffers"][-1][1] == (Range(Position(0, 2), Position(0, 6)),)


def test_keys_move_cursor_while_idle() -> None:
    adapter, _ = make_adapter("ab\ncd")

    assert adapter.handle_textual_key("RIGHT") is None
    adapter.handle_textual_key("DOWN")
    adapter.handle_textual_key("LEFT")

    assert adapter.buffer.cursor == Position(1, 0)
    assert adapter.buffer.selection is None


def test_shift_extends_selection() -> None:
    adapter, _ = make_adapter("hello")

    adapter.handle_textual_key("RIGHT", modifiers=["shift"])
    adapter.handle_textual_key("RIGHT", modifiers=["shift"])

    assert adapter.buffer.selection == Range(Position(0, 0), Position(0, 2))
    assert adapter.buffer.cursor == Position(0, 2)


def test_escape_reports_cancel() -> None:
    adapter, captured = make_adapter("hello")

    adapter.handle_textual_key(TRIGGER_KEY)
    adapter.handle_textual_key("ESC")

    assert not adapter.flow.active
    assert captured["statuses"][-1] == "cancelled"
    assert any(line.startswith("key ->") for line in captured["logs"])
