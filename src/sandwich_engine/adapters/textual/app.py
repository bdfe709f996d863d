"""Executable Textual app that hosts the pair engine."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Tuple

try:  # pragma: no cover - imported only when demo is run
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.containers import Vertical
    from textual.widgets import Footer, Header, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use sandwich_engine.adapters.textual.app"
    ) from exc

from sandwich_engine.buffer import Buffer, Range, position_to_offset
from sandwich_engine.host import SandwichConfig, SandwichFlow, SandwichSession
from sandwich_engine.runtime import telemetry

from .controller import TRIGGER_KEY, TextualSandwichAdapter, TextualUIHooks

SAMPLE_TEXT = """<div class="card">
  <p>Press ctrl+s, then a/d/r to add, delete or replace a pair.</p>
  <img src="image.jpg" />
  <span>const greeting = 'hello'; call(fn("world"));</span>
</div>"""

_NAMED_KEYS = {
    "escape": "ESC",
    "enter": "ENTER",
    "return": "ENTER",
    "backspace": "BACKSPACE",
    "left": "LEFT",
    "right": "RIGHT",
    "up": "UP",
    "down": "DOWN",
}


@dataclass
class UIState:
    status_text: str = ""
    prompt_text: str = ""


class SandwichApp(App[None]):
    """Minimal Textual UI around a SandwichFlow."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
		border: round $accent;
		padding: 1 1;
		overflow: auto;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}

	#prompt-line {
		height: 1;
		background: $surface-darken-2;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
        ("ctrl+w", "write", "Write"),
    ]

    def __init__(
        self,
        *,
        buffer: Buffer,
        config: SandwichConfig,
        language_id: str,
        path: Optional[Path] = None,
    ) -> None:
        super().__init__()
        self._state = UIState()
        self._path = path
        session = SandwichSession(buffer, config=config, language_id=language_id)
        self._flow = SandwichFlow(session)
        self.adapter: TextualSandwichAdapter | None = None
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None
        self._prompt_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(id="buffer-area"):
            self._buffer_widget = Static("", id="buffer-view")
            yield self._buffer_widget
        self._status_widget = Static("", id="status-line")
        self._prompt_widget = Static("", id="prompt-line")
        yield self._status_widget
        yield self._prompt_widget
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
            show_prompt=self._show_prompt,
            log=self._log_line,
        )
        self.adapter = TextualSandwichAdapter(self._flow, hooks)
        self._update_status(f"{TRIGGER_KEY.lower()} to start a command")

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        normalized = self._normalize_key(event)
        if normalized is None:
            return
        key, text, modifiers = normalized
        self.adapter.handle_textual_key(key, text=text, modifiers=modifiers)
        event.stop()

    def action_write(self) -> None:
        if self._path is None:
            self._update_status("No file to write")
            return
        self._path.write_text(self._flow.session.buffer.text, encoding="utf-8")
        self._update_status(f"Wrote {self._path}")

    def _update_buffer(self, buffer: Buffer, highlights: Tuple[Range, ...]) -> None:
        if self._buffer_widget:
            self._buffer_widget.update(self._render_buffer(buffer, highlights))

    def _render_buffer(self, buffer: Buffer, highlights: Tuple[Range, ...]) -> Text:
        state = buffer.snapshot()
        rendered = Text(state.document_text + " ")
        color = self._flow.session.config.highlight_color
        for span in highlights:
            start = position_to_offset(state, span.start)
            end = position_to_offset(state, span.end)
            rendered.stylize(f"on {_rich_color(color)}", start, max(end, start + 1))
        if buffer.selection and not buffer.selection.is_empty:
            rendered.stylize(
                "reverse",
                position_to_offset(state, buffer.selection.start),
                position_to_offset(state, buffer.selection.end),
            )
        cursor = position_to_offset(state, buffer.cursor)
        rendered.stylize("underline bold", cursor, cursor + 1)
        return rendered

    def _update_status(self, status: str) -> None:
        self._state.status_text = status
        if self._status_widget:
            self._status_widget.update(status)

    def _show_prompt(self, prompt: str) -> None:
        self._state.prompt_text = prompt
        if self._prompt_widget:
            self._prompt_widget.update(prompt)

    def _log_line(self, line: str) -> None:
        telemetry.get_logger().debug(line)

    @staticmethod
    def _normalize_key(
        event: events.Key,
    ) -> Optional[Tuple[str, Optional[str], Tuple[str, ...]]]:
        *mods, base = event.key.split("+")
        modifiers = tuple(mod.upper() for mod in mods)
        if event.key in {"ctrl+q", "ctrl+w"}:
            return None
        if base in _NAMED_KEYS:
            return (_NAMED_KEYS[base], None, modifiers)
        if modifiers:
            return ("+".join([*modifiers, base.upper()]), None, modifiers)
        if event.character and event.character.isprintable():
            return (event.character, event.character, modifiers)
        return (base.upper(), None, modifiers)


def _rich_color(css_color: str) -> str:
    """Rich has no alpha channel; ``rgba(r, g, b, a)`` drops to ``rgb(r,g,b)``."""

    value = css_color.strip()
    if value.startswith("rgba(") and value.endswith(")"):
        channels = [part.strip() for part in value[5:-1].split(",")][:3]
        return f"rgb({','.join(channels)})"
    return value.replace(" ", "")


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the pair engine Textual demo.")
    parser.add_argument("path", nargs="?", type=Path, help="File to edit")
    parser.add_argument(
        "--language",
        default=telemetry.env("LANGUAGE", "html"),
        help="Language id deciding whether tag pickers are offered (default: html)",
    )
    parser.add_argument(
        "--enter-to-confirm",
        action="store_true",
        help="Require Enter even when typing narrows a picker to one choice",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    config = SandwichConfig.from_env()
    if args.enter_to_confirm:
        config = config.with_overrides(enter_to_confirm=True)
    text = args.path.read_text(encoding="utf-8") if args.path else SAMPLE_TEXT
    app = SandwichApp(
        buffer=Buffer.from_text(text, name=str(args.path or "sample")),
        config=config,
        language_id=args.language,
        path=args.path,
    )
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
