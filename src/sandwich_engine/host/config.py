"""Host configuration read from ``SANDWICH_ENGINE_*`` variables."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from sandwich_engine.runtime.telemetry import env, env_flag

DEFAULT_HIGHLIGHT_COLOR = "rgba(255, 255, 0, 0.3)"
DEFAULT_PAIRS: tuple[str, ...] = ("'", '"', "`", "t")
HTML_LANGUAGE_IDS: frozenset[str] = frozenset(
    {"html", "xml", "javascriptreact", "typescriptreact", "vue", "svelte"}
)


@dataclass(frozen=True, slots=True)
class SandwichConfig:
    """Behaviour switches for the interactive layer.

    ``enter_to_confirm`` disables auto-picking when typing narrows a picker to
    one choice. ``default_pairs`` lists the pair labels offered by the pair
    picker in order; ``"t"`` stands for a tag whose name is prompted for.
    """

    enter_to_confirm: bool = False
    highlight_color: str = DEFAULT_HIGHLIGHT_COLOR
    default_pairs: tuple[str, ...] = DEFAULT_PAIRS
    html_language_ids: frozenset[str] = HTML_LANGUAGE_IDS

    @classmethod
    def from_env(cls) -> "SandwichConfig":
        return cls(
            enter_to_confirm=env_flag("ENTER_TO_CONFIRM", False),
            highlight_color=env("HIGHLIGHT_COLOR") or DEFAULT_HIGHLIGHT_COLOR,
            default_pairs=_parse_pairs(env("DEFAULT_PAIRS")) or DEFAULT_PAIRS,
        )

    def is_html_like(self, language_id: Optional[str]) -> bool:
        return (language_id or "").lower() in self.html_language_ids

    def with_overrides(self, **changes: object) -> "SandwichConfig":
        return replace(self, **changes)


def _parse_pairs(raw: Optional[str]) -> tuple[str, ...]:
    if not raw:
        return ()
    return tuple(token.strip() for token in raw.split(",") if token.strip())


__all__ = [
    "SandwichConfig",
    "DEFAULT_HIGHLIGHT_COLOR",
    "DEFAULT_PAIRS",
    "HTML_LANGUAGE_IDS",
]
