from __future__ import annotations

import pytest

from sandwich_engine.buffer import EditorState, Position, Range
from sandwich_engine.edits import OperationKind
from sandwich_engine.host import (
    TAG_PROMPT,
    Choice,
    SandwichConfig,
    filter_choices,
    mode_choices,
    operation_choices,
    pair_choices,
)
from sandwich_engine.pairs import Bracket, Quote
from sandwich_engine.selectors import SelectionMode


def labels(choices) -> list[str]:
    return [choice.label for choice in choices]


def test_config_defaults() -> None:
    config = SandwichConfig()

    assert config.enter_to_confirm is False
    assert config.highlight_color == "rgba(255, 255, 0, 0.3)"
    assert config.default_pairs == ("'", '"', "`", "t")


def test_config_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SANDWICH_ENGINE_ENTER_TO_CONFIRM", "yes")
    monkeypatch.setenv("SANDWICH_ENGINE_HIGHLIGHT_COLOR", "red")
    monkeypatch.setenv("SANDWICH_ENGINE_DEFAULT_PAIRS", "(, [ ,t")

    config = SandwichConfig.from_env()

    assert config.enter_to_confirm is True
    assert config.highlight_color == "red"
    assert config.default_pairs == ("(", "[", "t")


def test_config_from_env_falls_back_to_defaults(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.delenv("SANDWICH_ENGINE_ENTER_TO_CONFIRM", raising=False)
    monkeypatch.setenv("SANDWICH_ENGINE_DEFAULT_PAIRS", " , ")

    config = SandwichConfig.from_env()

    assert config.enter_to_confirm is False
    assert config.default_pairs == SandwichConfig().default_pairs


@pytest.mark.parametrize(
    ("language_id", "expected"),
    [("html", True), ("TypeScriptReact", True), ("svelte", True), ("python", False)],
)
def test_is_html_like(language_id: str, expected: bool) -> None:
    assert SandwichConfig().is_html_like(language_id) is expected


def test_with_overrides_returns_copy() -> None:
    config = SandwichConfig()

    changed = config.with_overrides(enter_to_confirm=True)

    assert changed.enter_to_confirm is True
    assert config.enter_to_confirm is False


def test_filter_single_match_is_picked() -> None:
    result = filter_choices(operation_choices(), "d")

    assert result.status == "match"
    assert result.choice is not None
    assert result.choice.value is OperationKind.DELETE


def test_filter_waits_for_enter_when_configured() -> None:
    result = filter_choices(operation_choices(), "d", enter_to_confirm=True)

    assert result.status == "pending"
    assert labels(result.remaining) == ["d"]


def test_filter_empty_input_is_pending() -> None:
    result = filter_choices(operation_choices(), "")

    assert result.status == "pending"
    assert labels(result.remaining) == ["a", "d", "r"]


def test_filter_miss() -> None:
    assert filter_choices(operation_choices(), "z").status == "miss"


def test_filter_confirm_prefers_exact_label() -> None:
    choices = (
        Choice("it", "Inside tag", 1),
        Choice("t", "Tag", 2),
    )

    result = filter_choices(choices, "t", confirm=True)

    assert result.status == "match"
    assert result.choice is not None
    assert result.choice.value == 2


def test_mode_choices_depend_on_selection_and_language() -> None:
    plain = EditorState.from_text("abc", Position(0, 1))
    selected = EditorState.from_text(
        "abc", Position(0, 2), Range(Position(0, 0), Position(0, 2))
    )

    assert labels(mode_choices(plain, html_like=False)) == ["_"]
    assert labels(mode_choices(selected, html_like=False)) == ["_", "s"]
    assert labels(mode_choices(plain, html_like=True)) == ["_", "it", "st", "at"]
    assert mode_choices(selected, html_like=False)[1].value is (
        SelectionMode.CURRENT_SELECTION
    )


def test_pair_choices_follow_config() -> None:
    config = SandwichConfig(default_pairs=("(", "'", TAG_PROMPT, "?"))

    html = pair_choices(config, html_like=True)
    plain = pair_choices(config, html_like=False)

    assert labels(html) == ["(", "'", "t"]
    assert labels(plain) == ["(", "'"]
    assert html[0].value == Bracket("(")
    assert html[1].value == Quote("'")
    assert html[1].description == "Single quotes"
    assert html[2].value == TAG_PROMPT
