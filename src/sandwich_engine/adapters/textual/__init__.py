"""Textual adapter; the runnable app lives in ``.app`` and needs textual."""

from .controller import TRIGGER_KEY, TextualSandwichAdapter, TextualUIHooks

__all__ = ["TextualSandwichAdapter", "TextualUIHooks", "TRIGGER_KEY"]
