"""Textual host for the wrap-aware buffer."""

from .controller import TextualBufferAdapter, TextualUIHooks

__all__ = ["TextualBufferAdapter", "TextualUIHooks"]
