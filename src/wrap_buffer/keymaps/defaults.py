"""Built-in bindings for a plain text input field."""

from __future__ import annotations

from typing import Iterable

from wrap_buffer.session import (
    DeleteBackward,
    InsertChar,
    MoveDown,
    MoveLeft,
    MoveRight,
    MoveUp,
    Terminate,
)

from .models import ActionRef, Binding
from .registry import KeymapRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="edit.delete_backward",
        handler=lambda key: DeleteBackward(),
        description="Delete the character before the cursor",
    ),
    ActionRef(
        id="edit.newline",
        handler=lambda key: InsertChar("\n"),
        description="Insert a hard line break",
    ),
    ActionRef(
        id="edit.tab",
        handler=lambda key: InsertChar("\t"),
        description="Insert a tab character",
    ),
    ActionRef(
        id="cursor.left",
        handler=lambda key: MoveLeft(),
        description="Move the cursor one character left",
    ),
    ActionRef(
        id="cursor.right",
        handler=lambda key: MoveRight(),
        description="Move the cursor one character right",
    ),
    ActionRef(
        id="cursor.up",
        handler=lambda key: MoveUp(),
        description="Move the cursor to the visual row above",
    ),
    ActionRef(
        id="cursor.down",
        handler=lambda key: MoveDown(),
        description="Move the cursor to the visual row below",
    ),
    ActionRef(
        id="session.terminate",
        handler=lambda key: Terminate(),
        description="Leave the input session",
    ),
)

DEFAULT_BINDINGS: tuple[Binding, ...] = (
    Binding(key="backspace", action_id="edit.delete_backward"),
    Binding(key="enter", action_id="edit.newline"),
    Binding(key="tab", action_id="edit.tab"),
    Binding(key="left", action_id="cursor.left"),
    Binding(key="right", action_id="cursor.right"),
    Binding(key="up", action_id="cursor.up"),
    Binding(key="down", action_id="cursor.down"),
    Binding(key="escape", action_id="session.terminate"),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    actions: Iterable[ActionRef] = DEFAULT_ACTIONS,
    bindings: Iterable[Binding] = DEFAULT_BINDINGS,
) -> KeymapRegistry:
    for action in actions:
        registry.register_action(action, replace=True)
    for binding in bindings:
        registry.register_binding(binding, replace=True)
    return registry


__all__ = ["DEFAULT_ACTIONS", "DEFAULT_BINDINGS", "load_default_keymaps"]
