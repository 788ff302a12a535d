"""Explicit session state and the per-event update function."""

from .commands import (
    Command,
    DeleteBackward,
    InsertChar,
    MoveDown,
    MoveLeft,
    MoveRight,
    MoveUp,
    Resize,
    Terminate,
)
from .reducer import RenderRequest, SessionState, UpdateResult, render_request, update

__all__ = [
    "Command",
    "DeleteBackward",
    "InsertChar",
    "MoveDown",
    "MoveLeft",
    "MoveRight",
    "MoveUp",
    "Resize",
    "Terminate",
    "RenderRequest",
    "SessionState",
    "UpdateResult",
    "render_request",
    "update",
]
