"""Event-driven reducer: one command in, one render request out."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple, Type, cast

from wrap_buffer.buffer import Position, TextBuffer, ensure_width
from wrap_buffer.runtime import telemetry

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


@dataclass(slots=True)
class SessionState:
    """Everything the host loop owns between two events."""

    buffer: TextBuffer
    width: Optional[int] = None
    running: bool = True


@dataclass(frozen=True, slots=True)
class RenderRequest:
    """What the renderer needs for the next redraw."""

    rows: Tuple[str, ...]
    cursor: Position
    title: str


@dataclass(frozen=True, slots=True)
class UpdateResult:
    state: SessionState
    render: Optional[RenderRequest]
    changed: bool


def _insert(state: SessionState, command: Command) -> None:
    state.buffer.insert(cast(InsertChar, command).char)


def _delete_backward(state: SessionState, command: Command) -> None:
    state.buffer.delete_backward()


def _move_left(state: SessionState, command: Command) -> None:
    state.buffer.move_left()


def _move_right(state: SessionState, command: Command) -> None:
    state.buffer.move_right()


def _move_up(state: SessionState, command: Command) -> None:
    if state.width is not None:
        state.buffer.move_up(state.width)


def _move_down(state: SessionState, command: Command) -> None:
    if state.width is not None:
        state.buffer.move_down(state.width)


def _resize(state: SessionState, command: Command) -> None:
    state.width = ensure_width(cast(Resize, command).width)
    telemetry.record_event("session.resize", data={"width": state.width})


def _terminate(state: SessionState, command: Command) -> None:
    state.running = False
    telemetry.record_event("session.terminate", data={"buffer": state.buffer.name})


_HANDLERS: Dict[Type[object], Callable[[SessionState, Command], None]] = {
    InsertChar: _insert,
    DeleteBackward: _delete_backward,
    MoveLeft: _move_left,
    MoveRight: _move_right,
    MoveUp: _move_up,
    MoveDown: _move_down,
    Resize: _resize,
    Terminate: _terminate,
}


def render_request(state: SessionState) -> Optional[RenderRequest]:
    """Build the redraw payload, or ``None`` when nothing should be drawn."""

    if not state.running or state.width is None:
        return None
    buffer = state.buffer
    x, y = buffer.cursor_position(state.width)
    return RenderRequest(
        rows=buffer.visual_rows(state.width),
        cursor=(x, y),
        title=f"({x}, {y})",
    )


def update(state: SessionState, command: Command) -> UpdateResult:
    """Apply ``command`` to ``state`` and describe the next redraw.

    Commands arriving after ``Terminate`` are ignored.
    """

    if not state.running:
        return UpdateResult(state=state, render=None, changed=False)

    handler = _HANDLERS.get(type(command))
    if handler is None:
        raise TypeError(f"Unsupported command {command!r}")

    before = (state.buffer.version, state.buffer.cursor, state.width, state.running)
    handler(state, command)
    after = (state.buffer.version, state.buffer.cursor, state.width, state.running)
    telemetry.record_event(
        "session.command",
        level="debug",
        data={"command": type(command).__name__, "cursor": state.buffer.cursor},
    )
    return UpdateResult(state=state, render=render_request(state), changed=before != after)


__all__ = ["RenderRequest", "SessionState", "UpdateResult", "render_request", "update"]
