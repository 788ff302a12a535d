from __future__ import annotations

import pytest

from wrap_buffer.buffer import InvalidWidthError, TextBuffer
from wrap_buffer.session import (
    DeleteBackward,
    InsertChar,
    MoveDown,
    MoveLeft,
    MoveRight,
    MoveUp,
    Resize,
    SessionState,
    Terminate,
    update,
)


def make_state(text: str = "", width: int | None = None) -> SessionState:
    return SessionState(buffer=TextBuffer.from_text(text), width=width)


def test_no_render_until_width_is_known() -> None:
    state = make_state()

    result = update(state, InsertChar("h"))

    assert result.changed is True
    assert result.render is None
    assert state.buffer.text == "h"


def test_resize_produces_render_request() -> None:
    state = make_state("hi")

    result = update(state, Resize(10))

    assert state.width == 10
    assert result.render is not None
    assert result.render.rows == ("hi",)
    assert result.render.cursor == (2, 0)
    assert result.render.title == "(2, 0)"


def test_edit_commands_drive_the_buffer() -> None:
    state = make_state(width=10)

    for command in (InsertChar("h"), InsertChar("i"), MoveLeft(), DeleteBackward()):
        update(state, command)

    assert state.buffer.text == "i"
    assert state.buffer.cursor == 0
    result = update(state, MoveRight())
    assert result.render is not None
    assert result.render.cursor == (1, 0)


def test_unchanged_state_is_reported() -> None:
    state = make_state(width=10)

    result = update(state, MoveLeft())

    assert result.changed is False
    assert result.render is not None


def test_vertical_moves_use_last_seen_width() -> None:
    state = make_state("abcdef")

    update(state, MoveUp())
    assert state.buffer.cursor == 6

    update(state, Resize(3))
    update(state, MoveUp())
    assert state.buffer.cursor == 3
    update(state, MoveDown())
    assert state.buffer.cursor == 6


def test_soft_wrapped_rows_are_rendered() -> None:
    state = make_state("abcdef", width=3)

    result = update(state, MoveLeft())

    assert result.render is not None
    assert result.render.rows == ("abc", "def", "")
    assert result.render.cursor == (2, 1)


def test_terminate_stops_the_session() -> None:
    state = make_state("abc", width=10)

    result = update(state, Terminate())
    assert state.running is False
    assert result.render is None
    assert result.changed is True

    ignored = update(state, InsertChar("x"))
    assert ignored.changed is False
    assert state.buffer.text == "abc"


def test_resize_rejects_invalid_width() -> None:
    state = make_state(width=10)

    with pytest.raises(InvalidWidthError):
        update(state, Resize(0))
    assert state.width == 10


def test_unknown_command_is_rejected() -> None:
    state = make_state()

    with pytest.raises(TypeError):
        update(state, object())  # type: ignore[arg-type]


def test_insert_and_resize_read_their_payloads() -> None:
    state = make_state()

    update(state, InsertChar("\t"))
    update(state, Resize(4))

    assert state.buffer.text == "\t"
    assert state.width == 4
