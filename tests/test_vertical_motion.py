from __future__ import annotations

from wrap_buffer.buffer import TextBuffer
from wrap_buffer.config import BufferConfig, VerticalMotion

BOUNDARY = BufferConfig(vertical_motion=VerticalMotion.BOUNDARY)


def make_buffer(text: str, cursor: int, config: BufferConfig | None = None) -> TextBuffer:
    return TextBuffer.from_text(text, cursor=cursor, config=config)


def test_column_motion_across_soft_wrap() -> None:
    buffer = make_buffer("abcdef", cursor=4)

    buffer.move_up(3)
    assert buffer.cursor == 1

    buffer.move_down(3)
    assert buffer.cursor == 4


def test_column_motion_on_first_row_goes_to_start() -> None:
    buffer = make_buffer("abcdef", cursor=2)

    buffer.move_up(3)

    assert buffer.cursor == 0


def test_column_motion_on_last_row_goes_to_end() -> None:
    buffer = make_buffer("ab\ncd", cursor=3)

    buffer.move_down(10)

    assert buffer.cursor == 5


def test_column_motion_clamps_to_short_row_below() -> None:
    buffer = make_buffer("hello\nhi", cursor=4)

    buffer.move_down(10)

    assert buffer.cursor == 8
    assert buffer.cursor_position(10) == (2, 1)


def test_column_motion_stops_before_newline_of_short_row_above() -> None:
    buffer = make_buffer("hi\nhello", cursor=8)

    buffer.move_up(10)

    assert buffer.cursor == 2
    assert buffer.cursor_position(10) == (2, 0)


def test_column_motion_stops_before_soft_wrap() -> None:
    buffer = make_buffer("abcdefgh", cursor=8)

    buffer.move_up(3)

    # Row 1 is "def"; column 2 of it is offset 5, not the wrap offset 6.
    assert buffer.cursor_position(3) == (2, 1)
    assert buffer.cursor == 5


def test_boundary_motion_jumps_to_row_starts() -> None:
    buffer = make_buffer("abcdef", cursor=4, config=BOUNDARY)

    buffer.move_up(3)
    assert buffer.cursor == 0

    buffer.move_up(3)
    assert buffer.cursor == 0

    buffer.move_down(3)
    assert buffer.cursor == 3

    buffer.move_down(3)
    assert buffer.cursor == 6

    buffer.move_down(3)
    assert buffer.cursor == 6


def test_boundary_motion_follows_hard_newlines() -> None:
    buffer = make_buffer("ab\ncd", cursor=1, config=BOUNDARY)

    buffer.move_down(10)
    assert buffer.cursor == 3

    buffer.move_right()
    buffer.move_up(10)
    assert buffer.cursor == 0


def test_vertical_motion_leaves_content_untouched() -> None:
    buffer = make_buffer("one\ntwo\nthree", cursor=6)
    version = buffer.version

    buffer.move_up(4)
    buffer.move_down(4)
    buffer.move_down(4)

    assert buffer.text == "one\ntwo\nthree"
    assert buffer.version == version
