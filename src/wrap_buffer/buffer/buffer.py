"""Editable character buffer with an integrated, wrap-aware cursor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from wrap_buffer.config import DEFAULT_CONFIG, BufferConfig, VerticalMotion
from wrap_buffer.runtime import telemetry

from .sync import BufferMirror
from .validation import ensure_offset, ensure_width
from .wrap import NEWLINE, Position, WrapLayout


@dataclass(frozen=True, slots=True)
class BufferView:
    version: int
    text: str
    cursor: int


class TextBuffer:
    """Linear sequence of characters plus a cursor offset into it.

    The cursor is an insertion point: ``0 <= cursor <= len(buffer)``. Every
    public method leaves that invariant intact; motion past either end is
    clamped rather than reported.
    """

    def __init__(
        self,
        *,
        name: str = "default",
        config: Optional[BufferConfig] = None,
    ) -> None:
        self.name = name
        self.config = config or DEFAULT_CONFIG
        self._chars: List[str] = []
        self._cursor = 0
        self._version = 0
        self._layout: Optional[Tuple[int, WrapLayout]] = None

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        cursor: Optional[int] = None,
        name: str = "default",
        config: Optional[BufferConfig] = None,
    ) -> "TextBuffer":
        buffer = cls(name=name, config=config)
        buffer._chars = list(text)
        buffer._cursor = len(text) if cursor is None else ensure_offset(text, cursor)
        return buffer

    @property
    def text(self) -> str:
        return "".join(self._chars)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def version(self) -> int:
        return self._version

    def __len__(self) -> int:
        return len(self._chars)

    def __repr__(self) -> str:
        return f"TextBuffer(name={self.name!r}, text={self.text!r}, cursor={self._cursor})"

    # -- editing -----------------------------------------------------------

    def insert(self, char: str) -> None:
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError(f"insert expects a single character, got {char!r}")
        with self._span("insert"):
            self._chars.insert(self._cursor, char)
            self._cursor += 1
            self._touch()

    def extend(self, chars: Iterable[str]) -> None:
        for char in chars:
            self.insert(char)

    def delete_backward(self) -> None:
        if self._cursor == 0:
            return
        with self._span("delete_backward"):
            del self._chars[self._cursor - 1]
            self._cursor -= 1
            self._touch()

    # -- linear motion -----------------------------------------------------

    def move_left(self) -> None:
        self._cursor = max(self._cursor - 1, 0)

    def move_right(self) -> None:
        self._cursor = min(self._cursor + 1, len(self._chars))

    # -- wrap-aware motion -------------------------------------------------

    def move_up(self, width: int) -> None:
        with self._span("move_up", width=width):
            layout = self.layout(width)
            row = layout.row_of(self._cursor)
            if self.config.vertical_motion is VerticalMotion.BOUNDARY:
                self._cursor = layout.row_start(max(row - 1, 0))
            elif row == 0:
                self._cursor = 0
            else:
                column = layout.columns[self._cursor]
                self._cursor = layout.offset_at(row - 1, column)

    def move_down(self, width: int) -> None:
        with self._span("move_down", width=width):
            layout = self.layout(width)
            row = layout.row_of(self._cursor)
            if self.config.vertical_motion is VerticalMotion.BOUNDARY:
                self._cursor = min(layout.row_end(row), len(self._chars))
            elif row >= layout.last_row:
                self._cursor = len(self._chars)
            else:
                column = layout.columns[self._cursor]
                self._cursor = layout.offset_at(row + 1, column)

    def cursor_position(self, width: int) -> Position:
        """Return ``(column, row)`` of the cursor relative to the text area."""

        return self.layout(width).position(self._cursor)

    def layout(self, width: int) -> WrapLayout:
        """Wrap layout of the current text at ``width``.

        The last layout is reused while the text version and width match;
        any edit invalidates it.
        """

        width = ensure_width(width)
        cached = self._layout
        if cached is not None and cached[0] == self._version and cached[1].width == width:
            return cached[1]
        layout = WrapLayout.build(self.text, width, tab_width=self.config.tab_width)
        self._layout = (self._version, layout)
        return layout

    # -- rendering ---------------------------------------------------------

    def render(self) -> Tuple[str, ...]:
        """Content split at hard newlines; ``"\\n".join`` restores the text."""

        return tuple(self.text.split(NEWLINE))

    def visual_rows(self, width: int) -> Tuple[str, ...]:
        return self.layout(width).visual_rows()

    def snapshot(self) -> BufferView:
        return BufferView(version=self._version, text=self.text, cursor=self._cursor)

    def mirror(self, *, attributes: Optional[dict[str, str]] = None) -> BufferMirror:
        return BufferMirror(
            text=self.text,
            cursor=self._cursor,
            version=self._version,
            attributes=dict(attributes or {}),
        )

    def _touch(self) -> None:
        self._version += 1
        self._layout = None

    def _span(self, label: str, **metadata: object):
        return telemetry.span(
            f"buffer::{label}",
            component="buffer",
            metadata={"buffer": self.name, "cursor": self._cursor, **metadata},
        )


__all__ = ["BufferView", "TextBuffer"]
