"""Text buffer, cursor and soft-wrap layout."""

from .buffer import BufferView, TextBuffer
from .sync import BufferMirror, BufferSync, BufferValidationError, InvalidWidthError
from .validation import ensure_offset, ensure_width
from .wrap import Position, WrapLayout, cursor_position

__all__ = [
    "TextBuffer",
    "BufferView",
    "BufferMirror",
    "BufferSync",
    "BufferValidationError",
    "InvalidWidthError",
    "Position",
    "WrapLayout",
    "cursor_position",
    "ensure_offset",
    "ensure_width",
]
