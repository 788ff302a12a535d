"""Validation helpers shared across buffer services."""

from __future__ import annotations

from .sync import BufferValidationError, InvalidWidthError


def ensure_width(width: object) -> int:
    if isinstance(width, bool) or not isinstance(width, int) or width < 1:
        raise InvalidWidthError(width)
    return width


def ensure_offset(text: str, offset: int) -> int:
    if offset < 0 or offset > len(text):
        raise BufferValidationError(
            f"Offset {offset} out of range for length {len(text)}", offset=offset
        )
    return offset
