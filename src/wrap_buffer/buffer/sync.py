"""Adapter boundary types for syncing the buffer with host widgets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol


@dataclass(frozen=True, slots=True)
class BufferMirror:
    """Host-friendly snapshot describing what the renderer should draw."""

    text: str
    cursor: int
    version: int
    attributes: dict[str, str] = field(default_factory=dict)


class BufferSync(Protocol):
    """How adapters pull renderable state out of the engine."""

    def pull_buffer(self) -> BufferMirror:
        """Return the latest buffer snapshot that the host should render."""
        ...


class BufferValidationError(RuntimeError):
    """Raised when a caller supplies a cursor offset outside the buffer."""

    def __init__(self, message: str, *, offset: int | None = None) -> None:
        super().__init__(message)
        self.offset = offset


class InvalidWidthError(ValueError):
    """Raised when a visual width cannot define row boundaries."""

    def __init__(self, width: object) -> None:
        super().__init__(f"visual width must be an int >= 1, got {width!r}")
        self.width = width
