"""Discrete edit and navigation commands delivered by an input source."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class InsertChar:
    char: str


@dataclass(frozen=True, slots=True)
class DeleteBackward:
    pass


@dataclass(frozen=True, slots=True)
class MoveLeft:
    pass


@dataclass(frozen=True, slots=True)
class MoveRight:
    pass


@dataclass(frozen=True, slots=True)
class MoveUp:
    pass


@dataclass(frozen=True, slots=True)
class MoveDown:
    pass


@dataclass(frozen=True, slots=True)
class Resize:
    """Visual width of the text area changed (border already subtracted)."""

    width: int


@dataclass(frozen=True, slots=True)
class Terminate:
    pass


Command = Union[
    InsertChar,
    DeleteBackward,
    MoveLeft,
    MoveRight,
    MoveUp,
    MoveDown,
    Resize,
    Terminate,
]

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
]
