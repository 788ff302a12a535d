"""Dataclasses describing key input, actions and bindings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable

from wrap_buffer.session import Command

KEY_ALIASES = {
    "return": "enter",
    "esc": "escape",
    "ctrl+h": "backspace",
    "ctrl+i": "tab",
    "ctrl+m": "enter",
}


def _normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = tuple(m.strip().lower() for m in modifiers if m.strip())
    return tuple(sorted(dict.fromkeys(values)))


def normalize_key(key: str) -> str:
    """Lower-case named keys and fold host aliases; single characters stay as-is."""

    if len(key) == 1:
        return key
    lowered = key.strip().lower()
    return KEY_ALIASES.get(lowered, lowered)


@dataclass(frozen=True, slots=True)
class KeyInput:
    """Single decoded key press handed over by the host."""

    key: str
    text: str | None = None
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "key", normalize_key(self.key))
        object.__setattr__(self, "modifiers", _normalize_modifiers(self.modifiers))

    @property
    def token(self) -> str:
        if self.modifiers:
            return normalize_key("+".join((*self.modifiers, self.key)))
        return self.key

    @property
    def printable(self) -> str | None:
        """The character this key types, if it types exactly one."""

        if self.modifiers and self.modifiers != ("shift",):
            return None
        text = self.text if self.text is not None else self.key
        if len(text) == 1 and text.isprintable():
            return text
        return None


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Named factory turning a key press into a session command."""

    id: str
    handler: Callable[[KeyInput], Command]
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("action id cannot be empty")

    def __call__(self, key: KeyInput) -> Command:
        return self.handler(key)


@dataclass(frozen=True, slots=True)
class Binding:
    key: str
    action_id: str

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("binding key cannot be empty")
        object.__setattr__(self, "key", normalize_key(self.key))
