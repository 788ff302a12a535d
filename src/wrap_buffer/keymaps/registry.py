"""Keymap registry storing actions and the keys bound to them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from wrap_buffer.runtime.telemetry import span
from wrap_buffer.session import Command, InsertChar

from .models import ActionRef, Binding, KeyInput, normalize_key


@dataclass(slots=True)
class RegistryStats:
    action_count: int
    binding_count: int


class KeymapConflictError(RuntimeError):
    """Raised when a key is already bound to a different action."""

    def __init__(self, binding: Binding, existing: Binding) -> None:
        super().__init__(
            f"Key '{binding.key}' is already bound to '{existing.action_id}'"
        )
        self.binding = binding
        self.existing = existing


class KeymapRegistry:
    """Owns action references and resolves key presses to commands."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._actions: Dict[str, ActionRef] = {}
        self._bindings: Dict[str, Binding] = {}
        self._logger_name = logger_name

    def register_action(self, action: ActionRef, *, replace: bool = False) -> ActionRef:
        if not replace and action.id in self._actions:
            raise ValueError(f"Action '{action.id}' already registered")
        self._actions[action.id] = action
        return action

    def register_binding(self, binding: Binding, *, replace: bool = False) -> Binding:
        with span(
            "keymaps::register_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"key": binding.key, "action_id": binding.action_id},
        ) as handle:
            if binding.action_id not in self._actions:
                handle.add_metadata("missing_action", binding.action_id)
                raise KeyError(
                    f"Binding for '{binding.key}' references unknown action "
                    f"'{binding.action_id}'"
                )
            existing = self._bindings.get(binding.key)
            if existing is not None and existing != binding and not replace:
                raise KeymapConflictError(binding, existing)
            self._bindings[binding.key] = binding
            return binding

    def unregister_binding(self, key: str) -> Optional[Binding]:
        return self._bindings.pop(normalize_key(key), None)

    def stats(self) -> RegistryStats:
        return RegistryStats(
            action_count=len(self._actions), binding_count=len(self._bindings)
        )

    def resolve(self, key: KeyInput) -> Optional[Command]:
        """Command for ``key``, falling back to inserting printable text."""

        binding = self._bindings.get(key.token)
        if binding is not None:
            return self._actions[binding.action_id](key)
        char = key.printable
        if char is not None:
            return InsertChar(char)
        return None


__all__ = ["KeymapConflictError", "KeymapRegistry", "RegistryStats"]
