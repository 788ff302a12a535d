"""Key-to-command resolution."""

from .defaults import DEFAULT_ACTIONS, DEFAULT_BINDINGS, load_default_keymaps
from .models import ActionRef, Binding, KeyInput, normalize_key
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats

__all__ = [
    "ActionRef",
    "Binding",
    "KeyInput",
    "KeymapConflictError",
    "KeymapRegistry",
    "RegistryStats",
    "DEFAULT_ACTIONS",
    "DEFAULT_BINDINGS",
    "load_default_keymaps",
    "normalize_key",
]
