"""Wrap-aware text input buffer for terminal hosts."""

__all__ = [
    "adapters",
    "buffer",
    "config",
    "keymaps",
    "runtime",
    "session",
]

__version__ = "0.1.0"
