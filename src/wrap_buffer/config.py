"""Engine configuration and environment loading."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

ENV_PREFIX = "WRAP_BUFFER_"


class VerticalMotion(str, Enum):
    """How ``move_up``/``move_down`` pick the target offset."""

    COLUMN = "column"
    BOUNDARY = "boundary"


@dataclass(frozen=True, slots=True)
class BufferConfig:
    """Layout and navigation settings for a ``TextBuffer``."""

    tab_width: int = 1
    vertical_motion: VerticalMotion = VerticalMotion.COLUMN

    def __post_init__(self) -> None:
        if isinstance(self.tab_width, bool) or not isinstance(self.tab_width, int):
            raise TypeError("tab_width must be an int")
        if self.tab_width < 1:
            raise ValueError(f"tab_width must be >= 1, got {self.tab_width}")
        object.__setattr__(
            self, "vertical_motion", VerticalMotion(self.vertical_motion)
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "BufferConfig":
        """Build a config from ``WRAP_BUFFER_*`` variables.

        Malformed values fall back to the defaults rather than failing startup.
        """

        env = os.environ if environ is None else environ
        tab_width = _int_or(env.get(f"{ENV_PREFIX}TAB_WIDTH"), 1)
        if tab_width < 1:
            tab_width = 1
        raw_motion = (env.get(f"{ENV_PREFIX}VERTICAL_MOTION") or "").strip().lower()
        try:
            motion = VerticalMotion(raw_motion) if raw_motion else VerticalMotion.COLUMN
        except ValueError:
            motion = VerticalMotion.COLUMN
        return cls(tab_width=tab_width, vertical_motion=motion)


def _int_or(value: Optional[str], fallback: int) -> int:
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


DEFAULT_CONFIG = BufferConfig()

__all__ = ["BufferConfig", "DEFAULT_CONFIG", "ENV_PREFIX", "VerticalMotion"]
