"""Window presentation settings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class WindowStyle(Enum):
    """How the window is shown; DEFAULT is an alias of WINDOW."""

    WINDOW = 0
    FULLSCREEN = 1
    DEFAULT = 0


@dataclass(frozen=True)
class WindowConfig:
    """Size, style and colour depth of a window."""

    width: int
    height: int
    window_style: WindowStyle = WindowStyle.DEFAULT
    bits_per_px: int = 32