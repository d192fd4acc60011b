"""Two-component vector."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering


@total_ordering
@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector, ordered lexicographically by (x, y)."""

    x: float = 0.0
    y: float = 0.0

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __lt__(self, other: Vec2) -> bool:
        if not isinstance(other, Vec2):
            return NotImplemented
        if self.x == other.x:
            return self.y < other.y
        return self.x < other.x