"""Animated positions that ease from a start point to an end point."""

from __future__ import annotations

from dataclasses import dataclass

SPEED = 0.01


@dataclass(frozen=True)
class Vec2:
    """A point or offset on the board, in pixels."""

    x: float
    y: float


@dataclass
class Pos:
    """A position moving from ``begin`` to ``end`` as ``t`` goes from 0 to 1."""

    begin: Vec2
    end: Vec2
    t: float = 1.0

    @classmethod
    def from_point(cls, point: Vec2) -> Pos:
        """A position that stays at ``point``."""
        return cls(begin=point, end=point, t=1.0)

    @classmethod
    def transition(cls, begin: Vec2, end: Vec2) -> Pos:
        """A position that starts moving from ``begin`` towards ``end``."""
        return cls(begin=begin, end=end, t=0.1)

    def current(self) -> Vec2:
        """Where the position is now, with cubic ease-in-out."""
        t = self.t
        v = -2 * t + 2
        x = 4 * t * t * t if t < 0.5 else 1 - v * v * v / 2
        return Vec2(
            self.begin.x * (1.0 - x) + x * self.end.x,
            self.begin.y * (1.0 - x) + x * self.end.y,
        )

    def update(self) -> None:
        """Advance the transition by one step."""
        if self.t >= 1.0:
            self.t = 1.0
        elif self.t < 0.0:
            self.t = 0.0
        else:
            self.t += SPEED