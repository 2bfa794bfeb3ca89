"""Orientation of a seat on the board and where its tiles are laid out."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .pos import Vec2


@dataclass(frozen=True)
class Layout:
    """Board and tile dimensions, in pixels."""

    width: int
    height: int
    tile_width: int
    tile_height: int


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    def contains(self, point: Vec2) -> bool:
        """True when ``point`` lies inside; the right and bottom edges are outside."""
        return (
            self.x <= point.x < self.x + self.width
            and self.y <= point.y < self.y + self.height
        )


class Align(Enum):
    """Which side of the board a seat faces."""

    LEFT = 0
    RIGHT = 1
    UP = 2
    DOWN = 3

    def rotation(self) -> float:
        """Rotation in degrees applied to tiles drawn for this side."""
        return {
            Align.DOWN: 0.0,
            Align.RIGHT: -90.0,
            Align.UP: 180.0,
            Align.LEFT: 90.0,
        }[self]

    def hand_position(self, x: float, y: float, index: int, layout: Layout) -> Vec2:
        """Position of the tile at ``index`` in a hand anchored at (x, y)."""
        step = index * layout.tile_width
        if self is Align.RIGHT:
            return Vec2(x, y - step)
        if self is Align.LEFT:
            return Vec2(x, y + step)
        return Vec2(x + step, y)

    def discard_position(self, x: float, y: float, index: int, layout: Layout) -> Vec2:
        """Position of the discard at ``index``; discards wrap every six tiles."""
        row, col = divmod(index, 6)
        tw, th = layout.tile_width, layout.tile_height
        if self is Align.DOWN:
            return Vec2(x + col * tw + 3 * tw, y + row * th - 4 * th)
        if self is Align.RIGHT:
            return Vec2(x + row * th - 4 * th, y - col * tw - 3 * tw)
        if self is Align.UP:
            return Vec2(x - col * tw + 9 * tw, y - row * th + 4 * th)
        return Vec2(x - row * th + 4 * th, y + col * tw + 3 * tw)

    def rect(self, pos: Vec2, layout: Layout) -> Rect:
        """The area covered by a tile drawn at ``pos`` for this side."""
        tw, th = layout.tile_width, layout.tile_height
        if self is Align.DOWN:
            return Rect(pos.x, pos.y, tw, th)
        if self is Align.RIGHT:
            return Rect(pos.x, pos.y - tw, th, tw)
        if self is Align.UP:
            return Rect(pos.x - tw, pos.y - th, tw, th)
        return Rect(pos.x - th, pos.y, th, tw)