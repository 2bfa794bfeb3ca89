"""The four seats at the table."""

from __future__ import annotations

from enum import IntEnum

from .align import Align, Layout
from .pos import Vec2


class Player(IntEnum):
    PLAYER0 = 0
    PLAYER1 = 1
    PLAYER2 = 2
    PLAYER3 = 3

    def next(self) -> Player:
        """The seat that plays after this one."""
        return Player((self + 1) % 4)

    def position(self, layout: Layout) -> Vec2:
        """Anchor of this seat's hand on the board."""
        tw, th = layout.tile_width, layout.tile_height
        if self is Player.PLAYER0:
            return Vec2(layout.width / 2 - 7 * tw, layout.height - th)
        if self is Player.PLAYER1:
            return Vec2(layout.width - th, layout.height / 2 + 7 * tw)
        if self is Player.PLAYER2:
            return Vec2(layout.width / 2 - 7 * tw, th)
        return Vec2(th, layout.height / 2 - 7 * tw)

    def align(self) -> Align:
        return {
            Player.PLAYER0: Align.DOWN,
            Player.PLAYER1: Align.RIGHT,
            Player.PLAYER2: Align.UP,
            Player.PLAYER3: Align.LEFT,
        }[self]