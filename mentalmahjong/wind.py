"""Seat winds in play order."""

from __future__ import annotations

from enum import IntEnum


class Wind(IntEnum):
    """Seat winds; the player after EAST is always SOUTH."""

    EAST = 0
    SOUTH = 1
    WEST = 2
    NORTH = 3

    def next(self) -> Wind:
        return Wind((self + 1) % 4)

    def __str__(self) -> str:
        return self.name