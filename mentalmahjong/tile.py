"""Single mahjong tiles: identity, classification and dora succession."""

from __future__ import annotations

import random
from enum import IntEnum


class TileError(ValueError):
    """Raised when a value does not describe a valid tile."""


_SUIT_BASES = {"m": 1, "p": 10, "s": 19, "z": 28}


class Tile(IntEnum):
    """A mahjong tile.

    Tiles order as man before pin before su before winds before dragons,
    winds from east to north and dragons from white to red.
    """

    NONE = 0
    M1 = 1
    M2 = 2
    M3 = 3
    M4 = 4
    M5 = 5
    M6 = 6
    M7 = 7
    M8 = 8
    M9 = 9
    P1 = 10
    P2 = 11
    P3 = 12
    P4 = 13
    P5 = 14
    P6 = 15
    P7 = 16
    P8 = 17
    P9 = 18
    S1 = 19
    S2 = 20
    S3 = 21
    S4 = 22
    S5 = 23
    S6 = 24
    S7 = 25
    S8 = 26
    S9 = 27
    Z1 = 28  # East wind
    Z2 = 29  # South wind
    Z3 = 30  # West wind
    Z4 = 31  # North wind
    Z5 = 32  # White dragon
    Z6 = 33  # Green dragon
    Z7 = 34  # Red dragon

    @classmethod
    def from_string(cls, name: str) -> Tile:
        """Parse a two-character tile name such as ``1m``, ``4s`` or ``2z``."""
        if len(name) != 2:
            raise TileError(f"{name!r} does not describe a tile; use 1m, 4s or 2z")
        digit, suit = name
        base = _SUIT_BASES.get(suit)
        limit = 7 if suit == "z" else 9
        if base is None or digit not in "123456789" or int(digit) > limit:
            raise TileError(f"{name!r} does not describe a tile; use 1m, 4s or 2z")
        return cls(base + int(digit) - 1)

    def number(self) -> int | None:
        """The face number of a suited tile, or None for honors and NONE."""
        if self.is_man():
            return self - Tile.M1 + 1
        if self.is_pin():
            return self - Tile.P1 + 1
        if self.is_su():
            return self - Tile.S1 + 1
        return None

    def is_terminal(self) -> bool:
        return self.is_family() and self.number() in (1, 9)

    def is_honor(self) -> bool:
        return Tile.Z1 <= self <= Tile.Z7

    def is_dragon(self) -> bool:
        return Tile.Z5 <= self <= Tile.Z7

    def is_wind(self) -> bool:
        return Tile.Z1 <= self <= Tile.Z4

    def is_family(self) -> bool:
        return not self.is_honor()

    def is_man(self) -> bool:
        return Tile.M1 <= self <= Tile.M9

    def is_pin(self) -> bool:
        return Tile.P1 <= self <= Tile.P9

    def is_su(self) -> bool:
        return Tile.S1 <= self <= Tile.S9

    def same_family(self, other: Tile) -> bool:
        return (
            (self.is_man() and other.is_man())
            or (self.is_pin() and other.is_pin())
            or (self.is_su() and other.is_su())
        )

    def adjacent(self, other: Tile) -> bool:
        """True when both tiles are of one suit and their numbers differ by one."""
        if not (self.is_family() and other.is_family() and self.same_family(other)):
            return False
        return abs(self.number() - other.number()) == 1

    def next_dora(self) -> Tile:
        """The tile indicated as dora when this tile is the indicator."""
        if self is Tile.NONE:
            raise TileError("no dora follows the NONE tile")
        if self in (Tile.M9, Tile.P9, Tile.S9):
            return Tile(self - 8)
        if self is Tile.Z4:
            return Tile.Z1
        if self is Tile.Z7:
            return Tile.Z5
        return Tile(self + 1)

    def __str__(self) -> str:
        if self is Tile.NONE:
            return "None"
        if self.is_honor():
            return f"{self - Tile.Z1 + 1}z"
        suit = "m" if self.is_man() else "p" if self.is_pin() else "s"
        return f"{self.number()}{suit}"


def random_tile(rng: random.Random | None = None) -> Tile:
    """Any tile value, NONE included, drawn uniformly."""
    rng = rng or random.Random()
    return Tile(rng.randrange(Tile.Z7 + 1))