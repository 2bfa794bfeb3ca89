"""Operations on lists of tiles: parsing, the full set, drawing and removal."""

from __future__ import annotations

import random

from .tile import Tile, TileError

_FULL_SET = (
    "111122223333444455556666777788889999m111122223333"
    "444455556666777788889999p11112222333344445555666677"
    "7788889999s111122223333444455556667777z"
)


def tiles_from_string(s: str) -> list[Tile]:
    """Parse compact notation such as ``1m12p124s1z``.

    Digits accumulate until a suit letter assigns them all to that suit.
    """
    tiles: list[Tile] = []
    digits: list[str] = []
    for char in s:
        if char.isdigit():
            digits.append(char)
        else:
            tiles.extend(Tile.from_string(d + char) for d in digits)
            digits.clear()
    if digits:
        raise TileError(f"{s!r} is not in the right format of tiles")
    return tiles


def all_tiles() -> list[Tile]:
    """The complete set of tiles used to build a wall."""
    return tiles_from_string(_FULL_SET)


def sort_tiles(tiles: list[Tile]) -> None:
    """Sort tiles in place in tile order."""
    tiles.sort()


def random_from(tiles: list[Tile], rng: random.Random | None = None) -> Tile:
    """A random tile of the list, left in place."""
    rng = rng or random.Random()
    return rng.choice(tiles)


def remove_equal(tiles: list[Tile], tile: Tile) -> int:
    """Remove the first tile equal to ``tile`` and return where it was.

    Raises ValueError when no such tile is present.
    """
    index = tiles.index(tile)
    del tiles[index]
    return index


def pick_from(tiles: list[Tile], rng: random.Random | None = None) -> Tile:
    """Remove a random tile from the list and return it."""
    tile = random_from(tiles, rng)
    remove_equal(tiles, tile)
    return tile


def format_tiles(tiles: list[Tile]) -> str:
    return " ".join(str(t) for t in tiles)