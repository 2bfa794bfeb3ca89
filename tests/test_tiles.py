import random
from collections import Counter

import pytest

from mentalmahjong.tile import Tile, TileError
from mentalmahjong.tiles import (
    all_tiles,
    format_tiles,
    pick_from,
    random_from,
    remove_equal,
    sort_tiles,
    tiles_from_string,
)


def test_from_string_documented_example():
    tiles = tiles_from_string("1m12p124s1z")
    assert tiles == [Tile.M1, Tile.P1, Tile.P2, Tile.S1, Tile.S2, Tile.S4, Tile.Z1]


def test_format_round_trip():
    tiles = tiles_from_string("1m12p124s1z")
    assert tiles_from_string(format_tiles(tiles).replace(" ", "")) == tiles


def test_format_empty():
    assert format_tiles([]) == ""


def test_trailing_digits_raise():
    with pytest.raises(TileError):
        tiles_from_string("123m45")


def test_bad_suit_raises():
    with pytest.raises(TileError):
        tiles_from_string("12x")


def test_all_tiles_counts():
    counts = Counter(all_tiles())
    assert Tile.NONE not in counts
    assert set(counts) == set(Tile) - {Tile.NONE}
    assert all(n == 4 for t, n in counts.items() if t is not Tile.Z6)
    assert counts[Tile.Z6] == 3


def test_sort_tiles():
    tiles = tiles_from_string("3z9m1p1m")
    sort_tiles(tiles)
    assert tiles == sorted(tiles)
    assert tiles[0] is Tile.M1 and tiles[-1] is Tile.Z3


def test_remove_equal_first_occurrence():
    tiles = tiles_from_string("12m2m3m")
    tiles = tiles_from_string("1223m")
    index = remove_equal(tiles, Tile.M2)
    assert index == 1
    assert tiles == [Tile.M1, Tile.M2, Tile.M3]


def test_remove_equal_missing():
    tiles = tiles_from_string("123m")
    with pytest.raises(ValueError):
        remove_equal(tiles, Tile.P5)


def test_random_from_keeps_list():
    tiles = tiles_from_string("123m")
    tile = random_from(tiles, random.Random(3))
    assert tile in tiles
    assert len(tiles) == 3


def test_pick_from_removes():
    wall = all_tiles()
    before = Counter(wall)
    tile = pick_from(wall, random.Random(5))
    after = Counter(wall)
    assert len(wall) == sum(before.values()) - 1
    assert before[tile] - after[tile] == 1


def test_pick_from_empty_raises():
    with pytest.raises(IndexError):
        pick_from([], random.Random(0))