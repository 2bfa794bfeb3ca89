"""Patterns: one way of splitting a hand into pairs, sequences and sets."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable

from .tile import Tile
from .tiles import format_tiles


class GroupType(Enum):
    PAIR_CLOSE = auto()  # pair
    SEQUENCE_CLOSE = auto()  # sequence not from a chi
    SEQUENCE_OPEN = auto()  # sequence from a chi
    THREE_CLOSE = auto()  # three of a kind not from a pon
    THREE_OPEN = auto()  # three of a kind from a pon
    FOUR_CLOSE = auto()  # closed kan
    FOUR_OPEN = auto()  # open kan


_OPEN_TYPES = frozenset(
    {GroupType.SEQUENCE_OPEN, GroupType.THREE_OPEN, GroupType.FOUR_OPEN}
)
_SET_TYPES = frozenset(
    {
        GroupType.SEQUENCE_CLOSE,
        GroupType.SEQUENCE_OPEN,
        GroupType.THREE_CLOSE,
        GroupType.THREE_OPEN,
    }
)


@dataclass
class Pattern:
    """Groups already chosen from a hand plus the tiles not yet grouped.

    The pattern is partial while ``tiles`` is not empty.
    """

    groups: list[list[Tile]] = field(default_factory=list)
    group_types: list[GroupType] = field(default_factory=list)
    tiles: list[Tile] = field(default_factory=list)

    @classmethod
    def from_tiles(cls, tiles: list[Tile]) -> Pattern:
        return cls(tiles=list(tiles))

    def add_group(self, group: list[Tile], group_type: GroupType) -> None:
        self.groups.append(list(group))
        self.group_types.append(group_type)

    def remove_tile(self, tile: Tile) -> None:
        """Remove the first ungrouped tile equal to ``tile``, if there is one."""
        if tile in self.tiles:
            self.tiles.remove(tile)

    def get_tile(self, pos: int) -> Tile | None:
        """The ungrouped tile at ``pos``, or None past the end."""
        if 0 <= pos < len(self.tiles):
            return self.tiles[pos]
        return None

    def copy(self) -> Pattern:
        return Pattern(
            groups=[list(group) for group in self.groups],
            group_types=list(self.group_types),
            tiles=list(self.tiles),
        )

    def is_open(self) -> bool:
        return any(t in _OPEN_TYPES for t in self.group_types)

    def is_complete(self) -> bool:
        """Exactly one pair and four other groups."""
        pairs = sum(1 for t in self.group_types if t is GroupType.PAIR_CLOSE)
        return pairs == 1 and len(self.group_types) - pairs == 4

    def has_pair(self) -> bool:
        return GroupType.PAIR_CLOSE in self.group_types

    def has_four_group(self) -> bool:
        """True when four sequences or three-of-a-kinds have been chosen."""
        return sum(1 for t in self.group_types if t in _SET_TYPES) == 4

    def _chain(self, size: int, fits: Callable[[Tile, Tile], bool]) -> list[Tile] | None:
        # Start from the first ungrouped tile and extend with the next tiles
        # that fit the last one kept.
        chain: list[Tile] = []
        for tile in self.tiles:
            if not chain or fits(chain[-1], tile):
                chain.append(tile)
                if len(chain) == size:
                    return chain
        return None

    def next_pair(self) -> list[Tile] | None:
        """The first ungrouped tile with a later equal tile, or None."""
        return self._chain(2, lambda a, b: a == b)

    def next_three_same(self) -> list[Tile] | None:
        """The first ungrouped tile with two later equal tiles, or None."""
        return self._chain(3, lambda a, b: a == b)

    def next_sequence(self) -> list[Tile] | None:
        """A run of three adjacent tiles starting at the first ungrouped tile."""
        return self._chain(3, Tile.adjacent)

    def groups_without_pair(self) -> list[list[Tile]]:
        return [
            group
            for group, kind in zip(self.groups, self.group_types)
            if kind is not GroupType.PAIR_CLOSE
        ]

    def group_types_without_pair(self) -> list[GroupType]:
        return [t for t in self.group_types if t is not GroupType.PAIR_CLOSE]

    def __str__(self) -> str:
        grouped = "".join(" ".join(str(t) for t in group) + "|" for group in self.groups)
        return f"|{grouped} {format_tiles(self.tiles)}"