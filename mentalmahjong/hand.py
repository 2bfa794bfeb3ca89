"""A player's hand: closed tiles, discards and their board positions."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from .align import Align, Layout
from .pattern import Pattern
from .patterns import first_group_patterns
from .player import Player
from .pos import Pos, Vec2
from .tile import Tile
from .tiles import format_tiles, pick_from, random_from, remove_equal, tiles_from_string
from .wind import Wind


@dataclass
class Hand:
    """Every tile a player holds: closed tiles, called groups and discards."""

    player: Player = Player.PLAYER0
    tiles: list[Tile] = field(default_factory=list)
    tile_positions: list[Pos] = field(default_factory=list)
    discards: list[Tile] = field(default_factory=list)
    discard_positions: list[Pos] = field(default_factory=list)
    chi: list[list[Tile]] = field(default_factory=list)
    pon: list[list[Tile]] = field(default_factory=list)
    kan: list[list[Tile]] = field(default_factory=list)
    wind: Wind = Wind.EAST
    opened: bool = False
    hand_hover: int | None = None
    discard_hover: int | None = None

    @property
    def align(self) -> Align:
        return self.player.align()

    @classmethod
    def from_string(cls, s: str) -> Hand:
        """A hand of the first seat holding the tiles written in ``s``."""
        return cls(player=Player.PLAYER0, tiles=tiles_from_string(s))

    def closed_tiles(self) -> list[Tile]:
        return self.tiles

    def discarded_tiles(self) -> list[Tile]:
        return self.discards

    def is_opened(self) -> bool:
        return self.opened

    def is_closed(self) -> bool:
        return not self.opened

    def _hand_slot(self, index: int, layout: Layout) -> Vec2:
        anchor = self.player.position(layout)
        return self.align.hand_position(anchor.x, anchor.y, index, layout)

    def _discard_slot(self, index: int, layout: Layout) -> Vec2:
        anchor = self.player.position(layout)
        return self.align.discard_position(anchor.x, anchor.y, index, layout)

    def add_tile(self, tile: Tile, layout: Layout) -> None:
        """Put ``tile`` at the end of the closed tiles."""
        self.tiles.append(tile)
        self.tile_positions.append(
            Pos.from_point(self._hand_slot(len(self.tiles) - 1, layout))
        )

    def add_discard(self, tile: Tile, layout: Layout) -> None:
        """Put ``tile`` at the end of the discards."""
        self.discards.append(tile)
        self.discard_positions.append(
            Pos.from_point(self._discard_slot(len(self.discards) - 1, layout))
        )

    def pick_from(
        self, wall: list[Tile], layout: Layout, rng: random.Random | None = None
    ) -> Tile:
        """Draw a random tile from ``wall`` into the hand and return it."""
        tile = pick_from(wall, rng)
        self.add_tile(tile, layout)
        return tile

    def discard_tile(self, tile: Tile, layout: Layout) -> None:
        """Move the first closed tile equal to ``tile`` to the discards.

        The discarded tile slides from its slot in the hand to its place among
        the discards. Raises ValueError when the hand does not hold ``tile``.
        """
        index = remove_equal(self.tiles, tile)
        self.tile_positions = [
            Pos.from_point(self._hand_slot(i, layout)) for i in range(len(self.tiles))
        ]
        start = self._hand_slot(index, layout)
        self.add_discard(tile, layout)
        self.discard_positions[-1] = Pos.transition(
            start, self.discard_positions[-1].current()
        )

    def sort(self) -> None:
        self.tiles.sort()

    def patterns(self) -> list[Pattern]:
        """Every complete way to split the closed tiles into groups and a pair."""
        self.sort()
        complete: list[Pattern] = []
        todo = [Pattern.from_tiles(self.tiles)]
        while todo:
            pattern = todo.pop()
            if pattern.is_complete():
                complete.append(pattern)
            else:
                todo.extend(first_group_patterns(pattern))
        return complete

    def is_complete(self) -> bool:
        """Four groups and a pair can be made of the closed tiles."""
        return bool(self.patterns())

    def update(
        self,
        wall: list[Tile],
        mouse: Vec2,
        mouse_down: bool,
        layout: Layout,
        rng: random.Random | None = None,
    ) -> bool:
        """React to the mouse; return True when the turn passes to the next seat.

        Pressing a closed tile draws a random tile from ``wall`` and discards
        the pressed one.
        """
        pressed: int | None = None
        self.hand_hover = None
        self.discard_hover = None

        for i, pos in enumerate(self.tile_positions):
            if self.align.rect(pos.current(), layout).contains(mouse):
                if mouse_down:
                    pressed = i
                    break
                self.hand_hover = i

        for i, pos in enumerate(self.discard_positions):
            if self.align.rect(pos.current(), layout).contains(mouse):
                self.discard_hover = i
                break

        if pressed is None:
            return False

        tile_pressed = self.tiles[pressed]
        drawn = random_from(wall, rng)
        self.add_tile(drawn, layout)
        remove_equal(wall, drawn)
        self.discard_tile(tile_pressed, layout)
        self.sort()
        self.hand_hover = None
        return True

    def update_positions(self) -> None:
        """Advance every moving tile by one animation step."""
        for pos in (*self.tile_positions, *self.discard_positions):
            pos.update()

    def __str__(self) -> str:
        return format_tiles(self.tiles)