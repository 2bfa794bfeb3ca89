"""The hands of the four players and whose turn it is."""

from __future__ import annotations

import random

from .align import Layout
from .hand import Hand
from .player import Player
from .pos import Vec2
from .tile import Tile

_STARTING_TILES = 13


class Hands:
    """The four hands at the table, with the seat whose turn it is."""

    def __init__(self) -> None:
        self.hands = tuple(Hand(player=player) for player in Player)
        self.player = Player.PLAYER0
        self.hovered_tile: Tile | None = None

    def get(self, player: Player) -> Hand:
        return self.hands[player]

    def pick_from(
        self, wall: list[Tile], layout: Layout, rng: random.Random | None = None
    ) -> None:
        """Deal the starting tiles to every hand from ``wall``, then sort them."""
        for hand in self.hands:
            for _ in range(_STARTING_TILES):
                hand.pick_from(wall, layout, rng)
            hand.sort()

    def update(
        self,
        wall: list[Tile],
        mouse: Vec2,
        mouse_down: bool,
        layout: Layout,
        rng: random.Random | None = None,
    ) -> bool:
        """Animate every hand and let the current seat play.

        Returns True when the turn moved to the next seat.
        """
        self.hovered_tile = None
        hand = self.hands[self.player]
        for other in self.hands:
            other.update_positions()
        next_turn = hand.update(wall, mouse, mouse_down, layout, rng)
        if next_turn:
            self.player = self.player.next()
        if hand.hand_hover is not None:
            self.hovered_tile = hand.closed_tiles()[hand.hand_hover]
        return next_turn