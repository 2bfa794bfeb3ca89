"""Thread-safe log of game events."""

from __future__ import annotations

import threading

from .event import Event
from .player import Player
from .tile import Tile


class Game:
    """Events received from other players or made by this one, in order.

    Several threads may push and process events at the same time.
    """

    def __init__(self, player: Player = Player.PLAYER0) -> None:
        self._lock = threading.Lock()
        self.events: list[Event] = []
        self.index_event = 0
        self.player = player

    def push_event(self, event: Event) -> None:
        with self._lock:
            self.events.append(event)

    def process_event(self) -> Event:
        """Return the next unprocessed event and mark it processed.

        Raises IndexError when every event has been processed.
        """
        with self._lock:
            if self.index_event >= len(self.events):
                raise IndexError("no event left to process")
            event = self.events[self.index_event]
            self.index_event += 1
            return event

    @classmethod
    def initial(cls) -> Game:
        """A game whose first event is picking a 1m."""
        game = cls()
        game.push_event(Event.pick(Tile.from_string("1m")))
        return game