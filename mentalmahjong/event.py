"""Game events exchanged between players."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from .tile import Tile
from .wind import Wind


class EventType(Enum):
    CHI = auto()  # somebody calls a chi
    PON = auto()  # somebody calls a pon
    KAHN_OPEN = auto()  # somebody calls kan on another player's tile
    DISCARD = auto()  # somebody discards a tile
    PICK = auto()  # somebody picks a tile
    TSUMO = auto()  # somebody wins on a self-drawn tile
    RON = auto()  # somebody wins on another player's discard


@dataclass(frozen=True)
class Event:
    """An event; ``tile`` and ``wind`` are set when the event type carries them."""

    type: EventType
    tile: Tile | None = None
    wind: Wind | None = None

    @classmethod
    def pick(cls, tile: Tile) -> Event:
        return cls(EventType.PICK, tile=tile)

    @classmethod
    def discard(cls, wind: Wind, tile: Tile) -> Event:
        return cls(EventType.DISCARD, tile=tile, wind=wind)