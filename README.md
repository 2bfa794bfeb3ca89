# mentalmahjong

A game model for riichi mahjong. It handles tiles and tile strings, the wall,
the players' hands and discards, and where each seat's tiles sit on the table.
It can also check whether a hand is complete, which means four groups and one
pair.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Tiles

Tiles are written in the usual short notation: a digit followed by a suit
letter. `m` is man, `p` is pin and `s` is su (bamboo). `z` marks the honours:
`1z` to `4z` are the East, South, West and North winds, and `5z` to `7z` are
the white, green and red dragons.

```python
from mentalmahjong.tile import Tile
from mentalmahjong.tiles import tiles_from_string, all_tiles, format_tiles

east = Tile.from_string("1z")
print(east.is_wind(), east.next_dora())      # True 2z

hand = tiles_from_string("123m456p789s11z")   # digits share the next suit letter
print(format_tiles(hand))                     # 1m 2m 3m 4p 5p 6p 7s 8s 9s 1z 1z

wall = all_tiles()                            # the tiles a wall is built from
```

A malformed tile or tile string raises `TileError`, which is a `ValueError`.
`mentalmahjong.tiles` also provides `sort_tiles`, `random_from`, `pick_from`
and `remove_equal`. `remove_equal` raises `ValueError` when the tile is not
in the list. The drawing functions take an optional `random.Random`, so a
seeded generator gives repeatable deals.

## Hands and completion

```python
from mentalmahjong.hand import Hand

hand = Hand.from_string("123m456p789s111z22z")
print(hand.is_complete())                     # True
for pattern in hand.patterns():
    print(pattern)
```

`Hand.patterns()` sorts the closed tiles. It then returns every way of
splitting them into sequences, triplets and one pair. Each step of the search
is done by `mentalmahjong.patterns.first_group_patterns`, which groups the
first ungrouped tile as a sequence, a triplet or the pair. A `Pattern` holds
one partial arrangement, and each group carries a `GroupType`.

## Table and turns

`Layout` gives the board and tile sizes in pixels. `Player` gives each seat's
anchor position and its `Align`. `Align` in turn places the tiles of the hand
and the discards (six per row), and gives the `Rect` each tile covers. `Pos`
eases a tile from one point to another, one step per `update()`.

```python
import random
from mentalmahjong.align import Layout
from mentalmahjong.hands import Hands
from mentalmahjong.player import Player
from mentalmahjong.pos import Vec2
from mentalmahjong.tiles import all_tiles

rng = random.Random(0)
layout = Layout(width=1920, height=1080, tile_width=60, tile_height=80)
wall = all_tiles()
hands = Hands()
hands.pick_from(wall, layout, rng)            # deals 13 tiles to each seat
print(hands.get(Player.PLAYER0))

# one frame: the mouse position and whether the button is down
moved = hands.update(wall, Vec2(500, 1030), True, layout, rng)
```

Here is what `Hands.update` does in each frame:

1. It advances every animation.
2. It lets the seat whose turn it is respond to the mouse. If the pressed spot is one of that seat's closed tiles, the seat draws a random tile from the wall, discards the pressed tile and sorts its hand.
3. It moves the turn on to the next seat, and returns `True` when it does.

`hovered_tile` holds the closed tile under the mouse, if there is one.

`Game` is a thread-safe log of `Event`s, built with `Event.pick` and
`Event.discard`. `push_event` appends an event. `process_event` returns the
next unprocessed event, and raises `IndexError` once none are left.
`Game.initial()` starts with a pick of `1m`.

## What this package does not do

This is only the game model. It opens no window, draws nothing and reads no
keyboard or mouse, so the caller must supply the mouse position and button
state. It has no network play: events can be logged in a `Game`, but nothing
sends or receives them, and `Hands` does not act on them. It has no command
to run, no scoring, no yaku checks, and no calls of chi, pon or kan.