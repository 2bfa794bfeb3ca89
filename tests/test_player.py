import pytest

from mentalmahjong.align import Align, Layout
from mentalmahjong.player import Player

LAYOUT = Layout(width=1920, height=1080, tile_width=40, tile_height=60)


def test_next_cycles_through_all_seats():
    seen = [Player.PLAYER0]
    for _ in range(4):
        seen.append(Player.next(seen[-1]))
    assert seen == [
        Player.PLAYER0,
        Player.PLAYER1,
        Player.PLAYER2,
        Player.PLAYER3,
        Player.PLAYER0,
    ]


@pytest.mark.parametrize(
    "player, align",
    [
        (Player.PLAYER0, Align.DOWN),
        (Player.PLAYER1, Align.RIGHT),
        (Player.PLAYER2, Align.UP),
        (Player.PLAYER3, Align.LEFT),
    ],
)
def test_align(player, align):
    assert player.align() is align


def test_opposite_seats_share_an_axis():
    p0 = Player.PLAYER0.position(LAYOUT)
    p2 = Player.PLAYER2.position(LAYOUT)
    assert p0.x == p2.x
    assert p2.y == LAYOUT.tile_height
    assert p0.y == LAYOUT.height - LAYOUT.tile_height


def test_side_seats_are_one_tile_from_the_edge():
    p1 = Player.PLAYER1.position(LAYOUT)
    p3 = Player.PLAYER3.position(LAYOUT)
    assert p3.x == LAYOUT.tile_height
    assert p1.x == LAYOUT.width - LAYOUT.tile_height
    assert p1.y > p3.y


def test_side_hands_are_centred_vertically():
    p1 = Player.PLAYER1.position(LAYOUT)
    p3 = Player.PLAYER3.position(LAYOUT)
    assert (p1.y + p3.y) / 2 == LAYOUT.height / 2