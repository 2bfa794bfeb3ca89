import pytest

from mentalmahjong.pos import SPEED, Pos, Vec2


def test_from_point_stays_in_place():
    point = Vec2(12.0, 34.0)
    pos = Pos.from_point(point)
    assert pos.current() == point
    pos.update()
    assert pos.current() == point
    assert pos.t == 1.0


def test_transition_starts_near_begin():
    begin, end = Vec2(0.0, 0.0), Vec2(100.0, 200.0)
    pos = Pos.transition(begin, end)
    assert pos.t == 0.1
    current = pos.current()
    assert 0.0 < current.x < 50.0
    assert 0.0 < current.y < 100.0


def test_update_advances_by_speed():
    pos = Pos.transition(Vec2(0.0, 0.0), Vec2(1.0, 1.0))
    before = pos.t
    pos.update()
    assert pos.t == pytest.approx(before + SPEED)


def test_transition_reaches_end_and_clamps():
    begin, end = Vec2(5.0, -5.0), Vec2(305.0, 95.0)
    pos = Pos.transition(begin, end)
    for _ in range(200):
        pos.update()
    assert pos.t == 1.0
    assert pos.current() == end


def test_motion_is_monotonic():
    pos = Pos.transition(Vec2(0.0, 0.0), Vec2(100.0, 0.0))
    xs = []
    while pos.t < 1.0:
        xs.append(pos.current().x)
        pos.update()
    assert xs == sorted(xs)


def test_negative_t_is_clamped_to_zero():
    begin = Vec2(3.0, 4.0)
    pos = Pos(begin=begin, end=Vec2(10.0, 10.0), t=-0.5)
    pos.update()
    assert pos.t == 0.0
    assert pos.current() == begin