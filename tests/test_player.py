import math

import pytest

from cubrender.player import Key, Player, QuitRequested

GRID = [
    [1, 1, 1, 1, 1],
    [1, 0, 0, 0, 1],
    [1, 0, 0, 0, 1],
    [1, 0, 0, 0, 1],
    [1, 1, 1, 1, 1],
]


def test_facing_north():
    p = Player.facing("N", 2.5, 2.5)
    assert (p.dir_x, p.dir_y, p.plane_x, p.plane_y) == (0.0, -1.0, -0.5, 0.0)


def test_facing_east():
    p = Player.facing("E", 2.5, 2.5)
    assert (p.dir_x, p.dir_y, p.plane_x, p.plane_y) == (1.0, 0.0, 0.0, -0.5)


def test_escape_quits():
    p = Player.facing("S", 2.5, 2.5)
    with pytest.raises(QuitRequested):
        p.press(Key.ESCAPE)
    with pytest.raises(QuitRequested):
        p.release(Key.ESCAPE)


def test_forward_moves_along_direction():
    p = Player.facing("S", 2.5, 2.5)
    p.press(Key.W)
    p.update(GRID, 0.25, 0.25, 0.1)
    assert p.x == pytest.approx(2.5)
    assert p.y == pytest.approx(2.75)


def test_forward_then_back_returns():
    p = Player.facing("E", 2.5, 2.5)
    p.press(Key.W)
    p.update(GRID, 0.3, 0.3, 0.1)
    p.release(Key.W)
    p.press(Key.S)
    p.update(GRID, 0.3, 0.3, 0.1)
    assert (p.x, p.y) == pytest.approx((2.5, 2.5))


def test_wall_blocks_movement():
    p = Player.facing("N", 1.5, 1.5)
    p.press(Key.W)
    p.update(GRID, 1.0, 1.0, 0.1)
    assert (p.x, p.y) == (1.5, 1.5)


def test_strafe_uses_plane():
    p = Player.facing("S", 2.5, 2.5)
    p.press(Key.A)
    p.update(GRID, 0.2, 0.4, 0.1)
    assert p.x == pytest.approx(2.5 + 0.5 * 0.4)
    assert p.y == pytest.approx(2.5)


def test_released_key_stops_motion():
    p = Player.facing("S", 2.5, 2.5)
    p.press(Key.D)
    p.release(Key.D)
    p.update(GRID, 0.5, 0.5, 0.5)
    assert (p.x, p.y, p.dir_y) == (2.5, 2.5, 1.0)


def test_rotation_preserves_lengths():
    p = Player.facing("N", 2.5, 2.5)
    p.rotate_right(0.7)
    assert math.hypot(p.dir_x, p.dir_y) == pytest.approx(1.0)
    assert math.hypot(p.plane_x, p.plane_y) == pytest.approx(0.5)


def test_left_undoes_right():
    p = Player.facing("S", 2.5, 2.5)
    p.press(Key.RIGHT)
    p.press(Key.LEFT)
    p.update(GRID, 0.1, 0.1, 0.3)
    assert (p.dir_x, p.dir_y, p.plane_x, p.plane_y) == pytest.approx((0.0, 1.0, 0.5, 0.0))


def test_quarter_turn():
    p = Player.facing("E", 2.5, 2.5)
    p.rotate(math.pi / 2)
    assert (p.dir_x, p.dir_y) == pytest.approx((0.0, 1.0))