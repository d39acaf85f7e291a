import math

import pytest

from termesh.math_utils import Vec3, round_half_away


@pytest.mark.parametrize("value, expected", [
    (0.5, 1.0), (1.5, 2.0), (2.5, 3.0), (-0.5, -1.0), (-2.5, -3.0),
    (2.4, 2.0), (-2.6, -3.0), (0.0, 0.0),
])
def test_round_half_away(value, expected):
    assert round_half_away(value) == expected


def test_rotate_x():
    v = Vec3(0, 1, 0)
    v.rotate_x(math.pi / 2)
    assert tuple(v) == pytest.approx((0.0, 0.0, 1.0))


def test_rotate_y():
    v = Vec3(1, 0, 0)
    v.rotate_y(math.pi / 2)
    assert tuple(v) == pytest.approx((0.0, 0.0, -1.0))


def test_rotate_z():
    v = Vec3(1, 0, 0)
    v.rotate_z(math.pi / 2)
    assert tuple(v) == pytest.approx((0.0, 1.0, 0.0))


def test_full_turn_is_identity():
    v = Vec3(1.0, -2.0, 3.0)
    for _ in range(8):
        v.rotate_x(math.pi / 4)
    assert tuple(v) == pytest.approx((1.0, -2.0, 3.0))


def test_rotation_keeps_length():
    v = Vec3(1.0, -2.0, 3.0)
    v.rotate_x(0.3)
    v.rotate_y(1.1)
    v.rotate_z(-2.0)
    assert v.magnitude() == pytest.approx(math.sqrt(14.0))


def test_scale_and_operators():
    v = Vec3(1, 2, 3)
    w = v * 2
    assert w == (2.0, 4.0, 6.0)
    assert v == (1.0, 2.0, 3.0)
    v.scale(0.5)
    assert v == Vec3(0.5, 1.0, 1.5)
    assert v + Vec3(1, 1, 1) == (1.5, 2.0, 2.5)
    assert Vec3(1, 1, 1) - Vec3(1, 2, 3) == (0.0, -1.0, -2.0)


def test_copy_is_independent():
    v = Vec3(1, 2, 3)
    c = v.copy()
    c.rotate_z(1.0)
    assert v == (1.0, 2.0, 3.0)
