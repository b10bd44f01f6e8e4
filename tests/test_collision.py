import math

import pytest

from slingsim.collision import find_collision
from slingsim.vector import Vector


def _square(cx, cy, half=1.0):
    return [
        Vector(cx - half, cy - half),
        Vector(cx + half, cy - half),
        Vector(cx + half, cy + half),
        Vector(cx - half, cy + half),
    ]


def test_overlapping_squares_collide_along_unit_axis():
    first = _square(0, 0)
    second = _square(1.5, 0.5)
    info = find_collision(first, second)
    assert info.collided
    assert abs(info.axis) == pytest.approx(1.0)
    assert info.axis.dot(Vector(1.5, 0.5)) > 0


def test_separated_squares_do_not_collide():
    info = find_collision(_square(0, 0), _square(5, 0))
    assert info.collided is False
    assert not info


def test_swapping_shapes_negates_axis():
    first = _square(0, 0)
    second = _square(0.3, 1.6)
    forward = find_collision(first, second)
    backward = find_collision(second, first)
    assert forward.collided and backward.collided
    assert math.isclose(forward.axis.x, -backward.axis.x, abs_tol=1e-9)
    assert math.isclose(forward.axis.y, -backward.axis.y, abs_tol=1e-9)


def test_axis_follows_smallest_penetration():
    info = find_collision(_square(0, 0), _square(1.8, 0.2))
    assert info.collided
    assert info.axis.y == pytest.approx(0.0, abs=1e-9)
    assert info.axis.x > 0


def test_contained_shape_collides():
    info = find_collision(_square(0, 0, half=3), _square(0.5, 0.5, half=0.5))
    assert info.collided


def test_empty_shape_rejected():
    with pytest.raises(ValueError):
        find_collision([], _square(0, 0))