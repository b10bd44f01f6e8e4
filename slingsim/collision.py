"""Separating-axis collision test for convex polygons."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from itertools import chain

from slingsim.vector import Vector


@dataclass(frozen=True, slots=True)
class CollisionInfo:
    """Whether two shapes collide and, if so, the unit axis from the first to the second."""

    collided: bool
    axis: Vector | None = None

    def __bool__(self) -> bool:
        return self.collided


def _edge_normals(shape: Sequence[Vector]) -> Iterator[Vector]:
    for a, b in zip(shape, [*shape[1:], shape[0]]):
        edge = b - a
        length = abs(edge)
        if length > 0:
            yield Vector(-edge.y / length, edge.x / length)


def _project(shape: Sequence[Vector], axis: Vector) -> tuple[float, float]:
    dots = [vertex.dot(axis) for vertex in shape]
    return min(dots), max(dots)


def _mean(shape: Sequence[Vector]) -> Vector:
    n = len(shape)
    return Vector(sum(v.x for v in shape) / n, sum(v.y for v in shape) / n)


def find_collision(shape1: Sequence[Vector], shape2: Sequence[Vector]) -> CollisionInfo:
    """Test two convex counterclockwise polygons for overlap."""
    if not shape1 or not shape2:
        raise ValueError("shapes must have vertices")

    best_overlap = math.inf
    best_axis: Vector | None = None
    for axis in chain(_edge_normals(shape1), _edge_normals(shape2)):
        min1, max1 = _project(shape1, axis)
        min2, max2 = _project(shape2, axis)
        overlap = min(max1, max2) - max(min1, min2)
        if overlap <= 0:
            return CollisionInfo(False)
        if overlap < best_overlap:
            best_overlap = overlap
            best_axis = axis

    if best_axis is None:
        return CollisionInfo(False)
    if best_axis.dot(_mean(shape2) - _mean(shape1)) < 0:
        best_axis = -best_axis
    return CollisionInfo(True, best_axis)