"""Immutable two-dimensional vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Vector:
    """A real-valued 2D vector; positive x is right, positive y is up."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)

    def __mul__(self, scalar: object) -> Vector:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector(scalar * self.x, scalar * self.y)

    __rmul__ = __mul__

    def __abs__(self) -> float:
        return math.hypot(self.x, self.y)

    def dot(self, other: Vector) -> float:
        """Return the dot product with another vector."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector) -> float:
        """Return the z-component of the cross product with another vector."""
        return self.x * other.y - self.y * other.x

    def rotate(self, angle: float) -> Vector:
        """Return this vector rotated counterclockwise about the origin."""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Vector(self.x * cos_a - self.y * sin_a, self.x * sin_a + self.y * cos_a)

    def distance(self, other: Vector) -> float:
        """Return the Euclidean distance to another vector."""
        return math.hypot(other.x - self.x, other.y - self.y)


VEC_ZERO = Vector(0.0, 0.0)