"""Rigid polygonal bodies that accumulate forces and impulses each tick."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from slingsim.color import Color
from slingsim.polygon import polygon_centroid, polygon_rotate, polygon_translate
from slingsim.vector import VEC_ZERO, Vector


def _check_mass(mass: float) -> float:
    if not mass > 0:
        raise ValueError(f"mass must be positive, got {mass}")
    return float(mass)


class Body:
    """A uniform-density polygon constrained to the plane.

    A mass of ``math.inf`` makes the body immovable by forces and impulses.
    """

    def __init__(
        self, shape: Iterable[Vector], mass: float, color: Color, info: Any = None
    ) -> None:
        self._mass = _check_mass(mass)
        self._shape = list(shape)
        self._centroid = polygon_centroid(self._shape)
        self._angle = 0.0
        self._force = VEC_ZERO
        self._impulse = VEC_ZERO
        self._removed = False
        self.color = color
        self.info = info
        self.image: str | None = None
        self.velocity = VEC_ZERO

    @property
    def shape(self) -> list[Vector]:
        """A copy of the polygon at the body's current position."""
        return list(self._shape)

    @shape.setter
    def shape(self, shape: Iterable[Vector]) -> None:
        self._shape = list(shape)
        self._centroid = polygon_centroid(self._shape)
        self._angle = 0.0

    @property
    def centroid(self) -> Vector:
        return self._centroid

    @centroid.setter
    def centroid(self, position: Vector) -> None:
        polygon_translate(self._shape, position - self._centroid)
        self._centroid = position

    @property
    def mass(self) -> float:
        return self._mass

    @mass.setter
    def mass(self, mass: float) -> None:
        self._mass = _check_mass(mass)

    @property
    def rotation(self) -> float:
        """Absolute orientation in radians, counterclockwise positive."""
        return self._angle

    @rotation.setter
    def rotation(self, angle: float) -> None:
        polygon_rotate(self._shape, angle - self._angle, self._centroid)
        self._angle = angle

    @property
    def removed(self) -> bool:
        return self._removed

    def add_force(self, force: Vector) -> None:
        """Accumulate a force to act over the next tick."""
        self._force = self._force + force

    def add_impulse(self, impulse: Vector) -> None:
        """Accumulate an instantaneous impulse applied on the next tick."""
        self._impulse = self._impulse + impulse

    def tick(self, dt: float) -> None:
        """Advance by dt seconds, moving at the average of old and new velocity."""
        inverse_mass = 1 / self._mass
        acceleration = self._force * inverse_mass
        new_velocity = self.velocity + acceleration * dt + self._impulse * inverse_mass
        displacement = (self.velocity + new_velocity) * (dt / 2)
        self.centroid = self._centroid + displacement
        self.velocity = new_velocity
        self._force = VEC_ZERO
        self._impulse = VEC_ZERO

    def remove(self) -> None:
        """Mark the body for removal from its scene."""
        self._removed = True