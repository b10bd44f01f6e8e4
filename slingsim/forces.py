"""Force creators: gravity, springs, drag, friction and collision handling."""

from __future__ import annotations

import math
from collections.abc import Callable

from slingsim.body import Body
from slingsim.collision import find_collision
from slingsim.scene import Scene
from slingsim.vector import Vector

CollisionHandler = Callable[[Body, Body, Vector], None]

MIN_DISTANCE = 5.0


def create_newtonian_gravity(scene: Scene, G: float, body1: Body, body2: Body) -> None:
    """Apply mutual Newtonian gravity, skipped when centroids are within MIN_DISTANCE."""

    def apply() -> None:
        separation = body1.centroid - body2.centroid
        distance = abs(separation)
        if distance > MIN_DISTANCE:
            unit = separation * (1 / distance)
            gravity = unit * (G * body1.mass * body2.mass / distance**2)
            body1.add_force(-gravity)
            body2.add_force(gravity)

    scene.add_force_creator(apply, (body1, body2))


def create_downward_gravity(scene: Scene, g: float, body: Body, id: int = 0) -> None:
    """Apply a constant downward force of magnitude g to one body."""
    force = Vector(0, -g)

    def apply() -> None:
        body.add_force(force)

    scene.add_force_creator(apply, (body,), id)


def create_horizontal_friction(
    scene: Scene, friction: float, body: Body, id: int = 0
) -> None:
    """Apply a force opposing the body's horizontal velocity."""

    def apply() -> None:
        body.add_force(Vector(-friction * body.velocity.x, 0))

    scene.add_force_creator(apply, (body,), id)


def create_spring(scene: Scene, k: float, body1: Body, body2: Body) -> None:
    """Join two bodies' centroids with a Hooke's-law spring of zero rest length."""

    def apply() -> None:
        spring_force = (body1.centroid - body2.centroid) * k
        body1.add_force(-spring_force)
        body2.add_force(spring_force)

    scene.add_force_creator(apply, (body1, body2))


def create_drag(scene: Scene, gamma: float, body: Body) -> None:
    """Apply a drag force proportional to and opposing the body's velocity."""

    def apply() -> None:
        body.add_force(body.velocity * -gamma)

    scene.add_force_creator(apply, (body,))


def create_collision(
    scene: Scene, body1: Body, body2: Body, handler: CollisionHandler
) -> None:
    """Call handler(body1, body2, axis) once each time the bodies start colliding."""
    colliding = False

    def check() -> None:
        nonlocal colliding
        info = find_collision(body1.shape, body2.shape)
        if info.collided and not colliding:
            handler(body1, body2, info.axis)
            colliding = True
        elif not info.collided:
            colliding = False

    scene.add_force_creator(check, (body1, body2))


def _destroy_both(body1: Body, body2: Body, axis: Vector) -> None:
    body1.remove()
    body2.remove()


def _destroy_first(body1: Body, body2: Body, axis: Vector) -> None:
    body1.remove()


def create_destructive_collision(scene: Scene, body1: Body, body2: Body) -> None:
    """Remove both bodies when they collide."""
    create_collision(scene, body1, body2, _destroy_both)


def create_one_sided_destructive_collision(
    scene: Scene, body1: Body, body2: Body
) -> None:
    """Remove only the first body when the two collide."""
    create_collision(scene, body1, body2, _destroy_first)


def create_physics_collision(
    scene: Scene, elasticity: float, body1: Body, body2: Body
) -> None:
    """Resolve collisions with impulses; a body of infinite mass acts as a wall."""

    def resolve(first: Body, second: Body, axis: Vector) -> None:
        mass1, mass2 = first.mass, second.mass
        if mass1 == math.inf:
            reduced_mass = mass2
        elif mass2 == math.inf:
            reduced_mass = mass1
        else:
            reduced_mass = mass1 * mass2 / (mass1 + mass2)
        closing = second.velocity.dot(axis) - first.velocity.dot(axis)
        impulse = axis * (reduced_mass * (1 + elasticity) * closing)
        first.add_impulse(impulse)
        second.add_impulse(-impulse)

    create_collision(scene, body1, body2, resolve)