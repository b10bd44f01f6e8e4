"""Shape factories and helpers that populate a scene with game bodies."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from slingsim.body import Body
from slingsim.color import Color
from slingsim.forces import (
    create_one_sided_destructive_collision,
    create_physics_collision,
)
from slingsim.scene import Scene
from slingsim.vector import Vector

WALL_MASS = 100.0


class Kind(Enum):
    """The role of a body in the game, stored as the body's info."""

    PLATFORM = "platform"
    PIG = "pig"
    BIRD = "bird"
    WALL = "wall"


@dataclass(frozen=True)
class WorldConfig:
    """Dimensions, masses, colors and sprite names used to build game bodies.

    Lengths and heights of rectangles are half-extents.
    """

    circle_points: int
    pig_radius: float
    bird_radius: float
    speedy_side: float
    plat_length: float
    plat_height: float
    wall_length: float
    wall_height: float
    bird_mass: float
    pig_mass: float
    pig_color: Color
    plat_color: Color
    sprite_folder: str
    sprite_type: str
    ta_names: tuple[str, ...]
    student_names: tuple[str, ...]

    def __post_init__(self) -> None:
        if self.circle_points < 3:
            raise ValueError("a circle needs at least 3 points")
        object.__setattr__(self, "ta_names", tuple(self.ta_names))
        object.__setattr__(self, "student_names", tuple(self.student_names))


def get_body(scene: Scene, kind: Kind) -> Body:
    """Return the first body of the given kind, or the first body if none matches."""
    return next((body for body in scene if body.info == kind), scene[0])


def get_index(scene: Scene, kind: Kind) -> int:
    """Return the index of the first body of the given kind, or 0 if none matches."""
    return next((i for i, body in enumerate(scene) if body.info == kind), 0)


def make_circle(radius: float, points: int) -> list[Vector]:
    """Return a counterclockwise polygon approximating a circle about the origin."""
    if points < 3:
        raise ValueError("a circle needs at least 3 points")
    arc = 2 * math.pi / points
    start = Vector(radius, 0.0)
    return [start.rotate(i * arc) for i in range(points)]


def make_equilateral_triangle(side_length: float) -> list[Vector]:
    """Return an equilateral triangle with one corner at the origin."""
    return [
        Vector(0.0, 0.0),
        Vector(side_length, 0.0),
        Vector(side_length / 2, math.sqrt(3) * side_length / 2),
    ]


_SLINGSHOT = (
    (143, 0), (157, 0), (157, 50), (182, 100), (182, 150), (173, 150), (173, 100),
    (146, 52), (127, 93), (127, 138), (120, 138), (120, 93), (143, 47),
)


def make_slingshot() -> list[Vector]:
    """Return the outline of the slingshot."""
    return [Vector(x, y) for x, y in _SLINGSHOT]


def make_rubberband(center: Vector) -> list[Vector]:
    """Return the rubber band outline stretched to the given point."""
    return [
        Vector(127, 117),
        Vector(127, 130),
        center,
        Vector(173, 125),
        Vector(173, 140),
        center,
    ]


def make_rectangle(length: float, height: float) -> list[Vector]:
    """Return a rectangle centred on the origin with the given half-extents."""
    return [
        Vector(-length, -height),
        Vector(length, -height),
        Vector(length, height),
        Vector(-length, height),
    ]


def make_path(config: WorldConfig, name: str) -> str:
    """Return the sprite path for a name."""
    return f"{config.sprite_folder}{name}{config.sprite_type}"


def make_collisions(scene: Scene, kind: Kind) -> None:
    """Register collisions for every body of the given kind and every wall.

    Such a body bounces elastically off platforms and walls, and destroys
    any pig it touches.
    """
    bodies = list(scene)
    for main in bodies:
        if main.info != kind and main.info != Kind.WALL:
            continue
        for obj in bodies:
            if obj.info in (Kind.PLATFORM, Kind.WALL):
                create_physics_collision(scene, 1, obj, main)
            elif obj.info == Kind.PIG:
                create_one_sided_destructive_collision(scene, obj, main)


def make_pigs(
    scene: Scene,
    config: WorldConfig,
    platform_centers: Sequence[Vector],
    rng: random.Random | None = None,
) -> None:
    """Place a pig on top of each platform, each with a randomly chosen sprite."""
    source = rng if rng is not None else random
    for platform in platform_centers:
        pig = Body(
            make_circle(config.pig_radius, config.circle_points),
            config.pig_mass,
            config.pig_color,
            Kind.PIG,
        )
        pig.centroid = Vector(
            platform.x, platform.y + config.plat_height + config.pig_radius
        )
        name = config.ta_names[source.randrange(len(config.ta_names))]
        pig.image = make_path(config, name)
        scene.add_body(pig)


def _add_bird(
    scene: Scene,
    config: WorldConfig,
    shape: list[Vector],
    color: Color,
    center: Vector,
    student_index: int,
) -> None:
    bird = Body(shape, config.bird_mass, color, Kind.BIRD)
    bird.centroid = center
    bird.image = make_path(config, config.student_names[student_index])
    scene.add_body(bird)


def make_bird(
    scene: Scene, config: WorldConfig, color: Color, center: Vector, student_index: int
) -> None:
    """Add a round bird at the given center."""
    shape = make_circle(config.bird_radius, config.circle_points)
    _add_bird(scene, config, shape, color, center, student_index)


def make_speedy(
    scene: Scene, config: WorldConfig, color: Color, center: Vector, student_index: int
) -> None:
    """Add a triangular bird at the given center."""
    shape = make_equilateral_triangle(config.speedy_side)
    _add_bird(scene, config, shape, color, center, student_index)


def make_platforms(
    scene: Scene,
    config: WorldConfig,
    centers: Sequence[Vector],
    kind: Kind,
    color: Color,
) -> None:
    """Add an immovable platform or a movable wall at each center."""
    if kind == Kind.PLATFORM:
        length, height, mass = config.plat_length, config.plat_height, math.inf
    elif kind == Kind.WALL:
        length, height, mass = config.wall_length, config.wall_height, WALL_MASS
    else:
        raise ValueError(f"cannot build a platform of kind {kind}")
    for center in centers:
        platform = Body(make_rectangle(length, height), mass, color, kind)
        platform.centroid = center
        scene.add_body(platform)