"""The six playable level layouts."""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from slingsim.builders import (
    Kind,
    WorldConfig,
    make_bird,
    make_collisions,
    make_pigs,
    make_platforms,
    make_speedy,
)
from slingsim.color import Color
from slingsim.scene import Scene
from slingsim.vector import Vector

BIRD_ROW_Y = 15


@dataclass(frozen=True)
class LevelStyle:
    """Where the slingshot holds its bird and the colors of birds and walls."""

    rubber_center: Vector
    standard_color: Color
    split_color: Color
    egg_color: Color
    bomb_color: Color
    speedy_color: Color
    slingshot_color: Color


def _queue(style: LevelStyle, offset: float) -> Vector:
    return Vector(style.rubber_center.x - offset, BIRD_ROW_Y)


def _make_birds(scene: Scene, config: WorldConfig, style: LevelStyle) -> None:
    make_bird(scene, config, style.standard_color, style.rubber_center, 0)
    make_bird(scene, config, style.bomb_color, _queue(style, 30), 1)
    make_bird(scene, config, style.split_color, _queue(style, 75), 2)
    make_bird(scene, config, style.egg_color, _queue(style, 120), 3)
    make_speedy(scene, config, style.speedy_color, _queue(style, 165), 4)


def _storey(config: WorldConfig) -> float:
    return config.wall_height + config.plat_height


def _tower_top(config: WorldConfig, x: float, y: float, storeys: int = 1) -> Vector:
    return Vector(x, y + 2 * storeys * _storey(config))


def _wall_pair(config: WorldConfig, x: float, base_y: float) -> list[Vector]:
    offset = config.plat_length - config.wall_length
    y = base_y + _storey(config)
    return [Vector(x - offset, y), Vector(x + offset, y)]


def _build(
    scene: Scene,
    config: WorldConfig,
    style: LevelStyle,
    rng: random.Random | None,
    platforms: Sequence[Vector],
    walls: Sequence[Vector] = (),
    extra_birds: Callable[[], None] | None = None,
) -> None:
    _make_birds(scene, config, style)
    if extra_birds is not None:
        extra_birds()
    make_platforms(scene, config, platforms, Kind.PLATFORM, config.plat_color)
    make_platforms(scene, config, walls, Kind.WALL, style.slingshot_color)
    make_pigs(scene, config, platforms, rng)
    make_collisions(scene, Kind.BIRD)


def level_one(
    scene: Scene, config: WorldConfig, style: LevelStyle, rng: random.Random | None = None
) -> None:
    """Two platforms, each with a pig."""
    _build(scene, config, style, rng, [Vector(500, 100), Vector(600, 400)])


def level_two(
    scene: Scene, config: WorldConfig, style: LevelStyle, rng: random.Random | None = None
) -> None:
    """Three platforms, each with a pig."""
    platforms = [Vector(500, 100), Vector(600, 400), Vector(850, 250)]
    _build(scene, config, style, rng, platforms)


def level_three(
    scene: Scene, config: WorldConfig, style: LevelStyle, rng: random.Random | None = None
) -> None:
    """Adds a walled two-storey tower."""
    dy = _storey(config)
    platforms = [
        Vector(500, 100),
        _tower_top(config, 500, 100),
        Vector(600, 400),
        Vector(850, 250),
    ]
    walls = [Vector(465, 100 + dy), Vector(535, 100 + dy)]
    _build(scene, config, style, rng, platforms, walls)


def level_four(
    scene: Scene, config: WorldConfig, style: LevelStyle, rng: random.Random | None = None
) -> None:
    """Two walled two-storey towers."""
    platforms = [
        Vector(500, 100),
        _tower_top(config, 500, 100),
        Vector(600, 400),
        Vector(850, 250),
        _tower_top(config, 850, 250),
    ]
    walls = [*_wall_pair(config, 500, 100), *_wall_pair(config, 850, 250)]
    _build(scene, config, style, rng, platforms, walls)


def level_five(
    scene: Scene, config: WorldConfig, style: LevelStyle, rng: random.Random | None = None
) -> None:
    """Three walled towers and one extra bomb bird."""
    platforms = [
        Vector(500, 100),
        _tower_top(config, 500, 100),
        Vector(600, 400),
        Vector(850, 250),
        _tower_top(config, 850, 250),
        Vector(700, 175),
        _tower_top(config, 700, 175),
    ]
    walls = [
        *_wall_pair(config, 500, 100),
        *_wall_pair(config, 850, 250),
        *_wall_pair(config, 700, 175),
    ]

    def extra() -> None:
        make_bird(scene, config, style.bomb_color, _queue(style, 210), 1)

    _build(scene, config, style, rng, platforms, walls, extra)


def level_six(
    scene: Scene, config: WorldConfig, style: LevelStyle, rng: random.Random | None = None
) -> None:
    """Four walled towers, one of three storeys, and two extra birds."""
    platforms = [
        Vector(500, 100),
        _tower_top(config, 500, 100),
        _tower_top(config, 500, 100, storeys=2),
        Vector(600, 350),
        _tower_top(config, 600, 350),
        Vector(850, 250),
        _tower_top(config, 850, 250),
        Vector(700, 175),
        _tower_top(config, 700, 175),
    ]
    walls = [
        *_wall_pair(config, 500, 100),
        *_wall_pair(config, 500, _tower_top(config, 500, 100).y),
        *_wall_pair(config, 850, 250),
        *_wall_pair(config, 700, 175),
        *_wall_pair(config, 600, 350),
    ]

    def extra() -> None:
        make_bird(scene, config, style.bomb_color, _queue(style, 210), 1)
        make_bird(scene, config, style.standard_color, _queue(style, 255), 0)

    _build(scene, config, style, rng, platforms, walls, extra)


_LEVELS = (level_one, level_two, level_three, level_four, level_five, level_six)


def load_level(
    scene: Scene,
    number: int,
    config: WorldConfig,
    style: LevelStyle,
    rng: random.Random | None = None,
) -> None:
    """Build level 1 to 6 into the scene."""
    if not 1 <= number <= len(_LEVELS):
        raise ValueError(f"no level {number}; levels run from 1 to {len(_LEVELS)}")
    _LEVELS[number - 1](scene, config, style, rng)