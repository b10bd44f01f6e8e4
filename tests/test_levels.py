import random

import pytest

from slingsim.builders import Kind, WorldConfig
from slingsim.color import Color
from slingsim.levels import (
    LevelStyle,
    level_five,
    level_four,
    level_one,
    level_six,
    level_three,
    level_two,
    load_level,
)
from slingsim.scene import Scene
from slingsim.vector import Vector

LEVELS = [level_one, level_two, level_three, level_four, level_five, level_six]


@pytest.fixture
def config():
    return WorldConfig(
        circle_points=16,
        pig_radius=10,
        bird_radius=10,
        speedy_side=20,
        plat_length=40,
        plat_height=5,
        wall_length=5,
        wall_height=30,
        bird_mass=10,
        pig_mass=10,
        pig_color=Color(0, 1, 0),
        plat_color=Color(0.5, 0.5, 0.5),
        sprite_folder="sprites/",
        sprite_type=".png",
        ta_names=("ta_a", "ta_b"),
        student_names=("s0", "s1", "s2", "s3", "s4"),
    )


@pytest.fixture
def style():
    return LevelStyle(
        rubber_center=Vector(150, 125),
        standard_color=Color(1, 0, 0),
        split_color=Color(0, 0, 1),
        egg_color=Color(1, 1, 1),
        bomb_color=Color(0, 0, 0),
        speedy_color=Color(1, 1, 0),
        slingshot_color=Color(0.4, 0.2, 0),
    )


def of_kind(scene, kind):
    return [body for body in scene if body.info is kind]


def build(level, config, style, seed=0):
    scene = Scene()
    level(scene, config, style, random.Random(seed))
    return scene


def test_level_one_platform_positions(config, style):
    scene = build(level_one, config, style)
    platforms = [b.centroid for b in of_kind(scene, Kind.PLATFORM)]
    assert platforms == [Vector(500, 100), Vector(600, 400)]
    assert of_kind(scene, Kind.WALL) == []


def test_level_one_bird_queue(config, style):
    scene = build(level_one, config, style)
    birds = of_kind(scene, Kind.BIRD)
    assert birds[0].centroid == style.rubber_center
    offsets = [style.rubber_center.x - b.centroid.x for b in birds[1:]]
    assert offsets == pytest.approx([30, 75, 120, 165])
    assert all(b.centroid.y == pytest.approx(15) for b in birds[1:])
    assert len(birds[4].shape) == 3


@pytest.mark.parametrize("level", LEVELS)
def test_one_pig_per_platform(level, config, style):
    scene = build(level, config, style)
    platforms = of_kind(scene, Kind.PLATFORM)
    pigs = of_kind(scene, Kind.PIG)
    assert len(pigs) == len(platforms)
    lift = config.plat_height + config.pig_radius
    for pig, platform in zip(pigs, platforms):
        assert pig.centroid.x == pytest.approx(platform.centroid.x)
        assert pig.centroid.y == pytest.approx(platform.centroid.y + lift)


@pytest.mark.parametrize("level", LEVELS)
def test_collisions_registered_for_birds_and_walls(level, config, style):
    scene = build(level, config, style)
    targets = sum(1 for b in scene if b.info in (Kind.PLATFORM, Kind.WALL, Kind.PIG))
    movers = len(of_kind(scene, Kind.BIRD)) + len(of_kind(scene, Kind.WALL))
    assert scene.force_creator_count == movers * targets


def test_level_three_wall_positions(config, style):
    scene = build(level_three, config, style)
    dy = config.wall_height + config.plat_height
    walls = [b.centroid for b in of_kind(scene, Kind.WALL)]
    assert walls == [Vector(465, 100 + dy), Vector(535, 100 + dy)]
    assert all(w.color == style.slingshot_color for w in of_kind(scene, Kind.WALL))


def test_level_four_walls_flank_towers(config, style):
    scene = build(level_four, config, style)
    offset = config.plat_length - config.wall_length
    walls = [b.centroid for b in of_kind(scene, Kind.WALL)]
    assert [w.x for w in walls] == [500 - offset, 500 + offset, 850 - offset, 850 + offset]


def test_level_five_adds_bomb_bird(config, style):
    four = of_kind(build(level_four, config, style), Kind.BIRD)
    five = of_kind(build(level_five, config, style), Kind.BIRD)
    assert len(five) == len(four) + 1
    assert five[-1].color == style.bomb_color
    assert style.rubber_center.x - five[-1].centroid.x == pytest.approx(210)


def test_level_six_three_storey_tower(config, style):
    scene = build(level_six, config, style)
    dy = config.wall_height + config.plat_height
    platforms = [b.centroid for b in of_kind(scene, Kind.PLATFORM)]
    assert Vector(500, 100 + 4 * dy) in platforms
    birds = of_kind(scene, Kind.BIRD)
    assert birds[-1].color == style.standard_color
    assert style.rubber_center.x - birds[-1].centroid.x == pytest.approx(255)


@pytest.mark.parametrize("number", range(1, 7))
def test_load_level_matches_level_function(number, config, style):
    direct = build(LEVELS[number - 1], config, style, seed=3)
    loaded = Scene()
    load_level(loaded, number, config, style, random.Random(3))
    assert [b.centroid for b in loaded] == [b.centroid for b in direct]
    assert [b.image for b in loaded] == [b.image for b in direct]


@pytest.mark.parametrize("number", [0, 7, -1])
def test_load_level_rejects_unknown(number, config, style):
    with pytest.raises(ValueError):
        load_level(Scene(), number, config, style)