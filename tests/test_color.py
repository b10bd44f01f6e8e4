import random

import pytest

from slingsim.color import Color, random_color


def test_components_are_kept():
    color = Color(0.25, 0.5, 0.75)
    assert (color.r, color.g, color.b) == (0.25, 0.5, 0.75)


@pytest.mark.parametrize(
    "components", [(-0.1, 0, 0), (0, 1.5, 0), (0, 0, 2), (float("nan"), 0, 0)]
)
def test_out_of_range_rejected(components):
    with pytest.raises(ValueError):
        Color(*components)


def test_random_color_reproducible_with_seed():
    first = random_color(random.Random(7))
    second = random_color(random.Random(7))
    assert (first.r, first.g, first.b) == (second.r, second.g, second.b)


def test_random_color_in_range():
    rng = random.Random(1)
    for _ in range(200):
        color = random_color(rng)
        assert all(0 <= c <= 1 for c in (color.r, color.g, color.b))