"""RGB display colors."""

from __future__ import annotations

import random
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Color:
    """A color whose red, green and blue components lie between 0 and 1."""

    r: float
    g: float
    b: float

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not 0 <= value <= 1:
                raise ValueError(f"color component {name}={value} is outside [0, 1]")


def random_color(rng: random.Random | None = None) -> Color:
    """Return a color with uniformly random components."""
    source = rng if rng is not None else random
    return Color(source.random(), source.random(), source.random())