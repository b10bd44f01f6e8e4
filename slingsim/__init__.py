"""Two-dimensional rigid-body simulation, slingshot game levels and pygame rendering."""

__version__ = "0.1.0"

__all__ = [
    "body",
    "builders",
    "collision",
    "color",
    "forces",
    "levels",
    "polygon",
    "render",
    "scene",
    "vector",
]