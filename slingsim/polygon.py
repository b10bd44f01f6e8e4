"""Area, centroid and in-place transforms of polygons given as vertex lists."""

from __future__ import annotations

from collections.abc import Iterator, MutableSequence, Sequence

from slingsim.vector import Vector


def _edges(polygon: Sequence[Vector]) -> Iterator[tuple[Vector, Vector]]:
    if not polygon:
        raise ValueError("polygon has no vertices")
    return zip(polygon, [*polygon[1:], polygon[0]])


def polygon_area(polygon: Sequence[Vector]) -> float:
    """Signed shoelace area: positive for counterclockwise vertex order."""
    return sum(a.cross(b) for a, b in _edges(polygon)) / 2


def polygon_centroid(polygon: Sequence[Vector]) -> Vector:
    """Return the center of mass of a polygon of uniform density."""
    area = polygon_area(polygon)
    if area == 0:
        raise ValueError("polygon has zero area")
    total = Vector()
    for a, b in _edges(polygon):
        total = total + (a + b) * a.cross(b)
    return total * (1 / (6 * area))


def polygon_translate(polygon: MutableSequence[Vector], translation: Vector) -> None:
    """Translate every vertex of the polygon in place."""
    polygon[:] = [vertex + translation for vertex in polygon]


def polygon_rotate(polygon: MutableSequence[Vector], angle: float, point: Vector) -> None:
    """Rotate every vertex counterclockwise about a point, in place."""
    polygon[:] = [(vertex - point).rotate(angle) + point for vertex in polygon]