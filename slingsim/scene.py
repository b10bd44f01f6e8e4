"""A collection of bodies and the force creators acting on them."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from slingsim.body import Body

ForceCreator = Callable[[], None]


@dataclass(slots=True)
class _Registration:
    forcer: ForceCreator
    bodies: tuple[Body, ...]
    id: int

    def depends_on(self, body: Body) -> bool:
        return any(dependency is body for dependency in self.bodies)


class Scene:
    """Bodies plus force creators that are run on every tick."""

    def __init__(self) -> None:
        self._bodies: list[Body] = []
        self._force_creators: list[_Registration] = []

    def __len__(self) -> int:
        return len(self._bodies)

    def __getitem__(self, index: int) -> Body:
        return self._bodies[index]

    def __iter__(self) -> Iterator[Body]:
        return iter(list(self._bodies))

    @property
    def force_creator_count(self) -> int:
        """The number of force creators currently registered."""
        return len(self._force_creators)

    def add_body(self, body: Body) -> None:
        """Append a body to the scene."""
        self._bodies.append(body)

    def remove_body(self, index: int) -> None:
        """Mark the body at an index for removal on the next tick."""
        self._bodies[index].remove()

    def add_force_creator(
        self,
        forcer: ForceCreator,
        bodies: Iterable[Body] | None = None,
        id: int = 0,
    ) -> None:
        """Register a callable run each tick.

        The force creator is dropped as soon as any of the given bodies is
        removed from the scene. The id allows removing it explicitly.
        """
        dependencies = tuple(bodies) if bodies is not None else ()
        self._force_creators.append(_Registration(forcer, dependencies, id))

    def remove_force_creator(self, id: int) -> None:
        """Drop every force creator registered with the given id."""
        self._force_creators = [
            registration for registration in self._force_creators if registration.id != id
        ]

    def tick(self, dt: float) -> None:
        """Run all force creators, reap removed bodies, then advance the rest by dt."""
        for registration in list(self._force_creators):
            registration.forcer()

        removed = [body for body in self._bodies if body.removed]
        if removed:
            self._force_creators = [
                registration
                for registration in self._force_creators
                if not any(registration.depends_on(body) for body in removed)
            ]
            self._bodies = [body for body in self._bodies if not body.removed]

        if dt != 0:
            for body in self._bodies:
                body.tick(dt)