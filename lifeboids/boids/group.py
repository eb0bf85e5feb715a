"""A group of boids steered together by one behaviour."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator

from lifeboids.boids.entity import BoidEntity


class BaseBehavior(ABC):
    """Steering rule applied to every boid of the group it is attached to."""

    def __init__(self) -> None:
        self.group: BoidGroup | None = None

    @abstractmethod
    def update(self) -> None:
        """Steer and move the boids of the attached group by one step."""


class BoidGroup:
    """An ordered collection of boids with an optional behaviour."""

    def __init__(self) -> None:
        self._boids: list[BoidEntity] = []
        self.behavior: BaseBehavior | None = None

    @property
    def boids(self) -> list[BoidEntity]:
        """The boids of this group, in insertion order."""
        return self._boids

    def add(self, boid: BoidEntity) -> None:
        """Append a boid to the group."""
        self._boids.append(boid)

    def set_behavior(self, behavior: BaseBehavior) -> None:
        """Attach a behaviour and point it at this group."""
        self.behavior = behavior
        behavior.group = self

    def update(self) -> None:
        """Let the behaviour move the group one step."""
        if self.behavior is None:
            raise RuntimeError("boid group has no behavior")
        self.behavior.update()

    def release(self) -> None:
        """Drop every boid."""
        self._boids.clear()

    def __len__(self) -> int:
        return len(self._boids)

    def __iter__(self) -> Iterator[BoidEntity]:
        return iter(self._boids)