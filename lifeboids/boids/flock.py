"""Flocking behaviour: alignment, separation, cohesion and staying inside an area."""

from __future__ import annotations

from lifeboids.boids.entity import BoidEntity
from lifeboids.boids.group import BaseBehavior
from lifeboids.boids.vector import Vector2D

NEIGHBOR_AREA = 40.0
SEPARATION_DISTANCE = 30.0


class FlockBehavior(BaseBehavior):
    """Steers each boid by its neighbours and keeps it within the area."""

    def __init__(self, area_width: float, area_height: float) -> None:
        super().__init__()
        self.neighbor_area = NEIGHBOR_AREA
        self.area_width = float(area_width)
        self.area_height = float(area_height)

    def set_area_size(self, width: float, height: float) -> None:
        """Change the size of the area the boids must stay inside."""
        self.area_width = float(width)
        self.area_height = float(height)

    def _boids(self) -> list[BoidEntity]:
        if self.group is None:
            raise RuntimeError("behavior is not attached to a boid group")
        return self.group.boids

    def _others_within(self, boid: BoidEntity, radius: float) -> list[BoidEntity]:
        here = boid.position
        return [
            other
            for other in self._boids()
            if other is not boid and (other.position - here).length() < radius
        ]

    def alignment(self, boid: BoidEntity) -> Vector2D:
        """Mean heading of nearby boids; also adopts their mean velocity."""
        neighbours = self._others_within(boid, self.neighbor_area)
        if not neighbours:
            return Vector2D()
        count = len(neighbours)
        total = Vector2D()
        for other in neighbours:
            total = total + other.direction
        boid.velocity = sum(other.velocity for other in neighbours) / count
        return (total / count).normalized()

    def separation(self, boid: BoidEntity) -> Vector2D:
        """Unit vector pointing away from the mean offset of close boids."""
        here = boid.position
        neighbours = self._others_within(boid, SEPARATION_DISTANCE)
        if not neighbours:
            return Vector2D()
        total = Vector2D()
        for other in neighbours:
            total = total + (other.position - here)
        return (-(total / len(neighbours))).normalized()

    def cohesion(self, boid: BoidEntity) -> Vector2D:
        """Unit vector pointing towards the centre of nearby boids."""
        neighbours = self._others_within(boid, self.neighbor_area)
        if not neighbours:
            return Vector2D()
        total = Vector2D()
        for other in neighbours:
            total = total + other.position
        return (total / len(neighbours) - boid.position).normalized()

    def keep_inside_area(self, boid: BoidEntity) -> Vector2D:
        """The boid's direction, mirrored on each axis where its next step leaves the area."""
        direction = boid.direction
        nxt = boid.position + direction * boid.velocity
        x, y = direction.x, direction.y
        if nxt.x + boid.width > self.area_width or nxt.x < 0.0:
            x = -x
        if nxt.y + boid.height > self.area_height or nxt.y < 0.0:
            y = -y
        return Vector2D(x, y)

    def update(self) -> None:
        """Steer and move every boid in turn; later boids see earlier moves."""
        for boid in self._boids():
            alignment = self.alignment(boid)
            separation = self.separation(boid)
            cohesion = self.cohesion(boid)
            area = self.keep_inside_area(boid)
            boid.set_direction(
                boid.direction + alignment + separation + cohesion + area
            )
            boid.update()