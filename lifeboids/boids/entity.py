"""Scene entities: colours, positioned shapes and the boid itself."""

from __future__ import annotations

from dataclasses import dataclass

from lifeboids.boids.vector import Vector2D, deg_to_rad, rad_to_deg

_UP = Vector2D(0.0, 1.0)


@dataclass
class ColorRGBA:
    """A colour with red, green, blue and alpha components in 0..1."""

    red: float = 0.0
    green: float = 0.0
    blue: float = 0.0
    alpha: float = 1.0


class BaseEntity:
    """Something placed in the scene with a position, size and rotation angle."""

    def __init__(
        self,
        position: Vector2D | None = None,
        width: float = 0.0,
        height: float = 0.0,
    ) -> None:
        self.position = position if position is not None else Vector2D()
        self.width = float(width)
        self.height = float(height)
        self.angle = 0.0


class BoidEntity(BaseEntity):
    """A triangle-shaped boid moving along a unit direction at some velocity."""

    def __init__(self, width: float, height: float) -> None:
        super().__init__(width=width, height=height)
        self.color = ColorRGBA()
        self._direction = Vector2D(0.0, 1.0)
        self.velocity = 0.0

    @property
    def direction(self) -> Vector2D:
        return self._direction

    def set_direction(self, direction: Vector2D) -> None:
        """Point the boid along direction, normalised to unit length."""
        self._direction = direction.normalized()

    def set_color(self, red: float, green: float, blue: float) -> None:
        """Set the body colour, keeping the current alpha."""
        self.color = ColorRGBA(red, green, blue, self.color.alpha)

    def set_angle(self, angle: float) -> None:
        """Store angle (degrees) and rotate the direction by it."""
        self.angle = angle
        self._direction = self._direction.rotated(deg_to_rad(angle)).normalized()

    def update(self) -> None:
        """Move one step and turn the drawn angle to match the direction.

        A zero direction leaves the angle unchanged.
        """
        self.position = self.position + self._direction * self.velocity
        if self._direction.length() > 0.0:
            self.angle = -rad_to_deg(self._direction.angle_to(_UP))

    def heading_line(self) -> tuple[Vector2D, Vector2D]:
        """Endpoints of the line drawn from the centre along the heading."""
        end = Vector2D(
            self.position.x + self._direction.x * (self.width / 2),
            self.position.y + self._direction.y * (self.height / 2),
        )
        return self.position, end