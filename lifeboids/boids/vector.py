"""Immutable two-dimensional vector and angle conversions."""

from __future__ import annotations

import math
from dataclasses import dataclass


def deg_to_rad(value: float) -> float:
    """Convert degrees to radians."""
    return value * (math.pi / 180.0)


def rad_to_deg(value: float) -> float:
    """Convert radians to degrees."""
    return value * (180.0 / math.pi)


@dataclass(frozen=True)
class Vector2D:
    """A 2D vector with the usual arithmetic."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, value: float) -> Vector2D:
        return Vector2D(self.x * value, self.y * value)

    __rmul__ = __mul__

    def __truediv__(self, value: float) -> Vector2D:
        return Vector2D(self.x / value, self.y / value)

    def __neg__(self) -> Vector2D:
        return Vector2D(-self.x, -self.y)

    def dot(self, other: Vector2D) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def angle_to(self, other: Vector2D) -> float:
        """Unsigned angle in radians between this vector and another."""
        norm = self.length() * other.length()
        if norm == 0.0:
            raise ValueError("angle is undefined for a zero-length vector")
        cosine = max(-1.0, min(1.0, self.dot(other) / norm))
        return math.acos(cosine)

    def normalized(self) -> Vector2D:
        """Unit vector in the same direction; a zero vector stays zero."""
        length = self.length()
        if length == 0.0:
            return self
        return self / length

    def rotated(self, angle_rad: float) -> Vector2D:
        """This vector rotated counter-clockwise by angle_rad."""
        c = math.cos(angle_rad)
        s = math.sin(angle_rad)
        return Vector2D(self.x * c - self.y * s, self.x * s + self.y * c)