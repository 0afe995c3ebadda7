"""Immutable two-dimensional vector."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector:
    """A 2D vector of floats."""

    x: float
    y: float

    def mag(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def scaled(self, scale: float) -> Vector:
        """Return this vector multiplied by a scalar."""
        return Vector(self.x * scale, self.y * scale)

    def normalized(self) -> Vector:
        """Return the unit vector in the same direction.

        Raises ZeroDivisionError for the zero vector.
        """
        return self.scaled(1 / self.mag())

    def rotated(self, angle: float) -> Vector:
        """Return this vector rotated by ``angle`` radians."""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Vector(
            self.x * cos_a - self.y * sin_a,
            self.x * sin_a + self.y * cos_a,
        )

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y)