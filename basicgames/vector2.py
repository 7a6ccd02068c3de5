"""An immutable two-dimensional vector of floats."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real


@dataclass(frozen=True)
class Vector2:
    """A point or direction in the plane."""

    x: float = 0.0
    y: float = 0.0

    def length_sq(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.length_sq())

    def normalized(self) -> Vector2:
        """Return a vector of length one pointing the same way."""
        length = self.length()
        if length == 0:
            raise ValueError("cannot normalize a zero-length vector")
        return Vector2(self.x / length, self.y / length)

    def dot(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    def lerp(self, other: Vector2, f: float) -> Vector2:
        """Interpolate linearly: ``f == 0`` gives self, ``f == 1`` gives other."""
        return self + f * (other - self)

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Vector2:
        return self.__mul__(scalar)