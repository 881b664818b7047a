"""Two-dimensional vectors and a random integer helper."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from numbers import Real
from typing import Iterator

_rng = random.Random()


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalized(self) -> Vec2:
        """Unit vector in the same direction; raises ValueError for the zero vector."""
        size = self.length()
        if size == 0.0:
            raise ValueError("cannot normalize a zero-length vector")
        return Vec2(self.x / size, self.y / size)

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Vec2 | float) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x * other.x, self.y * other.y)
        if isinstance(other, Real):
            return Vec2(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Vec2:
        if isinstance(other, Real):
            return Vec2(self.x * other, self.y * other)
        return NotImplemented

    def __truediv__(self, other: Vec2 | float) -> Vec2:
        if isinstance(other, Vec2):
            if other.x == 0.0 or other.y == 0.0:
                raise ZeroDivisionError("vector division by a zero component")
            return Vec2(self.x / other.x, self.y / other.y)
        if isinstance(other, Real):
            if other == 0:
                raise ZeroDivisionError("vector division by zero")
            return Vec2(self.x / other, self.y / other)
        return NotImplemented


def randint(low: int, high: int) -> int:
    """Uniform random integer in the closed range [low, high]."""
    return _rng.randint(low, high)