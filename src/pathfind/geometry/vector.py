"""2D vector value type used by all geometry primitives."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass

from ..constants import EPSILON


@dataclass(frozen=True, slots=True)
class Vec2:
    """An immutable 2D vector / point with float coordinates."""

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self):
        for name in ("x", "y"):
            value = getattr(self, name)
            if not isinstance(value, numbers.Real):
                raise TypeError(f"Coordinate {name} must be a real number, not {value!r}")
            object.__setattr__(self, name, float(value))

    @classmethod
    def from_any(cls, arg) -> Vec2:
        """Build a vector from a Vec2 or any (x, y) pair."""
        if isinstance(arg, cls):
            return arg
        try:
            x, y = arg
        except (TypeError, ValueError) as e:
            raise TypeError(f"Expected an (x, y) pair, not {arg!r}") from e
        return cls(x, y)

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec2:
        return Vec2(self.x / scalar, self.y / scalar)

    def __iter__(self):
        yield self.x
        yield self.y

    def __str__(self):
        return f"({self.x:g}, {self.y:g})"

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vec2) -> float:
        """Z component of the cross product of the two vectors lifted to 3D."""
        return self.x * other.y - self.y * other.x

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def dist(self, other: Vec2) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def sq_dist(self, other: Vec2) -> float:
        dx, dy = self.x - other.x, self.y - other.y
        return dx * dx + dy * dy

    def near_eq(self, other: Vec2, eps: float = EPSILON) -> bool:
        return abs(self.x - other.x) <= eps and abs(self.y - other.y) <= eps
