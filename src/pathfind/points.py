"""Conversion between integer graph nodes and float geometry vectors."""

import math

from .geometry import Vec2

Point = tuple[int, int]


def _round_half_away(v: float) -> int:
    a = abs(v)
    r = math.floor(a)
    # a - r is exact, a + 0.5 is not
    if a - r >= 0.5:
        r += 1
    return int(math.copysign(r, v))


def to_point(v) -> Point:
    """Round a Vec2 or (x, y) pair to the nearest integer point."""
    x, y = v
    return (_round_half_away(x), _round_half_away(y))


def to_vec(p) -> Vec2:
    return Vec2.from_any(p)


def node_dist(a: Point, b: Point) -> float:
    """Euclidean distance between two nodes, used as A* cost and heuristic."""
    return math.hypot(a[0] - b[0], a[1] - b[1])
