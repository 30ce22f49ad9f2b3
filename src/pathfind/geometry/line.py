"""Line segments and infinite lines."""

from __future__ import annotations

from dataclasses import dataclass

from .vector import Vec2


@dataclass(frozen=True, slots=True)
class LineSeg:
    """
    A line segment between the points a and b.

    The order of the end points matters for side tests and `near_eq`,
    but not for crossing tests.
    """

    a: Vec2
    b: Vec2

    def __post_init__(self):
        object.__setattr__(self, "a", Vec2.from_any(self.a))
        object.__setattr__(self, "b", Vec2.from_any(self.b))

    def __str__(self):
        return f"L{self.a}:{self.b}"

    def length(self) -> float:
        return self.a.dist(self.b)

    def closest_pt(self, p: Vec2) -> Vec2:
        """
        Return the point on the segment that is closest to p.

        This is the orthogonal projection of p onto the segment, or one of
        the end points if the projection falls outside of it.
        """
        v = self.b - self.a
        w = p - self.a
        c1 = w.dot(v)
        if c1 <= 0:
            return self.a
        c2 = v.dot(v)
        if c2 <= c1:
            return self.b
        return self.a + v * (c1 / c2)

    def crosses(self, other: LineSeg) -> bool:
        """
        Check if the two segments intersect at a point strictly inside both.

        Touching end points, parallel and collinear (overlapping) segments
        never cross.
        """
        u = self.a - self.b
        v = other.a - other.b
        d = u.cross(v)
        if d == 0:
            return False
        w = self.b - other.b
        n1 = u.cross(w)
        n2 = v.cross(w)
        if n1 == 0 or n2 == 0:
            return False
        r = n1 / d
        s = n2 / d
        return 0 < r < 1 and 0 < s < 1

    def middle(self) -> Vec2:
        return (self.a + self.b) / 2

    def near_eq(self, other: LineSeg) -> bool:
        return self.a.near_eq(other.a) and self.b.near_eq(other.b)


@dataclass(frozen=True, slots=True)
class Line:
    """The infinite line through the two end points of a segment."""

    seg: LineSeg

    def intersect(self, other: Line) -> Vec2 | None:
        """Intersection point of two lines, or None if they are parallel."""
        u = self.seg.a - self.seg.b
        v = other.seg.a - other.seg.b
        d = u.cross(v)
        if d == 0:
            return None
        r = self.seg.a.cross(self.seg.b) / d
        s = other.seg.a.cross(other.seg.b) / d
        return v * r - u * s

    def side(self, p: Vec2) -> int:
        """
        Report on which side of the line point p lies:
        +1 on one side, -1 on the other and 0 on the line itself.
        """
        c = (p - self.seg.a).cross(self.seg.b - self.seg.a)
        return (c > 0) - (c < 0)
