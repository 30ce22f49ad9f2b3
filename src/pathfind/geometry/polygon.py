"""2D polygon representation for walkable areas and holes."""

from __future__ import annotations

import warnings
from dataclasses import dataclass, field

import numpy as np

from ..constants import EPSILON
from .line import Line, LineSeg
from .vector import Vec2


@dataclass(frozen=True)
class Polygon:
    """
    A 2D polygon defined by its vertices, ring-closed implicitly.

    Edge i connects vertex i with vertex (i + 1) mod n. The vertex order is
    kept exactly as given: whether a corner counts as concave or convex
    depends on it, so callers must supply a consistent winding (clockwise
    for outer boundaries in screen coordinates, where y grows downward).
    """

    vertices: tuple[Vec2, ...]
    _cache: dict = field(default_factory=dict, repr=False, compare=False)

    def __post_init__(self):
        verts = tuple(Vec2.from_any(v) for v in self.vertices)
        if len(verts) == 0:
            raise ValueError("Polygon must have at least one vertex")
        if len(verts) < 3:
            msg = f"Degenerate polygon with {len(verts)} vertices"
            warnings.warn(msg, stacklevel=3)
        object.__setattr__(self, "vertices", verts)

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self):
        return iter(self.vertices)

    def __getitem__(self, i: int) -> Vec2:
        return self.vertices[self.wrap_index(i)]

    @property
    def n_vertices(self) -> int:
        return len(self.vertices)

    def wrap_index(self, i: int) -> int:
        """Map any integer, including negative ones, into [0, n)."""
        return i % len(self.vertices)

    def edge(self, i: int) -> LineSeg:
        i = self.wrap_index(i)
        return LineSeg(self.vertices[i], self.vertices[self.wrap_index(i + 1)])

    @property
    def edges(self) -> tuple[LineSeg, ...]:
        if "edges" in self._cache:
            return self._cache["edges"]
        edges = tuple(self.edge(i) for i in range(len(self.vertices)))
        self._cache["edges"] = edges
        return edges

    @property
    def area(self) -> float:
        return abs(self.signed_area)

    @property
    def signed_area(self) -> float:
        """Shoelace area; its sign tells the winding of the vertices."""
        area = 0.0
        for e in self.edges:
            area += e.a.cross(e.b)
        return area / 2.0

    @property
    def bounding_box(self) -> tuple[float, float, float, float]:
        """Return (x_min, y_min, x_max, y_max) of the bounding box."""
        if "bounding_box" in self._cache:
            return self._cache["bounding_box"]
        xs = [v.x for v in self.vertices]
        ys = [v.y for v in self.vertices]
        result = (min(xs), min(ys), max(xs), max(ys))
        self._cache["bounding_box"] = result
        return result

    def to_array(self) -> np.ndarray:
        """Vertices as an (n, 2) float array."""
        return np.array([(v.x, v.y) for v in self.vertices], dtype=float)

    def contains(self, pt, tolerance_on_outside: bool = False) -> bool:
        """
        Check if point pt lies inside the polygon, using ray casting.

        A ray is cast from pt horizontally toward +x; pt is inside if it
        crosses an odd number of edges. An edge only counts if its end points
        lie on different sides of pt's y, so that a ray through a shared
        vertex is not counted twice.

        If pt lies on the boundary the answer is `tolerance_on_outside`
        instead of a computed one.
        """
        pt = Vec2.from_any(pt)
        inside = False
        for e in self.edges:
            if e.closest_pt(pt).near_eq(pt):
                return tolerance_on_outside
            if _h_ray_intersects(pt, e):
                inside = not inside
        return inside

    def contains_points(self, points, tolerance_on_outside=False) -> np.ndarray:
        """
        Check if multiple points are inside the polygon.

        Args:
            points: Array of shape (N, 2) with x, y coordinates
            tolerance_on_outside: result for points on the boundary, either
                a single bool or a boolean array of shape (N,)

        Returns:
            Boolean array of shape (N,)
        """
        points = np.asarray(points, dtype=float)
        if points.ndim == 1:
            points = points.reshape(1, -1)
        x, y = points[:, 0], points[:, 1]
        inside = np.zeros(len(points), dtype=bool)
        on_boundary = np.zeros(len(points), dtype=bool)

        for e in self.edges:
            ax, ay, bx, by = e.a.x, e.a.y, e.b.x, e.b.y
            dx, dy = bx - ax, by - ay

            # distance to the edge, with the projection clamped to the segment
            c2 = dx * dx + dy * dy
            c1 = (x - ax) * dx + (y - ay) * dy
            t = np.clip(c1 / c2, 0.0, 1.0) if c2 > 0 else np.zeros_like(x)
            cx, cy = ax + t * dx, ay + t * dy
            on_boundary |= (np.abs(cx - x) <= EPSILON) & (np.abs(cy - y) <= EPSILON)

            straddles = (ay >= y) != (by >= y)
            with np.errstate(divide="ignore", invalid="ignore"):
                x_intersect = ax + (y - ay) * dx / dy
                inside ^= straddles & (x <= x_intersect)

        tolerance = np.broadcast_to(np.asarray(tolerance_on_outside, dtype=bool), inside.shape)
        return np.where(on_boundary, tolerance, inside)

    def is_crossed_by(self, ls: LineSeg) -> bool:
        """
        Check if segment ls cuts through the outline of the polygon.

        Besides proper edge crossings this also detects a segment passing
        exactly through a vertex where the outline bends across it. Vertices
        coinciding with an end point of ls are skipped, so touching the
        polygon at a shared corner never counts.
        """
        line = Line(ls)
        for i, v in enumerate(self.vertices):
            if ls.a == v or ls.b == v:
                continue
            if ls.crosses(self.edge(i)):
                return True
            if ls.closest_pt(v) == v:
                prev = self.vertices[self.wrap_index(i - 1)]
                nxt = self.vertices[self.wrap_index(i + 1)]
                if line.side(prev) != line.side(nxt):
                    return True
        return False

    def closest_pt(self, pt) -> Vec2:
        """Return the point on the outline of the polygon closest to pt."""
        pt = Vec2.from_any(pt)
        best = self.vertices[0]
        best_dist = best.sq_dist(pt)
        for e in self.edges:
            current = e.closest_pt(pt)
            dist = current.sq_dist(pt)
            if dist < best_dist:
                best, best_dist = current, dist
        return best

    def is_concave_at(self, i: int) -> bool:
        """Check whether the vertex with index i bends inward."""
        i = self.wrap_index(i)
        v = self.vertices[i]
        prev = self.vertices[self.wrap_index(i - 1)]
        nxt = self.vertices[self.wrap_index(i + 1)]
        return (v - prev).cross(nxt - v) < 0

    def to_dict(self) -> dict:
        return {"vertices": [[v.x, v.y] for v in self.vertices]}

    @classmethod
    def from_dict(cls, data: dict) -> Polygon:
        return cls(vertices=tuple(tuple(v) for v in data["vertices"]))


def _h_ray_intersects(p: Vec2, ls: LineSeg) -> bool:
    """Check if a horizontal ray from p toward +x intersects segment ls."""
    # each end point has to lie on a different side of the horizontal line
    if (ls.a.y >= p.y) == (ls.b.y >= p.y):
        return False
    h_ray = Line(LineSeg(p, Vec2(p.x + 1, p.y)))
    q = h_ray.intersect(Line(ls))
    return p.x <= q.x
