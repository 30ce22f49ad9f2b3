"""Sets of nested polygons forming walkable areas with holes."""

from __future__ import annotations

import warnings
from dataclasses import dataclass

import numpy as np

from .polygon import Polygon
from .vector import Vec2


def as_polygons(polygons, stacklevel: int = 1) -> tuple[Polygon, ...]:
    """
    Wrap raw point sequences in Polygon, leaving Polygon instances as is.

    Degenerate polygons are reported once, attributed `stacklevel` frames
    above the caller of this function (1 is the caller itself).
    """
    result = []
    for i, p in enumerate(polygons):
        if isinstance(p, Polygon):
            result.append(p)
            continue
        with warnings.catch_warnings():
            warnings.filterwarnings("ignore", message="Degenerate polygon")
            poly = Polygon(vertices=tuple(p))
        if poly.n_vertices < 3:
            msg = f"Degenerate polygon {i} with {poly.n_vertices} vertices"
            warnings.warn(msg, stacklevel=stacklevel + 1)
        result.append(poly)
    return tuple(result)


@dataclass(frozen=True)
class PolygonSet:
    """
    An ordered collection of polygons.

    Nested polygons alternate between walkable area and hole by containment
    depth: a polygon inside an even number of others (including none) is an
    area, one inside an odd number is a hole. Overlapping polygons can thus
    form holes and islands without any explicit flag.
    """

    polygons: tuple[Polygon, ...] = ()

    def __post_init__(self):
        # __post_init__ -> generated __init__ -> caller
        polys = as_polygons(self.polygons, stacklevel=3)
        object.__setattr__(self, "polygons", polys)

    @classmethod
    def from_points(cls, polygons) -> PolygonSet:
        """Build a polygon set from a sequence of (x, y) point sequences."""
        return cls(polygons=as_polygons(polygons, stacklevel=2))

    def __len__(self) -> int:
        return len(self.polygons)

    def __iter__(self):
        return iter(self.polygons)

    def __getitem__(self, i: int) -> Polygon:
        return self.polygons[i]

    @property
    def bounding_box(self) -> tuple[float, float, float, float]:
        """Return (x_min, y_min, x_max, y_max) over all polygons."""
        if not self.polygons:
            raise ValueError("Empty polygon set has no bounding box")
        boxes = np.array([p.bounding_box for p in self.polygons])
        return (
            float(boxes[:, 0].min()),
            float(boxes[:, 1].min()),
            float(boxes[:, 2].max()),
            float(boxes[:, 3].max()),
        )

    def contains(self, pt) -> bool:
        """
        Check if point pt lies inside the walkable region of the set.

        Each polygon toggles the result. A point on a polygon's outline is
        resolved against the parity accumulated so far: it counts as a
        toggle when currently outside and as no toggle when currently inside,
        which keeps shared and nested boundaries walkable.
        """
        pt = Vec2.from_any(pt)
        inside = False
        for p in self.polygons:
            if p.contains(pt, tolerance_on_outside=not inside):
                inside = not inside
        return inside

    def contains_points(self, points) -> np.ndarray:
        """Vectorised `contains` for an (N, 2) array of points."""
        points = np.asarray(points, dtype=float)
        if points.ndim == 1:
            points = points.reshape(1, -1)
        inside = np.zeros(len(points), dtype=bool)
        for p in self.polygons:
            inside ^= p.contains_points(points, tolerance_on_outside=~inside)
        return inside

    def closest_pt(self, pt) -> Vec2:
        """Return the closest point to pt on any of the polygon outlines."""
        if not self.polygons:
            raise ValueError("Cannot find closest point in an empty polygon set")
        pt = Vec2.from_any(pt)
        best = self.polygons[0].closest_pt(pt)
        best_dist = best.sq_dist(pt)
        for p in self.polygons[1:]:
            current = p.closest_pt(pt)
            dist = current.sq_dist(pt)
            if dist < best_dist:
                best, best_dist = current, dist
        return best

    def is_hole(self, i: int) -> bool:
        """
        Check if the polygon with index i is a hole, i.e. whether its first
        vertex is contained in an odd number of the other polygons.
        """
        first = self.polygons[i].vertices[0]
        hole = False
        for j, p in enumerate(self.polygons):
            if i != j and p.contains(first, tolerance_on_outside=False):
                hole = not hole
        return hole

    def to_dict(self) -> dict:
        return {"polygons": [p.to_dict() for p in self.polygons]}

    @classmethod
    def from_dict(cls, data: dict) -> PolygonSet:
        vertices = [p["vertices"] for p in data["polygons"]]
        return cls(polygons=as_polygons(vertices, stacklevel=2))
