"""Visibility graphs between points inside a polygon set."""

from collections.abc import Sequence

from .geometry import LineSeg, PolygonSet
from .graph import AdjacencyGraph
from .points import Point, to_vec


def in_line_of_sight(polygon_set: PolygonSet, start, end) -> bool:
    """
    Check if the straight line from start to end stays inside the walkable
    region: it must not cut through any polygon outline, and its middle must
    lie inside the set. The second test rejects segments running entirely
    outside, e.g. across a notch between two corners of the same polygon.
    """
    line_of_sight = LineSeg(to_vec(start), to_vec(end))
    for p in polygon_set:
        if p.is_crossed_by(line_of_sight):
            return False
    return polygon_set.contains(line_of_sight.middle())


def build_visibility_graph(
    polygon_set: PolygonSet, points: Sequence[Point]
) -> AdjacencyGraph[Point]:
    """
    Link every ordered pair of distinct entries in points that can see each
    other. Duplicate points are not merged.
    """
    vis = AdjacencyGraph()
    for i, a in enumerate(points):
        for j, b in enumerate(points):
            if i == j:
                continue
            if in_line_of_sight(polygon_set, a, b):
                vis.link(a, b)
    return vis
