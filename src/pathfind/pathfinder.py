import logging

from .astar import find_path
from .constants import NEIGHBOUR_OFFSETS
from .geometry import Polygon, PolygonSet
from .geometry.polygon_set import as_polygons
from .graph import AdjacencyGraph
from .points import Point, node_dist, to_point, to_vec
from .visibility import build_visibility_graph

logger = logging.getLogger(__name__)


class Pathfinder:
    """
    Finds shortest paths between two points constrained by a set of polygons.

    Each polygon designates either an area accessible for path finding or a
    hole inside such an area, i.e. an obstacle. Nested polygons alternate
    between area and hole:
    - polygons at the first level are areas
    - polygons contained in an area are holes
    - polygons contained in a hole are areas again

    Arguments
    ---------
    polygons: PolygonSet or sequence of point sequences
        The polygons, each given as its (x, y) vertices. Outer boundaries are
        expected in clockwise order in screen coordinates (y grows downward);
        holes use the same winding.
    """

    def __init__(self, polygons):
        if isinstance(polygons, PolygonSet):
            polygon_set = polygons
        else:
            polygon_set = PolygonSet(polygons=as_polygons(polygons, stacklevel=2))
        if len(polygon_set) == 0:
            raise ValueError("Pathfinder requires at least one polygon")

        self._polygon_set = polygon_set
        self._routing_vertices = routing_vertices(polygon_set)
        self._visibility_graph = None

        logger.debug(
            f"Pathfinder: {len(polygon_set)} polygons, "
            f"{len(self._routing_vertices)} routing vertices"
        )

    def __repr__(self):
        return (
            f"Pathfinder(polygons={len(self._polygon_set)}, "
            f"routing_vertices={len(self._routing_vertices)})"
        )

    @property
    def polygon_set(self) -> PolygonSet:
        return self._polygon_set

    @property
    def routing_vertices(self) -> tuple[Point, ...]:
        """Corners a shortest path can bend around, fixed at construction."""
        return self._routing_vertices

    @property
    def visibility_graph(self) -> AdjacencyGraph[Point] | None:
        """Visibility graph of the last `path` call, None before the first."""
        return self._visibility_graph

    def path(self, start, dest) -> list[Point]:
        """
        Find the shortest path from start to dest within the polygons.

        If dest lies outside the polygon set it is clamped to the nearest
        point on a polygon outline. start is never adjusted: if it lies
        outside, or cannot be connected to dest, the result is empty.

        Returns:
            The path as a list of integer points, start and (possibly
            clamped) dest included; an empty list if no path exists.
        """
        start, dest = to_point(start), to_point(dest)
        if not self._polygon_set.contains(to_vec(dest)):
            clamped = ensure_inside(
                self._polygon_set,
                to_point(self._polygon_set.closest_pt(to_vec(dest))),
            )
            logger.debug(f"Destination {dest} outside polygons, clamped to {clamped}")
            dest = clamped

        nodes = self._routing_vertices + (start, dest)
        self._visibility_graph = build_visibility_graph(self._polygon_set, nodes)
        path = find_path(self._visibility_graph, start, dest, node_dist, node_dist)

        n_edges = self._visibility_graph.num_edges
        if path:
            logger.debug(f"Path {start} -> {dest}: {len(path)} points ({n_edges} sightlines)")
        else:
            logger.debug(f"No path {start} -> {dest} ({n_edges} sightlines)")
        return path

    def to_dict(self) -> dict:
        return self._polygon_set.to_dict()

    @classmethod
    def from_dict(cls, data: dict) -> "Pathfinder":
        return cls(PolygonSet.from_dict(data))


def ensure_inside(polygon_set: PolygonSet, pt: Point) -> Point:
    """
    Move a point that is not contained in the polygon set to the first
    contained point among its eight integer neighbours. Points already
    inside, and points without a contained neighbour, are returned as is.
    """
    if polygon_set.contains(to_vec(pt)):
        return pt
    for dx, dy in NEIGHBOUR_OFFSETS:
        npt = (pt[0] + dx, pt[1] + dy)
        if polygon_set.contains(to_vec(npt)):
            return npt
    return pt


def routing_vertices(polygon_set: PolygonSet) -> tuple[Point, ...]:
    """
    Collect the vertices a taut path can bend around: the concave vertices
    of area polygons and the convex vertices of holes.
    """
    vertices = []
    for i, p in enumerate(polygon_set):
        hole = polygon_set.is_hole(i)
        vertices.extend(_vertices_of_type(p, concave=not hole))
    return tuple(vertices)


def _vertices_of_type(polygon: Polygon, concave: bool) -> list[Point]:
    return [
        to_point(v)
        for i, v in enumerate(polygon.vertices)
        if polygon.is_concave_at(i) == concave
    ]
