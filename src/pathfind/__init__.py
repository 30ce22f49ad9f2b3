from .geometry import Vec2, LineSeg, Line, Polygon, PolygonSet
from .graph import Graph, AdjacencyGraph
from .astar import find_path
from .points import Point, to_point, to_vec, node_dist
from .visibility import build_visibility_graph, in_line_of_sight
from .pathfinder import Pathfinder, ensure_inside, routing_vertices
from ._version import __version__

__all__ = [
    "Vec2",
    "LineSeg",
    "Line",
    "Polygon",
    "PolygonSet",
    "Graph",
    "AdjacencyGraph",
    "find_path",
    "Point",
    "to_point",
    "to_vec",
    "node_dist",
    "build_visibility_graph",
    "in_line_of_sight",
    "Pathfinder",
    "ensure_inside",
    "routing_vertices",
]

__version__ = __version__
