"""A* search over any graph that can list the neighbours of a node."""

import heapq
import itertools
import math
from collections.abc import Callable, Hashable

from .graph import Graph

CostFn = Callable[[Hashable, Hashable], float]


def find_path(
    graph: Graph,
    start,
    dest,
    cost: CostFn,
    heuristic: CostFn,
) -> list:
    """
    Find the cheapest path from start to dest.

    Args:
        graph: provides `neighbours(node)`
        start, dest: nodes of the graph
        cost: cost of the edge between two adjacent nodes
        heuristic: estimated remaining cost from a node to dest. Must not
            overestimate for the result to be optimal.

    Returns:
        The nodes from start to dest inclusive, or an empty list if dest
        cannot be reached.
    """
    # insertion counter breaks ties between equal priorities without
    # comparing the nodes themselves
    counter = itertools.count()
    frontier = [(heuristic(start, dest), next(counter), start)]
    came_from = {start: None}
    g = {start: 0.0}
    closed = set()

    while frontier:
        _, _, node = heapq.heappop(frontier)
        if node in closed:
            continue
        if node == dest:
            return _reconstruct(came_from, node)
        closed.add(node)
        for nb in graph.neighbours(node):
            if nb in closed:
                continue
            ng = g[node] + cost(node, nb)
            if ng >= g.get(nb, math.inf):
                continue
            g[nb] = ng
            came_from[nb] = node
            heapq.heappush(frontier, (ng + heuristic(nb, dest), next(counter), nb))
    return []


def _reconstruct(came_from: dict, node) -> list:
    path = [node]
    while came_from[node] is not None:
        node = came_from[node]
        path.append(node)
    path.reverse()
    return path
