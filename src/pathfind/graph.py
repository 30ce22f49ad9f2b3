from collections.abc import Hashable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Generic, Protocol, TypeVar, runtime_checkable

N = TypeVar("N", bound=Hashable)


@runtime_checkable
class Graph(Protocol[N]):
    """Anything that can list the neighbour nodes of a node."""

    def neighbours(self, node: N) -> Sequence[N]: ...


@dataclass(eq=False)
class AdjacencyGraph(Generic[N], Mapping[N, list[N]]):
    """
    A directed graph stored as an adjacency list: node -> neighbour nodes.

    Nodes are keyed by value. Only nodes with at least one outgoing edge
    appear as keys; neighbour lists keep the order edges were linked in.
    """

    _adjacency: dict[N, list[N]] = field(default_factory=dict)

    # ---- Mapping protocol ----
    def __getitem__(self, node: N) -> list[N]:
        return self._adjacency[node]

    def __iter__(self) -> Iterator[N]:
        return iter(self._adjacency)

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self):
        return f"AdjacencyGraph({self._adjacency!r})"

    def link(self, a: N, b: N) -> "AdjacencyGraph[N]":
        """Create a directed edge from node a to node b."""
        self._adjacency.setdefault(a, []).append(b)
        return self

    def neighbours(self, node: N) -> list[N]:
        return self._adjacency.get(node, [])

    @property
    def num_edges(self) -> int:
        return sum(len(v) for v in self._adjacency.values())

    def to_dict(self) -> dict[N, list[N]]:
        return {k: list(v) for k, v in self._adjacency.items()}
