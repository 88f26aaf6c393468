"""Adjacency-map graphs: node -> ordered list of neighbors.

A graph is any mapping whose keys are node ids (any hashable type T)
and whose values are the neighbors of that node, in order.  Every
neighbor is expected to be a key as well; a node with no outgoing
edges maps to an empty list.

    a -> c -> e
    |
    v
    b -> d -> f

is written as

    {"a": ["c", "b"], "b": ["d"], "c": ["e"],
     "d": ["f"], "e": [], "f": []}

Directed and undirected graphs share the representation.  An
undirected graph is just a directed one where every edge is stored in
both directions, which is what build_adjacency_map produces from an
edge list.
"""
from __future__ import annotations

from typing import Hashable, Iterable, Mapping, Sequence, TypeAlias, TypeVar

T = TypeVar("T", bound=Hashable)

Graph: TypeAlias = Mapping[T, Sequence[T]]
EdgeList: TypeAlias = Iterable[tuple[T, T]]

EXAMPLE_GRAPH: dict[str, list[str]] = {
    "a": ["c", "b"],
    "b": ["d"],
    "c": ["e"],
    "d": ["f"],
    "e": [],
    "f": [],
}


class MissingNodeError(KeyError):
    """Raised when a traversal needs the neighbors of an unknown node."""

    def __init__(self, node: object) -> None:
        self.node = node
        super().__init__(f"Node {node!r} has no adjacency entry")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


def neighbors(graph: Graph[T], node: T) -> Sequence[T]:
    """Neighbors of *node*, raising MissingNodeError if it is not a key."""
    try:
        return graph[node]
    except KeyError:
        raise MissingNodeError(node) from None


def build_adjacency_map(edges: EdgeList[T]) -> dict[T, list[T]]:
    """Convert an undirected edge list into an adjacency map.

    Each pair (a, b) adds b to a's neighbors and a to b's neighbors.
    Nodes are created the first time they are seen.  Neighbor order
    follows edge order.  Raises ValueError for a pair that does not
    have exactly two elements, and for a bare string such as "ab"
    (which would otherwise unpack into the edge a - b).
    """
    graph: dict[T, list[T]] = {}
    for edge in edges:
        if isinstance(edge, str):
            raise ValueError(f"Edge {edge!r} is a string, not a pair of nodes")
        if len(edge) != 2:
            raise ValueError(f"Edge {edge!r} must have exactly two nodes")
        a, b = edge
        if a not in graph:
            graph[a] = []
        if b not in graph:
            graph[b] = []
        graph[a].append(b)
        graph[b].append(a)
    return graph


def validate_graph(graph: Graph[T]) -> None:
    """Raise MissingNodeError for the first neighbor that is not a key."""
    for nbrs in graph.values():
        for nbr in nbrs:
            if nbr not in graph:
                raise MissingNodeError(nbr)


def is_symmetric(graph: Graph[T]) -> bool:
    """True if every edge a -> b has a matching edge b -> a."""
    for node, nbrs in graph.items():
        for nbr in nbrs:
            if node not in graph.get(nbr, ()):
                return False
    return True
