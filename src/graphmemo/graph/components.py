"""Connected components of an undirected adjacency map.

Every key is tried in turn as the root of a new component.  One visited
set is shared across all roots: a root that an earlier exploration
already reached belongs to that earlier component and is skipped.
Each remaining root starts a full depth-first exploration, and every
node that exploration reaches is marked visited.

On a directed map the same sweep still terminates, but the groups it
returns depend on key order and are not equivalence classes.  Build the
map with build_adjacency_map (or store both directions) first.
"""
from __future__ import annotations

import logging
from typing import Hashable, TypeVar

from graphmemo.graph.adjacency import Graph, neighbors

T = TypeVar("T", bound=Hashable)

log = logging.getLogger(__name__)


def connected_components(graph: Graph[T]) -> list[list[T]]:
    """All components, in the order their roots appear in *graph*.

    Nodes inside a component are listed in depth-first exploration
    order starting from the root.
    """
    visited: set[T] = set()
    components: list[list[T]] = []
    for root in graph:
        if root in visited:
            continue
        members: list[T] = []
        _explore(graph, root, visited, members)
        components.append(members)
    log.debug(
        "%d component(s) across %d node(s)", len(components), len(graph)
    )
    return components


def connected_components_count(graph: Graph[T]) -> int:
    """Number of connected components.  0 for an empty graph."""
    visited: set[T] = set()
    count = 0
    for root in graph:
        if _explore(graph, root, visited, None):
            count += 1
    return count


def largest_component(graph: Graph[T]) -> int:
    """Node count of the biggest component.  0 for an empty graph."""
    visited: set[T] = set()
    largest = 0
    for root in graph:
        size = _explore(graph, root, visited, None)
        if size > largest:
            largest = size
    return largest


def _explore(
    graph: Graph[T], node: T, visited: set[T], members: list[T] | None
) -> int:
    """Visit everything reachable from *node*; return how many were new.

    Explicit stack, so path-shaped components of any length work.
    Neighbors are pushed in reverse and checked on pop, which yields
    the same preorder as recursing in adjacency order.
    """
    size = 0
    stack: list[T] = [node]
    while stack:
        cur = stack.pop()
        if cur in visited:
            continue
        visited.add(cur)
        if members is not None:
            members.append(cur)
        size += 1
        for nbr in reversed(neighbors(graph, cur)):
            if nbr not in visited:
                stack.append(nbr)
    return size
