"""Depth-first and breadth-first traversal over adjacency maps.

The four traversals differ only in the container holding the frontier:

  depth_first_traverse            explicit stack (list.pop from the end)
  recursive_depth_first_traverse  the interpreter's call stack
  breadth_first_traverse          deque, popleft from the front
  has_path / shortest_path        deque, with early exit on the target

Every traversal keeps a visited set, so cycles terminate and no node
is emitted twice.  None of them validates the graph up front: the
first time a traversal has to expand a node that is not a key, the
MissingNodeError from adjacency.neighbors propagates to the caller.

Sibling order is a property of the frontier.  The explicit stack pushes
neighbors in adjacency order and therefore pops them in reverse; the
recursive form walks them in adjacency order.  On EXAMPLE_GRAPH from
"a" that gives

    depth_first_traverse            a b d f c e
    recursive_depth_first_traverse  a c e b d f
    breadth_first_traverse          a c b e d f
"""
from __future__ import annotations

import logging
from collections import deque
from typing import Hashable, TypeVar

from graphmemo.graph.adjacency import Graph, neighbors

T = TypeVar("T", bound=Hashable)

log = logging.getLogger(__name__)


def depth_first_traverse(graph: Graph[T], start: T) -> list[T]:
    """Iterative DFS from *start*, returning nodes in visit order.

    A node is marked visited when it is popped.  Neighbors that are
    already visited are never pushed; a node that got pushed twice
    before its first pop is skipped on the second pop.
    """
    visited: set[T] = set()
    order: list[T] = []
    stack: list[T] = [start]
    while stack:
        node = stack.pop()
        if node in visited:
            continue
        visited.add(node)
        order.append(node)
        for nbr in neighbors(graph, node):
            if nbr not in visited:
                stack.append(nbr)
    return order


def recursive_depth_first_traverse(
    graph: Graph[T], node: T, visited: set[T] | None = None
) -> list[T]:
    """Recursive DFS from *node*, returning nodes in visit order.

    *visited* is threaded through the whole call tree.  Pass your own
    set to continue a sweep across several roots; nodes already in it
    are not visited again.  Recursion depth grows with the longest
    simple path explored, so very deep graphs hit RecursionError.
    """
    if visited is None:
        visited = set()
    order: list[T] = []
    _visit(graph, node, visited, order)
    return order


def _visit(graph: Graph[T], node: T, visited: set[T], order: list[T]) -> None:
    if node in visited:
        return
    # mark before recursing, otherwise a cycle back to node never ends
    visited.add(node)
    order.append(node)
    for nbr in neighbors(graph, node):
        _visit(graph, nbr, visited, order)


def breadth_first_traverse(graph: Graph[T], start: T) -> list[T]:
    """BFS from *start*, returning nodes in visit order.

    Nodes are marked visited when enqueued, so each node enters the
    queue at most once and the queue never exceeds the node count.
    """
    visited: set[T] = {start}
    order: list[T] = []
    q: deque[T] = deque([start])
    while q:
        node = q.popleft()
        order.append(node)
        for nbr in neighbors(graph, node):
            if nbr not in visited:
                visited.add(nbr)
                q.append(nbr)
    return order


def has_path(graph: Graph[T], start: T, target: T) -> bool:
    """True if *target* is reachable from *start*.

    Returns as soon as *target* appears among the neighbors of an
    expanded node; *target* itself is never expanded and need not be
    a key.  A node always reaches itself.
    """
    if start == target:
        return True
    visited: set[T] = {start}
    q: deque[T] = deque([start])
    while q:
        node = q.popleft()
        for nbr in neighbors(graph, node):
            if nbr == target:
                return True
            if nbr not in visited:
                visited.add(nbr)
                q.append(nbr)
    return False


def shortest_path(graph: Graph[T], start: T, target: T) -> list[T]:
    """Fewest-edges path from *start* to *target*, both inclusive.

    BFS records, for every newly discovered node, the node it was
    discovered from.  Once *target* is discovered the path is rebuilt
    by walking those links backward.  Returns [] if *target* is
    unreachable and [start] if start == target.
    """
    if start == target:
        return [start]
    connections: dict[T, T] = {}
    visited: set[T] = {start}
    q: deque[T] = deque([start])
    while q:
        node = q.popleft()
        for nbr in neighbors(graph, node):
            if nbr in visited:
                continue
            visited.add(nbr)
            connections[nbr] = node
            if nbr == target:
                path = _reconstruct(connections, start, target)
                log.debug(
                    "shortest path %r -> %r: %d edge(s)",
                    start, target, len(path) - 1,
                )
                return path
            q.append(nbr)
    log.debug("shortest path %r -> %r: unreachable", start, target)
    return []


def _reconstruct(connections: dict[T, T], start: T, target: T) -> list[T]:
    path: list[T] = [target]
    cur = target
    while cur != start:
        cur = connections[cur]
        path.append(cur)
    path.reverse()
    return path
