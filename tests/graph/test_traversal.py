"""Tests for DFS, BFS, reachability and shortest paths."""
from __future__ import annotations

import logging
from collections import deque

import pytest

from graphmemo.graph.adjacency import MissingNodeError, build_adjacency_map
from graphmemo.graph.traversal import (
    breadth_first_traverse,
    depth_first_traverse,
    has_path,
    recursive_depth_first_traverse,
    shortest_path,
)


def _bfs_distances(graph: dict[int, list[int]], start: int) -> dict[int, int]:
    """Layer-by-layer distances, computed independently of the module."""
    dist = {start: 0}
    q = deque([start])
    while q:
        node = q.popleft()
        for nbr in graph[node]:
            if nbr not in dist:
                dist[nbr] = dist[node] + 1
                q.append(nbr)
    return dist


class TestDepthFirst:
    def test_example_order(self, example_graph: dict[str, list[str]]) -> None:
        # siblings pop off the stack in reverse adjacency order
        assert depth_first_traverse(example_graph, "a") == [
            "a", "b", "d", "f", "c", "e",
        ]

    def test_from_leaf(self, example_graph: dict[str, list[str]]) -> None:
        assert depth_first_traverse(example_graph, "f") == ["f"]

    def test_cycle_terminates(self, cyclic_graph: dict[str, list[str]]) -> None:
        order = depth_first_traverse(cyclic_graph, "A")
        assert order == ["A", "B", "C", "D"]

    def test_no_duplicates_when_pushed_twice(self) -> None:
        # b is pushed by a and again by c before it is ever popped
        graph = {"a": ["b", "c"], "c": ["b"], "b": []}
        order = depth_first_traverse(graph, "a")
        assert sorted(order) == ["a", "b", "c"]
        assert len(order) == 3

    def test_undirected_visits_whole_component(
        self, undirected_edges: list[tuple[str, str]]
    ) -> None:
        graph = build_adjacency_map(undirected_edges)
        assert set(depth_first_traverse(graph, "j")) == {"i", "j", "k", "l", "m"}

    def test_missing_neighbor_raises(self) -> None:
        with pytest.raises(MissingNodeError) as exc_info:
            depth_first_traverse({"a": ["b"]}, "a")
        assert exc_info.value.node == "b"

    def test_missing_start_raises(self) -> None:
        with pytest.raises(MissingNodeError):
            depth_first_traverse({}, "a")


class TestRecursiveDepthFirst:
    def test_example_order(self, example_graph: dict[str, list[str]]) -> None:
        assert recursive_depth_first_traverse(example_graph, "a") == [
            "a", "c", "e", "b", "d", "f",
        ]

    def test_cycle_terminates(self, cyclic_graph: dict[str, list[str]]) -> None:
        assert recursive_depth_first_traverse(cyclic_graph, "B") == [
            "B", "C", "A", "D",
        ]

    def test_self_loop(self) -> None:
        assert recursive_depth_first_traverse({"x": ["x"]}, "x") == ["x"]

    def test_shared_visited_set(self, example_graph: dict[str, list[str]]) -> None:
        visited: set[str] = set()
        first = recursive_depth_first_traverse(example_graph, "b", visited)
        second = recursive_depth_first_traverse(example_graph, "a", visited)
        assert first == ["b", "d", "f"]
        assert second == ["a", "c", "e"]
        assert visited == set(example_graph)

    def test_fresh_visited_per_call(self, example_graph: dict[str, list[str]]) -> None:
        recursive_depth_first_traverse(example_graph, "a")
        assert recursive_depth_first_traverse(example_graph, "b") == ["b", "d", "f"]

    def test_same_nodes_as_iterative(
        self, random_graphs: list[dict[int, list[int]]]
    ) -> None:
        for graph in random_graphs:
            start = next(iter(graph))
            assert set(recursive_depth_first_traverse(graph, start)) == set(
                depth_first_traverse(graph, start)
            )

    def test_missing_neighbor_raises(self) -> None:
        with pytest.raises(MissingNodeError):
            recursive_depth_first_traverse({"a": ["b"]}, "a")


class TestBreadthFirst:
    def test_example_order(self, example_graph: dict[str, list[str]]) -> None:
        assert breadth_first_traverse(example_graph, "a") == [
            "a", "c", "b", "e", "d", "f",
        ]

    def test_cycle_terminates(self, cyclic_graph: dict[str, list[str]]) -> None:
        assert breadth_first_traverse(cyclic_graph, "C") == ["C", "A", "D", "B"]

    def test_layers_are_non_decreasing(
        self, random_graphs: list[dict[int, list[int]]]
    ) -> None:
        for graph in random_graphs:
            start = next(iter(graph))
            order = breadth_first_traverse(graph, start)
            dist = _bfs_distances(graph, start)
            assert len(order) == len(set(order))
            assert set(order) == set(dist)
            layers = [dist[n] for n in order]
            assert layers == sorted(layers)

    def test_missing_neighbor_raises(self) -> None:
        with pytest.raises(MissingNodeError):
            breadth_first_traverse({"a": ["b"]}, "a")


class TestHasPath:
    def test_undirected(self, undirected_edges: list[tuple[str, str]]) -> None:
        graph = build_adjacency_map(undirected_edges)
        assert has_path(graph, "j", "m")
        assert has_path(graph, "m", "j")
        assert not has_path(graph, "i", "o")
        assert has_path(graph, "n", "o")

    def test_directed(self, example_graph: dict[str, list[str]]) -> None:
        assert has_path(example_graph, "a", "f")
        assert not has_path(example_graph, "f", "a")
        assert not has_path(example_graph, "b", "c")

    def test_same_node(self, example_graph: dict[str, list[str]]) -> None:
        assert has_path(example_graph, "e", "e")

    def test_target_need_not_be_a_key(self) -> None:
        # target is found among a's neighbors and never expanded
        assert has_path({"a": ["b"]}, "a", "b")

    def test_cycle_without_target(self, cyclic_graph: dict[str, list[str]]) -> None:
        assert not has_path(cyclic_graph, "A", "Z")

    def test_value_equality_not_identity(self) -> None:
        a = "".join(["no", "de"])
        b = "".join(["n", "ode"])
        assert a is not b
        assert has_path({"start": [a], a: []}, "start", b)

    def test_matches_reachable_set(
        self, random_graphs: list[dict[int, list[int]]]
    ) -> None:
        for graph in random_graphs:
            start = next(iter(graph))
            reachable = set(_bfs_distances(graph, start))
            for target in graph:
                assert has_path(graph, start, target) == (target in reachable)


class TestShortestPath:
    def test_five_cycle(self, square_edges: list[tuple[str, str]]) -> None:
        graph = build_adjacency_map(square_edges)
        assert shortest_path(graph, "w", "z") == ["w", "v", "z"]
        assert shortest_path(graph, "y", "x") == ["y", "x"]

    def test_unreachable_is_empty(
        self, undirected_edges: list[tuple[str, str]]
    ) -> None:
        graph = build_adjacency_map(undirected_edges)
        assert shortest_path(graph, "i", "o") == []

    def test_same_node(self, example_graph: dict[str, list[str]]) -> None:
        assert shortest_path(example_graph, "a", "a") == ["a"]

    def test_directed(self, example_graph: dict[str, list[str]]) -> None:
        assert shortest_path(example_graph, "a", "f") == ["a", "b", "d", "f"]
        assert shortest_path(example_graph, "f", "a") == []

    def test_prefers_fewer_edges(self) -> None:
        graph = {
            "s": ["a", "b"],
            "a": ["c"],
            "c": ["t"],
            "b": ["t"],
            "t": [],
        }
        assert shortest_path(graph, "s", "t") == ["s", "b", "t"]

    def test_length_matches_layer_distance(
        self, random_graphs: list[dict[int, list[int]]]
    ) -> None:
        for graph in random_graphs:
            start = next(iter(graph))
            dist = _bfs_distances(graph, start)
            for target in graph:
                path = shortest_path(graph, start, target)
                if target not in dist:
                    assert path == []
                    continue
                assert path[0] == start
                assert path[-1] == target
                assert len(path) - 1 == dist[target]
                for u, v in zip(path, path[1:]):
                    assert v in graph[u]

    def test_logs_edge_count(
        self, square_edges: list[tuple[str, str]], caplog: pytest.LogCaptureFixture
    ) -> None:
        graph = build_adjacency_map(square_edges)
        with caplog.at_level(logging.DEBUG, logger="graphmemo.graph.traversal"):
            shortest_path(graph, "w", "z")
        assert "2 edge(s)" in caplog.text
