"""Shared fixtures for graph tests."""
from __future__ import annotations

import random

import pytest

from graphmemo.graph.adjacency import EXAMPLE_GRAPH, build_adjacency_map

SEED = 42


@pytest.fixture
def example_graph() -> dict[str, list[str]]:
    """
    a -> c -> e
    a -> b -> d -> f
    """
    return {node: list(nbrs) for node, nbrs in EXAMPLE_GRAPH.items()}


@pytest.fixture
def cyclic_graph() -> dict[str, list[str]]:
    """A -> B -> C -> A, plus C -> D."""
    return {"A": ["B"], "B": ["C"], "C": ["A", "D"], "D": []}


@pytest.fixture
def undirected_edges() -> list[tuple[str, str]]:
    """i - j, i - k - m, k - l, and a separate n - o."""
    return [("i", "j"), ("k", "i"), ("m", "k"), ("k", "l"), ("o", "n")]


@pytest.fixture
def square_edges() -> list[tuple[str, str]]:
    """w - x - y - z - v - w (a five-cycle)."""
    return [("w", "x"), ("x", "y"), ("z", "y"), ("z", "v"), ("w", "v")]


@pytest.fixture
def three_components() -> dict[int, list[int]]:
    """{1, 2}, {3}, {4, 5, 6, 7, 8}"""
    return {
        1: [2],
        2: [1],
        3: [],
        4: [6],
        5: [6],
        6: [4, 5, 7, 8],
        7: [6],
        8: [6],
    }


@pytest.fixture
def random_graphs() -> list[dict[int, list[int]]]:
    """Thirty seeded random undirected graphs of 1-25 nodes each."""
    rng = random.Random(SEED)
    graphs = []
    for _ in range(30):
        n_nodes = rng.randint(1, 25)
        edge_prob = rng.choice([0.05, 0.1, 0.3])
        edges = [
            (i, j)
            for i in range(n_nodes)
            for j in range(i + 1, n_nodes)
            if rng.random() < edge_prob
        ]
        graph = build_adjacency_map(edges)
        for node in range(n_nodes):
            graph.setdefault(node, [])
        graphs.append(graph)
    return graphs
