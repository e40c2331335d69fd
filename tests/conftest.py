"""Pytest configuration and shared fixtures for wgraph tests.

This module provides:
- A deterministic numpy RNG fixture for randomised property tests
- An autouse fixture that keeps debug mode switched on for every test
- Builders for the small reference graphs used across the suite
"""

import os
from typing import Callable, Iterator

import numpy as np
import pytest

from wgraph.diagnostics import debug_context
from wgraph.graphs import WeightedGraph


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def debug_invariants() -> Iterator[None]:
    """Run every test with container invariant checks enabled."""
    with debug_context(True):
        yield


@pytest.fixture
def seven_vertex_graph() -> WeightedGraph:
    """Undirected 7-vertex graph whose minimum spanning tree weighs 23."""
    return WeightedGraph.from_edges(
        7,
        [
            (0, 1, 5),
            (0, 2, 7),
            (0, 3, 12),
            (1, 2, 9),
            (1, 4, 7),
            (2, 3, 4),
            (2, 4, 4),
            (2, 5, 3),
            (3, 5, 7),
            (4, 5, 2),
            (4, 6, 5),
            (5, 6, 2),
        ],
    )


@pytest.fixture
def five_vertex_graph() -> WeightedGraph:
    """Undirected 5-vertex graph: a unit-weight chain plus heavier spokes to vertex 4."""
    return WeightedGraph.from_edges(
        5,
        [
            (0, 4, 5),
            (1, 4, 4),
            (2, 4, 3),
            (3, 4, 2),
            (0, 1, 1),
            (1, 2, 1),
            (2, 3, 1),
            (3, 4, 1),
        ],
    )


@pytest.fixture
def random_connected_graph(rng: np.random.Generator) -> Callable[..., WeightedGraph]:
    """Factory for random undirected connected graphs.

    Each graph is a random spanning tree plus up to ``extra_edges`` random
    edges (self loops are skipped), with weights in ``[1, max_weight]``.
    """

    def build(n: int, extra_edges: int, max_weight: int = 20) -> WeightedGraph:
        graph = WeightedGraph(n)
        order = rng.permutation(n)
        for k in range(1, n):
            u = int(order[k])
            v = int(order[rng.integers(0, k)])
            graph.insert_edge(u, v, int(rng.integers(1, max_weight + 1)))
        for _ in range(extra_edges):
            u, v = (int(x) for x in rng.integers(0, n, size=2))
            if u != v:
                graph.insert_edge(u, v, int(rng.integers(1, max_weight + 1)))
        return graph

    return build
