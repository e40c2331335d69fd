"""Benchmark MST and shortest-path algorithms on random graphs."""

import time
from typing import Callable, Dict

import numpy as np

import wgraph as wg


def random_graph(n_vertices: int, n_edges: int, seed: int = 0) -> wg.WeightedGraph:
    """Random undirected graph with positive integer weights."""
    rng = np.random.default_rng(seed)
    graph = wg.WeightedGraph(n_vertices)
    sources = rng.integers(0, n_vertices, size=n_edges)
    targets = rng.integers(0, n_vertices, size=n_edges)
    weights = rng.integers(1, 100, size=n_edges)
    for u, v, w in zip(sources, targets, weights):
        graph.insert_edge(int(u), int(v), int(w))
    return graph


def benchmark_algorithm(
    name: str,
    run: Callable[[wg.WeightedGraph], object],
    n_vertices: int,
    n_edges: int,
    repeats: int = 5,
) -> Dict[str, float]:
    """Time one algorithm on a fixed random graph.

    Args:
        name: Label for the result.
        run: Callable taking the graph.
        n_vertices: Number of vertices.
        n_edges: Number of insert_edge calls.
        repeats: Timed runs after one warmup.

    Returns:
        Dictionary with timing results.
    """
    graph = random_graph(n_vertices, n_edges)

    # Warmup
    run(graph)

    start = time.perf_counter()
    for _ in range(repeats):
        run(graph)
    end = time.perf_counter()

    return {
        "name": name,
        "n_vertices": n_vertices,
        "n_edges": n_edges,
        "time_per_run_sec": (end - start) / repeats,
    }


if __name__ == "__main__":
    print("Benchmarking graph algorithms...")

    cases = [
        ("prim_mst", lambda g: wg.prim_mst(g, 0)),
        ("kruskal_mst", wg.kruskal_mst),
        ("dijkstra", lambda g: wg.dijkstra(g, 0)),
    ]
    for name, run in cases:
        results = benchmark_algorithm(name, run, n_vertices=500, n_edges=5000)
        print(f"{name} (500 vertices, 5000 edges):")
        print(f"  Time per run: {results['time_per_run_sec']*1e3:.2f} ms")
