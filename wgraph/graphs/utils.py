"""
Utility functions for graph algorithms.

Provides frontier selection, path reconstruction from parent arrays and a
dense matrix view of a graph.
"""

import math
from typing import List, Optional, Sequence

import numpy as np

from .core import WeightedGraph


def reconstruct_path(
    parent: Sequence[Optional[int]], start: int, end: int
) -> Optional[List[int]]:
    """
    Reconstruct the path from start to end using a parent array.

    ``parent[v]`` is the previous vertex on the best known route to ``v``, or
    None for the start vertex and for vertices that were never reached.

    Args:
        parent: Parent array indexed by vertex.
        start: Vertex the parent links lead back to.
        end: Vertex to reconstruct the path to.

    Returns:
        Vertices from start to end (inclusive), or None if the parent links
        from end never reach start.

    Example:
        >>> reconstruct_path([None, 0, 1], 0, 2)
        [0, 1, 2]
        >>> reconstruct_path([None, 0, None], 0, 2) is None
        True
    """
    path = [end]
    current = end
    seen = {end}
    while current != start:
        current = parent[current]
        if current is None or current in seen:
            return None
        seen.add(current)
        path.append(current)

    path.reverse()
    return path


def closest_vertex(distance: Sequence[float], finished: Sequence[bool]) -> Optional[int]:
    """
    Linear scan for the unfinished vertex with the smallest finite distance.

    Ties go to the lowest index. Returns None once every remaining vertex is
    finished or unreachable.
    """
    best: Optional[int] = None
    best_distance = math.inf
    for v, d in enumerate(distance):
        if not finished[v] and d < best_distance:
            best = v
            best_distance = d
    return best


def adjacency_matrix(graph: WeightedGraph) -> np.ndarray:
    """
    Dense weight matrix of a graph.

    ``M[i, j]`` holds the weight of the edge from i to j, ``inf`` where there
    is none. Parallel edges keep the lightest weight. For undirected graphs the
    matrix is symmetric.

    Args:
        graph: WeightedGraph instance.

    Returns:
        (n, n) float array in vertex index order.

    Example:
        >>> G = WeightedGraph.from_edges(2, [(0, 1, 3)])
        >>> float(adjacency_matrix(G)[0, 1])
        3.0
    """
    n = graph.vertex_count
    matrix = np.full((n, n), np.inf, dtype=float)
    for source, target, weight in graph.edges():
        if weight < matrix[source, target]:
            matrix[source, target] = weight
    return matrix
