"""
Single-source shortest paths: Dijkstra.

Only strictly positive edge weights are supported. The frontier is selected by
a linear scan, mirroring `prim_mst`.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3 (Dijkstra).
"""

import math
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from ..logging import get_logger
from .core import WeightedGraph
from .utils import closest_vertex, reconstruct_path

logger = get_logger(__name__)


@dataclass(frozen=True)
class Path:
    """A route through the graph and its total weight."""

    vertices: Tuple[int, ...]
    weight: int

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[int]:
        return iter(self.vertices)


@dataclass(frozen=True)
class ShortestPaths:
    """
    Shortest path tree rooted at a start vertex.

    Attributes:
        graph: Graph the paths were computed on.
        start: Source vertex.
        parent: Previous vertex on the shortest route to each vertex; None for
            the start and for unreachable vertices.
        distance: Shortest distance to each vertex, ``math.inf`` if unreachable.
    """

    graph: WeightedGraph = field(repr=False, compare=False)
    start: int
    parent: Tuple[Optional[int], ...]
    distance: Tuple[float, ...]

    def _check(self, end: int) -> None:
        if not 0 <= end < len(self.distance):
            raise IndexError(f"Vertex {end} out of range for graph with {len(self.distance)} vertices")

    def is_reachable(self, end: int) -> bool:
        self._check(end)
        return self.distance[end] != math.inf

    def distance_to(self, end: int) -> float:
        """Shortest distance from start to end, ``math.inf`` if unreachable."""
        self._check(end)
        return self.distance[end]

    def path_to(self, end: int) -> Optional[Path]:
        """
        Reconstruct the shortest path from start to end.

        Args:
            end: Destination vertex.

        Returns:
            The Path, or None if end cannot be reached from start. The path to
            the start vertex itself is ``(start,)`` with weight 0.

        Raises:
            IndexError: If end is out of range.
        """
        self._check(end)
        vertices = reconstruct_path(self.parent, self.start, end)
        if vertices is None:
            return None
        return Path(tuple(vertices), self.distance[end])


def dijkstra(graph: WeightedGraph, start: int) -> ShortestPaths:
    """
    Dijkstra's algorithm for single-source shortest paths.

    Args:
        graph: WeightedGraph with strictly positive edge weights.
        start: Source vertex.

    Returns:
        ShortestPaths rooted at start.

    Raises:
        IndexError: If start is out of range.
        ValueError: If an edge with weight <= 0 is met while relaxing.

    Complexity: O(V^2 + E), one linear frontier scan per vertex.

    Example:
        >>> G = WeightedGraph.from_edges(3, [(0, 1, 1), (1, 2, 2), (0, 2, 5)], directed=True)
        >>> dijkstra(G, 0).path_to(2).vertices
        (0, 1, 2)
    """
    n = graph.vertex_count
    if not 0 <= start < n:
        raise IndexError(f"Start vertex {start} out of range for graph with {n} vertices")

    distance: List[float] = [math.inf] * n
    parent: List[Optional[int]] = [None] * n
    finalized = [False] * n
    distance[start] = 0

    while True:
        v = closest_vertex(distance, finalized)
        if v is None:
            break

        finalized[v] = True
        for u, weight in graph.neighbors(v):
            if weight <= 0:
                raise ValueError(
                    f"Dijkstra requires positive weights. "
                    f"Found weight {weight} on edge ({v}, {u})"
                )
            if distance[v] + weight < distance[u]:
                distance[u] = distance[v] + weight
                parent[u] = v

    logger.debug("dijkstra: start=%d reached=%d/%d", start, sum(finalized), n)
    return ShortestPaths(graph, start, tuple(parent), tuple(distance))
