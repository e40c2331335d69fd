"""
Minimum spanning tree algorithms: Prim and Kruskal.

Prim grows a single tree from a start vertex, choosing the next vertex by a
linear scan since `Heap` has no decrease-key. Kruskal feeds every edge record
through a `Heap` and uses `UnionFind` to reject edges that would close a
cycle.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 23.1 (MST properties), 23.2 (Kruskal and Prim).
"""

import math
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..containers import Heap, UnionFind
from ..logging import get_logger
from .core import WeightedGraph
from .utils import closest_vertex

logger = get_logger(__name__)


@dataclass(frozen=True)
class MinSpanTree:
    """
    Result of an MST computation.

    For a disconnected graph Prim covers only the start vertex's component and
    Kruskal yields a spanning forest.

    Attributes:
        graph: Graph the tree was computed on.
        parent: Tree parent of each vertex; None for roots and unreached vertices.
        total_weight: Sum of the accepted edge weights.
        edges: Accepted ``(parent, child, weight)`` edges in acceptance order.
    """

    graph: WeightedGraph = field(repr=False, compare=False)
    parent: Tuple[Optional[int], ...]
    total_weight: int
    edges: Tuple[Tuple[int, int, int], ...] = ()

    @property
    def is_spanning(self) -> bool:
        """True if the tree connects every vertex of the graph."""
        return len(self.edges) == max(self.graph.vertex_count - 1, 0)


def prim_mst(graph: WeightedGraph, start: int) -> MinSpanTree:
    """
    Prim's algorithm for minimum spanning tree.

    Args:
        graph: WeightedGraph (undirected).
        start: Vertex the tree is grown from.

    Returns:
        MinSpanTree of the component containing start.

    Raises:
        IndexError: If start is out of range.

    Complexity: O(V^2 + E), one linear frontier scan per vertex.

    Example:
        >>> G = WeightedGraph.from_edges(3, [(0, 1, 1), (1, 2, 2), (0, 2, 3)])
        >>> prim_mst(G, 0).total_weight
        3
    """
    n = graph.vertex_count
    if not 0 <= start < n:
        raise IndexError(f"Start vertex {start} out of range for graph with {n} vertices")

    distance: List[float] = [math.inf] * n
    parent: List[Optional[int]] = [None] * n
    in_tree = [False] * n
    distance[start] = 0

    total_weight = 0
    tree_edges: List[Tuple[int, int, int]] = []

    while True:
        v = closest_vertex(distance, in_tree)
        if v is None:
            break

        in_tree[v] = True
        if v != start:
            total_weight += distance[v]
            tree_edges.append((parent[v], v, distance[v]))

        for u, weight in graph.neighbors(v):
            if not in_tree[u] and weight < distance[u]:
                distance[u] = weight
                parent[u] = v

    logger.debug(
        "prim_mst: start=%d reached=%d/%d total_weight=%d",
        start,
        sum(in_tree),
        n,
        total_weight,
    )
    return MinSpanTree(graph, tuple(parent), total_weight, tuple(tree_edges))


def kruskal_mst(graph: WeightedGraph) -> MinSpanTree:
    """
    Kruskal's algorithm for minimum spanning tree.

    Every stored edge record is queued, so an undirected edge is considered
    once from each endpoint; the second copy always fails the cycle check.

    Args:
        graph: WeightedGraph (undirected).

    Returns:
        MinSpanTree; a spanning forest if the graph is disconnected.

    Complexity: O(E log E) for the heap plus O(E log V) for the finds.

    Example:
        >>> G = WeightedGraph.from_edges(3, [(0, 1, 1), (1, 2, 2), (0, 2, 3)])
        >>> kruskal_mst(G).total_weight
        3
    """
    queue: Heap[Tuple[int, int, int]] = Heap()
    for source, target, weight in graph.edges():
        queue.insert((weight, source, target))

    parent: List[Optional[int]] = [None] * graph.vertex_count
    components = UnionFind(graph.vertex_count)
    total_weight = 0
    tree_edges: List[Tuple[int, int, int]] = []
    considered = len(queue)

    while not queue.is_empty():
        weight, source, target = queue.pop_min()
        if components.connected(source, target):
            continue
        parent[target] = source
        total_weight += weight
        tree_edges.append((source, target, weight))
        components.union(source, target)

    logger.debug(
        "kruskal_mst: considered=%d accepted=%d components=%d total_weight=%d",
        considered,
        len(tree_edges),
        components.set_count,
        total_weight,
    )
    return MinSpanTree(graph, tuple(parent), total_weight, tuple(tree_edges))
