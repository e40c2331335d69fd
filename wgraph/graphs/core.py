"""
Core weighted graph data structure.

Vertices are the integers ``0..vertex_count-1`` and the capacity is fixed at
construction. Each vertex owns a singly linked chain of outgoing edge
records. Records live in one arena list and link to their successor by arena
index, so a chain is walked without any nested object ownership.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional, Tuple

if TYPE_CHECKING:
    from .mst import MinSpanTree
    from .shortest import ShortestPaths


@dataclass(frozen=True)
class EdgeRecord:
    """
    One directed entry in a vertex's adjacency chain.

    Attributes:
        weight: Edge weight.
        target: Vertex the edge points to.
        next: Arena index of the next record in the chain, or None at the tail.
    """

    weight: int
    target: int
    next: Optional[int]


class WeightedGraph:
    """
    Append-only weighted graph with arena-backed adjacency chains.

    New edges are prepended, so chains are read newest first. An undirected
    edge ``(i, j, w)`` is stored as two independent records, one in each
    endpoint's chain.

    Attributes:
        directed: If True, edges only go from ``i`` to ``j``.
        edge_count: Number of `insert_edge` calls.
        vertex_touch_count: Insert bookkeeping counter, not used by algorithms.

    Complexity:
        - insert_edge: O(1) amortized
        - neighbors: O(deg(v))
        - edges: O(V + E)
    """

    def __init__(self, vertex_count: int, directed: bool = False):
        """
        Allocate an empty graph.

        Args:
            vertex_count: Number of vertices.
            directed: If True, graph is directed; otherwise undirected.

        Raises:
            ValueError: If vertex_count is negative.
        """
        if vertex_count < 0:
            raise ValueError(f"vertex_count must be non-negative, got {vertex_count}")
        self.directed = directed
        self.edge_count = 0
        self.vertex_touch_count = 0
        self._heads: List[Optional[int]] = [None] * vertex_count
        self._degrees: List[int] = [0] * vertex_count
        self._arena: List[EdgeRecord] = []

    @classmethod
    def from_edges(
        cls,
        vertex_count: int,
        edges: Iterable[Tuple[int, int, int]],
        directed: bool = False,
    ) -> "WeightedGraph":
        """
        Build a graph from ``(i, j, weight)`` triples, inserted in order.

        Example:
            >>> G = WeightedGraph.from_edges(3, [(0, 1, 4), (1, 2, 1)])
            >>> G.edge_count
            2
        """
        graph = cls(vertex_count, directed=directed)
        for i, j, weight in edges:
            graph.insert_edge(i, j, weight)
        return graph

    @property
    def vertex_count(self) -> int:
        return len(self._heads)

    def _check_vertex(self, v: int) -> None:
        if not 0 <= v < len(self._heads):
            raise IndexError(f"Vertex {v} out of range for graph with {len(self._heads)} vertices")

    def _prepend(self, source: int, target: int, weight: int) -> None:
        self._arena.append(EdgeRecord(weight, target, self._heads[source]))
        self._heads[source] = len(self._arena) - 1
        self._degrees[source] += 1

    def insert_edge(self, i: int, j: int, weight: int) -> None:
        """
        Add an edge from i to j.

        For undirected graphs a mirrored record from j to i with the same
        weight is added as well.

        Args:
            i: Source vertex.
            j: Target vertex.
            weight: Edge weight.

        Raises:
            IndexError: If i or j is outside ``[0, vertex_count)``.
        """
        self._check_vertex(i)
        self._check_vertex(j)

        self.edge_count += 1
        self.vertex_touch_count += 1
        self._prepend(i, j, weight)
        if not self.directed:
            self._prepend(j, i, weight)

    def degree(self, v: int) -> int:
        """Return the length of v's adjacency chain."""
        self._check_vertex(v)
        return self._degrees[v]

    def neighbors(self, v: int) -> Iterator[Tuple[int, int]]:
        """
        Iterate over ``(target, weight)`` pairs in v's chain, newest first.

        Raises:
            IndexError: If v is out of range.
        """
        self._check_vertex(v)
        handle = self._heads[v]
        while handle is not None:
            record = self._arena[handle]
            yield record.target, record.weight
            handle = record.next

    def edges(self) -> Iterator[Tuple[int, int, int]]:
        """
        Iterate over every stored edge record as ``(source, target, weight)``.

        Vertices are visited in index order and each chain newest first. An
        undirected edge therefore shows up once from each endpoint.
        """
        for source in range(len(self._heads)):
            for target, weight in self.neighbors(source):
                yield source, target, weight

    def prims(self, start: int) -> "MinSpanTree":
        """Minimum spanning tree grown from start; see `prim_mst`."""
        from .mst import prim_mst

        return prim_mst(self, start)

    def kruskals(self) -> "MinSpanTree":
        """Minimum spanning tree (forest) by Kruskal's method; see `kruskal_mst`."""
        from .mst import kruskal_mst

        return kruskal_mst(self)

    def dijkstras(self, start: int) -> "ShortestPaths":
        """Single-source shortest paths from start; see `dijkstra`."""
        from .shortest import dijkstra

        return dijkstra(self, start)

    def __str__(self) -> str:
        lines = []
        for v in range(len(self._heads)):
            if self._heads[v] is None:
                continue
            chain = "".join(f"{target}[w:{weight}] " for target, weight in self.neighbors(v))
            lines.append(f"{v}: {chain}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"WeightedGraph(vertex_count={self.vertex_count}, directed={self.directed}, "
            f"edge_count={self.edge_count})"
        )
