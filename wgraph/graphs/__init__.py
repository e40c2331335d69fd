"""
Weighted graph algorithms.

This package provides:
- WeightedGraph, an integer-labelled graph with arena-backed adjacency chains
- Minimum spanning trees (Prim, Kruskal)
- Single-source shortest paths (Dijkstra)
- Helpers for path reconstruction and dense matrix views
"""

from .core import EdgeRecord, WeightedGraph
from .mst import MinSpanTree, kruskal_mst, prim_mst
from .shortest import Path, ShortestPaths, dijkstra
from .utils import adjacency_matrix, closest_vertex, reconstruct_path

__all__ = [
    "WeightedGraph",
    "EdgeRecord",
    "MinSpanTree",
    "prim_mst",
    "kruskal_mst",
    "Path",
    "ShortestPaths",
    "dijkstra",
    "reconstruct_path",
    "closest_vertex",
    "adjacency_matrix",
]

# Example usage:
# from wgraph.graphs import WeightedGraph, dijkstra
#
# G = WeightedGraph(3, directed=True)
# G.insert_edge(0, 1, 1)
# G.insert_edge(1, 2, 2)
# dijkstra(G, 0).path_to(2)  # Path(vertices=(0, 1, 2), weight=3)
