"""Integration tests for the graphs package within wgraph."""


def test_graphs_import_from_main():
    """Test that graph types and algorithms are re-exported at the top level."""
    from wgraph import WeightedGraph, dijkstra, kruskal_mst, prim_mst

    assert WeightedGraph is not None
    assert dijkstra is not None
    assert kruskal_mst is not None
    assert prim_mst is not None


def test_graphs_in_all_exports():
    """Test that graph exports are in __all__."""
    import wgraph

    graph_exports = {
        "WeightedGraph", "EdgeRecord", "MinSpanTree", "prim_mst", "kruskal_mst",
        "Path", "ShortestPaths", "dijkstra", "reconstruct_path", "adjacency_matrix",
        "Heap", "UnionFind",
    }

    all_exports = set(wgraph.__all__)
    assert graph_exports.issubset(all_exports), "Graph exports missing from __all__"


def test_results_reference_their_graph(five_vertex_graph):
    """Test that result objects keep the graph they were computed on."""
    from wgraph import dijkstra, kruskal_mst

    assert dijkstra(five_vertex_graph, 0).graph is five_vertex_graph
    assert kruskal_mst(five_vertex_graph).graph is five_vertex_graph


def test_build_then_query(seven_vertex_graph):
    """Test a realistic session: build once, run every algorithm, query results."""
    from wgraph import dijkstra, kruskal_mst, prim_mst

    mst_weights = {prim_mst(seven_vertex_graph, s).total_weight for s in range(7)}
    mst_weights.add(kruskal_mst(seven_vertex_graph).total_weight)
    assert mst_weights == {23}

    path = dijkstra(seven_vertex_graph, 0).path_to(6)
    assert path.vertices[0] == 0
    assert path.vertices[-1] == 6
    assert path.weight == 12


def test_results_are_immutable(five_vertex_graph):
    """Test that result objects cannot be modified."""
    import dataclasses

    import pytest

    from wgraph import dijkstra

    paths = dijkstra(five_vertex_graph, 0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        paths.start = 1
