"""Example: cabling and routing a small office network with wgraph.

Builds one undirected graph of cable runs, finds the cheapest set of runs that
connects every room (Prim and Kruskal), then the shortest signal routes from
the server room (Dijkstra).
"""

import wgraph as wg

ROOMS = ["server", "lobby", "lab", "office-a", "office-b", "storage", "kitchen"]

# (room, room, cable length in metres)
CABLE_RUNS = [
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
]


def example_spanning_tree(graph: wg.WeightedGraph) -> None:
    print("=" * 60)
    print("Example 1: Cheapest cabling plan")
    print("=" * 60)

    prim = wg.prim_mst(graph, 0)
    kruskal = wg.kruskal_mst(graph)
    print(f"Prim total cable:    {prim.total_weight} m")
    print(f"Kruskal total cable: {kruskal.total_weight} m")
    for parent, child, length in prim.edges:
        print(f"  {ROOMS[parent]:>9} -> {ROOMS[child]:<9} {length:>3} m")


def example_shortest_routes(graph: wg.WeightedGraph) -> None:
    print("\n" + "=" * 60)
    print("Example 2: Shortest routes from the server room")
    print("=" * 60)

    routes = wg.dijkstra(graph, 0)
    for room in range(1, graph.vertex_count):
        path = routes.path_to(room)
        hops = " -> ".join(ROOMS[v] for v in path)
        print(f"  {ROOMS[room]:<9} {path.weight:>3} m  via {hops}")


def main() -> None:
    graph = wg.WeightedGraph.from_edges(len(ROOMS), CABLE_RUNS)
    print(graph)
    print()
    example_spanning_tree(graph)
    example_shortest_routes(graph)


if __name__ == "__main__":
    main()
