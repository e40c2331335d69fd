"""Performance benchmarks for wgraph.

Microbenchmarks for the algorithm hot paths: frontier scans in Prim and
Dijkstra, and heap traffic in Kruskal.
"""
