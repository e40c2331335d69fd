"""Supporting containers: binary min-heap and disjoint set."""

from .heap import Heap
from .union_find import UnionFind

__all__ = ["Heap", "UnionFind"]
