"""
Union-Find (disjoint set) over the integers ``0..n-1``.

Sets are merged by size so trees stay shallow. `find` follows parent links
without path compression, which keeps it a pure query.
"""

from __future__ import annotations

from typing import List

from ..diagnostics import assert_disjoint_set_consistent, is_debug_enabled


class UnionFind:
    """
    Disjoint-set forest with union by size.

    Used by Kruskal's algorithm for cycle detection.

    Example:
        >>> uf = UnionFind(4)
        >>> uf.union(0, 3)
        True
        >>> uf.connected(3, 0), uf.size(0), uf.set_count
        (True, 2, 3)
    """

    def __init__(self, n: int):
        """
        Create ``n`` singleton sets.

        Args:
            n: Number of elements.

        Raises:
            ValueError: If n is negative.
        """
        if n < 0:
            raise ValueError(f"UnionFind size must be non-negative, got {n}")
        self._parent: List[int] = list(range(n))
        self._size: List[int] = [1] * n
        self._set_count = n

    def __len__(self) -> int:
        return len(self._parent)

    def __repr__(self) -> str:
        return f"UnionFind(n={len(self._parent)}, sets={self._set_count})"

    @property
    def set_count(self) -> int:
        """Number of disjoint sets currently alive."""
        return self._set_count

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._parent):
            raise IndexError(f"Element {x} out of range for UnionFind of size {len(self._parent)}")

    def find(self, x: int) -> int:
        """
        Return the representative of the set containing x.

        Raises:
            IndexError: If x is not in ``[0, n)``.
        """
        self._check(x)
        while self._parent[x] != x:
            x = self._parent[x]
        return x

    def size(self, x: int) -> int:
        """Return the number of elements in x's set."""
        return self._size[self.find(x)]

    def connected(self, x: int, y: int) -> bool:
        return self.find(x) == self.find(y)

    def union(self, x: int, y: int) -> bool:
        """
        Merge the sets containing x and y.

        The root of the smaller set is attached under the root of the larger
        one; on equal sizes y's root goes under x's root.

        Returns:
            True if two sets were merged, False if x and y already shared one.

        Raises:
            IndexError: If x or y is out of range.
        """
        self._check(x)
        self._check(y)
        if x == y:
            return False

        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return False

        if self._size[root_x] < self._size[root_y]:
            root_x, root_y = root_y, root_x
        self._parent[root_y] = root_x
        self._size[root_x] += self._size[root_y]
        self._set_count -= 1

        if is_debug_enabled():
            assert_disjoint_set_consistent(self)
        return True
