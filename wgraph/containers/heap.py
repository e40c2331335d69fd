"""
Array-backed binary min-heap.

The element at index ``i`` has children at ``2i+1`` and ``2i+2`` and its
parent at ``(i-1)//2``. Elements only need to support ``<``. Ties are broken
arbitrarily and there is no decrease-key operation.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 6.5 (priority queues).
"""

from __future__ import annotations

from typing import Generic, Iterable, List, Optional, TypeVar

from ..diagnostics import assert_min_heap, is_debug_enabled

T = TypeVar("T")


class Heap(Generic[T]):
    """
    Binary min-heap priority queue.

    Complexity:
        - insert: O(log n)
        - pop_min: O(log n)
        - peek_min, len, is_empty: O(1)

    Example:
        >>> heap = Heap([4, 1, 3])
        >>> heap.pop_min()
        1
        >>> heap.peek_min()
        3
    """

    def __init__(self, values: Optional[Iterable[T]] = None):
        """
        Create a heap, optionally seeded with values.

        Args:
            values: Elements to insert one by one.
        """
        self._items: List[T] = []
        if values is not None:
            for value in values:
                self.insert(value)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Heap({self._items!r})"

    def is_empty(self) -> bool:
        return not self._items

    def insert(self, value: T) -> None:
        """Add a value and restore heap order by moving it towards the root."""
        self._items.append(value)
        self._sift_up(len(self._items) - 1)
        if is_debug_enabled():
            assert_min_heap(self._items)

    def peek_min(self) -> Optional[T]:
        """Return the smallest element without removing it, or None if empty."""
        if not self._items:
            return None
        return self._items[0]

    def pop_min(self) -> Optional[T]:
        """
        Remove and return the smallest element, or None if the heap is empty.

        The vacated root is pushed down as a hole by promoting the smaller
        child at each level. Once the hole reaches a leaf, the last element of
        the array fills it and is sifted up.
        """
        items = self._items
        if not items:
            return None

        minimum = items[0]
        last = items.pop()
        if items:
            hole = self._descend_hole(0)
            items[hole] = last
            self._sift_up(hole)

        if is_debug_enabled():
            assert_min_heap(items)
        return minimum

    def into_list(self) -> List[T]:
        """Return a copy of the backing array in heap order."""
        return list(self._items)

    def _sift_up(self, idx: int) -> None:
        items = self._items
        value = items[idx]
        while idx > 0:
            parent = (idx - 1) // 2
            if not value < items[parent]:
                break
            items[idx] = items[parent]
            idx = parent
        items[idx] = value

    def _descend_hole(self, hole: int) -> int:
        items = self._items
        size = len(items)
        child = 2 * hole + 1
        while child < size:
            right = child + 1
            if right < size and items[right] < items[child]:
                child = right
            items[hole] = items[child]
            hole = child
            child = 2 * hole + 1
        return hole
