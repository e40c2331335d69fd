"""Tests for the binary min-heap."""

import pytest

from wgraph.containers import Heap
from wgraph.diagnostics import is_min_heap


class TestHeapBasics:
    """Insert, peek and pop behaviour."""

    def test_basics(self):
        """Test interleaved inserts, peeks and pops."""
        heap = Heap()
        heap.insert(1)
        assert heap.peek_min() == 1
        for value in (4, 2, 5, 3):
            heap.insert(value)

        assert heap.peek_min() == 1
        assert heap.pop_min() == 1
        assert heap.peek_min() == 2
        assert heap.peek_min() == 2
        assert [heap.pop_min() for _ in range(4)] == [2, 3, 4, 5]
        assert heap.pop_min() is None
        assert heap.pop_min() is None

    def test_empty_heap(self):
        """Test that an empty heap reports absence repeatably."""
        heap = Heap()
        assert heap.is_empty()
        assert len(heap) == 0
        assert heap.pop_min() is None
        assert heap.peek_min() is None
        assert heap.pop_min() is None
        assert heap.peek_min() is None

    def test_ties(self):
        """Test a heap holding only equal elements."""
        heap = Heap([1, 1, 1, 1])
        assert heap.peek_min() == 1
        assert [heap.pop_min() for _ in range(4)] == [1, 1, 1, 1]
        assert heap.pop_min() is None

    def test_large_with_duplicates(self):
        """Test ordering with many duplicates."""
        values = [1, 4, 2, 2, 8, 6, 2, 2, 8, 5, 2, 8, 5, 3, 8]
        heap = Heap(values)
        popped = [heap.pop_min() for _ in range(len(values))]
        assert popped == sorted(values)
        assert heap.pop_min() is None

    def test_len_tracks_inserts_and_pops(self):
        """Test size queries."""
        heap = Heap()
        for i, value in enumerate([7, 3, 9]):
            heap.insert(value)
            assert len(heap) == i + 1
        heap.pop_min()
        assert len(heap) == 2
        assert not heap.is_empty()

    def test_peek_does_not_remove(self):
        """Test that peek_min leaves the heap unchanged."""
        heap = Heap([3, 1, 2])
        assert heap.peek_min() == 1
        assert len(heap) == 3

    def test_tuples_order_by_first_field(self):
        """Test heap of (weight, source, target) triples."""
        heap = Heap([(5, 0, 1), (2, 3, 4), (7, 1, 2)])
        assert heap.pop_min() == (2, 3, 4)
        assert heap.pop_min() == (5, 0, 1)

    def test_into_list_is_a_copy(self):
        """Test that into_list exposes heap order without aliasing."""
        heap = Heap([5, 3, 8, 1])
        items = heap.into_list()
        assert items[0] == 1
        assert is_min_heap(items)
        items.clear()
        assert len(heap) == 4


class TestHeapProperties:
    """Randomised invariant checks."""

    def test_invariant_after_random_operations(self, rng):
        """Test the min-heap property after every insert and pop."""
        heap = Heap()
        for _ in range(500):
            if rng.random() < 0.6 or heap.is_empty():
                heap.insert(int(rng.integers(0, 50)))
            else:
                heap.pop_min()
            assert is_min_heap(heap.into_list())

    @pytest.mark.parametrize("n", [1, 2, 3, 10, 101])
    def test_pops_in_nondecreasing_order(self, rng, n):
        """Test that draining the heap yields a sorted sequence."""
        values = [int(v) for v in rng.integers(-100, 100, size=n)]
        heap = Heap(values)
        drained = []
        while not heap.is_empty():
            drained.append(heap.pop_min())
        assert drained == sorted(values)
