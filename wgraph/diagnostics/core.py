"""Structural invariant checks for the container types."""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING, Any, Sequence

if TYPE_CHECKING:
    from ..containers.union_find import UnionFind


def _first_heap_violation(items: Sequence[Any]) -> int:
    """Return the first child index that is smaller than its parent, or -1."""
    for child in range(1, len(items)):
        if items[child] < items[(child - 1) // 2]:
            return child
    return -1


def is_min_heap(items: Sequence[Any]) -> bool:
    """
    Check whether a sequence satisfies the binary min-heap property.

    Parameters
    ----------
    items:
        Array laid out as an implicit binary tree (children of ``i`` at
        ``2i+1`` and ``2i+2``).

    Returns
    -------
    bool
        True if no element is smaller than its parent.
    """
    return _first_heap_violation(items) < 0


def assert_min_heap(items: Sequence[Any]) -> None:
    """
    Assert that a sequence satisfies the binary min-heap property.

    Raises
    ------
    AssertionError
        If some element is smaller than its parent.
    """
    child = _first_heap_violation(items)
    if child >= 0:
        parent = (child - 1) // 2
        raise AssertionError(
            f"Heap property violated: items[{child}]={items[child]!r} is smaller "
            f"than its parent items[{parent}]={items[parent]!r}"
        )


def assert_disjoint_set_consistent(uf: UnionFind) -> None:
    """
    Assert that a disjoint-set forest is internally consistent.

    Checks that every representative is its own representative, that each
    recorded set size matches the number of elements sharing the root, and
    that the live set count equals the number of roots.

    Raises
    ------
    AssertionError
        On the first inconsistency found.
    """
    roots = [uf.find(x) for x in range(len(uf))]
    members = Counter(roots)

    for x, root in enumerate(roots):
        if uf.find(root) != root:
            raise AssertionError(f"Representative {root} of element {x} is not a root")

    for root, count in members.items():
        if uf.size(root) != count:
            raise AssertionError(
                f"Set rooted at {root} records size {uf.size(root)} but has {count} members"
            )

    if len(members) != uf.set_count:
        raise AssertionError(
            f"Disjoint set reports {uf.set_count} sets but has {len(members)} roots"
        )
