"""Diagnostics and debugging utilities for wgraph."""

from .core import (
    assert_disjoint_set_consistent,
    assert_min_heap,
    is_min_heap,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "is_min_heap",
    "assert_min_heap",
    "assert_disjoint_set_consistent",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
