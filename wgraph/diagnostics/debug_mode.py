"""Debug mode management for wgraph."""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

_DEBUG_ENV_VAR = "WGRAPH_DEBUG"
_debug_enabled: bool = os.getenv(_DEBUG_ENV_VAR, "0").lower() in (
    "1",
    "true",
    "yes",
    "on",
)


def is_debug_enabled() -> bool:
    """
    Return whether wgraph debug mode is currently enabled.

    While enabled, `Heap` and `UnionFind` re-check their structural
    invariants after every mutation. Debug mode can be toggled via
    set_debug_enabled(...) or the WGRAPH_DEBUG environment variable.
    """
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Globally enable or disable wgraph debug mode.

    Parameters
    ----------
    enabled:
        Whether to enable debug mode.
    """
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Temporarily enable or disable debug mode.

    Example
    -------
    >>> with debug_context(True):
    ...     heap.insert(3)  # invariant verified after the insert
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev
