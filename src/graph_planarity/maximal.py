"""
Maximal planarity.

A simple graph is maximally planar when it is planar and no edge can be
added between existing vertices without losing planarity. For connected
graphs on n >= 3 vertices this is the case exactly when the graph is planar
with 3n - 6 edges (a triangulation).
"""

from __future__ import annotations

from typing import Any

from .planarity import is_connected, is_planar, snapshot


def is_maximally_planar(graph: Any) -> bool:
    """
    Test whether a graph is maximally planar.

    Rules, in order:
    - directed graphs are rejected;
    - 0 or 1 vertices: always maximal;
    - 2 vertices: maximal iff joined by an edge;
    - n >= 3: connected, exactly 3n - 6 edges, and planar.

    Edge counts are taken after normalization, so self-loops and parallel
    edges do not count.

    Args:
        graph: A ``GraphLike`` object (``nodes``, ``links``, ``directed``)

    Returns:
        True if the graph is maximally planar, False otherwise.

    Raises:
        ValidationError: If the graph has invalid vertex ids or links.
    """
    if getattr(graph, "directed", False):
        return False

    state = snapshot(graph)
    n = state.num_vertices
    m = state.num_edges

    if n <= 1:
        return True
    if n == 2:
        return m == 1

    # Cheap structural checks before the exponential search
    if m != 3 * n - 6:
        return False
    if not is_connected(state):
        return False
    return is_planar(state)


__all__ = ["is_maximally_planar"]
