"""Planarity testing by memoized delete/contract search.

Decides exactly whether a simple undirected graph admits a planar
embedding. Graphs are first normalized into immutable ``GraphState``
snapshots (self-loops dropped, parallel edges collapsed), split into
connected components, and each component is searched independently.
Planar graphs are settled by a face-by-face embedding; only non-planar
graphs make the search branch.

Public API:
    is_planar(graph) -> bool
"""

from __future__ import annotations

from typing import Any

from ._blocks import biconnected_blocks
from ._components import connected_components, is_connected
from ._obstructions import contains_k5, contains_k33, contains_obstruction
from ._search import (
    DEFAULT_WARN_THRESHOLD,
    SMALL_GRAPH_LIMIT,
    PerformanceWarning,
    PlanarityCache,
    PlanaritySearch,
)
from ._state import Edge, GraphState, GraphStructureWarning, make_edge, snapshot


def is_planar(graph: Any) -> bool:
    """Test whether a graph is planar.

    The directed flag of ``graph`` is ignored; edges are read as undirected.

    Args:
        graph: A ``GraphLike`` object (``nodes``, ``links``) or a ``GraphState``.

    Returns:
        True if the graph is planar, False otherwise.

    Raises:
        ValidationError: If the graph has invalid vertex ids or links.
    """
    state = snapshot(graph)

    # One cache per call, shared by that call's components
    search = PlanaritySearch()
    for component in connected_components(state):
        if not search.run(component):
            return False
    return True


__all__ = [
    "is_planar",
    "Edge",
    "GraphState",
    "make_edge",
    "snapshot",
    "connected_components",
    "is_connected",
    "biconnected_blocks",
    "contains_k5",
    "contains_k33",
    "contains_obstruction",
    "PlanarityCache",
    "PlanaritySearch",
    "DEFAULT_WARN_THRESHOLD",
    "SMALL_GRAPH_LIMIT",
    "GraphStructureWarning",
    "PerformanceWarning",
]
