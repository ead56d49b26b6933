"""Exhaustive K5 / K3,3 subgraph search for small graph states.

These are literal subgraph tests on the edge set, not minor or subdivision
tests. The search engine only relies on them for simplified states (minimum
degree 3) with at most six vertices, where the two notions coincide.
"""

from __future__ import annotations

from itertools import combinations

import numpy as np

from ._state import GraphState

# Off-diagonal entries of a complete 5x5 adjacency block
_K5_ENTRIES = 20


def contains_k5(state: GraphState) -> bool:
    """Return True if some 5 vertices of ``state`` are pairwise adjacent."""
    if state.num_vertices < 5 or state.num_edges < 10:
        return False

    adj = state.adjacency_matrix()
    for combo in combinations(range(state.num_vertices), 5):
        if int(adj[np.ix_(combo, combo)].sum()) == _K5_ENTRIES:
            return True
    return False


def contains_k33(state: GraphState) -> bool:
    """Return True if ``state`` has two disjoint vertex triples fully joined.

    Each unordered bipartition is visited once by requiring the left triple
    to hold the smallest of the six vertices.
    """
    n = state.num_vertices
    if n < 6 or state.num_edges < 9:
        return False

    adj = state.adjacency_matrix()
    for left in combinations(range(n), 3):
        rest = [i for i in range(n) if i not in left]
        for right in combinations(rest, 3):
            if right[0] < left[0]:
                continue
            if adj[np.ix_(left, right)].all():
                return True
    return False


def contains_obstruction(state: GraphState) -> bool:
    """Return True if ``state`` contains a K5 or K3,3 subgraph."""
    return contains_k5(state) or contains_k33(state)
