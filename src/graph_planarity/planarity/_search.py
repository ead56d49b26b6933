"""Memoized delete/contract planarity search.

The search decides planarity of a ``GraphState`` exactly. Each visited state
is reduced by rules that preserve planarity in both directions: splitting
into connected components, removing vertices of degree <= 1, suppressing
degree-2 vertices and splitting into biconnected blocks. Irreducible states
are settled by the Euler bound, a cycle-rank certificate, (at most six
vertices) the literal K5 / K3,3 test, or a face-by-face planar embedding.
States left over branch on edges:

- deleting or contracting an edge of a planar graph leaves it planar, so a
  non-planar branch proves the parent non-planar;
- a simplified state on more than six vertices is not itself K5 or K3,3,
  so any Kuratowski subdivision it contains misses some edge, and the
  parent is planar once every single-edge deletion is planar.

Planar states never branch. Non-planar states do, and the branching is
exponential in the worst case; there is no iteration cap.
"""

from __future__ import annotations

import warnings
from typing import Optional

from ..validation import ValidationError
from ._blocks import biconnected_blocks
from ._components import connected_components
from ._embedding import find_face_embedding
from ._obstructions import contains_obstruction
from ._state import Edge, GraphState

# Simplified states up to this size are decided by the literal subgraph test
SMALL_GRAPH_LIMIT = 6

# Cycle rank (m - n + 1) of K3,3; K5 has 6
_MIN_NONPLANAR_CYCLE_RANK = 4

DEFAULT_WARN_THRESHOLD = 10


class PerformanceWarning(UserWarning):
    """Warning about inputs likely to make the search very slow."""

    pass


class PlanarityCache:
    """Planarity verdicts keyed by ``GraphState.key``.

    One cache belongs to one search; it is never shared between unrelated
    invocations. Reusing it across the components of a single graph is safe
    because keys are content-addressed.
    """

    def __init__(self) -> None:
        self._verdicts: dict[str, bool] = {}
        self.hits = 0
        self.misses = 0

    def get(self, key: str) -> Optional[bool]:
        verdict = self._verdicts.get(key)
        if verdict is None:
            self.misses += 1
        else:
            self.hits += 1
        return verdict

    def store(self, key: str, verdict: bool) -> bool:
        """Record ``verdict`` for ``key`` and return it."""
        self._verdicts[key] = verdict
        return verdict

    def clear(self) -> None:
        self._verdicts.clear()
        self.hits = 0
        self.misses = 0

    def __contains__(self, key: object) -> bool:
        return key in self._verdicts

    def __len__(self) -> int:
        return len(self._verdicts)

    def __repr__(self) -> str:
        return f"PlanarityCache(entries={len(self)}, hits={self.hits}, misses={self.misses})"


class PlanaritySearch:
    """
    Exact planarity test over graph states.

    Example:
        search = PlanaritySearch()
        search.run(GraphState.from_edges(range(5), k5_edges))  # False
        len(search.cache)  # number of states visited
    """

    def __init__(
        self,
        *,
        cache: Optional[PlanarityCache] = None,
        warn_threshold: Optional[int] = DEFAULT_WARN_THRESHOLD,
    ) -> None:
        """
        Initialize the search.

        Args:
            cache: Verdict cache to use. A fresh one is created if omitted.
            warn_threshold: Issue a PerformanceWarning when the search has to
                branch on an irreducible state with more vertices than this.
                None disables it.

        Raises:
            ValidationError: If warn_threshold is not positive
        """
        if warn_threshold is not None and warn_threshold < 1:
            raise ValidationError(f"warn_threshold must be >= 1, got {warn_threshold}")

        self._cache = cache if cache is not None else PlanarityCache()
        self._warn_threshold = warn_threshold
        self._warned = False

    @property
    def cache(self) -> PlanarityCache:
        return self._cache

    @property
    def warn_threshold(self) -> Optional[int]:
        return self._warn_threshold

    def run(self, state: GraphState) -> bool:
        """Return True if ``state`` is planar."""
        self._warned = False
        return self._search(state)

    # -------------------------------------------------------------------------
    # Recursion
    # -------------------------------------------------------------------------

    def _search(self, state: GraphState) -> bool:
        key = state.key
        cached = self._cache.get(key)
        if cached is not None:
            return cached
        return self._cache.store(key, self._decide(state))

    def _decide(self, state: GraphState) -> bool:
        n = state.num_vertices
        m = state.num_edges

        if n < 3:
            return True

        # Euler's formula: necessary, never sufficient
        if m > 3 * n - 6:
            return False

        components = connected_components(state)
        if len(components) > 1:
            return all(self._search(component) for component in components)

        reduced = state.simplified()
        if reduced != state:
            return self._search(reduced)

        if m - n + 1 < _MIN_NONPLANAR_CYCLE_RANK:
            return True

        if n <= SMALL_GRAPH_LIMIT:
            return not contains_obstruction(state)

        blocks = biconnected_blocks(state)
        if len(blocks) > 1:
            return all(self._search(block) for block in blocks)

        if find_face_embedding(state) is not None:
            return True

        return self._branch(state)

    def _branch(self, state: GraphState) -> bool:
        self._check_size(state)

        edges: list[Edge] = sorted(state.edges)
        pivot = edges[0]

        if not self._search(state.delete_edge(pivot)):
            return False
        if not self._search(state.contract_edge(pivot)):
            return False

        for edge in edges[1:]:
            if not self._search(state.delete_edge(edge)):
                return False
        return True

    def _check_size(self, state: GraphState) -> None:
        """Warn once per run when branching starts on a large state."""
        if self._warned or self._warn_threshold is None:
            return
        if state.num_vertices > self._warn_threshold:
            self._warned = True
            warnings.warn(
                f"Planarity search branching on {state.num_vertices} irreducible vertices "
                f"(threshold {self._warn_threshold}); running time is exponential "
                "in the worst case.",
                PerformanceWarning,
                stacklevel=2,
            )
