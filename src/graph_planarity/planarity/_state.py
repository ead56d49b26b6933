"""Immutable graph states used by the planarity search.

A ``GraphState`` is a vertex set plus a set of normalized undirected edges.
States are never mutated: deletion, contraction and induced subgraphs all
return new instances, so earlier states stay valid while they are referenced
by the recursion stack or the cache.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass, replace
from functools import cached_property
from typing import TYPE_CHECKING, Any, Iterable

import numpy as np

from ..types import get_link_endpoints
from ..validation import MalformedGraphError, validate_link_endpoints, validate_node_ids

if TYPE_CHECKING:
    from typing_extensions import Self

# Normalized undirected edge (u, v) with u < v
Edge = tuple[int, int]


class GraphStructureWarning(UserWarning):
    """Warning issued when input edges are ignored during normalization."""

    pass


def make_edge(a: int, b: int) -> Edge:
    """Return the canonical (min, max) form of an undirected edge."""
    if a == b:
        raise ValueError(f"Self-loop ({a}, {b}) is not a valid edge")
    return (a, b) if a < b else (b, a)


@dataclass(frozen=True)
class GraphState:
    """Vertex set and normalized edge set of a simple undirected graph.

    Attributes:
        vertices: Vertex ids.
        edges: Edges as (u, v) tuples with u < v; both endpoints are in
            ``vertices``.
    """

    vertices: frozenset[int]
    edges: frozenset[Edge]

    def __post_init__(self) -> None:
        for u, v in self.edges:
            if u >= v:
                raise ValueError(f"Edge ({u}, {v}) is not normalized")
            if u not in self.vertices or v not in self.vertices:
                raise MalformedGraphError(
                    f"Edge ({u}, {v}) references a vertex outside the graph"
                )

    @classmethod
    def from_edges(
        cls,
        vertices: Iterable[int],
        edges: Iterable[tuple[int, int]] = (),
    ) -> Self:
        """Build a state, normalizing edges and dropping self-loops."""
        return cls(
            vertices=frozenset(vertices),
            edges=frozenset(make_edge(u, v) for u, v in edges if u != v),
        )

    @property
    def num_vertices(self) -> int:
        return len(self.vertices)

    @property
    def num_edges(self) -> int:
        return len(self.edges)

    @cached_property
    def key(self) -> str:
        """Canonical cache key, e.g. ``"1,2,3|1-2,2-3"``.

        Depends only on the contents of the vertex and edge sets.
        """
        vs = ",".join(str(v) for v in sorted(self.vertices))
        es = ",".join(sorted(f"{u}-{v}" for u, v in self.edges))
        return f"{vs}|{es}"

    def degrees(self) -> dict[int, int]:
        """Map every vertex (isolated ones included) to its degree."""
        deg = dict.fromkeys(self.vertices, 0)
        for u, v in self.edges:
            deg[u] += 1
            deg[v] += 1
        return deg

    def adjacency(self) -> dict[int, set[int]]:
        """Build an undirected adjacency map."""
        adj: dict[int, set[int]] = {v: set() for v in self.vertices}
        for u, v in self.edges:
            adj[u].add(v)
            adj[v].add(u)
        return adj

    def adjacency_matrix(self) -> np.ndarray:
        """Boolean adjacency matrix with rows in ascending vertex order."""
        order = sorted(self.vertices)
        pos = {v: i for i, v in enumerate(order)}
        matrix = np.zeros((len(order), len(order)), dtype=bool)
        for u, v in self.edges:
            matrix[pos[u], pos[v]] = True
            matrix[pos[v], pos[u]] = True
        return matrix

    # -------------------------------------------------------------------------
    # Transformations
    # -------------------------------------------------------------------------

    def delete_edge(self, edge: Edge) -> Self:
        """Return the state without ``edge``; vertices are kept."""
        if edge not in self.edges:
            raise ValueError(f"Edge {edge} is not in the graph")
        return replace(self, edges=self.edges - {edge})

    def contract_edge(self, edge: Edge) -> Self:
        """Return the state with ``edge = (u, v)`` contracted into ``u``.

        Edges incident to ``v`` are re-attached to ``u``; the resulting
        self-loop is dropped and parallel edges collapse.
        """
        if edge not in self.edges:
            raise ValueError(f"Edge {edge} is not in the graph")
        u, v = edge

        new_edges: set[Edge] = set()
        for a, b in self.edges:
            a = u if a == v else a
            b = u if b == v else b
            if a != b:
                new_edges.add(make_edge(a, b))

        return replace(self, vertices=self.vertices - {v}, edges=frozenset(new_edges))

    def induced_subgraph(self, vertices: Iterable[int]) -> Self:
        """Return the subgraph induced by ``vertices`` (a subset of this state's)."""
        keep = frozenset(vertices)
        if not keep <= self.vertices:
            missing = sorted(keep - self.vertices)
            raise ValueError(f"Vertices {missing} are not in the graph")
        edges = frozenset((u, v) for u, v in self.edges if u in keep and v in keep)
        return replace(self, vertices=keep, edges=edges)

    def simplified(self) -> Self:
        """Strip vertices of degree <= 1 and suppress degree-2 vertices.

        Both steps preserve planarity in either direction. The result has
        minimum degree 3 or no vertices at all.
        """
        state = self
        while True:
            deg = state.degrees()

            low = [v for v, d in deg.items() if d <= 1]
            if low:
                state = state.induced_subgraph(state.vertices.difference(low))
                continue

            w = min((v for v, d in deg.items() if d == 2), default=None)
            if w is None:
                return state
            x = min(a if b == w else b for a, b in state.edges if w in (a, b))
            state = state.contract_edge(make_edge(w, x))

    def __repr__(self) -> str:
        return f"GraphState(n={self.num_vertices}, m={self.num_edges})"


def snapshot(graph: Any) -> GraphState:
    """Extract a ``GraphState`` from an external graph.

    Self-loops are dropped with a ``GraphStructureWarning``; parallel edges
    collapse into one. A ``GraphState`` is returned unchanged.

    Raises:
        InvalidNodeError: If vertex ids are missing, non-integer or repeated.
        InvalidLinkError: If a link does not expose two endpoint ids.
        MalformedGraphError: If a link references an unknown vertex.
    """
    if isinstance(graph, GraphState):
        return graph

    vertices = frozenset(validate_node_ids(graph.nodes))
    validate_link_endpoints(graph.links, vertices)

    edges: set[Edge] = set()
    loops = 0
    for link in graph.links:
        u, v = get_link_endpoints(link)
        if u == v:
            loops += 1
            continue
        edges.add(make_edge(u, v))  # type: ignore[arg-type]

    if loops:
        warnings.warn(
            f"Ignored {loops} self-loop(s); they do not affect planarity.",
            GraphStructureWarning,
            stacklevel=2,
        )

    return GraphState(vertices=vertices, edges=frozenset(edges))
