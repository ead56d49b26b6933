"""
Common types for planarity testing.

This module provides the external graph model consumed by the planarity
predicates:
- Node: Graph vertex with a stable integer id
- Link: Undirected (or directed) edge between two nodes
- Graph: Vertex list, edge list and a directed flag

Any object exposing ``nodes``, ``links`` and ``directed`` can be used in
place of ``Graph``; nodes and links may likewise be dicts, tuples or plain
objects (see ``get_node_id`` and ``get_link_endpoints``).
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Protocol, Sequence, Union


class Node:
    """
    Graph vertex.

    Attributes:
        id: Unique integer identifier within a graph
    """

    def __init__(self, id: int, **kwargs: Any) -> None:
        self.id = id

        # Copy any additional custom properties
        for key, value in kwargs.items():
            if not hasattr(self, key):
                setattr(self, key, value)

    def __repr__(self) -> str:
        return f"Node(id={self.id})"


class Link:
    """
    Edge connecting two nodes.

    Attributes:
        source: Source node or node id
        target: Target node or node id
    """

    def __init__(
        self,
        source: Union[Node, int],
        target: Union[Node, int],
        **kwargs: Any,
    ) -> None:
        """
        Initialize link between two nodes.

        Raises:
            ValueError: If source or target is None
        """
        if source is None:
            raise ValueError("Link source cannot be None")
        if target is None:
            raise ValueError("Link target cannot be None")

        self.source = source
        self.target = target

        for key, value in kwargs.items():
            if not hasattr(self, key):
                setattr(self, key, value)

    def __repr__(self) -> str:
        src = self.source if isinstance(self.source, int) else getattr(self.source, "id", None)
        tgt = self.target if isinstance(self.target, int) else getattr(self.target, "id", None)
        return f"Link({src} - {tgt})"


# Type aliases for Pythonic API
NodeLike = Union[Node, int, dict[str, Any], Any]
"""Input type for nodes: Node objects, ints, dicts, or objects with an id."""

LinkLike = Union[Link, tuple[Any, Any], dict[str, Any], Any]
"""Input type for links: Link objects, pairs, dicts, or objects with source/target."""


class GraphLike(Protocol):
    """Read-only view of a graph as supplied by a loader or host framework."""

    @property
    def nodes(self) -> Sequence[NodeLike]: ...

    @property
    def links(self) -> Sequence[LinkLike]: ...

    @property
    def directed(self) -> bool: ...


class Graph:
    """
    Plain in-memory graph.

    Example:
        graph = Graph(nodes=[0, 1, 2], links=[(0, 1), (1, 2), (2, 0)])
        is_planar(graph)
    """

    def __init__(
        self,
        nodes: Optional[Iterable[NodeLike]] = None,
        links: Optional[Iterable[LinkLike]] = None,
        directed: bool = False,
    ) -> None:
        self._nodes: list[NodeLike] = list(nodes) if nodes is not None else []
        self._links: list[LinkLike] = list(links) if links is not None else []
        self._directed = bool(directed)

    @classmethod
    def from_edges(
        cls,
        num_nodes: int,
        edges: Iterable[tuple[int, int]],
        directed: bool = False,
    ) -> Graph:
        """Build a graph on vertices ``0..num_nodes-1`` from edge tuples."""
        return cls(
            nodes=[Node(i) for i in range(num_nodes)],
            links=[Link(u, v) for u, v in edges],
            directed=directed,
        )

    @property
    def nodes(self) -> list[NodeLike]:
        return self._nodes

    @property
    def links(self) -> list[LinkLike]:
        return self._links

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def vertex_count(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        return len(self._links)

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        return f"Graph({self.vertex_count} nodes, {self.edge_count} links, {kind})"


def get_node_id(obj: Any) -> Optional[int]:
    """Extract a vertex id from an int, Node, dict, or object with id/index."""
    if isinstance(obj, dict):
        val = obj.get("id", obj.get("index"))
    elif hasattr(obj, "id"):
        val = obj.id
    elif hasattr(obj, "index"):
        val = obj.index
    else:
        val = obj

    # bool is an int subclass but never a meaningful vertex id
    if isinstance(val, bool) or not isinstance(val, int):
        return None
    return val


def get_link_endpoints(link: Any) -> tuple[Optional[int], Optional[int]]:
    """Extract (source, target) vertex ids from a link-like object."""
    if isinstance(link, dict):
        src, tgt = link.get("source"), link.get("target")
    elif hasattr(link, "source") and hasattr(link, "target"):
        src, tgt = link.source, link.target
    elif isinstance(link, (tuple, list)) and len(link) == 2:
        src, tgt = link
    else:
        return None, None

    src_id = get_node_id(src) if src is not None else None
    tgt_id = get_node_id(tgt) if tgt is not None else None
    return src_id, tgt_id


__all__ = [
    "Node",
    "Link",
    "Graph",
    "GraphLike",
    "NodeLike",
    "LinkLike",
    "get_node_id",
    "get_link_endpoints",
]
