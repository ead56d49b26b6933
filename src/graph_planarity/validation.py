"""
Input validation utilities for planarity testing.

Provides centralized validation of vertex ids and edge endpoints taken from
an externally supplied graph. Raises descriptive exceptions on invalid input.
"""

from __future__ import annotations

from typing import Any, Collection, Sequence

from .types import get_link_endpoints, get_node_id


class ValidationError(ValueError):
    """Base exception for graph validation errors."""

    pass


class InvalidNodeError(ValidationError):
    """Raised when a node has a missing, non-integer or duplicate id."""

    pass


class InvalidLinkError(ValidationError):
    """Raised when a link does not expose two endpoint ids."""

    pass


class MalformedGraphError(InvalidLinkError):
    """Raised when a link references a vertex that is not in the graph."""

    pass


def validate_node_ids(nodes: Sequence[Any]) -> list[int]:
    """
    Collect and validate vertex ids.

    Args:
        nodes: Sequence of Node objects, ints, dicts or objects with an id

    Returns:
        Vertex ids in input order

    Raises:
        InvalidNodeError: If an id is missing, not an int, or repeated
    """
    ids: list[int] = []
    seen: set[int] = set()

    for i, node in enumerate(nodes):
        node_id = get_node_id(node)
        if node_id is None:
            raise InvalidNodeError(f"Node {i}: id must be an integer, got {node!r}")
        if node_id in seen:
            raise InvalidNodeError(f"Node {i}: duplicate id {node_id}")
        seen.add(node_id)
        ids.append(node_id)

    return ids


def validate_link_endpoints(
    links: Sequence[Any],
    vertex_ids: Collection[int],
    strict: bool = True,
) -> list[tuple[int, str]]:
    """
    Validate that every link joins two known vertices.

    Args:
        links: Sequence of Link objects, pairs, or dicts with source/target
        vertex_ids: Ids of the graph's vertices
        strict: If True, raises on the first batch of issues. If False,
            returns them.

    Returns:
        List of (link_index, issue_description) tuples

    Raises:
        InvalidLinkError: If strict=True and a link has unreadable endpoints
        MalformedGraphError: If strict=True and a link references an
            unknown vertex
    """
    issues: list[tuple[int, str]] = []
    unreadable = False

    for i, link in enumerate(links):
        src, tgt = get_link_endpoints(link)

        if src is None or tgt is None:
            unreadable = True
            issues.append((i, f"Link {i}: endpoints must be integer ids, got {link!r}"))
            continue

        if src not in vertex_ids:
            issues.append((i, f"Link {i}: source {src} is not a vertex of the graph"))
        if tgt not in vertex_ids:
            issues.append((i, f"Link {i}: target {tgt} is not a vertex of the graph"))

    if strict and issues:
        msg = "Invalid links:\n" + "\n".join(issue[1] for issue in issues)
        if unreadable:
            raise InvalidLinkError(msg)
        raise MalformedGraphError(msg)

    return issues


__all__ = [
    "ValidationError",
    "InvalidNodeError",
    "InvalidLinkError",
    "MalformedGraphError",
    "validate_node_ids",
    "validate_link_endpoints",
]
