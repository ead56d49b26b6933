"""Face-by-face planar embedding of biconnected graph states.

The embedding grows from a cycle. At each step, one fragment is picked: a
chord between embedded vertices, or a component of the vertices not yet
embedded. One of its paths is then drawn across a face that holds all of the
fragment's attachment vertices. Fragments with a single admissible face are
placed first (Demoucron, Malgrange and Pertuiset).

Every step keeps the partial drawing planar, so a completed embedding proves
the state planar. On a biconnected state the procedure only gets stuck when
the state is non-planar; the search nevertheless uses it as a positive
certificate only and proves non-planarity by its own reductions.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Optional

from ._state import GraphState, make_edge

Face = list[int]


@dataclass(frozen=True)
class _Fragment:
    """A chord (empty ``inner``) or a component of unembedded vertices."""

    attachments: frozenset[int]
    inner: frozenset[int]


def find_face_embedding(state: GraphState) -> Optional[list[Face]]:
    """
    Embed a biconnected state in the plane.

    Args:
        state: Biconnected graph state with at least three vertices

    Returns:
        Face boundaries as vertex cycles, or None if no embedding was found.
        A completed embedding has ``m - n + 2`` faces.
    """
    adj = state.adjacency()
    cycle = _initial_cycle(state, adj)
    if cycle is None:
        return None

    placed_vertices = set(cycle)
    placed_edges = {make_edge(u, v) for u, v in zip(cycle, cycle[1:] + cycle[:1])}
    faces: list[Face] = [list(cycle), list(cycle)]

    while len(placed_edges) < state.num_edges:
        candidates: list[tuple[_Fragment, list[int]]] = []
        for fragment in _fragments(state, adj, placed_vertices, placed_edges):
            admissible = [i for i, face in enumerate(faces) if fragment.attachments.issubset(face)]
            if not admissible:
                return None
            candidates.append((fragment, admissible))

        fragment, admissible = next((c for c in candidates if len(c[1]) == 1), candidates[0])
        path = _fragment_path(fragment, adj, placed_vertices)
        if path is None:
            return None

        face = faces.pop(admissible[0])
        faces.extend(_split_face(face, path))
        placed_vertices.update(path)
        placed_edges.update(make_edge(u, v) for u, v in zip(path, path[1:]))

    return faces


def _initial_cycle(state: GraphState, adj: dict[int, set[int]]) -> Optional[Face]:
    """Close the smallest edge into a cycle with a BFS path around it."""
    if not state.edges:
        return None

    u, v = min(state.edges)
    parent = {u: u}
    queue: deque[int] = deque([u])

    while queue:
        x = queue.popleft()
        for y in sorted(adj[x]):
            if y in parent or (x == u and y == v):
                continue
            parent[y] = x
            if y == v:
                path = [v]
                while path[-1] != u:
                    path.append(parent[path[-1]])
                return path[::-1]
            queue.append(y)

    return None


def _fragments(
    state: GraphState,
    adj: dict[int, set[int]],
    placed_vertices: set[int],
    placed_edges: set[tuple[int, int]],
) -> list[_Fragment]:
    fragments: list[_Fragment] = []

    for edge in sorted(state.edges - placed_edges):
        if edge[0] in placed_vertices and edge[1] in placed_vertices:
            fragments.append(_Fragment(frozenset(edge), frozenset()))

    seen: set[int] = set()
    for start in sorted(state.vertices - placed_vertices):
        if start in seen:
            continue

        seen.add(start)
        inner = {start}
        attachments: set[int] = set()
        queue: deque[int] = deque([start])
        while queue:
            x = queue.popleft()
            for y in adj[x]:
                if y in placed_vertices:
                    attachments.add(y)
                elif y not in seen:
                    seen.add(y)
                    inner.add(y)
                    queue.append(y)

        fragments.append(_Fragment(frozenset(attachments), frozenset(inner)))

    return fragments


def _fragment_path(
    fragment: _Fragment,
    adj: dict[int, set[int]],
    placed_vertices: set[int],
) -> Optional[list[int]]:
    """Path through ``fragment`` between two distinct attachment vertices."""
    # One attachment means a cut vertex
    if len(fragment.attachments) < 2:
        return None
    if not fragment.inner:
        return sorted(fragment.attachments)

    start = min(fragment.attachments)
    parent: dict[int, int] = {}
    queue: deque[int] = deque()
    for x in sorted(adj[start] & fragment.inner):
        parent[x] = start
        queue.append(x)

    while queue:
        x = queue.popleft()
        for y in sorted(adj[x]):
            if y in placed_vertices:
                if y == start:
                    continue
                path = [y, x]
                while path[-1] != start:
                    path.append(parent[path[-1]])
                return path[::-1]
            if y not in parent:
                parent[y] = x
                queue.append(y)

    return None


def _split_face(face: Face, path: list[int]) -> tuple[Face, Face]:
    """Split ``face`` in two along ``path``, whose ends lie on the face."""
    i = face.index(path[0])
    j = face.index(path[-1])
    interior = path[1:-1]

    if i <= j:
        forward = face[i : j + 1]
        backward = face[j:] + face[: i + 1]
    else:
        forward = face[i:] + face[: j + 1]
        backward = face[j : i + 1]

    return forward + interior[::-1], backward + interior
