"""Connected component decomposition of graph states."""

from __future__ import annotations

from collections import deque

from ._state import GraphState


def connected_components(state: GraphState) -> list[GraphState]:
    """Split a state into the induced subgraphs of its connected components.

    Components are found by BFS and returned in order of their smallest
    vertex. Isolated vertices become single-vertex components, so the vertex
    sets of the result partition ``state.vertices``.

    Args:
        state: Graph state to decompose.

    Returns:
        List of induced subgraphs, one per component.
    """
    adj = state.adjacency()
    visited: set[int] = set()
    components: list[GraphState] = []

    for start in sorted(state.vertices):
        if start in visited:
            continue

        # BFS to find all vertices in this component
        component: list[int] = []
        queue: deque[int] = deque([start])
        visited.add(start)

        while queue:
            vertex = queue.popleft()
            component.append(vertex)

            for neighbor in adj[vertex]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)

        components.append(state.induced_subgraph(component))

    return components


def is_connected(state: GraphState) -> bool:
    """Check if a state is connected. Empty and single-vertex states are."""
    if state.num_vertices <= 1:
        return True
    return len(connected_components(state)) == 1
