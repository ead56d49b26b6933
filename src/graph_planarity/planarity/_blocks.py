"""Biconnected block decomposition of graph states."""

from __future__ import annotations

from ._state import Edge, GraphState, make_edge


def biconnected_blocks(state: GraphState) -> list[GraphState]:
    """Decompose a state into its biconnected blocks (Tarjan's).

    A graph is planar exactly when each of its blocks is. Blocks are built
    from the edge stack of an iterative DFS, so each block holds every edge
    between its vertices. Isolated vertices belong to no block.

    Args:
        state: Graph state to decompose.

    Returns:
        List of blocks as graph states, in the order the DFS closes them.
    """
    adj = {v: sorted(neighbors) for v, neighbors in state.adjacency().items()}
    disc: dict[int, int] = {}
    low: dict[int, int] = {}
    parent: dict[int, int] = {}
    timer = 0
    edge_stack: list[Edge] = []
    blocks: list[GraphState] = []

    for root in sorted(state.vertices):
        if root in disc:
            continue

        disc[root] = low[root] = timer
        timer += 1
        stack: list[tuple[int, int]] = [(root, 0)]

        while stack:
            v, idx = stack[-1]
            if idx < len(adj[v]):
                stack[-1] = (v, idx + 1)
                w = adj[v][idx]
                if w not in disc:
                    parent[w] = v
                    disc[w] = low[w] = timer
                    timer += 1
                    edge_stack.append(make_edge(v, w))
                    stack.append((w, 0))
                elif w != parent.get(v) and disc[w] < disc[v]:
                    edge_stack.append(make_edge(v, w))
                    low[v] = min(low[v], disc[w])
                continue

            stack.pop()
            if not stack:
                break
            u = stack[-1][0]
            low[u] = min(low[u], low[v])

            # u separates v's subtree from the rest: pop that block
            if low[v] >= disc[u]:
                tree_edge = make_edge(u, v)
                block_edges: set[Edge] = set()
                while True:
                    edge = edge_stack.pop()
                    block_edges.add(edge)
                    if edge == tree_edge:
                        break
                block_vertices = {x for edge in block_edges for x in edge}
                blocks.append(GraphState(frozenset(block_vertices), frozenset(block_edges)))

    return blocks
