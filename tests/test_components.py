"""Tests for connected component decomposition."""

from graph_planarity.planarity import GraphState, connected_components, is_connected


class TestConnectedComponents:
    """Tests for connected_components on graph states."""

    def test_two_triangles(self):
        """Two disjoint triangles give two induced components."""
        state = GraphState.from_edges(
            range(6), [(0, 1), (1, 2), (2, 0), (3, 4), (4, 5), (5, 3)]
        )
        comps = connected_components(state)
        assert len(comps) == 2
        assert comps[0] == GraphState.from_edges([0, 1, 2], [(0, 1), (1, 2), (0, 2)])
        assert comps[1] == GraphState.from_edges([3, 4, 5], [(3, 4), (4, 5), (3, 5)])

    def test_isolated_vertices_are_singletons(self):
        state = GraphState.from_edges(range(4), [(1, 2)])
        comps = connected_components(state)
        assert [sorted(c.vertices) for c in comps] == [[0], [1, 2], [3]]
        assert comps[0].num_edges == 0
        assert comps[2].num_edges == 0

    def test_partition(self):
        """Every vertex lands in exactly one component and no edge is lost."""
        edges = [(0, 5), (5, 9), (2, 7), (3, 4), (8, 6), (6, 2)]
        state = GraphState.from_edges(range(10), edges)
        comps = connected_components(state)

        seen: list[int] = []
        for comp in comps:
            seen.extend(comp.vertices)
        assert sorted(seen) == list(range(10))
        assert sum(c.num_edges for c in comps) == state.num_edges

    def test_ordered_by_smallest_vertex(self):
        state = GraphState.from_edges([9, 4, 7, 1], [(9, 1), (4, 7)])
        comps = connected_components(state)
        assert [min(c.vertices) for c in comps] == [1, 4]

    def test_empty_graph(self):
        assert connected_components(GraphState.from_edges([])) == []

    def test_connected_graph_single_component(self):
        state = GraphState.from_edges(range(4), [(0, 1), (1, 2), (2, 3)])
        comps = connected_components(state)
        assert len(comps) == 1
        assert comps[0] == state


class TestIsConnected:
    """Tests for is_connected."""

    def test_empty(self):
        assert is_connected(GraphState.from_edges([])) is True

    def test_single_vertex(self):
        assert is_connected(GraphState.from_edges([0])) is True

    def test_two_isolated(self):
        assert is_connected(GraphState.from_edges([0, 1])) is False

    def test_path(self):
        assert is_connected(GraphState.from_edges(range(3), [(0, 1), (1, 2)])) is True
