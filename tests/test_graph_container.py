"""
Unit tests for the Graph container and node store.
"""

import pytest

from graphsearch.graph import Edge, Graph, Node, NodeView


class TestConstruction:
    """Test node and edge insertion."""

    def test_add_node_returns_node(self):
        """add_node should create an unreached, unvisited node."""
        graph = Graph()
        node = graph.add_node("A")
        assert isinstance(node, Node)
        assert node.visited is False
        assert node.min_distance is None
        assert node.previous_location == []

    def test_add_node_is_idempotent(self):
        """Adding an existing node should return the same entry."""
        graph = Graph()
        first = graph.add_node("A")
        graph.add_edge("A", "B", 3)
        assert graph.add_node("A") is first
        assert len(graph) == 2

    def test_add_edge_creates_endpoints(self):
        """add_edge should insert missing source and target nodes."""
        graph = Graph()
        graph.add_edge("A", "B", 2)
        assert "A" in graph
        assert "B" in graph
        assert graph.get_node("A").destinations == (Edge(node="B", weight=2),)
        assert graph.get_node("B").destinations == ()

    def test_add_edge_preserves_order(self):
        """Outgoing edges should keep insertion order."""
        graph = Graph()
        graph.add_edge("A", "C", 5)
        graph.add_edge("A", "B", 1)
        assert [edge.node for edge in graph.get_node("A").destinations] == ["C", "B"]

    def test_zero_weight_allowed(self):
        """Zero is a valid edge weight."""
        graph = Graph()
        graph.add_edge("A", "B", 0)
        assert graph.edge_count() == 1

    @pytest.mark.parametrize("weight", [-1, 1.5, "3", True])
    def test_invalid_weight_raises(self, weight):
        """Negative or non-integer weights should be rejected."""
        graph = Graph()
        with pytest.raises(ValueError):
            graph.add_edge("A", "B", weight)
        assert len(graph) == 0

    def test_tuple_node_ids(self):
        """Any hashable value can identify a node."""
        graph = Graph()
        graph.add_edge((0, 0), (0, 1), 1)
        assert (0, 1) in graph
        assert graph.nodes() == [(0, 0), (0, 1)]


class TestAccessors:
    """Test read and write accessors."""

    def test_get_node_missing(self, basic_graph):
        """get_node should return None for an unknown id."""
        assert basic_graph.get_node("Z") is None

    def test_get_mut_node_missing(self, basic_graph):
        """get_mut_node should return None for an unknown id."""
        assert basic_graph.get_mut_node("Z") is None

    def test_get_node_is_read_only(self, basic_graph):
        """The read view should not allow assignment."""
        view = basic_graph.get_node("A")
        assert isinstance(view, NodeView)
        with pytest.raises(AttributeError):
            view.visited = True

    def test_get_node_reflects_mutation(self, basic_graph):
        """Changes through get_mut_node should show in the read view."""
        view = basic_graph.get_node("B")
        basic_graph.get_mut_node("B").min_distance = 7
        assert view.min_distance == 7
        assert view.is_reached is True

    def test_view_returns_copies(self, basic_graph):
        """Mutating a view's tuples cannot alter the node."""
        basic_graph.get_mut_node("C").previous_location.append("A")
        view = basic_graph.get_node("C")
        assert view.previous_location == ("A",)
        assert isinstance(view.destinations, tuple)

    def test_len_iter_contains(self, basic_graph):
        """Container protocol should cover every node."""
        assert len(basic_graph) == 4
        assert list(basic_graph) == ["A", "B", "C", "D"]
        assert "D" in basic_graph
        assert "E" not in basic_graph

    def test_edge_count(self, basic_graph):
        """Edge count should sum outgoing edges."""
        assert basic_graph.edge_count() == 4


class TestSearchState:
    """Test resetting and summarizing search state."""

    def test_distances_empty_before_search(self, basic_graph):
        """No distances are recorded before a traversal."""
        assert basic_graph.distances() == {}

    def test_reset_search_state(self, basic_graph):
        """reset_search_state should clear every node but keep edges."""
        basic_graph.dijkstra("A")
        basic_graph.reset_search_state()

        for node_id in basic_graph:
            view = basic_graph.get_node(node_id)
            assert view.visited is False
            assert view.min_distance is None
            assert view.previous_location == ()
        assert basic_graph.edge_count() == 4

    def test_second_search_after_reset(self, basic_graph):
        """A reset graph can be searched again from another start."""
        basic_graph.dijkstra("A")
        basic_graph.reset_search_state()
        basic_graph.dijkstra("B")
        assert basic_graph.distances() == {"B": 0, "C": 2, "D": 3}

    def test_stats(self, basic_graph):
        """Stats should include counts for nodes, edges and search state."""
        basic_graph.add_node("E")
        basic_graph.dijkstra("A")
        assert basic_graph.stats() == {
            "nodes": 5,
            "edges": 4,
            "visited": 4,
            "reached": 4,
        }

    def test_node_reset(self):
        """Node.reset should clear state only."""
        node = Node(destinations=[Edge("B", 1)], visited=True, min_distance=3, previous_location=["A"])
        node.reset()
        assert node == Node(destinations=[Edge("B", 1)])
