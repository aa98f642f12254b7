"""
Graph container: maps node identifiers to Node entries.

Usage:
    from graphsearch.graph import Graph

    graph = Graph()
    graph.add_edge("A", "B", 1)
    graph.add_edge("B", "C", 2)
    graph.dijkstra("A")
    graph.get_node("C").min_distance  # 3
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Generic

from graphsearch.graph import algorithms
from graphsearch.graph.node import Edge, Node, NodeId, NodeView

logger = logging.getLogger(__name__)


class Graph(Generic[NodeId]):
    """
    Mutable directed graph with non-negative integer edge weights.

    Each node carries the state of the last traversal run over it
    (visited flag, minimum distance, predecessors). Call
    reset_search_state() before starting a second independent traversal
    on the same instance.
    """

    def __init__(self) -> None:
        self._nodes: dict[NodeId, Node[NodeId]] = {}

    # =========================================================================
    # Construction
    # =========================================================================

    def add_node(self, node_id: NodeId) -> Node[NodeId]:
        """Insert a node if missing and return it."""
        node = self._nodes.get(node_id)
        if node is None:
            node = Node()
            self._nodes[node_id] = node
        return node

    def add_edge(self, source: NodeId, target: NodeId, weight: int) -> None:
        """
        Add a directed edge, creating either endpoint if needed.

        Raises:
            ValueError: If weight is not a non-negative integer
        """
        if isinstance(weight, bool) or not isinstance(weight, int):
            raise ValueError(f"Edge weight must be an integer, got {weight!r}")
        if weight < 0:
            raise ValueError(f"Edge weight must be non-negative, got {weight}")

        source_node = self.add_node(source)
        self.add_node(target)
        source_node.destinations.append(Edge(node=target, weight=weight))

    # =========================================================================
    # Accessors
    # =========================================================================

    def get_node(self, node_id: NodeId) -> NodeView[NodeId] | None:
        """Get a read-only view of a node, or None if not found."""
        node = self._nodes.get(node_id)
        if node is None:
            return None
        return NodeView(node)

    def get_mut_node(self, node_id: NodeId) -> Node[NodeId] | None:
        """Get a node for in-place modification, or None if not found."""
        return self._nodes.get(node_id)

    def nodes(self) -> list[NodeId]:
        """All node identifiers, in insertion order."""
        return list(self._nodes)

    def edge_count(self) -> int:
        return sum(len(node.destinations) for node in self._nodes.values())

    def distances(self) -> dict[NodeId, int]:
        """Map every reached node to its recorded minimum distance."""
        return {
            node_id: node.min_distance
            for node_id, node in self._nodes.items()
            if node.min_distance is not None
        }

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[NodeId]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self)}, edges={self.edge_count()})"

    # =========================================================================
    # Search State
    # =========================================================================

    def reset_search_state(self) -> None:
        """Clear visited flags, distances and predecessors on every node."""
        for node in self._nodes.values():
            node.reset()
        logger.debug(f"Reset search state on {len(self)} nodes")

    def dijkstra(self, start: NodeId) -> None:
        """Run Dijkstra from start. See algorithms.dijkstra."""
        algorithms.dijkstra(self, start)

    def dfs(self, start: NodeId) -> None:
        """Run the distance-labeling DFS from start. See algorithms.dfs."""
        algorithms.dfs(self, start)

    def get_path_nodes(self, finish: NodeId) -> list[NodeId] | None:
        """Flattened nodes of every shortest path ending at finish."""
        return algorithms.get_path_nodes(self, finish)

    def get_shortest_paths(self, finish: NodeId) -> list[list[NodeId]] | None:
        """Every distinct shortest path ending at finish, start first."""
        return algorithms.get_shortest_paths(self, finish)

    # =========================================================================
    # Utility Methods
    # =========================================================================

    def stats(self) -> dict:
        """Get statistics about the graph and its search state."""
        return {
            "nodes": len(self),
            "edges": self.edge_count(),
            "visited": sum(1 for node in self._nodes.values() if node.visited),
            "reached": sum(1 for node in self._nodes.values() if node.is_reached),
        }
