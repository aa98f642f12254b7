"""
Graph algorithms module.

Provides a generic weighted directed graph and traversals over it:
- Dijkstra: Exact shortest distances with every tied predecessor
- DFS: Depth-first distance labeling
- Path reconstruction: All shortest paths to a destination
"""

from graphsearch.graph.algorithms import (
    dfs,
    dijkstra,
    get_path_nodes,
    get_shortest_paths,
    get_traversal,
)
from graphsearch.graph.container import Graph
from graphsearch.graph.errors import GraphError, StartNodeMissingError
from graphsearch.graph.node import Edge, Node, NodeView

__all__ = [
    "Edge",
    "Graph",
    "GraphError",
    "Node",
    "NodeView",
    "StartNodeMissingError",
    "dfs",
    "dijkstra",
    "get_path_nodes",
    "get_shortest_paths",
    "get_traversal",
]
