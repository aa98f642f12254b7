"""
Traversal algorithms over a Graph.

- dijkstra: Priority-queue shortest paths (exact for non-negative weights)
- dfs: Stack-driven distance labeling (exact only on trees, or when the
  visiting order happens to follow cost order)
- get_path_nodes / get_shortest_paths: Expand the predecessor lists a
  traversal leaves behind into concrete node sequences

Both traversals mutate the graph's nodes in place and record every
predecessor that ties for the minimum distance, so all shortest paths
can be recovered afterwards.
"""

from __future__ import annotations

import heapq
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic

from graphsearch.graph.errors import StartNodeMissingError
from graphsearch.graph.node import Edge, Node, NodeId

if TYPE_CHECKING:
    from graphsearch.graph.container import Graph

logger = logging.getLogger(__name__)


@dataclass(order=True)
class PriorityQueueEntry(Generic[NodeId]):
    """
    Frontier entry ordered by distance alone.

    Node identifiers take no part in the ordering, so they do not need
    to be comparable. Equal distances pop in no particular order.
    """

    distance: int
    node_id: NodeId = field(compare=False)


def _require_node(graph: Graph[NodeId], node_id: NodeId) -> Node[NodeId]:
    """Look up a node that the algorithm already knows is present."""
    node = graph.get_mut_node(node_id)
    if node is None:
        raise KeyError(f"Node {node_id!r} is referenced by an edge but not in the graph")
    return node


def _init_start(graph: Graph[NodeId], start: NodeId) -> None:
    start_node = graph.get_mut_node(start)
    if start_node is None:
        logger.warning(f"Start {start!r} not in graph")
        raise StartNodeMissingError(start)
    start_node.min_distance = 0


def _visit(graph: Graph[NodeId], node_id: NodeId) -> list[Edge[NodeId]] | None:
    """
    Mark a node visited and snapshot its outgoing edges.

    Returns None if the node was already visited (stale frontier entry).
    """
    node = _require_node(graph, node_id)
    if node.visited:
        return None
    node.visited = True
    return list(node.destinations)


def _relax(
    neighbor: Node[NodeId],
    node_id: NodeId,
    candidate: int,
) -> bool:
    """
    Offer a candidate distance to an unvisited neighbor.

    A strictly shorter distance replaces the predecessors; an equal one
    adds node_id as another predecessor.

    Returns:
        True if the neighbor's distance improved
    """
    if neighbor.min_distance is None or candidate < neighbor.min_distance:
        neighbor.min_distance = candidate
        neighbor.previous_location = [node_id]
        return True
    if candidate == neighbor.min_distance:
        neighbor.previous_location.append(node_id)
    return False


def dijkstra(graph: Graph[NodeId], start: NodeId) -> None:
    """
    Compute shortest distances from start to every reachable node.

    Leaves each reachable node with visited=True, its exact min_distance,
    and every predecessor that achieves it. Weights must be non-negative.
    With zero-weight edges, a predecessor finalized at the same distance as
    its neighbor can be missed if the neighbor pops first.

    Raises:
        StartNodeMissingError: If start is not in the graph (graph untouched)
    """
    _init_start(graph, start)

    priority_queue: list[PriorityQueueEntry[NodeId]] = [PriorityQueueEntry(0, start)]
    visited_count = 0

    while priority_queue:
        entry = heapq.heappop(priority_queue)

        destinations = _visit(graph, entry.node_id)
        if destinations is None:
            continue
        visited_count += 1

        for destination in destinations:
            neighbor = _require_node(graph, destination.node)
            if neighbor.visited:
                continue

            new_distance = entry.distance + destination.weight
            if _relax(neighbor, entry.node_id, new_distance):
                logger.debug(f"{destination.node!r}: distance {new_distance} via {entry.node_id!r}")
                heapq.heappush(priority_queue, PriorityQueueEntry(new_distance, destination.node))

    logger.info(f"Dijkstra from {start!r} finalized {visited_count} nodes")


def dfs(graph: Graph[NodeId], start: NodeId) -> None:
    """
    Label nodes with accumulated edge weight in depth-first order.

    Uses the same relaxation rule as dijkstra, but expands nodes from a
    LIFO stack. A node is finalized on its first pop, so a cheaper path
    that arrives later through another branch is ignored: distances are
    only exact on trees, or when the visiting order follows cost order.
    Use dijkstra when exact shortest distances are required.

    Raises:
        StartNodeMissingError: If start is not in the graph (graph untouched)
    """
    _init_start(graph, start)

    stack: list[tuple[NodeId, int]] = [(start, 0)]
    visited_count = 0

    while stack:
        node_id, current_distance = stack.pop()

        destinations = _visit(graph, node_id)
        if destinations is None:
            continue
        visited_count += 1

        for destination in destinations:
            neighbor = _require_node(graph, destination.node)
            if neighbor.visited:
                continue

            new_distance = current_distance + destination.weight
            _relax(neighbor, node_id, new_distance)
            stack.append((destination.node, new_distance))

    logger.info(f"DFS from {start!r} visited {visited_count} nodes")


def get_path_nodes(graph: Graph[NodeId], finish: NodeId) -> list[NodeId] | None:
    """
    List the nodes of every shortest path ending at finish.

    The result starts with finish, followed by the path nodes of each
    predecessor in turn (depth first, predecessors in recorded order).
    With a single predecessor chain this is the path from finish back to
    the start. With ties, the alternative branches are concatenated into
    one sequence; use get_shortest_paths to get them separated.

    A node without predecessors (the start, or a node the traversal never
    reached) yields just [finish].

    Returns:
        Node sequence, or None if finish or any predecessor is not in the graph
    """
    if graph.get_node(finish) is None:
        return None

    route: list[NodeId] = []
    # Explicit stack keeps long predecessor chains clear of the recursion limit
    pending = [finish]
    while pending:
        node_id = pending.pop()
        node = graph.get_node(node_id)
        if node is None:
            return None
        route.append(node_id)
        pending.extend(reversed(node.previous_location))

    return route


def get_shortest_paths(graph: Graph[NodeId], finish: NodeId) -> list[list[NodeId]] | None:
    """
    Enumerate every distinct shortest path ending at finish.

    Each path runs from the traversal's start node to finish. Paths are
    ordered by the recorded order of predecessors. The number of paths
    can grow exponentially with the number of ties. Unlike get_path_nodes,
    a node present in the graph but never reached has no paths.

    Returns:
        List of paths, or None if finish is absent or was never reached
    """
    finish_node = graph.get_node(finish)
    if finish_node is None or not finish_node.is_reached:
        return None

    paths: list[list[NodeId]] = []
    pending: list[tuple[NodeId, list[NodeId]]] = [(finish, [finish])]
    while pending:
        node_id, suffix = pending.pop()
        node = graph.get_node(node_id)
        if node is None:
            return None

        if not node.previous_location:
            paths.append(list(reversed(suffix)))
            continue

        for predecessor in reversed(node.previous_location):
            pending.append((predecessor, suffix + [predecessor]))

    return paths


Traversal = Callable[..., None]


def get_traversal(name: str) -> Traversal:
    """
    Get a traversal function by name.

    Args:
        name: Traversal identifier (dijkstra, dfs)

    Raises:
        ValueError: If traversal name is unknown
    """
    traversals: dict[str, Traversal] = {
        "dijkstra": dijkstra,
        "dfs": dfs,
    }

    if name not in traversals:
        available = ", ".join(traversals.keys())
        raise ValueError(f"Unknown algorithm '{name}'. Available: {available}")

    return traversals[name]
