"""
Node store dataclasses: edges, per-node search state, and read-only views.
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

NodeId = TypeVar("NodeId", bound=Hashable)


@dataclass(frozen=True)
class Edge(Generic[NodeId]):
    """
    Directed connection from the owning node.

    Attributes:
        node: Identifier of the destination node
        weight: Non-negative traversal cost
    """

    node: NodeId
    weight: int


@dataclass
class Node(Generic[NodeId]):
    """
    A graph node with its outgoing edges and the search state a traversal
    leaves behind.

    Attributes:
        destinations: Outgoing edges, in insertion order
        visited: Whether a traversal has finalized this node
        min_distance: Best known distance from the start (None = unreached)
        previous_location: Predecessors achieving min_distance
    """

    destinations: list[Edge[NodeId]] = field(default_factory=list)
    visited: bool = False
    min_distance: int | None = None
    previous_location: list[NodeId] = field(default_factory=list)

    @property
    def is_reached(self) -> bool:
        """Whether any traversal has assigned a distance."""
        return self.min_distance is not None

    def reset(self) -> None:
        """Clear search state, keeping edges."""
        self.visited = False
        self.min_distance = None
        self.previous_location = []


class NodeView(Generic[NodeId]):
    """Read-only view over a Node."""

    __slots__ = ("_node",)

    def __init__(self, node: Node[NodeId]) -> None:
        self._node = node

    @property
    def destinations(self) -> tuple[Edge[NodeId], ...]:
        return tuple(self._node.destinations)

    @property
    def visited(self) -> bool:
        return self._node.visited

    @property
    def min_distance(self) -> int | None:
        return self._node.min_distance

    @property
    def previous_location(self) -> tuple[NodeId, ...]:
        return tuple(self._node.previous_location)

    @property
    def is_reached(self) -> bool:
        return self._node.is_reached

    def __repr__(self) -> str:
        return (
            f"NodeView(visited={self.visited!r}, min_distance={self.min_distance!r}, "
            f"previous_location={list(self.previous_location)!r})"
        )
