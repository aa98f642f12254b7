"""
Search result dataclass recording the outcome of a traversal run.
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class SearchResult:
    """
    Complete record of a finished traversal.

    Attributes:
        start: Node the traversal started from
        algorithm: Name of the traversal that was run
        distances: Recorded minimum distance for every reached node
        visited_count: Number of nodes the traversal finalized
        elapsed_ms: Wall-clock time spent in the traversal (milliseconds)
        timestamp: When the traversal was run
    """

    start: Hashable
    algorithm: str
    distances: dict[Hashable, int]
    visited_count: int
    elapsed_ms: float
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def reached_count(self) -> int:
        """Number of nodes with a recorded distance (including start)."""
        return len(self.distances)

    def is_reached(self, node_id: Hashable) -> bool:
        return node_id in self.distances

    def distance_to(self, node_id: Hashable) -> int | None:
        """Distance recorded for node_id, or None if it was not reached."""
        return self.distances.get(node_id)
