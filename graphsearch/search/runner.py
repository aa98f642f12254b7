"""
Search runner: runs a named traversal over a graph and records the result.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Hashable

from graphsearch.config import DEFAULT_ALGORITHM, RESET_BEFORE_SEARCH, validate_algorithm
from graphsearch.graph import Graph, get_traversal
from graphsearch.search.state import SearchResult

logger = logging.getLogger(__name__)


class SearchRunner:
    """
    Runs traversals over graphs.

    The runner handles:
    - Resetting leftover search state so a graph can be searched again
    - Dispatching to the configured traversal
    - Timing the run and recording a SearchResult
    """

    def __init__(
        self,
        algorithm: str = DEFAULT_ALGORITHM,
        reset: bool = RESET_BEFORE_SEARCH,
    ) -> None:
        """
        Initialize the runner.

        Args:
            algorithm: Traversal to run (dijkstra, dfs)
            reset: Clear the graph's search state before each run

        Raises:
            ValueError: If algorithm is unknown
        """
        self._algorithm = validate_algorithm(algorithm)
        self._traversal = get_traversal(self._algorithm)
        self._reset = reset

    @property
    def algorithm(self) -> str:
        return self._algorithm

    def run(self, graph: Graph, start: Hashable) -> SearchResult:
        """
        Run the traversal from start.

        Args:
            graph: Graph to search (mutated in place)
            start: Start node identifier

        Returns:
            SearchResult with the distances of every reached node

        Raises:
            StartNodeMissingError: If start is not in the graph
        """
        logger.info(f"Starting {self._algorithm} from {start!r} on {graph!r}")

        # Checked before the reset so a failed run leaves the graph untouched
        if self._reset and start in graph:
            graph.reset_search_state()

        start_ms = time.time() * 1000
        self._traversal(graph, start)
        elapsed_ms = time.time() * 1000 - start_ms

        stats = graph.stats()
        result = SearchResult(
            start=start,
            algorithm=self._algorithm,
            distances=graph.distances(),
            visited_count=stats["visited"],
            elapsed_ms=elapsed_ms,
        )

        logger.info(
            f"Reached {result.reached_count}/{stats['nodes']} nodes "
            f"in {elapsed_ms:.1f}ms"
        )
        return result

    def paths(self, graph: Graph, finish: Hashable) -> list[list[Hashable]]:
        """
        Every shortest path to finish found by the last run.

        Returns an empty list if finish was not reached.
        """
        paths = graph.get_shortest_paths(finish)
        if paths is None:
            logger.warning(f"No path found to {finish!r}")
            return []
        return paths

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(algorithm={self._algorithm!r})"
