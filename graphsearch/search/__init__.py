"""
Search runner module.

Provides traversal execution and result records:
- SearchRunner: Runs a named traversal over a graph
- SearchResult: Distances and timing of a finished run
"""

from graphsearch.search.runner import SearchRunner
from graphsearch.search.state import SearchResult

__all__ = [
    "SearchRunner",
    "SearchResult",
]
