"""
Exceptions raised by the graph package.
"""


class GraphError(Exception):
    """Base class for graph errors."""


class StartNodeMissingError(GraphError, ValueError):
    """Raised when a traversal is started from a node that is not in the graph."""

    def __init__(self, start: object) -> None:
        super().__init__("The start node does not exist")
        self.start = start
