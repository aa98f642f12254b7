"""
Graph Search Toolkit.

A small generic weighted-graph library: Dijkstra shortest paths,
a distance-labeling depth-first traversal, and reconstruction of
every minimum-cost path to a destination (ties included).
"""

__version__ = "0.1.0"
