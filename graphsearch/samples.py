"""
Small built-in graphs for demos and smoke checks.
"""

from __future__ import annotations

from graphsearch.graph import Graph

# name -> list of (source, target, weight)
SAMPLE_EDGES: dict[str, list[tuple[str, str, int]]] = {
    # Cheaper two-hop route beats the direct edge A -> C
    "basic": [
        ("A", "B", 1),
        ("A", "C", 4),
        ("B", "C", 2),
        ("C", "D", 1),
    ],
    # Two equal-cost routes into D
    "tie": [
        ("A", "B", 1),
        ("A", "C", 1),
        ("B", "D", 1),
        ("C", "D", 1),
    ],
    # Depth-first order finalizes C through the expensive branch first
    "detour": [
        ("A", "B", 1),
        ("A", "C", 10),
        ("B", "C", 1),
        ("C", "D", 1),
    ],
}


def build_sample(name: str) -> Graph[str]:
    """
    Build one of the sample graphs.

    Raises:
        ValueError: If the sample name is unknown
    """
    if name not in SAMPLE_EDGES:
        available = ", ".join(SAMPLE_EDGES)
        raise ValueError(f"Unknown sample '{name}'. Available: {available}")

    graph: Graph[str] = Graph()
    for source, target, weight in SAMPLE_EDGES[name]:
        graph.add_edge(source, target, weight)
    return graph
