"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import pytest

from graphsearch.graph import Graph
from graphsearch.samples import build_sample


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def basic_graph() -> Graph:
    """A->B(1), A->C(4), B->C(2), C->D(1)."""
    return build_sample("basic")


@pytest.fixture
def tie_graph() -> Graph:
    """A->B(1), A->C(1), B->D(1), C->D(1): two equal-cost routes into D."""
    return build_sample("tie")


@pytest.fixture
def detour_graph() -> Graph:
    """A->B(1), A->C(10), B->C(1), C->D(1): DFS reaches C the expensive way."""
    return build_sample("detour")


@pytest.fixture
def diamond_chain() -> Graph:
    """Two stacked diamonds: four equal-cost routes from S to T."""
    graph = Graph()
    for source, target in [
        ("S", "L1"), ("S", "R1"), ("L1", "M"), ("R1", "M"),
        ("M", "L2"), ("M", "R2"), ("L2", "T"), ("R2", "T"),
    ]:
        graph.add_edge(source, target, 1)
    return graph
