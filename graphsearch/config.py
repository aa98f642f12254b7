"""
Configuration constants for the graph search toolkit.

All tunable settings are defined here. Values can be overridden with
environment variables (scripts also load a .env file from the project root).
"""

import os

# =============================================================================
# Search Configuration
# =============================================================================

# Traversals that can be requested by name
AVAILABLE_ALGORITHMS = ("dijkstra", "dfs")

# Traversal used when none is given explicitly
DEFAULT_ALGORITHM = os.environ.get("GRAPHSEARCH_ALGORITHM", "dijkstra")

# Reset visited/distance state before each run of the search runner
RESET_BEFORE_SEARCH = os.environ.get("GRAPHSEARCH_RESET", "1") != "0"

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"

# =============================================================================
# Validation Helpers
# =============================================================================

def validate_algorithm(name: str) -> str:
    """Return the normalized algorithm name, or raise ValueError if unknown."""
    normalized = name.strip().lower()
    if normalized not in AVAILABLE_ALGORITHMS:
        available = ", ".join(AVAILABLE_ALGORITHMS)
        raise ValueError(f"Unknown algorithm '{name}'. Available: {available}")
    return normalized
