#!/usr/bin/env python3
"""
Graph Search CLI - Run a traversal on a sample graph and list shortest paths.

Usage:
    python scripts/find_paths.py --start A --target D
    python scripts/find_paths.py --sample tie --start A --target D
    python scripts/find_paths.py --sample detour --start A --target D --algorithm dfs

Samples:
    basic  - A->B(1), A->C(4), B->C(2), C->D(1)
    tie    - Two equal-cost routes from A into D
    detour - Depth-first order takes the expensive branch to C

Algorithms:
    dijkstra - Exact shortest distances (default)
    dfs      - Depth-first distance labeling (exact only on trees)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv  # noqa: E402

# Environment overrides must be loaded before graphsearch.config reads them
load_dotenv(project_root / ".env")

from graphsearch.config import (  # noqa: E402 - must be after sys.path modification
    AVAILABLE_ALGORITHMS,
    DEFAULT_ALGORITHM,
    LOG_DATEFMT,
    LOG_FORMAT,
    LOG_LEVEL,
)
from graphsearch.graph import StartNodeMissingError  # noqa: E402
from graphsearch.samples import SAMPLE_EDGES, build_sample  # noqa: E402
from graphsearch.search import SearchRunner  # noqa: E402


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Find shortest paths on a sample graph",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--sample",
        type=str,
        default="basic",
        choices=sorted(SAMPLE_EDGES),
        help="Sample graph to search (default: basic)",
    )
    parser.add_argument(
        "--start",
        type=str,
        required=True,
        help="Start node identifier",
    )
    parser.add_argument(
        "--target",
        type=str,
        default=None,
        help="Node to list shortest paths to (default: none)",
    )
    parser.add_argument(
        "--algorithm",
        type=str,
        default=DEFAULT_ALGORITHM,
        choices=list(AVAILABLE_ALGORITHMS),
        help=f"Traversal to run (default: {DEFAULT_ALGORITHM})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )

    graph = build_sample(args.sample)
    runner = SearchRunner(algorithm=args.algorithm)

    try:
        result = runner.run(graph, args.start)
    except StartNodeMissingError as e:
        print(f"Error: {e}: {args.start!r}", file=sys.stderr)
        return 1

    print("\n" + "=" * 60)
    print(f"{result.algorithm} from {result.start} on '{args.sample}'")
    print("=" * 60)

    print("\nDistances:")
    for node_id, distance in sorted(result.distances.items(), key=lambda x: x[1]):
        print(f"  {node_id}: {distance}")

    if args.target is None:
        return 0

    if args.target not in graph:
        print(f"Error: target {args.target!r} is not in the graph", file=sys.stderr)
        return 1

    paths = runner.paths(graph, args.target)
    if not paths:
        print(f"\n{args.target} is unreachable from {args.start}")
        return 0

    print(f"\nShortest paths to {args.target} (cost {result.distance_to(args.target)}):")
    for i, path in enumerate(paths, 1):
        print(f"  {i}. {' -> '.join(path)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
