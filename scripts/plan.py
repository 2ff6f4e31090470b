#!/usr/bin/env python3
"""
Diagram path planner CLI - find a route through a diagram model.

Usage:
    python scripts/plan.py
    python scripts/plan.py data/sample_diagram.json
    python scripts/plan.py my_diagram.json --metric euclidean
    python scripts/plan.py my_diagram.json --algorithm bfs --max-depth 3
    python scripts/plan.py my_diagram.json --json

Algorithms:
    astar - Shortest route from the inferred start to the inferred goal
    bfs   - Every node reachable from the inferred start, in discovery order

Edge metrics:
    manhattan - |dx| + |dy| summed over the edge path (default)
    reference - like manhattan, diagonal two-point edges count as 0
    euclidean - straight-line segment lengths
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from diagrampath.config import (  # noqa: E402
    EDGE_METRIC,
    LOG_DATEFMT,
    LOG_FORMAT,
    LOG_LEVEL,
    MAX_EXPANSIONS,
    SAMPLE_MODEL_PATH,
)
from diagrampath.data import load_model  # noqa: E402
from diagrampath.errors import DiagramPathError  # noqa: E402
from diagrampath.graph import EdgeMetric  # noqa: E402
from diagrampath.search import RoutePlanner  # noqa: E402


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Find a route through a diagram model",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "model",
        type=Path,
        nargs="?",
        default=SAMPLE_MODEL_PATH,
        help=f"Model JSON file (default: {SAMPLE_MODEL_PATH.name})",
    )
    parser.add_argument(
        "--algorithm",
        type=str,
        default="astar",
        choices=["astar", "bfs"],
        help="Search to run (default: astar)",
    )
    parser.add_argument(
        "--metric",
        type=str,
        default=EDGE_METRIC,
        choices=[m.value for m in EdgeMetric],
        help=f"Edge length metric (default: {EDGE_METRIC})",
    )
    parser.add_argument(
        "--max-expansions",
        type=int,
        default=MAX_EXPANSIONS,
        help="Give up A* after this many expansions (default: unbounded)",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help="Limit BFS to this many hops (default: unbounded)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def describe(node) -> dict:
    return {"type": node.kind, "location": [node.location.x, node.location.y]}


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(level=log_level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)

    try:
        planner = RoutePlanner(
            metric=args.metric,
            max_expansions=args.max_expansions,
            max_depth=args.max_depth,
        )
        model = load_model(args.model)

        if args.algorithm == "bfs":
            traversal = planner.traverse(model)
            if args.json:
                print(json.dumps([describe(n) | {"depth": traversal.depths[n]} for n in traversal.order], indent=2))
                return 0

            print(f"\nReachable from {traversal.start.kind} ({len(traversal)} of {len(model)} nodes):")
            for i, node in enumerate(traversal.order):
                print(f"  {i}. {node.kind} (depth {traversal.depths[node]})")
            return 0

        result = planner.plan(model)
    except FileNotFoundError:
        print(f"Error: model file not found: {args.model}", file=sys.stderr)
        return 1
    except (DiagramPathError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(
            json.dumps(
                {
                    "outcome": result.outcome.value,
                    "cost": result.cost,
                    "expanded": result.expanded,
                    "path": [describe(n) for n in result.path] if result.found else None,
                },
                indent=2,
            )
        )
        return 0 if result.found else 1

    print("\n" + "=" * 60)
    if result.found:
        print(f"Route found: cost {result.cost:g}, {result.expanded} expansions")
    else:
        print(f"No route from '{result.start.kind}' to '{result.goal.kind}' ({result.outcome.value})")
    print("=" * 60)

    if result.found:
        print("\nPath:")
        for i, node in enumerate(result.path):
            marker = " (START)" if i == 0 else " (GOAL)" if node is result.goal else ""
            print(f"  {i}. {node.kind} at ({node.location.x:g}, {node.location.y:g}){marker}")

    return 0 if result.found else 1


if __name__ == "__main__":
    sys.exit(main())
