"""
Search module.

Provides search algorithms over diagram models:
- AStarSearch / astar: Heuristic-guided shortest path
- breadth_first_order: Reachability walk in discovery order
- RoutePlanner: Endpoint inference + A*
"""

from collections.abc import Callable

from diagrampath.search.astar import AStarSearch, astar
from diagrampath.search.bfs import breadth_first_order
from diagrampath.search.engine import RoutePlanner
from diagrampath.search.state import (
    PathResult,
    SearchOutcome,
    SearchRecord,
    TraversalResult,
)

__all__ = [
    "AStarSearch",
    "astar",
    "breadth_first_order",
    "RoutePlanner",
    "PathResult",
    "SearchOutcome",
    "SearchRecord",
    "TraversalResult",
    "get_search",
]


def get_search(name: str) -> Callable:
    """
    Get a search function by name.

    Args:
        name: Algorithm identifier (astar, bfs)

    Returns:
        Function taking (model, start=None, ...) and returning a result

    Raises:
        ValueError: If the algorithm name is unknown
    """
    searches = {
        "astar": astar,
        "bfs": breadth_first_order,
    }

    if name not in searches:
        available = ", ".join(searches.keys())
        raise ValueError(f"Unknown search '{name}'. Available: {available}")

    return searches[name]
