"""
Route planner: endpoint inference followed by A* search.
"""

from __future__ import annotations

import logging

from diagrampath.config import BFS_MAX_DEPTH, EDGE_METRIC, MAX_EXPANSIONS
from diagrampath.graph.endpoints import find_goal_node, find_start_node
from diagrampath.graph.geometry import EdgeMetric
from diagrampath.graph.model import Model, Node
from diagrampath.search.astar import AStarSearch
from diagrampath.search.bfs import breadth_first_order
from diagrampath.search.state import PathResult, TraversalResult

logger = logging.getLogger(__name__)


class RoutePlanner:
    """
    Plans routes through diagram models.

    The planner handles:
    - Inferring start and goal nodes when the caller does not name them
    - Running A* with the configured edge metric and expansion limit
    - Breadth-first reachability walks
    """

    def __init__(
        self,
        metric: EdgeMetric | str = EDGE_METRIC,
        max_expansions: int | None = MAX_EXPANSIONS,
        max_depth: int | None = BFS_MAX_DEPTH,
    ) -> None:
        """
        Initialize the planner.

        Args:
            metric: Edge metric used for edge lengths
            max_expansions: A* expansion limit (None = unbounded)
            max_depth: BFS hop limit (None = unbounded)

        Raises:
            ValueError: If max_expansions is less than 1
        """
        if max_expansions is not None and max_expansions < 1:
            raise ValueError(f"max_expansions must be at least 1, got {max_expansions}")
        self._metric = EdgeMetric.from_name(metric)
        self._max_expansions = max_expansions
        self._max_depth = max_depth

    def plan(
        self,
        model: Model,
        start: Node | None = None,
        goal: Node | None = None,
    ) -> PathResult:
        """
        Find the shortest route through a model.

        Args:
            model: Model to search
            start: Start node (inferred if None)
            goal: Goal node (inferred if None)

        Returns:
            PathResult; check .found before using .path

        Raises:
            NoEndpointError: If an endpoint must be inferred and has no candidate
            InvalidTopologyError: If the search meets an edge without a target
        """
        logger.info(f"Planning route through {model!r}")

        if start is None:
            start = find_start_node(model)
        if goal is None:
            goal = find_goal_node(model)

        search = AStarSearch(
            model,
            metric=self._metric,
            max_expansions=self._max_expansions,
        )
        result = search.search(start, goal)

        if result.found:
            logger.info(
                f"Route ({len(result.path) - 1} edges, cost {result.cost:g}): "
                f"{' -> '.join(node.kind for node in result.path)}"
            )
        else:
            logger.info(f"No route: {result.outcome.value}")

        return result

    def traverse(self, model: Model, start: Node | None = None) -> TraversalResult:
        """Walk the model breadth-first from start (inferred if None)."""
        return breadth_first_order(model, start=start, max_depth=self._max_depth)
