"""
A* shortest-path search over a diagram model.

Nodes are expanded in order of f = g + h, where g is the accumulated
edge length from the start and h the straight-line distance to the goal.
All bookkeeping is per run: the open list is a heap of
(f, insertion sequence, node) entries backed by a map of the best open
g per node, and the closed list maps expanded nodes to their g.
"""

from __future__ import annotations

import heapq
import logging

from diagrampath.config import EDGE_METRIC, MAX_EXPANSIONS
from diagrampath.errors import InvalidTopologyError
from diagrampath.graph.endpoints import find_goal_node, find_start_node
from diagrampath.graph.geometry import EdgeMetric
from diagrampath.graph.model import Edge, Model, Node
from diagrampath.heuristics import straight_line
from diagrampath.search.state import PathResult, SearchOutcome, SearchRecord

logger = logging.getLogger(__name__)


class AStarSearch:
    """
    Runs A* searches over one model.

    The instance holds no state between runs, so the same model can be
    searched repeatedly (sequentially) with identical results.
    """

    def __init__(
        self,
        model: Model,
        metric: EdgeMetric | str | None = None,
        max_expansions: int | None = MAX_EXPANSIONS,
    ) -> None:
        """
        Initialize the search.

        Args:
            model: Model to search
            metric: Edge metric for edge lengths (defaults to config.EDGE_METRIC)
            max_expansions: Stop after this many expansions (None = unbounded)

        Raises:
            ValueError: If max_expansions is less than 1
        """
        if max_expansions is not None and max_expansions < 1:
            raise ValueError(f"max_expansions must be at least 1, got {max_expansions}")
        self._model = model
        self._metric = EdgeMetric.from_name(metric or EDGE_METRIC)
        self._max_expansions = max_expansions

    @property
    def metric(self) -> EdgeMetric:
        return self._metric

    def search(self, start: Node, goal: Node) -> PathResult:
        """
        Find a minimum-cost path from start to goal.

        Args:
            start: Node to start from
            goal: Node to reach

        Returns:
            PathResult with outcome FOUND (path set), NO_PATH when the goal
            is unreachable, or LIMIT_REACHED when max_expansions ran out

        Raises:
            ValueError: If start or goal is not part of the model
            InvalidTopologyError: If an expanded edge has no target node
        """
        for role, node in (("start", start), ("goal", goal)):
            if node not in self._model:
                raise ValueError(f"{role.capitalize()} {node!r} is not part of {self._model!r}")

        logger.info(f"A* search: {start!r} -> {goal!r} ({self._metric.value} edges)")

        records: dict[Node, SearchRecord] = {
            start: SearchRecord(g=0.0, h=straight_line(start, goal), f=0.0)
        }
        open_g: dict[Node, float] = {start: 0.0}
        closed: dict[Node, float] = {}
        lengths: dict[Edge, float] = {}
        heap: list[tuple[float, int, Node]] = [(0.0, 0, start)]
        seq = 0
        expanded = 0

        while heap:
            f, _, current = heapq.heappop(heap)
            record = records[current]

            # Stale entry: node already expanded or re-queued with a lower f
            if current not in open_g or f > record.f:
                continue

            del open_g[current]
            closed[current] = record.g
            record.visited = True
            expanded += 1
            logger.debug(f"Expanding {current!r} (g={record.g:g}, f={record.f:g})")

            if current is goal:
                return self._found(start, goal, records, expanded)

            if self._max_expansions is not None and expanded >= self._max_expansions:
                logger.warning(
                    f"A* stopped after {expanded} expansions without reaching {goal!r}"
                )
                return PathResult(
                    outcome=SearchOutcome.LIMIT_REACHED,
                    start=start,
                    goal=goal,
                    expanded=expanded,
                    records=records,
                )

            for successor, (edge, length) in self._successors(current, lengths).items():
                g = record.g + length

                if successor in closed and closed[successor] <= g:
                    continue
                if successor in open_g and open_g[successor] <= g:
                    continue

                h = straight_line(successor, goal)
                records[successor] = SearchRecord(
                    g=g,
                    h=h,
                    f=g + h,
                    parent=current,
                    parent_edge=edge,
                    parent_edge_length=length,
                )
                # A closed node reached more cheaply is opened again
                closed.pop(successor, None)
                open_g[successor] = g
                seq += 1
                heapq.heappush(heap, (g + h, seq, successor))

        logger.warning(f"No path from {start!r} to {goal!r} ({expanded} expansions)")
        return PathResult(
            outcome=SearchOutcome.NO_PATH,
            start=start,
            goal=goal,
            expanded=expanded,
            records=records,
        )

    def _successors(
        self, node: Node, lengths: dict[Edge, float]
    ) -> dict[Node, tuple[Edge, float]]:
        """
        Map each distinct target of node's out edges to the edge reaching it.

        When several edges lead to the same target, the shortest one wins
        (the first in edge order on ties). Edge lengths are cached in the
        run's lengths map; the edges themselves are not written to.
        """
        successors: dict[Node, tuple[Edge, float]] = {}
        for edge in node.out_edges:
            length = lengths.get(edge)
            if length is None:
                length = lengths[edge] = edge.measure(self._metric)
            target = self._model.target_of(edge)
            if target is None:
                raise InvalidTopologyError(
                    f"{edge!r} leaving {node!r} has no target node",
                    edge=edge,
                    node=node,
                )
            best = successors.get(target)
            if best is None or length < best[1]:
                successors[target] = (edge, length)
        return successors

    @staticmethod
    def _found(
        start: Node,
        goal: Node,
        records: dict[Node, SearchRecord],
        expanded: int,
    ) -> PathResult:
        nodes: list[Node] = []
        edges: list[Edge] = []
        current: Node | None = goal
        while current is not None:
            nodes.append(current)
            record = records[current]
            if record.parent_edge is not None:
                edges.append(record.parent_edge)
            current = record.parent

        nodes.reverse()
        edges.reverse()
        cost = records[goal].g
        logger.info(
            f"Found path with {len(nodes)} nodes, cost {cost:g}, "
            f"after {expanded} expansions"
        )
        return PathResult(
            outcome=SearchOutcome.FOUND,
            start=start,
            goal=goal,
            path=tuple(nodes),
            edges=tuple(edges),
            cost=cost,
            expanded=expanded,
            records=records,
        )


def astar(
    model: Model,
    start: Node | None = None,
    goal: Node | None = None,
    metric: EdgeMetric | str | None = None,
    max_expansions: int | None = MAX_EXPANSIONS,
) -> PathResult:
    """
    Search a model, inferring whichever endpoint is not given.

    Raises:
        NoEndpointError: If an endpoint must be inferred and has no candidate
    """
    if start is None:
        start = find_start_node(model)
    if goal is None:
        goal = find_goal_node(model)
    return AStarSearch(model, metric=metric, max_expansions=max_expansions).search(
        start, goal
    )
