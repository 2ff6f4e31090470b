"""
Breadth-first traversal over out edges.

Used for reachability and discovery order only; no costs are tracked.
"""

from __future__ import annotations

import logging
from collections import deque

from diagrampath.config import BFS_MAX_DEPTH
from diagrampath.errors import InvalidTopologyError
from diagrampath.graph.endpoints import find_start_node
from diagrampath.graph.model import Model, Node
from diagrampath.search.state import TraversalResult

logger = logging.getLogger(__name__)


def breadth_first_order(
    model: Model,
    start: Node | None = None,
    max_depth: int | None = BFS_MAX_DEPTH,
) -> TraversalResult:
    """
    Visit every node reachable from start, each exactly once.

    Args:
        model: Model to walk
        start: Node to start from (inferred from the model if None)
        max_depth: Do not follow edges beyond this many hops (None = no limit)

    Returns:
        TraversalResult with nodes in first-discovered order

    Raises:
        ValueError: If start is not part of the model
        NoEndpointError: If start must be inferred and has no candidate
        InvalidTopologyError: If a followed edge has no target node
    """
    if start is None:
        start = find_start_node(model)
    elif start not in model:
        raise ValueError(f"Start {start!r} is not part of {model!r}")

    result = TraversalResult(start=start, order=[start], depths={start: 0})
    queue = deque([start])

    while queue:
        current = queue.popleft()
        depth = result.depths[current]

        if max_depth is not None and depth >= max_depth:
            continue

        for edge in current.out_edges:
            neighbor = model.target_of(edge)
            if neighbor is None:
                raise InvalidTopologyError(
                    f"{edge!r} leaving {current!r} has no target node",
                    edge=edge,
                    node=current,
                )
            if neighbor in result.depths:
                continue

            result.depths[neighbor] = depth + 1
            result.order.append(neighbor)
            queue.append(neighbor)

    logger.info(f"BFS from {start!r} visited {len(result)} of {len(model)} nodes")
    return result
