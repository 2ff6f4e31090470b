"""
Start and goal inference from model topology.

A start candidate has out edges but no in edges; a goal candidate has in
edges but no out edges. Among the candidates, the start is the one
closest to the coordinate origin and the goal the one farthest from it.
"""

from __future__ import annotations

import logging

import numpy as np

from diagrampath.errors import NoEndpointError
from diagrampath.graph.model import Model, Node

logger = logging.getLogger(__name__)


def start_candidates(model: Model) -> list[Node]:
    """Nodes with no in edges and at least one out edge, in model order."""
    return [n for n in model.nodes if not n.in_edges and n.out_edges]


def goal_candidates(model: Model) -> list[Node]:
    """Nodes with at least one in edge and no out edges, in model order."""
    return [n for n in model.nodes if n.in_edges and not n.out_edges]


def _origo_distances(nodes: list[Node]) -> np.ndarray:
    coords = np.array([(n.location.x, n.location.y) for n in nodes], dtype=float)
    return np.hypot(coords[:, 0], coords[:, 1])


def find_start_node(model: Model) -> Node:
    """
    Pick the start candidate closest to the origin.

    Ties go to the candidate that comes first in the model.

    Raises:
        NoEndpointError: If no node qualifies as a start
    """
    candidates = start_candidates(model)
    if not candidates:
        raise NoEndpointError(
            "start",
            f"No start node in {model!r}: every node with out edges also has in edges",
        )
    start = candidates[int(np.argmin(_origo_distances(candidates)))]
    logger.debug(f"Start node: {start!r} ({len(candidates)} candidates)")
    return start


def find_goal_node(model: Model) -> Node:
    """
    Pick the goal candidate farthest from the origin.

    Ties go to the candidate that comes first in the model.

    Raises:
        NoEndpointError: If no node qualifies as a goal
    """
    candidates = goal_candidates(model)
    if not candidates:
        raise NoEndpointError(
            "goal",
            f"No goal node in {model!r}: every node with in edges also has out edges",
        )
    goal = candidates[int(np.argmax(_origo_distances(candidates)))]
    logger.debug(f"Goal node: {goal!r} ({len(candidates)} candidates)")
    return goal


def infer_endpoints(model: Model) -> tuple[Node, Node]:
    """Return the (start, goal) pair of a model."""
    return find_start_node(model), find_goal_node(model)
