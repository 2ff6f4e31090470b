"""
Straight-line distance heuristic.
"""

from __future__ import annotations

from diagrampath.graph.geometry import euclidean_distance
from diagrampath.graph.model import Node


def straight_line(node: Node, goal: Node) -> float:
    """
    Estimate the remaining cost from node to goal.

    Args:
        node: Node being scored
        goal: Search goal

    Returns:
        Euclidean distance between the two node locations
    """
    return euclidean_distance(node.location, goal.location)
