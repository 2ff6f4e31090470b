"""
Graph module.

Provides the diagram graph data model and endpoint inference:
- Point, Size: Geometry values
- Edge, Node, Model: Directed, geometrically-embedded graph
- find_start_node / find_goal_node: Infer search endpoints from topology
"""

from diagrampath.graph.endpoints import (
    find_goal_node,
    find_start_node,
    goal_candidates,
    infer_endpoints,
    start_candidates,
)
from diagrampath.graph.geometry import (
    EdgeMetric,
    Point,
    Size,
    euclidean_distance,
    manhattan_distance,
    origo_distance,
    polyline_length,
)
from diagrampath.graph.model import Edge, Model, Node

__all__ = [
    "Point",
    "Size",
    "EdgeMetric",
    "Edge",
    "Node",
    "Model",
    "euclidean_distance",
    "manhattan_distance",
    "origo_distance",
    "polyline_length",
    "start_candidates",
    "goal_candidates",
    "find_start_node",
    "find_goal_node",
    "infer_endpoints",
]
