"""
Heuristics module.

Provides the cost-to-go estimate used by A*:
- straight_line: Euclidean distance between node locations

Note: edge costs are measured along the edge path (see EdgeMetric), while
this estimate uses node locations. With the default Manhattan edge metric
an edge that leaves a node from its right side can be shorter than the
straight line between the two node locations, so the estimate is not
guaranteed to be admissible.
"""

from diagrampath.heuristics.straight_line import straight_line

__all__ = ["straight_line"]
