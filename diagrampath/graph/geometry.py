"""
Geometry primitives shared by nodes and edges.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

import numpy as np


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Size:
    width: float
    height: float


class EdgeMetric(str, Enum):
    """How the length of an edge path is measured."""

    MANHATTAN = "manhattan"
    REFERENCE = "reference"  # diagonal two-point edges keep their old length
    EUCLIDEAN = "euclidean"

    @classmethod
    def from_name(cls, name: str | EdgeMetric) -> EdgeMetric:
        if isinstance(name, EdgeMetric):
            return name
        try:
            return cls(name.lower())
        except ValueError:
            available = ", ".join(m.value for m in cls)
            raise ValueError(
                f"Unknown edge metric '{name}'. Available: {available}"
            ) from None


def euclidean_distance(a: Point, b: Point) -> float:
    """Straight-line distance between two points."""
    return math.hypot(b.x - a.x, b.y - a.y)


def manhattan_distance(a: Point, b: Point) -> float:
    return abs(b.x - a.x) + abs(b.y - a.y)


def origo_distance(p: Point) -> float:
    """Distance from the coordinate origin."""
    return math.hypot(p.x, p.y)


def polyline_length(points: Sequence[Point], metric: EdgeMetric) -> float:
    """
    Total length of a polyline, segment by segment.

    Args:
        points: Ordered points of the polyline (at least one)
        metric: EUCLIDEAN sums straight-line segment lengths, every other
            metric sums |dx| + |dy|

    Returns:
        Length of the polyline (0.0 for a single point)
    """
    coords = np.array([(p.x, p.y) for p in points], dtype=float)
    deltas = np.abs(np.diff(coords, axis=0))
    if len(deltas) == 0:
        return 0.0
    if metric is EdgeMetric.EUCLIDEAN:
        return float(np.hypot(deltas[:, 0], deltas[:, 1]).sum())
    return float(deltas.sum())
