"""
Graph data model: edges, nodes, and the model that owns them.

Nodes and edges compare by identity. A Model records, for every edge, the
node that holds it as an out edge (its source) and the node that holds
it as an in edge (its target), so searches never have to scan for the
owner of an edge.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from diagrampath.config import DEFAULT_MODEL_KIND, EDGE_METRIC
from diagrampath.errors import InvalidTopologyError
from diagrampath.graph.geometry import (
    EdgeMetric,
    Point,
    Size,
    origo_distance,
    polyline_length,
)

logger = logging.getLogger(__name__)


class Edge:
    """
    Directed connector between two nodes, drawn as a polyline.

    Attributes:
        kind: Type label of the edge
        path: Ordered points of the polyline (at least two)
        length: Last computed length, None until compute_length() runs

    The nodes an edge connects are looked up through the Model that holds
    them (Model.source_of / Model.target_of), so one edge can take part in
    several models without any of them rewriting it.
    """

    def __init__(self, kind: str, path: Iterable[Point]) -> None:
        points = tuple(path)
        if len(points) < 2:
            raise InvalidTopologyError(
                f"Edge '{kind}' needs at least two path points, got {len(points)}"
            )
        self._kind = kind
        self._path = points
        self.length: float | None = None

    @property
    def kind(self) -> str:
        return self._kind

    @property
    def path(self) -> tuple[Point, ...]:
        return self._path

    def measure(self, metric: EdgeMetric | str | None = None) -> float:
        """
        Length of the edge path under a metric, without storing it.

        Under REFERENCE, a diagonal two-point edge measures 0.

        Args:
            metric: Edge metric to use (defaults to config.EDGE_METRIC)
        """
        metric = EdgeMetric.from_name(metric or EDGE_METRIC)

        if metric is EdgeMetric.REFERENCE and len(self._path) == 2:
            start, end = self._path
            if start.x == end.x:
                return float(abs(end.y - start.y))
            if start.y == end.y:
                return float(abs(end.x - start.x))
            return 0.0

        return polyline_length(self._path, metric)

    def compute_length(self, metric: EdgeMetric | str | None = None) -> float:
        """
        Compute and store the length of the edge path.

        Searches call measure() instead and keep lengths per run.

        Returns:
            The new length
        """
        self.length = self.measure(metric)
        return self.length

    def connect_start_to_node(self, node: Node) -> None:
        """Snap the first path point to the middle of the node's right side."""
        loc, size = node.location, node.size
        snapped = Point(loc.x + size.width, loc.y + size.height / 2)
        self._path = (snapped,) + self._path[1:]
        self.length = None

    def connect_end_to_node(self, node: Node) -> None:
        """Snap the last path point to the middle of the node's left side."""
        loc, size = node.location, node.size
        snapped = Point(loc.x, loc.y + size.height / 2)
        self._path = self._path[:-1] + (snapped,)
        self.length = None

    def __repr__(self) -> str:
        points = ", ".join(f"({p.x:g}, {p.y:g})" for p in self._path)
        return f"Edge(kind={self._kind!r}, path=[{points}])"


class Node:
    """
    Graph vertex placed on the diagram.

    Edge membership is fixed at construction: out_edges and in_edges are
    ordered tuples with duplicates removed.
    """

    def __init__(
        self,
        kind: str,
        location: Point,
        size: Size,
        out_edges: Iterable[Edge] = (),
        in_edges: Iterable[Edge] = (),
    ) -> None:
        self._kind = kind
        self._location = location
        self._size = size
        self._out_edges = tuple(dict.fromkeys(out_edges))
        self._in_edges = tuple(dict.fromkeys(in_edges))

    @property
    def kind(self) -> str:
        return self._kind

    @property
    def location(self) -> Point:
        return self._location

    @property
    def size(self) -> Size:
        return self._size

    @property
    def out_edges(self) -> tuple[Edge, ...]:
        return self._out_edges

    @property
    def in_edges(self) -> tuple[Edge, ...]:
        return self._in_edges

    @property
    def origo_distance(self) -> float:
        """Distance from the node's location to the coordinate origin."""
        return origo_distance(self._location)

    @property
    def center(self) -> Point:
        return Point(
            self._location.x + self._size.width / 2,
            self._location.y + self._size.height / 2,
        )

    def edges(self) -> tuple[Edge, ...]:
        """All edges touching this node, out edges first."""
        return tuple(dict.fromkeys(self._out_edges + self._in_edges))

    def __repr__(self) -> str:
        return (
            f"Node(kind={self._kind!r}, "
            f"location=({self._location.x:g}, {self._location.y:g}))"
        )


class Model:
    """
    Immutable collection of nodes, the unit of input to a search.

    Building a Model records, for each edge, its source and target node.
    The edges themselves are left untouched.

    Raises:
        InvalidTopologyError: If two nodes claim the same edge as an out
            edge, or two nodes claim it as an in edge
    """

    def __init__(self, nodes: Iterable[Node], kind: str = DEFAULT_MODEL_KIND) -> None:
        self._kind = kind
        self._nodes = tuple(dict.fromkeys(nodes))
        self._members = frozenset(self._nodes)
        self._bind_edges()
        logger.debug(
            f"Built model '{kind}' with {len(self._nodes)} nodes "
            f"and {len(self.edges())} edges"
        )

    def _bind_edges(self) -> None:
        self._sources: dict[Edge, Node] = {}
        self._targets: dict[Edge, Node] = {}
        sources, targets = self._sources, self._targets

        for node in self._nodes:
            for edge in node.out_edges:
                owner = sources.setdefault(edge, node)
                if owner is not node:
                    raise InvalidTopologyError(
                        f"{edge!r} is an out edge of both {owner!r} and {node!r}",
                        edge=edge,
                        node=node,
                    )
            for edge in node.in_edges:
                owner = targets.setdefault(edge, node)
                if owner is not node:
                    raise InvalidTopologyError(
                        f"{edge!r} is an in edge of both {owner!r} and {node!r}",
                        edge=edge,
                        node=node,
                    )

    def source_of(self, edge: Edge) -> Node | None:
        """Node holding edge as an out edge, None if there is none."""
        return self._sources.get(edge)

    def target_of(self, edge: Edge) -> Node | None:
        """Node holding edge as an in edge, None if there is none."""
        return self._targets.get(edge)

    @property
    def kind(self) -> str:
        return self._kind

    @property
    def nodes(self) -> tuple[Node, ...]:
        return self._nodes

    def edges(self) -> tuple[Edge, ...]:
        """Every distinct edge referenced by the model's nodes."""
        seen: dict[Edge, None] = {}
        for node in self._nodes:
            for edge in node.edges():
                seen.setdefault(edge)
        return tuple(seen)

    def validate(self) -> None:
        """
        Check that every edge has both a source and a target node.

        Raises:
            InvalidTopologyError: For the first dangling edge found
        """
        for edge in self.edges():
            source, target = self.source_of(edge), self.target_of(edge)
            if source is None:
                raise InvalidTopologyError(
                    f"{edge!r} has no source node (it is nobody's out edge)",
                    edge=edge,
                    node=target,
                )
            if target is None:
                raise InvalidTopologyError(
                    f"{edge!r} has no target node (it is nobody's in edge)",
                    edge=edge,
                    node=source,
                )

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __contains__(self, node: object) -> bool:
        return node in self._members

    def __repr__(self) -> str:
        return f"Model(kind={self._kind!r}, nodes={len(self._nodes)})"
