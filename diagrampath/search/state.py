"""
Per-run search state and result dataclasses.

Cost accounting lives in SearchRecord objects owned by a single run,
never on the nodes themselves, so one model can be searched any number
of times.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from diagrampath.graph.model import Edge, Node


class SearchOutcome(str, Enum):
    FOUND = "found"
    NO_PATH = "no_path"
    LIMIT_REACHED = "limit_reached"


@dataclass
class SearchRecord:
    """
    Scratch state for one node during one search run.

    Attributes:
        g: Cost of the best known path from the start
        h: Heuristic estimate of the remaining cost to the goal
        f: g + h, orders the open list
        parent: Predecessor on the best known path (None for the start)
        parent_edge: Edge taken from the parent
        parent_edge_length: Length of parent_edge
        visited: Whether the node has been expanded
    """

    g: float = 0.0
    h: float = 0.0
    f: float = 0.0
    parent: Node | None = None
    parent_edge: Edge | None = None
    parent_edge_length: float = 0.0
    visited: bool = False


@dataclass
class PathResult:
    """
    Outcome of a shortest-path search.

    Attributes:
        outcome: FOUND, NO_PATH or LIMIT_REACHED
        start: Start node of the search
        goal: Goal node of the search
        path: Nodes from start to goal inclusive, None unless found
        edges: Edges traversed along path (empty unless found)
        cost: Accumulated cost at the goal, None unless found
        expanded: Number of nodes taken off the open list
        records: Scratch state of every node the run touched
    """

    outcome: SearchOutcome
    start: Node
    goal: Node
    path: tuple[Node, ...] | None = None
    edges: tuple[Edge, ...] = ()
    cost: float | None = None
    expanded: int = 0
    records: dict[Node, SearchRecord] = field(default_factory=dict, repr=False)

    @property
    def found(self) -> bool:
        return self.outcome is SearchOutcome.FOUND

    def __bool__(self) -> bool:
        return self.found


@dataclass
class TraversalResult:
    """
    Outcome of a breadth-first traversal.

    Attributes:
        start: Node the traversal started from
        order: Nodes in first-discovered order (start first)
        depths: Hop count from start for every visited node
    """

    start: Node
    order: list[Node] = field(default_factory=list)
    depths: dict[Node, int] = field(default_factory=dict, repr=False)

    def visited(self, node: Node) -> bool:
        """Whether node was reached by the traversal."""
        return node in self.depths

    def __len__(self) -> int:
        return len(self.order)
