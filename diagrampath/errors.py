"""
Exceptions raised by the diagram path planner.

Every error subclasses ValueError: they all describe bad input (a broken
graph, a graph with no usable endpoints, an unreadable document).
Running out of candidates during a search is not an error; see
PathResult in diagrampath.search.state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from diagrampath.graph.model import Edge, Node


class DiagramPathError(ValueError):
    """Base class for all diagrampath errors."""


class InvalidTopologyError(DiagramPathError):
    """
    An edge cannot be tied to its owning nodes.

    Attributes:
        edge: The offending edge, if known
        node: The node that referenced it, if known
    """

    def __init__(
        self,
        message: str,
        edge: Edge | None = None,
        node: Node | None = None,
    ) -> None:
        super().__init__(message)
        self.edge = edge
        self.node = node


class NoEndpointError(DiagramPathError):
    """
    No node qualifies as start (or goal) of the model.

    Attributes:
        role: "start" or "goal"
    """

    def __init__(self, role: str, message: str | None = None) -> None:
        super().__init__(message or f"No {role} node candidate in model")
        self.role = role


class ModelFormatError(DiagramPathError):
    """A JSON document does not describe a valid model."""
