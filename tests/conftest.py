"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from diagrampath.graph import Edge, Model, Node, Point, Size

# (source, target) or (source, target, [(x, y), ...])
Link = tuple


def build_graph(
    locations: dict[str, tuple[float, float]],
    links: list[Link],
    size: tuple[float, float] = (10, 10),
) -> tuple[Model, dict[str, Node], list[Edge]]:
    """
    Build a model from named node locations and directed links.

    A link without an explicit path is drawn as a straight line between
    the two node locations.

    Returns:
        (model, nodes by name, edges in link order)
    """
    out_edges: dict[str, list[Edge]] = {name: [] for name in locations}
    in_edges: dict[str, list[Edge]] = {name: [] for name in locations}
    edges = []

    for link in links:
        source, target = link[0], link[1]
        if len(link) > 2:
            path = [Point(x, y) for x, y in link[2]]
        else:
            path = [Point(*locations[source]), Point(*locations[target])]
        edge = Edge("flow", path)
        out_edges[source].append(edge)
        in_edges[target].append(edge)
        edges.append(edge)

    nodes = {
        name: Node(
            name,
            Point(*loc),
            Size(*size),
            out_edges=out_edges[name],
            in_edges=in_edges[name],
        )
        for name, loc in locations.items()
    }
    return Model(nodes.values(), kind="test"), nodes, edges


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def sample_model_path(project_root: Path) -> Path:
    """Return the bundled sample diagram."""
    return project_root / "data" / "sample_diagram.json"


@pytest.fixture
def make_graph() -> Callable[..., tuple[Model, dict[str, Node], list[Edge]]]:
    """Return the build_graph factory."""
    return build_graph


@pytest.fixture
def diamond(make_graph):
    """
    Diamond with a cheap upper branch and an expensive lower branch.

        a -> b -> d
        a -> c -> d
    """
    return make_graph(
        {"a": (0, 0), "b": (10, 0), "c": (10, 30), "d": (20, 0)},
        [("a", "b"), ("a", "c"), ("b", "d"), ("c", "d")],
    )
