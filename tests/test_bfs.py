"""
Unit tests for breadth-first traversal.
"""

import pytest

from diagrampath.errors import InvalidTopologyError
from diagrampath.graph import Edge, Model, Node, Point, Size
from diagrampath.search import breadth_first_order


class TestTraversal:
    """Test visit order and coverage."""

    def test_discovery_order(self, diamond):
        """Nodes come out level by level, in edge order."""
        model, nodes, _ = diamond
        result = breadth_first_order(model, nodes["a"])
        assert result.order == [nodes["a"], nodes["b"], nodes["c"], nodes["d"]]

    def test_depths(self, diamond):
        """Depth is the hop count of first discovery."""
        model, nodes, _ = diamond
        result = breadth_first_order(model, nodes["a"])
        assert result.depths[nodes["a"]] == 0
        assert result.depths[nodes["c"]] == 1
        assert result.depths[nodes["d"]] == 2

    def test_cycles_visit_once(self, make_graph):
        """Every reachable node is visited exactly once despite cycles."""
        model, nodes, _ = make_graph(
            {"a": (0, 0), "b": (1, 0), "c": (2, 0), "d": (3, 0)},
            [("a", "b"), ("b", "c"), ("c", "a"), ("c", "b"), ("b", "d"), ("d", "d")],
        )
        result = breadth_first_order(model, nodes["a"])
        assert len(result.order) == len(set(result.order)) == 4

    def test_unreachable_nodes_skipped(self, make_graph):
        """Nodes not reachable through out edges are not visited."""
        model, nodes, _ = make_graph(
            {"a": (0, 0), "b": (1, 0), "c": (5, 5), "d": (6, 6)},
            [("a", "b"), ("c", "d"), ("d", "a")],
        )
        result = breadth_first_order(model, nodes["a"])
        assert result.order == [nodes["a"], nodes["b"]]
        assert result.visited(nodes["b"])
        assert not result.visited(nodes["c"])

    def test_start_inferred(self, diamond):
        """Without a start, the inferred start node is used."""
        model, nodes, _ = diamond
        assert breadth_first_order(model).start is nodes["a"]

    def test_max_depth(self, diamond):
        """Edges beyond max_depth hops are not followed."""
        model, nodes, _ = diamond
        result = breadth_first_order(model, nodes["a"], max_depth=1)
        assert result.order == [nodes["a"], nodes["b"], nodes["c"]]
        assert len(result) == 3


class TestInvalidInput:
    """Test traversal errors."""

    def test_dangling_edge_raises(self):
        """Following an edge without a target is a topology error."""
        dangling = Edge("flow", [Point(0, 0), Point(5, 0)])
        a = Node("a", Point(0, 0), Size(1, 1), out_edges=[dangling])
        with pytest.raises(InvalidTopologyError):
            breadth_first_order(Model([a]), a)

    def test_foreign_start_raises(self, diamond):
        """The start node must belong to the model."""
        model, _, _ = diamond
        with pytest.raises(ValueError, match="not part of"):
            breadth_first_order(model, Node("x", Point(0, 0), Size(1, 1)))
