"""
Unit tests for the Edge, Node, and Model data model.
"""

import pytest

from diagrampath.errors import InvalidTopologyError
from diagrampath.graph import Edge, EdgeMetric, Model, Node, Point, Size


def edge(*coords, kind="flow") -> Edge:
    return Edge(kind, [Point(x, y) for x, y in coords])


class TestEdgeLength:
    """Test edge length computation."""

    def test_length_unset_until_computed(self):
        """Length is None before compute_length()."""
        assert edge((0, 0), (0, 5)).length is None

    def test_vertical_two_point_edge(self):
        """Vertically aligned points use |dy|."""
        e = edge((0, 0), (0, 5))
        assert e.compute_length() == 5
        assert e.length == 5

    def test_horizontal_two_point_edge(self):
        """Horizontally aligned points use |dx|."""
        assert edge((0, 0), (5, 0)).compute_length() == 5

    def test_multi_point_edge_is_manhattan_sum(self):
        """Three-point edge sums Manhattan segment lengths."""
        assert edge((0, 0), (3, 0), (3, 4)).compute_length() == 7

    @pytest.mark.parametrize("metric", list(EdgeMetric))
    def test_axis_aligned_edges_agree_across_metrics(self, metric):
        """Every metric measures axis-aligned edges the same way."""
        assert edge((0, 0), (0, 5)).compute_length(metric) == 5
        assert edge((0, 0), (3, 0), (3, 4)).compute_length(metric) == 7

    def test_diagonal_edge_manhattan(self):
        """The default metric measures a diagonal edge as |dx| + |dy|."""
        assert edge((0, 0), (3, 4)).compute_length(EdgeMetric.MANHATTAN) == 7

    def test_diagonal_edge_euclidean(self):
        """The Euclidean metric measures the straight line."""
        assert edge((0, 0), (3, 4)).compute_length(EdgeMetric.EUCLIDEAN) == 5

    def test_diagonal_edge_reference_is_zero(self):
        """The reference metric gives a fresh diagonal edge length 0."""
        assert edge((0, 0), (3, 4)).compute_length(EdgeMetric.REFERENCE) == 0

    def test_diagonal_edge_reference_ignores_earlier_length(self):
        """The reference metric gives 0 even after another metric ran."""
        e = edge((0, 0), (3, 4))
        e.compute_length(EdgeMetric.MANHATTAN)
        assert e.compute_length(EdgeMetric.REFERENCE) == 0
        assert e.measure(EdgeMetric.REFERENCE) == 0

    def test_measure_does_not_store(self):
        """measure() leaves the stored length alone."""
        e = edge((0, 0), (3, 4))
        assert e.measure(EdgeMetric.MANHATTAN) == 7
        assert e.length is None

    def test_metric_by_name(self):
        """Metrics can be passed by name."""
        assert edge((0, 0), (3, 4)).compute_length("euclidean") == 5

    def test_short_path_raises(self):
        """An edge needs at least two points."""
        with pytest.raises(InvalidTopologyError, match="at least two"):
            edge((0, 0))


class TestEdgeSnap:
    """Test snapping edge endpoints onto node boundaries."""

    def test_connect_start_to_node(self):
        """First point moves to the middle of the node's right side."""
        node = Node("task", Point(10, 20), Size(100, 50))
        e = edge((0, 0), (200, 45))
        e.compute_length()
        e.connect_start_to_node(node)
        assert e.path[0] == Point(110, 45)
        assert e.length is None
        assert e.compute_length() == 90

    def test_connect_end_to_node(self):
        """Last point moves to the middle of the node's left side."""
        node = Node("task", Point(300, 0), Size(80, 40))
        e = edge((0, 20), (150, 20), (150, 99), (999, 99))
        e.connect_end_to_node(node)
        assert e.path[-1] == Point(300, 20)
        assert e.path[:3] == (Point(0, 20), Point(150, 20), Point(150, 99))


class TestNode:
    """Test node attributes and identity."""

    def test_identity_equality(self):
        """Nodes with identical attributes are still distinct."""
        a = Node("task", Point(0, 0), Size(1, 1))
        b = Node("task", Point(0, 0), Size(1, 1))
        assert a != b
        assert len({a, b}) == 2

    def test_edges_deduplicated_in_order(self):
        """Repeated edges are dropped, first occurrence kept."""
        e1, e2 = edge((0, 0), (1, 0)), edge((0, 0), (0, 1))
        node = Node("task", Point(0, 0), Size(1, 1), out_edges=[e1, e2, e1])
        assert node.out_edges == (e1, e2)

    def test_edges_union(self):
        """edges() combines out and in edges."""
        e1, e2 = edge((0, 0), (1, 0)), edge((0, 0), (0, 1))
        node = Node("task", Point(0, 0), Size(1, 1), out_edges=[e1], in_edges=[e2])
        assert node.edges() == (e1, e2)

    def test_origo_distance(self):
        """Origo distance is measured from the location."""
        assert Node("task", Point(3, 4), Size(10, 10)).origo_distance == 5

    def test_center(self):
        """Center sits half a size from the location."""
        assert Node("task", Point(10, 20), Size(100, 50)).center == Point(60, 45)


class TestModel:
    """Test model construction and edge binding."""

    def test_binds_source_and_target(self, diamond):
        """The model knows both nodes of every edge."""
        model, nodes, edges = diamond
        ab = edges[0]
        assert model.source_of(ab) is nodes["a"]
        assert model.target_of(ab) is nodes["b"]

    def test_second_model_leaves_first_intact(self, diamond):
        """Building a model from shared nodes does not rebind the first."""
        model, nodes, edges = diamond
        partial = Model([nodes["a"], nodes["b"]])
        bd = edges[2]
        assert partial.target_of(bd) is None
        assert model.source_of(bd) is nodes["b"]
        assert model.target_of(bd) is nodes["d"]
        model.validate()

    def test_membership(self, diamond):
        """Model supports len, iteration and identity membership."""
        model, nodes, _ = diamond
        assert len(model) == 4
        assert list(model) == list(nodes.values())
        assert nodes["a"] in model
        assert Node("a", Point(0, 0), Size(10, 10)) not in model

    def test_duplicate_nodes_dropped(self):
        """A node passed twice appears once."""
        node = Node("task", Point(0, 0), Size(1, 1))
        assert Model([node, node]).nodes == (node,)

    def test_default_kind(self):
        """Models without a kind use the configured default."""
        assert Model([]).kind == "diagram"

    def test_edges_listed_once(self, diamond):
        """edges() returns each edge once."""
        model, _, edges = diamond
        assert set(model.edges()) == set(edges)
        assert len(model.edges()) == len(edges)

    def test_two_sources_raise(self):
        """An edge claimed as out edge by two nodes is rejected."""
        e = edge((0, 0), (1, 0))
        a = Node("a", Point(0, 0), Size(1, 1), out_edges=[e])
        b = Node("b", Point(5, 0), Size(1, 1), out_edges=[e])
        with pytest.raises(InvalidTopologyError, match="out edge of both") as exc:
            Model([a, b])
        assert exc.value.edge is e

    def test_two_targets_raise(self):
        """An edge claimed as in edge by two nodes is rejected."""
        e = edge((0, 0), (1, 0))
        a = Node("a", Point(0, 0), Size(1, 1), in_edges=[e])
        b = Node("b", Point(5, 0), Size(1, 1), in_edges=[e])
        with pytest.raises(InvalidTopologyError, match="in edge of both"):
            Model([a, b])

    def test_validate_passes(self, diamond):
        """A fully connected model validates."""
        model, _, _ = diamond
        model.validate()

    def test_validate_dangling_target(self):
        """An edge nobody receives leaves its target unbound."""
        e = edge((0, 0), (1, 0))
        a = Node("a", Point(0, 0), Size(1, 1), out_edges=[e])
        model = Model([a])
        assert model.target_of(e) is None
        with pytest.raises(InvalidTopologyError, match="no target node") as exc:
            model.validate()
        assert exc.value.node is a

    def test_validate_dangling_source(self):
        """An edge nobody sends has no source."""
        e = edge((0, 0), (1, 0))
        b = Node("b", Point(0, 0), Size(1, 1), in_edges=[e])
        with pytest.raises(InvalidTopologyError, match="no source node"):
            Model([b]).validate()
