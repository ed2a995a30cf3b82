# tests/test_simple_backend/test_add_edge_smart.py
from fractions import Fraction

from zxrewrite.graph.graph_s import GraphS
from zxrewrite.scalar import sqrt2_pow
from zxrewrite.utils import EdgeType, VertexType

from tests.test_rules._base_unittest import tensors_equal
from tests.test_simple_backend._base_unittest import SimpleUnitTestCase


def two_spiders(t0, t1, et):
    """
    Two spiders on their own boundaries, connected by one edge of type et
    """
    g = GraphS()
    b0 = g.add_vertex(VertexType.BOUNDARY)
    v0 = g.add_vertex(t0, phase=Fraction(1, 4))
    v1 = g.add_vertex(t1, phase=Fraction(1, 2))
    b1 = g.add_vertex(VertexType.BOUNDARY)
    g.add_edge((b0, v0))
    g.add_edge((v1, b1))
    g.add_edge((v0, v1), et)
    g.set_inputs([b0])
    g.set_outputs([b1])
    return g, v0, v1


def with_parallel_edge(t0, t1, et0, et1):
    """
    The same diagram with the parallel edge made explicit by an identity spider
    """
    g, v0, v1 = two_spiders(t0, t1, et0)
    mid = g.add_vertex(t0)
    g.add_edge((v0, mid))
    g.add_edge((mid, v1), et1)
    return g


class TestAddEdgeSmart(SimpleUnitTestCase):
    def test_parallel_edges_match_diagram(self):
        for t0 in (VertexType.Z, VertexType.X):
            for t1 in (VertexType.Z, VertexType.X):
                for et0 in (EdgeType.SIMPLE, EdgeType.HADAMARD):
                    for et1 in (EdgeType.SIMPLE, EdgeType.HADAMARD):
                        with self.subTest(t0=t0, t1=t1, et0=et0, et1=et1):
                            g, v0, v1 = two_spiders(t0, t1, et0)
                            g.add_edge_smart((v0, v1), et1)
                            h = with_parallel_edge(t0, t1, et0, et1)
                            self.assertTrue(tensors_equal(g, h))

    def test_same_colour_table(self):
        g, v0, v1 = two_spiders(VertexType.Z, VertexType.Z, EdgeType.SIMPLE)
        g.add_edge_smart((v0, v1), EdgeType.SIMPLE)
        self.assertEqual(g.edge_type(g.edge(v0, v1)), EdgeType.SIMPLE)
        self.assertScalarEqual(g.scalar, 1)

        g, v0, v1 = two_spiders(VertexType.Z, VertexType.Z, EdgeType.HADAMARD)
        g.add_edge_smart((v0, v1), EdgeType.HADAMARD)
        self.assertFalse(g.connected(v0, v1))
        self.assertScalarEqual(g.scalar, sqrt2_pow(-2))

        g, v0, v1 = two_spiders(VertexType.Z, VertexType.Z, EdgeType.HADAMARD)
        g.add_edge_smart((v0, v1), EdgeType.SIMPLE)
        self.assertEqual(g.edge_type(g.edge(v0, v1)), EdgeType.SIMPLE)
        self.assertEqual(g.phase(v0), Fraction(5, 4))
        self.assertScalarEqual(g.scalar, sqrt2_pow(-1))

    def test_opposite_colour_table(self):
        g, v0, v1 = two_spiders(VertexType.Z, VertexType.X, EdgeType.SIMPLE)
        g.add_edge_smart((v0, v1), EdgeType.SIMPLE)
        self.assertFalse(g.connected(v0, v1))
        self.assertScalarEqual(g.scalar, sqrt2_pow(-2))

        g, v0, v1 = two_spiders(VertexType.Z, VertexType.X, EdgeType.HADAMARD)
        g.add_edge_smart((v0, v1), EdgeType.HADAMARD)
        self.assertEqual(g.edge_type(g.edge(v0, v1)), EdgeType.HADAMARD)
        self.assertScalarEqual(g.scalar, 1)

        g, v0, v1 = two_spiders(VertexType.Z, VertexType.X, EdgeType.SIMPLE)
        g.add_edge_smart((v0, v1), EdgeType.HADAMARD)
        self.assertEqual(g.edge_type(g.edge(v0, v1)), EdgeType.HADAMARD)
        self.assertEqual(g.phase(v0), Fraction(5, 4))
        self.assertScalarEqual(g.scalar, sqrt2_pow(-1))

    def test_self_loops(self):
        g, v0, v1 = two_spiders(VertexType.Z, VertexType.Z, EdgeType.SIMPLE)
        g.add_edge_smart((v0, v0), EdgeType.SIMPLE)
        self.assertEqual(g.phase(v0), Fraction(1, 4))
        self.assertScalarEqual(g.scalar, 1)

        g.add_edge_smart((v1, v1), EdgeType.HADAMARD)
        self.assertEqual(g.phase(v1), Fraction(3, 2))
        self.assertScalarEqual(g.scalar, sqrt2_pow(-1))
        self.assertEqual(g.num_edges(), 3)

    def test_unsupported_parallel_edges(self):
        g = self._setup_standard_graph()
        with self.assertRaises(ValueError):
            g.add_edge_smart((0, 1), EdgeType.SIMPLE)
        with self.assertRaises(ValueError):
            g.add_edge_smart((0, 0), EdgeType.HADAMARD)

    def test_new_edge(self):
        g = self._setup_standard_graph()
        g.add_edge_smart((0, 3), EdgeType.HADAMARD)
        self.assertEqual(g.edge_type(g.edge(0, 3)), EdgeType.HADAMARD)
        self.assertScalarEqual(g.scalar, 1)
