# tests/test_rules/_base_unittest.py
import itertools
import unittest
from typing import Dict, Iterator, Mapping

from pyzx.graph.graph_s import GraphS as SimpleGraph
from pyzx.tensor import compare_tensors, tensorfy

from zxrewrite.graph.graph_s import GraphS
from zxrewrite.scalar import Scalar
from zxrewrite.utils import VertexType


def assignments(g, h) -> Iterator[Dict[str, int]]:
    """Every 0/1 assignment of the variables occurring in either graph."""
    names = sorted(g.all_vars() | h.all_vars())
    for bits in itertools.product((0, 1), repeat=len(names)):
        yield dict(zip(names, bits))


def evaluated(g, assignment: Mapping[str, int]) -> SimpleGraph:
    """
    A plain pyzx graph with the same linear map as ``g`` at ``assignment``.

    Works for any backend. Inputs go on row 0, outputs on row 2 and every
    other vertex on row 1, with the qubit index given by the position in
    the input or output list, which is the layout ``tensorfy`` contracts
    correctly. A boundary that is neither an input nor an output is
    treated as an extra output.
    """
    inputs = list(g.inputs())
    outputs = list(g.outputs())
    for v in sorted(g.vertices()):
        if g.type(v) == VertexType.BOUNDARY and v not in inputs and v not in outputs:
            outputs.append(v)

    h = SimpleGraph()
    vmap = {}
    for v in sorted(g.vertices()):
        p, vs = g.phase_and_vars(v)
        if v in inputs:
            row, qubit = 0, inputs.index(v)
        elif v in outputs:
            row, qubit = 2, outputs.index(v)
        else:
            row, qubit = 1, -1
        vmap[v] = h.add_vertex(g.type(v), qubit=qubit, row=row,
                               phase=p + sum(assignment[x] for x in vs))
    for e in g.edges():
        s, t = g.edge_st(e)
        h.add_edge((vmap[s], vmap[t]), g.edge_type(e))
    h.set_inputs(tuple(vmap[v] for v in inputs))
    h.set_outputs(tuple(vmap[v] for v in outputs))
    h.scalar = g.scalar_value(assignment)
    return h


def tensors_equal(g, h) -> bool:
    """Compares the tensors of two graphs, scalar included, at every assignment."""
    for a in assignments(g, h):
        if not compare_tensors(tensorfy(evaluated(g, a)), tensorfy(evaluated(h, a)),
                               preserve_scalar=True):
            return False
    return True


class RuleTestCase(unittest.TestCase):
    """
    Base for rule tests on the simple backend. Rewrites are checked by
    comparing tensors, including the global scalar.
    """

    def setUp(self):
        self.g = GraphS()

    def assertTensorEqual(self, g, h, msg=None):
        for a in assignments(g, h):
            tg = tensorfy(evaluated(g, a))
            th = tensorfy(evaluated(h, a))
            self.assertTrue(
                compare_tensors(tg, th, preserve_scalar=True),
                msg or f"Tensors differ at {a}:\n{tg}\n{th}",
            )

    def assertScalarEqual(self, s, value, msg=None):
        if isinstance(value, Scalar):
            value = value.to_number()
        self.assertAlmostEqual(complex(s.to_number()), complex(value), msg=msg)

    def assertUnchanged(self, g, snapshot):
        self.assertEqual(g.snapshot(), snapshot)
