"""
The graph interface the rewrite rules are written against.

:class:`RewriteGraph` extends PyZX's :class:`~pyzx.graph.base.BaseGraph`
with what the rules need on top of a plain ZX-diagram: boolean variables
on the phases (kept in the vertex data under ``'vars'``), a table of
symbolic scalar factors, lookups that report a missing vertex or edge as
``None``, and :meth:`RewriteGraph.add_edge_smart`. A backend provides the
PyZX storage primitives and inherits everything here.
"""

from dataclasses import dataclass, field
from fractions import Fraction
from typing import Any, Dict, List, Mapping, Optional, Tuple

from pyzx.graph.base import BaseGraph, VT, ET
from pyzx.graph.scalar import Scalar

from ..params import Expr
from ..scalar import product
from ..utils import EdgeType, FloatInt, FractionLike, VarSet, VertexType, toggle_edge, vertex_is_zx

VARS_KEY = 'vars'


@dataclass
class VData:
    """All the data attached to a single vertex."""
    ty: VertexType = VertexType.BOUNDARY
    phase: Fraction = Fraction(0)
    vars: VarSet = field(default_factory=frozenset)
    qubit: FloatInt = -1
    row: FloatInt = -1


class RewriteGraph(BaseGraph[VT, ET]):
    """A PyZX graph that the rules in :mod:`zxrewrite.basic_rules` can rewrite.

    Every graph owns its own scalar and its own table of symbolic scalar
    factors. Nothing is shared between instances, so a cloned graph can be
    rewritten independently of the original.
    """

    def __init__(self) -> None:
        super().__init__()
        self.scalar_factors: Dict[Expr, Scalar] = {}

    def add_vertex(self,
                   ty: VertexType = VertexType.BOUNDARY,
                   qubit: FloatInt = -1,
                   row: FloatInt = -1,
                   phase: Optional[FractionLike] = None,
                   ground: bool = False,
                   vars: VarSet = frozenset(),
                   ) -> VT:
        """Add a single vertex to the graph and return its handle."""
        v = super().add_vertex(ty, qubit, row, phase, ground)
        if vars:
            self.set_vars(v, vars)
        return v

    # Variables

    def vars(self, vertex: VT) -> VarSet:
        """The boolean variables XORed into the phase of the vertex."""
        return frozenset(self.vdata(vertex, VARS_KEY, ()))

    def set_vars(self, vertex: VT, vars: VarSet) -> None:
        self.set_vdata(vertex, VARS_KEY, frozenset(vars))

    def add_to_vars(self, vertex: VT, vars: VarSet) -> None:
        """XOR the given variables into the phase of the vertex.

        Adding the same variable twice cancels it, since ``pi*x + pi*x = 0 (mod 2pi)``."""
        if vars:
            self.set_vars(vertex, self.vars(vertex).symmetric_difference(vars))

    def phase_and_vars(self, vertex: VT) -> Tuple[Fraction, VarSet]:
        return self.phase(vertex), self.vars(vertex)

    # Lookups that tolerate stale handles

    def contains_vertex(self, vertex: VT) -> bool:
        return vertex in self.vertices()

    def vertex_type_opt(self, vertex: VT) -> Optional[VertexType]:
        """Returns the type of the vertex, or None for a vertex that doesn't exist
        (e.g. one deleted by an earlier rewrite)."""
        if not self.contains_vertex(vertex):
            return None
        return self.type(vertex)

    def vertex_data_opt(self, vertex: VT) -> Optional[VData]:
        if not self.contains_vertex(vertex):
            return None
        p, vs = self.phase_and_vars(vertex)
        return VData(ty=self.type(vertex), phase=p, vars=vs,
                     qubit=self.qubit(vertex), row=self.row(vertex))

    def edge_type_opt(self, edge: ET) -> Optional[EdgeType]:
        """Returns the type of the edge, or None if the two vertices aren't connected."""
        s, t = self.edge_st(edge)
        if not (self.contains_vertex(s) and self.contains_vertex(t)):
            return None
        if not self.connected(s, t):
            return None
        return self.edge_type(edge)

    def neighbor_edges(self, vertex: VT) -> List[Tuple[VT, EdgeType]]:
        """Every neighbour of the vertex together with the type of the edge to it."""
        return [(n, self.edge_type(self.edge(vertex, n))) for n in self.neighbors(vertex)]

    def neighbor_vec(self, vertex: VT) -> List[VT]:
        """A fresh list of the neighbours, safe to hold on to while the graph is rewritten."""
        return list(self.neighbors(vertex))

    # Edges

    def toggle_edge_type(self, edge: ET) -> None:
        """Turns a simple edge into a Hadamard edge and vice versa."""
        self.set_edge_type(edge, toggle_edge(self.edge_type(edge)))

    def add_edge_smart(self, edge_pair: Tuple[VT, VT], edgetype: EdgeType) -> None:
        """Adds an edge, combining it with an existing edge between the same
        vertices using the ZX-calculus identities.

        Parallel edges between spiders either merge into one edge, or cancel
        out (Hopf law), possibly leaving a pi phase on the first vertex and a
        power of sqrt(2) on the scalar. Self-loops are absorbed into the
        spider. Parallel edges or self-loops on any other kind of vertex
        raise ``ValueError``.
        """
        s, t = edge_pair
        if s == t:
            if not vertex_is_zx(self.type(s)):
                raise ValueError("Self-loops only supported on Z and X spiders")
            if edgetype == EdgeType.HADAMARD:
                self.add_to_phase(s, 1)
                self.scalar.add_power(-1)
            return

        e = self.edge(s, t)
        et0 = self.edge_type_opt(e)
        if et0 is None:
            self.add_edge(edge_pair, edgetype)
            return

        st, tt = self.type(s), self.type(t)
        if not (vertex_is_zx(st) and vertex_is_zx(tt)):
            raise ValueError("Parallel edges only supported between Z and X spiders")
        if EdgeType.W_IO in (et0, edgetype):
            raise ValueError("Parallel W edges are not supported")

        # Pretend both spiders have the same colour by toggling the edge types
        same = EdgeType.SIMPLE if st == tt else EdgeType.HADAMARD
        if et0 == same and edgetype == same:
            pass  # parallel plain wires between same-colour spiders fuse away
        elif et0 != same and edgetype != same:
            self.remove_edge(e)  # Hopf law
            self.scalar.add_power(-2)
        else:
            self.set_edge_type(e, same)
            self.add_to_phase(s, 1)
            self.scalar.add_power(-1)

    # Scalars

    def mul_scalar_factor(self, expr: Expr, s: Scalar) -> None:
        """Multiplies the scalar by ``s`` whenever ``expr`` evaluates to 1."""
        if expr.is_zero():
            return
        if expr.is_one():
            self.scalar.mult_with_scalar(s)
            return
        if expr in self.scalar_factors:
            self.scalar_factors[expr] = product(self.scalar_factors[expr], s)
        else:
            self.scalar_factors[expr] = s.copy()

    def all_vars(self) -> VarSet:
        """Every boolean variable occurring in a phase or a scalar factor."""
        vs = set()
        for v in self.vertices():
            vs.update(self.vars(v))
        for e in self.scalar_factors:
            vs.update(e.variables())
        return frozenset(vs)

    def scalar_value(self, assignment: Optional[Mapping[str, int]] = None) -> Scalar:
        """The global scalar with every symbolic factor evaluated at ``assignment``."""
        s = self.scalar.copy()
        for e, f in self.scalar_factors.items():
            if e.evaluate(assignment or {}):
                s.mult_with_scalar(f)
        return s

    def substitute_vars(self, assignment: Mapping[str, int]) -> 'RewriteGraph[VT, ET]':
        """Returns a copy where every variable has been replaced by its 0/1 value.

        The variables move into the phases, and the symbolic scalar factors
        are folded into the plain scalar."""
        g = self.clone()
        for v in list(g.vertices()):
            p, vs = g.phase_and_vars(v)
            if vs:
                g.set_phase(v, p + sum(assignment[x] for x in vs))
                g.set_vars(v, frozenset())
        g.scalar = self.scalar_value(assignment)
        g.scalar_factors = {}
        return g

    def snapshot(self) -> Dict[str, Any]:
        """A structural snapshot of the graph, suitable for equality checks."""
        return {
            'vertices': {v: (self.type(v), self.phase(v), self.vars(v)) for v in self.vertices()},
            'edges': sorted((tuple(sorted(self.edge_st(e))), self.edge_type(e)) for e in self.edges()),
            'inputs': tuple(self.inputs()),
            'outputs': tuple(self.outputs()),
            'scalar': complex(self.scalar.to_number()),
            'scalar_factors': {e: complex(s.to_number()) for e, s in self.scalar_factors.items()},
        }

    def copy_metadata_to(self, other: 'RewriteGraph[Any, Any]') -> None:
        other.scalar = self.scalar.copy()
        other.scalar_factors = {e: s.copy() for e, s in self.scalar_factors.items()}
