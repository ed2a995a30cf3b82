
"""
Basic local rewrite rules on ZX-diagrams.

The rules come in triples. For a rule ``X`` there is

- ``check_X(g, v, ...)``, which decides whether the rule applies at the
  given vertex or pair of vertices, without touching the graph,
- ``X_unchecked(g, v, ...)``, which performs the rewrite assuming the check
  succeeded, and
- ``X(g, v, ...)``, the composition of the two, which returns ``False``
  and leaves the graph untouched if the rule doesn't apply.

Calling ``X_unchecked`` when ``check_X`` is false may produce a diagram with
a different linear map, or may raise. Checks accept any vertex handle,
including vertices that were removed by an earlier rewrite.

Every rule keeps the linear map of the diagram the same, including the
global scalar. When spiders carry boolean variables, the part of the scalar
that depends on them is recorded with :meth:`RewriteGraph.mul_scalar_factor`.
"""

__all__ = [
    'checked_rule1', 'checked_rule2',
    'check_spider_fusion', 'spider_fusion_unchecked', 'spider_fusion',
    'check_pi_copy', 'pi_copy_unchecked', 'pi_copy',
    'check_remove_id', 'remove_id_unchecked', 'remove_id',
    'check_color_change', 'color_change_unchecked', 'color_change',
    'check_local_comp', 'local_comp_unchecked', 'local_comp',
    'check_pivot1', 'check_pivot2', 'check_pivot', 'pivot_unchecked', 'pivot',
    'unfuse_boundary', 'unfuse_gadget',
    'is_interior_pauli', 'is_boundary_pauli', 'is_boundary_pauli_with_h',
    'is_boundary_proper_clifford',
    'check_gen_pivot', 'check_gen_pivot_reduce', 'check_boundary_pivot',
    'check_h_boundary_pivot', 'gen_pivot_unchecked', 'gen_pivot',
    'boundary_pivot', 'h_boundary_pivot',
    'check_boundary_local_comp', 'boundary_local_comp_unchecked', 'boundary_local_comp',
    'check_gadget_fusion', 'gadget_fusion_unchecked', 'gadget_fusion',
    'check_remove_single', 'remove_single_unchecked', 'remove_single',
    'check_remove_pair', 'remove_pair_unchecked', 'remove_pair', 'minimize_pair_table',
    'check_remove_duplicate', 'remove_duplicate_unchecked', 'remove_duplicate',
]

from fractions import Fraction
from typing import Callable, List, Set, Tuple

from .graph.base import RewriteGraph, VT, ET
from .params import Expr
from .scalar import (Scalar, cexp, from_number, from_phase, minus_one, one_plus_phase,
                     scalar_eq)
from .utils import (EdgeType, VarSet, VertexType, phase_is_pauli, phase_is_zero,
                    phase_is_proper_clifford, toggle_edge, toggle_vertex, vertex_is_zx)

Check1 = Callable[[RewriteGraph[VT, ET], VT], bool]
Rewrite1 = Callable[[RewriteGraph[VT, ET], VT], None]
Check2 = Callable[[RewriteGraph[VT, ET], VT, VT], bool]
Rewrite2 = Callable[[RewriteGraph[VT, ET], VT, VT], None]

HADAMARD = EdgeType.HADAMARD
SIMPLE = EdgeType.SIMPLE


def checked_rule1(check: Check1, unchecked: Rewrite1) -> Callable[[RewriteGraph[VT, ET], VT], bool]:
    """Builds the checked version of a rule acting on a single vertex."""
    def rule(g: RewriteGraph[VT, ET], v: VT) -> bool:
        if check(g, v):
            unchecked(g, v)
            return True
        return False
    rule.__doc__ = "Applies :func:`{}` if :func:`{}` holds. Returns whether it did.".format(
        unchecked.__name__, check.__name__)
    return rule


def checked_rule2(check: Check2, unchecked: Rewrite2) -> Callable[[RewriteGraph[VT, ET], VT, VT], bool]:
    """Builds the checked version of a rule acting on a pair of vertices."""
    def rule(g: RewriteGraph[VT, ET], v0: VT, v1: VT) -> bool:
        if check(g, v0, v1):
            unchecked(g, v0, v1)
            return True
        return False
    rule.__doc__ = "Applies :func:`{}` if :func:`{}` holds. Returns whether it did.".format(
        unchecked.__name__, check.__name__)
    return rule


def _etype(g: RewriteGraph[VT, ET], v0: VT, v1: VT):
    return g.edge_type_opt(g.edge(v0, v1))


def _all_z_hadamard(g: RewriteGraph[VT, ET], v: VT) -> bool:
    """Every neighbour is a Z spider, connected by a Hadamard edge."""
    return all(g.type(n) == VertexType.Z and et == HADAMARD
               for n, et in g.neighbor_edges(v))


# Spider fusion

def check_spider_fusion(g: RewriteGraph[VT, ET], v0: VT, v1: VT) -> bool:
    """Both vertices must be Z or X, have the same type, and be connected
    by a normal (i.e. non-Hadamard) edge."""
    if v0 == v1:
        return False
    t0 = g.vertex_type_opt(v0)
    t1 = g.vertex_type_opt(v1)
    if t0 is None or t1 is None:
        return False
    return t0 == t1 and vertex_is_zx(t0) and _etype(g, v0, v1) == SIMPLE


def spider_fusion_unchecked(g: RewriteGraph[VT, ET], v0: VT, v1: VT) -> None:
    """Fuses ``v1`` into ``v0``. The first vertex is kept, the second is deleted."""
    for v, et in g.neighbor_edges(v1):
        if v != v0:
            g.add_edge_smart((v0, v), et)
    g.add_to_phase(v0, g.phase(v1))
    g.add_to_vars(v0, g.vars(v1))
    g.remove_vertex(v1)


spider_fusion = checked_rule2(check_spider_fusion, spider_fusion_unchecked)


# Pi-copy

def check_pi_copy(g: RewriteGraph[VT, ET], v: VT) -> bool:
    vt = g.vertex_type_opt(v)
    if vt is None or not vertex_is_zx(vt):
        return False
    ovt = toggle_vertex(vt)
    inc = g.neighbor_edges(v)
    # no pi-copy on empty spiders
    if not inc:
        return False
    for n, et in inc:
        nt = g.type(n)
        if et == SIMPLE and nt != ovt:
            return False
        if et == HADAMARD and nt != vt:
            return False
        if et == EdgeType.W_IO:
            return False
    return True


def pi_copy_unchecked(g: RewriteGraph[VT, ET], v: VT) -> None:
    """Flips the phase of a spider by pushing a pi phase onto all its neighbours.

    Every neighbour must be either the opposite colour and connected by a
    normal edge, or the same colour and connected by a Hadamard edge. In
    particular this always applies to a graph-like diagram."""
    phase, vars = g.phase_and_vars(v)
    g.scalar.add_phase(phase)
    g.set_phase(v, -phase)
    if vars:
        g.mul_scalar_factor(Expr.linear(vars), minus_one())
    for n in g.neighbors(v):
        g.add_to_phase(n, 1)


pi_copy = checked_rule1(check_pi_copy, pi_copy_unchecked)


# Identity removal

def check_remove_id(g: RewriteGraph[VT, ET], v: VT) -> bool:
    vd = g.vertex_data_opt(v)
    if vd is None:
        return False
    return (vertex_is_zx(vd.ty)
            and phase_is_zero(vd.phase)
            and not vd.vars
            and g.vertex_degree(v) == 2)


def remove_id_unchecked(g: RewriteGraph[VT, ET], v: VT) -> None:
    """Removes an arity-2 spider with phase 0 and connects its two neighbours.

    The new edge has the parity of the two old ones: {N,N} -> N,
    {N,H} -> H and {H,H} -> N."""
    (n0, et0), (n1, et1) = g.neighbor_edges(v)
    if EdgeType.W_IO in (et0, et1):
        raise NotImplementedError("W nodes not supported")
    new_et = SIMPLE if et0 == et1 else HADAMARD
    g.remove_vertex(v)
    g.add_edge_smart((n0, n1), new_et)


remove_id = checked_rule1(check_remove_id, remove_id_unchecked)


# Colour change

def check_color_change(g: RewriteGraph[VT, ET], v: VT) -> bool:
    return g.vertex_type_opt(v) in (VertexType.Z, VertexType.X)


def color_change_unchecked(g: RewriteGraph[VT, ET], v: VT) -> None:
    """Turns a Z spider into an X spider or vice versa, toggling every incident edge."""
    g.set_type(v, toggle_vertex(g.type(v)))
    for n in g.neighbor_vec(v):
        g.toggle_edge_type(g.edge(v, n))


color_change = checked_rule1(check_color_change, color_change_unchecked)


# Local complementation

def check_local_comp(g: RewriteGraph[VT, ET], v: VT) -> bool:
    """The vertex must be Z, have a phase pi/2 or -pi/2, and be surrounded
    by Hadamard edges connected to other Z spiders."""
    vd = g.vertex_data_opt(v)
    if vd is None:
        return False
    return (vd.ty == VertexType.Z
            and phase_is_proper_clifford(vd.phase)
            and _all_z_hadamard(g, v))


def local_comp_unchecked(g: RewriteGraph[VT, ET], v: VT) -> None:
    """Removes a proper Clifford spider by complementing its neighbourhood.

    This is the N-ary generalisation of the Euler decomposition of the
    Hadamard gate."""
    p, vars = g.phase_and_vars(v)
    ns = g.neighbor_vec(v)
    for i, n in enumerate(ns):
        g.add_to_phase(n, -p)
        g.add_to_vars(n, vars)
        for n1 in ns[i + 1:]:
            g.add_edge_smart((n, n1), HADAMARD)
    g.remove_vertex(v)

    k = len(ns)
    g.scalar.add_power(((k - 1) * (k - 2)) // 2)
    # e^(i p/2) needs p in (-1, 1], i.e. -1/2 rather than 3/2
    signed = p - 2 if p > 1 else p
    g.scalar.add_phase(Fraction(signed) / 2)
    if vars:
        g.mul_scalar_factor(Expr.linear(vars), from_phase(-p))


local_comp = checked_rule1(check_local_comp, local_comp_unchecked)


# Pivoting

def check_pivot1(g: RewriteGraph[VT, ET], v0: VT) -> bool:
    """Checks whether :func:`pivot_unchecked` could potentially apply at ``v0``.

    If this fails, a simplifier can move on to the next vertex without
    looking at the neighbourhood of ``v0``."""
    vd0 = g.vertex_data_opt(v0)
    if vd0 is None:
        return False
    return (vd0.ty == VertexType.Z
            and phase_is_pauli(vd0.phase)
            and _all_z_hadamard(g, v0))


def check_pivot2(g: RewriteGraph[VT, ET], v0: VT, v1: VT) -> bool:
    """Checks the rest of the pivot condition, assuming :func:`check_pivot1` holds at ``v0``."""
    vd1 = g.vertex_data_opt(v1)
    if vd1 is None or v0 == v1 or not g.contains_vertex(v0):
        return False
    return (vd1.ty == VertexType.Z
            and phase_is_pauli(vd1.phase)
            and _etype(g, v0, v1) == HADAMARD
            and _all_z_hadamard(g, v1))


def check_pivot(g: RewriteGraph[VT, ET], v0: VT, v1: VT) -> bool:
    """Both vertices must be Z, have a phase 0 or pi, be connected by a
    Hadamard edge, and be surrounded by Hadamard edges to other Z spiders."""
    return check_pivot1(g, v0) and check_pivot2(g, v0, v1)


def pivot_unchecked(g: RewriteGraph[VT, ET], v0: VT, v1: VT) -> None:
    """Pivots along the edge ``v0 -- v1``, deleting both vertices.

    Every neighbour of ``v0`` gets connected to every neighbour of ``v1``
    (common neighbours pick up a Hadamard self-loop), and each side picks
    up the phase of the opposite vertex."""
    p0, vars0 = g.phase_and_vars(v0)
    p1, vars1 = g.phase_and_vars(v1)

    ns0 = g.neighbor_vec(v0)
    ns1 = g.neighbor_vec(v1)
    for n0 in ns0:
        g.add_to_phase(n0, p1)
        g.add_to_vars(n0, vars1)
        for n1 in ns1:
            if n0 != v1 and n1 != v0:
                g.add_edge_smart((n0, n1), HADAMARD)
    for n1 in ns1:
        g.add_to_phase(n1, p0)
        g.add_to_vars(n1, vars0)

    g.remove_vertex(v0)
    g.remove_vertex(v1)

    x = len(ns0)
    y = len(ns1)
    g.scalar.add_power((x - 2) * (y - 2))

    # the sign is (-1)^(a0*a1) with a_i = p_i + (parity of vars_i)
    if p0 != 0 and p1 != 0:
        g.scalar.add_phase(1)
    if p0 != 0 and vars1:
        g.mul_scalar_factor(Expr.linear(vars1), minus_one())
    if p1 != 0 and vars0:
        g.mul_scalar_factor(Expr.linear(vars0), minus_one())
    if vars0 and vars1:
        g.mul_scalar_factor(Expr.quadratic(Expr.linear(vars0), Expr.linear(vars1)),
                            minus_one())


pivot = checked_rule2(check_pivot, pivot_unchecked)


# Unfusing

def unfuse_boundary(g: RewriteGraph[VT, ET], v: VT, b: VT) -> None:
    """Inserts an identity spider so ``v`` is no longer adjacent to the boundary ``b``.

    If ``b`` is not a boundary this does nothing. The new spider is
    connected to ``v`` by a Hadamard edge."""
    if g.type(b) != VertexType.BOUNDARY:
        return
    et = g.edge_type(g.edge(v, b))
    v1 = g.add_vertex(VertexType.Z, qubit=g.qubit(v), row=g.row(v))
    g.remove_edge(g.edge(v, b))
    g.add_edge((v, v1), HADAMARD)
    g.add_edge((v1, b), toggle_edge(et))


def unfuse_gadget(g: RewriteGraph[VT, ET], v: VT) -> None:
    """Unfuses a non-Pauli phase of ``v`` as a phase gadget.

    If the vertex already has a Pauli phase this does nothing. Boolean
    variables stay on ``v``, they only contribute Pauli phases."""
    p = g.phase(v)
    if phase_is_pauli(p):
        return
    v1 = g.add_vertex(VertexType.Z, qubit=-1, row=g.row(v))
    v2 = g.add_vertex(VertexType.Z, qubit=-2, row=g.row(v), phase=p)
    g.set_phase(v, 0)
    g.add_edge((v, v1), HADAMARD)
    g.add_edge((v1, v2), HADAMARD)


# Vertex classification

def is_interior_pauli(g: RewriteGraph[VT, ET], v: VT) -> bool:
    """The vertex has phase 0 or pi, isn't on a boundary, and isn't part of a phase gadget."""
    if not g.contains_vertex(v):
        return False
    return (phase_is_pauli(g.phase(v))
            and all(g.type(n) == VertexType.Z and g.vertex_degree(n) > 1 for n in g.neighbors(v)))


def is_boundary_pauli(g: RewriteGraph[VT, ET], v: VT) -> bool:
    """The vertex has phase 0 or pi and is adjacent to a boundary."""
    if not g.contains_vertex(v):
        return False
    return (phase_is_pauli(g.phase(v))
            and any(g.type(n) == VertexType.BOUNDARY for n in g.neighbors(v)))


def is_boundary_pauli_with_h(g: RewriteGraph[VT, ET], v: VT) -> bool:
    """The vertex has phase 0 or pi and is adjacent to a boundary by a Hadamard edge."""
    if not g.contains_vertex(v):
        return False
    return (phase_is_pauli(g.phase(v))
            and any(et == HADAMARD and g.type(n) == VertexType.BOUNDARY
                    for n, et in g.neighbor_edges(v)))


def is_boundary_proper_clifford(g: RewriteGraph[VT, ET], v: VT) -> bool:
    """The vertex has phase pi/2 or -pi/2 and is adjacent to a boundary."""
    if not g.contains_vertex(v):
        return False
    return (phase_is_proper_clifford(g.phase(v))
            and any(g.type(n) == VertexType.BOUNDARY for n in g.neighbors(v)))


# Generalised pivoting

def check_gen_pivot(g: RewriteGraph[VT, ET], v0: VT, v1: VT) -> bool:
    """Checks that a pivot on ``v0 -- v1`` can be made to apply by unfusing
    non-Pauli phases into gadgets and boundary edges into identities.

    Repeatedly applying :func:`gen_pivot` with this check alone is not
    guaranteed to terminate; see :func:`check_gen_pivot_reduce` and
    :func:`check_boundary_pivot`."""
    if v0 == v1:
        return False
    if not (g.contains_vertex(v0) and g.contains_vertex(v1)):
        return False
    if _etype(g, v0, v1) != HADAMARD:
        return False
    for v in (v0, v1):
        if g.type(v) != VertexType.Z:
            return False
        for w, et in g.neighbor_edges(v):
            t = g.type(w)
            if not ((t == VertexType.Z and et == HADAMARD) or t == VertexType.BOUNDARY):
                return False
    return True


def check_gen_pivot_reduce(g: RewriteGraph[VT, ET], v0: VT, v1: VT) -> bool:
    """Like :func:`check_gen_pivot`, but at least one vertex must be interior Pauli,
    so applying the rule strictly decreases the number of such vertices."""
    return check_gen_pivot(g, v0, v1) and (is_interior_pauli(g, v0) or is_interior_pauli(g, v1))


def check_boundary_pivot(g: RewriteGraph[VT, ET], v0: VT, v1: VT) -> bool:
    return check_gen_pivot(g, v0, v1) and is_boundary_pauli(g, v0)


def check_h_boundary_pivot(g: RewriteGraph[VT, ET], v0: VT, v1: VT) -> bool:
    return check_gen_pivot(g, v0, v1) and is_boundary_pauli_with_h(g, v0)


def gen_pivot_unchecked(g: RewriteGraph[VT, ET], v0: VT, v1: VT) -> None:
    """Pivot that allows non-Pauli phases and boundary neighbours.

    Interior non-Pauli phases are first unfused into phase gadgets, and
    boundary edges get an identity spider inserted, after which the plain
    :func:`pivot_unchecked` applies."""
    for v in (v0, v1):
        nhd = g.neighbor_vec(v)
        unfuse_gadget(g, v)
        for n in nhd:
            unfuse_boundary(g, v, n)
    pivot_unchecked(g, v0, v1)


gen_pivot = checked_rule2(check_gen_pivot, gen_pivot_unchecked)
boundary_pivot = checked_rule2(check_boundary_pivot, gen_pivot_unchecked)
h_boundary_pivot = checked_rule2(check_h_boundary_pivot, gen_pivot_unchecked)


# Boundary local complementation

def check_boundary_local_comp(g: RewriteGraph[VT, ET], v0: VT, v1: VT) -> bool:
    """``v0`` is a proper Clifford spider on a boundary and ``v1`` an interior
    Pauli spider next to it.

    Complementing at ``v0`` moves its phase onto ``v1`` along the Hadamard
    edge between them, which makes ``v1`` proper Clifford in turn."""
    if v0 == v1:
        return False
    if g.vertex_type_opt(v0) != VertexType.Z or g.vertex_type_opt(v1) != VertexType.Z:
        return False
    if _etype(g, v0, v1) != HADAMARD:
        return False
    if not (is_boundary_proper_clifford(g, v0) and is_interior_pauli(g, v1)):
        return False
    for n, et in g.neighbor_edges(v0):
        if g.type(n) != VertexType.BOUNDARY and not (g.type(n) == VertexType.Z and et == HADAMARD):
            return False
    return _all_z_hadamard(g, v1)


def boundary_local_comp_unchecked(g: RewriteGraph[VT, ET], v0: VT, v1: VT) -> None:
    for b in g.neighbor_vec(v0):
        unfuse_boundary(g, v0, b)
    local_comp_unchecked(g, v0)
    local_comp_unchecked(g, v1)


boundary_local_comp = checked_rule2(check_boundary_local_comp, boundary_local_comp_unchecked)


# Gadget fusion

def check_gadget_fusion(g: RewriteGraph[VT, ET], v0: VT, v1: VT) -> bool:
    """``v0`` and ``v1`` are the hubs of two phase gadgets acting on the same vertices."""
    if v0 == v1:
        return False
    vd0 = g.vertex_data_opt(v0)
    vd1 = g.vertex_data_opt(v1)
    if vd0 is None or vd1 is None:
        return False
    if vd0.ty != VertexType.Z or vd1.ty != VertexType.Z:
        return False
    if vd0.phase != 0 or vd1.phase != 0 or vd0.vars or vd1.vars:
        return False

    nhds: List[Set[VT]] = []
    for v in (v0, v1):
        nhd: Set[VT] = set()
        found_leaf = False
        for n, et in g.neighbor_edges(v):
            if et != HADAMARD or g.type(n) != VertexType.Z:
                return False
            # adjacent hubs would count each other as leaves
            if n in (v0, v1):
                return False
            if g.vertex_degree(n) == 1:
                if found_leaf:
                    return False
                found_leaf = True
            else:
                nhd.add(n)
        if not found_leaf:
            return False
        nhds.append(nhd)
    return nhds[0] == nhds[1]


def _gadget_leaf(g: RewriteGraph[VT, ET], v: VT) -> VT:
    for n in g.neighbors(v):
        if g.vertex_degree(n) == 1:
            return n
    raise LookupError("Vertex {} isn't the hub of a phase gadget".format(v))


def gadget_fusion_unchecked(g: RewriteGraph[VT, ET], v0: VT, v1: VT) -> None:
    """Moves the phase of the gadget at ``v1`` onto the gadget at ``v0`` and deletes the former."""
    leaf0 = _gadget_leaf(g, v0)
    leaf1 = _gadget_leaf(g, v1)
    g.add_to_phase(leaf0, g.phase(leaf1))
    g.add_to_vars(leaf0, g.vars(leaf1))
    g.remove_vertex(v1)
    g.remove_vertex(leaf1)

    d = g.vertex_degree(v0)
    g.scalar.add_power(2 - d)


gadget_fusion = checked_rule2(check_gadget_fusion, gadget_fusion_unchecked)


# Scalar removal

def check_remove_single(g: RewriteGraph[VT, ET], v: VT) -> bool:
    t = g.vertex_type_opt(v)
    if t is None:
        return False
    return vertex_is_zx(t) and g.vertex_degree(v) == 0


def remove_single_unchecked(g: RewriteGraph[VT, ET], v: VT) -> None:
    """Removes an isolated Z or X spider, absorbing it into the global scalar."""
    p, vars = g.phase_and_vars(v)
    _mul_one_plus_phase(g, p, vars)
    g.remove_vertex(v)


remove_single = checked_rule1(check_remove_single, remove_single_unchecked)


def _mul_one_plus_phase(g: RewriteGraph[VT, ET], p: Fraction, vars: VarSet) -> None:
    """Multiplies the scalar by ``1 + e^(i pi (p + x))`` with ``x`` the parity of ``vars``."""
    if not vars:
        g.scalar.mult_with_scalar(one_plus_phase(p))
        return
    lin = Expr.linear(vars)
    g.mul_scalar_factor(lin.negated(), one_plus_phase(p))
    g.mul_scalar_factor(lin, one_plus_phase(p + 1))


def check_remove_pair(g: RewriteGraph[VT, ET], v0: VT, v1: VT) -> bool:
    if v0 == v1:
        return False
    t0 = g.vertex_type_opt(v0)
    t1 = g.vertex_type_opt(v1)
    if t0 is None or t1 is None:
        return False
    return (vertex_is_zx(t0) and vertex_is_zx(t1)
            and g.vertex_degree(v0) == 1
            and g.vertex_degree(v1) == 1
            and _etype(g, v0, v1) in (SIMPLE, HADAMARD))


def minimize_pair_table(s00: Scalar, s01: Scalar, s10: Scalar, s11: Scalar,
                        vars0: VarSet, vars1: VarSet) -> List[Tuple[Expr, Scalar]]:
    """Finds a small set of ``(Expr, Scalar)`` factors reproducing a 2x2 table.

    ``sij`` is the value of the scalar when the parity of ``vars0`` is ``i``
    and the parity of ``vars1`` is ``j``. If the table only depends on one of
    the two parities, or on their sum, it is written as two linear factors.
    Only a table with no such structure needs the four quadratic factors.
    """
    l0 = Expr.linear(vars0)
    l1 = Expr.linear(vars1)

    if scalar_eq(s00, s01) and scalar_eq(s00, s10) and scalar_eq(s00, s11):
        return [(Expr.one(), s00)]
    if not vars1 or (scalar_eq(s00, s01) and scalar_eq(s10, s11)):
        return [(l0.negated(), s00), (l0, s10)]
    if not vars0 or (scalar_eq(s00, s10) and scalar_eq(s01, s11)):
        return [(l1.negated(), s00), (l1, s01)]
    if scalar_eq(s00, s11) and scalar_eq(s01, s10):
        l01 = l0 + l1
        return [(l01.negated(), s00), (l01, s01)]
    return [
        (Expr.quadratic(l0.negated(), l1.negated()), s00),
        (Expr.quadratic(l0.negated(), l1), s01),
        (Expr.quadratic(l0, l1.negated()), s10),
        (Expr.quadratic(l0, l1), s11),
    ]


def remove_pair_unchecked(g: RewriteGraph[VT, ET], v0: VT, v1: VT) -> None:
    """Removes a connected pair of otherwise isolated spiders, absorbing it into the scalar."""
    t0 = g.type(v0)
    t1 = g.type(v1)
    et = g.edge_type(g.edge(v0, v1))
    p0, vars0 = g.phase_and_vars(v0)
    p1, vars1 = g.phase_and_vars(v1)

    if (t0 == t1) == (et == SIMPLE):
        # effectively one spider of the same colour
        _mul_one_plus_phase(g, p0 + p1, vars0.symmetric_difference(vars1))
    else:
        # sums don't factor, so the table entries are plain float factors
        x0 = cexp(p0)
        x1 = cexp(p1)
        x2 = cexp(p0 + p1)
        g.scalar.add_power(-1)
        s00 = from_number(1 + x0 + x1 - x2)
        if not vars0 and not vars1:
            g.scalar.mult_with_scalar(s00)
        else:
            s01 = from_number(1 + x0 - x1 + x2)
            s10 = from_number(1 - x0 + x1 + x2)
            s11 = from_number(1 - x0 - x1 - x2)
            for expr, s in minimize_pair_table(s00, s01, s10, s11, vars0, vars1):
                g.mul_scalar_factor(expr, s)

    g.remove_vertex(v0)
    g.remove_vertex(v1)


remove_pair = checked_rule2(check_remove_pair, remove_pair_unchecked)


# Duplicate removal

def check_remove_duplicate(g: RewriteGraph[VT, ET], v0: VT, v1: VT) -> bool:
    """``v1`` is a Pauli Z spider with exactly the same Hadamard-connected
    neighbourhood as the Z spider ``v0``."""
    if v0 == v1:
        return False
    if g.vertex_type_opt(v0) != VertexType.Z or g.vertex_type_opt(v1) != VertexType.Z:
        return False
    if not phase_is_pauli(g.phase(v1)):
        return False
    inc0 = g.neighbor_edges(v0)
    if not all(g.type(n) == VertexType.Z and et == HADAMARD for n, et in inc0):
        return False
    return sorted(inc0) == sorted(g.neighbor_edges(v1))


def remove_duplicate_unchecked(g: RewriteGraph[VT, ET], v0: VT, v1: VT) -> None:
    """Removes ``v0``, using that ``v1`` fixes the parity of their common neighbourhood."""
    g.add_to_phase(v0, g.phase(v1))
    g.add_to_vars(v0, g.vars(v1))
    g.scalar.add_power(-g.vertex_degree(v0))
    remove_single_unchecked(g, v0)


remove_duplicate = checked_rule2(check_remove_duplicate, remove_duplicate_unchecked)
