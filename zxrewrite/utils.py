from fractions import Fraction
from typing import FrozenSet, Iterable

from pyzx.utils import (EdgeType, FloatInt, FractionLike, VertexType,
                        toggle_edge, toggle_vertex, vertex_is_zx)

__all__ = ['EdgeType', 'VertexType', 'FloatInt', 'FractionLike', 'VarSet',
           'toggle_edge', 'toggle_vertex', 'vertex_is_zx',
           'normalize_phase', 'phase_is_zero', 'phase_is_pauli',
           'phase_is_proper_clifford', 'make_vars']

VarSet = FrozenSet[str]


def normalize_phase(phase: FractionLike) -> Fraction:
    """Brings a phase (a multiple of pi) into the interval [0, 2)."""
    return Fraction(phase) % 2


def phase_is_zero(phase: FractionLike) -> bool:
    return normalize_phase(phase) == 0


def phase_is_pauli(phase: FractionLike) -> bool:
    """Phase is 0 or pi."""
    return normalize_phase(phase) in (0, 1)


def phase_is_proper_clifford(phase: FractionLike) -> bool:
    """Phase is pi/2 or -pi/2."""
    return normalize_phase(phase) in (Fraction(1, 2), Fraction(3, 2))


def make_vars(names: Iterable[str] = ()) -> VarSet:
    return frozenset(names)
