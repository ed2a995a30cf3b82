"""
Helpers for building and comparing :class:`pyzx.graph.scalar.Scalar` values.

Every diagram owns one PyZX scalar, which rules multiply in place with
``add_power``, ``add_phase``, ``add_node`` and ``mult_with_scalar``. The
functions here construct the standalone factors the rules need and
compare scalars by the complex number they denote, since two scalars
built along different paths rarely share the same factored form.
"""

__all__ = ['Scalar', 'cexp', 'sqrt2_pow', 'from_phase', 'minus_one',
           'one_plus_phase', 'from_number', 'product', 'scalar_eq']

import cmath
import math

from pyzx.graph.scalar import Scalar

from .utils import FractionLike, normalize_phase

TOLERANCE = 1e-9


def cexp(val: FractionLike) -> complex:
    """Returns ``e^(i pi val)``."""
    return cmath.exp(1j * math.pi * float(val))


def sqrt2_pow(n: int) -> Scalar:
    s = Scalar()
    s.add_power(n)
    return s


def from_phase(phase: FractionLike) -> Scalar:
    """The scalar ``e^(i pi phase)``."""
    s = Scalar()
    s.add_phase(phase)
    return s


def minus_one() -> Scalar:
    return from_phase(1)


def one_plus_phase(phase: FractionLike) -> Scalar:
    """The scalar ``1 + e^(i pi phase)``."""
    s = Scalar()
    s.add_node(normalize_phase(phase))
    return s


def from_number(val: complex) -> Scalar:
    s = Scalar()
    s.add_float(val)
    return s


def product(s0: Scalar, s1: Scalar) -> Scalar:
    """A fresh scalar equal to ``s0 * s1``, leaving both arguments alone."""
    s = s0.copy()
    s.mult_with_scalar(s1)
    return s


def scalar_eq(s0: Scalar, s1: Scalar) -> bool:
    return cmath.isclose(complex(s0.to_number()), complex(s1.to_number()), abs_tol=TOLERANCE)
