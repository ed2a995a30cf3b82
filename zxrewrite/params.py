
"""
Boolean polynomials over GF(2) used to index symbolic scalar factors.

A spider whose phase is ``a + pi*(x1 XOR x2 XOR ...)`` for boolean variables
``x1, x2, ...`` contributes a scalar that depends on those variables. Such
contributions are stored on the graph as ``{Expr: Scalar}`` pairs, where the
factor is applied exactly when the expression evaluates to 1.
"""

__all__ = ['Expr', 'Monomial']

from typing import AbstractSet, FrozenSet, Iterable, Mapping

Monomial = FrozenSet[str]

_ONE: Monomial = frozenset()


class Expr(object):
    """A polynomial over GF(2), stored as the set of its monomials.

    The empty monomial is the constant 1. Since variables are boolean,
    ``x*x == x``, so a monomial is just a set of variable names.
    """

    __slots__ = ('terms',)

    def __init__(self, terms: Iterable[Monomial] = ()) -> None:
        ts: set = set()
        for t in terms:
            # addition mod 2
            ts ^= {frozenset(t)}
        self.terms: FrozenSet[Monomial] = frozenset(ts)

    @classmethod
    def zero(cls) -> 'Expr':
        return cls()

    @classmethod
    def one(cls) -> 'Expr':
        return cls([_ONE])

    @classmethod
    def linear(cls, vars: AbstractSet[str]) -> 'Expr':
        """The parity ``x1 + x2 + ... (mod 2)`` of a set of variables."""
        return cls(frozenset([v]) for v in vars)

    @classmethod
    def quadratic(cls, e0: 'Expr', e1: 'Expr') -> 'Expr':
        """The product of two polynomials, typically two linear ones."""
        return e0 * e1

    def negated(self) -> 'Expr':
        """Adds the constant 1."""
        return self + Expr.one()

    def is_zero(self) -> bool:
        return not self.terms

    def is_one(self) -> bool:
        return self.terms == frozenset([_ONE])

    def variables(self) -> FrozenSet[str]:
        return frozenset(v for t in self.terms for v in t)

    def evaluate(self, assignment: Mapping[str, int]) -> int:
        """Evaluate at a 0/1 assignment of every variable occurring in the expression."""
        val = 0
        for t in self.terms:
            if all(assignment[v] % 2 for v in t):
                val ^= 1
        return val

    def __add__(self, other: 'Expr') -> 'Expr':
        return Expr(self.terms.symmetric_difference(other.terms))

    def __mul__(self, other: 'Expr') -> 'Expr':
        return Expr(t0 | t1 for t0 in self.terms for t1 in other.terms)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Expr):
            return NotImplemented
        return self.terms == other.terms

    def __hash__(self) -> int:
        return hash(self.terms)

    def __repr__(self) -> str:
        return "Expr({})".format(str(self))

    def __str__(self) -> str:
        if not self.terms:
            return "0"
        ts = sorted(("*".join(sorted(t)) if t else "1") for t in self.terms)
        return " + ".join(ts)
