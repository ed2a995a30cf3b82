# tests/test_core/test_scalar.py
import math
import unittest
from fractions import Fraction

from zxrewrite.scalar import (Scalar, cexp, from_number, from_phase, minus_one,
                              one_plus_phase, product, scalar_eq, sqrt2_pow)


class TestScalarHelpers(unittest.TestCase):
    def assertScalarEqual(self, s, value):
        self.assertAlmostEqual(complex(s.to_number()), complex(value))

    def test_sqrt2_powers(self):
        self.assertScalarEqual(sqrt2_pow(3), 2 * math.sqrt(2))
        self.assertScalarEqual(sqrt2_pow(-2), 0.5)
        s = sqrt2_pow(2)
        s.add_power(-2)
        self.assertScalarEqual(s, 1)

    def test_phases(self):
        self.assertScalarEqual(from_phase(Fraction(1, 2)), 1j)
        self.assertScalarEqual(minus_one(), -1)
        s = from_phase(Fraction(3, 2))
        s.add_phase(Fraction(1, 2))
        self.assertScalarEqual(s, 1)
        self.assertEqual(s.phase, 0)

    def test_one_plus_phase(self):
        self.assertScalarEqual(one_plus_phase(0), 2)
        self.assertScalarEqual(one_plus_phase(1), 0)
        self.assertScalarEqual(one_plus_phase(3), 0)
        self.assertScalarEqual(one_plus_phase(Fraction(1, 2)), 1 + 1j)
        self.assertScalarEqual(one_plus_phase(Fraction(1, 4)), 1 + cexp(Fraction(1, 4)))

    def test_product_leaves_arguments_alone(self):
        a = sqrt2_pow(3)
        b = from_phase(Fraction(1, 4))
        s = product(a, b)
        self.assertEqual(s.power2, 3)
        self.assertEqual(s.phase, Fraction(1, 4))
        self.assertScalarEqual(s, 2 * math.sqrt(2) * cexp(Fraction(1, 4)))
        self.assertScalarEqual(a, 2 * math.sqrt(2))
        self.assertScalarEqual(b, cexp(Fraction(1, 4)))

    def test_scalar_eq_across_representations(self):
        self.assertTrue(scalar_eq(sqrt2_pow(2), one_plus_phase(0)))
        self.assertTrue(scalar_eq(from_number(-1), minus_one()))
        self.assertFalse(scalar_eq(Scalar(), minus_one()))
        self.assertTrue(scalar_eq(from_number(0), one_plus_phase(1)))
