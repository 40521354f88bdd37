#!/usr/bin/env python3
r"""@package realfunc.exprs.test_simplify

Tests for the algebraic simplification of expression trees.
"""

import unittest
import sys

import numpy as np

from testutils import RealFuncTestCase
from .basics import ConstantExpression, IdentityExpression, PowerExpression
from .basics import SumExpression, ProductExpression, CompositionExpression
from .basics import ZERO, ONE, MINUS, ID
from .elementary import SINE, COSINE, LOG, EXP


class TestLeaves(RealFuncTestCase):
    def test_constants(self):
        self.assertIs(ConstantExpression(0).simplify(), ZERO)
        self.assertIs(ConstantExpression(0.0).simplify(), ZERO)
        self.assertIs(ConstantExpression(1).simplify(), ONE)
        self.assertIs(ConstantExpression(-1.0).simplify(), MINUS)
        c = ConstantExpression(2.5)
        self.assertIs(c.simplify(), c)
        self.assertIs(ZERO.simplify(), ZERO)

    def test_unchanged(self):
        for f in (ID, SINE, COSINE, LOG, EXP):
            self.assertIs(f.simplify(), f)
        i = IdentityExpression()
        self.assertIs(i.simplify(), i)

    def test_power(self):
        self.assertIs(PowerExpression(1).simplify(), ID)
        self.assertIs(PowerExpression(1.0).simplify(), ID)
        self.assertIs(PowerExpression(0).simplify(), ONE)
        p = PowerExpression(3)
        self.assertIs(p.simplify(), p)

    def test_power_derivatives(self):
        self.assertIs(PowerExpression(0).derivative(), ZERO)
        self.assertIs(PowerExpression(1).derivative(simplify=True), ONE)
        d = PowerExpression(2).derivative(simplify=True)
        self.assertIsType(d, ProductExpression)
        self.assertEqual(d.f.c, 2)
        self.assertIs(d.g, ID)
        self.assertRenders(d, "2 * x")


class TestSum(RealFuncTestCase):
    def test_zero_terms(self):
        self.assertIs(SumExpression(ZERO, SINE).simplify(), SINE)
        self.assertIs(SumExpression(SINE, ZERO).simplify(), SINE)
        self.assertIs(SumExpression(ConstantExpression(0), ID).simplify(), ID)
        self.assertIs(SumExpression(ProductExpression(ZERO, LOG), ID).simplify(), ID)

    def test_folding(self):
        s = SumExpression(ConstantExpression(2), ConstantExpression(3)).simplify()
        self.assertIsType(s, ConstantExpression)
        self.assertEqual(s.c, 5)
        self.assertIs(SumExpression(ONE, MINUS).simplify(), ZERO)
        self.assertIs(SumExpression(ConstantExpression(0.5), ConstantExpression(0.5)).simplify(), ONE)
        s = SumExpression(ProductExpression(ConstantExpression(2), ONE),
                          ConstantExpression(3)).simplify()
        self.assertEqual(s.c, 5)

    def test_no_folding(self):
        s = SumExpression(ID, ONE).simplify()
        self.assertIsType(s, SumExpression)
        self.assertRenders(s, "x + 1")


class TestProduct(RealFuncTestCase):
    def test_zero(self):
        self.assertIs(ProductExpression(ZERO, SINE).simplify(), ZERO)
        self.assertIs(ProductExpression(SINE, ConstantExpression(0.0)).simplify(), ZERO)
        self.assertIs(ProductExpression(SINE, SumExpression(ONE, MINUS)).simplify(), ZERO)

    def test_one(self):
        self.assertIs(ProductExpression(ONE, COSINE).simplify(), COSINE)
        self.assertIs(ProductExpression(COSINE, ONE).simplify(), COSINE)
        self.assertIs(ProductExpression(ONE, ONE).simplify(), ONE)
        self.assertIs(ProductExpression(ID, PowerExpression(0)).simplify(), ID)

    def test_one_with_reducible_factor(self):
        g = SumExpression(ZERO, SINE.compose(ConstantExpression(2) + ConstantExpression(3)))
        self.assertSameRendering(ProductExpression(ONE, g).simplify(), g.simplify())
        self.assertSameRendering(ProductExpression(g, ONE).simplify(), g.simplify())
        self.assertRenders(ProductExpression(ONE, g).simplify(), "sin(5)")

    def test_folding(self):
        p = ProductExpression(ConstantExpression(0.5), ConstantExpression(2)).simplify()
        self.assertIs(p, ONE)
        p = ProductExpression(SumExpression(ConstantExpression(2), ConstantExpression(3)),
                              ConstantExpression(4)).simplify()
        self.assertIsType(p, ConstantExpression)
        self.assertEqual(p.c, 20)
        self.assertIs(ProductExpression(MINUS, MINUS).simplify(), ONE)

    def test_no_folding(self):
        p = ProductExpression(MINUS, SINE).simplify()
        self.assertIsType(p, ProductExpression)
        self.assertIs(p.f, MINUS)
        self.assertIs(p.g, SINE)


class TestComposition(RealFuncTestCase):
    def test_not_folded(self):
        c = CompositionExpression(ID, ID).simplify()
        self.assertIsType(c, CompositionExpression)
        self.assertIs(c.f, ID)
        self.assertIs(c.g, ID)

    def test_children(self):
        c = CompositionExpression(PowerExpression(1),
                                  SumExpression(SINE, ZERO)).simplify()
        self.assertIs(c.f, ID)
        self.assertIs(c.g, SINE)
        self.assertRenders(c, "sin(x)")


class TestProperties(RealFuncTestCase):
    def _examples(self):
        return [
            ConstantExpression(2).multiply(ID.power(2)).add(ID),
            ID.power(3).add(LOG.compose(SINE.compose(ID))),
            SINE.compose(COSINE.compose(LOG.compose(ID))),
            COSINE.power(-1).multiply(SINE),
            SINE.power(2).multiply(COSINE.compose(ID.power(2))),
        ]

    def test_idempotent(self):
        for f in self._examples():
            for n in range(3):
                with self.subTest(f=f.render(), n=n):
                    s = f.derivative(n).simplify()
                    self.assertSameRendering(s.simplify(), s)
                    self.assertEqual(s.simplify().node_count(), s.node_count())

    def test_deterministic(self):
        pts = np.linspace(0.2, 2.0, 7)
        for f in self._examples():
            for n in range(3):
                with self.subTest(f=f.render(), n=n):
                    d = f.derivative(n)
                    for x in (0.3, 1.0, 1.7):
                        self.assertEqual(d.evaluate(x), d.evaluate(x))
                    first = d.evaluate(pts)
                    second = d.evaluate(pts)
                    self.assertTrue(np.array_equal(first, second))
                    self.assertEqual(d.render(), d.render())

    def test_values_preserved(self):
        pts = [0.3, 1.0, 1.7]
        for f in self._examples():
            with self.subTest(f=f.render()):
                d = f.derivative(2)
                s = d.simplify()
                self.assertListAlmostEqual([s.evaluate(x) for x in pts],
                                           [d.evaluate(x) for x in pts])
                self.assertLessEqual(s.node_count(), d.node_count())

    def test_smaller(self):
        f = SINE.power(2).multiply(COSINE.compose(ID.power(2)))
        d = f.derivative(2)
        self.assertLess(d.simplify().node_count(), d.node_count())

    def test_receiver_unchanged(self):
        f = ConstantExpression(2).multiply(ID.power(2)).add(ID)
        d = f.derivative()
        before = d.render()
        d.simplify()
        self.assertEqual(d.render(), before)
        self.assertRenders(d.simplify(), "2 * 2 * x + 1")


def run_tests():
    suite = unittest.TestLoader().loadTestsFromModule(sys.modules[__name__])
    return len(unittest.TextTestRunner(verbosity=2).run(suite).failures)


if __name__ == '__main__':
    unittest.main()
