r"""@package testutils

Utilities to add more features to `unittest` classes.

This module provides a custom subclass of `unittest.TestCase`, namely
RealFuncTestCase, which obeys the global configuration settings in
TestSettings and adds assertions for comparing expressions. The settings can
be configured by the script invoking the test run.

This module also introduces a new decorator slowtest, which, when applied,
leads to the test being skipped on normal runs. The script starting the test
must set `TestSettings.skipslow` to `False` for the slow tests to be run.
"""

import sys
import functools
import unittest
import time


__all__ = [
    "RealFuncTestCase",
    "TestSettings",
    "slowtest",
    "lmap",
]


def lmap(func, *iterables):
    r"""Implementation of `map` that returns a list instead of a generator."""
    return list(map(func, *iterables))


def slowtest(func):
    """Decorator for skipping a test if TestSettings.skipslow is true."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        if TestSettings.skipslow:
            raise unittest.SkipTest("skipping slow tests")
        return func(*args, **kwargs)
    return wrapper


class RealFuncTestCase(unittest.TestCase):
    """Tweaked baseclass for unit tests.

    By deriving from this class, you:
        * Get timed individual tests (needs `verbosity=2`) if
          TestSettings.timing is true.
        * Can compare lists of values, rendered expressions and symbolic
          against numerical derivatives with the extra assertions below.
    """
    def run(self, result=None):
        self.__result = result
        self.__prevCounts = self.__resultCounts()
        self.__startTime = time.time()
        unittest.TestCase.run(self, result)
        if self.__shouldPrintTiming():
            duration = time.time() - self.__startTime
            print("(%.4f seconds) ... " % (duration), file=sys.stderr, end='')

    def __resultCounts(self):
        r"""Return the numbers of errors, failures and skipped tests so far."""
        return tuple(len(getattr(self.__result, attr, ()))
                     for attr in ('errors', 'failures', 'skipped'))

    def __shouldPrintTiming(self):
        r"""Return whether timing information should be printed."""
        if not TestSettings.timing:
            return False
        if self.__result is None:
            return True
        if self.__resultCounts() != self.__prevCounts:
            # failed, errored or skipped
            return False
        return (not getattr(self.__result, 'dots', True)
                and getattr(self.__result, 'showAll', False))

    def assertIsType(self, obj, cls):
        r"""Assert that an object is exactly of a certain type."""
        self.assertIs(type(obj), cls)

    def assertListAlmostEqual(self, a, b, places=None, delta=None):
        r"""Assert that two iterables contain (almost) the same values."""
        if places is not None and delta is not None:
            raise TypeError("Cannot use delta and places at the same time")
        if places is None and delta is None:
            places = 7
        if len(a) != len(b):
            raise self.failureException("Lists have different lengths (%d != %d)" % (len(a), len(b)))
        fails = []
        for i in range(len(a)):
            if a[i] == b[i]:
                continue
            if delta is not None:
                if not abs(a[i]-b[i]) <= delta:
                    fails.append(i)
            else:
                if round(abs(a[i]-b[i]), places) != 0:
                    fails.append(i)
        if fails:
            msg = "%d elements differ.\n" % len(fails)
            maxN = 9
            if len(fails) <= maxN:
                msg += "Differing elements:\n"
            else:
                msg += "First few differing elements:\n"
            msg += "\n".join(["  [{i}] {a} != {b}    (difference: {d})".format(i=i, a=a[i], b=b[i], d=(b[i]-a[i]))
                              for i in fails[:maxN]])
            raise self.failureException(msg)

    def assertRenders(self, expr, text):
        r"""Assert that an expression renders exactly as `text`."""
        self.assertEqual(expr.render(), text)

    def assertSameRendering(self, expr1, expr2):
        r"""Assert that two expressions render identically."""
        self.assertEqual(expr1.render(), expr2.render())

    def assertDerivativeMatches(self, expr, points, n=1, delta=1e-9,
                                simplify=False):
        r"""Assert the symbolic n'th derivative agrees with a numerical one.

        The numerical derivative is computed with high precision using
        `realfunc.numutils.numerical_derivative()`.
        """
        from realfunc.numutils import numerical_derivative
        deriv = expr.derivative(n, simplify=simplify)
        symbolic = [float(deriv.evaluate(x)) for x in points]
        numerical = [numerical_derivative(expr, x, n=n) for x in points]
        self.assertListAlmostEqual(symbolic, numerical, delta=delta)


class TestSettings(object):
    """Global settings for tests."""
    ## Stop test run on first fail/error.
    failfast = False
    ## Whether output is buffered.\ Just information, cannot be used to toggle output buffering.
    buffering = False
    ## Whether the timing for each test case should be printed.
    timing = False
    ## Control whether tests marked as slowtest should be skipped.
    skipslow = True
