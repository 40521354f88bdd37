r"""@package realfunc.numutils

Miscellaneous numerical utilities and helpers.


@b Examples

```
    >>> format_number(2.0)
    '2'
    >>> format_number(1/3.)
    '0.3333'
```
"""

import numpy as np
import sympy as sp
from mpmath import mp


__all__ = [
    "DEFAULT_DIGITS",
    "format_number",
    "numerical_derivative",
]


## Maximum number of fractional digits used when rendering numbers.
DEFAULT_DIGITS = 4


def format_number(value, digits=None):
    r"""Format a real number with at most `digits` fractional digits.

    Trailing zeros and a trailing decimal point are removed, so that whole
    numbers are printed without any fractional part. The decimal separator is
    always ``'.'``, independent of any locale settings.

    @param value
        The (real) number to format. Infinities and NaN are printed as
        ``'inf'``, ``'-inf'`` and ``'nan'``.
    @param digits
        Maximum number of fractional digits. Default is DEFAULT_DIGITS.
    """
    if digits is None:
        digits = DEFAULT_DIGITS
    text = np.format_float_positional(float(value), precision=digits,
                                      unique=True, trim='-')
    if text == "-0":
        return "0"
    return text


def numerical_derivative(expr, x, n=1, dps=30):
    r"""Numerically compute the n'th derivative of an expression at a point.

    The expression is converted to a SymPy expression, turned into an
    `mpmath` function and then differentiated numerically using
    `mpmath.diff()` with `dps` decimal places. This is independent of the
    symbolic derivative rules of the expression classes and is hence suitable
    for checking them.

    @param expr
        Expression (realfunction.RealFunction) to differentiate.
    @param x
        Point at which to compute the derivative.
    @param n
        Derivative order. Default is `1`.
    @param dps
        Decimal places for the `mpmath` computation. Default is `30`.

    @return The real part of the numerical derivative as a float.
    """
    var = sp.Symbol('x')
    f = sp.lambdify(var, expr.to_sympy(var), modules='mpmath')
    with mp.workdps(dps):
        return float(mp.re(mp.diff(f, mp.mpf(x), n)))
