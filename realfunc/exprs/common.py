r"""@package realfunc.exprs.common

Utils used by multiple modules in realfunc.exprs.

Rendering an expression produces pairs ``(text, level)``, where `level` is the
precedence of the outermost operation in `text`. A parent uses the level to
decide whether a child needs to be put in parentheses.
"""

import numpy as np
import sympy as sp


__all__ = [
    "SUM",
    "PRODUCT",
    "POWER",
    "ATOM",
    "ARG",
    "parenthesize",
    "constant_like",
    "sympy_number",
]


## Precedence of a sum `a + b`.
SUM = 1
## Precedence of a product `a * b` and a negation `-a`.
PRODUCT = 2
## Precedence of a power `a^b`.
POWER = 3
## Precedence of numbers, the variable and function calls like `sin(x)`.
ATOM = 4

## Rendered form of the bare variable.
ARG = ("x", ATOM)


def parenthesize(rendered, level):
    r"""Return the text of a rendered pair, in parentheses if it binds weaker than `level`."""
    text, prec = rendered
    if prec < level:
        return "(%s)" % text
    return text


def constant_like(x, c):
    r"""Return the constant `c` in the shape of the evaluation point `x`."""
    if isinstance(x, np.ndarray):
        return np.full(x.shape, c, dtype=float)
    return c


def sympy_number(value):
    r"""Convert a real number to SymPy, using integers for whole numbers."""
    value = float(value)
    if value.is_integer():
        return sp.Integer(int(value))
    return sp.Float(value)
