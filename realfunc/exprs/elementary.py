r"""@package realfunc.exprs.elementary

Elementary functions of the bare variable.

The classes here represent \f$ \exp(x) \f$, \f$ \log(x) \f$, \f$ \sin(x) \f$
and \f$ \cos(x) \f$. To apply them to another expression, compose them with
it, e.g. `SINE.compose(ID.power(2))` for \f$ \sin(x^2) \f$.

Each function exists as a singleton (#EXP, #LOG, #SINE, #COSINE), which is
also what the derivatives refer to. For example, the derivative of #SINE is
#COSINE and the derivative of #COSINE is `minus(SINE)`.
"""

import numpy as np
import sympy as sp

from ..pickle_helpers import register_singleton
from .realfunction import RealFunction
from .basics import PowerExpression, minus
from .common import ATOM


__all__ = [
    "ElementaryExpression",
    "ExpExpression",
    "LogExpression",
    "SinExpression",
    "CosExpression",
    "EXP",
    "LOG",
    "SINE",
    "COSINE",
]


class ElementaryExpression(RealFunction):
    r"""Base class for elementary functions of the bare variable.

    Subclassing this class and providing the numpy and SymPy versions of the
    function allows for very simple creation of expressions. Subclasses only
    need to implement the derivative.
    """
    def __init__(self, func, sympy_func, desc, name=None):
        r"""Init function.

        Args:
            func:   Callable (usually a numpy ufunc) evaluating the function.
            sympy_func: The SymPy version of the function.
            desc:   Abstract description/name of the kind of function. This
                    is used when printing the expression.
            name:   Name of the expression (e.g. for print_tree()).
        """
        super().__init__(name=name)
        self._func = func
        self._sympy_func = sympy_func
        self._desc = desc

    @property
    def desc(self):
        r"""Short name of the function, e.g. ``'sin'``."""
        return self._desc

    def evaluate(self, x):
        return self._func(x)

    def _render(self, arg):
        return "%s(%s)" % (self._desc, arg[0]), ATOM

    def _to_sympy(self, arg):
        return self._sympy_func(arg)


class ExpExpression(ElementaryExpression):
    r"""Exponential function, which is its own derivative."""
    def __init__(self, name='exp'):
        super().__init__(np.exp, sp.exp, desc="exp", name=name)

    def _derivative(self):
        return self


class LogExpression(ElementaryExpression):
    r"""Natural logarithm.

    Evaluates to `-inf` at zero and to `nan` for negative arguments.
    """
    def __init__(self, name='log'):
        super().__init__(np.log, sp.log, desc="log", name=name)

    def _derivative(self):
        return PowerExpression(-1)


class SinExpression(ElementaryExpression):
    r"""Sine function."""
    def __init__(self, name='sin'):
        super().__init__(np.sin, sp.sin, desc="sin", name=name)

    def _derivative(self):
        return COSINE


class CosExpression(ElementaryExpression):
    r"""Cosine function."""
    def __init__(self, name='cos'):
        super().__init__(np.cos, sp.cos, desc="cos", name=name)

    def _derivative(self):
        return minus(SINE)


## The exponential function.
EXP = register_singleton('EXP', ExpExpression())
## The natural logarithm.
LOG = register_singleton('LOG', LogExpression())
## The sine function.
SINE = register_singleton('SINE', SinExpression())
## The cosine function.
COSINE = register_singleton('COSINE', CosExpression())
