r"""@package realfunc.exprs.basics

Collection of basic realfunction.RealFunction subclasses.

Besides the expression classes, this module defines the canonical singletons
#ZERO, #ONE, #MINUS (the constants 0, 1 and -1) and #ID (the identity). Other
parts of the expression system check for these objects by identity, e.g. a
product having #ZERO as one of its factors is known to be zero and a product
with #ONE as factor is printed without that factor.
"""

import numpy as np

from ..numutils import format_number
from ..pickle_helpers import register_singleton
from .realfunction import RealFunction
from .common import PRODUCT, POWER, ATOM, SUM
from .common import parenthesize, constant_like, sympy_number


__all__ = [
    "ConstantExpression",
    "IdentityExpression",
    "PowerExpression",
    "SumExpression",
    "ProductExpression",
    "CompositionExpression",
    "minus",
    "ZERO",
    "ONE",
    "MINUS",
    "ID",
]


class ConstantExpression(RealFunction):
    r"""Represent an expression that is a constant.

    Represents an expression of the form \f$ f(x) = c = \mathrm{const} \f$.

    The value of the constant can be accessed through the `c` property.
    """

    def __init__(self, value=0, name='const'):
        r"""Init function.

        Args:
            value:  The constant value.
            name:   Name of the expression (e.g. for print_tree()).
        """
        super().__init__(name=name)
        self._c = value

    @property
    def c(self):
        r"""The constant value this expression represents."""
        return self._c

    @property
    def nice_name(self):
        return "%s (%r)" % (self.name, self._c)

    def is_zero_expression(self):
        return self is ZERO

    def evaluate(self, x):
        return constant_like(x, self._c)

    def _derivative(self):
        return ZERO

    def simplify(self):
        c = self._c
        if c == 0:
            return ZERO
        if c == 1:
            return ONE
        if c == -1:
            return MINUS
        return self

    def _render(self, arg):
        text = format_number(self._c)
        return text, PRODUCT if text.startswith("-") else ATOM

    def _to_sympy(self, arg):
        return sympy_number(self._c)


class IdentityExpression(RealFunction):
    r"""Identity expression \f$ f(x) = x \f$.

    Composing any expression with the identity (on either side) does not
    change its value.
    """
    def __init__(self, name='Id'):
        super().__init__(name=name)

    def evaluate(self, x):
        return x

    def _derivative(self):
        return ONE

    def _render(self, arg):
        return arg

    def _to_sympy(self, arg):
        return arg


class PowerExpression(RealFunction):
    r"""Power of the variable with a fixed real exponent.

    Represents an expression of the form \f$ f(x) = x^e \f$. To raise another
    expression to a power, compose it with a power expression, which is what
    RealFunction.power() does.

    Evaluation follows the IEEE conventions, e.g. \f$ 0^{-1} = \infty \f$
    and a negative number raised to a non-integer power is `nan`.
    """
    def __init__(self, e, name='pow'):
        r"""Init function.

        Args:
            e:      The (real) exponent.
            name:   Name of the expression (e.g. for print_tree()).
        """
        super().__init__(name=name)
        self._e = e

    @property
    def e(self):
        r"""Exponent of this power."""
        return self._e

    @property
    def nice_name(self):
        return "%s (%r)" % (self.name, self._e)

    def evaluate(self, x):
        return np.float_power(x, self._e)

    def _derivative(self):
        e = self._e
        if e == 0:
            return ZERO
        return ProductExpression(ConstantExpression(e), PowerExpression(e - 1))

    def simplify(self):
        if self._e == 1:
            return ID
        if self._e == 0:
            return ONE
        return self

    def _render(self, arg):
        return ("%s^%s" % (parenthesize(arg, ATOM), format_number(self._e)),
                POWER)

    def _to_sympy(self, arg):
        return arg**sympy_number(self._e)


class SumExpression(RealFunction):
    r"""Sum of two expressions.

    Represents an expression of the form \f$ f(x) + g(x) \f$.
    """
    def __init__(self, f, g, name='add'):
        r"""Init function.

        Args:
            f:      First expression.
            g:      Second expression.
            name:   Name of the expression (e.g. for print_tree()).
        """
        super().__init__(f=f, g=g, name=name)

    @property
    def f(self):
        r"""First term."""
        return self.sub_expr('f')

    @property
    def g(self):
        r"""Second term."""
        return self.sub_expr('g')

    def evaluate(self, x):
        return self.f.evaluate(x) + self.g.evaluate(x)

    def _derivative(self):
        return SumExpression(self.f._derivative(), self.g._derivative())

    def simplify(self):
        f = self.f.simplify()
        g = self.g.simplify()
        if isinstance(f, ConstantExpression) and isinstance(g, ConstantExpression):
            return ConstantExpression(f.c + g.c).simplify()
        if f is ZERO:
            return g
        if g is ZERO:
            return f
        return SumExpression(f, g)

    def _render(self, arg):
        f_text = self.f._render(arg)[0]
        g_text, g_level = self.g._render(arg)
        if g_level >= PRODUCT and g_text.startswith("-"):
            return "%s - %s" % (f_text, g_text[1:]), SUM
        return "%s + %s" % (f_text, g_text), SUM

    def _to_sympy(self, arg):
        return self.f._to_sympy(arg) + self.g._to_sympy(arg)


class ProductExpression(RealFunction):
    r"""Multiply two expressions.

    Represents an expression of the form \f$ f(x) g(x) \f$.

    If either factor is the #ZERO singleton, the product is known to be zero.
    This is decided once at construction time and makes evaluation and
    differentiation of such products trivial.
    """
    def __init__(self, f, g, name='mult'):
        r"""Init function.

        Args:
            f:      First factor.
            g:      Second factor.
            name:   Name of the expression (e.g. for print_tree()).
        """
        super().__init__(f=f, g=g, name=name)
        self._is_zero = self.f is ZERO or self.g is ZERO

    @property
    def f(self):
        r"""First factor."""
        return self.sub_expr('f')

    @property
    def g(self):
        r"""Second factor."""
        return self.sub_expr('g')

    @property
    def is_zero(self):
        r"""Whether one of the factors is the #ZERO singleton."""
        return self._is_zero

    def is_zero_expression(self):
        return self._is_zero

    def evaluate(self, x):
        if self._is_zero:
            return constant_like(x, 0.0)
        return self.f.evaluate(x) * self.g.evaluate(x)

    def _derivative(self):
        if self._is_zero:
            return ZERO
        f, g = self.f, self.g
        return SumExpression(ProductExpression(f._derivative(), g),
                             ProductExpression(f, g._derivative()))

    def simplify(self):
        f = self.f.simplify()
        g = self.g.simplify()
        if f is ZERO or g is ZERO:
            return ZERO
        if f is ONE:
            return g
        if g is ONE:
            return f
        if isinstance(f, ConstantExpression) and isinstance(g, ConstantExpression):
            return ConstantExpression(f.c * g.c).simplify()
        return ProductExpression(f, g)

    def _render(self, arg):
        f, g = self.f, self.g
        if self._is_zero:
            return ZERO._render(arg)
        if f is ONE:
            return g._render(arg)
        if g is ONE:
            return f._render(arg)
        if f is MINUS:
            return _negated(g._render(arg))
        if g is MINUS:
            return _negated(f._render(arg))
        return "%s * %s" % (parenthesize(f._render(arg), PRODUCT),
                            parenthesize(g._render(arg), PRODUCT)), PRODUCT

    def _to_sympy(self, arg):
        if self._is_zero:
            return sympy_number(0)
        return self.f._to_sympy(arg) * self.g._to_sympy(arg)


def _negated(rendered):
    r"""Put a minus sign in front of a rendered expression."""
    text, level = rendered
    if level < PRODUCT or text.startswith("-"):
        text = "(%s)" % text
    return "-%s" % text, PRODUCT


class CompositionExpression(RealFunction):
    r"""Composition of two expressions.

    Represents an expression of the form \f$ f(g(x)) \f$, where `f` is the
    outer and `g` the inner expression.
    """
    def __init__(self, f, g, name='comp'):
        r"""Init function.

        Args:
            f:      Outer expression.
            g:      Inner expression.
            name:   Name of the expression (e.g. for print_tree()).
        """
        super().__init__(f=f, g=g, name=name)

    @property
    def f(self):
        r"""Outer expression."""
        return self.sub_expr('f')

    @property
    def g(self):
        r"""Inner expression."""
        return self.sub_expr('g')

    def evaluate(self, x):
        return self.f.evaluate(self.g.evaluate(x))

    def _derivative(self):
        f, g = self.f, self.g
        return ProductExpression(CompositionExpression(f._derivative(), g),
                                 g._derivative())

    def simplify(self):
        # Nested compositions are not folded.
        return CompositionExpression(self.f.simplify(), self.g.simplify())

    def _render(self, arg):
        return self.f._render(self.g._render(arg))

    def _to_sympy(self, arg):
        return self.f._to_sympy(self.g._to_sympy(arg))


def minus(f):
    r"""Return the negative of an expression, i.e. `MINUS * f`."""
    return ProductExpression(MINUS, f)


## The constant zero.
ZERO = register_singleton('ZERO', ConstantExpression(0, name='zero'))
## The constant one.
ONE = register_singleton('ONE', ConstantExpression(1, name='one'))
## The constant minus one.
MINUS = register_singleton('MINUS', ConstantExpression(-1, name='minus'))
## The identity function.
ID = register_singleton('ID', IdentityExpression())
