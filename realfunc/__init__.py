r"""@package realfunc

Symbolic real functions of one variable.

Expressions are built from constants, the identity, powers and the elementary
functions in the realfunc.exprs package and can be evaluated, differentiated,
simplified and printed:

~~~.py
from realfunc import SINE, COSINE, ID
tangent = COSINE.power(-1).multiply(SINE)
print(tangent)                            # cos(x)^-1 * sin(x)
print(tangent.derivative(simplify=True).evaluate(0.0))   # 1.0
~~~

Run `python -m realfunc.demo` for a few more examples.
"""

from .exprs import RealFunction, as_expression
from .exprs import ConstantExpression, IdentityExpression, PowerExpression
from .exprs import SumExpression, ProductExpression, CompositionExpression
from .exprs import ExpExpression, LogExpression, SinExpression, CosExpression
from .exprs import minus, ZERO, ONE, MINUS, ID, EXP, LOG, SINE, COSINE
