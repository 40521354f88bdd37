r"""@package realfunc.exprs

Expression system for composing real functions of one variable and computing
their values, symbolic derivatives and text forms.

The idea is to have each expression represent either a simple function (like
a constant, the identity \f$ x \f$, a power \f$ x^e \f$ or one of the
elementary functions \f$ \exp, \log, \sin, \cos \f$) or a composite expression
of one or two functions (like \f$ f(x) + g(x) \f$, \f$ f(x) g(x) \f$ or
\f$ f(g(x)) \f$, where \f$ f, g \f$ are other expressions).

By implementing the derivative of each of the expressions in terms of
derivatives of its sub-expressions (sum, product and chain rules), the
derivative of arbitrary expression trees is available as a new expression
tree. Since these trees grow quickly with each derivative, the
realfunction.RealFunction.simplify() method reduces a tree using simple
algebraic identities (multiplying by zero or one, adding zero and folding two
constants).

All expressions are immutable and *picklable*, which means they can easily be
stored to disk and retrieved later. The realfunction.RealFunction class has a
convenience method realfunction.RealFunction.save() for this purpose. The
canonical singletons like basics.ZERO keep their identity when restored.
"""

from .realfunction import RealFunction, as_expression
from .basics import ConstantExpression, IdentityExpression, PowerExpression
from .basics import SumExpression, ProductExpression, CompositionExpression
from .basics import minus, ZERO, ONE, MINUS, ID
from .elementary import ExpExpression, LogExpression
from .elementary import SinExpression, CosExpression
from .elementary import EXP, LOG, SINE, COSINE
