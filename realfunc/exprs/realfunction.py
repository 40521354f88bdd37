r"""@package realfunc.exprs.realfunction

Base of the RealFunction expression system.

The idea is to have a notion of a function of one real variable which is
'self aware' and can e.g. produce its own derivative as a new expression.
Furthermore, we want to be able to build composite expressions out of other,
more basic expressions.

Each expression is a node in an expression tree. Leaves are constants, the
identity, powers of the variable and the elementary functions in the
elementary module. Composite nodes (sums, products and compositions) define
their value, derivative and text form in terms of their sub-expressions.

Expressions are immutable. Differentiating or simplifying an expression
creates a new tree, possibly sharing sub-trees with the original one.

As a simple example, let's build \f$ 2 x^2 + x \f$ and its derivative:

~~~.py
f = ConstantExpression(2).multiply(ID.power(2)).add(ID)
print(f)                         # 2 * x^2 + x
df = f.derivative()
print(df.evaluate(1.0))          # 5.0
print(df.simplify())             # 2 * 2 * x + 1
~~~

The operators `+`, `-`, `*`, `/`, `**` and unary `-` are shortcuts for the
builder methods add(), multiply(), power() and the `basics.minus()` function.
"""

from abc import ABCMeta, abstractmethod
import logging
import numbers

import sympy as sp

from ..pickle_helpers import prepare_dict, restore_dict
from ..pickle_helpers import prepare_value, restore_value, singleton_key
from ..utils import save_to_file, load_from_file
from .common import ARG


__all__ = [
    "RealFunction",
    "as_expression",
]


logger = logging.getLogger(__name__)


def as_expression(obj):
    """Ensure an object is an expression, converting it if necessary.

    Real numbers are converted to a `ConstantExpression`. Anything else that
    is not already an expression raises a `TypeError`.
    """
    if isinstance(obj, RealFunction):
        return obj
    if isinstance(obj, numbers.Real):
        from .basics import ConstantExpression
        return ConstantExpression(obj)
    raise TypeError("Cannot use %r as expression." % (obj,))


class RealFunction(metaclass=ABCMeta):
    """Parent class for real functions of one real variable.

    They support numeric evaluation, symbolic differentiation, simplification
    and building a string representation of the complete expression,
    including any sub-expressions. They can be stored to disk and loaded back
    from disk.

    The methods a child has to override are:
        * evaluate() computing the value at a point
        * _derivative() returning the derivative as a new expression
        * _render() returning the text form for a given argument text
        * _to_sympy() returning the SymPy form for a given argument
    Children with sub-expressions should also override simplify().
    """
    # Let numpy scalars defer to our reflected operators.
    __array_ufunc__ = None

    def __init__(self, name=None, **sub_exprs):
        r"""Base class init for expressions.

        The ``**sub_exprs`` sub expressions given as keyword arguments here
        are stored in this object and can be accessed with sub_expr() using
        the keys used here. They are used when traversing through a complete
        expression hierarchy in e.g. print_tree() or traverse_tree().

        Args:
            name: (string, optional)
                Name for the expression. Can be useful to label expressions in
                a more complex expression tree to indicate their role/meaning.
                By default, the current class name is used as name.
            **sub_exprs:
                Sub expressions. Real numbers are converted to constants.
        """
        self.__name = name if name else self.__class__.__name__
        self.__sub_expressions = dict(
            (k, as_expression(e)) for k, e in sub_exprs.items()
        )

    @property
    def name(self):
        r"""Name given to this instance of the expression."""
        return self.__name

    @property
    def nice_name(self):
        r"""More descriptive name, which may be overridden by sub classes."""
        return self.__name

    def sub_expr(self, key):
        r"""Return the sub-expression stored under `key`."""
        return self.__sub_expressions[key]

    @abstractmethod
    def evaluate(self, x):
        r"""Evaluate the function at `x`.

        Domain problems (like the logarithm of a negative number) are not
        intercepted and result in `nan` or `inf` values. The argument may also
        be a numpy array, which is evaluated element-wise.
        """
        pass

    def derivative(self, n=1, simplify=False):
        r"""Return the n'th derivative as a new expression.

        Args:
            n: Derivative order. Default is `1`. For `n=0`, the expression
                itself is returned.
            simplify: Whether to simplify the result after each
                differentiation step. Without simplification, the tree size
                grows quickly with each derivative. Default is `False`.
        """
        if n < 0:
            raise ValueError("Derivative order must be non-negative, got %r." % (n,))
        expr = self
        for i in range(n):
            expr = expr._derivative()
            if simplify:
                expr = expr.simplify()
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("derivative %d of %s: %d nodes",
                             i+1, self.nice_name, expr.node_count())
        return expr

    @abstractmethod
    def _derivative(self):
        r"""Child classes need to implement this and return their first derivative."""
        pass

    def simplify(self):
        r"""Return an equivalent and usually smaller expression.

        Simplifying is idempotent, i.e. simplifying the result again will
        produce an expression with the same text form. The default
        implementation returns the expression itself, which is correct for all
        expressions that cannot be reduced further.
        """
        return self

    def render(self):
        r"""Return a human readable text form of the complete expression."""
        return self._render(ARG)[0]

    @abstractmethod
    def _render(self, arg):
        """Text form of this expression applied to a rendered argument.

        Both `arg` and the return value are pairs ``(text, level)``, where
        `level` is the precedence of the outermost operation in `text` (see
        the common module). For example, the sine applied to ``("x + 1", SUM)``
        returns ``("sin(x + 1)", ATOM)``. Compositions pass the rendered inner
        expression as argument to the outer one.
        """
        pass

    def to_sympy(self, arg=None):
        r"""Convert the expression to a SymPy expression.

        Args:
            arg: SymPy expression to use as argument. By default, the symbol
                `x` is used.
        """
        if arg is None:
            arg = sp.Symbol('x')
        return self._to_sympy(arg)

    @abstractmethod
    def _to_sympy(self, arg):
        r"""Child classes need to implement this and convert themselves for the argument `arg`."""
        pass

    def is_zero_expression(self):
        r"""Return whether this expression is known to be zero.

        This is only `True` for expressions known to be zero by construction
        (e.g. the `ZERO` constant), never for expressions which happen to
        evaluate to zero.
        """
        return False

    def compose(self, other):
        r"""Return the composition `self(other(x))`."""
        from .basics import CompositionExpression
        return CompositionExpression(self, other)

    def add(self, other):
        r"""Return the sum of this and another expression."""
        from .basics import SumExpression
        return SumExpression(self, other)

    def multiply(self, other):
        r"""Return the product of this and another expression."""
        from .basics import ProductExpression
        return ProductExpression(self, other)

    def power(self, e):
        r"""Return this expression raised to the real power `e`."""
        from .basics import PowerExpression
        return PowerExpression(e).compose(self)

    def _coerce(self, other):
        r"""Convert an operand for an operator or return `None` if impossible."""
        try:
            return as_expression(other)
        except TypeError:
            return None

    def __add__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.add(self)

    def __sub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.add(-other)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.add(-self)

    def __mul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.multiply(self)

    def __truediv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.multiply(other.power(-1))

    def __rtruediv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.multiply(self.power(-1))

    def __pow__(self, e):
        if not isinstance(e, numbers.Real):
            return NotImplemented
        return self.power(e)

    def __neg__(self):
        from .basics import minus
        return minus(self)

    def traverse_tree(self, include_root=False, skip_zeros=False, parents=None):
        r"""Generator that walks through a complete expression tree.

        In each iteration, the returned values represent the current node's
        parents (as a list from root to immediate parent), its key under which
        it is stored in its parent, and the node itself.

        Args:
            include_root: Whether to include the root as first item. Default
                is `False`.
            skip_zeros: Whether to skip expressions known to be zero (see
                is_zero_expression()). Default is `False`.
            parents: Optional list of parents of the root. Normally only used
                internally for the recursion.

        @b Examples
        \code
            for parents, name, expr in root_expr.traverse_tree():
                print("-"*len(parents), name)
        \endcode

        """
        if parents is None:
            parents = []
        if include_root:
            yield parents, "", self
        parents = parents + [self]
        for name, expr in self.__sub_expressions.items():
            if skip_zeros and expr.is_zero_expression():
                continue
            yield parents, name, expr
            for node in expr.traverse_tree(include_root=False,
                                           skip_zeros=skip_zeros,
                                           parents=parents):
                yield node

    def print_tree(self, root_name='root', nice_names=True, skip_zeros=False):
        r"""Print the whole expression tree.

        Each expression's key under which it is stored as sub expression will
        be shown as well as its actual name and the class name.

        Args:
            root_name: Key name to print for the root expression.
            nice_names: Whether to use the nice more descriptive name (when
                implemented) or the usually shorter abstract names.
            skip_zeros: Whether to skip sub expressions known to be zero.
        """
        def _p(expr, name, parents=()):
            n = expr.nice_name if nice_names else expr.name
            print("%s%s [%s] <%s>" % (
                ". " * len(parents), name, n, type(expr).__name__
            ))
        _p(self, root_name)
        for parents, name, expr in self.traverse_tree(skip_zeros=skip_zeros):
            _p(expr, name, parents)

    def node_count(self):
        r"""Number of nodes in the tree, counting shared nodes at each occurrence."""
        return 1 + sum(1 for _ in self.traverse_tree())

    def save(self, filename, overwrite=False, verbose=True):
        r"""Save the expression object to disk.

        Args:
            filename: The file name to store the data in. An extension
                ``'.npy'`` will be added if not already there.
            overwrite: Whether to overwrite an existing file with the same
                name. If `False` (default) and such a file exists, a
                `RuntimeError` is raised.
            verbose: Whether to print when the file was written. Default is
                `True`.
        """
        save_to_file(
            filename, self, overwrite=overwrite, verbose=verbose,
            showname="%s [%s]" % (self.nice_name, type(self).__name__)
        )

    @classmethod
    def load(cls, filename):
        r"""Static function to load an expression object from disk."""
        expr = load_from_file(filename)
        if not isinstance(expr, cls):
            raise TypeError("File does not contain a %s: %s"
                            % (cls.__name__, filename))
        return expr

    def __getstate__(self):
        r"""Return a picklable state with all singletons replaced by references."""
        return prepare_dict(self.__dict__)

    def __setstate__(self, state):
        r"""Restore a complete expression from the given unpickled state."""
        self.__dict__.update(restore_dict(state))

    def __reduce_ex__(self, protocol):
        # Singletons are pickled by reference to keep their identity.
        if singleton_key(self) is not None:
            return (restore_value, (prepare_value(self),))
        return super().__reduce_ex__(protocol)

    def __str__(self):
        return self.render()

    def __repr__(self):
        r"""Return a string representing the whole expression tree.

        This string may become relatively large for derivatives that have not
        been simplified.
        """
        return "<%s(%s)>" % (self.__class__.__name__, self.render())
