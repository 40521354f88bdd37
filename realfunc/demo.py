#!/usr/bin/env python3
r"""@package realfunc.demo

Example driver printing a few expressions and their derivatives.

Usage:

    python -m realfunc.demo [-v|-vv] [-n N] [--no-simplify] [name ...]

Without names, all examples in #EXAMPLES are shown. Each is printed, then
differentiated `N` times (default `2`) and printed again, optionally after
simplification.
"""

import sys
import logging

from .exprs import ConstantExpression, ID, LOG, SINE, COSINE


logger = logging.getLogger(__name__)


def _examples():
    return dict(
        poly=ConstantExpression(2).multiply(ID.power(2)).add(ID),
        deux=ID.power(3).add(LOG.compose(SINE.compose(ID))),
        test=SINE.compose(COSINE.compose(LOG.compose(ID))),
        tangent=COSINE.power(-1).multiply(SINE),
        three=SINE.power(2).multiply(COSINE.compose(ID.power(2))),
    )

## Example expressions by name.
EXAMPLES = _examples()


def _get_option(argv, option, default):
    r"""Return the value following `option` in `argv` (or `default`)."""
    if option not in argv:
        return default
    idx = argv.index(option)
    try:
        return argv[idx+1]
    except IndexError:
        raise ValueError("Missing value for option %s." % option)


def show(name, expr, n=2, simplify=True):
    r"""Print an expression, its n'th derivative and the tree sizes."""
    print("Function %s : %s" % (name, expr.render()))
    deriv = expr.derivative(n)
    verbose = logger.isEnabledFor(logging.INFO)
    if verbose:
        logger.info("derivative %d of %s has %d nodes", n, name, deriv.node_count())
    print("Derivative %d : %s" % (n, deriv.render()))
    if simplify:
        deriv = deriv.simplify()
        if verbose:
            logger.info("simplified: %d nodes", deriv.node_count())
        print("Simplified : %s" % deriv.render())
    print("Value at 1 : %s" % deriv.evaluate(1.0))


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    level = logging.WARNING
    if '-v' in argv:
        level = logging.INFO
    if '-vv' in argv:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    n = int(_get_option(argv, '-n', 2))
    simplify = '--no-simplify' not in argv
    skip = set()
    if '-n' in argv:
        skip.add(argv.index('-n') + 1)
    names = [a for i, a in enumerate(argv)
             if not a.startswith('-') and i not in skip]
    for name in names:
        if name not in EXAMPLES:
            raise ValueError("Unknown example '%s'. Available: %s"
                             % (name, ", ".join(sorted(EXAMPLES))))
    for name in names or sorted(EXAMPLES):
        show(name, EXAMPLES[name], n=n, simplify=simplify)
        print()


if __name__ == "__main__":
    main()
