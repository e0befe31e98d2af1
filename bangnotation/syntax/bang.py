# -*- coding: utf-8 -*-
"""Bang notation: unwrap monadic values in the middle of an expression."""

__all__ = ["bang", "transform", "desugar"]

from ast import Attribute, Constant, Name, copy_location, fix_missing_locations, parse
from copy import deepcopy
import logging

from mcpyrate import parametricmacro, unparse

from .chain import build_chain, make_bind
from .lift import FreshNames, lift, make_marker

logger = logging.getLogger(__name__)

@parametricmacro
def bang(tree, *, args, syntax, expander, **kw):
    """[syntax, expr] Bang notation for monadic binds.

    Each subexpression prefixed with ``~`` is lifted out of the expression,
    and bound using the monadic bind operation. The lifted subexpression
    is replaced by the name it was bound to. Lifting proceeds left to right,
    and inside out.

    Example::

        x = Just(42)
        y = Just(58)
        assert bang[Just(~x + ~y)] == Just(100)

        y = Nothing
        assert bang[Just(~x + ~y)] is Nothing

    The transformation is::

        bang[f(~x, ~g(~y, ~z))]

        -->

        x.and_then(lambda a:
          y.and_then(lambda b:
            z.and_then(lambda c:
              g(b, c).and_then(lambda d:
                f(a, d)))))

    where the names ``a``, ``b``, ``c`` and ``d`` are gensymmed.

    By default, the bind operation is the ``and_then`` method of the monadic
    value. To use some other spelling, pass it as the first macro argument::

        bang["flat_map"][...]  # x.flat_map(lambda a: ...)
        bang[">>"][...]        # x >> (lambda a: ...)
        bang[bind][...]        # bind(x, lambda a: ...)

    The bind function in the last form is referred to by a bare name or an
    attribute, and is looked up at the use site.

    The lift marker can be changed with the optional second argument,
    one of ``"~"`` (default), ``"-"``, ``"+"`` or ``"not"``::

        bang["and_then", "-"][Just(-x + -y)]

    Inner macro invocations expand first, so a nested ``bang[]`` lifts its
    own marks into its own chain.

    **CAUTION**: Lifting is purely syntactic. A marked subexpression that
    refers to a name bound inside the expression (e.g. a lambda parameter
    or a comprehension variable) is lifted out of that name's scope.

    **CAUTION**: With ``"-"`` or ``"+"`` as the marker, a negative (or explicitly
    positive) numeric literal such as ``f(-1)`` is also a marked subexpression,
    and gets lifted as ``(1).and_then(...)``. Write ``f(0 - 1)`` instead, or
    keep the default marker.
    """
    if syntax != "expr":
        raise SyntaxError("bang is an expr macro only")  # pragma: no cover

    bind, marker = _parse_args(args)

    # Expand inside-out, so that inner `bang[]` invocations own their marks.
    tree = expander.visit_recursively(tree)

    newtree = transform(tree, bind=bind, marker=marker)
    if logger.isEnabledFor(logging.DEBUG):
        lineno = getattr(tree, "lineno", None)
        logger.debug("bang[] at line %s expands to: %s", lineno, unparse(newtree))
    return newtree

def transform(tree, *, bind=None, marker=None, prefix=None):
    """Desugar the bang notation in the expression AST ``tree``.

    This is the syntax transformer behind ``bang[]``, usable also without
    the macro expander, e.g. on a tree obtained from ``ast.parse``.

    Parameters:

        ``bind``: the bind operation; see ``chain.make_bind``.
            Default is the ``and_then`` method.

        ``marker``: the lift marker; see ``lift.make_marker``.
            Default is ``~``.

        ``prefix``: ``str``, the prefix of the placeholder names.
            Default is a gensym, which cannot clash with user code.

    The input tree is not modified. Return the new tree; if there are no
    marked subexpressions, it is structurally equal to the input.
    """
    marker = make_marker(marker)
    bind = make_bind(bind)
    body, lifted = lift(deepcopy(tree), marker=marker, names=FreshNames(prefix))
    logger.debug("lifted %d subexpression(s), binding with %s", len(lifted), bind)
    newtree = build_chain(body, lifted, bind=bind)
    if lifted:
        newtree = fix_missing_locations(copy_location(newtree, tree))
    return newtree

def desugar(source, *, bind=None, marker=None, prefix=None):
    """Desugar the bang notation in ``source``, a single expression.

    Return the source code of the result. If ``source`` is not a single
    expression, the ``SyntaxError`` from the parser propagates.

    Options as in ``transform``.

    **CAUTION**: The source code is back-converted from the AST representation;
    hence its surface syntax may look slightly different to the original (e.g.
    extra parentheses). See ``mcpyrate.unparse``.
    """
    tree = parse(source, mode="eval").body
    return unparse(transform(tree, bind=bind, marker=marker, prefix=prefix))

# --------------------------------------------------------------------------------

def _parse_args(args):
    """Interpret the macro arguments of ``bang[]``. Return ``(bind, marker)``."""
    if len(args) > 2:
        raise SyntaxError(f"bang takes at most two macro arguments, the bind operation and the lift marker; got {len(args)}")  # pragma: no cover

    bind = marker = None
    if args:
        spec = args[0]
        if type(spec) is Constant and isinstance(spec.value, str):
            spec = spec.value
        elif type(spec) not in (Name, Attribute):
            raise SyntaxError("bang: expected the bind operation as a method name or operator (str), or a reference to a bind function")  # pragma: no cover
        try:
            bind = make_bind(spec)
        except (TypeError, ValueError) as err:
            raise SyntaxError(f"bang: {err}") from err
    if len(args) == 2:
        spec = args[1]
        if not (type(spec) is Constant and isinstance(spec.value, str)):
            raise SyntaxError("bang: expected the lift marker as a str, such as '~'")  # pragma: no cover
        try:
            marker = make_marker(spec.value)
        except ValueError as err:
            raise SyntaxError(f"bang: {err}") from err
    return bind, marker
