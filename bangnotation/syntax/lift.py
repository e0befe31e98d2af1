# -*- coding: utf-8 -*-
"""Lift marked subexpressions out of an expression.

Each subexpression prefixed with the lift marker (by default ``~``) is moved
into a list of bindings and replaced by a reference to a freshly generated
name. The bindings are recorded left to right, inside out, so the list can
then be folded into a chain of monadic binds (see ``chain.py``).
"""

__all__ = ["FreshNames", "LiftTransformer", "lift", "make_marker"]

from ast import Call, Dict, IfExp, Invert, Load, Name, Not, UAdd, UnaryOp, USub, unaryop

from mcpyrate import gensym
from mcpyrate.quotes import is_captured_value
from mcpyrate.walkers import ASTTransformer

# Surface syntax of the unary operators that can serve as the lift marker.
_markers = {"~": Invert,
            "-": USub,
            "+": UAdd,
            "not": Not}

def make_marker(spec=None):
    """Normalize a lift marker specification into an ``ast.unaryop`` subclass.

    ``spec`` may be ``None`` (use the default, ``~``), the surface syntax of
    the operator as a ``str`` (``"~"``, ``"-"``, ``"+"``, ``"not"``), or the
    AST operator class itself (e.g. ``ast.Invert``).
    """
    if spec is None:
        return Invert
    if isinstance(spec, str):
        if spec not in _markers:
            raise ValueError(f"Unknown lift marker {repr(spec)}; expected one of {list(_markers)}")
        return _markers[spec]
    if isinstance(spec, type) and issubclass(spec, unaryop):
        return spec
    raise TypeError(f"Expected a lift marker as str or ast.unaryop subclass, got {type(spec)} with value {repr(spec)}")

class FreshNames:
    """Generate the placeholder names for one transformation.

    The names are ``prefix + index``, with the index counting up from zero.
    A fresh instance must be used for each transformation.

    If no ``prefix`` is given, one is gensymmed, so the names cannot clash
    with anything in user code. When passing an explicit ``prefix``, it is
    the caller's responsibility that no name in the input starts with it.
    """
    def __init__(self, prefix=None):
        if prefix is None:
            prefix = f"{gensym('bang')}_"
        if not f"{prefix}0".isidentifier():
            raise ValueError(f"Placeholder prefix must produce valid identifiers, got {repr(prefix)}")
        self.prefix = prefix
        self.count = 0

    def __call__(self):
        name = f"{self.prefix}{self.count}"
        self.count += 1
        return name

    def __repr__(self):  # pragma: no cover
        return f"<FreshNames {repr(self.prefix)}, {self.count} issued>"

class LiftTransformer(ASTTransformer):
    """Replace marked subexpressions with placeholders, collecting the bindings.

    State: ``marker`` (an ``ast.unaryop`` subclass), ``names`` (a ``FreshNames``).

    After ``visit``, ``self.collected`` holds the bindings ``(expr, name)``
    in discovery order.
    """
    def transform(self, tree):
        if is_captured_value(tree):
            return tree  # don't recurse!

        if type(tree) is UnaryOp and isinstance(tree.op, self.state.marker):
            # Inner marks first, so the operand refers only to already bound names.
            operand = self.visit(tree.operand)
            name = self.state.names()
            self.collect((operand, name))
            return Name(id=name, ctx=Load())

        # The AST field order is the written order for almost all node types.
        # These three are the exceptions.
        if type(tree) is Dict:
            for j, (k, v) in enumerate(zip(tree.keys, tree.values)):
                if k is not None:  # `**mapping` has no key
                    tree.keys[j] = self.visit(k)
                tree.values[j] = self.visit(v)
            return tree
        if type(tree) is IfExp:  # body if test else orelse
            tree.body = self.visit(tree.body)
            tree.test = self.visit(tree.test)
            tree.orelse = self.visit(tree.orelse)
            return tree
        if type(tree) is Call:  # positional and named args may interleave: f(k=v, *rest)
            tree.func = self.visit(tree.func)
            for field, j in _call_argument_slots(tree):
                children = getattr(tree, field)
                children[j] = self.visit(children[j])
            return tree

        return self.generic_visit(tree)

def _call_argument_slots(tree):
    """Return ``(field, index)`` of the arguments of a ``Call``, in the written order.

    Without location info, fall back to ``args`` first, then ``keywords``.
    """
    slots = ([("args", j) for j in range(len(tree.args))] +
             [("keywords", j) for j in range(len(tree.keywords))])
    nodes = [getattr(tree, field)[j] for field, j in slots]
    if not all(hasattr(node, "lineno") and hasattr(node, "col_offset") for node in nodes):
        return slots
    positions = [(node.lineno, node.col_offset) for node in nodes]
    return [slot for _, slot in sorted(zip(positions, slots))]

def lift(tree, marker=Invert, names=None):
    """Lift the marked subexpressions out of ``tree``.

    Return ``(tree, lifted)``, where ``tree`` has each marked subexpression
    replaced by a ``Name`` referring to its placeholder, and ``lifted`` is
    the list of ``(expr, name)`` pairs in discovery order: left to right,
    and for nested marks, the inner ones before the mark enclosing them.

    The input is modified in place. Make a copy first if you need the original.

    ``names``: a ``FreshNames`` instance. If not given, one with a gensymmed
    prefix is created.

    There is no limit on the nesting depth; a pathologically deep tree
    raises ``RecursionError``.
    """
    if names is None:
        names = FreshNames()
    lifter = LiftTransformer(marker=marker, names=names)
    tree = lifter.visit(tree)
    return tree, lifter.collected
