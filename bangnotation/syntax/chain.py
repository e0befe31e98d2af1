# -*- coding: utf-8 -*-
"""Fold lifted bindings into a chain of monadic binds.

How the bind operation is spelled depends on the monad library in use, so it
is pluggable. Three spellings are supported::

    MethodBind("and_then")  # m.and_then(lambda x: ...)
    FunctionBind("bind")    # bind(m, lambda x: ...)
    OperatorBind(">>")      # m >> (lambda x: ...)

``make_bind`` converts a short specification into one of these.
"""

__all__ = ["BindStyle", "MethodBind", "FunctionBind", "OperatorBind",
           "make_bind", "build_chain"]

from ast import (Add, Attribute, BitAnd, BitOr, BitXor, Div, FloorDiv,
                 LShift, MatMult, Mod, Mult, Name, Pow, RShift, Sub,
                 arg, operator, parse)
from copy import deepcopy

from mcpyrate.quotes import macros, q, a  # noqa: F401

from mcpyrate import unparse

_operators = {">>": RShift, "<<": LShift,
              "|": BitOr, "&": BitAnd, "^": BitXor,
              "@": MatMult, "*": Mult, "/": Div, "//": FloorDiv, "%": Mod, "**": Pow,
              "+": Add, "-": Sub}

def _callback(name, body):
    """lambda name: body"""
    lam = q[lambda _: a[body]]
    lam.args.args = [arg(arg=name, annotation=None, type_comment=None)]
    return lam

class BindStyle:
    """Base class for the spellings of the bind operation.

    Calling an instance as ``style(expr, name, body)`` produces the AST for
    binding ``expr`` to the callback ``lambda name: body``.
    """
    def __call__(self, expr, name, body):
        return self.invoke(expr, _callback(name, body))

    def invoke(self, expr, callback):
        """Return the AST invoking the bind operation on ``expr`` and ``callback``."""
        raise NotImplementedError

class MethodBind(BindStyle):
    """Bind as a method of the monadic value: ``expr.name(callback)``."""
    def __init__(self, name="and_then"):
        if not name.isidentifier():
            raise ValueError(f"Expected the bind method name as an identifier, got {repr(name)}")
        self.name = name

    def invoke(self, expr, callback):
        tree = q[a[expr]._bind_(a[callback])]
        tree.func.attr = self.name
        return tree

    def __repr__(self):
        return f"MethodBind({repr(self.name)})"

class FunctionBind(BindStyle):
    """Bind as a free function: ``ref(expr, callback)``.

    ``ref`` is the function reference, either as source code (a bare name such
    as ``"bind"`` or a dotted one such as ``"monads.bind"``), or as an AST
    (``ast.Name`` or ``ast.Attribute``).
    """
    def __init__(self, ref):
        if isinstance(ref, str):
            ref = parse(ref, mode="eval").body
        if type(ref) not in (Name, Attribute):
            raise ValueError(f"Expected the bind function as a name or attribute, got {type(ref)}")
        self.ref = ref

    def invoke(self, expr, callback):
        # Every chain link needs its own copy of the reference.
        return q[a[deepcopy(self.ref)](a[expr], a[callback])]

    def __repr__(self):
        return f"FunctionBind({repr(unparse(self.ref))})"

class OperatorBind(BindStyle):
    """Bind as a binary operator: ``expr >> callback``.

    ``op`` is the surface syntax of the operator (e.g. ``">>"``), or the
    ``ast.operator`` subclass (e.g. ``ast.RShift``).
    """
    def __init__(self, op=">>"):
        if isinstance(op, str):
            if op not in _operators:
                raise ValueError(f"Unknown binary operator {repr(op)}; expected one of {list(_operators)}")
            op = _operators[op]
        if not (isinstance(op, type) and issubclass(op, operator)):
            raise TypeError(f"Expected an ast.operator subclass, got {type(op)} with value {repr(op)}")
        self.op = op

    def invoke(self, expr, callback):
        tree = q[a[expr] >> a[callback]]
        tree.op = self.op()
        return tree

    def __repr__(self):
        return f"OperatorBind({self.op.__name__})"

def make_bind(spec=None):
    """Normalize a bind operation specification into a ``BindStyle``.

    ``spec`` can be:

        - ``None``: the default, ``MethodBind("and_then")``.
        - A ``BindStyle`` instance, returned as-is.
        - A ``str``: a binary operator such as ``">>"`` means ``OperatorBind``;
          an identifier means ``MethodBind`` with that method name.
        - An ``ast.operator`` subclass: ``OperatorBind``.
        - An AST expression (``ast.Name`` or ``ast.Attribute``): ``FunctionBind``.
    """
    if spec is None:
        return MethodBind()
    if isinstance(spec, BindStyle):
        return spec
    if isinstance(spec, str):
        if spec in _operators:
            return OperatorBind(spec)
        if spec.isidentifier():
            return MethodBind(spec)
        raise ValueError(f"Expected a method name or a binary operator, got {repr(spec)}")
    if isinstance(spec, type) and issubclass(spec, operator):
        return OperatorBind(spec)
    if type(spec) in (Name, Attribute):
        return FunctionBind(spec)
    raise TypeError(f"Expected a bind specification, got {type(spec)} with value {repr(spec)}")

def build_chain(tree, lifted, bind=None):
    """Wrap ``tree`` in the chain of binds for the ``lifted`` bindings.

    ``lifted`` is a list of ``(expr, name)`` pairs, as produced by ``lift``.
    The first binding becomes the outermost bind, so each name is in scope
    in all of the later bindings as well as in ``tree``.

    With no bindings, ``tree`` is returned as-is.
    """
    bind = make_bind(bind)
    for expr, name in reversed(lifted):
        tree = bind(expr, name, tree)
    return tree
