# -*- coding: utf-8 -*-
"""Small monads to use with the bang[] macro.

All of these provide the monadic bind both as the method ``and_then``, which
is what ``bang[]`` uses by default, and as the operator ``>>``, for use with
``bang[">>"]``.

  - ``Maybe``: a value that may be absent. ``Just(x)`` or ``Nothing``.
  - ``MonadicList``: nondeterministic choice; bind is flatmap.
  - ``Writer``: a value with an accumulated log.

If you need more monads, look into the ``OSlash`` library, or roll your own;
to work with ``bang[]``, a class only needs a bind operation.
"""

__all__ = ["Maybe", "Just", "Nothing", "MonadicList", "Writer"]

def _check_monad(cls, value):
    if not isinstance(value, cls):
        raise TypeError(f"Expected the bound function to return a {cls.__name__}, got {type(value)} with value {repr(value)}")
    return value

class Maybe:
    """A value that may be absent.

    The instances are ``Just(x)`` for a present value ``x``, and the
    singleton ``Nothing`` for an absent one. Binding ``Nothing`` to
    anything short-circuits the rest of the computation.
    """
    @classmethod
    def of(cls, x):
        """The unit operator. Lift value ``x`` into a ``Maybe``."""
        return Just(x)

    @classmethod
    def from_optional(cls, x):
        """Convert ``None`` to ``Nothing``, and anything else to ``Just(x)``."""
        if x is None:
            return Nothing
        return Just(x)

    def __rshift__(self, f):
        return self.and_then(f)

class Just(Maybe):
    """A present value."""
    __slots__ = ("value",)

    def __init__(self, value):
        self.value = value

    def and_then(self, f):
        """Monadic bind.

        self: M a
        f: a -> M b
        returns: M b
        """
        return _check_monad(Maybe, f(self.value))

    def map(self, f):
        """The map operator: ``Just(f(x))``."""
        return Just(f(self.value))

    def __eq__(self, other):
        if other is self:
            return True
        return isinstance(other, Just) and other.value == self.value

    def __hash__(self):
        return hash((Just, self.value))

    def __bool__(self):
        return True

    def __repr__(self):
        return f"Just({repr(self.value)})"

class _NothingType(Maybe):
    """The absent value. There is only one instance, ``Nothing``."""
    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def and_then(self, f):
        return self  # short-circuit

    def map(self, f):
        return self

    def __bool__(self):
        return False

    def __reduce__(self):
        return (_NothingType, ())

    def __repr__(self):
        return "Nothing"

Nothing = _NothingType()

class MonadicList:
    """A monadic list."""
    def __init__(self, *elts):
        """The unit operator. Lift value(s) into a MonadicList.

        *elts: a or [a]
        returns: M a
        """
        self.x = elts

    def and_then(self, f):
        """Monadic bind; standard notation ">>=" in Haskell.

        self: M a
        f: a -> M b
        returns: M b

        Generally speaking, bind is defined as::
            m >> f = m.fmap(f).join()

        Specifically for `MonadicList`, bind is `flatmap`.
        """
        return self.fmap(f).join()

    __rshift__ = and_then

    @classmethod
    def guard(cls, b):
        """Allow a branch of the computation to continue only if `b` is truthy.

        Produces a dummy `MonadicList`, with exactly one item if `b` is truthy,
        and blank if `b` is falsey. The blank one cancels the rest of that branch
        of the computation when bound.
        """
        if b:
            return cls(True)  # List with one element; value not intended to be actually used.
        return cls()  # 0-element List; short-circuit this branch of the computation.

    # make List iterable so that "for result in f(elt)" works (when f outputs a List monad)
    def __iter__(self):
        return iter(self.x)
    def __len__(self):
        return len(self.x)
    def __getitem__(self, i):
        return self.x[i]

    def __eq__(self, other):
        if other is self:
            return True
        if isinstance(other, MonadicList):
            return other.x == self.x
        if isinstance(other, tuple):
            return other == self.x
        return NotImplemented

    def __add__(self, other):
        """Concatenation of MonadicList, for convenience."""
        if not isinstance(other, MonadicList):
            raise TypeError(f"Expected a monadic list, got {type(other)} with value {repr(other)}")
        cls = self.__class__
        return cls.from_iterable(self.x + other.x)

    def __repr__(self):  # pragma: no cover
        clsname = self.__class__.__name__
        return f"{clsname}{self.x}"

    @classmethod
    def from_iterable(cls, iterable):
        """Convenience method: turn an iterable into a MonadicList.

        Eager; the input iterable will be iterated over in its entirety
        to produce the list. If it is consumable, it will be consumed.
        """
        return cls(*tuple(iterable))

    def fmap(self, f):
        """The map operator.

        self: M a
        f: a -> b
        returns: M b
        """
        cls = self.__class__
        return cls.from_iterable(f(elt) for elt in self.x)

    def join(self):
        """The join operator. Flatten nested self.

        x: M (M a)
        returns: M a
        """
        cls = self.__class__
        if not all(isinstance(elt, cls) for elt in self.x):
            raise TypeError(f"Expected a nested List monad, got {self.x}")
        # list of lists - concat them
        return cls.from_iterable(elt for sublist in self.x for elt in sublist)

class Writer:
    """A value with a log.

    Binding concatenates the logs, in the order the computation is sequenced.
    This makes it easy to check in which order the binds run::

        x = Writer(1, ["x"])
        y = Writer(2, ["y"])
        result = bang[Writer.pure(~x + ~y)]
        assert result.value == 3 and result.log == ("x", "y")
    """
    __slots__ = ("value", "log")

    def __init__(self, value, log=()):
        self.value = value
        self.log = tuple(log)

    @classmethod
    def pure(cls, value):
        """The unit operator. A value with an empty log."""
        return cls(value)

    @classmethod
    def tell(cls, *entries):
        """Log ``entries``, with ``None`` as the value."""
        return cls(None, entries)

    def and_then(self, f):
        """Monadic bind. The log of ``self`` comes first."""
        result = _check_monad(Writer, f(self.value))
        return Writer(result.value, self.log + result.log)

    __rshift__ = and_then

    def __eq__(self, other):
        if other is self:
            return True
        if not isinstance(other, Writer):
            return NotImplemented
        return other.value == self.value and other.log == self.log

    def __hash__(self):
        return hash((Writer, self.value, self.log))

    def __repr__(self):
        return f"Writer({repr(self.value)}, {repr(self.log)})"
