# -*- coding: utf-8 -*
"""Bang notation for Python: unwrap monadic values in the middle of an expression.

The macro lives in ``bangnotation.syntax`` (requires ``mcpyrate``)::

    from bangnotation.syntax import macros, bang  # noqa: F401
    from bangnotation import Just

    x = Just(42)
    y = Just(58)
    assert bang[Just(~x + ~y)] == Just(100)

This top-level module provides some ready-made monads; see ``bangnotation.monads``.
"""

__version__ = '0.1.0'

from .monads import *  # noqa: F401, F403
