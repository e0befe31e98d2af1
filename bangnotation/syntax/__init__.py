# -*- coding: utf-8 -*-
"""bangnotation.syntax: the bang[] macro and its syntax transformers.

Requires `mcpyrate`.

Usage::

    from bangnotation.syntax import macros, bang  # noqa: F401

The syntax transformers can also be used as regular functions, on ASTs
obtained e.g. from ``ast.parse``; see ``transform`` and ``desugar``.
Since the syntax transformers themselves use macros, importing this module
as regular code requires ``import mcpyrate.activate`` first.
"""

# --------------------------------------------------------------------------------
# This module only re-exports. The submodules contain the macro interface
# (and its docstring), and the syntax transformers that implement it:
#
#   - `lift`: find the marked subexpressions, replace them with placeholders.
#   - `chain`: fold the lifted bindings into nested binds.
#   - `bang`: the macro interface, and entry points for regular code.
# --------------------------------------------------------------------------------

from .bang import *  # noqa: F401, F403
from .chain import *  # noqa: F401, F403
from .lift import *  # noqa: F401, F403
