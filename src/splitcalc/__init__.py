"""
splitcalc - console calculator built on an operator-splitting compiler.

Compiles arithmetic expressions into immutable trees and evaluates them
to floats with IEEE-754 semantics.
"""

from __future__ import annotations

from ._version import __version__

# Re-export commonly used types for convenience
from .core import ir
from .core.errors import (
    CalcError,
    ExpressionTooDeepError,
    MalformedNumberError,
    UnbalancedParenthesesError,
)
from .core.expression_lang import calculate, compile_expr, evaluate

__all__ = [
    "__version__",
    "ir",
    "calculate",
    "compile_expr",
    "evaluate",
    "CalcError",
    "MalformedNumberError",
    "UnbalancedParenthesesError",
    "ExpressionTooDeepError",
]
