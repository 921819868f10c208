"""Core splitcalc functionality: IR, compiler, evaluator, errors and settings."""

from . import ir
from .config import CompilerConfig, ParenMode
from .errors import (
    CalcError,
    ExpressionTooDeepError,
    MalformedNumberError,
    UnbalancedParenthesesError,
)
from .expression_lang import calculate, compile_expr, evaluate

__all__ = [
    "ir",
    "CalcError",
    "MalformedNumberError",
    "UnbalancedParenthesesError",
    "ExpressionTooDeepError",
    "CompilerConfig",
    "ParenMode",
    "calculate",
    "compile_expr",
    "evaluate",
]
