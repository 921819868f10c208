"""
Expression evaluator for splitcalc.

Reduces a compiled tree to a single float. Pure evaluation: no I/O, no
side effects, and no exceptions for numeric edge cases. Division by zero,
overflow and domain errors produce the IEEE-754 values (inf, -inf, nan)
that the C library would return.
"""

from __future__ import annotations

import math
from collections.abc import Callable

from splitcalc.core.ir.expressions import Expr, Number, OperatorKind


def evaluate(tree: Expr) -> float:
    """Evaluate a compiled expression tree.

    Children are evaluated left then right. The tree is not modified.

    Args:
        tree: Tree returned by compile_expr().

    Returns:
        The computed value, possibly inf, -inf or nan.
    """
    return _interpret(tree)


def _interpret(node: Expr) -> float:
    if isinstance(node, Number):
        return node.value

    left = _interpret(node.left)
    right = _interpret(node.right)
    apply = _OPERATIONS.get(node.op)
    if apply is None:
        return 0.0
    return apply(left, right)


def _divide(a: float, b: float) -> float:
    """IEEE-754 division; Python raises ZeroDivisionError instead."""
    if b != 0.0:
        return a / b
    if a == 0.0 or math.isnan(a):
        return math.nan
    # Sign follows both operands, including a negative zero divisor
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _is_odd_integer(x: float) -> bool:
    return math.isfinite(x) and x.is_integer() and int(x) % 2 == 1


def _power(a: float, b: float) -> float:
    """C ``pow()`` semantics on top of math.pow()."""
    try:
        return math.pow(a, b)
    except OverflowError:
        if a < 0.0 and _is_odd_integer(b):
            return -math.inf
        return math.inf
    except ValueError:
        # Zero to a negative power is a pole, otherwise a domain error
        if a == 0.0:
            if _is_odd_integer(b):
                return math.copysign(math.inf, a)
            return math.inf
        return math.nan


_OPERATIONS: dict[OperatorKind, Callable[[float, float], float]] = {
    OperatorKind.SUM: lambda a, b: a + b,
    OperatorKind.MIN: lambda a, b: a - b,
    OperatorKind.MUL: lambda a, b: a * b,
    OperatorKind.DIV: _divide,
    OperatorKind.POW: _power,
}
