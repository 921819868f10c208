"""
splitcalc intermediate representation (IR) types.

All types are re-exported from this package.
"""

from .expressions import (
    MAX_PRECEDENCE,
    MIN_PRECEDENCE,
    PRECEDENCE,
    Expr,
    Number,
    Operation,
    OperatorKind,
    depth,
    walk,
)

__all__ = [
    "Expr",
    "Number",
    "Operation",
    "OperatorKind",
    "PRECEDENCE",
    "MIN_PRECEDENCE",
    "MAX_PRECEDENCE",
    "depth",
    "walk",
]
