"""
Expression tree types for splitcalc.

The compiler produces, and the evaluator consumes, a tree built from two
node kinds:

- Number: a leaf holding one float (finite, infinite or NaN)
- Operation: an operator with exactly two children

Unary minus has no node of its own; it is an Operation whose left child
is Number(0.0).
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class OperatorKind(StrEnum):
    """Binary operators, valued by their source character."""

    SUM = "+"
    MIN = "-"
    MUL = "*"
    DIV = "/"
    POW = "^"


MIN_PRECEDENCE = 1
MAX_PRECEDENCE = 3

PRECEDENCE: dict[OperatorKind, int] = {
    OperatorKind.SUM: 1,
    OperatorKind.MIN: 1,
    OperatorKind.MUL: 2,
    OperatorKind.DIV: 2,
    OperatorKind.POW: 3,
}


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class Number(BaseModel):
    """A numeric leaf."""

    kind: Literal["number"] = "number"
    value: float = Field(description="Leaf value; inf and nan are allowed")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return repr(self.value)


class Operation(BaseModel):
    """Binary operation: left op right."""

    kind: Literal["operation"] = "operation"
    op: OperatorKind
    left: Expr
    right: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"({self.left} {self.op.value} {self.right})"

    @classmethod
    def negate(cls, operand: Expr) -> Operation:
        """Unary minus, as ``0 - operand``."""
        return cls(op=OperatorKind.MIN, left=Number(value=0.0), right=operand)

    @property
    def children(self) -> tuple[Expr, Expr]:
        return (self.left, self.right)


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = Number | Operation

# Rebuild models for recursive forward references
Operation.model_rebuild()


# ---------------------------------------------------------------------------
# Tree helpers
# ---------------------------------------------------------------------------


def walk(tree: Expr) -> Iterator[Expr]:
    """Yield every node of the tree, parents before children."""
    stack: list[Expr] = [tree]
    while stack:
        node = stack.pop()
        yield node
        if isinstance(node, Operation):
            stack.append(node.right)
            stack.append(node.left)


def depth(tree: Expr) -> int:
    """Height of the tree; a single leaf has depth 1."""
    if isinstance(tree, Operation):
        return 1 + max(depth(tree.left), depth(tree.right))
    return 1
