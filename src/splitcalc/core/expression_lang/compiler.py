"""
Expression compiler for splitcalc.

Turns an expression string into a tree by splitting it at operators,
lowest precedence first, instead of tokenizing and descending a grammar:

    1. strip spaces
    2. resolve parentheses (fold them to numbers, or splice subtrees)
    3. for levels 1 (+ -), 2 (* /), 3 (^): split at the rightmost operator
       of that level and compile both sides
    4. no operator left: the whole string is a number or constant

Because the lowest-precedence operator ends up at the root, evaluating
leaves first makes higher-precedence operators bind tighter.
"""

from __future__ import annotations

import logging

from splitcalc.core.config import CompilerConfig, ParenMode
from splitcalc.core.errors import ExpressionTooDeepError
from splitcalc.core.expression_lang.evaluator import evaluate
from splitcalc.core.expression_lang.numbers import format_number, parse_number
from splitcalc.core.expression_lang.scanner import (
    check_parentheses,
    find_matching_paren,
    find_split_point,
    operator_from_char,
    strip_spaces,
)
from splitcalc.core.ir.expressions import (
    MAX_PRECEDENCE,
    MIN_PRECEDENCE,
    Expr,
    Number,
    Operation,
)

logger = logging.getLogger(__name__)


class _Compiler:
    """Recursive split compiler; holds only the settings, never the input."""

    def __init__(self, config: CompilerConfig) -> None:
        self.config = config

    def compile(self, source: str, depth: int) -> Expr:
        if depth > self.config.max_depth:
            raise ExpressionTooDeepError(self.config.max_depth, source)

        if self.config.paren_mode == ParenMode.FOLD and "(" in source:
            return self.compile(self._fold_first_group(source, depth), depth + 1)

        skip_groups = self.config.paren_mode == ParenMode.SPLICE
        for precedence in range(MIN_PRECEDENCE, MAX_PRECEDENCE + 1):
            i = find_split_point(
                source,
                precedence,
                skip_groups=skip_groups,
                unary_minus=self.config.unary_minus,
            )
            if i is None:
                continue
            op = operator_from_char(source[i])
            assert op is not None
            logger.debug("Splitting %r at %r (index %d)", source, op.value, i)
            left = self.compile(source[:i], depth + 1)
            right = self.compile(source[i + 1 :], depth + 1)
            return Operation(op=op, left=left, right=right)

        return self._compile_leaf(source, depth)

    def _fold_first_group(self, source: str, depth: int) -> str:
        """Replace the first parenthesized group with its value as text."""
        start = source.index("(")
        end = find_matching_paren(source, start)
        # compile_expr() already rejected unbalanced input
        assert end is not None

        inner = self.compile(source[start + 1 : end], depth + 1)
        value = format_number(evaluate(inner))
        logger.debug("Folded %r to %s", source[start : end + 1], value)
        return source[:start] + value + source[end + 1 :]

    def _compile_leaf(self, source: str, depth: int) -> Expr:
        """A number, a constant or (splice mode) a signed group."""
        if self.config.paren_mode == ParenMode.SPLICE:
            sign = "-" if source.startswith("-(") else ""
            body = source[len(sign) :]
            if body.startswith("(") and find_matching_paren(body, 0) == len(body) - 1:
                inner = self.compile(body[1:-1], depth + 1)
                return Operation.negate(inner) if sign else inner

        return Number(value=parse_number(source))


def compile_expr(source: str, config: CompilerConfig | None = None) -> Expr:
    """Compile an expression string into a tree.

    Args:
        source: Expression text (e.g., "2 * (3 + 4)")
        config: Compiler settings; defaults to CompilerConfig().

    Returns:
        The root of the compiled tree.

    Raises:
        MalformedNumberError: If a leaf is not a number or constant.
        UnbalancedParenthesesError: If parentheses do not pair up.
        ExpressionTooDeepError: If nesting exceeds config.max_depth.
    """
    config = config or CompilerConfig()
    stripped = strip_spaces(source)
    check_parentheses(stripped)
    logger.debug("Compiling %r (%s mode)", stripped, config.paren_mode.value)
    return _Compiler(config).compile(stripped, 0)


def calculate(source: str, config: CompilerConfig | None = None) -> float:
    """Compile and evaluate an expression string in one step."""
    return evaluate(compile_expr(source, config))
