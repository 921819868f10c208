"""
Character-level scanning helpers for the splitcalc compiler.

The compiler never tokenizes. It works on the raw expression string and
only needs to know where operators and parentheses are.
"""

from __future__ import annotations

from splitcalc.core.errors import UnbalancedParenthesesError
from splitcalc.core.ir.expressions import PRECEDENCE, OperatorKind

_OPERATOR_CHARS: dict[str, OperatorKind] = {op.value: op for op in OperatorKind}


def strip_spaces(source: str) -> str:
    """Remove every space character; nothing else is normalized."""
    return source.replace(" ", "")


def operator_from_char(c: str) -> OperatorKind | None:
    """The operator spelled by ``c``, or None if it is not an operator."""
    return _OPERATOR_CHARS.get(c)


def find_matching_paren(source: str, start: int) -> int | None:
    """Index of the ``)`` closing the ``(`` at ``start``, or None if it never closes."""
    depth = 1
    for i in range(start + 1, len(source)):
        c = source[i]
        if c == "(":
            depth += 1
        elif c == ")":
            depth -= 1
            if depth == 0:
                return i
    return None


def check_parentheses(source: str) -> None:
    """Raise if any parenthesis in ``source`` is unpaired."""
    depth = 0
    for c in source:
        if c == "(":
            depth += 1
        elif c == ")":
            depth -= 1
            if depth < 0:
                raise UnbalancedParenthesesError("Unexpected ')'", source)
    if depth > 0:
        raise UnbalancedParenthesesError("Missing ')'", source)


def find_split_point(
    source: str,
    precedence: int,
    *,
    skip_groups: bool = False,
    unary_minus: bool = False,
) -> int | None:
    """Find where to split ``source`` at the given precedence level.

    The rightmost eligible operator wins, which makes every operator
    left-associative: ``8-4-2`` splits into ``8-4`` and ``2``. A ``-``
    right after ``+`` or ``-`` is the sign of the next operand, so
    ``2+-3`` splits into ``2`` and ``-3``.

    Args:
        source: Expression with spaces already stripped.
        precedence: Level to look for (1 = ``+ -``, 2 = ``* /``, 3 = ``^``).
        skip_groups: Ignore operators inside parentheses.
        unary_minus: Treat a ``-`` that follows another operator as a sign.

    Returns:
        Index of the operator character, or None if there is none.
    """
    nesting = 0
    for i in range(len(source) - 1, -1, -1):
        c = source[i]
        if skip_groups:
            if c == ")":
                nesting += 1
                continue
            if c == "(":
                nesting -= 1
                continue
            if nesting > 0:
                continue

        op = operator_from_char(c)
        if op is None or PRECEDENCE[op] != precedence:
            continue
        if op in (OperatorKind.SUM, OperatorKind.MIN) and _is_exponent_sign(source, i):
            continue
        if op == OperatorKind.MIN:
            # Leading '-' is left for parse_number() as the sign
            if i == 0:
                continue
            before = operator_from_char(source[i - 1])
            # '2+-3', '5--2.0': sign of the right operand
            if before in (OperatorKind.SUM, OperatorKind.MIN):
                continue
            if unary_minus and before is not None:
                continue
        return i
    return None


def _is_exponent_sign(source: str, i: int) -> bool:
    """True for the sign in ``1e-05`` or ``2.5E+3``."""
    if i < 2 or source[i - 1] not in "eE":
        return False
    before = source[i - 2]
    return before.isdigit() or before == "."
