"""Tests for the tree evaluator, including IEEE-754 edge cases."""

from __future__ import annotations

import math

import pytest

from splitcalc.core.expression_lang.evaluator import evaluate
from splitcalc.core.ir import Number, Operation, OperatorKind


def _op(op: OperatorKind, a: float, b: float) -> Operation:
    return Operation(op=op, left=Number(value=a), right=Number(value=b))


class TestArithmetic:
    def test_number(self) -> None:
        assert evaluate(Number(value=2.5)) == 2.5

    @pytest.mark.parametrize(
        ("op", "expected"),
        [
            (OperatorKind.SUM, 9.0),
            (OperatorKind.MIN, 3.0),
            (OperatorKind.MUL, 18.0),
            (OperatorKind.DIV, 2.0),
            (OperatorKind.POW, 216.0),
        ],
    )
    def test_operators(self, op: OperatorKind, expected: float) -> None:
        assert evaluate(_op(op, 6, 3)) == expected

    def test_nested(self) -> None:
        # (1 - 2) * 4
        tree = Operation(
            op=OperatorKind.MUL,
            left=_op(OperatorKind.MIN, 1, 2),
            right=Number(value=4),
        )
        assert evaluate(tree) == -4.0

    def test_negate(self) -> None:
        assert evaluate(Operation.negate(Number(value=7))) == -7.0

    def test_does_not_mutate_tree(self) -> None:
        tree = _op(OperatorKind.SUM, 1, 2)
        before = tree.model_dump()
        assert evaluate(tree) == evaluate(tree)
        assert tree.model_dump() == before

    def test_unknown_operator_evaluates_to_zero(self) -> None:
        tree = Operation.model_construct(op="%", left=Number(value=7), right=Number(value=2))
        assert evaluate(tree) == 0.0


class TestDivision:
    def test_positive_over_zero(self) -> None:
        assert evaluate(_op(OperatorKind.DIV, 1, 0)) == math.inf

    def test_negative_over_zero(self) -> None:
        assert evaluate(_op(OperatorKind.DIV, -1, 0)) == -math.inf

    def test_over_negative_zero(self) -> None:
        assert evaluate(_op(OperatorKind.DIV, 1, -0.0)) == -math.inf

    def test_zero_over_zero(self) -> None:
        assert math.isnan(evaluate(_op(OperatorKind.DIV, 0, 0)))

    def test_nan_over_zero(self) -> None:
        assert math.isnan(evaluate(_op(OperatorKind.DIV, math.nan, 0)))


class TestPower:
    def test_fractional_exponent(self) -> None:
        assert evaluate(_op(OperatorKind.POW, 9, 0.5)) == 3.0

    def test_negative_base_fractional_exponent(self) -> None:
        assert math.isnan(evaluate(_op(OperatorKind.POW, -8, 1 / 3)))

    def test_zero_to_negative_power(self) -> None:
        assert evaluate(_op(OperatorKind.POW, 0, -1)) == math.inf
        assert evaluate(_op(OperatorKind.POW, -0.0, -1)) == -math.inf
        assert evaluate(_op(OperatorKind.POW, -0.0, -2)) == math.inf

    def test_overflow(self) -> None:
        assert evaluate(_op(OperatorKind.POW, 10, 400)) == math.inf
        assert evaluate(_op(OperatorKind.POW, -10, 401)) == -math.inf
        assert evaluate(_op(OperatorKind.POW, -10, 400)) == math.inf

    def test_underflow(self) -> None:
        assert evaluate(_op(OperatorKind.POW, 10, -400)) == 0.0


class TestOverflow:
    def test_multiplication_overflow(self) -> None:
        assert evaluate(_op(OperatorKind.MUL, 1e308, 10)) == math.inf

    def test_infinity_minus_infinity(self) -> None:
        assert math.isnan(evaluate(_op(OperatorKind.MIN, math.inf, math.inf)))
