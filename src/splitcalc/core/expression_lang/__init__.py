"""
splitcalc expression language.

Compiler and evaluator for arithmetic expressions over floats with the
operators + - * / ^ and the constants pi and e.

Usage:
    from splitcalc.core.expression_lang import compile_expr, evaluate

    tree = compile_expr("2 * (3 + 4)")
    result = evaluate(tree)
    # result == 14.0
"""

from splitcalc.core.expression_lang.compiler import calculate, compile_expr
from splitcalc.core.expression_lang.evaluator import evaluate
from splitcalc.core.expression_lang.numbers import format_result, parse_number

compile = compile_expr

__all__ = ["calculate", "compile", "compile_expr", "evaluate", "format_result", "parse_number"]
