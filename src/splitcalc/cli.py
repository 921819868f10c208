"""
splitcalc CLI.

Running ``splitcalc`` with no command starts the interactive REPL.
The ``eval`` and ``tree`` commands work on a single expression.
"""

from __future__ import annotations

import logging
import platform
import sys

import typer

from splitcalc._version import get_version
from splitcalc.cli_ui import (
    build_tree,
    console,
    err_console,
    print_error,
    print_info,
    print_result,
)
from splitcalc.core.config import DEFAULT_MAX_DEPTH, CompilerConfig, ParenMode
from splitcalc.core.errors import CalcError
from splitcalc.core.expression_lang import compile_expr, evaluate
from splitcalc.core.ir import Expr
from splitcalc.repl import Repl

logger = logging.getLogger(__name__)


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        print_info(f"splitcalc {get_version()}")
        print_info(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


app = typer.Typer(
    help="""splitcalc – console calculator

Operators: + - * / ^   Constants: pi, e

Run without a command to start the interactive calculator.
Put -- before expressions that start with '-':  splitcalc eval -- -5+8
""",
)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log compiler decisions to stderr"),
    max_depth: int = typer.Option(
        DEFAULT_MAX_DEPTH,
        "--max-depth",
        min=1,
        max=400,
        help=(
            "Maximum compile depth; each operator in a chain and each parenthesis level counts one"
        ),
    ),
    paren_mode: ParenMode = typer.Option(
        ParenMode.FOLD,
        "--paren-mode",
        help="fold: evaluate groups and substitute the value; splice: keep groups as subtrees",
    ),
    unary_minus: bool = typer.Option(
        False,
        "--unary-minus",
        help="Accept '-' right after an operator as a sign, e.g. 3*-2",
    ),
) -> None:
    """Start the interactive calculator, or run a subcommand."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )

    ctx.obj = CompilerConfig(
        paren_mode=paren_mode,
        unary_minus=unary_minus,
        max_depth=max_depth,
    )
    if ctx.invoked_subcommand is None:
        Repl(ctx.obj).run()


def _compile_or_exit(expression: str, config: CompilerConfig) -> Expr:
    try:
        return compile_expr(expression, config)
    except CalcError as e:
        logger.debug("Compile failed for %r", expression, exc_info=True)
        print_error(str(e), err_console)
        raise typer.Exit(code=1)


@app.command("eval")
def eval_command(
    ctx: typer.Context,
    expression: str = typer.Argument(..., help="Expression to evaluate, e.g. '2*(3+4)'"),
) -> None:
    """Evaluate one expression and print ``<expression> = <result>``."""
    tree = _compile_or_exit(expression, ctx.obj)
    print_result(expression, evaluate(tree), console)


@app.command("tree")
def tree_command(
    ctx: typer.Context,
    expression: str = typer.Argument(..., help="Expression to compile"),
) -> None:
    """Show the compiled expression tree."""
    tree = _compile_or_exit(expression, ctx.obj)
    console.print(build_tree(tree))
    print_result(expression, evaluate(tree), console)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main(sys.argv[1:])
