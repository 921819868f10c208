"""
Rich console output for the splitcalc CLI and REPL.
"""

from rich import box
from rich.console import Console
from rich.style import Style
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from splitcalc.core.expression_lang import format_result
from splitcalc.core.ir import Expr, Number

console = Console()
err_console = Console(stderr=True)

# Style definitions
STYLES = {
    "title": Style(color="bright_cyan", bold=True),
    "result": Style(color="green", bold=True),
    "error": Style(color="red", bold=True),
    "info": Style(color="cyan"),
    "muted": Style(color="bright_black"),
    "operator": Style(color="yellow", bold=True),
}

COMMANDS = [
    ("h", "prints the help to the console"),
    ("q", "quits the program"),
    ("o", "execute a operation"),
]

OPERATORS = [
    ("+", "addition"),
    ("-", "subtraction (or a leading sign)"),
    ("*", "multiplication"),
    ("/", "division"),
    ("^", "power"),
]

CONSTANTS = [
    ("pi", "3.14159265358979..."),
    ("e", "2.71828182845904..."),
]


def print_welcome(out: Console = console) -> None:
    out.print(
        Text("Welcome to calculator, type an action to do (type h for help)", style=STYLES["title"])
    )


def print_help(out: Console = console) -> None:
    """Print commands, operators and constants."""
    out.print(Text("Commands:", style=STYLES["title"]))
    for name, description in COMMANDS:
        out.print(Text(f" - ({name}): {description}"))

    table = Table(box=box.SIMPLE, show_header=True, header_style=STYLES["info"])
    table.add_column("Operator")
    table.add_column("Meaning")
    for symbol, description in OPERATORS:
        table.add_row(Text(symbol, style=STYLES["operator"]), description)
    out.print(table)

    table = Table(box=box.SIMPLE, show_header=True, header_style=STYLES["info"])
    table.add_column("Constant")
    table.add_column("Value")
    for name, value in CONSTANTS:
        table.add_row(name, value)
    out.print(table)


def print_result(expression: str, value: float, out: Console = console) -> None:
    """Print ``<expression> = <result>``."""
    line = Text(f"{expression} = ")
    line.append(format_result(value), style=STYLES["result"])
    out.print(line)


def print_error(message: str, out: Console = console) -> None:
    """Print an error message."""
    out.print(Text(f"✗ {message}", style=STYLES["error"]))


def print_info(message: str, out: Console = console) -> None:
    """Print an info message."""
    out.print(Text(message, style=STYLES["info"]))


def build_tree(tree: Expr, label: str | None = None) -> Tree:
    """Render a compiled expression as a rich Tree."""
    root = Tree(label or _node_label(tree))
    _add_children(root, tree)
    return root


def _node_label(node: Expr) -> Text:
    if isinstance(node, Number):
        return Text(format_result(node.value))
    label = Text(node.op.name, style=STYLES["operator"])
    return label.append(f" {node.op.value}", style=STYLES["muted"])


def _add_children(branch: Tree, node: Expr) -> None:
    if isinstance(node, Number):
        return
    for child in node.children:
        _add_children(branch.add(_node_label(child)), child)
