"""
Interactive read-eval-print loop.

Reads one single-letter command per line:

- h: print help
- q: quit
- o: prompt for an expression, then print ``<expression> = <result>``

End of input quits like ``q``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from rich.console import Console

from splitcalc.cli_ui import console as default_console
from splitcalc.cli_ui import print_error, print_help, print_result, print_welcome
from splitcalc.core.config import CompilerConfig
from splitcalc.core.errors import CalcError
from splitcalc.core.expression_lang import calculate

logger = logging.getLogger(__name__)

OPERATION_PROMPT = "Enter a operation: "
UNRECOGNIZED_ACTION = "Unrecognized action, type h for help"


class Repl:
    """Command loop around calculate()."""

    def __init__(
        self,
        config: CompilerConfig | None = None,
        console: Console | None = None,
        read_line: Callable[[str], str] | None = None,
    ) -> None:
        self.config = config or CompilerConfig()
        self.console = console or default_console
        self.read_line = read_line or self.console.input

    def run(self) -> None:
        """Loop until ``q`` or end of input."""
        print_welcome(self.console)
        while True:
            try:
                action = self.read_line("")
            except EOFError:
                logger.debug("End of input, leaving REPL")
                return
            if not self.handle(action):
                return

    def handle(self, action: str) -> bool:
        """Run one command. Returns False when the loop should stop."""
        action = action.strip()
        if action == "h":
            print_help(self.console)
        elif action == "q":
            return False
        elif action == "o":
            self.run_operation()
        else:
            self.console.print(UNRECOGNIZED_ACTION, markup=False, highlight=False)
        return True

    def run_operation(self) -> None:
        """Read one expression, then print its value or the compile error."""
        try:
            expression = self.read_line(OPERATION_PROMPT)
        except EOFError:
            return

        try:
            value = calculate(expression, self.config)
        except CalcError as e:
            logger.debug("Rejected %r: %s", expression, e)
            print_error(str(e), self.console)
            return

        logger.debug("Evaluated %r to %r", expression, value)
        print_result(expression, value, self.console)
