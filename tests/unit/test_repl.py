"""Tests for the interactive command loop."""

from __future__ import annotations

from collections.abc import Callable

from rich.console import Console

from splitcalc.core.config import CompilerConfig, ParenMode
from splitcalc.repl import OPERATION_PROMPT, UNRECOGNIZED_ACTION, Repl


def _reader(lines: list[str], prompts: list[str]) -> Callable[[str], str]:
    """Feed ``lines`` one by one, then signal end of input."""
    remaining = iter(lines)

    def read(prompt: str) -> str:
        prompts.append(prompt)
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    return read


def _run(console: Console, lines: list[str], config: CompilerConfig | None = None) -> str:
    prompts: list[str] = []
    Repl(config, console=console, read_line=_reader(lines, prompts)).run()
    return console.file.getvalue()  # type: ignore[attr-defined]


class TestRepl:
    def test_welcome(self, capture_console: Console) -> None:
        output = _run(capture_console, ["q"])
        assert "Welcome to calculator" in output

    def test_operation(self, capture_console: Console) -> None:
        output = _run(capture_console, ["o", "2+3*4", "q"])
        assert "2+3*4 = 14" in output

    def test_operation_echoes_expression_text(self, capture_console: Console) -> None:
        output = _run(capture_console, ["o", "2 * ( 3 + 4 )", "q"])
        assert "2 * ( 3 + 4 ) = 14" in output

    def test_operation_prompt(self, capture_console: Console) -> None:
        prompts: list[str] = []
        Repl(console=capture_console, read_line=_reader(["o", "1+1"], prompts)).run()
        assert OPERATION_PROMPT in prompts

    def test_special_values_are_printed(self, capture_console: Console) -> None:
        output = _run(capture_console, ["o", "1/0", "o", "0/0", "q"])
        assert "1/0 = inf" in output
        assert "0/0 = nan" in output

    def test_help(self, capture_console: Console) -> None:
        output = _run(capture_console, ["h", "q"])
        assert "(h): prints the help to the console" in output
        assert "(q): quits the program" in output
        assert "(o): execute a operation" in output
        for symbol in ["+", "-", "*", "/", "^", "pi", "e"]:
            assert symbol in output

    def test_unrecognized_action(self, capture_console: Console) -> None:
        output = _run(capture_console, ["x", "q"])
        assert UNRECOGNIZED_ACTION in output
        assert UNRECOGNIZED_ACTION == "Unrecognized action, type h for help"

    def test_commands_are_trimmed(self, capture_console: Console) -> None:
        output = _run(capture_console, ["  o ", "5-2", "q"])
        assert "5-2 = 3" in output

    def test_error_does_not_stop_the_loop(self, capture_console: Console) -> None:
        output = _run(capture_console, ["o", "(1+2", "o", "3++4", "o", "1+1", "q"])
        assert "Missing ')'" in output
        assert "Malformed number" in output
        assert "1+1 = 2" in output

    def test_blank_operation_is_malformed(self, capture_console: Console) -> None:
        output = _run(capture_console, ["o", "", "q"])
        assert "Malformed number" in output

    def test_quit_stops_reading(self, capture_console: Console) -> None:
        output = _run(capture_console, ["q", "o", "1+1"])
        assert "1+1" not in output

    def test_end_of_input_quits(self, capture_console: Console) -> None:
        output = _run(capture_console, ["o", "1+1"])
        assert "1+1 = 2" in output

    def test_end_of_input_at_operation_prompt(self, capture_console: Console) -> None:
        output = _run(capture_console, ["o"])
        assert "Welcome" in output

    def test_uses_config(self, capture_console: Console) -> None:
        config = CompilerConfig(paren_mode=ParenMode.SPLICE)
        output = _run(capture_console, ["o", "2^(0-3)", "q"], config)
        assert "2^(0-3) = 0.125" in output

    def test_handle_returns_false_on_quit(self, capture_console: Console) -> None:
        repl = Repl(console=capture_console, read_line=_reader([], []))
        assert repl.handle("q") is False
        assert repl.handle("h") is True
