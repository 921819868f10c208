"""
Error types for splitcalc expression compiling.
"""


class CalcError(Exception):
    """Base exception for all splitcalc errors."""

    def __init__(self, message: str, expression: str | None = None):
        self.message = message
        self.expression = expression
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with the offending text if available."""
        if self.expression is not None:
            return f"{self.message}: {self.expression!r}"
        return self.message


class MalformedNumberError(CalcError):
    """
    Raised when a leaf is neither a known constant nor a decimal number.

    Examples:
    - Empty operand, as in ``3++4`` or ``2*``
    - Implicit multiplication, as in ``2pi``
    - Unknown names, as in ``PI`` or ``x``
    """

    pass


class UnbalancedParenthesesError(CalcError):
    """
    Raised when parentheses do not pair up.

    Examples:
    - ``(1+2`` never closes
    - ``1+2)`` closes a group that was never opened
    """

    pass


class ExpressionTooDeepError(CalcError):
    """Raised when compiling recurses deeper than the configured bound."""

    def __init__(self, max_depth: int, expression: str | None = None):
        self.max_depth = max_depth
        super().__init__(f"Expression nests deeper than {max_depth} levels", expression)
