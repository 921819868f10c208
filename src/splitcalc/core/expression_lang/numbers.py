"""
Leaf recognition for splitcalc: named constants and decimal literals.
"""

from __future__ import annotations

import math
import re

from splitcalc.core.errors import MalformedNumberError

PI = 3.14159265358979323846
E = 2.71828182845904523536

# Case-sensitive; no signed forms ("-pi" is not a constant)
CONSTANTS: dict[str, float] = {
    "pi": PI,
    "e": E,
}

# Signed decimal with optional fraction and exponent: 12, -3.5, .5, 1., 2e-3
_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
# Text that format_number() writes for folded non-finite values
_SPECIAL_RE = re.compile(r"[+-]?(?:inf|nan)")


def parse_number(token: str) -> float:
    """Turn a leaf string into its float value.

    Raises:
        MalformedNumberError: If the token is not a constant or a number.
    """
    if token in CONSTANTS:
        return CONSTANTS[token]
    if _DECIMAL_RE.fullmatch(token) or _SPECIAL_RE.fullmatch(token):
        return float(token)
    raise MalformedNumberError("Malformed number", token)


def format_number(value: float) -> str:
    """Text substituted for a folded parenthesized group."""
    return repr(value)


def format_result(value: float) -> str:
    """Render an evaluated result for display: 14, 0.5, inf, nan."""
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)
