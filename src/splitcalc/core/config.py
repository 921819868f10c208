"""
Compiler configuration models.

splitcalc reads no configuration files or environment variables; the CLI
builds a CompilerConfig from its options and passes it down.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_MAX_DEPTH = 200


class ParenMode(StrEnum):
    """How parenthesized groups are compiled."""

    # Evaluate the group and substitute its value as text
    FOLD = "fold"
    # Compile the group into a subtree of the result
    SPLICE = "splice"


class CompilerConfig(BaseModel):
    """Settings for compile_expr()."""

    paren_mode: ParenMode = Field(
        default=ParenMode.FOLD, description="Parenthesis handling strategy"
    )
    unary_minus: bool = Field(
        default=False,
        description="Treat '-' right after another operator as a sign (3*-2)",
    )
    max_depth: int = Field(
        default=DEFAULT_MAX_DEPTH,
        ge=1,
        le=400,
        description="Maximum recursion depth while compiling; every split and every group counts",
    )

    model_config = ConfigDict(frozen=True)
