"""Shared pytest fixtures for splitcalc tests."""

import io

import pytest
from rich.console import Console

from splitcalc.core.config import CompilerConfig, ParenMode


@pytest.fixture
def fold_config() -> CompilerConfig:
    """Default settings: parentheses folded to numbers."""
    return CompilerConfig()


@pytest.fixture
def splice_config() -> CompilerConfig:
    """Parentheses kept as subtrees."""
    return CompilerConfig(paren_mode=ParenMode.SPLICE)


@pytest.fixture
def unary_config() -> CompilerConfig:
    """Fold mode with '-' after an operator read as a sign."""
    return CompilerConfig(unary_minus=True)


@pytest.fixture
def capture_console() -> Console:
    """A plain-text console writing into a string buffer."""
    return Console(file=io.StringIO(), width=120, color_system=None, force_terminal=False)
