"""
xcalc - command-line arithmetic expression evaluator.

Scans, parses (precedence climbing), and evaluates a single arithmetic
expression.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version

from .core import ir
from .core.errors import CalcError, EvalError, LexError, ParseError
from .core.expression_lang import calculate, evaluate, parse_expr

try:
    __version__ = _metadata_version("xcalc")
except PackageNotFoundError:
    # Running from a source checkout without an install
    __version__ = "0.0.0.dev0"

__all__ = [
    "__version__",
    "ir",
    "CalcError",
    "EvalError",
    "LexError",
    "ParseError",
    "calculate",
    "evaluate",
    "parse_expr",
]
