"""
intcalc - an interactive integer arithmetic evaluator.

Reads a line such as ``(1 + 2) * -3`` and evaluates it with the usual
precedence rules using signed 64-bit integers.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version

from .core import ir
from .core.calculator import calculate, evaluate_line
from .core.errors import CalcError, EvaluationError, ParseError
from .core.expression_lang import evaluate, lex, parse, render

try:
    __version__ = _metadata_version("intcalc")
except PackageNotFoundError:
    # Running from a source checkout without an install
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "ir",
    "CalcError",
    "EvaluationError",
    "ParseError",
    "calculate",
    "evaluate",
    "evaluate_line",
    "lex",
    "parse",
    "render",
]
