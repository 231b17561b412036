"""Core intcalc functionality: tokenizer, parser, evaluator, errors, configuration."""

from . import ir
from .calculator import ErrorKind, LineResult, calculate, evaluate_line
from .config import ReplConfig, load_config
from .errors import (
    CalcError,
    ConfigError,
    ErrorContext,
    EvaluationError,
    ParseError,
)

__all__ = [
    "ir",
    "CalcError",
    "ConfigError",
    "ErrorContext",
    "ErrorKind",
    "EvaluationError",
    "LineResult",
    "ParseError",
    "ReplConfig",
    "calculate",
    "evaluate_line",
    "load_config",
]
