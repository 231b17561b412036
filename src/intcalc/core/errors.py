"""
Error types for intcalc tokenizing, parsing, and evaluation.

The lexer never raises: unrecognised characters are dropped. Only the
parser and the evaluator fail, each with its own error kind.
"""

from dataclasses import dataclass
from typing import Optional


class CalcError(Exception):
    """Base exception for all intcalc errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.message}\n{self.context.format()}"
        return self.message


class ParseError(CalcError):
    """
    Raised when a token sequence cannot be parsed into an expression.

    Examples:
    - Empty token sequence
    - Unexpected token in operand position
    - Mismatched parenthesis
    - Negation applied to anything but an integer literal
    - Tokens left over after a complete expression
    """

    pass


class EvaluationError(CalcError):
    """
    Raised when a well-formed expression cannot be reduced to an integer.

    Examples:
    - Division by zero
    - Result outside the signed 64-bit range (including negating the minimum)
    """

    pass


class ConfigError(CalcError):
    """Raised when an intcalc.toml file cannot be read."""

    pass


@dataclass
class ErrorContext:
    """
    Location of an error within a single input line.

    Attributes:
        column: Column number (1-indexed)
        source: The input line the error refers to
    """

    column: int
    source: str

    def format(self) -> str:
        """
        Format the source line with a marker under the error column.

        Returns:
            Two lines: the source and a caret marker, e.g.
            "  (1 + 2" / "        ^"
        """
        prefix = "  "
        marker_pos = len(prefix) + self.column - 1
        return f"{prefix}{self.source}\n{' ' * marker_pos}^"


def make_parse_error(message: str, pos: int | None = None, source: str | None = None) -> ParseError:
    """
    Helper to create a ParseError with optional context.

    Args:
        message: Error description
        pos: 0-based offset of the offending token in the source line
        source: The source line

    Returns:
        ParseError with context attached when both location and source are known
    """
    if pos is not None and source is not None:
        return ParseError(message, ErrorContext(column=pos + 1, source=source))
    return ParseError(message)
