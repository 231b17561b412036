"""
Line-level entry points: text in, integer (or tagged failure) out.

``calculate`` raises the failing stage's error; ``evaluate_line`` returns a
``LineResult`` instead, which is what the shell consumes.
"""

from __future__ import annotations

import logging
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from intcalc.core.errors import EvaluationError, ParseError
from intcalc.core.expression_lang.evaluator import evaluate
from intcalc.core.expression_lang.parser import parse
from intcalc.core.expression_lang.tokenizer import lex
from intcalc.core.ir.expressions import Expr, render

logger = logging.getLogger(__name__)


class ErrorKind(StrEnum):
    """Which stage rejected a line."""

    PARSE = "parse"
    EVALUATION = "evaluation"


class LineResult(BaseModel):
    """Outcome of evaluating one line."""

    value: int | None = Field(default=None, description="Result when evaluation succeeded")
    error_kind: ErrorKind | None = Field(default=None, description="Failing stage")
    message: str | None = Field(default=None, description="Human-readable error message")
    rendered: str | None = Field(default=None, description="Rendered AST, when parsing succeeded")

    model_config = ConfigDict(frozen=True)

    @property
    def ok(self) -> bool:
        return self.error_kind is None


def parse_line(text: str) -> Expr:
    """Tokenize and parse one line."""
    source = text.rstrip("\r\n")
    tokens = lex(source)
    logger.debug("Lexed %d tokens from %r", len(tokens), source)
    return parse(tokens, source)


def calculate(text: str) -> int:
    """Evaluate one line of text.

    Raises:
        ParseError: If the line is not a single well-formed expression.
        EvaluationError: If the expression cannot be evaluated.
    """
    expr = parse_line(text)
    logger.debug("Parsed: %s", render(expr))
    return evaluate(expr)


def evaluate_line(text: str) -> LineResult:
    """Evaluate one line, reporting failure as a tagged result."""
    try:
        expr = parse_line(text)
    except ParseError as e:
        logger.debug("Parse error: %s", e.message)
        return LineResult(error_kind=ErrorKind.PARSE, message=e.message)

    rendered = render(expr)
    try:
        value = evaluate(expr)
    except EvaluationError as e:
        logger.debug("Evaluation error in %s: %s", rendered, e.message)
        return LineResult(error_kind=ErrorKind.EVALUATION, message=e.message, rendered=rendered)

    return LineResult(value=value, rendered=rendered)
