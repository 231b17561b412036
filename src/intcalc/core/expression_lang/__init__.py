"""
intcalc expression language.

Tokenizer, parser, and evaluator for integer arithmetic lines.

Usage:
    from intcalc.core.expression_lang import evaluate, lex, parse

    expr = parse(lex("1 + 2 * 3"))
    result = evaluate(expr)
    # result == 7
"""

from intcalc.core.expression_lang.evaluator import evaluate
from intcalc.core.expression_lang.parser import Parser, parse, parse_expr
from intcalc.core.expression_lang.tokenizer import Token, TokenKind, lex, tokenize
from intcalc.core.ir.expressions import render

__all__ = [
    "Parser",
    "Token",
    "TokenKind",
    "evaluate",
    "lex",
    "parse",
    "parse_expr",
    "render",
    "tokenize",
]
