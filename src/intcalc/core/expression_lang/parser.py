"""
Precedence-climbing parser for intcalc expressions.

Grammar (precedence low to high):
    expr     → primary (binop primary)*
    binop    → "+" | "-"            (precedence 10)
             | "*" | "/"            (precedence 20)
    primary  → INT
             | "-" INT
             | "(" expr ")"

Every other token has precedence -1, which is what stops a binary chain.
Negation only applies to an integer literal: ``-(1 + 2)`` and ``--3`` are
rejected.
"""

from __future__ import annotations

from collections.abc import Sequence

from intcalc.core.errors import ParseError, make_parse_error
from intcalc.core.expression_lang.tokenizer import Token, TokenKind, lex
from intcalc.core.ir.expressions import (
    Add,
    Divide,
    Expr,
    Literal,
    Multiply,
    Negate,
    Subtract,
    in_int64_range,
)

_PRECEDENCE: dict[TokenKind, int] = {
    TokenKind.PLUS: 10,
    TokenKind.MINUS: 10,
    TokenKind.STAR: 20,
    TokenKind.SLASH: 20,
}

_BINARY_NODES: dict[TokenKind, type[Add | Subtract | Multiply | Divide]] = {
    TokenKind.PLUS: Add,
    TokenKind.MINUS: Subtract,
    TokenKind.STAR: Multiply,
    TokenKind.SLASH: Divide,
}

# Longest digit run (leading zeros stripped) that can still fit in int64
_MAX_INT64_DIGITS = 19

# Parenthesised groups recurse; deeper input is rejected instead of
# exhausting the interpreter stack
MAX_NESTING_DEPTH = 100


def precedence(tok: Token) -> int:
    """Binding strength of a token; -1 for anything that is not a binary operator."""
    return _PRECEDENCE.get(tok.kind, -1)


class Parser:
    """Parses one token sequence into an expression tree.

    Holds the tokens and a cursor. The cursor only moves forward.
    """

    def __init__(self, tokens: Sequence[Token], source: str | None = None) -> None:
        self.tokens = tokens
        self.pos = 0
        self.depth = 0
        # Original line, used only to attach a caret to error messages
        self.source = source

    def parse(self) -> Expr:
        """Parse the whole token sequence.

        Raises:
            ParseError: On any syntax error, or if tokens remain after a
                complete expression.
        """
        if not self.tokens:
            raise ParseError("no tokens")

        expr = self.parse_expr()

        trailing = self.get_token(self.pos)
        if trailing.kind == TokenKind.RPAREN:
            raise self._error("mismatched parenthesis", trailing)
        if trailing.kind != TokenKind.EOF:
            raise self._error("unexpected token after expression", trailing)

        return expr

    # -- Cursor --

    def get_token(self, index: int) -> Token:
        if 0 <= index < len(self.tokens):
            return self.tokens[index]
        raise ParseError("no more tokens")

    def eat_token(self) -> None:
        self.pos += 1

    # -- Grammar rules --

    def parse_expr(self) -> Expr:
        """primary followed by a binary chain starting at precedence 0."""
        left = self.parse_primary()
        return self.parse_binary_chain(0, left)

    def parse_primary(self) -> Expr:
        """INT | '-' INT | '(' expr ')'"""
        tok = self.get_token(self.pos)

        if tok.kind == TokenKind.INT:
            self.eat_token()
            return Literal(value=self._int_value(tok))

        if tok.kind == TokenKind.LPAREN:
            return self._parse_paren()

        if tok.kind == TokenKind.MINUS:
            return self._parse_negate()

        raise self._error("unexpected token", tok)

    def _parse_paren(self) -> Expr:
        tok = self.get_token(self.pos)
        if self.depth >= MAX_NESTING_DEPTH:
            raise self._error("expression too deeply nested", tok)
        self.eat_token()
        self.depth += 1
        expr = self.parse_expr()
        self.depth -= 1
        tok = self.get_token(self.pos)
        if tok.kind != TokenKind.RPAREN:
            raise self._error("mismatched parenthesis", tok)
        self.eat_token()
        return expr

    def _parse_negate(self) -> Negate:
        self.eat_token()
        tok = self.get_token(self.pos)
        if tok.kind != TokenKind.INT:
            raise self._error("unexpected negation operand", tok)
        self.eat_token()
        return Negate(operand=Literal(value=self._int_value(tok)))

    def parse_binary_chain(self, min_precedence: int, left: Expr) -> Expr:
        """Fold operators of at least ``min_precedence`` into ``left``.

        When the operator after the right-hand operand binds tighter than
        the current one, that operand is first extended by a recursive
        chain at ``current + 1``. Equal precedence falls through to the
        loop, which keeps each tier left-associative.
        """
        while True:
            op = self.get_token(self.pos)
            op_prec = precedence(op)
            if op_prec < min_precedence:
                return left

            self.eat_token()
            right = self.parse_primary()

            next_prec = precedence(self.get_token(self.pos))
            if next_prec > op_prec:
                right = self.parse_binary_chain(op_prec + 1, right)

            left = _BINARY_NODES[op.kind](left=left, right=right)

    # -- Helpers --

    def _int_value(self, tok: Token) -> int:
        digits = tok.value.lstrip("0") or "0"
        if len(digits) <= _MAX_INT64_DIGITS:
            value = int(digits)
            if in_int64_range(value):
                return value
        raise self._error("integer literal out of range", tok)

    def _error(self, message: str, tok: Token) -> ParseError:
        return make_parse_error(message, tok.pos, self.source)


def parse(tokens: Sequence[Token], source: str | None = None) -> Expr:
    """Parse a token sequence into an AST.

    Args:
        tokens: Tokens as produced by ``lex`` (ending with EOF).
        source: Optional source line, used to point at errors.

    Returns:
        Parsed expression AST.

    Raises:
        ParseError: If the tokens do not form exactly one expression.
    """
    return Parser(tokens, source).parse()


def parse_expr(source: str) -> Expr:
    """Tokenize and parse an expression string."""
    return parse(lex(source), source)
