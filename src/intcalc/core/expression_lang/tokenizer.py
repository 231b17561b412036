"""
Tokenizer for intcalc expressions.

Converts an input line into a sequence of typed tokens. Tokenizing never
fails: whitespace and any character outside the recognised set are
skipped silently.
"""

from __future__ import annotations

from enum import StrEnum, auto


class TokenKind(StrEnum):
    """Token types for the expression language."""

    # Literals
    INT = auto()

    # Operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()

    # Punctuation
    LPAREN = auto()
    RPAREN = auto()

    # End of input
    EOF = auto()


class Token:
    """A single token from the expression tokenizer.

    ``value`` is the source text of the token (the digit run for INT,
    empty for EOF). ``pos`` is the 0-based offset in the source line, or
    None for tokens built by hand. Equality ignores ``pos``.
    """

    __slots__ = ("kind", "value", "pos")

    def __init__(self, kind: TokenKind, value: str, pos: int | None = None) -> None:
        self.kind = kind
        self.value = value
        self.pos = pos

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return self.kind == other.kind and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.kind, self.value))

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.value!r}, pos={self.pos})"


_SINGLE_CHAR: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}

# ASCII only; str.isdigit() also accepts superscripts and other scripts
_DIGITS = frozenset("0123456789")


def lex(source: str) -> list[Token]:
    """Tokenize an input line into a list of tokens ending with EOF."""
    tokens: list[Token] = []
    i = 0
    n = len(source)

    while i < n:
        c = source[i]

        # Integer literal: consume the whole digit run
        if c in _DIGITS:
            start = i
            while i < n and source[i] in _DIGITS:
                i += 1
            tokens.append(Token(TokenKind.INT, source[start:i], start))
            continue

        kind = _SINGLE_CHAR.get(c)
        if kind is not None:
            tokens.append(Token(kind, c, i))

        # Whitespace and unknown characters produce nothing
        i += 1

    tokens.append(Token(TokenKind.EOF, "", n))
    return tokens


tokenize = lex
